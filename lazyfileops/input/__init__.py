"""Input-layer public API for key decoding and key-to-event bindings.

Exports are split between low-level terminal decoding (`read_key`) and the
per-screen bindings used by the runtime loop.
"""

from .reader import EOF_TOKEN, ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_TOKEN, _PENDING_BYTES, read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import SCREEN_KEYMAPS, event_for_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "EOF_TOKEN",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_TOKEN",
    "KeyComboBinding",
    "KeyComboRegistry",
    "SCREEN_KEYMAPS",
    "event_for_key",
]
