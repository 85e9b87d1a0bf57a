"""Per-screen key bindings translating key tokens into workflow events."""

from __future__ import annotations

from ..workflow.types import EventKind, Screen
from .key_registry import KeyComboBinding, KeyComboRegistry


def _fold_letters(key: str) -> str:
    """Treat single letters case-insensitively; named tokens stay as-is."""
    if len(key) == 1:
        return key.lower()
    return key


QUIT_BINDING = KeyComboBinding(("q", "ESC", "CTRL_C"), EventKind.QUIT)
CURSOR_BINDINGS = (
    KeyComboBinding(("UP", "k"), EventKind.UP),
    KeyComboBinding(("DOWN", "j"), EventKind.DOWN),
)
NAVIGATION_BINDINGS = (
    *CURSOR_BINDINGS,
    KeyComboBinding(("RIGHT", "ENTER", "l"), EventKind.OPEN),
    KeyComboBinding(("LEFT", "BACKSPACE", "h"), EventKind.BACK),
    KeyComboBinding(("TAB",), EventKind.ADVANCE),
    QUIT_BINDING,
)


def _registry(*bindings: KeyComboBinding) -> KeyComboRegistry:
    return KeyComboRegistry(normalize=_fold_letters).register_bindings(*bindings)


SCREEN_KEYMAPS: dict[Screen, KeyComboRegistry] = {
    Screen.CHOOSE_ACTION: _registry(
        *CURSOR_BINDINGS,
        KeyComboBinding(("ENTER",), EventKind.CONFIRM),
        QUIT_BINDING,
    ),
    Screen.CHOOSE_SOURCES: _registry(
        *NAVIGATION_BINDINGS,
        KeyComboBinding((" ",), EventKind.TOGGLE),
    ),
    Screen.CHOOSE_DESTINATION: _registry(*NAVIGATION_BINDINGS),
    Screen.CONFIRM_REMOVAL: _registry(
        KeyComboBinding(("ENTER", "y"), EventKind.CONFIRM),
        KeyComboBinding(("n",), EventKind.QUIT),
        QUIT_BINDING,
    ),
}


def event_for_key(screen: Screen, key: str) -> EventKind | None:
    """Return the event ``key`` means on ``screen``; any key ends the result screen."""
    if not key:
        return None
    if screen is Screen.SHOW_RESULT:
        return EventKind.QUIT
    keymap = SCREEN_KEYMAPS.get(screen)
    if keymap is None:
        return None
    return keymap.lookup(key)


__all__ = [
    "SCREEN_KEYMAPS",
    "event_for_key",
]
