"""Error types raised across the lister, workflow, and execution layers.

Every error here is terminal for the session: the workflow routes it to the
result screen instead of letting it escape the event loop.
"""

from __future__ import annotations

from pathlib import Path


class LazyFileOpsError(Exception):
    """Base class for all lazyfileops failures."""


class ListingError(LazyFileOpsError):
    """A directory could not be listed (missing, unreadable, not a directory)."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot list {self.path}: {reason}")


class ExecutionError(LazyFileOpsError):
    """A file operation could not be built or launched."""


__all__ = [
    "LazyFileOpsError",
    "ListingError",
    "ExecutionError",
]
