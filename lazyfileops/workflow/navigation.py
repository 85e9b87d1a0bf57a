"""Directory navigation state: current path, sorted snapshot, and cursor.

All operations return new ``NavigationState`` values. Listing failures
propagate as ``ListingError`` so the state machine can end the session.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from ..file_listing import DirectoryEntry, absolute_path

Lister = Callable[[Path], tuple[DirectoryEntry, ...]]


@dataclass(frozen=True)
class NavigationState:
    """Most recent successful listing of ``current_path`` plus cursor.

    ``cursor`` stays 0 when ``entries`` is empty.
    """

    current_path: Path
    entries: tuple[DirectoryEntry, ...] = ()
    cursor: int = 0


def load_navigation(path: Path | str, lister: Lister) -> NavigationState:
    """List ``path`` and return a fresh state with the cursor on the first row."""
    target = absolute_path(path)
    entries = tuple(lister(target))
    return NavigationState(current_path=target, entries=entries, cursor=0)


def current_entry(state: NavigationState) -> DirectoryEntry | None:
    if not state.entries:
        return None
    return state.entries[state.cursor]


def entry_path(state: NavigationState, name: str) -> Path:
    return state.current_path / name


def find_entry(state: NavigationState, name: str) -> DirectoryEntry | None:
    for entry in state.entries:
        if entry.name == name:
            return entry
    return None


def descend(state: NavigationState, child_name: str, lister: Lister) -> NavigationState:
    """Enter child directory ``child_name``; non-directories leave ``state`` unchanged."""
    entry = find_entry(state, child_name)
    if entry is None or not entry.is_dir:
        return state
    return load_navigation(entry_path(state, child_name), lister)


def ascend(state: NavigationState, lister: Lister) -> NavigationState:
    """Move to the parent directory; a no-op at the filesystem root."""
    parent = state.current_path.parent
    if parent == state.current_path:
        return state
    return load_navigation(parent, lister)


def move_cursor(state: NavigationState, delta: int) -> NavigationState:
    """Shift the cursor by ``delta`` rows, clamped to the listing."""
    if not state.entries:
        return state
    cursor = max(0, min(len(state.entries) - 1, state.cursor + delta))
    if cursor == state.cursor:
        return state
    return replace(state, cursor=cursor)


__all__ = [
    "Lister",
    "NavigationState",
    "ascend",
    "current_entry",
    "descend",
    "entry_path",
    "find_entry",
    "load_navigation",
    "move_cursor",
]
