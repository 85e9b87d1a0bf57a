"""Chosen-state per absolute path, surviving directory navigation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path


class SelectionSet(Mapping[Path, bool]):
    """Immutable ``Path -> bool`` mapping; every update returns a new set."""

    __slots__ = ("_chosen",)

    def __init__(self, chosen: Mapping[Path, bool] | None = None) -> None:
        self._chosen: dict[Path, bool] = dict(chosen or {})

    def __getitem__(self, path: Path) -> bool:
        return self._chosen[path]

    def __iter__(self) -> Iterator[Path]:
        return iter(self._chosen)

    def __len__(self) -> int:
        return len(self._chosen)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectionSet):
            return self._chosen == other._chosen
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._chosen.items()))

    def __repr__(self) -> str:
        return f"SelectionSet({self._chosen!r})"


def toggle(selection: SelectionSet, path: Path) -> SelectionSet:
    """Flip ``path``; a path never seen before becomes selected."""
    chosen = dict(selection)
    chosen[path] = not chosen.get(path, False)
    return SelectionSet(chosen)


def is_selected(selection: SelectionSet, path: Path) -> bool:
    return selection.get(path, False)


def selected_paths(selection: SelectionSet) -> tuple[Path, ...]:
    """Return currently chosen paths in sorted order."""
    return tuple(sorted(path for path, chosen in selection.items() if chosen))


__all__ = [
    "SelectionSet",
    "is_selected",
    "selected_paths",
    "toggle",
]
