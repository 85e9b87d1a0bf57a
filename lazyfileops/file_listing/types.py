"""Domain datatypes for one directory listing snapshot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DirectoryEntry:
    """One immediate child of a listed directory.

    ``size_bytes`` is ``None`` for directories and for files whose size could
    not be read.
    """

    name: str
    is_dir: bool
    size_bytes: int | None = None


__all__ = [
    "DirectoryEntry",
]
