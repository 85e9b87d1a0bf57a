"""Filesystem scanning for single-directory listings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import ListingError
from .types import DirectoryEntry

logger = logging.getLogger(__name__)


def absolute_path(path: Path | str) -> Path:
    """Return ``path`` as an absolute, lexically normalized path.

    Symlinks are left alone so ascending from a linked directory returns to
    the directory the user came from.
    """
    return Path(os.path.abspath(os.fspath(path)))


def safe_file_size(entry: os.DirEntry, is_dir: bool) -> int | None:
    """Return size for non-directory entries, otherwise ``None`` or on stat failure."""
    if is_dir:
        return None
    try:
        return int(entry.stat(follow_symlinks=False).st_size)
    except OSError:
        return None


def list_directory(directory: Path | str) -> tuple[DirectoryEntry, ...]:
    """List immediate children of ``directory`` sorted by name.

    Ordering is byte order of the encoded name, directories and files
    interleaved. Hidden entries are included. Raises ``ListingError`` when
    the directory cannot be scanned.
    """
    children: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(
                    DirectoryEntry(
                        name=child.name,
                        is_dir=is_dir,
                        size_bytes=safe_file_size(child, is_dir),
                    )
                )
    except OSError as exc:
        reason = exc.strerror or str(exc)
        logger.warning("listing %s failed: %s", directory, reason)
        raise ListingError(directory, reason) from exc

    children.sort(key=lambda item: os.fsencode(item.name))
    return tuple(children)


class DirectoryLister:
    """Callable lister bound to the real filesystem."""

    def __call__(self, directory: Path) -> tuple[DirectoryEntry, ...]:
        return list_directory(directory)


__all__ = [
    "DirectoryLister",
    "absolute_path",
    "list_directory",
    "safe_file_size",
]
