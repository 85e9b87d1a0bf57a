"""Directory listing primitives.

This package contains non-UI listing code:
- the immutable entry datatype
- the filesystem scanner that produces sorted snapshots
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import DirectoryLister, absolute_path, list_directory, safe_file_size

__all__ = [
    "DirectoryEntry",
    "DirectoryLister",
    "absolute_path",
    "list_directory",
    "safe_file_size",
]
