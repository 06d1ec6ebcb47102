"""File type classification for statline."""

from __future__ import annotations

import stat
from enum import Enum


class FileKind(str, Enum):
    """Filesystem entry types, valued by their display label."""

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SOCKET = "socket"
    BLOCK_DEVICE = "disk"
    FILE = "file"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value


# Checked in order; the first matching predicate wins.
_KIND_CHECKS = (
    (stat.S_ISDIR, FileKind.DIRECTORY),
    (stat.S_ISLNK, FileKind.SYMLINK),
    (stat.S_ISSOCK, FileKind.SOCKET),
    (stat.S_ISBLK, FileKind.BLOCK_DEVICE),
    (stat.S_ISREG, FileKind.FILE),
)


def classify_mode(mode: int) -> FileKind:
    """Return the FileKind for a raw ``st_mode`` value."""
    for check, kind in _KIND_CHECKS:
        if check(mode):
            return kind
    return FileKind.UNKNOWN
