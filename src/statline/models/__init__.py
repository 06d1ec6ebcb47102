"""Public model exports for statline."""

from __future__ import annotations

from .file_kind import FileKind, classify_mode
from .file_record import FileRecord

__all__ = [
    "FileKind",
    "FileRecord",
    "classify_mode",
]
