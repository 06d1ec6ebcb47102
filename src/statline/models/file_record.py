"""Data model for a listed path."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .file_kind import FileKind


@dataclass(frozen=True, slots=True)
class FileRecord:
    """
    Metadata snapshot of a single input path.

    Notes:
        - name is the path exactly as supplied by the caller.
        - mode is the raw st_mode, file type bits included.
        - modified is a tz-aware UTC datetime.
    """

    name: str
    size: int
    kind: FileKind
    mode: int
    readonly: bool
    modified: datetime
