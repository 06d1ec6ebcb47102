"""statline public API."""

from __future__ import annotations

__version__ = "0.1.0"

from statline.errors import (  # noqa: E402
    ModifiedTimeError,
    PathResolutionError,
    StatlineError,
    TimestampFormatError,
)
from statline.lister import Lister, ListerOptions, format_record, read_record  # noqa: E402
from statline.models import FileKind, FileRecord  # noqa: E402

__all__ = [
    "__version__",
    # Lister
    "Lister",
    "ListerOptions",
    "read_record",
    "format_record",
    # Models
    "FileKind",
    "FileRecord",
    # Errors
    "StatlineError",
    "PathResolutionError",
    "ModifiedTimeError",
    "TimestampFormatError",
]
