"""Public error exports for statline."""

from __future__ import annotations

from .exceptions import (
    ModifiedTimeError,
    PathResolutionError,
    StatlineError,
    TimestampFormatError,
)

__all__ = [
    "StatlineError",
    "PathResolutionError",
    "ModifiedTimeError",
    "TimestampFormatError",
]
