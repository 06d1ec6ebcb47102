"""Exception hierarchy for statline."""

from __future__ import annotations

from typing import Any, Optional


class StatlineError(Exception):
    """
    Base exception for statline.

    Attributes:
        details: Optional structured information (e.g., the offending path).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class PathResolutionError(StatlineError):
    """Raised when a path does not exist or its metadata cannot be read."""


class ModifiedTimeError(StatlineError):
    """Raised when the modification time is missing or unrepresentable."""


class TimestampFormatError(StatlineError):
    """Raised when the local offset cannot be resolved or rendering fails."""
