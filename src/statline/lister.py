"""Lister: stat each path and print one descriptive line for it."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from statline.errors import ModifiedTimeError, PathResolutionError, TimestampFormatError
from statline.models import FileRecord, classify_mode
from statline.style import NAME_STYLE, SIZE_STYLE, kind_label, paint, readonly_marker
from statline.util.perms import format_permissions, is_readonly
from statline.util.size import format_size
from statline.util.time import format_local, from_epoch_ns

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ListerOptions:
    """Run-time options resolved once before any path is processed."""

    color: bool = False


def read_record(path: str) -> FileRecord:
    """
    Query filesystem metadata for ``path`` and build a FileRecord.

    Symlinks are followed, so a record describes the link target.

    Raises:
        PathResolutionError: path missing or metadata unreadable.
        ModifiedTimeError: modification time not representable.
    """
    logger.debug("stat %r", path)
    try:
        st = os.stat(path)
    except (OSError, ValueError) as exc:
        raise PathResolutionError(
            f"cannot access {path!r}: {getattr(exc, 'strerror', None) or exc}",
            details={"path": path},
            cause=exc,
        ) from exc

    try:
        modified = from_epoch_ns(st.st_mtime_ns)
    except ValueError as exc:
        raise ModifiedTimeError(
            f"cannot read modification time of {path!r}",
            details={"path": path, "st_mtime_ns": st.st_mtime_ns},
            cause=exc,
        ) from exc

    return FileRecord(
        name=path,
        size=st.st_size,
        kind=classify_mode(st.st_mode),
        mode=st.st_mode,
        readonly=is_readonly(st.st_mode),
        modified=modified,
    )


def format_record(record: FileRecord, color: bool = False) -> str:
    """
    Build the display line for a record.

    Shape: <type> <mode-octal> (<mode-symbolic>) <size> "<timestamp>" <readonly> <name>

    Raises:
        TimestampFormatError: local offset unresolvable or rendering failed.
    """
    try:
        timestamp = format_local(record.modified)
    except (ValueError, TypeError) as exc:
        raise TimestampFormatError(
            f"cannot format modification time of {record.name!r}",
            details={"path": record.name},
            cause=exc,
        ) from exc

    return "{} {:o} ({}) {} \"{}\" {} {}".format(
        kind_label(record.kind, color),
        record.mode,
        format_permissions(record.mode),
        paint(format_size(record.size), color, **SIZE_STYLE),
        timestamp,
        readonly_marker(record.readonly, color),
        paint(record.name, color, **NAME_STYLE),
    )


class Lister:
    """
    Sequential path lister.

    Each path is stat'ed, formatted and written before the next one is
    touched. The first error propagates and ends the run; lines already
    written are left in place.
    """

    def __init__(self, out: TextIO, options: Optional[ListerOptions] = None) -> None:
        self._out = out
        self.options = options or ListerOptions()

    def describe(self, path: str) -> str:
        return format_record(read_record(path), color=self.options.color)

    def run(self, paths: Iterable[str]) -> int:
        """Write one line per path, in order. Returns the number of lines written."""
        count = 0
        for path in paths:
            self._out.write(self.describe(path) + "\n")
            self._out.flush()
            count += 1
        logger.debug("listed %d path(s)", count)
        return count
