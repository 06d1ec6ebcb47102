from __future__ import annotations

from datetime import datetime, timedelta, timezone

TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M"

_NS_PER_SECOND: int = 10**9


def from_epoch_ns(ns: int) -> datetime:
    """
    Convert POSIX epoch nanoseconds into a tz-aware UTC datetime.

    Sub-microsecond precision is truncated, never rounded, so the result
    never moves past the next second or minute boundary.

    Raises ValueError if the instant is outside the range datetime supports.
    """
    seconds, rem = divmod(ns, _NS_PER_SECOND)
    try:
        base = datetime.fromtimestamp(seconds, tz=timezone.utc)
        return base + timedelta(microseconds=rem // 1000)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"timestamp out of range: {ns!r} ns") from exc


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def to_local(dt: datetime) -> datetime:
    """
    Convert a tz-aware datetime to the process's current local time zone.

    Raises ValueError if the local offset cannot be determined for the instant.
    """
    dt = normalize_dt(dt)
    try:
        return dt.astimezone()
    except (OverflowError, OSError) as exc:
        raise ValueError("cannot determine local time zone offset") from exc


def format_local(dt: datetime) -> str:
    """Render a tz-aware datetime in local time as ``YYYY-MM-DD HH:MM``."""
    return to_local(dt).strftime(TIMESTAMP_FORMAT)
