from __future__ import annotations

DECIMAL_BASE: int = 1000
DECIMAL_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB", "EB")


def format_size(size: int) -> str:
    """
    Format a byte count with decimal (base-1000) units.

    Up to two decimal places are kept and trailing zeros dropped:
      - 999 -> "999 B"
      - 1000000 -> "1 MB"
      - 1234567 -> "1.23 MB"
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    if size < DECIMAL_BASE:
        return f"{size} B"

    value = float(size)
    unit = DECIMAL_UNITS[0]
    for unit in DECIMAL_UNITS[1:]:
        value /= DECIMAL_BASE
        if value < DECIMAL_BASE:
            break

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"
