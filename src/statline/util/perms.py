from __future__ import annotations

_BIT_CHARS: tuple[str, str] = ("-", "r")

# (bit, 0-based position, mark) applied after the first pass.
_WRITE_EXEC_MARKS: tuple[tuple[int, int, str], ...] = (
    (0o200, 1, "w"),
    (0o100, 2, "x"),
    (0o020, 4, "w"),
    (0o010, 5, "x"),
    (0o002, 7, "w"),
    (0o001, 8, "x"),
)

WRITE_BITS: int = 0o222


def format_permissions(mode: int) -> str:
    """
    Render the low 9 permission bits of ``mode`` as ``rwxrwxrwx``.

    Every set bit first becomes ``r`` and every clear bit ``-``; the write and
    execute positions are then overwritten with ``w``/``x`` where their bit is
    set. Bits above 0o777 are ignored.
    """
    chars = [_BIT_CHARS[(mode >> i) & 1] for i in range(8, -1, -1)]
    for bit, pos, mark in _WRITE_EXEC_MARKS:
        if mode & bit:
            chars[pos] = mark
    return "".join(chars)


def is_readonly(mode: int) -> bool:
    """Return True if no write bit (owner, group or other) is set."""
    return mode & WRITE_BITS == 0
