"""Terminal styling for statline output (presentation only)."""

from __future__ import annotations

from typing import Any

import click

from statline.models import FileKind

KIND_STYLES: dict[FileKind, dict[str, Any]] = {
    FileKind.DIRECTORY: {"fg": "blue"},
    FileKind.SYMLINK: {"fg": "cyan"},
    FileKind.SOCKET: {"fg": "white"},
    FileKind.BLOCK_DEVICE: {},
    FileKind.FILE: {"fg": "yellow"},
    FileKind.UNKNOWN: {"bg": "black"},
}

SIZE_STYLE: dict[str, Any] = {"fg": "blue", "bold": True}
NAME_STYLE: dict[str, Any] = {"bold": True}
READONLY_STYLE: dict[str, Any] = {"fg": "red", "bold": True}
WRITABLE_STYLE: dict[str, Any] = {"fg": "white"}


def paint(text: str, enabled: bool, **styles: Any) -> str:
    """Return ``text`` wrapped in ANSI styles when enabled, else unchanged."""
    if not enabled or not styles:
        return text
    return click.style(text, **styles)


def kind_label(kind: FileKind, enabled: bool) -> str:
    return paint(kind.label, enabled, **KIND_STYLES[kind])


def readonly_marker(readonly: bool, enabled: bool) -> str:
    if readonly:
        return paint("READONLY", enabled, **READONLY_STYLE)
    return paint("-", enabled, **WRITABLE_STYLE)
