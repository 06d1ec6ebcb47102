"""statline command line interface."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

import click

from statline import __version__
from statline.errors import StatlineError
from statline.lister import Lister, ListerOptions

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class InputSource(str, Enum):
    """Where the path list comes from; decided once at startup."""

    STDIN_LINES = "stdin-lines"
    ARGUMENTS = "arguments"


def detect_input_source(stdin: TextIO) -> InputSource:
    if stdin.isatty():
        return InputSource.ARGUMENTS
    return InputSource.STDIN_LINES


def strip_line_terminator(line: str) -> str:
    """Remove one trailing ``\\n`` or ``\\r\\n``; anything else is kept."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_stdin_paths(stdin: TextIO) -> list[str]:
    """Read one path per line; only the line terminator is stripped."""
    return [strip_line_terminator(line) for line in stdin]


def resolve_paths(
    source: InputSource,
    args: tuple[str, ...],
    stdin: TextIO,
) -> list[str]:
    if source is InputSource.STDIN_LINES:
        if args:
            logger.debug("stdin is piped; ignoring %d argument(s)", len(args))
        return read_stdin_paths(stdin)
    return list(args)


def configure_logging(verbose: bool) -> None:
    """Attach a stderr handler to the package logger."""
    pkg_logger = logging.getLogger("statline")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force styled output on or off (default: only on a terminal).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.version_option(__version__, prog_name="statline")
def main(paths: tuple[str, ...], color: Optional[bool], verbose: bool) -> None:
    """Print type, mode, size, mtime and read-only flag for each PATH.

    When standard input is piped, paths are read from it one per line and
    PATH arguments are ignored.

    Use ``--`` to end option parsing for paths that start with a dash
    (``statline -- -v``).
    """
    configure_logging(verbose)

    stdin = sys.stdin
    stdout = sys.stdout

    source = detect_input_source(stdin)
    path_list = resolve_paths(source, paths, stdin)
    logger.debug("input source: %s, %d path(s)", source.value, len(path_list))

    if color is None:
        color = stdout.isatty()

    lister = Lister(stdout, ListerOptions(color=color))
    try:
        lister.run(path_list)
    except StatlineError as exc:
        logger.debug("aborting run: %s", exc, exc_info=exc.cause)
        raise click.ClickException(str(exc)) from exc
