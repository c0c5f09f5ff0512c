"""Resolve the lines to box from piped stdin or positional arguments."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

logger = logging.getLogger(__name__)


class NoInputError(Exception):
    """Neither piped data nor arguments were supplied."""


class InputReadError(Exception):
    """Reading from stdin failed."""


def split_arguments(args: Iterable[str]) -> list[str]:
    """Turn positional arguments into lines.

    Empty arguments are skipped and a literal ``\\n`` (backslash, n) inside
    an argument starts a new line.
    """
    lines: list[str] = []
    for arg in args:
        if not arg:
            continue
        lines.extend(arg.split("\\n"))
    return lines


def read_lines(stream: TextIO) -> list[str]:
    """Read all lines from *stream* without their line terminators."""
    try:
        return [line.rstrip("\r\n") for line in stream]
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"failed to read from stdin: {e}") from e


def _is_interactive(stream: TextIO | None) -> bool:
    if stream is None:
        return True
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return True


def resolve_text_input(args: Iterable[str], stdin: TextIO | None) -> list[str]:
    """Return the lines to box, preferring piped stdin over *args*.

    Stdin is read whenever it is not an interactive terminal, even if it is
    empty. Otherwise the arguments are used and :class:`NoInputError` is
    raised if they yield no lines.
    """
    if not _is_interactive(stdin):
        logger.debug("Reading input from stdin")
        return read_lines(stdin)

    lines = split_arguments(args)
    if not lines:
        raise NoInputError(
            "no input provided: please provide text via stdin or command line arguments"
        )
    logger.debug("Using %d line(s) from arguments", len(lines))
    return lines

