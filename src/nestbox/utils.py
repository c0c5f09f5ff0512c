"""Terminal text utilities: ANSI stripping and display-width measurement.

Every width used for box layout goes through :func:`display_width`. By
default a line is as wide as its number of code points once escape
sequences are removed. With ``wide=True`` it is measured in terminal
columns with ``wcwidth`` instead, so East Asian wide characters take two
columns and combining marks none.
"""

from __future__ import annotations

import re

import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# ANSI escape sequences
# ---------------------------------------------------------------------------

# ESC up to and including the next ASCII letter, e.g. ESC[38;5;196m
_ANSI_RE = re.compile(r"\x1b[^A-Za-z]*[A-Za-z]?")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*.

    A sequence starts at ``ESC`` (U+001B) and ends at the next ASCII letter.
    An unterminated sequence swallows the rest of the string.
    """
    if "\x1b" not in text:
        return text
    return _ANSI_RE.sub("", text)


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------

def _column_width(text: str) -> int:
    width = _wcwidth.wcswidth(text)
    if width >= 0:
        return width
    # wcswidth gives -1 for strings holding control characters.
    return sum(max(_wcwidth.wcwidth(ch), 0) for ch in text)


def display_width(text: str, wide: bool = False) -> int:
    """Return the display width of *text*, ignoring escape sequences.

    Counts code points unless *wide* is set, in which case terminal columns
    are counted (control characters such as tabs are then zero-width).
    """
    stripped = strip_ansi(text)
    if wide:
        return _column_width(stripped)
    return len(stripped)


def max_display_width(lines: list[str], wide: bool = False) -> int:
    """Return the widest display width among *lines* (0 when empty)."""
    return max((display_width(line, wide) for line in lines), default=0)
