"""Color-name parsing and ANSI styling.

Colors are represented as *styles*: callables that wrap text in the
matching escape sequences. ``None`` stands for "no color".
"""

from __future__ import annotations

from functools import partial
from typing import Callable

import click

Style = Callable[[str], str]

# Names click.style understands, plus ``gray`` as an alias.
COLOR_NAMES: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "white",
    "gray": "bright_black",
    "bright_black": "bright_black",
    "bright_red": "bright_red",
    "bright_green": "bright_green",
    "bright_yellow": "bright_yellow",
    "bright_blue": "bright_blue",
    "bright_magenta": "bright_magenta",
    "bright_cyan": "bright_cyan",
    "bright_white": "bright_white",
}


def indexed_style(index: int) -> Style:
    """Foreground style for an entry of the 256-color palette."""
    return partial(click.style, fg=index % 256)


def parse_color(name: str | None) -> Style | None:
    """Turn a color name or a 0-255 palette index into a style.

    Unrecognized names (and empty ones) yield ``None`` so text passes
    through uncolored.
    """
    if not name:
        return None
    key = name.strip().lower()
    if key in COLOR_NAMES:
        return partial(click.style, fg=COLOR_NAMES[key])
    if key.isdigit():
        index = int(key)
        if index <= 255:
            return indexed_style(index)
    return None


def apply_style(text: str, style: Style | None) -> str:
    """Apply *style* to *text*, or return *text* unchanged when unset."""
    if style is None:
        return text
    return style(text)
