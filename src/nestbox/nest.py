"""Nested boxes: per-layer attribute resolution and repeated rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, TypeVar

from nestbox.color_theme import ColorTheme
from nestbox.colors import Style, parse_color
from nestbox.glyphs import UNICODE, GlyphSet
from nestbox.render import render_box

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class LayerAttributes:
    """Styling of one nesting level."""

    border_color: Style | None = None
    title: str = ""
    title_color: Style | None = None
    content_color: Style | None = None


def resolve(values: Sequence[T], index: int) -> T | None:
    """Return ``values[index]``, falling back to the first value, else ``None``."""
    if not values:
        return None
    if 0 <= index < len(values):
        return values[index]
    return values[0]


def layer_attributes(
    depth: int,
    border_colors: Sequence[str] = (),
    title_colors: Sequence[str] = (),
    titles: Sequence[str] = (),
    content_color: Style | None = None,
    color_theme: ColorTheme | None = None,
) -> list[LayerAttributes]:
    """Resolve the attributes of every layer, outermost (index 0) first.

    A color theme, when given, supplies every border color and is queried in
    layer order. Only the innermost layer gets *content_color*.
    """
    layers: list[LayerAttributes] = []
    for i in range(depth):
        if color_theme is not None:
            border_color = color_theme.next_style()
        else:
            border_color = parse_color(resolve(border_colors, i))

        layers.append(
            LayerAttributes(
                border_color=border_color,
                title=resolve(titles, i) or "",
                title_color=parse_color(resolve(title_colors, i)),
                content_color=content_color if i == depth - 1 else None,
            )
        )
    return layers


def nest_boxes(
    lines: list[str],
    depth: int,
    border_colors: Sequence[str] = (),
    title_colors: Sequence[str] = (),
    titles: Sequence[str] = (),
    glyphs: GlyphSet = UNICODE,
    vpad: int = 0,
    hpad: int = 0,
    content_color: Style | None = None,
    color_theme: ColorTheme | None = None,
    wide: bool = False,
) -> list[str]:
    """Wrap *lines* in *depth* nested boxes.

    Layers are rendered innermost first; each rendered block becomes the
    content of the next layer out. A depth of 0 returns the lines unchanged.
    """
    layers = layer_attributes(
        depth,
        border_colors=border_colors,
        title_colors=title_colors,
        titles=titles,
        content_color=content_color,
        color_theme=color_theme,
    )

    result = list(lines)
    for i in reversed(range(depth)):
        layer = layers[i]
        logger.debug("Rendering layer %d of %d (title=%r)", i, depth, layer.title)
        result = render_box(
            result,
            border_color=layer.border_color,
            content_color=layer.content_color,
            title=layer.title,
            title_color=layer.title_color,
            glyphs=glyphs,
            vpad=vpad,
            hpad=hpad,
            wide=wide,
        )
    return result
