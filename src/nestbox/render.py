"""Render a single bordered layer around a block of lines."""

from __future__ import annotations

from nestbox.colors import Style, apply_style
from nestbox.glyphs import UNICODE, GlyphSet
from nestbox.utils import display_width, max_display_width


def render_box(
    lines: list[str],
    border_color: Style | None = None,
    content_color: Style | None = None,
    title: str = "",
    title_color: Style | None = None,
    glyphs: GlyphSet = UNICODE,
    vpad: int = 0,
    hpad: int = 0,
    wide: bool = False,
) -> list[str]:
    """Draw one box around *lines* and return the rendered rows.

    The interior is as wide as the widest line plus ``hpad`` columns on each
    side, widened further if *title* does not fit. The title is written into
    the top border directly after the left corner and is never truncated.
    Every returned row has the same display width. Widths count code points
    unless *wide* is set (see :func:`nestbox.utils.display_width`).
    """
    vpad = max(vpad, 0)
    hpad = max(hpad, 0)

    inner_width = max_display_width(lines, wide) + 2 * hpad
    title_width = display_width(title, wide) if title else 0
    inner_width = max(inner_width, title_width)

    def border(text: str) -> str:
        return apply_style(text, border_color)

    side = border(glyphs.ns)

    # Top border
    top = border(glyphs.nw)
    if title:
        top += apply_style(title, title_color)
    top += border(glyphs.we * (inner_width - title_width))
    top += border(glyphs.ne)
    result = [top]

    blank = side + " " * inner_width + side
    result.extend(blank for _ in range(vpad))

    # Content
    margin = " " * hpad
    for line in lines:
        fill = " " * (inner_width - display_width(line, wide) - 2 * hpad)
        content = apply_style(line, content_color)
        result.append(side + margin + content + margin + fill + side)

    result.extend(blank for _ in range(vpad))

    # Bottom border
    result.append(border(glyphs.sw) + border(glyphs.we * inner_width) + border(glyphs.se))
    return result
