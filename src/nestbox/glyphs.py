"""Border glyph sets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphSet:
    """The six characters used to draw a box border.

    ``we`` is the horizontal edge, ``ns`` the vertical edge, and the
    remaining fields are the corners named by compass direction.
    """

    we: str
    ns: str
    nw: str
    ne: str
    sw: str
    se: str


UNICODE = GlyphSet(we="━", ns="┃", nw="┏", ne="┓", sw="┗", se="┛")
ASCII = GlyphSet(we="-", ns="|", nw="+", ne="+", sw="+", se="+")
PLAIN = GlyphSet(we=" ", ns=" ", nw=" ", ne=" ", sw=" ", se=" ")

GLYPH_SETS: dict[str, GlyphSet] = {
    "unicode": UNICODE,
    "ascii": ASCII,
    "plain": PLAIN,
}


def get_glyph_set(name: str | None) -> GlyphSet:
    """Look up a glyph set by name, falling back to ``unicode``."""
    if not name:
        return UNICODE
    return GLYPH_SETS.get(name.lower(), UNICODE)
