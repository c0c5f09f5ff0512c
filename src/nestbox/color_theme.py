"""Color themes: per-layer border colors generated across nesting levels.

A :class:`ColorTheme` is created once per invocation and queried once per
layer, outermost layer first. It never hands out the same color twice in a
row while unused colors remain in its cycle.
"""

from __future__ import annotations

import logging
import random

from nestbox.colors import Style, indexed_style

logger = logging.getLogger(__name__)

# Size of the color range the generative themes draw from.
CUBE_SIZE = 216

FLAG_PALETTES: dict[str, tuple[int, ...]] = {
    "pride": (196, 208, 226, 46, 21, 129),
    "trans": (51, 213, 15),
    "bi": (213, 129, 21),
    "pan": (213, 226, 21),
    "nb": (226, 15, 129, 0),
}

GENERATIVE_THEMES = ("random", "gradient", "rainbow")

COLOR_THEMES: tuple[str, ...] = GENERATIVE_THEMES + tuple(FLAG_PALETTES)


class ColorTheme:
    """Stateful color generator for one invocation.

    Families:

    * ``random``: uniform draws from [0, 216) without repeats until all 216
      colors have been used, then a new cycle starts.
    * ``gradient``: consecutive colors from a random start offset.
    * ``rainbow``: consecutive colors from 0.
    * flag palettes (``pride``, ``trans``, ``bi``, ``pan``, ``nb``): the
      palette walked in order from a cursor, skipping colors already used in
      the current cycle.
    * anything else: the random start offset on every call.
    """

    def __init__(self, name: str, rng: random.Random | None = None) -> None:
        self.name = name.lower()
        self._rng = rng if rng is not None else random.Random()
        self.start_offset = self._rng.randrange(CUBE_SIZE)
        self.counter = 0
        self.cursor = 0
        self.used: set[int] = set()

        if self.name not in COLOR_THEMES:
            logger.warning(
                "Unknown color theme %r, using constant color %d",
                name,
                self.start_offset,
            )

    @property
    def palette(self) -> tuple[int, ...] | None:
        return FLAG_PALETTES.get(self.name)

    def next_index(self) -> int:
        """Return the palette index for the next layer."""
        if self.name == "random":
            index = self._next_random()
        elif self.name == "gradient":
            index = (self.start_offset + self.counter) % CUBE_SIZE
            self.counter += 1
        elif self.name == "rainbow":
            index = self.counter % CUBE_SIZE
            self.counter += 1
        elif self.palette is not None:
            index = self._next_from_palette(self.palette)
        else:
            index = self.start_offset

        logger.debug("Color theme %s -> %d", self.name, index)
        return index

    def next_style(self) -> Style:
        """Return a 256-color foreground style for the next layer."""
        return indexed_style(self.next_index())

    def _next_random(self) -> int:
        if len(self.used) >= CUBE_SIZE:
            self.used.clear()
        while True:
            index = self._rng.randrange(CUBE_SIZE)
            if index not in self.used:
                self.used.add(index)
                return index

    def _next_from_palette(self, palette: tuple[int, ...]) -> int:
        if self.used >= set(palette):
            self.used.clear()

        size = len(palette)
        for step in range(size):
            position = (self.cursor + step) % size
            index = palette[position]
            if index not in self.used:
                self.used.add(index)
                self.cursor = (position + 1) % size
                return index

        # Unreachable: the set was cleared above if nothing was left.
        raise AssertionError(f"palette {self.name!r} exhausted")
