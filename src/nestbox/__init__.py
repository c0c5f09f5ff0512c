"""nestbox: draw nested, colored boxes around lines of text."""

__version__ = "0.1.0"

from nestbox.color_theme import COLOR_THEMES, FLAG_PALETTES, ColorTheme
from nestbox.colors import Style, apply_style, indexed_style, parse_color
from nestbox.config import BoxConfig, ConfigError, build_config
from nestbox.glyphs import ASCII, GLYPH_SETS, PLAIN, UNICODE, GlyphSet, get_glyph_set
from nestbox.nest import LayerAttributes, layer_attributes, nest_boxes, resolve
from nestbox.render import render_box
from nestbox.source import InputReadError, NoInputError, resolve_text_input
from nestbox.utils import display_width, strip_ansi

__all__ = [
    # Rendering
    "render_box",
    "nest_boxes",
    "layer_attributes",
    "LayerAttributes",
    "resolve",
    # Glyphs
    "GlyphSet",
    "UNICODE",
    "ASCII",
    "PLAIN",
    "GLYPH_SETS",
    "get_glyph_set",
    # Colors
    "Style",
    "parse_color",
    "indexed_style",
    "apply_style",
    "ColorTheme",
    "COLOR_THEMES",
    "FLAG_PALETTES",
    # Config / input
    "BoxConfig",
    "ConfigError",
    "build_config",
    "resolve_text_input",
    "NoInputError",
    "InputReadError",
    # Utils
    "display_width",
    "strip_ansi",
]
