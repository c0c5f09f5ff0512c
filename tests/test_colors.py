"""Tests for color-name parsing."""

from __future__ import annotations

import click

from nestbox.colors import apply_style, indexed_style, parse_color


class TestParseColor:
    def test_standard_name(self) -> None:
        style = parse_color("red")
        assert style is not None
        assert style("x") == click.style("x", fg="red")

    def test_name_is_case_insensitive(self) -> None:
        style = parse_color("Bright_Blue")
        assert style is not None
        assert style("x") == click.style("x", fg="bright_blue")

    def test_gray_is_bright_black(self) -> None:
        style = parse_color("gray")
        assert style is not None
        assert style("x") == click.style("x", fg="bright_black")

    def test_palette_index(self) -> None:
        style = parse_color("196")
        assert style is not None
        assert style("x").startswith("\x1b[38;5;196m")

    def test_index_out_of_range_is_no_color(self) -> None:
        assert parse_color("256") is None

    def test_unknown_name_is_no_color(self) -> None:
        assert parse_color("chartreuse") is None

    def test_empty_is_no_color(self) -> None:
        assert parse_color("") is None
        assert parse_color(None) is None


class TestApplyStyle:
    def test_none_passes_through(self) -> None:
        assert apply_style("text", None) == "text"

    def test_indexed_style(self) -> None:
        assert apply_style("t", indexed_style(21)) == "\x1b[38;5;21mt\x1b[0m"
