"""Invocation configuration: option lists and their validation."""

from __future__ import annotations

from dataclasses import dataclass, field


class ConfigError(ValueError):
    """An option value that cannot be applied to the requested depth."""


@dataclass
class BoxConfig:
    """Everything needed to draw one batch of nested boxes."""

    depth: int = 1
    titles: list[str] = field(default_factory=list)
    border_colors: list[str] = field(default_factory=list)
    title_colors: list[str] = field(default_factory=list)
    content_color: str | None = None
    vpad: int = 0
    hpad: int = 0
    theme: str = "unicode"
    mode: str | None = None
    wide: bool = False


def split_list(value: str | None) -> list[str]:
    """Split a comma-separated option value; empty input gives ``[]``."""
    if not value:
        return []
    return value.split(",")


def validate_list(name: str, values: list[str], depth: int) -> None:
    """Check that *values* holds either one value or exactly *depth* values."""
    if not values:
        return
    if len(values) != 1 and len(values) != depth:
        raise ConfigError(
            f"{name} must have either 1 value or {depth} values, but got {len(values)}"
        )


def expand_list(values: list[str], depth: int) -> list[str]:
    """Broadcast a single value to every level."""
    if len(values) == 1:
        return values * depth
    return list(values)


def build_config(
    depth: int = 1,
    title: str | None = None,
    box_color: str | None = None,
    title_color: str | None = None,
    center_color: str | None = None,
    vpad: int = 0,
    hpad: int = 0,
    theme: str = "unicode",
    mode: str | None = None,
    wide: bool = False,
) -> BoxConfig:
    """Build a :class:`BoxConfig` from raw option values.

    Raises :class:`ConfigError` before anything is rendered if a list option
    has the wrong length, or if a count is negative.
    """
    if depth < 0:
        raise ConfigError(f"depth must be non-negative, got {depth}")
    if vpad < 0 or hpad < 0:
        raise ConfigError("padding must be non-negative")

    lists = {
        "-t/--title": split_list(title),
        "-b/--box-color": split_list(box_color),
        "-c/--title-color": split_list(title_color),
    }
    for name, values in lists.items():
        validate_list(name, values, depth)

    return BoxConfig(
        depth=depth,
        titles=expand_list(lists["-t/--title"], depth),
        border_colors=expand_list(lists["-b/--box-color"], depth),
        title_colors=expand_list(lists["-c/--title-color"], depth),
        content_color=center_color or None,
        vpad=vpad,
        hpad=hpad,
        theme=theme,
        mode=mode or None,
        wide=wide,
    )
