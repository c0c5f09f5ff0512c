"""Tests for option-list handling and configuration validation."""

from __future__ import annotations

import pytest

from nestbox.config import (
    BoxConfig,
    ConfigError,
    build_config,
    expand_list,
    split_list,
    validate_list,
)


def test_split_list_empty():
    assert split_list("") == []
    assert split_list(None) == []


def test_split_list_commas():
    assert split_list("a,b,,c") == ["a", "b", "", "c"]


def test_validate_list_accepts_one_or_depth():
    validate_list("-t/--title", ["a"], 3)
    validate_list("-t/--title", ["a", "b", "c"], 3)
    validate_list("-t/--title", [], 3)


def test_validate_list_rejects_other_lengths():
    with pytest.raises(ConfigError, match="must have either 1 value or 3 values, but got 2"):
        validate_list("-t/--title", ["a", "b"], 3)


def test_expand_list_broadcasts_single_value():
    assert expand_list(["red"], 3) == ["red", "red", "red"]
    assert expand_list(["a", "b"], 2) == ["a", "b"]
    assert expand_list([], 4) == []


def test_build_config_defaults():
    config = build_config()
    assert config == BoxConfig()


def test_build_config_expands_lists():
    config = build_config(depth=2, title="t", box_color="red,blue", center_color="green")
    assert config.titles == ["t", "t"]
    assert config.border_colors == ["red", "blue"]
    assert config.title_colors == []
    assert config.content_color == "green"
    assert config.mode is None


def test_build_config_names_the_bad_option():
    with pytest.raises(ConfigError, match="-b/--box-color"):
        build_config(depth=2, box_color="red,green,blue")


def test_build_config_rejects_negative_values():
    with pytest.raises(ConfigError):
        build_config(depth=-1)
    with pytest.raises(ConfigError):
        build_config(hpad=-1)


def test_build_config_depth_zero_with_single_value():
    config = build_config(depth=0, title="t")
    assert config.titles == []


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
