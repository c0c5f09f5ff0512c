"""Tests for resolving input lines."""

from __future__ import annotations

import io

import pytest

from nestbox.source import (
    InputReadError,
    NoInputError,
    read_lines,
    resolve_text_input,
    split_arguments,
)


class _Terminal(io.StringIO):
    """A stdin stand-in that reports itself as an interactive terminal."""

    def isatty(self) -> bool:
        return True


class _BrokenPipe(io.StringIO):
    def __iter__(self):
        raise OSError("broken pipe")


class TestSplitArguments:
    def test_one_line_per_argument(self) -> None:
        assert split_arguments(["Line 1", "Line 2"]) == ["Line 1", "Line 2"]

    def test_literal_backslash_n_splits(self) -> None:
        assert split_arguments(["a\\nb", "c"]) == ["a", "b", "c"]

    def test_empty_arguments_skipped(self) -> None:
        assert split_arguments(["", "x", ""]) == ["x"]


class TestReadLines:
    def test_strips_line_endings(self) -> None:
        assert read_lines(io.StringIO("one\ntwo\r\nthree")) == ["one", "two", "three"]

    def test_keeps_blank_lines(self) -> None:
        assert read_lines(io.StringIO("a\n\nb\n")) == ["a", "", "b"]

    def test_read_failure(self) -> None:
        with pytest.raises(InputReadError, match="failed to read from stdin"):
            read_lines(_BrokenPipe())


class TestResolveTextInput:
    def test_arguments_from_terminal(self) -> None:
        assert resolve_text_input(["hi"], _Terminal()) == ["hi"]

    def test_piped_stdin_without_arguments(self) -> None:
        assert resolve_text_input([], io.StringIO("x\ny\n")) == ["x", "y"]

    def test_pipe_takes_precedence_over_arguments(self) -> None:
        assert resolve_text_input(["arg"], io.StringIO("piped\n")) == ["piped"]

    def test_empty_pipe_gives_no_lines(self) -> None:
        assert resolve_text_input([], io.StringIO("")) == []

    def test_no_input_from_terminal(self) -> None:
        with pytest.raises(NoInputError, match="no input provided"):
            resolve_text_input([], _Terminal())

    def test_no_input_without_stdin(self) -> None:
        with pytest.raises(NoInputError):
            resolve_text_input(["", ""], None)
