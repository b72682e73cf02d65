"""Unit tests for line-level normalization."""

import pytest

from diffview.normalize.text import fold_case, normalize_line, normalize_lines, normalize_whitespace
from diffview.options import DiffOptions


@pytest.mark.unit
class TestNormalizeWhitespace:
    """Tests for normalize_whitespace function."""

    def test_normalize_multiple_spaces(self):
        """Test normalizing multiple spaces."""
        assert normalize_whitespace("Hello    world") == "Hello world"

    def test_normalize_tabs(self):
        """Test normalizing tabs."""
        assert normalize_whitespace("Hello\t\tworld") == "Hello world"

    def test_normalize_leading_trailing_whitespace(self):
        """Test stripping leading and trailing whitespace."""
        assert normalize_whitespace("  Hello world  ") == "Hello world"

    def test_whitespace_only_line(self):
        """A whitespace-only line normalizes to an empty string."""
        assert normalize_whitespace(" \t ") == ""


@pytest.mark.unit
class TestFoldCase:
    """Tests for fold_case function."""

    def test_case_sensitive_is_noop(self):
        """Case-sensitive comparison keeps the text."""
        assert fold_case("MiXeD", case_sensitive=True) == "MiXeD"

    def test_case_insensitive_lowercases(self):
        """Case-insensitive comparison lowercases the text."""
        assert fold_case("MiXeD", case_sensitive=False) == "mixed"


@pytest.mark.unit
class TestNormalizeLine:
    """Tests for normalize_line and normalize_lines."""

    def test_default_options_leave_line_untouched(self):
        """Default options compare lines exactly."""
        assert normalize_line("  A  b ", DiffOptions()) == "  A  b "

    def test_whitespace_and_case_combined(self):
        """Both normalizations apply together."""
        options = DiffOptions(ignore_whitespace=True, case_sensitive=False)
        assert normalize_line("  A   B ", options) == "a b"

    def test_lines_preserve_order_and_count(self):
        """Normalizing a sequence keeps one key per input line."""
        options = DiffOptions(ignore_whitespace=True)
        lines = ["a  b", "", "  c", "d "]

        assert normalize_lines(lines, options) == ["a b", "", "c", "d"]

    def test_lines_without_normalization_are_copied(self):
        """With nothing to normalize, the result equals the input."""
        lines = ["X", " y "]
        normalized = normalize_lines(lines, DiffOptions())

        assert normalized == lines
        assert normalized is not lines
