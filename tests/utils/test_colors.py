"""
Tests for colour utilities.

Tests cover:
1. Hex parsing (3 and 6 digits)
2. Exact and nearest palette lookup
3. Contrast colour selection
"""

import pytest

from alpsvault.utils.colors import (
    HEX_COLOR_PATTERN,
    color_name_for,
    find_closest_color,
    find_exact_color,
    get_contrasting_text_color,
    hex_to_rgb,
)


class TestHexToRgb:
    """Tests for hex parsing."""

    def test_six_digit(self):
        """Test a 6-digit colour."""
        assert hex_to_rgb("#FF6347") == (255, 99, 71)

    def test_three_digit_expands(self):
        """Test a 3-digit colour doubles each digit."""
        assert hex_to_rgb("#f00") == (255, 0, 0)

    def test_invalid_raises(self):
        """Test malformed input raises ValueError."""
        with pytest.raises(ValueError):
            hex_to_rgb("#12345")

    def test_pattern(self):
        """Test the whole-string hex pattern."""
        assert HEX_COLOR_PATTERN.match("#abc")
        assert HEX_COLOR_PATTERN.match("#AABBCC")
        assert not HEX_COLOR_PATTERN.match("#abcd")
        assert not HEX_COLOR_PATTERN.match("abc")
        assert not HEX_COLOR_PATTERN.match("#abcdefg")


class TestPaletteLookup:
    """Tests for named colour lookup."""

    def test_exact_match_case_insensitive(self):
        """Test exact palette match ignores case."""
        match = find_exact_color("#ff6347")
        assert match is not None
        assert match.name == "Tomato"

    def test_exact_match_missing(self):
        """Test no exact match for an off-palette colour."""
        assert find_exact_color("#FF6348") is None

    def test_closest_color(self):
        """Test nearest colour by RGB distance."""
        match = find_closest_color("#FE0101")
        assert match is not None
        assert match.name == "Red"
        assert match.distance > 0

    def test_closest_requires_hash(self):
        """Test input without '#' has no nearest colour."""
        assert find_closest_color("FF0000") is None

    def test_closest_invalid(self):
        """Test malformed input has no nearest colour."""
        assert find_closest_color("#zzz") is None

    def test_color_name_prefers_exact(self):
        """Test friendly name uses the exact match first."""
        assert color_name_for("#000080") == "Navy"

    def test_color_name_short_form(self):
        """Test 3-digit input resolves through the nearest match."""
        assert color_name_for("#f00") == "Red"


class TestContrastingTextColor:
    """Tests for contrast selection."""

    def test_light_background(self):
        """Test black text on a light background."""
        assert get_contrasting_text_color("#FFFFFF") == "#000000"

    def test_dark_background(self):
        """Test white text on a dark background."""
        assert get_contrasting_text_color("#000080") == "#FFFFFF"

    def test_malformed_defaults_to_black(self):
        """Test malformed input falls back to black."""
        assert get_contrasting_text_color("") == "#000000"
        assert get_contrasting_text_color("not-a-colour") == "#000000"
