"""Tests for color space conversions."""

import random

import pytest

from contrastlab.core.conversions import (
    hex_to_rgb,
    hsl_color_to_rgb,
    hsl_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
)
from contrastlab.core.types import HSLColor, RGBColor, degrees_to_fraction


class TestHex:
    """Tests for hex encoding."""

    def test_hex_to_rgb(self):
        """Test six-digit decoding."""
        assert hex_to_rgb("#00ff80") == RGBColor(0, 255, 128)

    def test_rgb_to_hex_lower_case(self):
        """Test output format is '#rrggbb' lower case."""
        assert rgb_to_hex(255, 0, 128) == "#ff0080"

    def test_rgb_to_hex_rounds_and_clamps(self):
        """Test out-of-range and fractional channels."""
        assert rgb_to_hex(300, -5, 127.5) == "#ff0080"

    def test_round_trip_random(self):
        """Test every sampled '#rrggbb' survives decode then encode."""
        rng = random.Random(1234)
        for _ in range(2000):
            code = "#" + "".join(rng.choice("0123456789abcdef") for _ in range(6))
            assert rgb_to_hex(*hex_to_rgb(code)) == code

    @pytest.mark.parametrize("text, expected", [
        ("#FFAA00", "#ffaa00"),
        ("#AbCdEf", "#abcdef"),
        ("#fa0", "#ffaa00"),
        ("#FFF", "#ffffff"),
        ("#000000", "#000000"),
    ])
    def test_round_trip_normalizes(self, text, expected):
        """Test case and 3-digit shorthand normalize to lower-case six digits."""
        assert rgb_to_hex(*hex_to_rgb(text)) == expected


class TestHsl:
    """Tests for RGB <-> HSL."""

    @pytest.mark.parametrize("rgb, hsl", [
        ((255, 0, 0), (0, 100, 50)),
        ((0, 255, 0), (120, 100, 50)),
        ((0, 0, 255), (240, 100, 50)),
        ((255, 255, 255), (0, 0, 100)),
        ((0, 0, 0), (0, 0, 0)),
        ((128, 128, 128), (0, 0, 50)),
    ])
    def test_rgb_to_hsl(self, rgb, hsl):
        """Test reference values in whole degrees and percent."""
        assert rgb_to_hsl(*rgb) == hsl

    def test_hue_is_degrees(self):
        """Test hue stays within [0, 360)."""
        h, _, _ = rgb_to_hsl(255, 0, 1)
        assert 0 <= h < 360

    def test_hsl_to_rgb_takes_fractions(self):
        """Test hue as a fraction of a turn."""
        assert hsl_to_rgb(2 / 3, 1.0, 0.5) == RGBColor(0, 0, 255)

    def test_hsl_color_to_rgb_takes_degrees(self):
        """Test the degrees/percent form."""
        assert hsl_color_to_rgb(HSLColor(30, 100, 50)) == RGBColor(255, 128, 0)

    def test_grayscale(self):
        """Test zero saturation ignores hue."""
        assert hsl_to_rgb(0.42, 0.0, 0.42) == RGBColor(107, 107, 107)

    @pytest.mark.parametrize("rgb", [(255, 0, 0), (0, 255, 0), (0, 0, 0), (255, 255, 255)])
    def test_round_trip_exact_colors(self, rgb):
        """Test colors whose HSL is exact come back unchanged."""
        h, s, l = rgb_to_hsl(*rgb)
        assert hsl_to_rgb(h / 360, s / 100, l / 100) == rgb

    def test_round_trip_close(self):
        """Test arbitrary colors come back within HSL rounding error."""
        for rgb in [(31, 119, 180), (200, 50, 90)]:
            h, s, l = rgb_to_hsl(*rgb)
            back = hsl_to_rgb(h / 360, s / 100, l / 100)
            assert all(abs(x - y) <= 4 for x, y in zip(rgb, back))

    def test_hue_unit_helpers(self):
        """Test degrees wrap before becoming a fraction."""
        assert degrees_to_fraction(540) == pytest.approx(0.5)


class TestLab:
    """Tests for RGB -> XYZ -> LAB."""

    def test_white_xyz(self):
        """Test white maps to the D65 white point."""
        x, y, z = rgb_to_xyz(255, 255, 255)
        assert y == pytest.approx(100.0)
        assert x == pytest.approx(95.05, abs=0.01)
        assert z == pytest.approx(108.9, abs=0.01)

    def test_white_lab(self):
        """Test white is L=100 and neutral."""
        L, a, b = rgb_to_lab(255, 255, 255)
        assert L == pytest.approx(100.0, abs=0.01)
        assert a == pytest.approx(0.0, abs=0.05)
        assert b == pytest.approx(0.0, abs=0.05)

    def test_black_lab(self):
        """Test black is the origin."""
        assert rgb_to_lab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_red_lab(self):
        """Test sRGB red reference value."""
        L, a, b = rgb_to_lab(255, 0, 0)
        assert L == pytest.approx(53.24, abs=0.05)
        assert a == pytest.approx(80.09, abs=0.3)
        assert b == pytest.approx(67.20, abs=0.3)
