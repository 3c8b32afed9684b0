"""Tests for the WCAG contrast check."""

import pytest

from contrastlab import test_contrast as check_contrast
from contrastlab.core.contrast import WcagLevel


class TestValidPairs:
    """Tests for pairs that parse."""

    def test_black_on_white(self):
        """Test the maximum-contrast pair passes AA."""
        result = check_contrast("#000000", "#FFFFFF", wcag_level="AA")
        assert result.valid
        assert result.contrast_ratio == pytest.approx(21.0)
        assert result.required_ratio == 4.5
        assert result.recommendation is None
        assert result.error is None

    def test_gray_on_white_fails_aa(self):
        """Test #777777 on white fails AA with a usable suggestion."""
        result = check_contrast("#777777", "#FFFFFF", wcag_level="AA")
        assert not result.valid
        assert result.contrast_ratio == pytest.approx(4.48, abs=0.01)
        rec = result.recommendation
        assert rec is not None
        assert rec.contrast_ratio >= 4.5
        assert rec.type == "foreground"
        assert rec.color.hex == "#6b6b6b"

    def test_gray_on_white_passes_large_text(self):
        """Test large text only needs 3:1 at AA."""
        result = check_contrast("#777777", "#FFFFFF", large_text=True)
        assert result.valid
        assert result.required_ratio == 3.0
        assert result.large_text

    def test_level_a(self):
        """Test level A needs 3:1."""
        assert check_contrast("#777777", "white", wcag_level="A").valid

    def test_level_aaa_enum(self):
        """Test the enum form of the level."""
        result = check_contrast("#555555", "#ffffff", wcag_level=WcagLevel.AAA)
        assert result.wcag_level == "AAA"
        assert result.required_ratio == 7.0
        assert result.valid

    def test_no_recommendations(self):
        """Test recommendations can be switched off."""
        result = check_contrast("#777777", "#FFFFFF", include_recommendations=False)
        assert not result.valid
        assert result.recommendation is None

    def test_background_suggested_when_foreground_is_stuck(self):
        """Test white text cannot lighten, so the background darkens."""
        result = check_contrast("#ffffff", "#8a8a8a")
        assert not result.valid
        assert result.recommendation is not None
        assert result.recommendation.contrast_ratio >= 4.5
        assert result.recommendation.type == "background"

    def test_color_info(self):
        """Test both colors are reported in hex, rgb and hsl."""
        result = check_contrast("rgb(255, 0, 0)", "navy")
        assert result.foreground_color.hex == "#ff0000"
        assert result.foreground_color.hsl == (0, 100, 50)
        assert result.background_color.rgb == (0, 0, 128)

    def test_unknown_level_raises(self):
        """Test unknown levels raise instead of returning a result."""
        with pytest.raises(ValueError):
            check_contrast("#000", "#fff", wcag_level="B")


class TestInvalidInput:
    """Tests for colors that do not parse."""

    def test_invalid_foreground(self):
        """Test an unparsable foreground."""
        result = check_contrast("notacolor", "#FFFFFF")
        assert not result.valid
        assert result.error == "Invalid foreground color"
        assert result.contrast_ratio == 0
        assert result.foreground_color is None

    def test_invalid_background(self):
        """Test an unparsable background."""
        result = check_contrast("#000", "rgb(1, 2)")
        assert not result.valid
        assert result.error == "Invalid background color"

    def test_both_invalid_reports_foreground(self):
        """Test the foreground is checked first."""
        assert check_contrast("", "nope").error == "Invalid foreground color"


class TestToDict:
    """Tests for the serialized form."""

    def test_keys(self):
        """Test camelCase keys and nested colors."""
        data = check_contrast("#000000", "#ffffff").to_dict()
        assert data["valid"] is True
        assert data["wcagLevel"] == "AA"
        assert data["largeText"] is False
        assert data["requiredRatio"] == 4.5
        assert data["foregroundColor"] == {
            "hex": "#000000",
            "rgb": "rgb(0, 0, 0)",
            "hsl": {"h": 0, "s": 0, "l": 0},
        }
        assert "recommendation" not in data

    def test_recommendation_serialized(self):
        """Test the suggestion appears with its ratio."""
        data = check_contrast("#777777", "#ffffff").to_dict()
        assert data["recommendation"]["type"] == "foreground"
        assert data["recommendation"]["color"]["hex"] == "#6b6b6b"
        assert data["recommendation"]["contrastRatio"] >= 4.5

    def test_error_serialized(self):
        """Test an error result carries the message."""
        data = check_contrast("bogus", "#fff").to_dict()
        assert data["valid"] is False
        assert data["error"] == "Invalid foreground color"
        assert data["contrastRatio"] == 0
