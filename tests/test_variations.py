"""Tests for tints, shades and tones."""

import pytest

from palette_engine.color import hex_to_hsl
from palette_engine.variations import generate_shades, generate_tints, generate_tones

SAMPLES = ["#ff0000", "#3498db", "#2ecc71", "#808080", "#4a235a"]


class TestTints:
    """Test tint generation."""

    @pytest.mark.unit
    def test_default_count(self):
        """Test nine tints by default."""
        assert len(generate_tints("#ff0000")) == 9

    @pytest.mark.unit
    def test_last_step_reaches_target(self):
        """Test the final tint sits at lightness 97."""
        tints = generate_tints("#ff0000")
        assert tints[-1] == "#fff0f0"
        assert hex_to_hsl(tints[-1]).l == 97

    @pytest.mark.unit
    def test_source_is_not_included(self):
        """Test output starts one step away from the source."""
        assert generate_tints("#ff0000")[0] != "#ff0000"

    @pytest.mark.unit
    @pytest.mark.parametrize("color", SAMPLES)
    def test_lightness_non_decreasing(self, color):
        """Test tints only get lighter, within rounding."""
        values = [hex_to_hsl(c).l for c in generate_tints(color)]
        assert all(b >= a - 1 for a, b in zip(values, values[1:]))


class TestShades:
    """Test shade generation."""

    @pytest.mark.unit
    def test_last_step_reaches_target(self):
        """Test the final shade sits at lightness 3."""
        assert generate_shades("#ff0000")[-1] == "#0f0000"

    @pytest.mark.unit
    def test_custom_count(self):
        """Test the step count is honoured."""
        assert len(generate_shades("#3498db", 4)) == 4
        assert generate_shades("#3498db", 0) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("color", SAMPLES)
    def test_lightness_non_increasing(self, color):
        """Test shades only get darker, within rounding."""
        values = [hex_to_hsl(c).l for c in generate_shades(color)]
        assert all(b <= a + 1 for a, b in zip(values, values[1:]))


class TestTones:
    """Test tone generation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("color", SAMPLES)
    def test_saturation_non_increasing(self, color):
        """Test tones only lose saturation, within rounding."""
        values = [hex_to_hsl(c).s for c in generate_tones(color)]
        assert all(b <= a + 1 for a, b in zip(values, values[1:]))

    @pytest.mark.unit
    def test_lightness_held(self):
        """Test tones keep the source lightness."""
        source_l = hex_to_hsl("#3498db").l
        for color in generate_tones("#3498db"):
            assert abs(hex_to_hsl(color).l - source_l) <= 1

    @pytest.mark.unit
    def test_ends_nearly_gray(self):
        """Test the final tone is at saturation 2."""
        assert hex_to_hsl(generate_tones("#ff0000")[-1]).s <= 3
