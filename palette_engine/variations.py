"""Tints, shades and tones of a single color."""

from .color import HSL, clamp, hex_to_hsl, hsl_to_hex, round_half_up
from .config import (
    DEFAULT_VARIATION_COUNT,
    SHADE_TARGET_LIGHTNESS,
    TINT_TARGET_LIGHTNESS,
    TONE_TARGET_SATURATION,
)


def _steps(start, target, count):
    # Step 0 is the source itself and is skipped; the last step hits the target.
    return [start + (target - start) * i / count for i in range(1, count + 1)]


def _to_hex(h, s, l):
    return hsl_to_hex(HSL(h, round_half_up(clamp(s, 0, 100)), round_half_up(clamp(l, 0, 100))))


def generate_tints(hex_color, count=DEFAULT_VARIATION_COUNT):
    """Lighter versions of a color, moving lightness toward near-white."""
    h, s, l = hex_to_hsl(hex_color)
    return [_to_hex(h, s, step) for step in _steps(l, TINT_TARGET_LIGHTNESS, count)]


def generate_shades(hex_color, count=DEFAULT_VARIATION_COUNT):
    """Darker versions of a color, moving lightness toward near-black."""
    h, s, l = hex_to_hsl(hex_color)
    return [_to_hex(h, s, step) for step in _steps(l, SHADE_TARGET_LIGHTNESS, count)]


def generate_tones(hex_color, count=DEFAULT_VARIATION_COUNT):
    """Greyer versions of a color: saturation falls, hue and lightness hold."""
    h, s, l = hex_to_hsl(hex_color)
    return [_to_hex(h, step, l) for step in _steps(s, TONE_TARGET_SATURATION, count)]
