"""Curated HSL-range presets: palette generation and membership tests."""

import random
from collections import namedtuple

from .color import HSL, clamp, hex_to_hsl, hsl_to_hex, normalize_hue, round_half_up
from .config import (
    DEFAULT_PRESET_COUNT,
    HUE_JITTER_FRACTION,
    MONOCHROME_MAX_SATURATION,
    PRESET_TOLERANCE,
)
from .errors import UnknownPresetError

PalettePreset = namedtuple(
    "PalettePreset", ["id", "label", "description", "hue", "saturation", "lightness"]
)

FULL_CIRCLE = (0, 360)

# hue=(0, 0) means hue is irrelevant; min > max wraps through 0 degrees.
PALETTE_PRESETS = (
    PalettePreset("pastel", "Pastel", "Soft, light, low-saturation colors", (0, 360), (25, 45), (75, 90)),
    PalettePreset("neon", "Neon", "Fully saturated, electric brights", (0, 360), (90, 100), (50, 60)),
    PalettePreset("earth", "Earth", "Browns, ochres and clay tones", (20, 50), (25, 55), (20, 55)),
    PalettePreset("jewel", "Jewel", "Deep, rich gemstone colors", (0, 360), (60, 85), (25, 45)),
    PalettePreset("monochrome", "Monochrome", "Grays from charcoal to silver", (0, 0), (0, 5), (15, 90)),
    PalettePreset("warm", "Warm", "Reds, oranges and yellows", (330, 60), (55, 90), (40, 65)),
    PalettePreset("cool", "Cool", "Greens, blues and purples", (170, 270), (40, 80), (35, 65)),
    PalettePreset("muted", "Muted", "Dusty, desaturated mid-tones", (0, 360), (10, 30), (35, 65)),
)


def get_preset(preset_id):
    for preset in PALETTE_PRESETS:
        if preset.id == preset_id:
            return preset
    raise UnknownPresetError(preset_id)


def _is_full_circle(preset):
    return tuple(preset.hue) == FULL_CIRCLE


def _stratified_lightness(preset, count, rng):
    low, high = preset.lightness
    segment = (high - low) / count
    values = [low + segment * i + rng.random() * segment for i in range(count)]
    # Spread across the range, but not in ascending order
    rng.shuffle(values)
    return values


def _hues(preset, count, rng):
    if preset.id == "monochrome":
        return [0] * count

    low, high = preset.hue
    if _is_full_circle(preset):
        segment = 360 / count
        rotation = rng.random() * 360
        return [
            normalize_hue(
                rotation + segment * i + (rng.random() * 2 - 1) * HUE_JITTER_FRACTION * segment
            )
            for i in range(count)
        ]
    if low > high:
        return [normalize_hue(low + rng.random() * (high + 360 - low)) for _ in range(count)]
    return [low + rng.random() * (high - low) for _ in range(count)]


def generate_preset_palette(preset, count=DEFAULT_PRESET_COUNT, rng=None):
    """Generate ``count`` colors whose HSL values fall inside a preset.

    Lightness is stratified (one draw per equal segment, shuffled), hue is
    evenly spread for full-circle presets and uniform otherwise, saturation
    is uniform per color.

    Args:
        preset: A PalettePreset
        count: Number of colors to generate
        rng: Object with the random.Random interface (defaults to the random module)

    Returns:
        list: ``count`` hex colors
    """
    rng = rng or random
    if count <= 0:
        return []

    lightness = _stratified_lightness(preset, count, rng)
    hues = _hues(preset, count, rng)
    s_low, s_high = preset.saturation

    colors = []
    for h, l in zip(hues, lightness):
        s = s_low + rng.random() * (s_high - s_low)
        colors.append(
            hsl_to_hex(
                HSL(
                    h,
                    round_half_up(clamp(s, 0, 100)),
                    round_half_up(clamp(l, 0, 100)),
                )
            )
        )
    return colors


def _hue_irrelevant(preset):
    # Structural check: any preset this desaturated is treated as monochrome,
    # whatever its id.
    return _is_full_circle(preset) or preset.saturation[1] <= MONOCHROME_MAX_SATURATION


def _hue_in_range(hue, low, high, tol):
    if low > high:
        return hue >= low - tol or hue <= high + tol
    return low - tol <= hue <= high + tol


def is_preset_active(colors, preset, tolerance=PRESET_TOLERANCE):
    """True when every color lies within the preset's ranges (+/- tolerance)."""
    if not colors:
        return False

    s_low, s_high = preset.saturation
    l_low, l_high = preset.lightness
    check_hue = not _hue_irrelevant(preset)

    for color in colors:
        h, s, l = hex_to_hsl(color)
        if not s_low - tolerance <= s <= s_high + tolerance:
            return False
        if not l_low - tolerance <= l <= l_high + tolerance:
            return False
        if check_hue and not _hue_in_range(h, preset.hue[0], preset.hue[1], tolerance):
            return False
    return True


def find_active_preset(colors):
    """First catalog preset the palette satisfies, or None."""
    for preset in PALETTE_PRESETS:
        if is_preset_active(colors, preset):
            return preset
    return None
