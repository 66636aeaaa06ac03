"""Harmonious color generation from a set of reference colors."""

import logging
import math
import random
from collections import namedtuple
from enum import Enum

from .color import HSL, clamp, hex_to_hsl, hsl_to_hex, normalize_hue, random_hex

logger = logging.getLogger(__name__)


class ColorRelationship(str, Enum):
    RANDOM = "random"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    MONOCHROMATIC = "monochromatic"


# hue_offsets: one is picked uniformly; hue_spread: extra uniform +/- degrees.
# Jitter is +/- around the reference, then clamped into the range.
RelationshipRule = namedtuple(
    "RelationshipRule",
    [
        "hue_offsets",
        "hue_spread",
        "saturation_jitter",
        "saturation_range",
        "lightness_jitter",
        "lightness_range",
    ],
)

RELATIONSHIP_RULES = {
    ColorRelationship.COMPLEMENTARY: RelationshipRule((180,), 0, 15, (25, 90), 20, (25, 75)),
    ColorRelationship.ANALOGOUS: RelationshipRule((0,), 30, 10, (30, 85), 15, (30, 70)),
    ColorRelationship.TRIADIC: RelationshipRule((120, 240), 0, 20, (35, 85), 25, (25, 75)),
    ColorRelationship.TETRADIC: RelationshipRule((90, 180, 270), 0, 15, (30, 80), 20, (30, 70)),
    ColorRelationship.SPLIT_COMPLEMENTARY: RelationshipRule(
        (150, 210), 0, 12, (35, 85), 18, (30, 70)
    ),
    ColorRelationship.MONOCHROMATIC: RelationshipRule((0,), 0, 40, (15, 95), 50, (15, 85)),
}

COLOR_RELATIONSHIPS = [
    (ColorRelationship.RANDOM, "Random", "Any random color"),
    (ColorRelationship.COMPLEMENTARY, "Complementary", "Opposite on color wheel"),
    (ColorRelationship.ANALOGOUS, "Analogous", "Adjacent colors"),
    (ColorRelationship.TRIADIC, "Triadic", "120° apart"),
    (ColorRelationship.TETRADIC, "Tetradic", "90° apart (square)"),
    (ColorRelationship.SPLIT_COMPLEMENTARY, "Split Complementary", "Complement + neighbors"),
    (
        ColorRelationship.MONOCHROMATIC,
        "Monochromatic",
        "Same hue, different saturation/lightness",
    ),
]


def _uniform(rng, low, high):
    return rng.random() * (high - low) + low


def circular_mean_hue(hues):
    """Average angles in degrees via the sin/cos sum, so 350 and 10 give 0."""
    sin_sum = sum(math.sin(math.radians(h)) for h in hues)
    cos_sum = sum(math.cos(math.radians(h)) for h in hues)
    return normalize_hue(math.degrees(math.atan2(sin_sum, cos_sum)))


def average_hsl(colors):
    """Circular-mean hue plus arithmetic-mean saturation and lightness.

    Returns unrounded floats; an empty list gives a neutral mid gray.
    """
    if not colors:
        return HSL(0, 50, 50)
    values = [hex_to_hsl(c) for c in colors]
    return HSL(
        circular_mean_hue([v.h for v in values]),
        sum(v.s for v in values) / len(values),
        sum(v.l for v in values) / len(values),
    )


def _coerce_relationship(relationship):
    try:
        return ColorRelationship(relationship)
    except ValueError:
        logger.debug("Unknown relationship %r, falling back to random", relationship)
        return ColorRelationship.RANDOM


def generate_related_color(reference_colors, relationship, fallback=None, rng=None):
    """Generate a new color harmonically related to the reference colors.

    Args:
        reference_colors: Hex colors to harmonize with (typically the locked ones)
        relationship: A ColorRelationship or its string value
        fallback: Reference used when reference_colors is empty
        rng: Object with the random.Random interface (defaults to the random module)

    Returns:
        str: A ``#rrggbb`` color. Generation never fails.
    """
    rng = rng or random
    relationship = _coerce_relationship(relationship)

    if relationship is ColorRelationship.RANDOM:
        return random_hex(rng)

    if reference_colors:
        base_colors = list(reference_colors)
    else:
        base_colors = [fallback] if fallback else [random_hex(rng)]

    rule = RELATIONSHIP_RULES[relationship]
    base = average_hsl(base_colors)

    offset = rule.hue_offsets[int(rng.random() * len(rule.hue_offsets))]
    if rule.hue_spread:
        offset += _uniform(rng, -rule.hue_spread, rule.hue_spread)

    s_jitter = _uniform(rng, -rule.saturation_jitter, rule.saturation_jitter)
    l_jitter = _uniform(rng, -rule.lightness_jitter, rule.lightness_jitter)

    related = HSL(
        normalize_hue(base.h + offset),
        clamp(base.s + s_jitter, *rule.saturation_range),
        clamp(base.l + l_jitter, *rule.lightness_range),
    )
    return hsl_to_hex(related)
