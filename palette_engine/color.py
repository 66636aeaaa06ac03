import colorsys
import math
import random
import re
from collections import namedtuple

import numpy as np

from .errors import InvalidColorError

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])
Oklab = namedtuple("Oklab", ["L", "a", "b"])
Oklch = namedtuple("Oklch", ["l", "c", "h"])

HEX_PATTERN = re.compile(r"^#[0-9a-f]{6}$")
_HEX_PAIR = re.compile(r"[0-9a-fA-F]{2}")
_SHORT_OR_LONG_HEX = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Oklab matrices (Ottosson, 2020). Do not round these.
# Linear sRGB -> LMS
M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
# Cube-rooted LMS -> Oklab
M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
# Oklab -> cube-rooted LMS
M2_INV = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
# LMS -> linear sRGB
M1_INV = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)


def round_half_up(value):
    """Round .5 away from zero for positives (browser Math.round behaviour).

    NaN passes through so malformed colors stay NaN instead of raising.
    """
    if math.isnan(value):
        return value
    return int(math.floor(value + 0.5))


def clamp(value, min_value, max_value):
    return max(min_value, min(max_value, value))


def normalize_hue(hue):
    """Wrap any angle into [0, 360)."""
    return ((hue % 360) + 360) % 360


def rgb_to_hex(r, g, b):
    r, g, b = (clamp(int(c), 0, 255) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    """Parse ``#rrggbb`` (leading ``#`` optional) into an RGB tuple.

    Malformed input yields NaN channels rather than raising; validate with
    :func:`is_valid_hex` or :func:`normalize_hex` first.
    """
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) != 6:
        return RGB(math.nan, math.nan, math.nan)
    channels = []
    for i in (0, 2, 4):
        pair = digits[i : i + 2]
        channels.append(int(pair, 16) if _HEX_PAIR.fullmatch(pair) else math.nan)
    return RGB(*channels)


def hex_to_hsl(hex_color):
    """Convert hex to HSL with h in degrees and s/l in rounded percent.

    Achromatic colors report ``h=0, s=0``.
    """
    r, g, b = hex_to_rgb(hex_color)
    if any(math.isnan(c) for c in (r, g, b)):
        return HSL(math.nan, math.nan, math.nan)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return HSL(round_half_up(h * 360), round_half_up(s * 100), round_half_up(l * 100))


def hsl_to_rgb(h, s, l):
    # Normalize before dividing: h=360 must land in the red sector, not gray.
    h_norm = normalize_hue(h) / 360
    s_norm = clamp(s, 0, 100) / 100
    l_norm = clamp(l, 0, 100) / 100
    r, g, b = colorsys.hls_to_rgb(h_norm, l_norm, s_norm)
    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def hsl_to_hex(hsl):
    """Convert an ``HSL`` (or any ``(h, s, l)`` triple) to a lowercase hex string."""
    h, s, l = hsl
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def linearize(channel):
    """sRGB transfer function: 0-255 channel to linear light in [0, 1]."""
    c = channel / 255
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _srgb_encode(value):
    return 12.92 * value if value <= 0.0031308 else 1.055 * value ** (1 / 2.4) - 0.055


def srgb_to_oklab(rgb):
    """Vectorized sRGB (0-255, shape ``(..., 3)``) to Oklab ``(..., 3)``."""
    c = np.asarray(rgb, dtype=float) / 255
    linear = np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    lms = np.cbrt(linear @ M1.T)
    return lms @ M2.T


def hex_to_oklab(hex_color):
    L, a, b = srgb_to_oklab(hex_to_rgb(hex_color))
    return Oklab(float(L), float(a), float(b))


def oklab_to_hex(lab):
    """Convert Oklab back to hex; out-of-gamut channels are clipped."""
    lms = (M2_INV @ np.asarray(lab, dtype=float)) ** 3
    linear = M1_INV @ lms
    channels = [
        round_half_up(clamp(_srgb_encode(float(v)), 0.0, 1.0) * 255) for v in linear
    ]
    return rgb_to_hex(*channels)


def oklab_to_oklch(lab):
    L, a, b = lab
    return Oklch(
        L * 100,
        math.hypot(a, b),
        normalize_hue(math.degrees(math.atan2(b, a))),
    )


def oklch_to_oklab(lch):
    l, c, h = lch
    rad = math.radians(h)
    return Oklab(l / 100, c * math.cos(rad), c * math.sin(rad))


def hex_to_oklch(hex_color):
    return oklab_to_oklch(hex_to_oklab(hex_color))


def oklch_to_hex(lch):
    return oklab_to_hex(oklch_to_oklab(lch))


def random_hex(rng=None):
    """Uniformly random 24-bit color."""
    rng = rng or random
    return f"#{int(rng.random() * 0xFFFFFF):06x}"


def is_valid_hex(value):
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def normalize_hex(value):
    """Canonicalize user input (``FFF``, ``#ff5733``...) to ``#rrggbb``.

    Raises:
        InvalidColorError: if the value is not a 3- or 6-digit hex color
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    match = _SHORT_OR_LONG_HEX.match(value.strip())
    if match is None:
        raise InvalidColorError(value)
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return f"#{digits}"


def format_color(hex_color, fmt, var_name="primary"):
    """Render a color as a snippet in one of the copy formats.

    Args:
        hex_color: Color as ``#rrggbb``
        fmt: One of hex, rgb, hsl, css-var, tailwind, scss
        var_name: Variable name used by the css-var/tailwind/scss formats

    Returns:
        str: The formatted color
    """
    hex_color = hex_color.lower()
    if fmt == "hex":
        return hex_color
    if fmt == "rgb":
        r, g, b = hex_to_rgb(hex_color)
        return f"rgb({r}, {g}, {b})"
    if fmt == "hsl":
        h, s, l = hex_to_hsl(hex_color)
        return f"hsl({h}, {s}%, {l}%)"
    if fmt == "css-var":
        return f"--color-{var_name}: {hex_color};"
    if fmt == "tailwind":
        return f"'{var_name}': '{hex_color}'"
    if fmt == "scss":
        return f"$color-{var_name}: {hex_color};"
    raise ValueError(f"unknown color format: {fmt!r}")
