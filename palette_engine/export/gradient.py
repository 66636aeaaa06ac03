"""Linear gradients built from palette colors: CSS, SVG, Tailwind and PNG."""

import io
import math
from collections import namedtuple

import numpy as np
from PIL import Image

from ..color import hex_to_rgb, normalize_hue, round_half_up

GradientStop = namedtuple("GradientStop", ["position", "hex"])  # position 0-100
LinearGradient = namedtuple("LinearGradient", ["angle", "stops"])
TailwindGradient = namedtuple("TailwindGradient", ["css", "warning"])

MAX_EXPORT_DIMENSION = 1920

# Tailwind gradient directions, clockwise from "to top" in 45 degree sectors
TAILWIND_DIRECTIONS = ("to-t", "to-tr", "to-r", "to-br", "to-b", "to-bl", "to-l", "to-tl")


def stops_from_palette(colors):
    """Evenly spaced stops; a single color becomes a flat two-stop gradient."""
    if not colors:
        return []
    if len(colors) == 1:
        return [GradientStop(0, colors[0]), GradientStop(100, colors[0])]
    last = len(colors) - 1
    return [GradientStop(round_half_up(i / last * 100), c) for i, c in enumerate(colors)]


def sorted_stops(stops):
    return sorted(stops, key=lambda s: s.position)


def gradient_css(gradient):
    stops = ", ".join(f"{s.hex} {s.position:g}%" for s in sorted_stops(gradient.stops))
    return f"linear-gradient({gradient.angle:g}deg, {stops})"


def export_dimensions(aspect_ratio, max_dim=MAX_EXPORT_DIMENSION):
    height = round(max_dim / aspect_ratio)
    if height <= max_dim:
        return max_dim, height
    # Portrait: height is the long side
    return round(max_dim * aspect_ratio), max_dim


def _svg_coords(angle):
    # CSS angles run clockwise from "to top"
    rad = math.radians(angle)
    to_x = math.sin(rad)
    to_y = -math.cos(rad)
    return 50 - 50 * to_x, 50 - 50 * to_y, 50 + 50 * to_x, 50 + 50 * to_y


def gradient_svg(gradient, aspect_ratio=16 / 9):
    x1, y1, x2, y2 = _svg_coords(gradient.angle)
    width, height = export_dimensions(aspect_ratio)
    stop_elements = "\n".join(
        f'    <stop offset="{s.position:g}%" stop-color="{s.hex}"/>'
        for s in sorted_stops(gradient.stops)
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" '
        f'width="{width}" height="{height}">\n'
        "  <defs>\n"
        f'    <linearGradient id="grad" x1="{x1:.2f}%" y1="{y1:.2f}%" x2="{x2:.2f}%" y2="{y2:.2f}%">\n'
        f"{stop_elements}\n"
        "    </linearGradient>\n"
        "  </defs>\n"
        f'  <rect width="{width}" height="{height}" fill="url(#grad)"/>\n'
        "</svg>"
    )


def tailwind_direction(angle):
    sector = int(normalize_hue(angle + 22.5) // 45)
    return TAILWIND_DIRECTIONS[sector % len(TAILWIND_DIRECTIONS)]


def gradient_tailwind(gradient):
    """Tailwind utility classes; Tailwind only has from/via/to stops.

    Returns:
        TailwindGradient: ``warning`` is None unless stops had to be dropped
    """
    stops = sorted_stops(gradient.stops)
    direction = tailwind_direction(gradient.angle)
    if not stops:
        return TailwindGradient(f"bg-gradient-{direction}", None)

    first, last = stops[0], stops[-1]
    if len(stops) <= 2:
        return TailwindGradient(
            f"bg-gradient-{direction} from-[{first.hex}] to-[{last.hex}]", None
        )
    if len(stops) == 3:
        return TailwindGradient(
            f"bg-gradient-{direction} from-[{first.hex}] via-[{stops[1].hex}] to-[{last.hex}]",
            None,
        )

    middle_index = len(stops) // 2
    warning = (
        "tailwind only supports 3 color stops (from/via/to). "
        f"showing stops 1, {middle_index + 1}, and {len(stops)} of {len(stops)}."
    )
    return TailwindGradient(
        f"bg-gradient-{direction} from-[{first.hex}] via-[{stops[middle_index].hex}] to-[{last.hex}]",
        warning,
    )


def render_gradient_png(gradient, aspect_ratio=16 / 9, max_dim=MAX_EXPORT_DIMENSION):
    """Rasterize the gradient with sRGB interpolation between stops."""
    width, height = export_dimensions(aspect_ratio, max_dim)
    stops = sorted_stops(gradient.stops)
    if not stops:
        raise ValueError("a gradient needs at least one stop")

    rad = math.radians(gradient.angle)
    half_diagonal = math.hypot(width, height) / 2
    ys, xs = np.mgrid[0:height, 0:width] + 0.5
    # Project every pixel onto the gradient line through the image centre
    t = ((xs - width / 2) * math.sin(rad) - (ys - height / 2) * math.cos(rad)) / (
        2 * half_diagonal
    ) + 0.5

    positions = [s.position / 100 for s in stops]
    rgb = np.array([hex_to_rgb(s.hex) for s in stops], dtype=float)
    channels = [np.interp(t, positions, rgb[:, i]) for i in range(3)]
    pixels = np.clip(np.rint(np.stack(channels, axis=-1)), 0, 255).astype(np.uint8)

    buffer = io.BytesIO()
    Image.fromarray(pixels).save(buffer, format="PNG")
    return buffer.getvalue()
