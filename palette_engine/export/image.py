"""Palette swatch images as PNG (Pillow) or SVG."""

import io
import math
from collections import namedtuple
from xml.sax.saxutils import escape

from PIL import Image, ImageDraw, ImageFont

from ..color import hex_to_rgb
from ..naming import get_color_name

LAYOUTS = ("horizontal", "vertical", "grid", "circles")
LABELS = ("none", "hex", "name")
SIZE_WIDTHS = {"small": 800, "medium": 1200, "large": 1920}

PADDING = 40
LABEL_HEIGHT = 24
LABEL_FONT_SIZE = 14
GRID_GAP = 10
CIRCLE_GAP = 20
CANVAS_BACKGROUND = "#1a1a1a"

Layout = namedtuple(
    "Layout", ["width", "height", "item_width", "item_height", "cols", "rows", "label_space"]
)


def text_color(bg_hex):
    """Near-black on light swatches, white on dark ones."""
    r, g, b = hex_to_rgb(bg_hex)
    return "#111111" if 0.2126 * r + 0.7152 * g + 0.0722 * b > 160 else "#ffffff"


def calculate_layout(count, layout, base_width, has_labels):
    label_space = LABEL_HEIGHT if has_labels else 0
    content_width = base_width - PADDING * 2

    if layout == "horizontal":
        item_width = content_width // count
        item_height = min(int(item_width * 1.5), 300)
        height = item_height + label_space + PADDING * 2
        return Layout(base_width, height, item_width, item_height, count, 1, label_space)

    if layout == "vertical":
        item_width = min(content_width, 400)
        item_height = 80
        height = count * (item_height + label_space) + PADDING * 2
        return Layout(item_width + PADDING * 2, height, item_width, item_height, 1, count, label_space)

    if layout == "grid":
        cols = math.ceil(math.sqrt(count))
        rows = math.ceil(count / cols)
        item_width = (content_width - (cols - 1) * GRID_GAP) // cols
        # Label space is always reserved so grids line up
        height = rows * (item_width + LABEL_HEIGHT) + (rows - 1) * GRID_GAP + PADDING * 2
        return Layout(base_width, height, item_width, item_width, cols, rows, LABEL_HEIGHT)

    if layout == "circles":
        cols = min(count, 5)
        rows = math.ceil(count / cols)
        size = min((content_width - (cols - 1) * CIRCLE_GAP) // cols, 180)
        width = cols * (size + CIRCLE_GAP) - CIRCLE_GAP + PADDING * 2
        height = rows * (size + label_space + CIRCLE_GAP) - CIRCLE_GAP + PADDING * 2
        return Layout(width, height, size, size, cols, rows, label_space)

    raise ValueError(f"unknown layout: {layout!r}")


def item_position(index, layout, dims):
    if layout == "horizontal":
        return PADDING + index * dims.item_width, PADDING
    if layout == "vertical":
        return PADDING, PADDING + index * (dims.item_height + dims.label_space)

    gap = GRID_GAP if layout == "grid" else CIRCLE_GAP
    col = index % dims.cols
    row = index // dims.cols
    return (
        PADDING + col * (dims.item_width + gap),
        PADDING + row * (dims.item_height + dims.label_space + gap),
    )


def _labels_for(colors, labels, names):
    if labels == "none":
        return [None] * len(colors)
    if labels == "hex":
        return [c.upper() for c in colors]
    if names is None:
        names = [get_color_name(c).name for c in colors]
    return [name or c.upper() for c, name in zip(colors, names)]


def _prepare(colors, layout, labels, size):
    if not colors:
        raise ValueError("cannot render an empty palette")
    if labels not in LABELS:
        raise ValueError(f"unknown label mode: {labels!r}")
    if size not in SIZE_WIDTHS:
        raise ValueError(f"unknown image size: {size!r}")
    return calculate_layout(len(colors), layout, SIZE_WIDTHS[size], labels != "none")


def _draw_label(draw, font, text, center_x, baseline_y, fill):
    width = draw.textlength(text, font=font)
    draw.text((center_x - width / 2, baseline_y - LABEL_FONT_SIZE), text, font=font, fill=fill)


def _draw_dashed_circle(draw, box, color, dash=6, gap=4):
    radius = (box[2] - box[0]) / 2
    circumference = 2 * math.pi * radius
    step = 360 * (dash + gap) / circumference
    sweep = 360 * dash / circumference
    angle = 0.0
    while angle < 360:
        draw.arc(box, angle, min(angle + sweep, 360), fill=color, width=2)
        angle += step


def render_palette_png(colors, layout="horizontal", labels="hex", size="medium", names=None):
    """Render the palette as PNG bytes.

    Args:
        colors: Hex colors
        layout: horizontal, vertical, grid or circles
        labels: none, hex or name
        size: small, medium or large
        names: Optional display names when labels="name" (looked up otherwise)
    """
    dims = _prepare(colors, layout, labels, size)
    image = Image.new("RGB", (dims.width, dims.height), CANVAS_BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(size=LABEL_FONT_SIZE)

    for i, (color, label) in enumerate(zip(colors, _labels_for(colors, labels, names))):
        x, y = item_position(i, layout, dims)
        if layout == "circles":
            d = dims.item_width
            box = (x, y, x + d, y + d)
            draw.ellipse(box, fill=color)
            _draw_dashed_circle(draw, box, text_color(color))
            if label:
                _draw_label(draw, font, label, x + d / 2, y + d + LABEL_HEIGHT - 4, "#ffffff")
            continue

        w, h = dims.item_width, dims.item_height
        draw.rectangle((x, y, x + w - 1, y + h - 1), fill=color)
        if label:
            if layout == "vertical":
                _draw_label(draw, font, label, x + w / 2, y + h + LABEL_HEIGHT - 6, "#ffffff")
            else:
                _draw_label(draw, font, label, x + w / 2, y + h / 2 + LABEL_FONT_SIZE / 3, text_color(color))

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


_XML_QUOTES = {'"': "&quot;", "'": "&#39;"}


def _svg_text(x, y, fill, label):
    text = escape(label, _XML_QUOTES)
    return (
        f'<text x="{x:g}" y="{y:g}" fill="{fill}" font-family="monospace" '
        f'font-size="{LABEL_FONT_SIZE}" text-anchor="middle">{text}</text>'
    )


def render_palette_svg(colors, layout="horizontal", labels="hex", size="medium", names=None):
    """Render the palette as an SVG document string."""
    dims = _prepare(colors, layout, labels, size)
    elements = []

    for i, (color, label) in enumerate(zip(colors, _labels_for(colors, labels, names))):
        x, y = item_position(i, layout, dims)
        if layout == "circles":
            r = dims.item_width / 2
            elements.append(
                f'<circle cx="{x + r:g}" cy="{y + r:g}" r="{r:g}" fill="{color}" '
                f'stroke="{text_color(color)}" stroke-width="2" stroke-dasharray="6,4"/>'
            )
            if label:
                elements.append(_svg_text(x + r, y + dims.item_width + LABEL_HEIGHT - 4, "#ffffff", label))
            continue

        w, h = dims.item_width, dims.item_height
        elements.append(f'<rect x="{x}" y="{y}" width="{w}" height="{h}" fill="{color}"/>')
        if label:
            if layout == "vertical":
                elements.append(_svg_text(x + w / 2, y + h + LABEL_HEIGHT - 6, "#ffffff", label))
            else:
                elements.append(
                    _svg_text(x + w / 2, y + h / 2 + LABEL_FONT_SIZE / 3, text_color(color), label)
                )

    body = "\n  ".join(elements)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{dims.width}" height="{dims.height}" '
        f'viewBox="0 0 {dims.width} {dims.height}">\n'
        f'  <rect width="100%" height="100%" fill="{CANVAS_BACKGROUND}"/>\n'
        f"  {body}\n"
        f"</svg>"
    )
