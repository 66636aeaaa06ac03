"""Binary swatch files for art applications (ACO, ASE, Procreate)."""

import colorsys
import io
import json
import struct
import zipfile

from ..color import hex_to_rgb


def _swatch_names(colors):
    return [f"Color {i + 1}" for i in range(len(colors))]


def _utf16_name(name):
    # UTF-16BE with a trailing NUL; the length field counts the NUL too
    return (name + "\0").encode("utf-16-be")


def export_aco(colors):
    """Photoshop color swatches: a version 1 section followed by a named version 2 section."""
    out = io.BytesIO()

    out.write(struct.pack(">HH", 1, len(colors)))
    for color in colors:
        r, g, b = hex_to_rgb(color)
        out.write(struct.pack(">5H", 0, r * 257, g * 257, b * 257, 0))

    out.write(struct.pack(">HH", 2, len(colors)))
    for color, name in zip(colors, _swatch_names(colors)):
        r, g, b = hex_to_rgb(color)
        out.write(struct.pack(">5H", 0, r * 257, g * 257, b * 257, 0))
        out.write(struct.pack(">I", len(name) + 1))
        out.write(_utf16_name(name))

    return out.getvalue()


def export_ase(colors):
    """Adobe Swatch Exchange 1.0 with one global RGB color block per swatch."""
    out = io.BytesIO()
    out.write(b"ASEF")
    out.write(struct.pack(">HHI", 1, 0, len(colors)))

    for color, name in zip(colors, _swatch_names(colors)):
        r, g, b = hex_to_rgb(color)
        encoded = _utf16_name(name)
        # name length + name + model + 3 floats + color type
        block_length = 2 + len(encoded) + 4 + 12 + 2
        out.write(struct.pack(">HI", 0x0001, block_length))
        out.write(struct.pack(">H", len(name) + 1))
        out.write(encoded)
        out.write(b"RGB ")
        out.write(struct.pack(">3f", r / 255, g / 255, b / 255))
        out.write(struct.pack(">H", 0))

    return out.getvalue()


def export_procreate(colors, name="Color Palette Export"):
    """Procreate .swatches: a ZIP archive holding Swatches.json in HSB."""
    swatches = []
    for color in colors:
        r, g, b = hex_to_rgb(color)
        h, s, v = colorsys.rgb_to_hsv(r / 255, g / 255, b / 255)
        swatches.append(
            {"hue": h, "saturation": s, "brightness": v, "alpha": 1, "colorSpace": 0}
        )

    payload = json.dumps([{"name": name, "swatches": swatches}])
    out = io.BytesIO()
    with zipfile.ZipFile(out, "w", zipfile.ZIP_STORED) as archive:
        archive.writestr("Swatches.json", payload)
    return out.getvalue()
