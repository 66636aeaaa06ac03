import json
from collections import namedtuple

from ..color import hex_to_rgb
from ..errors import UnknownFormatError
from .swatches import export_aco, export_ase, export_procreate

ExportFormatInfo = namedtuple(
    "ExportFormatInfo", ["value", "label", "description", "extension", "mime_type", "category"]
)

EXPORT_FORMATS = (
    # Code formats
    ExportFormatInfo("css", "CSS Variables", ":root { --color-1: ... }", "css", "text/css", "code"),
    ExportFormatInfo("json", "JSON", '{ "colors": [...] }', "json", "application/json", "code"),
    ExportFormatInfo("tailwind", "Tailwind Config", "colors: { ... }", "js", "text/javascript", "code"),
    ExportFormatInfo("scss", "SCSS Variables", "$color-1: ...", "scss", "text/x-scss", "code"),
    # Art app formats
    ExportFormatInfo("ase", "Adobe ASE", "Adobe Swatch Exchange", "ase", "application/octet-stream", "art"),
    ExportFormatInfo("aco", "Adobe ACO", "Photoshop Color Swatches", "aco", "application/octet-stream", "art"),
    ExportFormatInfo("procreate", "Procreate Swatches", ".swatches file", "swatches", "application/octet-stream", "art"),
    ExportFormatInfo("gpl", "GIMP Palette", ".gpl palette file", "gpl", "text/plain", "art"),
    ExportFormatInfo("paintnet", "Paint.NET Palette", ".txt palette file", "txt", "text/plain", "art"),
)

CODE_FORMATS = tuple(f for f in EXPORT_FORMATS if f.category == "code")
ART_FORMATS = tuple(f for f in EXPORT_FORMATS if f.category == "art")


def export_css(colors):
    lines = "\n".join(f"  --color-{i + 1}: {c};" for i, c in enumerate(colors))
    return f":root {{\n{lines}\n}}"


def export_json_text(colors):
    return json.dumps({"colors": list(colors)}, indent=2)


def export_tailwind(colors):
    mapping = {f"color-{i + 1}": c for i, c in enumerate(colors)}
    body = json.dumps(mapping, indent=8).replace('"', "'")
    return (
        "// tailwind.config.js\n"
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: {\n"
        f"      colors: {body}\n"
        "    }\n"
        "  }\n"
        "}"
    )


def export_scss(colors):
    return "\n".join(f"$color-{i + 1}: {c};" for i, c in enumerate(colors))


def export_gpl(colors, name="Color Palette Export"):
    """GIMP palette: header, then ``  r   g   b<TAB>#hex`` per color."""
    lines = [f"GIMP Palette\nName: {name}\nColumns: 0\n#"]
    for c in colors:
        r, g, b = hex_to_rgb(c)
        lines.append(f"{r:>3} {g:>3} {b:>3}\t{c}")
    return "\n".join(lines)


def export_paintnet(colors):
    """Paint.NET palette: AARRGGBB per line, ``;`` comments."""
    header = "; Paint.NET Palette\n; Exported from Color Palette"
    lines = [f"FF{c.lstrip('#').upper()}" for c in colors]
    return "\n".join([header] + lines)


_EXPORTERS = {
    "css": export_css,
    "json": export_json_text,
    "tailwind": export_tailwind,
    "scss": export_scss,
    "gpl": export_gpl,
    "paintnet": export_paintnet,
    "aco": export_aco,
    "ase": export_ase,
    "procreate": export_procreate,
}


def get_format(fmt):
    for info in EXPORT_FORMATS:
        if info.value == fmt:
            return info
    raise UnknownFormatError(fmt)


def export_palette(colors, fmt):
    """Export colors in a named format.

    Returns:
        str for text formats, bytes for binary ones (ase, aco, procreate)

    Raises:
        UnknownFormatError: if ``fmt`` is not one of EXPORT_FORMATS
    """
    try:
        exporter = _EXPORTERS[fmt]
    except KeyError:
        raise UnknownFormatError(fmt) from None
    return exporter(list(colors))
