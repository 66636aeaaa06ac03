from .formats import ART_FORMATS, CODE_FORMATS, EXPORT_FORMATS, export_palette, get_format
from .gradient import (
    GradientStop,
    LinearGradient,
    gradient_css,
    gradient_svg,
    gradient_tailwind,
    render_gradient_png,
    stops_from_palette,
)
from .image import render_palette_png, render_palette_svg
from .json_export import export_json

__all__ = [
    "ART_FORMATS",
    "CODE_FORMATS",
    "EXPORT_FORMATS",
    "GradientStop",
    "LinearGradient",
    "export_json",
    "export_palette",
    "get_format",
    "gradient_css",
    "gradient_svg",
    "gradient_tailwind",
    "render_gradient_png",
    "render_palette_png",
    "render_palette_svg",
    "stops_from_palette",
]
