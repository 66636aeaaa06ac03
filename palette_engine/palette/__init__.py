from .extract import extract_colors
from .loader import load_palette_from_json

__all__ = ["extract_colors", "load_palette_from_json"]
