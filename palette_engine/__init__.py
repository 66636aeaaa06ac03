from .color import (
    HSL,
    RGB,
    Oklab,
    Oklch,
    format_color,
    hex_to_hsl,
    hex_to_oklab,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_hex,
    is_valid_hex,
    normalize_hex,
    oklab_to_hex,
    oklch_to_hex,
    random_hex,
    rgb_to_hex,
)
from .contrast import check_contrast, contrast_ratio, describe_contrast, wcag_level
from .errors import (
    CorpusError,
    InvalidColorError,
    PaletteEngineError,
    UnknownFormatError,
    UnknownPresetError,
)
from .history import History, HistoryState
from .naming import ColorName, get_color_name
from .presets import (
    PALETTE_PRESETS,
    PalettePreset,
    find_active_preset,
    generate_preset_palette,
    get_preset,
    is_preset_active,
)
from .relationships import COLOR_RELATIONSHIPS, ColorRelationship, generate_related_color
from .variations import generate_shades, generate_tints, generate_tones

__version__ = "0.1.0"

__all__ = [
    "COLOR_RELATIONSHIPS",
    "HSL",
    "PALETTE_PRESETS",
    "RGB",
    "ColorName",
    "ColorRelationship",
    "CorpusError",
    "History",
    "HistoryState",
    "InvalidColorError",
    "Oklab",
    "Oklch",
    "PaletteEngineError",
    "PalettePreset",
    "UnknownFormatError",
    "UnknownPresetError",
    "check_contrast",
    "contrast_ratio",
    "describe_contrast",
    "find_active_preset",
    "format_color",
    "generate_preset_palette",
    "generate_related_color",
    "generate_shades",
    "generate_tints",
    "generate_tones",
    "get_color_name",
    "get_preset",
    "hex_to_hsl",
    "hex_to_oklab",
    "hex_to_oklch",
    "hex_to_rgb",
    "hsl_to_hex",
    "is_preset_active",
    "is_valid_hex",
    "normalize_hex",
    "oklab_to_hex",
    "oklch_to_hex",
    "random_hex",
    "rgb_to_hex",
    "wcag_level",
]
