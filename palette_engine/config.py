import os
from pathlib import Path

# Preset matching
PRESET_TOLERANCE = 2  # Allowed slack on preset S/L bounds and hue edges
MONOCHROME_MAX_SATURATION = 5  # Presets this desaturated ignore hue entirely
DEFAULT_PRESET_COUNT = 5
HUE_JITTER_FRACTION = 0.3  # Full-circle presets: jitter as a share of the hue segment

# Variations
DEFAULT_VARIATION_COUNT = 9
TINT_TARGET_LIGHTNESS = 97
SHADE_TARGET_LIGHTNESS = 3
TONE_TARGET_SATURATION = 2

# Naming
CSS_MATCH_THRESHOLD_SQ = 0.0004  # Squared Oklab distance (~0.02 linear)

# WCAG 2.1 contrast tiers
WCAG_AAA = 7.0
WCAG_AA = 4.5
WCAG_AA_LARGE = 3.0

# Persistence
SESSION_MAX_AGE = 24 * 60 * 60  # seconds

NAME_CORPUS_ENV = "PALETTE_ENGINE_NAME_CORPUS"
DATA_DIR_ENV = "PALETTE_ENGINE_DATA_DIR"
SHARE_URL_ENV = "PALETTE_ENGINE_SHARE_URL"
DEFAULT_SHARE_URL = "http://localhost:5173/"


def name_corpus_path():
    """Path of a user-supplied name corpus, or None to use the bundled one."""
    value = os.environ.get(NAME_CORPUS_ENV)
    return Path(value).expanduser() if value else None


def data_dir():
    """Directory holding saved palettes and the session file."""
    value = os.environ.get(DATA_DIR_ENV)
    if value:
        return Path(value).expanduser()
    return Path.home() / ".palette-engine"


def share_base_url():
    """Base URL that share links point at."""
    return os.environ.get(SHARE_URL_ENV, DEFAULT_SHARE_URL)
