from collections import namedtuple

from ..color import hex_to_oklab
from ..config import CSS_MATCH_THRESHOLD_SQ
from .database import default_databases

ColorName = namedtuple("ColorName", ["name", "css_name"])


def get_color_name(hex_color, names=None, css=None):
    """Find the closest human-readable name for a color in Oklab space.

    Args:
        hex_color: Color as ``#rrggbb``
        names: NameDatabase to search (defaults to the process-wide corpus)
        css: NameDatabase of CSS colors (defaults to the 148 CSS names)

    Returns:
        ColorName: ``css_name`` is None unless a CSS color is within
        the match threshold
    """
    if names is None or css is None:
        default_names, default_css = default_databases()
        names = names if names is not None else default_names
        css = css if css is not None else default_css

    lab = hex_to_oklab(hex_color)
    entry, _ = names.nearest(lab)
    css_entry, css_dist = css.nearest(lab)
    return ColorName(
        entry.name,
        css_entry.name if css_dist < CSS_MATCH_THRESHOLD_SQ else None,
    )
