"""Share links of the form ``?colors=ff5733,3498db&locked=1,0``."""

import re
from collections import namedtuple
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

SharedPalette = namedtuple("SharedPalette", ["colors", "locked"])

_TOKEN = re.compile(r"[0-9a-fA-F]{6}")


def _strip_query(base_url):
    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def encode_share_url(colors, locked, base_url):
    """Build a share link; lock flags are only included if any color is locked."""
    base = _strip_query(base_url)
    if not colors:
        return base

    params = {"colors": ",".join(c.lstrip("#") for c in colors)}
    locked = list(locked or [])
    if any(locked):
        params["locked"] = ",".join("1" if flag else "0" for flag in locked)
    return f"{base}?{urlencode(params, safe=',')}"


def decode_share_url(url):
    """Read a palette back out of a share link (or just its ``?query``).

    Invalid color tokens are dropped. Missing lock flags default to locked,
    since a shared palette should survive the first regenerate.

    Returns:
        SharedPalette, or None when the link carries no valid colors
    """
    params = parse_qs(urlsplit(url).query)
    color_values = params.get("colors")
    if not color_values:
        return None

    colors = [
        f"#{token.strip().lower()}"
        for token in color_values[0].split(",")
        if _TOKEN.fullmatch(token.strip())
    ]
    if not colors:
        return None

    locked_values = params.get("locked")
    if locked_values:
        locked = [flag == "1" for flag in locked_values[0].split(",")]
        locked += [True] * (len(colors) - len(locked))
        locked = locked[: len(colors)]
    else:
        locked = [True] * len(colors)

    return SharedPalette(colors, locked)
