"""Precomputed Oklab name databases for nearest-name lookup.

The default corpus is the xkcd color survey (~950 names) shipped with
matplotlib; a color-name-list style JSON file can replace it through
``PALETTE_ENGINE_NAME_CORPUS``. CSS annotation always uses the 148 CSS
named colors.
"""

import functools
import json
import logging
from collections import namedtuple

import numpy as np

from .. import config
from ..color import Oklab, hex_to_rgb, normalize_hex, srgb_to_oklab
from ..errors import CorpusError, InvalidColorError

logger = logging.getLogger(__name__)

ColorNameEntry = namedtuple("ColorNameEntry", ["name", "hex", "lab"])


class NameDatabase:
    """Immutable list of named colors with their Oklab coordinates.

    Oklab values are computed once here so queries only pay for the scan.
    """

    def __init__(self, named_colors):
        named_colors = [(name, hex_color.lower()) for name, hex_color in named_colors]
        if not named_colors:
            raise CorpusError("a name database needs at least one color")

        rgb = np.array([hex_to_rgb(hex_color) for _, hex_color in named_colors], dtype=float)
        self._labs = srgb_to_oklab(rgb)
        self._labs.setflags(write=False)
        self.entries = tuple(
            ColorNameEntry(name, hex_color, Oklab(*map(float, lab)))
            for (name, hex_color), lab in zip(named_colors, self._labs)
        )

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def nearest(self, lab):
        """Closest entry by squared Euclidean Oklab distance.

        Ties go to the earliest entry.

        Returns:
            tuple: (ColorNameEntry, squared distance)
        """
        diff = self._labs - np.asarray(lab, dtype=float)
        dist_sq = np.einsum("ij,ij->i", diff, diff)
        index = int(np.argmin(dist_sq))
        return self.entries[index], float(dist_sq[index])


def xkcd_colors():
    from matplotlib.colors import XKCD_COLORS

    return [(name.replace("xkcd:", "", 1), hex_color) for name, hex_color in XKCD_COLORS.items()]


def css_colors():
    from matplotlib.colors import CSS4_COLORS

    return list(CSS4_COLORS.items())


def load_corpus_file(path):
    """Read a JSON name corpus: a list of ``{"name": ..., "hex": ...}`` objects.

    Raises:
        CorpusError: if the file is unreadable or an entry is malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CorpusError(f"cannot read name corpus {path}: {e}") from e

    if not isinstance(data, list):
        raise CorpusError(f"name corpus {path} must be a JSON list")

    named_colors = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise CorpusError(f"name corpus {path}: entry {i} has no name")
        try:
            named_colors.append((entry["name"], normalize_hex(entry.get("hex"))))
        except InvalidColorError as e:
            raise CorpusError(f"name corpus {path}: entry {i}: {e}") from e
    return named_colors


@functools.lru_cache(maxsize=None)
def default_databases():
    """Build (name database, CSS database) once per process."""
    corpus_path = config.name_corpus_path()
    if corpus_path is not None:
        logger.debug("Loading name corpus from %s", corpus_path)
        named_colors = load_corpus_file(corpus_path)
    else:
        named_colors = xkcd_colors()

    names = NameDatabase(named_colors)
    css = NameDatabase(css_colors())
    logger.debug("Built name databases: %d names, %d CSS colors", len(names), len(css))
    return names, css
