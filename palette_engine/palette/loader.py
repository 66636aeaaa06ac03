import json

from ..color import normalize_hex
from ..errors import InvalidColorError


def load_palette_from_json(json_path):
    """Load a palette from JSON as a list of hex colors.

    Accepts the ``{"colors": [...]}`` layout written by ``export_json`` as well
    as a flat ``{"role": "#hex"}`` mapping. Keys starting with ``_`` hold
    metadata and are skipped.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (list of hex colors, metadata dict)
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        data = {"colors": data}

    metadata = {}
    values = []
    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            metadata[key[1:]] = value
            continue
        if key == "colors" and isinstance(value, list):
            values.extend(value)
        elif isinstance(value, str) and value.startswith("#"):
            values.append(value)

    colors = []
    for value in values:
        try:
            colors.append(normalize_hex(value))
        except InvalidColorError:
            continue
    return colors, metadata
