import json

from ..contrast import check_contrast, describe_contrast
from ..naming import get_color_name
from ..presets import find_active_preset


def export_json(colors, filepath, name=None, include_names=True):
    """Export palette as JSON with naming, preset and contrast metadata.

    Args:
        colors: Hex colors, in palette order
        filepath: Output file path
        name: Optional palette name
        include_names: Whether to look up a display name per color
    """
    data = {"colors": list(colors)}

    if name:
        data["_name"] = name

    if include_names:
        data["_names"] = [get_color_name(c).name for c in colors]

    preset = find_active_preset(colors)
    if preset is not None:
        data["_preset"] = preset.id

    data["_contrast"] = {c: describe_contrast(check_contrast(c)) for c in colors}

    data["_note"] = "Keys starting with _ are metadata and are ignored on import"

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
