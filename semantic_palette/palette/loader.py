import json

from .options import BaseColorSpec, GenerationOptions


def _read_base_color(data, family):
    entry = data.get(family)
    if isinstance(entry, str):
        return BaseColorSpec(family, entry)
    if not isinstance(entry, dict):
        raise ValueError(f"Missing base color for {family!r}")
    # "base" and "hex" both appear in saved configurations
    hex_value = entry.get("hex") or entry.get("base") or entry.get("hexValue")
    if hex_value is None:
        raise ValueError(f"Base color {family!r} has no hex value")
    return BaseColorSpec(entry.get("name") or family, hex_value)


def load_config(json_path):
    """Load base colors and options from a JSON configuration file.

    Expected layout::

        {
          "baseColors": {
            "neutral": {"name": "zinc", "hex": "#71717a"},
            "primary": {"name": "blue", "hex": "#3b82f6"}
          },
          "options": {"colorSpaceMethod": "oklch", "dynamicStatusChroma": true}
        }

    Args:
        json_path: Path to the configuration file

    Returns:
        tuple: (neutral BaseColorSpec, primary BaseColorSpec, GenerationOptions)
    """
    with open(json_path) as f:
        data = json.load(f)

    base_colors = data.get("baseColors") or data.get("base_colors") or {}
    neutral = _read_base_color(base_colors, "neutral")
    primary = _read_base_color(base_colors, "primary")
    options = GenerationOptions.from_dict(data.get("options"))

    return neutral, primary, options
