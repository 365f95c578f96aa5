import json

from ..color import format_color
from ..palette.system import scale_families


def system_to_dict(system, fmt="hex", include_themes=True):
    """Plain-dict view of a color system, ready for JSON.

    Args:
        system: The ColorSystem
        fmt: Color format for values ("hex", "rgb" or "hsl")
        include_themes: Include the light/dark semantic tokens
    """
    meta = system.meta
    data = {
        "colors": {
            key: {str(weight): format_color(entry.hex, fmt) for weight, entry in scale.items()}
            for key, scale in scale_families(system)
        },
    }

    if include_themes:
        data["semanticTokens"] = {
            "light": {name: format_color(token.light.hex, fmt) for name, token in system.tokens.items()},
            "dark": {name: format_color(token.dark.hex, fmt) for name, token in system.tokens.items()},
        }

    data["_meta"] = {
        "neutralName": meta.neutral_name,
        "primaryName": meta.primary_name,
        "generatedAt": meta.generated_at,
        "version": meta.version,
    }
    return data


def export_json(system, filepath, fmt="hex", include_themes=True):
    """Write the color system as JSON.

    Args:
        system: The ColorSystem
        filepath: Output file path
        fmt: Color format for values ("hex", "rgb" or "hsl")
        include_themes: Include the light/dark semantic tokens
    """
    data = system_to_dict(system, fmt=fmt, include_themes=include_themes)
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
