from collections import namedtuple
from types import MappingProxyType

from .options import BaseColorSpec, GenerationOptions

Preset = namedtuple("Preset", ["neutral", "primary", "title", "options"])

PRESETS = MappingProxyType(
    {
        "default": Preset(
            BaseColorSpec("zinc", "#71717a"),
            BaseColorSpec("blue", "#3b82f6"),
            "Default Design System",
            GenerationOptions(auto_detect_color_names=True),
        ),
        "modern": Preset(
            BaseColorSpec("slate", "#64748b"),
            BaseColorSpec("indigo", "#6366f1"),
            "Modern Design System",
            GenerationOptions(auto_detect_color_names=True),
        ),
        "natural": Preset(
            BaseColorSpec("stone", "#78716c"),
            BaseColorSpec("emerald", "#10b981"),
            "Natural Design System",
            GenerationOptions(auto_detect_color_names=True),
        ),
        "custom": Preset(
            BaseColorSpec("neutral", "#6b7280"),
            BaseColorSpec("primary", "#8b5cf6"),
            "Custom Design System",
            GenerationOptions(),
        ),
    }
)

DEFAULT_PRESET = "default"


def get_preset(name):
    """Look up a Preset by name. Raises KeyError."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; available: {', '.join(PRESETS)}") from None
