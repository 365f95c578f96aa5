"""OKLCH-based color scales and semantic light/dark design tokens."""

from .contrast import (
    apca_contrast,
    best_family_match,
    contrast_info,
    contrast_ratio,
    perceptual_contrast,
)
from .errors import InvalidHexError, MissingScaleEntryError, PaletteError
from .naming import detect_color_name
from .palette import (
    DEFAULT_OPTIONS,
    PRESETS,
    TOKEN_NAMES,
    BaseColorSpec,
    ColorSystem,
    GenerationOptions,
    build_color_system,
    build_preset_system,
    derive_tokens,
    generate_scale,
    get_preset,
    load_config,
)
from .palette.system import VERSION as __version__
from .spaces import PerceptualColor, hex_to_perceptual, perceptual_to_hex

__all__ = [
    "BaseColorSpec",
    "ColorSystem",
    "DEFAULT_OPTIONS",
    "GenerationOptions",
    "InvalidHexError",
    "MissingScaleEntryError",
    "PRESETS",
    "PaletteError",
    "PerceptualColor",
    "TOKEN_NAMES",
    "apca_contrast",
    "best_family_match",
    "build_color_system",
    "build_preset_system",
    "contrast_info",
    "contrast_ratio",
    "derive_tokens",
    "detect_color_name",
    "generate_scale",
    "get_preset",
    "hex_to_perceptual",
    "load_config",
    "perceptual_contrast",
    "perceptual_to_hex",
]
