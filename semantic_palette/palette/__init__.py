from .loader import load_config
from .options import DEFAULT_OPTIONS, BaseColorSpec, GenerationOptions
from .presets import PRESETS, get_preset
from .scale import ScaleEntry, generate_scale, synthesize_scale
from .system import ColorSystem, SystemMeta, build_color_system, build_preset_system, scale_families
from .tokens import TOKEN_NAMES, SemanticToken, TokenValue, derive_tokens

__all__ = [
    "BaseColorSpec",
    "ColorSystem",
    "DEFAULT_OPTIONS",
    "GenerationOptions",
    "PRESETS",
    "ScaleEntry",
    "SemanticToken",
    "SystemMeta",
    "TOKEN_NAMES",
    "TokenValue",
    "build_color_system",
    "build_preset_system",
    "derive_tokens",
    "generate_scale",
    "get_preset",
    "load_config",
    "scale_families",
    "synthesize_scale",
]
