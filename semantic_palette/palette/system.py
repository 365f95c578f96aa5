import logging
from collections import namedtuple
from datetime import datetime, timezone

from ..errors import InvalidHexError
from ..naming import detect_color_name
from .options import DEFAULT_OPTIONS, BaseColorSpec
from .presets import get_preset
from .scale import generate_scale
from .tokens import derive_tokens

logger = logging.getLogger(__name__)

VERSION = "2.0.0"

ColorSystem = namedtuple("ColorSystem", ["neutral_scale", "primary_scale", "tokens", "meta"])
SystemMeta = namedtuple("SystemMeta", ["neutral_name", "primary_name", "generated_at", "version"])

_AUTO_NAMES = (None, "", "auto")


def _as_spec(value, default_name):
    if isinstance(value, BaseColorSpec):
        return value
    if isinstance(value, str):
        return BaseColorSpec(default_name, value)
    name, hex_value = value
    return BaseColorSpec(name, hex_value)


def _family_name(spec, options):
    if options.auto_detect_color_names and spec.name in _AUTO_NAMES:
        return detect_color_name(spec.hex_value, options.color_space_method)
    return spec.name or "custom"


def build_color_system(neutral, primary, options=None):
    """Generate both scales and the semantic tokens in one pass.

    The result is an immutable value; on any configuration change build a
    new one and replace the old reference.

    Args:
        neutral: BaseColorSpec, (name, hex) pair, or bare hex (named "neutral")
        primary: BaseColorSpec, (name, hex) pair, or bare hex (named "primary")
        options: GenerationOptions (defaults apply when None)

    Returns:
        ColorSystem, or None if either base color is invalid
    """
    options = options or DEFAULT_OPTIONS
    neutral = _as_spec(neutral, "neutral")
    primary = _as_spec(primary, "primary")

    try:
        neutral = neutral.validated()
        primary = primary.validated()
    except InvalidHexError as exc:
        logger.warning("Cannot build color system: %s", exc)
        return None

    neutral_name = _family_name(neutral, options)
    primary_name = _family_name(primary, options)

    neutral_scale = generate_scale(neutral.hex_value, neutral_name, options)
    primary_scale = generate_scale(primary.hex_value, primary_name, options)
    if neutral_scale is None or primary_scale is None:
        return None

    tokens = derive_tokens(
        neutral_scale,
        primary_scale,
        neutral_name,
        primary_name,
        options,
        primary_base_hex=primary.hex_value,
    )
    meta = SystemMeta(
        neutral_name=neutral_name,
        primary_name=primary_name,
        generated_at=datetime.now(timezone.utc).isoformat(),
        version=VERSION,
    )
    return ColorSystem(neutral_scale, primary_scale, tokens, meta)


def build_preset_system(name, **option_overrides):
    """Build the color system for a named preset, optionally overriding options."""
    preset = get_preset(name)
    options = preset.options.merged(**option_overrides)
    return build_color_system(preset.neutral, preset.primary, options)


def scale_families(system):
    """``((key, scale), (key, scale))`` for the neutral and primary scales.

    Keys are the family names, suffixed with ``-neutral`` / ``-primary`` when
    both scales share a name so exported variables never overwrite each other.
    """
    neutral_key, primary_key = system.meta.neutral_name, system.meta.primary_name
    if neutral_key == primary_key:
        neutral_key, primary_key = f"{neutral_key}-neutral", f"{primary_key}-primary"
    return ((neutral_key, system.neutral_scale), (primary_key, system.primary_scale))
