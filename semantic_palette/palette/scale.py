import logging
from collections import namedtuple
from types import MappingProxyType

from ..color import normalize_hex
from ..errors import InvalidHexError
from ..spaces import WEIGHTS, PerceptualColor, get_strategy
from .options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

ScaleEntry = namedtuple("ScaleEntry", ["weight", "hex", "display_name", "perceptual"])


def capitalize(name):
    name = str(name)
    return name[:1].upper() + name[1:]


def nearest_weight(lightness, curve):
    """Weight whose target lightness is closest to ``lightness`` (first wins on ties)."""
    best_weight, best_diff = None, None
    for weight in WEIGHTS:
        diff = abs(lightness - curve[weight])
        if best_diff is None or diff < best_diff:
            best_weight, best_diff = weight, diff
    return best_weight


def make_scale(entries):
    """Freeze a weight -> ScaleEntry dict into a read-only, weight-ordered mapping."""
    return MappingProxyType({weight: entries[weight] for weight in sorted(entries)})


def generate_scale(base_hex, family_name, options=None):
    """Generate an 11-step scale (50-950) from a base color.

    With smart positioning (the default) the base color is placed, unmodified,
    at the weight whose target lightness is nearest its own; every other
    weight is synthesized from the lightness curve at the base hue, with
    chroma attenuated towards the light and dark ends. With
    ``options.use_fixed_contrast_curve`` every weight is synthesized.

    Args:
        base_hex: Base color, ``#rrggbb`` or ``rrggbb``
        family_name: Family name used for display names ("blue" -> "Blue 500")
        options: GenerationOptions (defaults apply when None)

    Returns:
        Read-only mapping weight -> ScaleEntry, or None if base_hex is invalid
    """
    options = options or DEFAULT_OPTIONS
    strategy = get_strategy(options.color_space_method)

    try:
        base_hex = normalize_hex(base_hex)
        base = strategy.sanitize(strategy.to_perceptual(base_hex))
    except InvalidHexError:
        logger.warning("Cannot generate %s scale from invalid color %r", family_name, base_hex)
        return None

    curve = strategy.lightness_curve
    fixed_curve = options.use_fixed_contrast_curve
    anchor = None if fixed_curve else nearest_weight(base.lightness, curve)
    if anchor is not None:
        logger.debug(
            "Placing %s base %s (L=%.3f) at weight %d via %s",
            family_name,
            base_hex,
            base.lightness,
            anchor,
            strategy.name,
        )

    label = capitalize(family_name)
    entries = {}
    for weight in WEIGHTS:
        if weight == anchor:
            entries[weight] = ScaleEntry(weight, base_hex, f"{label} {weight}", base)
        else:
            entries[weight] = _synthesize(strategy, weight, label, base.chroma, base.hue, fixed_curve)

    return make_scale(entries)


def synthesize_scale(family_name, chroma, hue, method="oklch", fixed_curve=True):
    """Build a scale purely from the lightness curve at a given chroma and hue.

    Used for colors that have no user-supplied anchor, such as status colors.
    """
    strategy = get_strategy(method)
    label = capitalize(family_name)
    return make_scale(
        {
            weight: _synthesize(strategy, weight, label, max(0.0, chroma), hue % 360.0, fixed_curve)
            for weight in WEIGHTS
        }
    )


def _synthesize(strategy, weight, label, chroma, hue, fixed_curve):
    lightness = strategy.lightness_curve[weight]
    if strategy.synthesis_lightness_range is not None:
        low, high = strategy.synthesis_lightness_range
        lightness = max(low, min(high, lightness))
    chroma = strategy.adjust_chroma(weight, lightness, chroma, fixed_curve)
    color = strategy.clamp_chroma(PerceptualColor(lightness, chroma, hue))
    return ScaleEntry(weight, strategy.to_hex(color), f"{label} {weight}", color)
