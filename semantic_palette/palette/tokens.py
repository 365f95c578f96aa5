"""
Semantic token derivation.

Maps a neutral and a primary scale onto named tokens with a light and a dark
value each. Most tokens are a fixed weight lookup: dark-theme tokens use the
mirror-image weight across the scale's midpoint. Interactive and status
tokens are chosen adaptively from the options.
"""

import logging
from collections import namedtuple
from types import MappingProxyType

from ..color import hex_to_rgb, hex_to_rgba, rgb_distance
from ..errors import MissingScaleEntryError
from ..spaces import WEIGHTS, hex_to_perceptual
from .options import DEFAULT_OPTIONS
from .scale import synthesize_scale

logger = logging.getLogger(__name__)

TokenValue = namedtuple("TokenValue", ["hex", "display_name"])
SemanticToken = namedtuple("SemanticToken", ["name", "light", "dark"])

# References resolved against the scales at derivation time
ScaleRef = namedtuple("ScaleRef", ["family", "weight"])
AlphaRef = namedtuple("AlphaRef", ["family", "weight", "alpha"])

NEUTRAL = "neutral"
PRIMARY = "primary"

FOCUS_ALPHA_LIGHT = 0.24
FOCUS_ALPHA_DARK = 0.36

# Exact mode falls back to the default weight beyond this RGB distance
EXACT_MATCH_MAX_DISTANCE = 50
DEFAULT_INTERACTIVE_WEIGHT = 600

WHITE = TokenValue("#ffffff", "base-white")
MODAL_OVERLAY = TokenValue("rgba(0, 0, 0, 0.36)", "alpha-black-modal")

_STATIC_TOKENS = (
    # text
    ("text-primary", ScaleRef(NEUTRAL, 950), ScaleRef(NEUTRAL, 50)),
    ("text-primary-on-brand", ScaleRef(NEUTRAL, 50), ScaleRef(NEUTRAL, 50)),
    ("text-secondary", ScaleRef(NEUTRAL, 900), ScaleRef(NEUTRAL, 300)),
    ("text-tertiary", ScaleRef(NEUTRAL, 700), ScaleRef(NEUTRAL, 400)),
    ("text-quaternary", ScaleRef(NEUTRAL, 500), ScaleRef(NEUTRAL, 400)),
    ("text-white", WHITE, WHITE),
    ("text-disabled", ScaleRef(NEUTRAL, 500), ScaleRef(NEUTRAL, 500)),
    ("text-placeholder", ScaleRef(NEUTRAL, 500), ScaleRef(NEUTRAL, 400)),
    # addition: brand-tinted text
    ("text-brand", ScaleRef(PRIMARY, 700), ScaleRef(PRIMARY, 300)),
    # border
    ("border-primary", ScaleRef(NEUTRAL, 300), ScaleRef(NEUTRAL, 600)),
    ("border-secondary", ScaleRef(NEUTRAL, 400), ScaleRef(NEUTRAL, 700)),
    ("border-tertiary", ScaleRef(NEUTRAL, 200), ScaleRef(NEUTRAL, 900)),
    ("border-disabled", ScaleRef(NEUTRAL, 300), ScaleRef(NEUTRAL, 600)),
    # addition: brand-tinted border
    ("border-brand", ScaleRef(PRIMARY, 500), ScaleRef(PRIMARY, 400)),
    # foreground
    ("fg-primary", ScaleRef(NEUTRAL, 950), ScaleRef(NEUTRAL, 50)),
    ("fg-primary-on-brand", ScaleRef(NEUTRAL, 50), ScaleRef(NEUTRAL, 50)),
    ("fg-secondary", ScaleRef(NEUTRAL, 900), ScaleRef(NEUTRAL, 300)),
    ("fg-tertiary", ScaleRef(NEUTRAL, 700), ScaleRef(NEUTRAL, 400)),
    ("fg-white", WHITE, WHITE),
    ("fg-disabled", ScaleRef(NEUTRAL, 500), ScaleRef(NEUTRAL, 500)),
    # background
    ("bg-primary", ScaleRef(NEUTRAL, 50), ScaleRef(NEUTRAL, 950)),
    ("bg-secondary", ScaleRef(NEUTRAL, 100), ScaleRef(NEUTRAL, 900)),
    ("bg-tertiary", ScaleRef(NEUTRAL, 200), ScaleRef(NEUTRAL, 800)),
    ("bg-base", WHITE, ScaleRef(NEUTRAL, 950)),
    # addition: brand-tinted surface
    ("bg-brand-subtle", ScaleRef(PRIMARY, 50), ScaleRef(PRIMARY, 950)),
    ("bg-modal-overlay", MODAL_OVERLAY, MODAL_OVERLAY),
)

_SECONDARY_INTERACTIVE_TOKENS = (
    (
        "interactive-secondary",
        TokenValue("rgba(0, 0, 0, 0.06)", "alpha-black-200"),
        TokenValue("rgba(255, 255, 255, 0.06)", "alpha-white-200"),
    ),
    (
        "interactive-secondary-hover",
        TokenValue("rgba(0, 0, 0, 0.04)", "alpha-black-100"),
        TokenValue("rgba(255, 255, 255, 0.04)", "alpha-white-100"),
    ),
    (
        "interactive-secondary-active",
        TokenValue("rgba(0, 0, 0, 0.02)", "alpha-black-50"),
        TokenValue("rgba(255, 255, 255, 0.02)", "alpha-white-50"),
    ),
)

STATUSES = ("success", "warning", "error")

# Static status colors: (hex, name) for primary / background / foreground per theme
STATUS_COLORS = MappingProxyType(
    {
        "success": {
            "light": {
                "primary": TokenValue("#16a34a", "green-600"),
                "background": TokenValue("#dcfce7", "green-100"),
                "foreground": TokenValue("#16a34a", "green-600"),
            },
            "dark": {
                "primary": TokenValue("#16a34a", "green-600"),
                "background": TokenValue("#064e3b", "green-900"),
                "foreground": TokenValue("#4ade80", "green-400"),
            },
        },
        "warning": {
            "light": {
                "primary": TokenValue("#eab308", "amber-500"),
                "background": TokenValue("#fef3c7", "amber-100"),
                "foreground": TokenValue("#d97706", "amber-600"),
            },
            "dark": {
                "primary": TokenValue("#eab308", "amber-500"),
                "background": TokenValue("#451a03", "amber-900"),
                "foreground": TokenValue("#fbbf24", "amber-400"),
            },
        },
        "error": {
            "light": {
                "primary": TokenValue("#dc2626", "red-600"),
                "background": TokenValue("#fee2e2", "red-100"),
                "foreground": TokenValue("#dc2626", "red-600"),
            },
            "dark": {
                "primary": TokenValue("#dc2626", "red-600"),
                "background": TokenValue("#450a0a", "red-900"),
                "foreground": TokenValue("#f87171", "red-400"),
            },
        },
    }
)

# Dynamic status colors: fixed OKLCH hue and a boost over the brand chroma.
# Amber hues clip earliest, so warning gets the largest boost.
STATUS_HUES = MappingProxyType({"success": 140.0, "warning": 40.0, "error": 15.0})
STATUS_CHROMA_BOOST = MappingProxyType({"success": 1.3, "warning": 1.6, "error": 1.4})
MAX_STATUS_CHROMA = 0.37

# Weights taken from a dynamic status scale: role -> (light, dark)
STATUS_WEIGHTS = MappingProxyType(
    {
        "primary": (600, 600),
        "background": (100, 900),
        "foreground": (600, 400),
    }
)


def hover_weight(weight):
    """Weight for the hover (and active) state of an interactive color.

    Light colors (300 and below) get darker on hover; everything else gets
    lighter. Moves one step along the scale and never leaves 50-950.
    """
    if weight not in WEIGHTS:
        weight = min(WEIGHTS, key=lambda w: abs(w - weight))
    index = WEIGHTS.index(weight)
    if weight <= 300:
        index = min(index + 1, len(WEIGHTS) - 1)
    else:
        index = max(index - 1, 0)
    return WEIGHTS[index]


def closest_weight(scale, hex_color):
    """(weight, distance) of the scale entry nearest ``hex_color`` in RGB, or (None, None)."""
    target = hex_to_rgb(hex_color)
    if target is None:
        return None, None
    best_weight, best_distance = None, None
    for weight, entry in scale.items():
        rgb = hex_to_rgb(entry.hex)
        if rgb is None:
            continue
        distance = rgb_distance(rgb, target)
        if best_distance is None or distance < best_distance:
            best_weight, best_distance = weight, distance
    return best_weight, best_distance


def interactive_weight(primary_scale, options=None, primary_base_hex=None):
    """Pick the primary weight used for interactive (button/link) colors."""
    options = options or DEFAULT_OPTIONS
    if options.interactive_color_mode != "exact":
        return options.safe_interactive_weight

    if primary_base_hex is None:
        return DEFAULT_INTERACTIVE_WEIGHT
    weight, distance = closest_weight(primary_scale or {}, primary_base_hex)
    if weight is None or distance > EXACT_MATCH_MAX_DISTANCE:
        logger.debug(
            "No primary weight within %d of %s, using %d",
            EXACT_MATCH_MAX_DISTANCE,
            primary_base_hex,
            DEFAULT_INTERACTIVE_WEIGHT,
        )
        return DEFAULT_INTERACTIVE_WEIGHT
    return weight


def status_chroma(primary_scale, status):
    """OKLCH chroma for a status color, harmonized with the primary scale."""
    entry = primary_scale.get(500) or primary_scale.get(600)
    if entry is None:
        raise MissingScaleEntryError(PRIMARY, 500)
    source = hex_to_perceptual(entry.hex).chroma
    return min(source * STATUS_CHROMA_BOOST[status], MAX_STATUS_CHROMA)


def build_status_scales(primary_scale):
    """Synthesize success/warning/error scales at the primary scale's chroma."""
    return MappingProxyType(
        {
            status: synthesize_scale(
                status, status_chroma(primary_scale, status), STATUS_HUES[status]
            )
            for status in STATUSES
        }
    )


def _resolve(ref, scales, names):
    if isinstance(ref, TokenValue):
        return ref
    family, weight = ref.family, ref.weight
    entry = (scales.get(family) or {}).get(weight)
    if entry is None:
        raise MissingScaleEntryError(names.get(family, family), weight)
    name = f"{names.get(family, family)}-{weight}"
    if isinstance(ref, AlphaRef):
        return TokenValue(hex_to_rgba(entry.hex, ref.alpha), f"{name}-alpha-{round(ref.alpha * 100)}")
    return TokenValue(entry.hex, name)


def _status_refs(status, dynamic):
    """(name, light_ref, dark_ref) rows for one status color."""
    rows = []
    if dynamic:
        for role, (light_weight, dark_weight) in STATUS_WEIGHTS.items():
            rows.append(
                (f"{status}-{role}", ScaleRef(status, light_weight), ScaleRef(status, dark_weight))
            )
        light_fg, dark_fg = STATUS_WEIGHTS["foreground"]
        rows.append(
            (
                f"{status}-focus",
                AlphaRef(status, light_fg, FOCUS_ALPHA_LIGHT),
                AlphaRef(status, dark_fg, FOCUS_ALPHA_DARK),
            )
        )
        return rows

    colors = STATUS_COLORS[status]
    for role in STATUS_WEIGHTS:
        rows.append((f"{status}-{role}", colors["light"][role], colors["dark"][role]))
    rows.append(
        (
            f"{status}-focus",
            _alpha_value(colors["light"]["foreground"], FOCUS_ALPHA_LIGHT),
            _alpha_value(colors["dark"]["foreground"], FOCUS_ALPHA_DARK),
        )
    )
    return rows


def _alpha_value(value, alpha):
    return TokenValue(hex_to_rgba(value.hex, alpha), f"{value.display_name}-alpha-{round(alpha * 100)}")


def derive_tokens(
    neutral_scale,
    primary_scale,
    neutral_name,
    primary_name,
    options=None,
    primary_base_hex=None,
    status_scales=None,
):
    """Derive the semantic token map from a neutral and a primary scale.

    Args:
        neutral_scale: Neutral ColorScale (weight -> ScaleEntry)
        primary_scale: Primary ColorScale
        neutral_name: Family label used in token display names
        primary_name: Family label used in token display names
        options: GenerationOptions (defaults apply when None)
        primary_base_hex: The user's primary color, needed for exact interactive mode
        status_scales: Optional prebuilt {status: ColorScale}; built from the
            primary scale when ``options.dynamic_status_chroma`` is set

    Returns:
        Read-only mapping token name -> SemanticToken. A token whose scale
        entry is missing is left out (and logged) rather than failing the map.
    """
    options = options or DEFAULT_OPTIONS
    scales = {NEUTRAL: neutral_scale, PRIMARY: primary_scale}
    names = {NEUTRAL: neutral_name, PRIMARY: primary_name}

    dynamic = status_scales is not None or options.dynamic_status_chroma
    if dynamic and status_scales is None:
        try:
            status_scales = build_status_scales(primary_scale or {})
        except MissingScaleEntryError as exc:
            logger.warning("Falling back to static status colors: %s", exc)
            dynamic = False
    if dynamic:
        for status in STATUSES:
            scales[status] = status_scales.get(status)
            names[status] = status

    base = interactive_weight(primary_scale, options, primary_base_hex)
    hover = hover_weight(base)
    rows = list(_STATIC_TOKENS)
    rows.append(("interactive-primary", ScaleRef(PRIMARY, base), ScaleRef(PRIMARY, base)))
    rows.append(("interactive-primary-hover", ScaleRef(PRIMARY, hover), ScaleRef(PRIMARY, hover)))
    # Active shares the hover weight
    rows.append(("interactive-primary-active", ScaleRef(PRIMARY, hover), ScaleRef(PRIMARY, hover)))
    rows.extend(_SECONDARY_INTERACTIVE_TOKENS)
    rows.append(
        (
            "interactive-focus",
            AlphaRef(PRIMARY, base, FOCUS_ALPHA_LIGHT),
            AlphaRef(PRIMARY, base, FOCUS_ALPHA_DARK),
        )
    )
    for status in STATUSES:
        rows.extend(_status_refs(status, dynamic))

    tokens = {}
    for name, light_ref, dark_ref in rows:
        try:
            light = _resolve(light_ref, scales, names)
            dark = _resolve(dark_ref, scales, names)
        except MissingScaleEntryError as exc:
            logger.warning("Skipping token %s: %s", name, exc)
            continue
        tokens[name] = SemanticToken(name, light, dark)
    return MappingProxyType(tokens)


TOKEN_NAMES = tuple(
    [row[0] for row in _STATIC_TOKENS]
    + [
        "interactive-primary",
        "interactive-primary-hover",
        "interactive-primary-active",
    ]
    + [row[0] for row in _SECONDARY_INTERACTIVE_TOKENS]
    + ["interactive-focus"]
    + [f"{status}-{role}" for status in STATUSES for role in (*STATUS_WEIGHTS, "focus")]
)
