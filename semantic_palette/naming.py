"""Classify a hex color into a family name such as "blue" or "zinc"."""

import logging

from .color import hex_to_rgb, rgb_to_hsl
from .errors import InvalidHexError
from .spaces import get_strategy

logger = logging.getLogger(__name__)

CUSTOM = "custom"

# Ordered; first match wins. Red wraps across 0/360 so it has two ranges.
HUE_RANGES = (
    ("red", ((0, 30), (330, 360))),
    ("orange", ((30, 60),)),
    ("yellow", ((60, 90),)),
    ("green", ((90, 150),)),
    ("teal", ((150, 180),)),
    ("cyan", ((180, 210),)),
    ("blue", ((210, 270),)),
    ("purple", ((270, 300),)),
    ("pink", ((300, 330),)),
)

# Tailwind-style families by (hue range, saturation range), used by the HSL detector.
HSL_COLOR_MAPPINGS = (
    ("slate", (200, 220), (0, 20)),
    ("stone", (20, 40), (5, 15)),
    ("sky", (190, 210), (70, 100)),
    ("blue", (210, 240), (70, 100)),
    ("indigo", (240, 260), (70, 100)),
    ("emerald", (150, 170), (70, 100)),
    ("green", (110, 140), (60, 100)),
    ("teal", (170, 190), (70, 100)),
    ("red", (0, 20), (70, 100)),
    ("rose", (340, 360), (70, 100)),
    ("pink", (320, 340), (70, 100)),
    ("yellow", (50, 70), (70, 100)),
    ("amber", (35, 55), (70, 100)),
    ("orange", (20, 40), (70, 100)),
    ("purple", (260, 290), (70, 100)),
    ("violet", (250, 270), (70, 100)),
    ("fuchsia", (290, 320), (70, 100)),
)


def _match_hue(hue):
    for name, ranges in HUE_RANGES:
        if any(low <= hue <= high for low, high in ranges):
            return name
    return CUSTOM


def _detect_hsl(hex_color):
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        raise InvalidHexError(hex_color)
    h, s, _ = (round(v) for v in rgb_to_hsl(*rgb))
    h %= 360

    if s <= 10:
        if s <= 5:
            return "zinc"
        if s <= 8:
            return "neutral"
        return "gray"

    for name, (hue_lo, hue_hi), (sat_lo, sat_hi) in HSL_COLOR_MAPPINGS:
        if hue_lo <= h <= hue_hi and sat_lo <= s <= sat_hi:
            return name
    return CUSTOM


def _detect_perceptual(hex_color, strategy):
    lightness, chroma, hue = strategy.to_perceptual(hex_color)
    low, high = strategy.lightness_range
    if chroma < strategy.neutral_threshold:
        return "neutral" if lightness > (low + high) / 2 else "gray"
    return _match_hue(hue)


def detect_color_name(hex_color, method="oklch"):
    """Return a family name for ``hex_color``; "custom" when nothing matches.

    Never raises: malformed input is also reported as "custom".
    """
    try:
        strategy = get_strategy(method)
        if strategy.name == "hsl":
            return _detect_hsl(hex_color)
        return _detect_perceptual(hex_color, strategy)
    except (InvalidHexError, ValueError) as exc:
        logger.debug("Color name detection failed for %r: %s", hex_color, exc)
        return CUSTOM
