"""WCAG 2 and APCA contrast helpers."""

import math
from collections import namedtuple

from .color import BLACK, WHITE, hex_to_rgb
from .errors import InvalidHexError
from .spaces import get_strategy

# Text-level WCAG 2 thresholds
AA = 4.5
AAA = 7.0

# APCA body-text threshold (absolute Lc)
APCA_MIN_LC = 60

# Colour difference above which two colours count as distinguishable
PERCEPTUAL_MIN_DELTA_E = 40

# APCA-W3 0.0.98G constants
_APCA_COEFFICIENTS = (0.2126729, 0.7151522, 0.0721750)
_APCA_TRC = 2.4
_APCA_NORM_BG = 0.56
_APCA_NORM_TXT = 0.57
_APCA_REV_TXT = 0.62
_APCA_REV_BG = 0.65
_APCA_BLACK_THRESHOLD = 0.022
_APCA_BLACK_CLAMP = 1.414
_APCA_SCALE = 1.14
_APCA_OFFSET = 0.027
_APCA_DELTA_Y_MIN = 0.0005
_APCA_LOW_CLIP = 0.1

FamilyMatch = namedtuple("FamilyMatch", ["weight", "ratio", "hex", "passes_aa", "apca"])

ContrastResult = namedtuple(
    "ContrastResult",
    ["ratio_vs_white", "ratio_vs_black", "passes_aa", "passes_aaa", "best_family_matches"],
)

PerceptualContrast = namedtuple("PerceptualContrast", ["delta_e", "approximate_ratio", "is_accessible"])


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def _as_rgb(color):
    if isinstance(color, str):
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise InvalidHexError(color)
        return rgb
    r, g, b = color
    return (r, g, b)


def contrast_ratio(color1, color2):
    """Contrast ratio between two colors, each a hex string or an (r, g, b) triple.

    Symmetric, and always within [1, 21].
    """
    lum1 = relative_luminance(*_as_rgb(color1))
    lum2 = relative_luminance(*_as_rgb(color2))
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def _apca_luminance(rgb):
    return sum(coef * (channel / 255) ** _APCA_TRC for coef, channel in zip(_APCA_COEFFICIENTS, rgb))


def _soft_clamp_black(y):
    if y > _APCA_BLACK_THRESHOLD:
        return y
    return y + (_APCA_BLACK_THRESHOLD - y) ** _APCA_BLACK_CLAMP


def apca_contrast(text, background):
    """APCA lightness contrast (Lc) of ``text`` drawn on ``background``.

    Uses the APCA-W3 0.0.98G constants. The result is signed: positive for
    dark text on a light background, negative for light text on a dark one.
    Values run roughly from -108 to 106; near-identical luminances give 0.

    Args:
        text: Foreground color, hex string or (r, g, b) triple.
        background: Background color, hex string or (r, g, b) triple.

    Returns:
        float: Lc value.
    """
    txt_y = _soft_clamp_black(_apca_luminance(_as_rgb(text)))
    bg_y = _soft_clamp_black(_apca_luminance(_as_rgb(background)))

    if abs(bg_y - txt_y) < _APCA_DELTA_Y_MIN:
        return 0.0

    if bg_y > txt_y:
        sapc = (bg_y ** _APCA_NORM_BG - txt_y ** _APCA_NORM_TXT) * _APCA_SCALE
        output = 0.0 if sapc < _APCA_LOW_CLIP else sapc - _APCA_OFFSET
    else:
        sapc = (bg_y ** _APCA_REV_BG - txt_y ** _APCA_REV_TXT) * _APCA_SCALE
        output = 0.0 if sapc > -_APCA_LOW_CLIP else sapc + _APCA_OFFSET
    return output * 100


def passes_apca(text, background, min_lc=APCA_MIN_LC):
    return abs(apca_contrast(text, background)) >= min_lc


def _oklch_delta_e(c1, c2):
    dh = abs(c1.hue - c2.hue)
    dh = min(dh, 360 - dh)
    return math.sqrt(
        ((c1.lightness - c2.lightness) * 100) ** 2
        + ((c1.chroma - c2.chroma) * 100) ** 2
        + (dh / 360) ** 2
    )


def _lab_delta_e(c1, c2):
    # CIE76 on the rectangular a/b coordinates
    a1 = c1.chroma * math.cos(math.radians(c1.hue))
    b1 = c1.chroma * math.sin(math.radians(c1.hue))
    a2 = c2.chroma * math.cos(math.radians(c2.hue))
    b2 = c2.chroma * math.sin(math.radians(c2.hue))
    return math.sqrt((c1.lightness - c2.lightness) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


_DELTA_E = {
    "oklch": _oklch_delta_e,
    "lab": _lab_delta_e,
}


def perceptual_contrast(color1, color2, method="oklch"):
    """Colour difference between two hex colors in a perceptual space.

    ``oklch`` scales lightness and chroma to 0-100 and adds the normalized hue
    gap; ``lab`` is the CIE76 Euclidean distance. The approximate ratio is
    ``delta_e / 10`` floored at 1, and pairs count as accessible above
    ``PERCEPTUAL_MIN_DELTA_E``.

    Raises:
        ValueError: ``method`` is not a perceptual space.
        InvalidHexError: Either color is not a valid hex string.
    """
    if method not in _DELTA_E:
        raise ValueError(f"No perceptual difference for color space {method!r}")
    strategy = get_strategy(method)
    c1 = strategy.to_perceptual(color1)
    c2 = strategy.to_perceptual(color2)
    delta_e = _DELTA_E[method](c1, c2)
    return PerceptualContrast(
        delta_e=delta_e,
        approximate_ratio=max(1.0, delta_e / 10),
        is_accessible=delta_e > PERCEPTUAL_MIN_DELTA_E,
    )


def family_contrasts(hex_color, scale):
    """All scale entries that reach AA against ``hex_color``, keyed by weight.

    The entry equal to ``hex_color`` itself is skipped.
    """
    rgb = _as_rgb(hex_color)
    matches = {}
    for weight, entry in scale.items():
        if entry.hex.lower() == hex_color.lower():
            continue
        ratio = contrast_ratio(rgb, entry.hex)
        if ratio >= AA:
            matches[weight] = FamilyMatch(weight, ratio, entry.hex, True, abs(apca_contrast(entry.hex, rgb)))
    return matches


def best_family_match(hex_color, scale, fallback=False):
    """Highest-contrast scale entry reaching AA against ``hex_color``.

    Returns None when no entry qualifies, unless ``fallback`` is set, in which
    case white or black (whichever contrasts more) is returned instead.
    """
    matches = family_contrasts(hex_color, scale)
    if matches:
        return max(matches.values(), key=lambda m: m.ratio)
    if not fallback:
        return None

    vs_white = contrast_ratio(hex_color, WHITE)
    vs_black = contrast_ratio(hex_color, BLACK)
    if vs_white >= vs_black:
        return FamilyMatch("white", vs_white, WHITE, vs_white >= AA, abs(apca_contrast(WHITE, hex_color)))
    return FamilyMatch("black", vs_black, BLACK, vs_black >= AA, abs(apca_contrast(BLACK, hex_color)))


def contrast_info(hex_color, scale=None):
    """Contrast summary for a swatch: vs white, vs black, and vs its own family."""
    vs_white = contrast_ratio(hex_color, WHITE)
    vs_black = contrast_ratio(hex_color, BLACK)
    best = max(vs_white, vs_black)
    return ContrastResult(
        ratio_vs_white=vs_white,
        ratio_vs_black=vs_black,
        passes_aa=best >= AA,
        passes_aaa=best >= AAA,
        best_family_matches=family_contrasts(hex_color, scale) if scale else {},
    )


def text_color_for(hex_color):
    """White or black, whichever reads better on ``hex_color``."""
    if contrast_ratio(hex_color, WHITE) >= contrast_ratio(hex_color, BLACK):
        return WHITE
    return BLACK
