"""
Color space strategies used to build weight scales.

OKLCH is the reference space. CIELAB (LCh) and HSL are kept as alternative
strategies; each one carries its own lightness curve and chroma attenuation
rules, in its own native units.
"""

import math
from abc import ABC, abstractmethod
from collections import namedtuple
from types import MappingProxyType

import numpy as np

from .color import hex_to_rgb, hsl_to_rgb, normalize_hex, rgb_to_hex, rgb_to_hsl

PerceptualColor = namedtuple("PerceptualColor", ["lightness", "chroma", "hue"])

WEIGHTS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

# Linear sRGB -> LMS, LMS -> OKLab (https://bottosson.github.io/posts/oklab/)
_OKLAB_M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_OKLAB_M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_OKLAB_M1_INV = np.linalg.inv(_OKLAB_M1)
_OKLAB_M2_INV = np.linalg.inv(_OKLAB_M2)

# Linear sRGB -> XYZ (D65)
_XYZ_M = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ]
)
_XYZ_M_INV = np.linalg.inv(_XYZ_M)
_D65_WHITE = np.array([0.95047, 1.0, 1.08883])

_GAMUT_EPSILON = 1e-6


def srgb_to_linear(srgb):
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(srgb <= 0.04045, srgb / 12.92, ((srgb + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(linear):
    linear = np.maximum(np.asarray(linear, dtype=np.float64), 0.0)
    srgb = np.where(
        linear <= 0.0031308,
        linear * 12.92,
        1.055 * np.power(linear, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


def _hex_to_linear(hex_color):
    rgb = hex_to_rgb(normalize_hex(hex_color))
    return srgb_to_linear(np.array(rgb, dtype=np.float64) / 255.0)


def _linear_to_hex(linear):
    r, g, b = linear_to_srgb(linear) * 255.0
    return rgb_to_hex(r, g, b)


def _in_gamut(linear):
    return bool(np.all(linear >= -_GAMUT_EPSILON) and np.all(linear <= 1.0 + _GAMUT_EPSILON))


def _finite(value, default=0.0):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


class ColorSpaceStrategy(ABC):
    """A perceptual color space that scales can be generated in.

    Subclasses define ``name``, ``lightness_curve`` (weight -> target
    lightness), ``lightness_range`` and ``neutral_threshold`` in their own
    units, plus the conversion and chroma attenuation hooks.
    """

    name = None
    lightness_curve = MappingProxyType({})
    lightness_range = (0.0, 1.0)
    synthesis_lightness_range = None
    neutral_threshold = 0.0
    chroma_tolerance = 1e-4

    @abstractmethod
    def to_perceptual(self, hex_color):
        """Convert a hex color to this space. Raises InvalidHexError."""

    @abstractmethod
    def _to_linear(self, lightness, chroma, hue):
        """Convert coordinates in this space to linear sRGB (may be out of gamut)."""

    @abstractmethod
    def adjust_chroma(self, weight, lightness, chroma, fixed_curve):
        """Attenuate ``chroma`` for a synthesized weight at ``lightness``."""

    def is_achromatic(self, color):
        """True for zero, negative or non-finite chroma."""
        return _finite(color.chroma) <= 0.0

    def sanitize(self, color):
        """Coerce missing or non-finite coordinates so downstream math stays total."""
        lo, hi = self.lightness_range
        lightness = min(hi, max(lo, _finite(color.lightness)))
        if self.is_achromatic(color):
            return PerceptualColor(lightness, 0.0, 0.0)
        return PerceptualColor(lightness, _finite(color.chroma), _finite(color.hue) % 360.0)

    def to_hex(self, color):
        """Convert to ``#rrggbb``, reducing chroma until the color fits in sRGB.

        Lightness and hue are held fixed while chroma is bisected down, so an
        out-of-gamut color keeps its hue instead of drifting the way per-channel
        clipping would.
        """
        return _linear_to_hex(self._to_linear(*self.clamp_chroma(color)))

    def clamp_chroma(self, color):
        """Return ``color`` with the largest in-gamut chroma at its lightness and hue."""
        lightness, chroma, hue = self.sanitize(color)
        if _in_gamut(self._to_linear(lightness, chroma, hue)):
            return PerceptualColor(lightness, chroma, hue)
        low, high = 0.0, chroma
        while high - low > self.chroma_tolerance:
            mid = (low + high) / 2
            if _in_gamut(self._to_linear(lightness, mid, hue)):
                low = mid
            else:
                high = mid
        return PerceptualColor(lightness, low, hue)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class OklchSpace(ColorSpaceStrategy):
    name = "oklch"
    lightness_curve = MappingProxyType(
        {
            50: 0.99,  # almost white, subtle tint
            100: 0.97,
            200: 0.93,
            300: 0.87,
            400: 0.77,
            500: 0.65,
            600: 0.53,
            700: 0.42,
            800: 0.31,
            900: 0.22,
            950: 0.15,  # almost black
        }
    )
    lightness_range = (0.0, 1.0)
    neutral_threshold = 0.02
    chroma_tolerance = 1e-4
    achromatic_chroma = 1e-4

    def to_perceptual(self, hex_color):
        lms = _OKLAB_M1 @ _hex_to_linear(hex_color)
        L, a, b = _OKLAB_M2 @ np.cbrt(lms)
        chroma = math.hypot(a, b)
        if chroma < self.achromatic_chroma:
            return PerceptualColor(float(L), 0.0, 0.0)
        hue = math.degrees(math.atan2(b, a)) % 360.0
        return PerceptualColor(float(L), float(chroma), float(hue))

    def _to_linear(self, lightness, chroma, hue):
        h = math.radians(hue)
        lab = np.array([lightness, chroma * math.cos(h), chroma * math.sin(h)])
        return _OKLAB_M1_INV @ ((_OKLAB_M2_INV @ lab) ** 3)

    def adjust_chroma(self, weight, lightness, chroma, fixed_curve):
        if chroma <= 0:
            return 0.0
        if fixed_curve:
            if lightness > 0.85:
                return max(chroma * 0.3, 0.02)
            if lightness > 0.7:
                return chroma * 0.7
            if lightness < 0.25:
                return chroma * 0.8
        else:
            if lightness > 0.85:
                return max(chroma * 0.4, 0.015)
            if lightness > 0.7:
                return chroma * 0.8
            if lightness < 0.2:
                return chroma * 0.7
        return chroma


class LabSpace(ColorSpaceStrategy):
    """CIELAB in cylindrical (LCh) form, D65 white point."""

    name = "lab"
    lightness_curve = MappingProxyType(
        {
            50: 97,
            100: 94,
            200: 88,
            300: 78,
            400: 65,
            500: 52,
            600: 42,
            700: 32,
            800: 22,
            900: 14,
            950: 8,
        }
    )
    lightness_range = (0.0, 100.0)
    neutral_threshold = 8.0
    chroma_tolerance = 0.01
    achromatic_chroma = 0.01

    _EPSILON = 216 / 24389
    _KAPPA = 24389 / 27

    def to_perceptual(self, hex_color):
        xyz = (_XYZ_M @ _hex_to_linear(hex_color)) / _D65_WHITE
        f = np.where(xyz > self._EPSILON, np.cbrt(xyz), (self._KAPPA * xyz + 16) / 116)
        L = 116 * f[1] - 16
        a = 500 * (f[0] - f[1])
        b = 200 * (f[1] - f[2])
        chroma = math.hypot(a, b)
        if chroma < self.achromatic_chroma:
            return PerceptualColor(float(L), 0.0, 0.0)
        hue = math.degrees(math.atan2(b, a)) % 360.0
        return PerceptualColor(float(L), float(chroma), float(hue))

    def _to_linear(self, lightness, chroma, hue):
        h = math.radians(hue)
        a = chroma * math.cos(h)
        b = chroma * math.sin(h)
        fy = (lightness + 16) / 116
        f = np.array([fy + a / 500, fy, fy - b / 200])
        xyz = np.where(f**3 > self._EPSILON, f**3, (116 * f - 16) / self._KAPPA)
        if lightness <= self._KAPPA * self._EPSILON:
            xyz[1] = lightness / self._KAPPA
        return _XYZ_M_INV @ (xyz * _D65_WHITE)

    def adjust_chroma(self, weight, lightness, chroma, fixed_curve):
        if chroma <= 0:
            return 0.0
        if fixed_curve:
            if lightness > 85:
                return max(chroma * 0.3, 8)
            if lightness > 70:
                return chroma * 0.7
            if lightness < 25:
                return chroma * 0.8
        else:
            if lightness > 85:
                return max(chroma * 0.4, 6)
            if lightness > 70:
                return chroma * 0.8
            if lightness < 20:
                return chroma * 0.7
        return chroma


class HslSpace(ColorSpaceStrategy):
    """Plain HSL; ``chroma`` holds saturation (0-100). Always in gamut."""

    name = "hsl"
    lightness_curve = MappingProxyType(
        {
            50: 98,
            100: 96,
            200: 91,
            300: 84,
            400: 68,
            500: 50,
            600: 43,
            700: 35,
            800: 27,
            900: 16,
            950: 8,
        }
    )
    lightness_range = (0.0, 100.0)
    # keeps synthesized weights away from pure white and black
    synthesis_lightness_range = (5.0, 98.0)
    neutral_threshold = 10.0
    low_saturation = 15.0

    def to_perceptual(self, hex_color):
        h, s, l = rgb_to_hsl(*hex_to_rgb(normalize_hex(hex_color)))
        if s <= 0:
            return PerceptualColor(l, 0.0, 0.0)
        return PerceptualColor(l, s, h)

    def _to_linear(self, lightness, chroma, hue):
        rgb = np.array(hsl_to_rgb(hue, min(chroma, 100.0), lightness), dtype=np.float64)
        return srgb_to_linear(rgb / 255.0)

    def to_hex(self, color):
        lightness, chroma, hue = self.sanitize(color)
        return rgb_to_hex(*hsl_to_rgb(hue, min(chroma, 100.0), lightness))

    def adjust_chroma(self, weight, lightness, chroma, fixed_curve):
        # Only near-neutral bases are desaturated towards the light end
        if chroma > self.low_saturation:
            return chroma
        if weight <= 200:
            return chroma * 0.3
        if weight <= 400:
            return chroma * 0.7
        return chroma


_STRATEGIES = {
    strategy.name: strategy for strategy in (OklchSpace(), LabSpace(), HslSpace())
}

COLOR_SPACE_METHODS = tuple(_STRATEGIES)


def get_strategy(method="oklch"):
    """Look up a strategy by name ("oklch", "lab" or "hsl")."""
    if isinstance(method, ColorSpaceStrategy):
        return method
    try:
        return _STRATEGIES[str(method).lower()]
    except KeyError:
        raise ValueError(
            f"Unknown color space method {method!r}; expected one of {', '.join(COLOR_SPACE_METHODS)}"
        ) from None


def hex_to_perceptual(hex_color, method="oklch"):
    """Convert a hex color to perceptual coordinates. Raises InvalidHexError."""
    return get_strategy(method).to_perceptual(hex_color)


def perceptual_to_hex(color, method="oklch"):
    """Convert perceptual coordinates to ``#rrggbb``, gamut-mapping by chroma reduction."""
    if not isinstance(color, PerceptualColor):
        color = PerceptualColor(*color)
    return get_strategy(method).to_hex(color)
