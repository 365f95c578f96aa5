from collections import namedtuple

from ..color import normalize_hex
from ..spaces import COLOR_SPACE_METHODS, WEIGHTS

INTERACTIVE_MODES = ("optimized", "exact")

# Bounds for the interactive weight in optimized mode
INTERACTIVE_WEIGHT_MIN = 400
INTERACTIVE_WEIGHT_MAX = 700

_OPTION_FIELDS = (
    "use_fixed_contrast_curve",
    "color_space_method",
    "dynamic_status_chroma",
    "interactive_color_mode",
    "interactive_weight",
    "auto_detect_color_names",
)

# camelCase keys used by saved JSON configurations
_CAMEL_CASE_KEYS = {
    "useFixedContrastCurve": "use_fixed_contrast_curve",
    "useOptimizedContrast": "use_fixed_contrast_curve",
    "colorSpaceMethod": "color_space_method",
    "colorGenerationMethod": "color_space_method",
    "dynamicStatusChroma": "dynamic_status_chroma",
    "interactiveColorMode": "interactive_color_mode",
    "interactiveWeight": "interactive_weight",
    "autoDetectColorNames": "auto_detect_color_names",
}


class BaseColorSpec(namedtuple("BaseColorSpec", ["name", "hex_value"])):
    """A named base color, e.g. ("zinc", "#71717a")."""

    __slots__ = ()

    def validated(self):
        """Return a copy with a normalized hex. Raises InvalidHexError."""
        return self._replace(hex_value=normalize_hex(self.hex_value))


class GenerationOptions(namedtuple("GenerationOptions", _OPTION_FIELDS)):
    """Flags controlling scale generation and token derivation.

    use_fixed_contrast_curve: synthesize every weight from the lightness curve
        instead of placing the base color at its nearest weight.
    color_space_method: "oklch" (default), "lab" or "hsl".
    dynamic_status_chroma: derive success/warning/error colors from the
        primary scale's chroma instead of the static table.
    interactive_color_mode: "optimized" uses ``interactive_weight`` (clamped
        to 400-700); "exact" uses the weight closest to the primary base color.
    auto_detect_color_names: label families with detect_color_name.
    """

    __slots__ = ()

    def __new__(
        cls,
        use_fixed_contrast_curve=False,
        color_space_method="oklch",
        dynamic_status_chroma=False,
        interactive_color_mode="optimized",
        interactive_weight=600,
        auto_detect_color_names=False,
    ):
        method = str(color_space_method).lower()
        if method not in COLOR_SPACE_METHODS:
            raise ValueError(
                f"color_space_method must be one of {', '.join(COLOR_SPACE_METHODS)}, "
                f"got {color_space_method!r}"
            )
        mode = str(interactive_color_mode).lower()
        if mode not in INTERACTIVE_MODES:
            raise ValueError(
                f"interactive_color_mode must be one of {', '.join(INTERACTIVE_MODES)}, "
                f"got {interactive_color_mode!r}"
            )
        return super().__new__(
            cls,
            bool(use_fixed_contrast_curve),
            method,
            bool(dynamic_status_chroma),
            mode,
            int(interactive_weight),
            bool(auto_detect_color_names),
        )

    @classmethod
    def from_dict(cls, data):
        """Build options from a dict with snake_case or camelCase keys.

        Unknown keys are ignored, so whole saved configurations can be passed in.
        """
        kwargs = {}
        for key, value in (data or {}).items():
            field = _CAMEL_CASE_KEYS.get(key, key)
            if field in _OPTION_FIELDS:
                kwargs[field] = value
        return cls(**kwargs)

    def merged(self, **overrides):
        """Copy with ``overrides`` applied; None values are skipped."""
        values = self._asdict()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return type(self)(**values)

    @property
    def safe_interactive_weight(self):
        """``interactive_weight`` clamped to 400-700 and snapped to a scale weight."""
        weight = min(INTERACTIVE_WEIGHT_MAX, max(INTERACTIVE_WEIGHT_MIN, self.interactive_weight))
        return min(WEIGHTS, key=lambda w: abs(w - weight))


DEFAULT_OPTIONS = GenerationOptions()
