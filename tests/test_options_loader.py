import json

import pytest

from semantic_palette import DEFAULT_OPTIONS, BaseColorSpec, GenerationOptions, load_config
from semantic_palette.errors import InvalidHexError


class TestGenerationOptions:
    def test_defaults(self):
        assert DEFAULT_OPTIONS == GenerationOptions(
            use_fixed_contrast_curve=False,
            color_space_method="oklch",
            dynamic_status_chroma=False,
            interactive_color_mode="optimized",
            interactive_weight=600,
            auto_detect_color_names=False,
        )

    def test_enum_values_are_validated(self):
        with pytest.raises(ValueError, match="color_space_method"):
            GenerationOptions(color_space_method="xyz")
        with pytest.raises(ValueError, match="interactive_color_mode"):
            GenerationOptions(interactive_color_mode="random")

    def test_enum_values_are_case_insensitive(self):
        assert GenerationOptions(color_space_method="LAB").color_space_method == "lab"

    def test_from_dict_accepts_camel_case(self):
        options = GenerationOptions.from_dict(
            {
                "colorSpaceMethod": "hsl",
                "useFixedContrastCurve": True,
                "dynamicStatusChroma": True,
                "interactiveColorMode": "exact",
                "somethingElse": 1,
            }
        )
        assert options.color_space_method == "hsl"
        assert options.use_fixed_contrast_curve
        assert options.dynamic_status_chroma
        assert options.interactive_color_mode == "exact"

    def test_from_dict_legacy_aliases(self):
        options = GenerationOptions.from_dict({"useOptimizedContrast": True, "colorGenerationMethod": "lab"})
        assert options.use_fixed_contrast_curve
        assert options.color_space_method == "lab"

    def test_from_dict_empty(self):
        assert GenerationOptions.from_dict(None) == DEFAULT_OPTIONS

    def test_merged_skips_none(self):
        options = DEFAULT_OPTIONS.merged(color_space_method=None, dynamic_status_chroma=True)
        assert options.color_space_method == "oklch"
        assert options.dynamic_status_chroma

    @pytest.mark.parametrize(
        "weight, expected", [(100, 400), (450, 400), (600, 600), (650, 600), (900, 700)]
    )
    def test_safe_interactive_weight(self, weight, expected):
        assert GenerationOptions(interactive_weight=weight).safe_interactive_weight == expected


class TestBaseColorSpec:
    def test_validated(self):
        assert BaseColorSpec("blue", "3b82f6").validated() == BaseColorSpec("blue", "#3b82f6")

    def test_validated_rejects_bad_hex(self):
        with pytest.raises(InvalidHexError):
            BaseColorSpec("blue", "#3b82f").validated()


class TestLoadConfig:
    def write(self, tmp_path, data):
        path = tmp_path / "palette.json"
        path.write_text(json.dumps(data))
        return path

    def test_full_config(self, tmp_path):
        path = self.write(
            tmp_path,
            {
                "baseColors": {
                    "neutral": {"name": "slate", "hex": "#64748b"},
                    "primary": {"name": "indigo", "base": "#6366f1"},
                },
                "options": {"colorSpaceMethod": "lab", "interactiveColorMode": "exact"},
            },
        )
        neutral, primary, options = load_config(path)
        assert neutral == BaseColorSpec("slate", "#64748b")
        assert primary == BaseColorSpec("indigo", "#6366f1")
        assert options.color_space_method == "lab"
        assert options.interactive_color_mode == "exact"

    def test_plain_strings_and_default_options(self, tmp_path):
        path = self.write(tmp_path, {"baseColors": {"neutral": "#71717a", "primary": "#3b82f6"}})
        neutral, primary, options = load_config(path)
        assert neutral == BaseColorSpec("neutral", "#71717a")
        assert primary.hex_value == "#3b82f6"
        assert options == DEFAULT_OPTIONS

    def test_missing_color(self, tmp_path):
        path = self.write(tmp_path, {"baseColors": {"neutral": "#71717a"}})
        with pytest.raises(ValueError, match="primary"):
            load_config(path)

    def test_bad_option(self, tmp_path):
        path = self.write(
            tmp_path,
            {"baseColors": {"neutral": "#71717a", "primary": "#3b82f6"}, "options": {"colorSpaceMethod": "cmyk"}},
        )
        with pytest.raises(ValueError):
            load_config(path)
