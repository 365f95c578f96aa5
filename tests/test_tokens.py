import logging

import pytest

from semantic_palette.color import hex_to_rgba
from semantic_palette.palette import TOKEN_NAMES, GenerationOptions, derive_tokens, generate_scale
from semantic_palette.palette.tokens import (
    MAX_STATUS_CHROMA,
    STATUS_CHROMA_BOOST,
    build_status_scales,
    closest_weight,
    hover_weight,
    interactive_weight,
    status_chroma,
)
from semantic_palette.spaces import WEIGHTS, hex_to_perceptual

EXACT = GenerationOptions(interactive_color_mode="exact")


def _derive(neutral_scale, primary_scale, options=None, **kwargs):
    return derive_tokens(neutral_scale, primary_scale, "zinc", "blue", options, **kwargs)


class TestTokenSet:
    def test_names(self):
        assert len(TOKEN_NAMES) == 45
        assert len(set(TOKEN_NAMES)) == 45

    def test_every_token_has_both_themes(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale)
        assert set(tokens) == set(TOKEN_NAMES)
        for name, token in tokens.items():
            assert token.name == name
            assert token.light.hex and token.dark.hex
            assert token.light.display_name and token.dark.display_name

    def test_dynamic_status_keeps_every_token(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale, GenerationOptions(dynamic_status_chroma=True))
        assert set(tokens) == set(TOKEN_NAMES)

    def test_tokens_are_read_only(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale)
        with pytest.raises(TypeError):
            tokens["text-primary"] = None


class TestNeutralTokens:
    def test_text_primary_mirrors_across_themes(self, neutral_scale, primary_scale):
        token = _derive(neutral_scale, primary_scale)["text-primary"]
        assert token.light.hex == neutral_scale[950].hex
        assert token.dark.hex == neutral_scale[50].hex
        assert token.light.display_name == "zinc-950"
        assert token.dark.display_name == "zinc-50"

    def test_bg_base(self, neutral_scale, primary_scale):
        token = _derive(neutral_scale, primary_scale)["bg-base"]
        assert token.light.hex == "#ffffff"
        assert token.light.display_name == "base-white"
        assert token.dark.hex == neutral_scale[950].hex

    def test_constant_overlays(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale)
        assert tokens["bg-modal-overlay"].light.hex == "rgba(0, 0, 0, 0.36)"
        assert tokens["interactive-secondary"].dark.hex == "rgba(255, 255, 255, 0.06)"

    def test_brand_tokens_use_primary(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale)
        assert tokens["text-brand"].light.hex == primary_scale[700].hex
        assert tokens["border-brand"].dark.hex == primary_scale[400].hex
        assert tokens["bg-brand-subtle"].dark.display_name == "blue-950"


class TestInteractiveTokens:
    def test_optimized_uses_weight_600(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale)
        assert tokens["interactive-primary"].light.hex == primary_scale[600].hex
        assert tokens["interactive-primary"].dark.hex == primary_scale[600].hex
        assert tokens["interactive-primary-hover"].light.hex == primary_scale[500].hex
        assert tokens["interactive-primary-active"].light.hex == primary_scale[500].hex

    def test_focus_ring_alpha(self, neutral_scale, primary_scale):
        focus = _derive(neutral_scale, primary_scale)["interactive-focus"]
        assert focus.light.hex == hex_to_rgba(primary_scale[600].hex, 0.24)
        assert focus.dark.hex == hex_to_rgba(primary_scale[600].hex, 0.36)
        assert focus.light.display_name == "blue-600-alpha-24"

    def test_custom_weight_is_clamped(self, neutral_scale, primary_scale):
        options = GenerationOptions(interactive_weight=900)
        tokens = _derive(neutral_scale, primary_scale, options)
        assert tokens["interactive-primary"].light.hex == primary_scale[700].hex

    def test_exact_mode_uses_base_color_weight(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale, EXACT, primary_base_hex="#3b82f6")
        assert tokens["interactive-primary"].light.hex == "#3b82f6"
        assert tokens["interactive-primary-hover"].light.hex == primary_scale[400].hex

    def test_exact_mode_falls_back_when_far(self, primary_scale):
        assert interactive_weight(primary_scale, EXACT, "#00ff00") == 600
        assert interactive_weight(primary_scale, EXACT, None) == 600

    def test_exact_mode_accepts_near_match(self, primary_scale):
        assert interactive_weight(primary_scale, EXACT, "#3c83f5") == 500

    def test_closest_weight(self, primary_scale):
        assert closest_weight(primary_scale, "#3b82f6") == (500, 0)
        assert closest_weight(primary_scale, "bad") == (None, None)

    @pytest.mark.parametrize(
        "weight, expected",
        [(50, 100), (200, 300), (300, 400), (400, 300), (600, 500), (950, 900), (650, 500)],
    )
    def test_hover_weight(self, weight, expected):
        assert hover_weight(weight) == expected

    def test_hover_stays_on_scale(self):
        for weight in WEIGHTS:
            assert hover_weight(weight) in WEIGHTS
            assert hover_weight(weight) != weight


class TestStatusTokens:
    def test_static_colors(self, neutral_scale, primary_scale):
        tokens = _derive(neutral_scale, primary_scale)
        assert tokens["success-primary"].light == ("#16a34a", "green-600")
        assert tokens["error-background"].dark.hex == "#450a0a"
        assert tokens["warning-foreground"].dark.display_name == "amber-400"
        assert tokens["success-focus"].light.hex == "rgba(22, 163, 74, 0.24)"
        assert tokens["success-focus"].light.display_name == "green-600-alpha-24"

    def test_dynamic_colors_come_from_status_scales(self, neutral_scale, primary_scale):
        options = GenerationOptions(dynamic_status_chroma=True)
        tokens = _derive(neutral_scale, primary_scale, options)
        scales = build_status_scales(primary_scale)
        assert tokens["success-primary"].light == (scales["success"][600].hex, "success-600")
        assert tokens["warning-background"].dark.hex == scales["warning"][900].hex
        assert tokens["error-foreground"].dark.hex == scales["error"][400].hex
        assert tokens["error-focus"].dark.hex == hex_to_rgba(scales["error"][400].hex, 0.36)

    def test_prebuilt_status_scales_enable_dynamic_mode(self, neutral_scale, primary_scale):
        scales = build_status_scales(primary_scale)
        tokens = _derive(neutral_scale, primary_scale, status_scales=scales)
        assert tokens["success-primary"].light.display_name == "success-600"

    def test_status_hue(self, primary_scale):
        scales = build_status_scales(primary_scale)
        assert scales["success"][600].perceptual.hue == pytest.approx(140)
        assert scales["error"][600].perceptual.hue == pytest.approx(15)

    def test_status_chroma_follows_primary(self, primary_scale):
        source = hex_to_perceptual(primary_scale[500].hex).chroma
        assert status_chroma(primary_scale, "success") == pytest.approx(
            source * STATUS_CHROMA_BOOST["success"]
        )

    def test_status_chroma_is_capped(self):
        vivid = generate_scale("#ff00ff", "magenta")
        assert status_chroma(vivid, "warning") == MAX_STATUS_CHROMA

    def test_achromatic_primary_gives_gray_status(self):
        gray = generate_scale("#808080", "gray")
        assert status_chroma(gray, "warning") == 0.0
        scales = build_status_scales(gray)
        assert hex_to_perceptual(scales["warning"][600].hex).chroma == pytest.approx(0, abs=1e-3)

    def test_muted_primary_keeps_its_chroma(self):
        slate = generate_scale("#64748b", "slate")
        source = hex_to_perceptual(slate[500].hex).chroma
        assert source < 0.08
        chroma = status_chroma(slate, "success")
        assert chroma == pytest.approx(source * STATUS_CHROMA_BOOST["success"])
        assert 0 < chroma < 0.08 * STATUS_CHROMA_BOOST["success"]

    def test_missing_primary_falls_back_to_static(self, neutral_scale, primary_scale, caplog):
        partial = {w: e for w, e in primary_scale.items() if w not in (500, 600)}
        options = GenerationOptions(dynamic_status_chroma=True)
        with caplog.at_level(logging.WARNING):
            tokens = _derive(neutral_scale, partial, options)
        assert tokens["success-primary"].light.hex == "#16a34a"
        assert "static status colors" in caplog.text


class TestMissingEntries:
    def test_missing_weight_only_drops_dependent_tokens(self, neutral_scale, primary_scale, caplog):
        partial = {w: e for w, e in neutral_scale.items() if w != 950}
        with caplog.at_level(logging.WARNING):
            tokens = _derive(partial, primary_scale)
        for name in ("text-primary", "fg-primary", "bg-primary", "bg-base"):
            assert name not in tokens
        assert "text-secondary" in tokens
        assert "interactive-primary" in tokens
        assert len(tokens) == len(TOKEN_NAMES) - 4
        assert "Skipping token text-primary" in caplog.text
        assert "zinc scale has no weight 950" in caplog.text
