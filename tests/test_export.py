import json

from semantic_palette import TOKEN_NAMES, build_color_system
from semantic_palette.palette import scale_families
from semantic_palette.export import (
    create_html_preview,
    export_json,
    generate_contrast_report,
    generate_css,
    generate_tailwind_config,
    print_system,
    system_to_dict,
)


class TestJsonExport:
    def test_structure(self, system):
        data = system_to_dict(system)
        assert set(data["colors"]) == {"zinc", "blue"}
        assert data["colors"]["zinc"]["600"] == "#71717a"
        assert len(data["colors"]["blue"]) == 11
        assert set(data["semanticTokens"]["light"]) == set(TOKEN_NAMES)
        assert set(data["semanticTokens"]["dark"]) == set(TOKEN_NAMES)
        assert data["_meta"]["version"] == "2.0.0"
        assert data["_meta"]["neutralName"] == "zinc"

    def test_without_themes(self, system):
        assert "semanticTokens" not in system_to_dict(system, include_themes=False)

    def test_rgb_format(self, system):
        data = system_to_dict(system, fmt="rgb")
        assert data["colors"]["zinc"]["600"] == "rgb(113, 113, 122)"
        assert data["semanticTokens"]["light"]["bg-modal-overlay"] == "rgba(0, 0, 0, 0.36)"

    def test_same_family_names_do_not_collide(self):
        system = build_color_system(("brand", "#71717a"), ("brand", "#3b82f6"))
        assert set(system_to_dict(system)["colors"]) == {"brand-neutral", "brand-primary"}

    def test_export_json(self, system, tmp_path):
        path = tmp_path / "palette.json"
        export_json(system, path)
        data = json.loads(path.read_text())
        assert data["colors"]["blue"]["500"] == "#3b82f6"


class TestCss:
    def test_data_theme(self, system):
        css = generate_css(system)
        assert css.startswith(":root {")
        assert "  --zinc-600: #71717a;" in css
        assert f"  --text-primary: {system.neutral_scale[950].hex};" in css
        assert '[data-theme="dark"] {' in css
        assert f"  --text-primary: {system.neutral_scale[50].hex};" in css

    def test_media_queries(self, system):
        css = generate_css(system, include_media=True)
        assert "@media (prefers-color-scheme: light)" in css
        assert "@media (prefers-color-scheme: dark)" in css
        assert "data-theme" not in css

    def test_scales_only(self, system):
        css = generate_css(system, include_themes=False)
        assert "--text-primary" not in css
        assert "--blue-500: #3b82f6;" in css

    def test_tailwind(self, system):
        config = generate_tailwind_config(system, fmt="hsl")
        assert config.startswith("module.exports = {")
        assert "'zinc': {" in config
        assert "500: 'hsl(217, 91%, 60%)'," in config


class TestContrastReport:
    def test_report(self, system):
        report, issues = generate_contrast_report(system)
        assert "CONTRAST REPORT" in report
        assert "--- LIGHT THEME ---" in report
        assert "--- DARK THEME ---" in report
        if issues:
            assert f"ISSUES FOUND: {len(issues)}" in report
        else:
            assert "ALL TOKENS PASS CONTRAST REQUIREMENTS" in report

    def test_issue_tuples(self, system):
        _, issues = generate_contrast_report(system)
        for theme, key, fg, bg_name, achieved, required in issues:
            assert theme in ("light", "dark")
            assert achieved < required

    def test_primary_text_passes(self, system):
        _, issues = generate_contrast_report(system)
        assert not [i for i in issues if i[1] == "text-primary"]

    def test_print_system(self, system, capsys):
        print_system(system)
        out = capsys.readouterr().out
        assert "COLOR SYSTEM (zinc / blue)" in out
        assert "Zinc 600" in out
        assert "Interactive primary:" in out


class TestHtmlPreview:
    def test_preview(self, system, tmp_path):
        path = tmp_path / "preview.html"
        create_html_preview(system, path, neutral_hex="#71717a", primary_hex="#3b82f6", title="Zinc & Blue")
        html = path.read_text()
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Zinc &amp; Blue</title>" in html
        assert 'class="swatch anchor" style="background: #71717a' in html
        assert "interactive-primary" in html
        assert "{neutral_swatches}" not in html


class TestSharedFamilyNames:
    def _system(self):
        return build_color_system(("blue", "#94a3b8"), ("blue", "#3b82f6"))

    def test_scale_families_are_suffixed(self):
        system = self._system()
        keys = [key for key, _ in scale_families(system)]
        assert keys == ["blue-neutral", "blue-primary"]

    def test_distinct_names_are_kept(self, system):
        assert [key for key, _ in scale_families(system)] == ["zinc", "blue"]

    def test_css_keeps_both_scales(self):
        system = self._system()
        css = generate_css(system, include_themes=False)
        assert f"--blue-neutral-500: {system.neutral_scale[500].hex};" in css
        assert f"--blue-primary-500: {system.primary_scale[500].hex};" in css
        assert "--blue-500:" not in css

    def test_tailwind_keeps_both_scales(self):
        system = self._system()
        config = generate_tailwind_config(system)
        assert "'blue-neutral': {" in config
        assert "'blue-primary': {" in config
        assert "'blue': {" not in config
        assert f"500: '{system.primary_scale[500].hex}'," in config
