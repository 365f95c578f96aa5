from ..color import hex_to_rgb
from ..contrast import AA, contrast_ratio

# Secondary text and non-text UI (WCAG 1.4.11)
MIN_UI_CONTRAST = 3.0

THEMES = ("light", "dark")

# (title, tokens, backgrounds they must read on, minimum ratio)
REPORT_CATEGORIES = (
    ("TEXT", ["text-primary", "text-secondary", "text-tertiary"], ["bg-primary", "bg-secondary"], AA),
    ("TEXT (muted)", ["text-quaternary", "text-placeholder"], ["bg-primary"], MIN_UI_CONTRAST),
    ("FOREGROUND", ["fg-primary", "fg-secondary", "fg-tertiary"], ["bg-primary", "bg-secondary"], AA),
    ("BRAND", ["text-brand"], ["bg-primary"], AA),
    (
        "ON BRAND",
        ["text-primary-on-brand"],
        ["interactive-primary", "interactive-primary-hover"],
        AA,
    ),
    (
        "STATUS",
        ["success-foreground", "warning-foreground", "error-foreground"],
        ["bg-primary"],
        MIN_UI_CONTRAST,
    ),
    ("BORDERS", ["border-secondary"], ["bg-primary"], MIN_UI_CONTRAST),
)


def _token_hex(tokens, name, theme):
    token = tokens.get(name)
    if token is None:
        return None
    value = getattr(token, theme).hex
    # rgba() tokens depend on what they are composited over; not checked
    return value if hex_to_rgb(value) is not None else None


def generate_contrast_report(system):
    """Contrast report for the semantic tokens, in both themes.

    Returns:
        tuple: (report text, list of (theme, token, hex, background, achieved, required))
    """
    tokens = system.tokens
    meta = system.meta

    report = []
    report.append("=" * 70)
    report.append("CONTRAST REPORT")
    report.append("=" * 70)
    report.append(f"Neutral: {meta.neutral_name}    Primary: {meta.primary_name}")

    issues = []

    for theme in THEMES:
        report.append("")
        report.append(f"--- {theme.upper()} THEME ---")
        for cat_name, keys, backgrounds, min_contrast in REPORT_CATEGORIES:
            report.append(f"\n{cat_name} (min: {min_contrast}:1)")
            report.append("-" * 50)
            for key in keys:
                fg = _token_hex(tokens, key, theme)
                if fg is None:
                    continue
                ratios = []
                for bg_name in backgrounds:
                    bg = _token_hex(tokens, bg_name, theme)
                    if bg is None:
                        continue
                    ratio = contrast_ratio(fg, bg)
                    ratios.append(f"vs {bg_name}: {ratio:4.1f}:1")
                    if ratio < min_contrast:
                        issues.append((theme, key, fg, bg_name, ratio, min_contrast))
                failed = any(i[0] == theme and i[1] == key for i in issues)
                status = "✗ FAIL" if failed else "✓"
                report.append(f"  {key:22} {fg}  {'  '.join(ratios)}  {status}")

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for theme, key, hex_val, bg_name, achieved, required in issues:
            report.append(
                f"  - [{theme}] {key}: {hex_val} has {achieved:.1f}:1 on {bg_name}, needs {required}:1"
            )
    else:
        report.append("ALL TOKENS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def print_system(system):
    """Print both scales with their contrast against white and black."""
    meta = system.meta

    print("\n" + "=" * 60)
    print(f"COLOR SYSTEM ({meta.neutral_name} / {meta.primary_name})")
    print("=" * 60)

    for title, scale in (("NEUTRAL", system.neutral_scale), ("PRIMARY", system.primary_scale)):
        print(f"\n{title}:")
        for weight, entry in scale.items():
            vs_white = contrast_ratio(entry.hex, "#ffffff")
            vs_black = contrast_ratio(entry.hex, "#000000")
            print(
                f"  {entry.display_name:18} {entry.hex}  (white: {vs_white:4.1f}:1, black: {vs_black:4.1f}:1)"
            )

    interactive = system.tokens.get("interactive-primary")
    if interactive is not None:
        print(f"\nInteractive primary: {interactive.light.hex} ({interactive.light.display_name})")
