import html as html_lib

from ..color import hex_to_rgb
from ..contrast import text_color_for

_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'SF Mono', 'Fira Code', monospace;
            background: {bg};
            color: {fg};
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
            color: {fg_muted};
        }
        .scale {
            display: grid;
            grid-template-columns: repeat(11, 1fr);
            gap: 8px;
        }
        .swatch {
            border-radius: 8px;
            padding: 12px 8px;
            font-size: 11px;
            min-height: 80px;
        }
        .swatch.anchor { outline: 2px solid {fg}; outline-offset: 2px; }
        .tokens {
            display: grid;
            grid-template-columns: repeat(2, 1fr);
            gap: 20px;
        }
        .theme-box {
            border-radius: 12px;
            padding: 20px;
        }
        .token-row {
            display: flex;
            align-items: center;
            gap: 10px;
            margin: 4px 0;
            font-size: 12px;
        }
        .chip {
            width: 28px;
            height: 18px;
            border-radius: 4px;
            border: 1px solid rgba(128, 128, 128, 0.4);
        }
    </style>
</head>
<body>
    <h1>{title}</h1>

    <h2>{neutral_name}</h2>
    <div class="scale">
        {neutral_swatches}
    </div>

    <h2>{primary_name}</h2>
    <div class="scale">
        {primary_swatches}
    </div>

    <h2>Semantic Tokens</h2>
    <div class="tokens">
        <div class="theme-box" style="background: {light_bg}; color: {light_fg}">
            <h3>Light</h3>
            {light_rows}
        </div>
        <div class="theme-box" style="background: {dark_bg}; color: {dark_fg}">
            <h3>Dark</h3>
            {dark_rows}
        </div>
    </div>
</body>
</html>"""


def _make_swatch(entry, anchor_hex):
    text_color = text_color_for(entry.hex)
    anchor = " anchor" if anchor_hex and entry.hex.lower() == anchor_hex.lower() else ""
    return f"""<div class="swatch{anchor}" style="background: {entry.hex}; color: {text_color}">
            <div>{entry.weight}</div>
            <div>{entry.hex}</div>
        </div>"""


def _make_row(name, value):
    return (
        f'<div class="token-row"><span class="chip" style="background: {value.hex}"></span>'
        f"<span>{name}</span><span>{html_lib.escape(value.display_name)}</span></div>"
    )


def _token_hex(system, name, theme, default):
    token = system.tokens.get(name)
    if token is None:
        return default
    value = getattr(token, theme).hex
    return value if hex_to_rgb(value) is not None else default


def create_html_preview(system, output_path, neutral_hex=None, primary_hex=None, title="Color System Preview"):
    """Create an HTML preview of both scales and the light/dark tokens.

    ``neutral_hex`` / ``primary_hex`` mark the user's base colors in their scales.
    """
    meta = system.meta
    light_bg = _token_hex(system, "bg-primary", "light", "#ffffff")
    light_fg = _token_hex(system, "text-primary", "light", "#000000")
    dark_bg = _token_hex(system, "bg-primary", "dark", "#000000")
    dark_fg = _token_hex(system, "text-primary", "dark", "#ffffff")

    replacements = {
        "{title}": html_lib.escape(title),
        "{bg}": light_bg,
        "{fg}": light_fg,
        "{fg_muted}": _token_hex(system, "text-tertiary", "light", light_fg),
        "{light_bg}": light_bg,
        "{light_fg}": light_fg,
        "{dark_bg}": dark_bg,
        "{dark_fg}": dark_fg,
        "{neutral_name}": html_lib.escape(meta.neutral_name),
        "{primary_name}": html_lib.escape(meta.primary_name),
        "{neutral_swatches}": "\n".join(
            _make_swatch(e, neutral_hex) for e in system.neutral_scale.values()
        ),
        "{primary_swatches}": "\n".join(
            _make_swatch(e, primary_hex) for e in system.primary_scale.values()
        ),
        "{light_rows}": "\n".join(_make_row(n, t.light) for n, t in system.tokens.items()),
        "{dark_rows}": "\n".join(_make_row(n, t.dark) for n, t in system.tokens.items()),
    }

    html = _TEMPLATE
    for old, new in replacements.items():
        html = html.replace(old, new)

    with open(output_path, "w") as f:
        f.write(html)
