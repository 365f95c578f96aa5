from ..color import format_color
from ..palette.system import scale_families


def _block(opener, lines, closer, indent="  "):
    body = [f"{indent}{line}" if line else "" for line in lines]
    return "\n".join([opener, *body, closer])


def _scale_vars(name, scale, fmt):
    return [f"--{name}-{weight}: {format_color(entry.hex, fmt)};" for weight, entry in scale.items()]


def _token_vars(tokens, theme, fmt):
    return [
        f"--{name}: {format_color(getattr(token, theme).hex, fmt)};" for name, token in tokens.items()
    ]


def generate_css(system, fmt="hex", include_media=False, include_themes=True):
    """CSS custom properties for the scales and (optionally) the semantic tokens.

    Light tokens go in ``:root``; dark overrides go under ``[data-theme="dark"]``
    or, with ``include_media``, a ``prefers-color-scheme: dark`` media query.
    """
    (neutral_key, neutral_scale), (primary_key, primary_scale) = scale_families(system)
    root = _scale_vars(neutral_key, neutral_scale, fmt)
    root.append("")
    root.extend(_scale_vars(primary_key, primary_scale, fmt))

    if include_themes:
        root.append("")
        root.append("/* Semantic tokens */")
        root.extend(_token_vars(system.tokens, "light", fmt))

    blocks = []
    if include_media:
        blocks.append(
            _block(
                "@media (prefers-color-scheme: light) {\n  :root {",
                root,
                "  }\n}",
                indent="    ",
            )
        )
    else:
        blocks.append(_block(":root {", root, "}"))

    if include_themes:
        dark = ["/* Dark theme overrides */", *_token_vars(system.tokens, "dark", fmt)]
        if include_media:
            blocks.append(
                _block(
                    "@media (prefers-color-scheme: dark) {\n  :root {",
                    dark,
                    "  }\n}",
                    indent="    ",
                )
            )
        else:
            blocks.append(_block('[data-theme="dark"] {', dark, "}"))

    return "\n\n".join(blocks) + "\n"


def generate_tailwind_config(system, fmt="hex"):
    """A ``tailwind.config.js`` exposing both scales under ``theme.extend.colors``."""
    lines = ["module.exports = {", "  theme: {", "    extend: {", "      colors: {"]
    for name, scale in scale_families(system):
        lines.append(f"        '{name}': {{")
        for weight, entry in scale.items():
            lines.append(f"          {weight}: '{format_color(entry.hex, fmt)}',")
        lines.append("        },")
    lines.extend(["      },", "    },", "  },", "};"])
    return "\n".join(lines) + "\n"
