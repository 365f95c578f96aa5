import argparse
import logging
import os
import sys

from .color import is_valid_hex
from .export import (
    create_html_preview,
    export_json,
    generate_contrast_report,
    generate_css,
    generate_tailwind_config,
    print_system,
)
from .palette import (
    DEFAULT_OPTIONS,
    PRESETS,
    BaseColorSpec,
    build_color_system,
    get_preset,
    load_config,
)
from .palette.options import INTERACTIVE_MODES
from .spaces import COLOR_SPACE_METHODS


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate neutral/primary color scales and semantic design tokens"
    )
    parser.add_argument(
        "neutral",
        nargs="?",
        default=None,
        help="Neutral base color (hex)",
    )
    parser.add_argument(
        "primary",
        nargs="?",
        default=None,
        help="Primary base color (hex)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        help="Start from a preset color system",
    )
    parser.add_argument(
        "--config",
        metavar="JSON",
        help="Load base colors and options from a JSON configuration file",
    )
    parser.add_argument(
        "--from-image",
        metavar="IMAGE",
        help="Suggest base colors from an image instead of passing them explicitly",
    )
    parser.add_argument("--neutral-name", help="Family name for the neutral scale")
    parser.add_argument("--primary-name", help="Family name for the primary scale")
    parser.add_argument(
        "--method",
        choices=COLOR_SPACE_METHODS,
        default=None,
        help="Color space used to build the scales (default: oklch)",
    )
    parser.add_argument(
        "--fixed-curve",
        action="store_true",
        default=None,
        help="Synthesize every weight from the lightness curve instead of anchoring the base color",
    )
    parser.add_argument(
        "--dynamic-status",
        action="store_true",
        default=None,
        help="Derive status colors from the primary chroma",
    )
    parser.add_argument(
        "--interactive",
        choices=INTERACTIVE_MODES,
        default=None,
        help="How the interactive primary weight is chosen (default: optimized)",
    )
    parser.add_argument(
        "--format",
        choices=("hex", "rgb", "hsl"),
        default="hex",
        help="Color format used in exported files",
    )
    parser.add_argument(
        "--media",
        action="store_true",
        help="Use prefers-color-scheme media queries for the dark theme in CSS",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output",
    )
    return parser


def _resolve_inputs(parser, args):
    """Work out base colors and options: flags > --config > --preset > defaults."""
    neutral = primary = None
    options = DEFAULT_OPTIONS

    if args.preset:
        preset = get_preset(args.preset)
        neutral, primary, options = preset.neutral, preset.primary, preset.options

    if args.config:
        try:
            neutral, primary, options = load_config(args.config)
        except (OSError, ValueError) as exc:
            parser.error(f"Cannot read config {args.config}: {exc}")

    if args.from_image:
        if args.neutral or args.primary:
            parser.error("Cannot use both base colors and --from-image")
        from .extract import suggest_base_colors

        print(f"Analyzing: {args.from_image}")
        try:
            neutral_hex, primary_hex = suggest_base_colors(args.from_image)
        except OSError as exc:
            parser.error(f"Cannot read image {args.from_image}: {exc}")
        neutral = BaseColorSpec("neutral", neutral_hex)
        primary = BaseColorSpec("primary", primary_hex)
        print(f"Suggested base colors: neutral {neutral_hex}, primary {primary_hex}")

    if args.neutral is not None:
        neutral = BaseColorSpec("neutral", args.neutral)
    if args.primary is not None:
        primary = BaseColorSpec("primary", args.primary)

    if neutral is None or primary is None:
        parser.error("Base colors are required (NEUTRAL PRIMARY, --preset, --config or --from-image)")

    if args.neutral_name:
        neutral = neutral._replace(name=args.neutral_name)
    if args.primary_name:
        primary = primary._replace(name=args.primary_name)

    options = options.merged(
        color_space_method=args.method,
        use_fixed_contrast_curve=args.fixed_curve,
        dynamic_status_chroma=args.dynamic_status,
        interactive_color_mode=args.interactive,
    )
    return neutral, primary, options


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    neutral, primary, options = _resolve_inputs(parser, args)

    for label, spec in (("neutral", neutral), ("primary", primary)):
        if not is_valid_hex(spec.hex_value):
            print(f"Invalid {label} color: {spec.hex_value!r} (expected #rrggbb)", file=sys.stderr)
            return 1

    system = build_color_system(neutral, primary, options)
    if system is None:
        print("Color system generation failed", file=sys.stderr)
        return 1

    output_dir = args.output
    os.makedirs(output_dir, exist_ok=True)

    print_system(system)
    report, issues = generate_contrast_report(system)
    print("\n" + report)

    json_path = os.path.join(output_dir, "palette.json")
    css_path = os.path.join(output_dir, "tokens.css")
    tailwind_path = os.path.join(output_dir, "tailwind.config.js")
    report_path = os.path.join(output_dir, "contrast_report.txt")
    html_path = os.path.join(output_dir, "palette_preview.html")

    export_json(system, json_path, fmt=args.format)

    with open(css_path, "w") as f:
        f.write(generate_css(system, fmt=args.format, include_media=args.media))

    with open(tailwind_path, "w") as f:
        f.write(generate_tailwind_config(system, fmt=args.format))

    with open(report_path, "w") as f:
        f.write(report)

    create_html_preview(
        system,
        html_path,
        neutral_hex=neutral.hex_value,
        primary_hex=primary.hex_value,
    )

    print("\n" + "=" * 60)
    print("Exported:")
    print(f"  - {json_path}")
    print(f"  - {css_path}")
    print(f"  - {tailwind_path}")
    print(f"  - {report_path} ({len(issues)} issue(s))")
    print(f"  - {html_path}")
    print(f"\nMethod: {options.color_space_method}, interactive: {options.interactive_color_mode}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
