#!/usr/bin/env python3
"""
Generate every preset color system.
Each preset is written to out/<preset>/.
"""

import argparse
import subprocess
import sys
from pathlib import Path

from semantic_palette import PRESETS


def main():
    parser = argparse.ArgumentParser(description="Generate every preset color system")
    parser.add_argument(
        "--method",
        choices=("oklch", "lab", "hsl"),
        default=None,
        help="Override the color space method for all presets",
    )
    parser.add_argument(
        "--format",
        choices=("hex", "rgb", "hsl"),
        default="hex",
        help="Color format used in exported files",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    out_dir = root / "out"
    out_dir.mkdir(parents=True, exist_ok=True)

    print(f"Found {len(PRESETS)} presets to process\n")

    failed = []
    for name in PRESETS:
        preset_out_dir = out_dir / name

        print(f"{'=' * 60}")
        print(f"Generating preset: {name}")
        print(f"{'=' * 60}")

        cmd = [
            sys.executable,
            "-m",
            "semantic_palette.cli",
            "--preset",
            name,
            "-o",
            str(preset_out_dir),
            "--format",
            args.format,
        ]
        if args.method is not None:
            cmd.extend(["--method", args.method])

        result = subprocess.run(cmd, cwd=root)

        if result.returncode != 0:
            print(f"Error generating {name}")
            failed.append(name)
            continue
        print()

    print(f"{'=' * 60}")
    print("Done! Presets written to:")
    print(f"  {out_dir}")
    if failed:
        print(f"Failed: {', '.join(failed)}")
    print(f"{'=' * 60}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
