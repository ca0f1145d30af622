#!/usr/bin/env python3
"""
CLI: Give a cover image rounded corners and an outline, the way the library view paints them.
Usage:
  python scripts/round_cover.py cover.jpg
  python scripts/round_cover.py cover.jpg --radius 32 --thickness 2 --output rounded.png
  python scripts/round_cover.py cover.jpg --background "#202020" --border "#FFFFFF"
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import dataclasses
import logging

import numpy as np
from PIL import Image

from inkpatch.color import InvalidColorFormat, hex_to_rgb, is_valid_hex
from inkpatch.config import load_config, settings_from_config
from inkpatch.geometry import Rect
from inkpatch.surface import Surface
from inkpatch.theme import ThemeSnapshot, round_cover


def main() -> int:
    parser = argparse.ArgumentParser(description="Round the corners of a cover image.")
    parser.add_argument("image", type=Path, help="Input image.")
    parser.add_argument("--radius", type=int, default=None, help="Corner radius (default: from config).")
    parser.add_argument("--thickness", type=int, default=None, help="Outline thickness (default: from config).")
    parser.add_argument("--border", type=str, default=None, help="Outline color, e.g. #000000 (default: from config).")
    parser.add_argument(
        "--background",
        type=str,
        default=None,
        help="Color for clipped corners (default: theme background from config).",
    )
    parser.add_argument("--night", action="store_true", help="Resolve theme colors for night mode.")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Output path (default: <image>_rounded.png).")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args.image.exists():
        print(f"Error: image not found: {args.image}", file=sys.stderr)
        return 1

    settings = settings_from_config(load_config(args.config))
    covers = settings.covers
    if args.radius is not None:
        covers = dataclasses.replace(covers, radius=args.radius)
    if args.thickness is not None:
        covers = dataclasses.replace(covers, border_thickness=max(1, args.thickness))
    if args.border is not None:
        if not is_valid_hex(args.border):
            print(f"Error: invalid border color {args.border!r}", file=sys.stderr)
            return 1
        covers = dataclasses.replace(covers, border_color=args.border)

    try:
        if args.background is not None:
            background = hex_to_rgb(args.background)
        else:
            background = ThemeSnapshot.capture(settings.theme, args.night).background_rgb
    except InvalidColorFormat as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with Image.open(args.image) as img:
        frame = np.array(img.convert("RGB"))
    surface = Surface(frame)
    round_cover(surface, Rect(0, 0, surface.width, surface.height), covers, background=background)

    output = args.output or args.image.with_name(f"{args.image.stem}_rounded.png")
    Image.fromarray(surface.frame).save(output)
    print(f"Wrote {output} (radius={covers.radius}, thickness={covers.border_thickness})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
