#!/usr/bin/env python3
"""
CLI: Render the HSV color wheel (with the selection marker) to a PNG.
The wheel is sized from the config's wheel.width_factor for the given screen unless
--radius is set.
Usage:
  python scripts/render_wheel.py
  python scripts/render_wheel.py --screen 1072x1448 --value 0.8 --hex "#3366CC"
  python scripts/render_wheel.py --radius 200 --invert --output wheel_night.png
  python scripts/render_wheel.py --config my_patches.yaml
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from PIL import Image

from inkpatch.color import ColorWheelPicker, InvalidColorFormat, hex_to_rgb, paint_selection_marker, paint_wheel
from inkpatch.config import load_config, settings_from_config
from inkpatch.surface import Surface


def _screen_size(text: str) -> tuple[int, int]:
    try:
        w, h = (int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {text!r}")
    return w, h


def main() -> int:
    parser = argparse.ArgumentParser(description="Render the HSV color wheel to a PNG.")
    parser.add_argument(
        "--screen",
        type=_screen_size,
        default=(600, 800),
        help="Screen size WIDTHxHEIGHT used to size the wheel (default: 600x800).",
    )
    parser.add_argument("--radius", type=int, default=None, help="Wheel radius in pixels (default: from config and --screen).")
    parser.add_argument(
        "--value",
        type=float,
        default=None,
        help="Brightness 0-1 (default: taken from --hex, or 1.0).",
    )
    parser.add_argument("--hex", type=str, default="#FF0000", help="Selected color (default: #FF0000).")
    parser.add_argument(
        "--invert",
        action="store_true",
        help="Night-mode preview: invert painted colors when wheel.invert_in_night_mode is on.",
    )
    parser.add_argument("--background", type=str, default="#FFFFFF", help="Canvas color (default: #FFFFFF).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML (default: config/default.yaml).")
    parser.add_argument("--output", "-o", type=Path, default=Path("wheel.png"), help="Output PNG path.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        background = hex_to_rgb(args.background)
    except InvalidColorFormat as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = settings_from_config(load_config(args.config))
    margin = 8
    picker = ColorWheelPicker.from_settings((0, 0), args.screen[0], args.screen[1], settings.wheel, args.hex)
    if args.radius is not None:
        picker.radius = max(0, args.radius)
    radius = picker.radius
    picker.center = (radius + margin, radius + margin)
    if args.value is not None:
        picker.value = max(0.0, min(1.0, args.value))

    size = 2 * (radius + margin) + 1
    invert = args.invert and picker.invert_in_night_mode
    surface = Surface.blank(size, size, background)
    paint_wheel(surface, margin, margin, radius, picker.value, invert=invert)
    paint_selection_marker(surface, picker.center[0], picker.center[1], radius, picker.hue, picker.saturation)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(surface.frame).save(args.output)
    print(f"Wrote {args.output} ({size}x{size}, selected {picker.hex}, {picker.brightness_label})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
