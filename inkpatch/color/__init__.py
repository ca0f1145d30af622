"""
Color: HSV/RGB/hex conversion, the HSV wheel, and the wheel picker.
"""
from .convert import (
    InvalidColorFormat,
    hex_to_hsv,
    hex_to_hsv_or,
    hex_to_rgb,
    hsv_to_hex,
    hsv_to_rgb,
    invert_hex,
    is_valid_hex,
    parse_hex,
    rgb_to_hsv,
)
from .picker import ColorWheelPicker, PickerState, wheel_radius
from .wheel import paint_selection_marker, paint_wheel, pick_from_point, sample_wheel_color

__all__ = [
    "InvalidColorFormat",
    "hex_to_hsv",
    "hex_to_hsv_or",
    "hex_to_rgb",
    "hsv_to_hex",
    "hsv_to_rgb",
    "invert_hex",
    "is_valid_hex",
    "parse_hex",
    "rgb_to_hsv",
    "ColorWheelPicker",
    "PickerState",
    "wheel_radius",
    "paint_selection_marker",
    "paint_wheel",
    "pick_from_point",
    "sample_wheel_color",
]
