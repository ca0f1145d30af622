"""
Color conversions: HSV ↔ RGB, hex ↔ HSV, night-mode inversion.
Hue is in degrees [0, 360); saturation and value in [0, 1]; RGB bytes 0-255.
"""
import logging
import re

logger = logging.getLogger(__name__)

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
# Accepted by settings input: "#" followed by 3 or 6 hex digits
_HEX_INPUT = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

DEFAULT_HSV: tuple[float, float, float] = (0.0, 1.0, 1.0)  # red


class InvalidColorFormat(ValueError):
    """Hex color string has the wrong length or non-hex characters."""
    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """
    HSV → RGB bytes. Piecewise by 60° sextant: chroma c = v·s,
    x = c·(1 - |(h/60 mod 2) - 1|), match value m = v - c.
    """
    h = h % 360
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c
    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return (
        int((r + m) * 255 + 0.5),
        int((g + m) * 255 + 0.5),
        int((b + m) * 255 + 0.5),
    )


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Normalized RGB (0-1 each) → (hue 0-360, saturation 0-1, value 0-1)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    v = cmax
    s = delta / cmax if cmax > 0 else 0.0
    h = 0.0
    if delta > 0:
        if cmax == r:
            h = 60 * (((g - b) / delta) % 6)
        elif cmax == g:
            h = 60 * ((b - r) / delta + 2)
        else:
            h = 60 * ((r - g) / delta + 4)
    h = (h + 360) % 360
    return h, s, v


def parse_hex(text: str) -> tuple[float, float, float]:
    """
    "#RRGGBB" or "#RGB" → normalized (r, g, b). The leading "#" is optional.
    Shorthand digits scale by nibble/15, which equals nibble·17/255.
    """
    if not isinstance(text, str):
        raise InvalidColorFormat(f"Expected hex color string, got {type(text).__name__}", text=repr(text))
    digits = text[1:] if text.startswith("#") else text
    if not _HEX_DIGITS.fullmatch(digits):
        raise InvalidColorFormat(f"Invalid hex color {text!r}: non-hex characters", text=text)
    if len(digits) == 6:
        return (
            int(digits[0:2], 16) / 255,
            int(digits[2:4], 16) / 255,
            int(digits[4:6], 16) / 255,
        )
    if len(digits) == 3:
        return (
            int(digits[0], 16) / 15,
            int(digits[1], 16) / 15,
            int(digits[2], 16) / 15,
        )
    raise InvalidColorFormat(f"Invalid hex color {text!r}: expected 3 or 6 digits", text=text)


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Hex color → RGB bytes."""
    r, g, b = parse_hex(text)
    return int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#%02X%02X%02X" % (rgb[0], rgb[1], rgb[2])


def hex_to_hsv(text: str) -> tuple[float, float, float]:
    """Hex color → (h, s, v). Raises InvalidColorFormat on malformed input."""
    return rgb_to_hsv(*parse_hex(text))


def hex_to_hsv_or(text: str, default: tuple[float, float, float] = DEFAULT_HSV) -> tuple[float, float, float]:
    """hex_to_hsv with a fallback for malformed input (logged, not raised)."""
    try:
        return hex_to_hsv(text)
    except InvalidColorFormat as e:
        logger.warning("%s; using HSV %s", e, default)
        return default


def hsv_to_hex(h: float, s: float, v: float) -> str:
    """(h, s, v) → "#RRGGBB" (uppercase)."""
    return rgb_to_hex(hsv_to_rgb(h, s, v))


def invert_rgb(rgb: tuple[int, int, int]) -> tuple[int, int, int]:
    return 255 - rgb[0], 255 - rgb[1], 255 - rgb[2]


def invert_hex(text: str) -> str:
    """Invert each channel: "#RRGGBB" → "#(FF-R)(FF-G)(FF-B)"."""
    return rgb_to_hex(invert_rgb(hex_to_rgb(text)))


def is_valid_hex(text: str) -> bool:
    """True for "#" followed by exactly 3 or 6 hex digits."""
    return isinstance(text, str) and _HEX_INPUT.fullmatch(text) is not None
