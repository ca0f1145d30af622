"""
Unit tests for HSV/RGB/hex conversion.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inkpatch.color import (
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


class TestHexToHsv(unittest.TestCase):
    def test_primaries(self):
        self.assertEqual(hex_to_hsv("#FF0000"), (0.0, 1.0, 1.0))
        h, s, v = hex_to_hsv("#00FF00")
        self.assertAlmostEqual(h, 120.0)
        h, s, v = hex_to_hsv("#0000FF")
        self.assertAlmostEqual(h, 240.0)
        h, s, v = hex_to_hsv("#FF00FF")
        self.assertAlmostEqual(h, 300.0)

    def test_gray_has_no_hue_or_saturation(self):
        h, s, v = hex_to_hsv("#808080")
        self.assertEqual(h, 0.0)
        self.assertEqual(s, 0.0)
        self.assertAlmostEqual(v, 0.5020, places=3)
        self.assertAlmostEqual(v, 128 / 255)

    def test_black(self):
        self.assertEqual(hex_to_hsv("#000000"), (0.0, 0.0, 0.0))
        self.assertEqual(rgb_to_hsv(0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    def test_hash_is_optional_and_case_insensitive(self):
        self.assertEqual(hex_to_hsv("ff0000"), hex_to_hsv("#FF0000"))
        self.assertEqual(hex_to_rgb("#a1B2c3"), (0xA1, 0xB2, 0xC3))

    def test_shorthand_matches_long_form(self):
        self.assertEqual(hex_to_hsv("#F00"), hex_to_hsv("#FF0000"))
        self.assertEqual(parse_hex("#F00"), (1.0, 0.0, 0.0))

    def test_shorthand_scales_each_nibble_by_fifteen(self):
        r, g, b = parse_hex("#4A0")
        self.assertEqual(r, 4 / 15)
        self.assertEqual(g, 10 / 15)
        self.assertEqual(b, 0.0)
        # nibble/15 and nibble·17/255 are the same scale
        self.assertAlmostEqual(r, 4 * 17 / 255)
        self.assertAlmostEqual(parse_hex("#444")[0], parse_hex("#444444")[0])

    def test_malformed_input_raises(self):
        for bad in ("#12", "#1234", "#1234567", "", "#", "#GGGGGG", "#12 456", " #FFF", "#+FF", "0x00FF00"):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidColorFormat):
                    hex_to_hsv(bad)
        with self.assertRaises(InvalidColorFormat):
            parse_hex(None)

    def test_invalid_color_format_is_a_value_error(self):
        with self.assertRaises(ValueError) as ctx:
            parse_hex("#XYZ")
        self.assertEqual(ctx.exception.text, "#XYZ")

    def test_fallback_logs_and_returns_default(self):
        with self.assertLogs("inkpatch.color.convert", level="WARNING"):
            self.assertEqual(hex_to_hsv_or("not a color"), (0.0, 1.0, 1.0))
        self.assertEqual(hex_to_hsv_or("#00F", default=(10.0, 0.5, 0.5))[0], 240.0)
        with self.assertLogs("inkpatch.color.convert", level="WARNING"):
            self.assertEqual(hex_to_hsv_or("#bad!", default=(10.0, 0.5, 0.5)), (10.0, 0.5, 0.5))

    def test_three_letter_words_can_be_valid_shorthand(self):
        # "bad" reads as #BBAADD, not as malformed input
        self.assertEqual(hex_to_rgb("bad"), (0xBB, 0xAA, 0xDD))
        self.assertEqual(hex_to_hsv_or("bad", default=(10.0, 0.5, 0.5)), hex_to_hsv("#BBAADD"))


class TestHsvToRgb(unittest.TestCase):
    def test_sextants(self):
        self.assertEqual(hsv_to_rgb(0, 1, 1), (255, 0, 0))
        self.assertEqual(hsv_to_rgb(60, 1, 1), (255, 255, 0))
        self.assertEqual(hsv_to_rgb(120, 1, 1), (0, 255, 0))
        self.assertEqual(hsv_to_rgb(180, 1, 1), (0, 255, 255))
        self.assertEqual(hsv_to_rgb(240, 1, 1), (0, 0, 255))
        self.assertEqual(hsv_to_rgb(300, 1, 1), (255, 0, 255))
        self.assertEqual(hsv_to_rgb(30, 1, 1), (255, 128, 0))

    def test_value_and_saturation(self):
        self.assertEqual(hsv_to_rgb(200, 0, 1), (255, 255, 255))
        self.assertEqual(hsv_to_rgb(200, 1, 0), (0, 0, 0))
        self.assertEqual(hsv_to_rgb(240, 1, 0.5), (0, 0, 128))

    def test_hue_wraps(self):
        self.assertEqual(hsv_to_rgb(360, 1, 1), hsv_to_rgb(0, 1, 1))
        self.assertEqual(hsv_to_rgb(-120, 1, 1), hsv_to_rgb(240, 1, 1))


class TestHexRoundTrip(unittest.TestCase):
    def test_hsv_to_hex_format(self):
        self.assertEqual(hsv_to_hex(0, 1, 1), "#FF0000")
        self.assertEqual(hsv_to_hex(0, 0, 1), "#FFFFFF")
        self.assertEqual(hsv_to_hex(0, 0, 0), "#000000")
        self.assertEqual(hsv_to_hex(240, 1, 0.5), "#000080")

    def test_round_trip_within_one_step(self):
        for h in range(0, 360, 15):
            for s in (0.0, 0.25, 0.5, 1.0):
                for v in (0.0, 0.3, 0.75, 1.0):
                    hex_color = hsv_to_hex(h, s, v)
                    h2, s2, v2 = hex_to_hsv(hex_color)
                    before = hsv_to_rgb(h, s, v)
                    after = hsv_to_rgb(h2, s2, v2)
                    for c1, c2 in zip(before, after):
                        self.assertLessEqual(abs(c1 - c2), 1, (h, s, v, hex_color))
                    self.assertLessEqual(abs(v - v2), 1 / 255 + 1e-9)
                    if s * v >= 0.3:
                        dh = abs(h - h2) % 360
                        self.assertLessEqual(min(dh, 360 - dh), 1.0, (h, s, v, hex_color))

    def test_hex_survives_round_trip_exactly(self):
        for hex_color in ("#123456", "#FEDCBA", "#00FF7F", "#808080", "#010203"):
            self.assertEqual(hsv_to_hex(*hex_to_hsv(hex_color)), hex_color)


class TestInvertAndValidate(unittest.TestCase):
    def test_invert(self):
        self.assertEqual(invert_hex("#FFFFFF"), "#000000")
        self.assertEqual(invert_hex("#123456"), "#EDCBA9")
        self.assertEqual(invert_hex("#FFF"), "#000000")
        self.assertEqual(invert_hex(invert_hex("#3A7F10")), "#3A7F10")

    def test_invert_rejects_malformed(self):
        with self.assertRaises(InvalidColorFormat):
            invert_hex("#12")

    def test_is_valid_hex(self):
        self.assertTrue(is_valid_hex("#FFF"))
        self.assertTrue(is_valid_hex("#a0b1c2"))
        self.assertFalse(is_valid_hex("#FFFF"))
        self.assertFalse(is_valid_hex("FFFFFF"))
        self.assertFalse(is_valid_hex("#GGG"))
        self.assertFalse(is_valid_hex(None))


if __name__ == "__main__":
    unittest.main()
