"""
Tests for the Color model.
"""

import unittest

from contrast_color.models.color import (
    Color,
    ColorError,
    ColorFormat,
    is_valid_color,
    mix_colors,
    parse_color,
    relative_luminance,
    try_parse_color,
)


class TestColorParsing(unittest.TestCase):
    """Tests for parsing color strings and values."""

    def test_parse_hex(self):
        """Test six-digit, short and hash-less hex strings."""
        self.assertEqual(parse_color("#FF0000").rgb, (255, 0, 0))
        self.assertEqual(parse_color("#abc").rgb, (170, 187, 204))
        self.assertEqual(parse_color("3366ff").rgb, (51, 102, 255))
        self.assertEqual(parse_color("  #3366FF ").hex, "#3366ff")

    def test_parse_hex_with_alpha(self):
        """Test eight- and four-digit hex strings carry alpha."""
        color = parse_color("#ff000080")
        self.assertEqual(color.rgb, (255, 0, 0))
        self.assertAlmostEqual(color.alpha, 128 / 255)

        self.assertEqual(parse_color("#f000").alpha, 0.0)

    def test_parse_rgb(self):
        """Test rgb() and rgba() strings, including percentages."""
        self.assertEqual(parse_color("rgb(255, 0, 0)").rgb, (255, 0, 0))
        self.assertEqual(parse_color("rgb(100%, 0%, 50%)").rgb, (255, 0, 128))

        color = parse_color("rgba(0, 0, 255, 0.5)")
        self.assertEqual(color.rgb, (0, 0, 255))
        self.assertEqual(color.alpha, 0.5)

    def test_parse_hsl(self):
        """Test hsl() and hsla() strings."""
        self.assertEqual(parse_color("hsl(120, 100%, 50%)").rgb, (0, 255, 0))

        color = parse_color("hsla(240, 100%, 50%, 0.25)")
        self.assertEqual(color.rgb, (0, 0, 255))
        self.assertEqual(color.alpha, 0.25)

    def test_parse_named(self):
        """Test CSS color names are case-insensitive."""
        self.assertEqual(parse_color("Navy").rgb, (0, 0, 128))
        self.assertEqual(parse_color("cornflowerblue").rgb, (100, 149, 237))
        self.assertEqual(Color.from_name("WHITE").hex, "#ffffff")

    def test_parse_transparent_keyword(self):
        color = parse_color("transparent")
        self.assertEqual(color.alpha, 0.0)
        self.assertTrue(color.is_transparent)

    def test_parse_tuples_and_mappings(self):
        """Test tuple, mapping and Color inputs."""
        self.assertEqual(parse_color((10, 20, 30)).rgb, (10, 20, 30))
        self.assertEqual(parse_color((10, 20, 30, 0.5)).alpha, 0.5)
        self.assertEqual(parse_color({"r": 1, "g": 2, "b": 3, "a": 0.0}).rgba, (1, 2, 3, 0.0))

        original = Color("#123456")
        self.assertIs(parse_color(original), original)

    def test_invalid_inputs(self):
        """Test that malformed values raise ColorError."""
        for value in ("not-a-color", "#ggg", "#12345", "rgb(1, 2)", "hsl(a, b, c)",
                      "", "rgb(1, 2, 3", 42, None, (1, 2), {"r": 1}):
            with self.subTest(value=value):
                with self.assertRaises(ColorError):
                    parse_color(value)
                self.assertIsNone(try_parse_color(value))
                self.assertFalse(is_valid_color(value))

    def test_non_finite_values_are_invalid(self):
        """Infinite or NaN channels and alphas raise ColorError, never OverflowError."""
        for value in ("rgb(inf, 0, 0)", "rgb(1e999, 0, 0)", "rgba(0, 0, 0, nan)",
                      "hsl(inf, 50%, 50%)", "hsl(0, nan%, 50%)",
                      (float("inf"), 0, 0), (0, float("nan"), 0), (0, 0, 0, float("inf")),
                      {"r": float("inf"), "g": 0, "b": 0}):
            with self.subTest(value=value):
                with self.assertRaises(ColorError):
                    parse_color(value)
                self.assertIsNone(try_parse_color(value))

        with self.assertRaises(ColorError):
            Color.from_hsl(float("inf"), 0.5, 0.5)

    def test_huge_integer_channels_are_clamped(self):
        self.assertEqual(Color((10 ** 400, 0, 0)).rgb, (255, 0, 0))

    def test_unknown_name(self):
        with self.assertRaises(ColorError):
            Color.from_name("blurple")

    def test_channels_are_clamped(self):
        color = Color((300, -5, 12.6, 2.0))
        self.assertEqual(color.rgba, (255, 0, 13, 1.0))


class TestColorProperties(unittest.TestCase):
    """Tests for derived color properties."""

    def test_hsl(self):
        self.assertEqual(Color("#ff0000").hsl, (0.0, 1.0, 0.5))
        self.assertEqual(Color("#3366ff").hue, 225.0)
        self.assertEqual(Color("#808080").saturation, 0.0)

    def test_achromatic(self):
        for value in ("#000000", "#ffffff", "#808080", "gray"):
            with self.subTest(value=value):
                self.assertTrue(Color(value).is_achromatic)
        self.assertFalse(Color("#ff0000").is_achromatic)

    def test_opacity_flags(self):
        self.assertTrue(Color("#ff0000").is_opaque)
        self.assertFalse(Color("#ff0000").is_transparent)
        self.assertFalse(Color("rgba(255, 0, 0, 0.5)").is_opaque)
        self.assertFalse(Color("transparent").is_opaque)
        self.assertTrue(Color("transparent").is_transparent)

    def test_luminance(self):
        self.assertAlmostEqual(Color("#ffffff").luminance, 1.0)
        self.assertEqual(Color("#000000").luminance, 0.0)
        self.assertAlmostEqual(Color("#ff0000").luminance, 0.2126)
        self.assertAlmostEqual(relative_luminance((0, 255, 0)), 0.7152)

    def test_luminance_linear_segment(self):
        """Channels at or below 0.03928 use the linear segment."""
        self.assertAlmostEqual(relative_luminance((10, 10, 10)), (10 / 255) / 12.92)

    def test_contrast_ratio(self):
        black = Color("#000000")
        white = Color("#ffffff")
        self.assertAlmostEqual(black.contrast_ratio(white), 21.0)
        self.assertAlmostEqual(white.contrast_ratio(black), 21.0)
        self.assertAlmostEqual(white.contrast_ratio(white), 1.0)

    def test_equality_and_hash(self):
        self.assertEqual(Color("red"), Color("#ff0000"))
        self.assertEqual(hash(Color("red")), hash(Color("#ff0000")))
        self.assertNotEqual(Color("red"), Color("#ff000080"))
        self.assertNotEqual(Color("red"), "#ff0000")

    def test_format_hint(self):
        self.assertEqual(Color.from_hex("#ff0000").format, ColorFormat.HEX)
        self.assertEqual(Color.from_name("red").format, ColorFormat.NAMED)

    def test_css_string(self):
        self.assertEqual(str(Color("#ff0000")), "#ff0000")
        self.assertEqual(str(Color("rgba(255, 0, 0, 0.5)")), "rgba(255, 0, 0, 0.5000)")


class TestColorOperations(unittest.TestCase):
    """Tests for spin, mix and alpha changes."""

    def test_spin(self):
        red = Color("#ff0000")
        self.assertEqual(red.spin(180).hex, "#00ffff")
        self.assertEqual(red.spin(120).hex, "#00ff00")
        self.assertEqual(red.spin(-120).hex, "#0000ff")
        self.assertEqual(red.spin(180).spin(180), red)

    def test_spin_wraps(self):
        color = Color("#3366ff")
        self.assertEqual(color.spin(360), color)
        self.assertEqual(color.spin(-360), color)
        self.assertEqual(color.spin(540), color.spin(180))

    def test_spin_zero_is_identity(self):
        color = Color("#3366ff")
        self.assertEqual(color.spin(0).hex, "#3366ff")

    def test_spin_preserves_alpha(self):
        self.assertEqual(Color("rgba(255, 0, 0, 0.5)").spin(90).alpha, 0.5)

    def test_mix(self):
        black = Color("#000000")
        white = Color("#ffffff")
        self.assertEqual(mix_colors(black, white, 0), black)
        self.assertEqual(mix_colors(black, white, 100), white)
        self.assertEqual(mix_colors(black, white, 50).rgb, (128, 128, 128))
        self.assertEqual(black.mix(white, 50), mix_colors(black, white, 50))

    def test_mix_interpolates_alpha(self):
        clear = Color("#00000000")
        opaque = Color("#000000")
        self.assertEqual(mix_colors(clear, opaque, 50).alpha, 0.5)

    def test_with_alpha(self):
        color = Color("#ff0000")
        self.assertIs(color.with_alpha(1.0), color)
        self.assertEqual(color.with_alpha(0.2).rgba, (255, 0, 0, 0.2))


if __name__ == "__main__":
    unittest.main()
