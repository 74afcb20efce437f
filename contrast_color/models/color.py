"""
Color model for contrast resolution.
Provides parsing, conversion, mixing and hue rotation for background colors.
"""

import functools
import logging
import math
from enum import Enum, auto
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from matplotlib.colors import CSS4_COLORS

logger = logging.getLogger(__name__)

# Type definitions
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, float]
HSL = Tuple[float, float, float]
HSLA = Tuple[float, float, float, float]
ColorValue = Union[str, RGB, RGBA, HSL, HSLA, Mapping[str, Any]]

# Constants
DEFAULT_ALPHA = 1.0
COLOR_PRECISION = 4  # Decimal places for public HSL values
TRANSPARENT_KEYWORD = "transparent"


class ColorFormat(Enum):
    """Notation a color was written in."""
    HEX = auto()
    RGB = auto()
    RGBA = auto()
    HSL = auto()
    HSLA = auto()
    NAMED = auto()


class ColorError(Exception):
    """Raised when a value cannot be read as a color."""
    pass


@functools.lru_cache(maxsize=1)
def _named_colors() -> Dict[str, str]:
    """CSS4 color names mapped to their hex codes."""
    return {name.lower(): code for name, code in CSS4_COLORS.items()}


def relative_luminance(rgb: Tuple[float, float, float]) -> float:
    """
    WCAG 2.0 relative luminance of 0-255 sRGB channels.

    Returns 0.0 for black and 1.0 for white.
    """
    def linear(channel: float) -> float:
        c = channel / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (linear(c) for c in rgb[:3])
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


class Color:
    """
    Immutable color representation.

    Colors are stored as integer RGB channels plus a float alpha. HSL values
    are derived on demand and never stored, so round-trips stay exact.
    """

    __slots__ = ('_r', '_g', '_b', '_a', '_format', '_hash')

    def __init__(
        self,
        value: Union[ColorValue, 'Color'],
        alpha: float = DEFAULT_ALPHA,
        format_hint: Optional[ColorFormat] = None
    ):
        """
        Build a color from a CSS string, a tuple, an ``r/g/b[/a]`` mapping or
        another Color.

        Args:
            value: Color value. Tuples are read as RGB(A) unless
                ``format_hint`` says HSL or HSLA.
            alpha: Opacity used when ``value`` carries none
            format_hint: Notation ``value`` is written in, if known

        Raises:
            ColorError: For malformed, non-numeric or non-finite input
        """
        self._format = format_hint

        try:
            if isinstance(value, Color):
                r, g, b, a = value.rgba

            elif isinstance(value, str):
                r, g, b, a = self._parse_color_string(value)

            # HSL/HSLA tuples are only recognized with an explicit hint
            elif (
                isinstance(value, tuple)
                and len(value) in (3, 4)
                and format_hint in (ColorFormat.HSL, ColorFormat.HSLA)
            ):
                if len(value) == 3:
                    h, s, l = value
                    a = alpha
                else:
                    h, s, l, a = value

                if not all(_is_number(c) for c in (h, s, l)):
                    raise ColorError(f"HSL values must be numbers, got {value}")

                h = h % 360
                s = min(1.0, max(0.0, s))
                l = min(1.0, max(0.0, l))

                r, g, b = self._hsl_to_rgb(h, s, l)

            elif isinstance(value, tuple) and len(value) in (3, 4):
                if len(value) == 3:
                    r, g, b = value
                    a = alpha
                else:
                    r, g, b, a = value

                if not all(_is_number(c) for c in (r, g, b)):
                    raise ColorError(f"RGB values must be numbers, got {value}")

            elif isinstance(value, Mapping):
                r, g, b = value["r"], value["g"], value["b"]
                a = value.get("a", alpha)

                if not all(_is_number(c) for c in (r, g, b)):
                    raise ColorError(f"RGB values must be numbers, got {value}")

            else:
                raise ColorError(f"Unsupported color format: {value!r}")

            if not _is_number(a):
                raise ColorError(f"Invalid alpha value: {a!r}")

            self._r = min(255, max(0, int(round(r))))
            self._g = min(255, max(0, int(round(g))))
            self._b = min(255, max(0, int(round(b))))
            self._a = min(1.0, max(0.0, float(a)))

            self._hash = hash((self._r, self._g, self._b, self._a))

        except ColorError:
            raise
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ColorError(f"Failed to parse color value {value!r}: {e}") from e

    @classmethod
    def from_hex(cls, hex_string: str, alpha: float = DEFAULT_ALPHA) -> 'Color':
        """
        Build a color from ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

        ``alpha`` only applies to the forms without an alpha digit pair.
        """
        r, g, b, a = cls._parse_hex(hex_string.strip())
        if len(hex_string.strip().lstrip('#')) in (3, 6):
            a = alpha
        return cls((r, g, b, a), format_hint=ColorFormat.HEX)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: float = DEFAULT_ALPHA) -> 'Color':
        """Channels are clamped to 0-255 and rounded."""
        return cls((r, g, b, a), format_hint=ColorFormat.RGBA)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = DEFAULT_ALPHA) -> 'Color':
        """Hue wraps modulo 360; saturation and lightness are clamped to 0-1."""
        return cls((h, s, l, a), format_hint=ColorFormat.HSLA)

    @classmethod
    def from_name(cls, name: str, alpha: float = DEFAULT_ALPHA) -> 'Color':
        """
        Look up a CSS4 color name, ignoring case and surrounding whitespace.

        Raises:
            ColorError: For names outside the CSS4 table
        """
        key = name.lower().strip()
        if key not in _named_colors():
            raise ColorError(f"Unknown color name: {name}")

        r, g, b, _ = cls._parse_hex(_named_colors()[key])
        return cls((r, g, b, alpha), format_hint=ColorFormat.NAMED)

    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    @property
    def alpha(self) -> float:
        """Opacity, 0.0 (clear) to 1.0 (opaque)."""
        return self._a

    @property
    def format(self) -> Optional[ColorFormat]:
        """Format the color was created from, when known."""
        return self._format

    @property
    def rgb(self) -> RGB:
        return (self._r, self._g, self._b)

    @property
    def rgba(self) -> RGBA:
        return (self._r, self._g, self._b, self._a)

    @property
    def hsl(self) -> HSL:
        """Hue in degrees, saturation and lightness in 0-1, rounded to 4 places."""
        h, s, l = self._rgb_to_hsl(self._r, self._g, self._b)
        return (
            round(h, COLOR_PRECISION),
            round(s, COLOR_PRECISION),
            round(l, COLOR_PRECISION)
        )

    @property
    def hsla(self) -> HSLA:
        h, s, l = self.hsl
        return (h, s, l, self._a)

    @property
    def hue(self) -> float:
        return self.hsl[0]

    @property
    def saturation(self) -> float:
        return self.hsl[1]

    @property
    def lightness(self) -> float:
        return self.hsl[2]

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb``; alpha is dropped."""
        return f"#{self._r:02x}{self._g:02x}{self._b:02x}"

    @property
    def is_transparent(self) -> bool:
        return self._a == 0

    @property
    def is_opaque(self) -> bool:
        """True when no compositing against a canvas is needed."""
        return self._a == 1

    @property
    def is_achromatic(self) -> bool:
        """Check if the color has no hue (pure gray, black or white)."""
        return self._r == self._g == self._b

    @property
    def luminance(self) -> float:
        """WCAG relative luminance of the RGB channels, ignoring alpha."""
        return relative_luminance(self.rgb)

    def to_hex(self) -> str:
        return self.hex

    def with_alpha(self, alpha: float) -> 'Color':
        """Same channels at a different opacity; returns self when nothing changes."""
        if alpha == self._a:
            return self
        return Color((self._r, self._g, self._b), alpha)

    def spin(self, degrees: float) -> 'Color':
        """
        Rotate the hue around the color wheel.

        Args:
            degrees: Signed rotation; positive is clockwise. Wraps modulo 360.

        Returns:
            Color with rotated hue and the same saturation, lightness and alpha
        """
        h, s, l = self._rgb_to_hsl(self._r, self._g, self._b)
        return Color.from_hsl((h + degrees) % 360, s, l, self._a)

    def mix(self, other: 'Color', percent: float = 50) -> 'Color':
        """Mix with another color, moving percent% of the way toward it."""
        return mix_colors(self, other, percent)

    def contrast_ratio(self, other: 'Color') -> float:
        """WCAG contrast ratio against ``other``, from 1 (equal) to 21."""
        lighter, darker = sorted((self.luminance, other.luminance), reverse=True)
        return (lighter + 0.05) / (darker + 0.05)

    def to_css_string(self) -> str:
        """Hex when opaque, otherwise ``rgba(...)`` so the alpha survives."""
        if not self.is_opaque:
            return f"rgba({self._r}, {self._g}, {self._b}, {self._a:.4f})"
        return self.hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return False
        return self.rgba == other.rgba

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self.to_css_string()

    def __repr__(self) -> str:
        return f"Color(rgb=({self._r}, {self._g}, {self._b}), alpha={self._a:.4f})"

    @staticmethod
    def _parse_color_string(value: str) -> Tuple[int, int, int, float]:
        """Dispatch on the string's shape: keyword, CSS name, rgb(), hsl() or hex."""
        value = value.strip().lower()

        if not value:
            raise ColorError("Empty color string")

        if value == TRANSPARENT_KEYWORD:
            return 0, 0, 0, 0.0

        if value in _named_colors():
            r, g, b, _ = Color._parse_hex(_named_colors()[value])
            return r, g, b, DEFAULT_ALPHA

        if value.startswith('rgb'):
            return Color._parse_rgb(value)

        if value.startswith('hsl'):
            return Color._parse_hsl(value)

        # Hex color, with or without the leading #
        return Color._parse_hex(value)

    @staticmethod
    def _parse_hex(hex_string: str) -> Tuple[int, int, int, float]:
        """Accepts 3, 4, 6 or 8 hex digits, the ``#`` being optional."""
        digits = hex_string[1:] if hex_string.startswith('#') else hex_string

        if len(digits) not in (3, 4, 6, 8) or any(c not in '0123456789abcdefABCDEF' for c in digits):
            raise ColorError(f"Invalid hex color format: {hex_string}")

        # Short forms #RGB and #RGBA
        if len(digits) in (3, 4):
            digits = ''.join(c + c for c in digits)

        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else DEFAULT_ALPHA

        return r, g, b, a

    @staticmethod
    def _split_function_args(color_string: str, prefix: str) -> Tuple[bool, list]:
        """Split "name(a, b, c[, d])" into its comma-separated arguments."""
        has_alpha = color_string.startswith(prefix + 'a')
        open_idx = color_string.find('(')

        if open_idx == -1 or not color_string.endswith(')'):
            raise ColorError(f"Invalid {prefix} format: {color_string}")

        name = color_string[:open_idx].strip()
        if name not in (prefix, prefix + 'a'):
            raise ColorError(f"Invalid {prefix} format: {color_string}")

        values = [v.strip() for v in color_string[open_idx + 1:-1].split(',')]

        # rgb()/hsl() also accept an alpha argument in CSS Color 4
        if len(values) not in (3, 4) or (has_alpha and len(values) != 4):
            raise ColorError(f"Invalid {prefix} format: {color_string}")

        return len(values) == 4, values

    @staticmethod
    def _parse_alpha(value: str, color_string: str) -> float:
        try:
            if value.endswith('%'):
                a = float(value[:-1]) / 100
            else:
                a = float(value)
        except ValueError:
            raise ColorError(f"Invalid alpha value in: {color_string}")
        if not math.isfinite(a):
            raise ColorError(f"Alpha must be finite in: {color_string}")
        return min(1.0, max(0.0, a))

    @staticmethod
    def _parse_rgb(rgb_string: str) -> Tuple[int, int, int, float]:
        """
        Read ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``. Channels may be plain
        numbers or percentages and are clamped to 0-255.

        Raises:
            ColorError: On a malformed or non-finite argument
        """
        has_alpha, values = Color._split_function_args(rgb_string, 'rgb')

        channels = []
        try:
            for v in values[:3]:
                if v.endswith('%'):
                    channels.append(float(v[:-1]) * 255 / 100)
                else:
                    channels.append(float(v))
        except ValueError:
            raise ColorError(f"Invalid RGB values in: {rgb_string}")

        if not all(math.isfinite(c) for c in channels):
            raise ColorError(f"RGB values must be finite in: {rgb_string}")

        r, g, b = (min(255, max(0, int(round(c)))) for c in channels)

        a = DEFAULT_ALPHA
        if has_alpha:
            a = Color._parse_alpha(values[3], rgb_string)

        return r, g, b, a

    @staticmethod
    def _parse_hsl(hsl_string: str) -> Tuple[int, int, int, float]:
        """Read ``hsl(h, s%, l%)`` / ``hsla(h, s%, l%, a)`` into RGBA channels."""
        has_alpha, values = Color._split_function_args(hsl_string, 'hsl')

        try:
            h = float(values[0].rstrip('deg'))
            s = float(values[1].rstrip('%')) / 100
            l = float(values[2].rstrip('%')) / 100
        except ValueError:
            raise ColorError(f"Invalid HSL values in: {hsl_string}")

        if not all(math.isfinite(c) for c in (h, s, l)):
            raise ColorError(f"HSL values must be finite in: {hsl_string}")

        a = DEFAULT_ALPHA
        if has_alpha:
            a = Color._parse_alpha(values[3], hsl_string)

        h = h % 360
        s = min(1.0, max(0.0, s))
        l = min(1.0, max(0.0, l))

        r, g, b = Color._hsl_to_rgb(h, s, l)

        return r, g, b, a

    @staticmethod
    def _hsl_to_rgb(h: float, s: float, l: float) -> RGB:
        """Hue in degrees, saturation and lightness in 0-1; channels come back as 0-255 ints."""
        if s == 0:
            return (int(round(l * 255)),) * 3

        hi = l * (1 + s) if l < 0.5 else l + s - l * s
        lo = 2 * l - hi

        def channel(offset: float) -> int:
            t = (h / 360.0 + offset) % 1.0
            if t < 1 / 6:
                v = lo + (hi - lo) * 6 * t
            elif t < 1 / 2:
                v = hi
            elif t < 2 / 3:
                v = lo + (hi - lo) * (2 / 3 - t) * 6
            else:
                v = lo
            return int(round(v * 255))

        return channel(1 / 3), channel(0.0), channel(-1 / 3)

    @staticmethod
    def _rgb_to_hsl(r: int, g: int, b: int) -> HSL:
        """Unrounded HSL for 0-255 channels; grays report hue and saturation 0."""
        rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
        hi, lo = max(rf, gf, bf), min(rf, gf, bf)
        l = (hi + lo) / 2
        spread = hi - lo

        if spread == 0:
            return 0.0, 0.0, l

        s = spread / (2 - hi - lo) if l > 0.5 else spread / (hi + lo)

        if hi == rf:
            sector = (gf - bf) / spread
        elif hi == gf:
            sector = (bf - rf) / spread + 2
        else:
            sector = (rf - gf) / spread + 4

        return (sector * 60) % 360, s, l


def _is_number(value: Any) -> bool:
    """Finite int or float; bools are rejected. Large ints are clamped later."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


# Utility functions for color operations

def parse_color(value: Union[ColorValue, Color]) -> Color:
    """
    Parse a color value into a Color object.

    Args:
        value: Color string, tuple, mapping or Color

    Returns:
        Color object

    Raises:
        ColorError: If the value can't be parsed
    """
    if isinstance(value, Color):
        return value
    return Color(value)


def try_parse_color(value: Union[ColorValue, Color]) -> Optional[Color]:
    """Parse a color value, returning None when it is not a valid color."""
    try:
        return parse_color(value)
    except ColorError as e:
        logger.debug(f"Could not parse color {value!r}: {e}")
        return None


def is_valid_color(value: Union[ColorValue, Color]) -> bool:
    """Check whether a value can be parsed as a color."""
    return try_parse_color(value) is not None


def mix_colors(color_a: Color, color_b: Color, percent: float = 50) -> Color:
    """
    Mix two colors by linear interpolation of their RGBA channels.

    Args:
        color_a: Starting color
        color_b: Color to move toward
        percent: How far to move toward color_b (0 = color_a, 100 = color_b)

    Returns:
        Mixed color
    """
    p = percent / 100

    r = (color_b.red - color_a.red) * p + color_a.red
    g = (color_b.green - color_a.green) * p + color_a.green
    b = (color_b.blue - color_a.blue) * p + color_a.blue
    a = (color_b.alpha - color_a.alpha) * p + color_a.alpha

    return Color.from_rgb(r, g, b, a)
