"""
Contrast Color - readable text colors for arbitrary backgrounds.

This package resolves a text color to overlay on a background color, either
by WCAG relative luminance (black or white text) or by rotating the
background hue to an analogous, adjacent, contrasting or complementary color.
"""

import logging

__version__ = "0.1.0"

from contrast_color.core.resolver import (
    ContrastResolver,
    Diagnostic,
    Resolution,
    explain,
    get_contrast_text_color,
    resolve,
)
from contrast_color.models.color import (
    Color,
    ColorError,
    is_valid_color,
    mix_colors,
    parse_color,
    relative_luminance,
)
from contrast_color.models.options import ContrastOptions, Direction, Strategy

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "ColorError",
    "ContrastOptions",
    "ContrastResolver",
    "Diagnostic",
    "Direction",
    "Resolution",
    "Strategy",
    "explain",
    "get_contrast_text_color",
    "is_valid_color",
    "mix_colors",
    "parse_color",
    "relative_luminance",
    "resolve",
]
