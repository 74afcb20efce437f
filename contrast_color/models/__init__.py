"""
Color and option models.
"""

from contrast_color.models.color import Color, ColorError, ColorFormat
from contrast_color.models.options import ContrastOptions, Direction, Strategy

__all__ = [
    "Color",
    "ColorError",
    "ColorFormat",
    "ContrastOptions",
    "Direction",
    "Strategy",
]
