"""
Configuration defaults for contrast color resolution.
"""

from contrast_color.config.default import (
    CANVAS_COLOR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OPTIONS,
    LOG_FORMAT,
    STRATEGY_DEGREES,
)

__all__ = [
    "CANVAS_COLOR",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_OPTIONS",
    "LOG_FORMAT",
    "STRATEGY_DEGREES",
]
