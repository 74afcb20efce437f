"""
Text color resolution for arbitrary background colors.

The resolver picks a readable foreground color using WCAG relative luminance
(the accessibility strategy) or derives one by rotating the background hue.
It never raises for bad color input: invalid or fully transparent
backgrounds resolve to the configured dark color and emit a diagnostic log
record instead.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from contrast_color.config.default import CANVAS_COLOR
from contrast_color.models.color import (
    Color,
    ColorValue,
    mix_colors,
    relative_luminance,
    try_parse_color,
)
from contrast_color.models.options import ContrastOptions, Strategy

logger = logging.getLogger(__name__)

OptionsInput = Union[ContrastOptions, Mapping[str, Any], None]

# Hex values the complementary strategy refuses to rotate
_SELF_COLLIDING_HEX = frozenset({"#000000", "#ffffff"})


class Diagnostic(str, Enum):
    """Reason a resolution did not take the configured strategy's normal path."""
    NONE = "none"
    INVALID_INPUT = "invalid_input"
    FULLY_TRANSPARENT = "fully_transparent"
    ACHROMATIC_FALLBACK = "achromatic_fallback"
    COMPLEMENTARY_SELF_COLLISION = "complementary_self_collision"
    UNKNOWN_STRATEGY = "unknown_strategy"


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving a text color.

    Attributes:
        color: The resolved text color string
        strategy: Strategy that produced the color (accessibility on fallbacks)
        luminance: Relative luminance of the working color, None if not computed
        working_color: Parsed background after compositing, None if invalid
        diagnostic: Why the normal path was not taken, or Diagnostic.NONE
    """
    color: str
    strategy: Strategy
    luminance: Optional[float] = None
    working_color: Optional[Color] = None
    diagnostic: Diagnostic = Diagnostic.NONE


class ContrastResolver:
    """
    Resolves a text color to overlay on a background color.

    Instances are immutable and hold nothing but their options, so one
    resolver can be shared freely between threads.
    """

    def __init__(self, options: OptionsInput = None, **overrides: Any):
        """
        Initialize the resolver.

        Args:
            options: ContrastOptions, a mapping of option names (camelCase or
                snake_case) or None for the defaults
            **overrides: Individual options applied on top of ``options``
        """
        self.options = ContrastOptions.coerce(options, **overrides)
        self._canvas = Color(CANVAS_COLOR)

    def resolve(self, background_color: Union[ColorValue, Color]) -> str:
        """
        Resolve the text color for a background.

        Args:
            background_color: Color string, tuple, mapping or Color

        Returns:
            Text color string: light/dark color or a rotated hex color
        """
        return self.explain(background_color).color

    def explain(self, background_color: Union[ColorValue, Color]) -> Resolution:
        """
        Resolve the text color and report how it was chosen.

        Args:
            background_color: Color string, tuple, mapping or Color

        Returns:
            Resolution with the color and its diagnostic
        """
        options = self.options
        strategy = options.resolved_strategy

        color = try_parse_color(background_color)
        if color is None:
            self._emit(
                logging.WARNING,
                Diagnostic.INVALID_INPUT,
                f"Invalid background color input: {background_color!r}. "
                f"Returning dark color {options.dark_color}.",
            )
            return Resolution(
                color=options.dark_color,
                strategy=strategy,
                diagnostic=Diagnostic.INVALID_INPUT,
            )

        if color.is_transparent:
            self._emit(
                logging.WARNING,
                Diagnostic.FULLY_TRANSPARENT,
                f"Background color {background_color!r} is fully transparent; "
                f"contrast cannot be determined. Returning dark color {options.dark_color}.",
            )
            return Resolution(
                color=options.dark_color,
                strategy=strategy,
                working_color=color,
                diagnostic=Diagnostic.FULLY_TRANSPARENT,
            )

        working = color
        if not color.is_opaque:
            # Composite over the white canvas
            working = mix_colors(color, self._canvas, (1 - color.alpha) * 100).with_alpha(1.0)

        luminance = relative_luminance(working.rgb)

        diagnostic = Diagnostic.NONE
        if not isinstance(options.strategy, Strategy) and options.strategy is not None:
            diagnostic = Diagnostic.UNKNOWN_STRATEGY
            self._emit(
                logging.DEBUG,
                diagnostic,
                f"Unknown strategy {options.strategy!r}, using accessibility",
            )

        if not strategy.rotates_hue:
            return self._accessibility(working, luminance, diagnostic)

        if strategy is Strategy.COMPLEMENTARY and working.hex in _SELF_COLLIDING_HEX:
            self._emit(
                logging.INFO,
                Diagnostic.COMPLEMENTARY_SELF_COLLISION,
                f"Complementary strategy on {working.hex} would collide with itself; "
                f"falling back to accessibility.",
            )
            return self._accessibility(
                working, luminance, Diagnostic.COMPLEMENTARY_SELF_COLLISION
            )

        if working.saturation == 0:
            self._emit(
                logging.INFO,
                Diagnostic.ACHROMATIC_FALLBACK,
                f"Background {working.hex} is achromatic; hue rotation for "
                f"{strategy.value} strategy is undefined, falling back to accessibility.",
            )
            return self._accessibility(working, luminance, Diagnostic.ACHROMATIC_FALLBACK)

        rotated = working.spin(options.rotation)
        logger.debug(
            f"Rotated {working.hex} by {options.rotation} degrees "
            f"({strategy.value}) to {rotated.hex}"
        )
        return Resolution(
            color=rotated.hex,
            strategy=strategy,
            luminance=luminance,
            working_color=working,
        )

    def _accessibility(
        self,
        working: Color,
        luminance: float,
        diagnostic: Diagnostic = Diagnostic.NONE
    ) -> Resolution:
        options = self.options
        text_color = options.dark_color if luminance > options.threshold else options.light_color
        return Resolution(
            color=text_color,
            strategy=Strategy.ACCESSIBILITY,
            luminance=luminance,
            working_color=working,
            diagnostic=diagnostic,
        )

    @staticmethod
    def _emit(level: int, diagnostic: Diagnostic, message: str) -> None:
        logger.log(level, message, extra={"diagnostic": diagnostic.value})


def resolve(
    background_color: Union[ColorValue, Color],
    options: OptionsInput = None,
    **overrides: Any
) -> str:
    """
    Determine a contrasting text color for the given background.

    Args:
        background_color: Background in any supported format (hex, rgb(),
            hsl(), CSS name, tuple, mapping or Color)
        options: ContrastOptions or a mapping of option names
        **overrides: Individual options, e.g. ``strategy="complementary"``

    Returns:
        Text color string. Invalid or fully transparent input returns the
        dark color (default "#000000").
    """
    return ContrastResolver(options, **overrides).resolve(background_color)


def explain(
    background_color: Union[ColorValue, Color],
    options: OptionsInput = None,
    **overrides: Any
) -> Resolution:
    """Resolve a text color and return the full Resolution record."""
    return ContrastResolver(options, **overrides).explain(background_color)


get_contrast_text_color = resolve
