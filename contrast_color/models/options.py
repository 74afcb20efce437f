"""
Option record for contrast resolution, with defaults applied at construction.
"""

import dataclasses
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from contrast_color.config.default import DEFAULT_OPTIONS, STRATEGY_DEGREES

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """Algorithm family used to derive the text color."""
    ACCESSIBILITY = "accessibility"
    ANALOGOUS = "analogous"
    ADJACENT = "adjacent"
    CONTRAST = "contrast"
    COMPLEMENTARY = "complementary"
    CUSTOM = "custom"

    @classmethod
    def coerce(cls, value: Union[str, "Strategy", None]) -> Optional["Strategy"]:
        """Map a strategy name to a member, or None when it is not recognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None

    @property
    def rotates_hue(self) -> bool:
        return self is not Strategy.ACCESSIBILITY

    def degrees(self, custom_degree: float = 0) -> float:
        """Hue rotation in degrees for this strategy."""
        if self is Strategy.CUSTOM:
            return custom_degree
        return STRATEGY_DEGREES.get(self.value, 0)


class Direction(str, Enum):
    """Direction of hue rotation around the color wheel."""
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counterClockwise"

    @classmethod
    def coerce(cls, value: Union[str, "Direction", None]) -> "Direction":
        """Map a direction name to a member. Unrecognized values are clockwise."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().replace("_", "").replace("-", "").lower()
            if key == "counterclockwise":
                return cls.COUNTER_CLOCKWISE
            if key != "clockwise":
                logger.debug(f"Unknown direction {value!r}, using clockwise")
        return cls.CLOCKWISE

    @property
    def sign(self) -> int:
        return 1 if self is Direction.CLOCKWISE else -1


# Keys accepted in option mappings, in either spelling
_KEY_ALIASES = {
    "strategy": "strategy",
    "threshold": "threshold",
    "lightColor": "light_color",
    "light_color": "light_color",
    "darkColor": "dark_color",
    "dark_color": "dark_color",
    "direction": "direction",
    "customDegree": "custom_degree",
    "custom_degree": "custom_degree",
}


def _require_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ContrastOptions:
    """
    Fully-specified options for resolving a text color.

    Attributes:
        strategy: Strategy member, or the raw value when it is not recognized
            (resolved as accessibility)
        threshold: Luminance above which the dark color is chosen
        light_color: Color returned for dark backgrounds
        dark_color: Color returned for light backgrounds and for bad input
        direction: Hue rotation direction for the rotating strategies
        custom_degree: Rotation used by the custom strategy
    """
    strategy: Union[Strategy, str] = DEFAULT_OPTIONS["strategy"]
    threshold: float = DEFAULT_OPTIONS["threshold"]
    light_color: str = DEFAULT_OPTIONS["light_color"]
    dark_color: str = DEFAULT_OPTIONS["dark_color"]
    direction: Union[Direction, str] = DEFAULT_OPTIONS["direction"]
    custom_degree: float = DEFAULT_OPTIONS["custom_degree"]

    def __post_init__(self):
        # Frozen dataclass, so normalized values go through object.__setattr__
        strategy = Strategy.coerce(self.strategy)
        if strategy is not None:
            object.__setattr__(self, "strategy", strategy)

        object.__setattr__(self, "direction", Direction.coerce(self.direction))

        _require_number("threshold", self.threshold)

        custom_degree = self.custom_degree
        if custom_degree is None:
            custom_degree = 0
        _require_number("custom_degree", custom_degree)
        try:
            custom_degree = float(custom_degree)
        except OverflowError:
            raise TypeError(f"custom_degree is too large to use as a rotation: {custom_degree}")
        if math.isnan(custom_degree):
            custom_degree = 0.0
        elif math.isinf(custom_degree):
            raise TypeError(f"custom_degree must be finite, got {custom_degree}")
        object.__setattr__(self, "custom_degree", custom_degree)

    @property
    def resolved_strategy(self) -> Strategy:
        """Strategy to run, with unrecognized values mapped to accessibility."""
        if isinstance(self.strategy, Strategy):
            return self.strategy
        return Strategy.ACCESSIBILITY

    @property
    def rotation(self) -> float:
        """Signed hue rotation in degrees for the configured strategy."""
        return self.direction.sign * self.resolved_strategy.degrees(self.custom_degree)

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]] = None) -> "ContrastOptions":
        """
        Build options from a mapping.

        Accepts camelCase (``lightColor``) and snake_case (``light_color``)
        keys. Missing keys and None values take the defaults.

        Args:
            options: Mapping of option names to values

        Returns:
            ContrastOptions instance
        """
        kwargs: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            field_name = _KEY_ALIASES.get(key)
            if field_name is None:
                logger.debug(f"Ignoring unknown option {key!r}")
                continue
            if value is None:
                continue
            kwargs[field_name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible mapping with snake_case keys."""
        data = dataclasses.asdict(self)
        data["strategy"] = getattr(self.strategy, "value", self.strategy)
        data["direction"] = self.direction.value
        return data

    def replace(self, **changes: Any) -> "ContrastOptions":
        return dataclasses.replace(self, **changes)

    @classmethod
    def coerce(
        cls,
        options: Union["ContrastOptions", Mapping[str, Any], None] = None,
        **overrides: Any
    ) -> "ContrastOptions":
        """Normalize an options object, mapping or None, then apply overrides."""
        if isinstance(options, cls):
            base = options
        else:
            base = cls.from_dict(options)
        if not overrides:
            return base
        merged = base.to_dict()
        merged.update(overrides)
        return cls.from_dict(merged)
