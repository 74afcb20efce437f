"""
Default configuration settings for contrast color resolution.
"""

DEFAULT_OPTIONS = {
    # Strategy used to derive the text color from the background
    "strategy": "accessibility",

    # Luminance crossover (0-1). Higher values favor the light color.
    "threshold": 0.5,

    # Colors returned by the accessibility strategy
    "light_color": "#FFFFFF",  # For dark backgrounds
    "dark_color": "#000000",  # For light backgrounds, and the fallback for bad input

    # Hue rotation settings
    "direction": "clockwise",
    "custom_degree": 0,
}

# Degrees of hue rotation per strategy. "custom" reads custom_degree instead.
STRATEGY_DEGREES = {
    "analogous": 15,
    "adjacent": 60,
    "contrast": 120,
    "complementary": 180,
}

# Canvas that semi-transparent backgrounds are composited over
CANVAS_COLOR = "#FFFFFF"

# Logging settings
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
