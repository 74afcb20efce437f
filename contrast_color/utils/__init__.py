"""
Utility functions for logging and option files.
"""

from contrast_color.utils.io import load_config, load_options, save_options
from contrast_color.utils.logger import JsonFormatter, get_logger, setup_logging

__all__ = [
    "JsonFormatter",
    "get_logger",
    "load_config",
    "load_options",
    "save_options",
    "setup_logging",
]
