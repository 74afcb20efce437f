"""
Input/output utilities for loading and saving resolver options.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from contrast_color.models.options import ContrastOptions

logger = logging.getLogger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except Exception as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise

    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {config_path} must be a JSON object")
    return config


def load_options(config_path: Union[str, Path]) -> ContrastOptions:
    """
    Load resolver options from a JSON file.

    The file holds a single object using camelCase or snake_case option
    names, e.g. ``{"strategy": "complementary", "darkColor": "#111111"}``.

    Args:
        config_path: Path to the options file

    Returns:
        ContrastOptions with defaults applied for missing keys
    """
    options = ContrastOptions.from_dict(load_config(config_path))
    logger.info(f"Loaded contrast options from {config_path}")
    return options


def save_options(
    options: ContrastOptions,
    output_path: Union[str, Path],
    create_dirs: bool = True
) -> None:
    """
    Save resolver options to a JSON file.

    Args:
        options: Options to save
        output_path: Path to save the options
        create_dirs: Whether to create parent directories if they don't exist
    """
    output_path = Path(output_path)

    if create_dirs:
        output_path.parent.mkdir(exist_ok=True, parents=True)

    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(options.to_dict(), f, indent=2)
        logger.info(f"Contrast options saved to: {output_path}")
    except Exception as e:
        logger.error(f"Error saving contrast options to {output_path}: {e}")
        raise
