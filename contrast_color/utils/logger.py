"""
Logging helpers for applications embedding contrast_color.
The library itself only creates module loggers; handlers are opt-in.
"""

import json
import logging
import sys
from datetime import datetime
from typing import Optional, Union

from contrast_color.config.default import DEFAULT_LOG_LEVEL, LOG_FORMAT

PACKAGE_LOGGER = "contrast_color"

# Standard LogRecord attributes, excluded when serializing extras
_RESERVED_ATTRS = frozenset((
    'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
    'funcName', 'id', 'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'msg', 'name', 'pathname', 'process', 'processName',
    'relativeCreated', 'stack_info', 'taskName', 'thread', 'threadName',
))


class JsonFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'name': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Custom attributes passed through `extra`, e.g. diagnostic codes
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(
    level: Union[str, int] = DEFAULT_LOG_LEVEL,
    use_json: bool = False,
    stream=None,
    format_str: Optional[str] = None
) -> logging.Logger:
    """
    Configure console logging for the package logger.

    Args:
        level: Logging level name or number
        use_json: Use JSON format for logs
        stream: Output stream (defaults to stderr)
        format_str: Optional custom format string for plain-text logs

    Returns:
        Configured package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Remove handlers from earlier calls to avoid duplicates
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)
    if use_json:
        console_handler.setFormatter(JsonFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(format_str or LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
