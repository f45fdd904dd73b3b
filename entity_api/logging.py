"""Logging configuration for the entity API."""

import logging
import sys
from enum import Enum
from typing import TextIO

ROOT_LOGGER_NAME = "entity_api"


class LogLevel(Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_logging(
    level: str | LogLevel = LogLevel.WARNING,
    format_string: str | None = None,
    include_timestamp: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the entity API loggers.

    Only the ``entity_api`` logger tree is configured, so an embedding
    application keeps control of the root logger.

    Args:
        level: Logging level as string or LogLevel enum
        format_string: Custom format string (optional)
        include_timestamp: Whether to include timestamps in logs
        stream: Output stream (default: stderr)

    Returns:
        The ``entity_api`` logger
    """
    level_str = level.value if isinstance(level, LogLevel) else level.upper()
    numeric_level = getattr(logging, level_str, logging.WARNING)

    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"
        else:
            format_string = "%(name)s  %(levelname)s  %(message)s"

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    # Replace handlers from a previous call
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(numeric_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
