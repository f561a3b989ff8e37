"""Logging configuration for beangraph.

Environment Variables:
    BEANGRAPH_LOG_LEVEL: Level name for the ``beangraph`` logger
        (standard or custom, e.g. "DEBUG" or "TRACE"; default: unset)
"""

import logging
import os
from typing import Optional, Union

from .custom_levels import TRACE_LEVEL_NUMBER

logger = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "beangraph"


def resolve_level(level: Union[int, str, None]) -> Optional[int]:
    """Convert a level name or number into a logging level number.

    Args:
        level: Level number, level name, or None

    Returns:
        The level number, or None if the name is unknown or empty
    """
    if level is None:
        return None
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if not name:
        return None
    value = getattr(logging, name, None)
    if isinstance(value, int):
        return value
    logger.warning(f"Invalid log level: {level}, skipping")
    return None


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """Apply a log level to the beangraph logger hierarchy.

    Args:
        level: Level to apply; falls back to BEANGRAPH_LOG_LEVEL when None

    Returns:
        The ``beangraph`` logger
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    resolved = resolve_level(level if level is not None else os.getenv("BEANGRAPH_LOG_LEVEL"))
    if resolved is not None:
        package_logger.setLevel(resolved)
        if resolved <= TRACE_LEVEL_NUMBER:
            logger.debug("Traversal tracing enabled")
    return package_logger


__all__ = ["configure_logging", "resolve_level", "ROOT_LOGGER_NAME"]
