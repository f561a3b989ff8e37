"""Logging helpers for beangraph."""

from .config import configure_logging, resolve_level
from .custom_levels import (
    TRACE_LEVEL_NUMBER,
    add_custom_log_level,
    get_custom_levels,
    is_custom_level,
)

__all__ = [
    "configure_logging",
    "resolve_level",
    "add_custom_log_level",
    "get_custom_levels",
    "is_custom_level",
    "TRACE_LEVEL_NUMBER",
]
