"""Custom log levels for beangraph.

The traversal engine logs every visited position at a ``TRACE`` level that
sits below ``DEBUG``, so that tracing a large graph can be switched on without
drowning normal debug output.
"""

import logging
from typing import Any, Optional, Set

_custom_levels: Set[str] = set()


def add_custom_log_level(
    level_name: str, level_number: int, method_name: Optional[str] = None
) -> int:
    """Register a log level with the logging module.

    A ``Logger`` method named ``method_name`` (default ``level_name.lower()``)
    is added so the level can be used like the built-in ones.

    Args:
        level_name: Name of the log level (e.g. "TRACE")
        level_number: Numeric value of the level
        method_name: Optional Logger method name

    Returns:
        The registered level number

    Raises:
        ValueError: If the name is already registered with another number

    Example:
        ```python
        add_custom_log_level("TRACE", 5)
        logging.getLogger(__name__).trace("visiting %s", binding)
        ```
    """
    if method_name is None:
        method_name = level_name.lower()

    existing_level = logging.getLevelName(level_name)
    if existing_level != f"Level {level_name}":
        if existing_level == level_number:
            _custom_levels.add(level_name)
            return level_number
        raise ValueError(
            f"Log level '{level_name}' already exists with number {existing_level}"
        )

    logging.addLevelName(level_number, level_name)
    setattr(logging, level_name, level_number)

    def log_for_level(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(level_number):
            self._log(level_number, message, args, **kwargs)

    setattr(logging.getLoggerClass(), method_name, log_for_level)
    _custom_levels.add(level_name)
    return level_number


def get_custom_levels() -> Set[str]:
    """Get the names of all registered custom levels."""
    return _custom_levels.copy()


def is_custom_level(level_name: str) -> bool:
    """Check if a level name was registered through add_custom_log_level."""
    return level_name in _custom_levels


# TRACE sits below DEBUG (10)
TRACE_LEVEL_NUMBER = 5
add_custom_log_level("TRACE", TRACE_LEVEL_NUMBER)


__all__ = [
    "add_custom_log_level",
    "get_custom_levels",
    "is_custom_level",
    "TRACE_LEVEL_NUMBER",
]
