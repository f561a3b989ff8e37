"""Protection against runaway bean graph traversals.

Identity and structural cycle checks keep ordinary graphs finite; these limits
catch the pathological cases they cannot, such as metadata whose relations
can be combined into arbitrarily long non-repeating chains.
"""

from __future__ import annotations

from typing import Optional

from ...exceptions import TraversalLimitError


class TraversalProtection:
    """Step and depth limits for a single visit call."""

    def __init__(self, max_depth: int = 0, max_steps: int = 0) -> None:
        """Initialize traversal protection.

        Args:
            max_depth: Maximum traversal depth (0 = unlimited)
            max_steps: Maximum number of positions entered (0 = unlimited)
        """
        self._max_depth = max(0, max_depth)
        self._max_steps = max(0, max_steps)
        self._steps = 0
        self._deepest = 0

    def increment_step(self, binding: Optional[str] = None) -> None:
        """Count a position entered and check the step limit.

        Raises:
            TraversalLimitError: If the step limit is exceeded
        """
        self._steps += 1
        if self._max_steps and self._steps > self._max_steps:
            raise TraversalLimitError(
                "max_steps",
                {
                    "steps_taken": self._steps,
                    "max_steps": self._max_steps,
                    "binding": binding,
                },
            )

    def check_depth(self, depth: int, binding: Optional[str] = None) -> None:
        """Check a traversal depth against the depth limit.

        Raises:
            TraversalLimitError: If the depth limit is exceeded
        """
        if depth > self._deepest:
            self._deepest = depth
        if self._max_depth and depth > self._max_depth:
            raise TraversalLimitError(
                "max_depth",
                {"depth": depth, "max_depth": self._max_depth, "binding": binding},
            )

    @property
    def step_count(self) -> int:
        return self._steps

    @property
    def deepest(self) -> int:
        """Deepest depth checked so far."""
        return self._deepest

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def max_steps(self) -> int:
        return self._max_steps
