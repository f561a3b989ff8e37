"""Explicit work stack for depth-first traversal.

Each entry is a lazy iterator over the child positions of one visited
position. Taking the next position always from the topmost iterator yields
the same pre-order as a recursive descent without growing the call stack.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class WorkStack(Generic[T]):
    """Stack of pending child iterators."""

    def __init__(self, roots: Optional[Iterable[T]] = None) -> None:
        """Initialize the work stack.

        Args:
            roots: Optional positions to start from
        """
        self._frames: Deque[Iterator[T]] = deque()
        if roots is not None:
            self.push(roots)

    def push(self, children: Iterable[T]) -> None:
        """Schedule the children of the position just processed."""
        self._frames.append(iter(children))

    def pop_next(self) -> Optional[T]:
        """Get the next pending position, or None when the stack is exhausted.

        Exhausted iterators are discarded on the way.
        """
        while self._frames:
            item = next(self._frames[-1], None)
            if item is not None:
                return item
            self._frames.pop()
        return None

    @property
    def depth(self) -> int:
        """Number of open iterators (root iterator counts as 1)."""
        return len(self._frames)
