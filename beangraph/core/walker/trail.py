"""Relation trails for structural cycle detection.

A trail is the ordered list of (owning module, owning document, relation)
steps from the traversal root to a position. When there is no bean to give an
identity, repetition in the trail is the only evidence that expanding the
metadata would loop forever.
"""

from __future__ import annotations

from typing import Iterator, Tuple

Step = Tuple[str, str, str]


class RelationTrail:
    """Immutable trail of relation steps."""

    __slots__ = ("_steps",)

    def __init__(self, steps: Tuple[Step, ...] = ()) -> None:
        self._steps = steps

    def extend(self, module_name: str, document_name: str, relation_name: str) -> "RelationTrail":
        """Get a new trail with one more step appended."""
        return RelationTrail(self._steps + ((module_name, document_name, relation_name),))

    def ends_in_repeat(self) -> bool:
        """Check whether the trail ends with the same run of steps twice.

        The run length is the distance back to the most recent earlier
        occurrence of the last step. ``a.b.a.b`` repeats; ``a.b.c.b`` does not.
        """
        steps = self._steps
        if len(steps) < 2:
            return False
        last = steps[-1]
        for prior in range(len(steps) - 2, -1, -1):
            if steps[prior] == last:
                period = len(steps) - 1 - prior
                start = prior + 1 - period
                return start >= 0 and steps[start : prior + 1] == steps[prior + 1 :]
        return False

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)
