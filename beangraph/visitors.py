"""Ready-made visit callbacks.

``BindingCollector`` records every position a BeanVisitor reports, which is
handy for building binding lists (e.g. for form generation) and for tests.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .domain.binder import DefaultBeanAccessor
from .metadata.model import Document, Relation
from .protocols import BeanAccessor

Predicate = Callable[[str, Document, Any], bool]


class BindingCollector:
    """Records visited positions in the order they are accepted.

    A position whose bean was already recorded is flagged as a revisit; with
    ``accept_visited`` visitors that is how suppressed repeats show up.
    """

    def __init__(
        self,
        descend: Optional[Predicate] = None,
        accessor: Optional[BeanAccessor] = None,
    ) -> None:
        """Initialize the collector.

        Args:
            descend: Optional predicate (binding, document, bean) deciding
                whether to continue below a position; defaults to always
            accessor: Accessor used to read bean identities
        """
        self._descend = descend
        self._accessor = accessor or DefaultBeanAccessor()
        self._trail: List[Dict[str, Any]] = []
        self._seen: Dict[Any, int] = {}

    def accept(
        self,
        binding: str,
        document: Document,
        owning_document: Optional[Document],
        owning_relation: Optional[Relation],
        bean: Any,
    ) -> bool:
        identity = self._accessor.identity_of(bean) if bean is not None else None
        revisit = identity is not None and identity in self._seen
        if identity is not None:
            self._seen[identity] = self._seen.get(identity, 0) + 1
        self._trail.append(
            {
                "binding": binding,
                "document": str(document),
                "owning_document": str(owning_document) if owning_document else None,
                "relation": owning_relation.name if owning_relation else None,
                "bean": bean,
                "bean_id": identity,
                "revisit": revisit,
            }
        )
        if self._descend is None:
            return True
        return self._descend(binding, document, bean)

    def get_trail(self) -> List[Dict[str, Any]]:
        """Get a copy of every recorded step."""
        return list(self._trail)

    def get_bindings(self) -> List[str]:
        return [step["binding"] for step in self._trail]

    def get_visit_count(self, identity: Any) -> int:
        """Get how many times a bean identity was reported."""
        return self._seen.get(identity, 0)

    def get_length(self) -> int:
        return len(self._trail)

    def clear(self) -> None:
        self._trail.clear()
        self._seen.clear()


__all__ = ["BindingCollector"]
