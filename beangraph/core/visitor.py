"""Bean graph visitor.

``BeanVisitor`` walks a bean and everything reachable from it, guided by the
document metadata of each position. Traversal is depth-first in document
declaration order and calls back once per position with the binding path
that leads there from the root.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable, Iterator, NamedTuple, Optional, Set, Tuple, Union

from ..config import VisitorConfig
from ..domain.bean import PARENT_NAME
from ..domain.binder import DefaultBeanAccessor
from ..exceptions import BeanGraphError, DomainError, ModelingError
from ..logging.custom_levels import TRACE_LEVEL_NUMBER
from ..metadata.model import Document, Relation
from ..protocols import BeanAccessor, MetadataRegistry, VisitCallback
from .walker.protection import TraversalProtection
from .walker.trail import RelationTrail
from .walker.work_stack import WorkStack

logger = logging.getLogger(__name__)

AcceptFunction = Callable[
    [str, Document, Optional[Document], Optional[Relation], Any], bool
]


class Position(NamedTuple):
    """A position in the bean graph waiting to be visited."""

    binding: str
    document: Document
    owning_document: Optional[Document]
    owning_relation: Optional[Relation]
    bean: Any
    trail: RelationTrail


def _join(binding: str, name: str) -> str:
    return f"{binding}.{name}" if binding else name


class BeanVisitor:
    """Visit the structure of a bean and its related graph.

    Args:
        visit_nulls: Visit relations that are not populated. The visited bean
            is then None and the document metadata drives further descent.
        visit_inverses: Visit inverse relations. Inverses are weakly
            referenced (not validated, not cascaded) so they are skipped by
            default.
        vector_cyclic_detection: Cycles are normally broken by remembering
            every bean visited, so a bean is visited ONLY ONCE. In vector mode
            the key also includes the relation and owning document that led
            to the bean, e.g. contact "mike" reached from user "mike" through
            the association "contact", so a bean may be visited MORE THAN ONCE
            when it is referenced from several places.
        accept_visited: Call back once more for a bean suppressed as already
            visited, without descending below it.
        callback: Function or object with an ``accept`` method called at each
            position. Required unless a subclass overrides ``accept``.
        accessor: Bean accessor (DefaultBeanAccessor if None)
        max_depth: Maximum traversal depth (0 = unlimited)
        max_steps: Maximum positions entered per visit (0 = unlimited)

    All per-traversal state lives in the ``visit`` call, so one instance can
    be used from several threads at once.

    Example:
        >>> bindings = []
        >>> def collect(binding, document, owning_document, owning_relation, bean):
        ...     bindings.append(binding)
        ...     return True
        >>> BeanVisitor(False, False, False, callback=collect).visit(contact_doc, contact, customer)
    """

    def __init__(
        self,
        visit_nulls: bool,
        visit_inverses: bool,
        vector_cyclic_detection: bool,
        accept_visited: bool = False,
        *,
        callback: Union[VisitCallback, AcceptFunction, None] = None,
        accessor: Optional[BeanAccessor] = None,
        max_depth: Optional[int] = None,
        max_steps: Optional[int] = None,
    ) -> None:
        self._visit_nulls = visit_nulls
        self._visit_inverses = visit_inverses
        self._vector_cyclic_detection = vector_cyclic_detection
        self._accept_visited = accept_visited
        self._callback = self._resolve_callback(callback)
        self._accessor: BeanAccessor = accessor or DefaultBeanAccessor()
        defaults = VisitorConfig()
        self._max_depth = defaults.max_depth if max_depth is None else max_depth
        self._max_steps = defaults.max_steps if max_steps is None else max_steps

    @classmethod
    def from_config(
        cls,
        config: VisitorConfig,
        callback: Union[VisitCallback, AcceptFunction, None] = None,
        accessor: Optional[BeanAccessor] = None,
    ) -> "BeanVisitor":
        """Create a visitor from a VisitorConfig."""
        return cls(
            config.visit_nulls,
            config.visit_inverses,
            config.vector_cyclic_detection,
            config.accept_visited,
            callback=callback,
            accessor=accessor,
            max_depth=config.max_depth,
            max_steps=config.max_steps,
        )

    def _resolve_callback(
        self, callback: Union[VisitCallback, AcceptFunction, None]
    ) -> Optional[AcceptFunction]:
        if callback is None:
            if type(self).accept is BeanVisitor.accept:
                raise TypeError(
                    "BeanVisitor needs an accept callback or an accept() override"
                )
            return None
        method = getattr(callback, "accept", None)
        if callable(method):
            return method
        if callable(callback):
            return callback
        raise TypeError(f"Callback must be callable or define accept(), got {callback!r}")

    @property
    def visit_nulls(self) -> bool:
        return self._visit_nulls

    @property
    def visit_inverses(self) -> bool:
        return self._visit_inverses

    @property
    def vector_cyclic_detection(self) -> bool:
        return self._vector_cyclic_detection

    @property
    def accept_visited(self) -> bool:
        return self._accept_visited

    @property
    def accessor(self) -> BeanAccessor:
        return self._accessor

    def accept(
        self,
        binding: str,
        document: Document,
        owning_document: Optional[Document],
        owning_relation: Optional[Relation],
        bean: Any,
    ) -> bool:
        """Accept a visited position.

        Subclasses may override this instead of passing a callback.

        Args:
            binding: The visited binding
            document: Document describing the position
            owning_document: The owning document that got us here
            owning_relation: The owning document's relation that got us here.
                None for the top level bean and for parent bindings.
            bean: The visited bean, or None

        Returns:
            False to stop descending below this position, True to continue
        """
        return self._callback(binding, document, owning_document, owning_relation, bean)

    def visit(self, document: Document, bean: Any, customer: MetadataRegistry) -> None:
        """Visit a bean and its related graph.

        Args:
            document: Document of the root bean
            bean: Root bean; may be None to walk the metadata alone
            customer: Customer (tenant registry) whose metadata describes the graph

        Raises:
            ModelingError: If a relation value does not match its declared kind
            MetaDataError: If a document cannot be found
            TraversalLimitError: If a protection limit is exceeded
            DomainError: If anything else fails, including the callback
        """
        visited: Set[Any] = set()
        protection = TraversalProtection(self._max_depth, self._max_steps)
        stack: WorkStack[Position] = WorkStack(
            [Position("", document, None, None, bean, RelationTrail())]
        )
        customer_name = getattr(customer, "name", type(customer).__name__)
        logger.debug(
            f"Visiting {document} {bean!r} for customer {customer_name}"
            f" (nulls={self._visit_nulls}, inverses={self._visit_inverses},"
            f" vector={self._vector_cyclic_detection}, accept_visited={self._accept_visited})"
        )

        position = stack.pop_next()
        while position is not None:
            protection.check_depth(stack.depth, position.binding)
            protection.increment_step(position.binding)
            if self._enter(position, visited):
                stack.push(self._children(position, customer))
            position = stack.pop_next()

        logger.debug(
            f"Visited {document}: {protection.step_count} positions,"
            f" {len(visited)} beans, max depth {protection.deepest}"
        )

    def _enter(self, position: Position, visited: Set[Any]) -> bool:
        """Run the cycle checks and the callback for a position.

        Returns:
            True if the children of the position should be visited
        """
        if position.bean is None:
            if position.owning_relation is not None and position.trail.ends_in_repeat():
                if logger.isEnabledFor(TRACE_LEVEL_NUMBER):
                    logger.log(
                        TRACE_LEVEL_NUMBER,
                        f"Structural repeat at '{position.binding}', not descending",
                    )
                return False
        else:
            key = self._visited_key(position)
            if key in visited:
                if logger.isEnabledFor(TRACE_LEVEL_NUMBER):
                    logger.log(
                        TRACE_LEVEL_NUMBER,
                        f"Already visited {position.bean!r} at '{position.binding}'",
                    )
                if self._accept_visited:
                    self._call_accept(position)
                return False
            visited.add(key)

        if logger.isEnabledFor(TRACE_LEVEL_NUMBER):
            logger.log(
                TRACE_LEVEL_NUMBER,
                f"Accept '{position.binding}' {position.document} {position.bean!r}",
            )
        return bool(self._call_accept(position))

    def _call_accept(self, position: Position) -> bool:
        try:
            return self.accept(
                position.binding,
                position.document,
                position.owning_document,
                position.owning_relation,
                position.bean,
            )
        except BeanGraphError:
            raise
        except Exception as e:
            raise DomainError(
                f"Visit of '{position.binding}' failed: {e}",
                cause=e,
                details={"binding": position.binding, "document": str(position.document)},
            ) from e

    def _visited_key(self, position: Position) -> Any:
        identity = self._accessor.identity_of(position.bean)
        if not self._vector_cyclic_detection:
            return identity
        relation = position.owning_relation
        owner = position.owning_document
        return (
            identity,
            relation.name if relation is not None else None,
            owner.key if owner is not None else None,
        )

    def _children(self, position: Position, customer: MetadataRegistry) -> Iterator[Position]:
        """Yield child positions lazily in declaration order, parent last."""
        try:
            yield from self._relation_children(position, customer)
            yield from self._parent_children(position, customer)
        except BeanGraphError:
            raise
        except Exception as e:
            raise DomainError(
                f"Traversal below '{position.binding}' failed: {e}",
                cause=e,
                details={"binding": position.binding, "document": str(position.document)},
            ) from e

    def _relation_children(
        self, position: Position, customer: MetadataRegistry
    ) -> Iterator[Position]:
        document = position.document
        bean = position.bean
        for relation in customer.relations_of(document):
            if relation.is_inverse and not self._visit_inverses:
                continue

            related_document = customer.module_document(
                document.module_name, relation.document_name
            )
            trail = position.trail.extend(document.module_name, document.name, relation.name)
            binding = _join(position.binding, relation.name)

            if relation.is_single:
                child = self._get_bean(bean, relation.name, document)
                if child is not None or self._visit_nulls:
                    child_document, child = self._resolve(related_document, child, customer)
                    yield Position(binding, child_document, document, relation, child, trail)
                continue

            children = self._get_beans(bean, relation.name, document)
            if children is None:
                # No data behind the relation, walk it from the metadata
                yield Position(binding, related_document, document, relation, None, trail)
                continue
            for index, child in enumerate(children):
                if child is None:
                    continue
                if not self._accessor.is_bean(child):
                    raise ModelingError(
                        relation.name,
                        document.name,
                        {"index": index, "value_type": type(child).__name__},
                    )
                child_document, child = self._resolve(related_document, child, customer)
                yield Position(
                    f"{binding}[{index}]", child_document, document, relation, child, trail
                )
            if len(children) == 0 and self._visit_nulls:
                yield Position(binding, related_document, document, relation, None, trail)

    def _parent_children(
        self, position: Position, customer: MetadataRegistry
    ) -> Iterator[Position]:
        document = position.document
        parent_document = customer.parent_of(document)
        # hierarchical documents are their own parent, not a child document
        if parent_document is None or parent_document.is_same(document):
            return
        parent = self._get_bean(position.bean, PARENT_NAME, document)
        if parent is not None or self._visit_nulls:
            parent_document, parent = self._resolve(parent_document, parent, customer)
            yield Position(
                _join(position.binding, PARENT_NAME),
                parent_document,
                document,
                None,
                parent,
                position.trail.extend(document.module_name, document.name, PARENT_NAME),
            )

    def _get_bean(self, bean: Any, name: str, document: Document) -> Any:
        if bean is None:
            return None
        value = self._accessor.get(bean, name)
        if value is not None and not self._accessor.is_bean(value):
            raise ModelingError(name, document.name, {"value_type": type(value).__name__})
        return value

    def _get_beans(self, bean: Any, name: str, document: Document) -> Optional[Sequence]:
        if bean is None:
            return None
        value = self._accessor.get(bean, name)
        if value is not None and (
            isinstance(value, (str, bytes)) or not isinstance(value, Sequence)
        ):
            raise ModelingError(name, document.name, {"value_type": type(value).__name__})
        return value

    def _resolve(
        self, declared: Document, bean: Any, customer: MetadataRegistry
    ) -> Tuple[Document, Any]:
        """Swap in the runtime document of a polymorphic reference."""
        if bean is None:
            return declared, None
        module_name, document_name = self._accessor.type_of(bean)
        if declared.key == (module_name, document_name):
            return declared, bean
        actual = customer.module_document(module_name, document_name)
        if logger.isEnabledFor(TRACE_LEVEL_NUMBER):
            logger.log(TRACE_LEVEL_NUMBER, f"Polymorphic reference {declared} -> {actual}")
        return actual, self._accessor.deproxy(bean)


__all__ = ["BeanVisitor", "Position"]
