"""Type protocols for the collaborators of the bean visitor.

These Protocol classes describe what the traversal engine needs from the
outside world: a read-only metadata registry, a way to read beans, and the
callback deciding what happens at each visited position.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from .metadata.model import Document, Relation


class MetadataRegistry(Protocol):
    """Read-only lookup of document metadata."""

    def module_document(self, module_name: str, document_name: str) -> "Document":
        """Get a document by its owning module and name.

        Args:
            module_name: Name of the owning module
            document_name: Name of the document

        Returns:
            The document definition

        Raises:
            MetaDataError: If the module or document is unknown
        """
        ...

    def relations_of(self, document: "Document") -> List["Relation"]:
        """Get the relations of a document in declaration order."""
        ...

    def parent_of(self, document: "Document") -> Optional["Document"]:
        """Get the declared parent document, if any."""
        ...


class BeanAccessor(Protocol):
    """Reads relation values and type information from beans."""

    def get(self, bean: Any, name: str) -> Any:
        """Get the value bound to ``name`` on ``bean`` (None when unset)."""
        ...

    def type_of(self, bean: Any) -> Tuple[str, str]:
        """Get the runtime (module name, document name) of a bean."""
        ...

    def identity_of(self, bean: Any) -> str:
        """Get the stable identity token of a bean."""
        ...

    def is_bean(self, value: Any) -> bool:
        """Check whether a value can be treated as a bean."""
        ...

    def deproxy(self, bean: Any) -> Any:
        """Unwrap a lazily loaded proxy into the concrete bean."""
        ...


class VisitCallback(Protocol):
    """Decides whether traversal continues below a visited position."""

    def accept(
        self,
        binding: str,
        document: "Document",
        owning_document: Optional["Document"],
        owning_relation: Optional["Relation"],
        bean: Any,
    ) -> bool:
        """Accept a visited position.

        Args:
            binding: Binding path from the traversal root to this position
            document: Document describing the position
            owning_document: Document owning the relation that led here
            owning_relation: Relation that led here (None at the root and for parents)
            bean: Bean at this position, or None

        Returns:
            False to prune the subtree below this position, True to continue
        """
        ...
