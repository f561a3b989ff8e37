"""Metadata model describing the shape of beans.

Documents, their attributes and relations are immutable value records looked
up by name through a registry; they are never subclassed per bean type.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator


class RelationKind(str, Enum):
    """Kinds of relation a document can declare."""

    ASSOCIATION = "association"
    COLLECTION = "collection"
    INVERSE_ONE = "inverseOne"
    INVERSE_MANY = "inverseMany"

    @property
    def is_inverse(self) -> bool:
        """Whether the relation is a weak backward reference."""
        return self in (RelationKind.INVERSE_ONE, RelationKind.INVERSE_MANY)

    @property
    def is_single(self) -> bool:
        """Whether the relation holds at most one bean."""
        return self in (RelationKind.ASSOCIATION, RelationKind.INVERSE_ONE)


class Field(BaseModel):
    """A scalar attribute; never traversed."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: Literal["field"] = "field"
    type: str = "text"


class Relation(BaseModel):
    """A named edge from one document to another.

    Attributes:
        name: Relation (binding) name
        kind: Relation kind
        document_name: Target document, resolved in the owning document's module
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: RelationKind
    document_name: str

    @property
    def is_inverse(self) -> bool:
        return self.kind.is_inverse

    @property
    def is_single(self) -> bool:
        return self.kind.is_single


Attribute = Union[Relation, Field]


class Document(BaseModel):
    """Metadata description of a bean type.

    Attributes:
        module_name: Owning module name
        name: Document name
        attributes: Fields and relations in declaration order
        parent_document_name: Parent document in the same module, if any
    """

    model_config = ConfigDict(frozen=True)

    module_name: str
    name: str
    attributes: List[Attribute] = []
    parent_document_name: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        """(module name, document name) pair identifying this document."""
        return (self.module_name, self.name)

    @property
    def relations(self) -> List[Relation]:
        """Relations in declaration order."""
        return [a for a in self.attributes if isinstance(a, Relation)]

    def get_attribute(self, name: str) -> Optional[Attribute]:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        return None

    def is_same(self, other: Optional["Document"]) -> bool:
        """Check whether another document has the same module and name."""
        return other is not None and self.key == other.key

    def __str__(self) -> str:
        return f"{self.module_name}.{self.name}"


class Module(BaseModel):
    """A named set of documents."""

    model_config = ConfigDict(frozen=True)

    name: str
    documents: Dict[str, Document] = {}

    @model_validator(mode="before")
    @classmethod
    def _assign_module_name(cls, data: Any) -> Any:
        """Fill in and check the module name of contained documents."""
        if not isinstance(data, dict):
            return data
        module_name = data.get("name")
        documents = data.get("documents") or {}
        if isinstance(documents, list):
            documents = {
                (d.name if isinstance(d, Document) else d.get("name")): d
                for d in documents
            }
        normalized: Dict[str, Any] = {}
        for key, document in documents.items():
            if isinstance(document, dict):
                document = {"name": key, "module_name": module_name, **document}
                owner = document["module_name"]
            else:
                owner = document.module_name
            if owner != module_name:
                raise ValueError(
                    f"Document {key} belongs to module {owner}, not {module_name}"
                )
            normalized[key] = document
        return {**data, "documents": normalized}


__all__ = ["RelationKind", "Field", "Relation", "Attribute", "Document", "Module"]
