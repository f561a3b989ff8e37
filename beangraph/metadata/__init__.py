"""Document metadata and the customer-scoped registry."""

from .customer import Customer
from .model import Attribute, Document, Field, Module, Relation, RelationKind

__all__ = [
    "Attribute",
    "Customer",
    "Document",
    "Field",
    "Module",
    "Relation",
    "RelationKind",
]
