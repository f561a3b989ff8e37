"""
beangraph - Metadata-driven bean graph traversal.

beangraph walks networks of domain records ("beans") whose shape is described
by document metadata rather than by Python classes. It handles cyclic graphs,
polymorphic references and inverse relations, and reports every position it
visits together with the binding path that leads there.

Key Features:
- Document/relation metadata as immutable Pydantic models
- Depth-first traversal in declaration order with deterministic bindings
- Identity or vector (identity + access path) cycle detection
- Metadata-only traversal of unpopulated relations
- Step and depth protection limits

Main Exports (Import from top level):
    Traversal:
        - BeanVisitor: The traversal engine
        - BindingCollector: Callback recording visited bindings
        - VisitorConfig / get_visitor_config: Visitor configuration

    Metadata:
        - Customer, Module, Document, Relation, RelationKind, Field

    Beans:
        - DynamicBean: Metadata-shaped bean
        - DefaultBeanAccessor, resolve_binding, PARENT_NAME

    Modules:
        - exceptions: Custom exception classes

Example:
    >>> from beangraph import BeanVisitor, BindingCollector
    >>>
    >>> collector = BindingCollector()
    >>> BeanVisitor(False, False, False, callback=collector).visit(document, bean, customer)
    >>> collector.get_bindings()
"""

__version__ = "0.1.0"

from . import exceptions
from .config import VisitorConfig, get_visitor_config
from .core import BeanVisitor
from .domain import (
    PARENT_NAME,
    DefaultBeanAccessor,
    DynamicBean,
    resolve_binding,
)
from .logging import configure_logging
from .metadata import Customer, Document, Field, Module, Relation, RelationKind
from .visitors import BindingCollector

__all__ = [
    "__version__",
    # Traversal
    "BeanVisitor",
    "BindingCollector",
    "VisitorConfig",
    "get_visitor_config",
    # Metadata
    "Customer",
    "Module",
    "Document",
    "Relation",
    "RelationKind",
    "Field",
    # Beans
    "DynamicBean",
    "DefaultBeanAccessor",
    "resolve_binding",
    "PARENT_NAME",
    # Logging
    "configure_logging",
    # Modules
    "exceptions",
]
