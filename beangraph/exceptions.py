"""Exception hierarchy for beangraph.

Every error raised by the traversal engine derives from ``BeanGraphError`` so
callers can catch the whole family in one place while still telling modeling
problems apart from ordinary data failures.
"""

from typing import Any, Dict, Optional


class BeanGraphError(Exception):
    """Base exception for all beangraph errors.

    Attributes:
        message: Human readable error message
        details: Additional structured context about the failure
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MetaDataError(BeanGraphError):
    """Raised when a module or document cannot be found in the registry."""

    pass


class ModelingError(BeanGraphError):
    """Raised when a bean value does not match its declared relation kind.

    This almost always means an accessor on the bean class clashes with the
    relation name declared in the document metadata.
    """

    def __init__(
        self,
        relation_name: str,
        document_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.relation_name = relation_name
        self.document_name = document_name
        message = (
            f"Is relation {relation_name} property getter overridden in the bean class?"
            " Possible bean accessor clash with the relation name?"
        )
        merged = {"relation_name": relation_name, "document_name": document_name}
        merged.update(details or {})
        super().__init__(message, merged)


class DomainError(BeanGraphError):
    """Wraps an unexpected failure raised while traversing a bean graph."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.cause = cause
        super().__init__(message, details)


class TraversalLimitError(BeanGraphError):
    """Raised when a traversal protection limit is exceeded."""

    def __init__(self, protection_type: str, details: Dict[str, Any]):
        self.protection_type = protection_type
        super().__init__(f"Protection triggered: {protection_type}", details)


class BindingError(BeanGraphError):
    """Raised when a binding expression cannot be parsed."""

    pass


__all__ = [
    "BeanGraphError",
    "MetaDataError",
    "ModelingError",
    "DomainError",
    "TraversalLimitError",
    "BindingError",
]
