"""In-memory metadata registry scoped to a customer (tenant)."""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..exceptions import MetaDataError
from .model import Document, Module, Relation

logger = logging.getLogger(__name__)


class Customer(BaseModel):
    """The tenant context through which document metadata is looked up.

    A customer is handed to ``BeanVisitor.visit`` and answers every metadata
    question the traversal asks. It is read-only once built.

    Example:
        >>> customer = Customer.model_validate({
        ...     "name": "demo",
        ...     "modules": {"admin": {"name": "admin", "documents": {...}}},
        ... })
        >>> contact = customer.module_document("admin", "Contact")
    """

    model_config = ConfigDict(frozen=True)

    name: str
    modules: Dict[str, Module] = {}

    def get_module(self, module_name: str) -> Module:
        """Get a module by name.

        Raises:
            MetaDataError: If the module is not defined for this customer
        """
        module = self.modules.get(module_name)
        if module is None:
            raise MetaDataError(
                f"Module {module_name} does not exist for customer {self.name}",
                {"customer": self.name, "module_name": module_name},
            )
        return module

    def module_document(self, module_name: str, document_name: str) -> Document:
        """Get a document by module and document name.

        Raises:
            MetaDataError: If the module or document does not exist
        """
        document = self.get_module(module_name).documents.get(document_name)
        if document is None:
            raise MetaDataError(
                f"Document {module_name}.{document_name} does not exist",
                {
                    "customer": self.name,
                    "module_name": module_name,
                    "document_name": document_name,
                },
            )
        return document

    def relations_of(self, document: Document) -> List[Relation]:
        return document.relations

    def parent_of(self, document: Document) -> Optional[Document]:
        if document.parent_document_name is None:
            return None
        return self.module_document(document.module_name, document.parent_document_name)


__all__ = ["Customer"]
