"""Runtime bean instances."""

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import override

# Reserved binding name of the link from a child bean to its parent
PARENT_NAME = "parent"


def generate_biz_id() -> str:
    """Generate a bean identity token.

    Returns:
        A 32 character hex string
    """
    return uuid.uuid4().hex


class DynamicBean(BaseModel):
    """A bean whose shape is given by document metadata.

    Relation and field values are free-form attributes, so the same class
    serves every document. Equality, hashing and repr are based on identity
    only; bean graphs are routinely cyclic.

    Attributes:
        biz_id: Stable identity token
        biz_module: Module of the document this bean is an instance of
        biz_document: Document this bean is an instance of

    Example:
        >>> user = DynamicBean(biz_module="admin", biz_document="User")
        >>> contact = DynamicBean(biz_module="admin", biz_document="Contact", user=user)
        >>> user.contact = contact
    """

    model_config = ConfigDict(extra="allow")

    biz_id: str = Field(default_factory=generate_biz_id)
    biz_module: str
    biz_document: str

    @override
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DynamicBean):
            return NotImplemented
        return self.biz_id == other.biz_id

    @override
    def __hash__(self) -> int:
        return hash(self.biz_id)

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.biz_module}.{self.biz_document}#{self.biz_id})"

    __str__ = __repr__


__all__ = ["DynamicBean", "PARENT_NAME", "generate_biz_id"]
