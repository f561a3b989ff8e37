"""Traversal support components used by the bean visitor."""

from .protection import TraversalProtection
from .trail import RelationTrail
from .work_stack import WorkStack

__all__ = ["TraversalProtection", "RelationTrail", "WorkStack"]
