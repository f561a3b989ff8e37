"""Core traversal engine for bean graphs."""

from .visitor import BeanVisitor, Position
from .walker import RelationTrail, TraversalProtection, WorkStack

__all__ = [
    "BeanVisitor",
    "Position",
    "RelationTrail",
    "TraversalProtection",
    "WorkStack",
]
