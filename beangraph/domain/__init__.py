"""Beans and bean access."""

from .bean import PARENT_NAME, DynamicBean, generate_biz_id
from .binder import DefaultBeanAccessor, parse_binding, resolve_binding

__all__ = [
    "PARENT_NAME",
    "DynamicBean",
    "generate_biz_id",
    "DefaultBeanAccessor",
    "parse_binding",
    "resolve_binding",
]
