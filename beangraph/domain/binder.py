"""Reading values from beans.

``DefaultBeanAccessor`` is the accessor the visitor uses unless told
otherwise. ``resolve_binding`` follows a binding path such as
``contact.addresses[2].country`` from a bean.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Tuple

from ..exceptions import BindingError
from ..protocols import BeanAccessor

_SEGMENT = re.compile(r"^([A-Za-z_]\w*)(?:\[(\d+)\])?$")


class DefaultBeanAccessor:
    """Accessor for beans exposing ``biz_id``, ``biz_module`` and ``biz_document``.

    Values are read with plain attribute access; mappings are read by key.
    """

    def get(self, bean: Any, name: str) -> Any:
        if isinstance(bean, Mapping):
            return bean.get(name)
        return getattr(bean, name, None)

    def type_of(self, bean: Any) -> Tuple[str, str]:
        return (self._read(bean, "biz_module"), self._read(bean, "biz_document"))

    def identity_of(self, bean: Any) -> str:
        return self._read(bean, "biz_id")

    def is_bean(self, value: Any) -> bool:
        if value is None or isinstance(value, (str, bytes)):
            return False
        return all(
            self._read(value, name) is not None
            for name in ("biz_id", "biz_module", "biz_document")
        )

    def deproxy(self, bean: Any) -> Any:
        # Lazy proxies expose the concrete instance through __deproxy__
        target = getattr(bean, "__deproxy__", None)
        return target() if callable(target) else bean

    def _read(self, bean: Any, name: str) -> Any:
        if isinstance(bean, Mapping):
            return bean.get(name)
        return getattr(bean, name, None)


def parse_binding(binding: str) -> Tuple[Tuple[str, Optional[int]], ...]:
    """Split a binding into (name, index) segments.

    Args:
        binding: Binding expression, e.g. ``contact.addresses[2].country``

    Returns:
        Tuple of (name, index or None) pairs; empty for the empty binding

    Raises:
        BindingError: If a segment is malformed
    """
    if binding == "":
        return ()
    segments = []
    for part in binding.split("."):
        match = _SEGMENT.match(part)
        if match is None:
            raise BindingError(
                f"Malformed binding segment '{part}' in '{binding}'",
                {"binding": binding, "segment": part},
            )
        index = match.group(2)
        segments.append((match.group(1), int(index) if index is not None else None))
    return tuple(segments)


def resolve_binding(
    bean: Any, binding: str, accessor: Optional[BeanAccessor] = None
) -> Any:
    """Get the value at a binding path relative to a bean.

    Args:
        bean: Bean to start from
        binding: Binding path; the empty binding returns ``bean`` itself
        accessor: Accessor used to read values (DefaultBeanAccessor if None)

    Returns:
        The value at the binding, or None when any step along the way is
        unset or an index is out of range

    Raises:
        BindingError: If the binding is malformed or indexes a non-sequence
    """
    accessor = accessor or DefaultBeanAccessor()
    current = bean
    for name, index in parse_binding(binding):
        if current is None:
            return None
        current = accessor.get(current, name)
        if index is None or current is None:
            continue
        if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
            raise BindingError(
                f"'{name}' in '{binding}' is not a sequence",
                {"binding": binding, "segment": name},
            )
        current = current[index] if index < len(current) else None
    return current


__all__ = ["DefaultBeanAccessor", "parse_binding", "resolve_binding"]
