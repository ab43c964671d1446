"""Flatten outbound request objects into ordered field bags."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Protocol, Tuple, runtime_checkable

from freshbooks_convert.exceptions import FieldBagError

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsFieldBag(Protocol):
    """Declares its own field list instead of relying on introspection."""

    def field_bag_items(self) -> Iterable[Tuple[str, Any]]: ...


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(value, "_fields")


def _field_items(value: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(value, SupportsFieldBag):
        return value.field_bag_items()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value) if _is_public(f.name))
    if _is_named_tuple(value):
        return ((name, getattr(value, name)) for name in value._fields if _is_public(name))
    if isinstance(value, Mapping):
        return value.items()
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return ((name, item) for name, item in vars(value).items() if _is_public(name))
    raise FieldBagError.unsupported_type(value)


def to_field_bag(value: Any) -> Dict[str, Any]:
    """
    Map each public field of value to its current value, in declaration order.

    Supported values, by precedence: objects implementing SupportsFieldBag,
    dataclass instances, named tuples, mappings and plain objects.

    Raises:
        FieldBagError: If value is None or exposes no enumerable fields
    """
    if value is None:
        raise FieldBagError.missing_value()

    bag = {str(name): item for name, item in _field_items(value)}
    logger.debug("Built field bag for %s with %d fields", type(value).__name__, len(bag))
    return bag


__all__ = ["SupportsFieldBag", "to_field_bag"]
