"""
Read-only view over a deserialized FreshBooks response.

Converters only ever read named fields and walk entries in payload order, so
they depend on the narrow ResponseBag protocol instead of whatever structure
the payload decoder produced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, List, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class ResponseBag(Protocol):
    """Named-field access with graceful absence."""

    def get(self, name: str) -> Optional[Any]: ...

    def get_bag(self, name: str) -> Optional["ResponseBag"]: ...

    def as_ordered_pairs(self) -> List[Tuple[str, Any]]: ...


class MappingResponseBag:
    """ResponseBag adapter over any ``Mapping``."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]) -> None:
        self._fields = fields

    def get(self, name: str) -> Optional[Any]:
        if name not in self._fields:
            return None
        return _wrap(self._fields[name])

    def get_bag(self, name: str) -> Optional[ResponseBag]:
        return as_bag(self.get(name))

    def as_ordered_pairs(self) -> List[Tuple[str, Any]]:
        return [(key, _wrap(value)) for key, value in self._fields.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._fields)!r})"


def _wrap(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingResponseBag(value)
    return value


def as_bag(value: Any) -> Optional[ResponseBag]:
    """Return value as a ResponseBag, or None when it is not a nested bag."""
    if isinstance(value, MappingResponseBag):
        return value
    if isinstance(value, Mapping):
        return MappingResponseBag(value)
    if isinstance(value, ResponseBag):
        return value
    return None


__all__ = ["MappingResponseBag", "ResponseBag", "as_bag"]
