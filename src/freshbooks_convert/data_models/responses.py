"""
Response envelopes for converted FreshBooks responses.

The converters only establish the status flag and paging metadata; result
payloads are attached by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class StatusResponse(Generic[T]):
    """Outcome of a single-object request."""

    status: bool
    result: Optional[T] = None


@dataclass
class PagedResponse:
    """Paging metadata of a list request."""

    status: bool
    page: int
    items_per_page: int
    total_pages: int
    total_items: int

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages


@dataclass
class TypedPagedResponse(PagedResponse, Generic[T]):
    """Paging metadata together with the typed results of the current page."""

    results: Tuple[T, ...] = field(default_factory=tuple)

    @classmethod
    def from_paged(cls, paged: PagedResponse, results: Iterable[T]) -> "TypedPagedResponse[T]":
        return cls(
            status=paged.status,
            page=paged.page,
            items_per_page=paged.items_per_page,
            total_pages=paged.total_pages,
            total_items=paged.total_items,
            results=tuple(results),
        )
