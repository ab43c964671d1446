"""
Envelope conversion for FreshBooks responses.

Every FreshBooks response is wrapped in a ``response`` element whose
``status`` attribute reports success. List responses additionally carry a
nested element at the third position of the wrapper with ``page``,
``per_page``, ``pages`` and ``total`` attributes. Responses without that
nested element are simply not paged, so the paged converter returns None for
them instead of raising.
"""

import logging
from typing import Any, Iterable, Optional, TypeVar

from freshbooks_convert.config import ConversionSettings, get_conversion_settings
from freshbooks_convert.data_models import PagedResponse, StatusResponse, TypedPagedResponse
from freshbooks_convert.exceptions import FormatError, Int32OverflowError
from freshbooks_convert.response_bag import ResponseBag, as_bag
from freshbooks_convert.value_coercion import to_int32

logger = logging.getLogger(__name__)

T = TypeVar("T")

RESPONSE_FIELD = "response"
STATUS_FIELD = "status"
OK_STATUS = "ok"
PAGING_ENTRY_INDEX = 2


def _resolve_settings(settings: Optional[ConversionSettings]) -> ConversionSettings:
    if settings is not None:
        return settings
    return get_conversion_settings()


def _response_status(bag: Optional[ResponseBag]) -> bool:
    if bag is None:
        return False
    response = bag.get_bag(RESPONSE_FIELD)
    if response is None:
        return False
    status = response.get(STATUS_FIELD)
    return status is not None and str(status) == OK_STATUS


def _paging_field(paging: ResponseBag, name: str, fallback: int, settings: ConversionSettings) -> int:
    raw_value = paging.get(name)
    try:
        parsed = to_int32(raw_value)
    except (FormatError, Int32OverflowError):
        if settings.strict_paging:
            raise
        logger.warning("Unparsable paging field %s=%.40r; using %s", name, raw_value, fallback)
        return fallback
    if parsed is None:
        return fallback
    return parsed


def to_response(value: Any) -> Optional[StatusResponse[Any]]:
    """
    Convert a FreshBooks response to a StatusResponse.

    Args:
        value: Decoded response as a ResponseBag or mapping

    Returns:
        StatusResponse with only the status populated, or None when value is None
    """
    if value is None:
        return None

    bag = as_bag(value)
    if bag is None:
        logger.debug("Response of type %s has no fields; reporting failed status", type(value).__name__)
    return StatusResponse(status=_response_status(bag))


def to_paged_response(value: Any, *, settings: Optional[ConversionSettings] = None) -> Optional[PagedResponse]:
    """
    Convert a FreshBooks list response to a PagedResponse.

    Missing or empty paging fields fall back to the configured defaults
    (page 1, 100 items per page, 1 page, 0 items). Unparsable paging fields
    fall back as well unless strict paging is enabled.

    Args:
        value: Decoded response as a ResponseBag or mapping
        settings: Overrides the environment-backed conversion settings

    Returns:
        PagedResponse, or None when value is not a paged response

    Raises:
        FormatError: If strict paging is enabled and a paging field is malformed
        Int32OverflowError: If strict paging is enabled and a paging field overflows
    """
    bag = as_bag(value)
    if bag is None:
        return None

    response = bag.get_bag(RESPONSE_FIELD)
    if response is None:
        logger.debug("Response has no '%s' wrapper; not a paged response", RESPONSE_FIELD)
        return None

    entries = response.as_ordered_pairs()
    if len(entries) <= PAGING_ENTRY_INDEX:
        logger.debug("Response wrapper has %d entries; not a paged response", len(entries))
        return None

    entry_name, entry_value = entries[PAGING_ENTRY_INDEX]
    paging = as_bag(entry_value)
    if paging is None:
        logger.debug("Response entry %r is not a nested bag; not a paged response", entry_name)
        return None

    resolved = _resolve_settings(settings)
    return PagedResponse(
        status=_response_status(bag),
        page=_paging_field(paging, "page", resolved.default_page, resolved),
        items_per_page=_paging_field(paging, "per_page", resolved.default_per_page, resolved),
        total_pages=_paging_field(paging, "pages", resolved.default_pages, resolved),
        total_items=_paging_field(paging, "total", resolved.default_total, resolved),
    )


def to_typed_paged_response(
    value: Any,
    results: Iterable[T],
    *,
    settings: Optional[ConversionSettings] = None,
) -> Optional[TypedPagedResponse[T]]:
    """Convert a FreshBooks list response and attach the caller's typed results."""
    paged = to_paged_response(value, settings=settings)
    if paged is None:
        return None
    return TypedPagedResponse.from_paged(paged, results)


__all__ = [
    "OK_STATUS",
    "PAGING_ENTRY_INDEX",
    "to_paged_response",
    "to_response",
    "to_typed_paged_response",
]
