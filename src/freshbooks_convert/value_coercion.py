"""
Scalar conversion helpers for FreshBooks response fields.

FreshBooks returns every scalar as text: booleans as "1"/"0", numbers with a
period decimal separator, percentages as whole numbers and timestamps as
``YYYY-MM-DD hh:mm:ss``. An empty or whitespace-only string always means
"no value" and converts to ``None``; any other non-conforming string raises
FormatError.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from typing import Any, Optional

from freshbooks_convert.exceptions import FormatError, Int32OverflowError

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_INT32_MAX_DIGITS = len(str(INT32_MAX))

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_DOUBLE_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")
_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def to_boolean(value: Optional[str]) -> bool:
    """Return True only for the FreshBooks flag ``"1"``."""
    return not _is_blank(value) and value == "1"


def to_double(value: Optional[str]) -> Optional[float]:
    """
    Convert a FreshBooks decimal string to ``float``.

    Args:
        value: Decimal text using a period separator and no digit grouping

    Returns:
        Float value, or None when value is empty or whitespace

    Raises:
        FormatError: If value is not a finite invariant-format number
    """
    if _is_blank(value):
        return None
    if not isinstance(value, str) or _DOUBLE_PATTERN.fullmatch(value) is None:
        raise FormatError.for_value(value, "double")
    result = float(value)
    if not math.isfinite(result):
        raise FormatError.for_value(value, "double")
    return result


def to_int32(value: Any) -> Optional[int]:
    """
    Convert a FreshBooks integer to ``int``.

    Paging attributes may already be typed, so non-string input is converted
    with ``str()`` before parsing.

    Args:
        value: Integer text, an already-typed value, or None

    Returns:
        Integer value, or None when value is None, empty or whitespace

    Raises:
        FormatError: If value is not a base-10 integer
        Int32OverflowError: If value does not fit a 32-bit signed integer
    """
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    if _is_blank(text):
        return None
    if _INT_PATTERN.fullmatch(text) is None:
        raise FormatError.for_value(value, "int32")

    digits = text.strip().lstrip("+-").lstrip("0")
    if len(digits) > _INT32_MAX_DIGITS:
        raise Int32OverflowError.for_text(text.strip())

    parsed = int(text)
    if parsed < INT32_MIN or parsed > INT32_MAX:
        raise Int32OverflowError.for_value(parsed)
    return parsed


def to_percentage(value: Optional[str]) -> Optional[float]:
    """Convert a whole-number FreshBooks percentage (``"50"``) to a fraction (``0.5``)."""
    result = to_double(value)
    if result is None:
        return None
    return result / 100


def to_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Convert a FreshBooks timestamp to a naive ``datetime``.

    Raises:
        FormatError: If value does not match ``YYYY-MM-DD hh:mm:ss`` exactly
            or names an invalid calendar date or time
    """
    if _is_blank(value):
        return None
    if not isinstance(value, str) or _TIMESTAMP_PATTERN.fullmatch(value) is None:
        raise FormatError.for_value(value, "timestamp")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as exc:
        logger.debug("Rejected out-of-range FreshBooks timestamp %r: %s", value, exc)
        raise FormatError.for_value(value, "timestamp") from exc


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "TIMESTAMP_FORMAT",
    "to_boolean",
    "to_datetime",
    "to_double",
    "to_int32",
    "to_percentage",
]
