from __future__ import annotations

"""Conversion settings shared by the response converters."""


from dataclasses import dataclass
from functools import lru_cache

from .errors import ConfigurationError
from .runtime import env_bool, env_int

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 100
DEFAULT_PAGES = 1
DEFAULT_TOTAL = 0


@dataclass(frozen=True)
class ConversionSettings:
    default_page: int = DEFAULT_PAGE
    default_per_page: int = DEFAULT_PER_PAGE
    default_pages: int = DEFAULT_PAGES
    default_total: int = DEFAULT_TOTAL
    strict_paging: bool = False


def _non_negative(name: str, value: int | None, fallback: int) -> int:
    if value is None:
        return fallback
    if value < 0:
        raise ConfigurationError.invalid_value(name, value, "must be non-negative")
    return value


@lru_cache(maxsize=1)
def get_conversion_settings() -> ConversionSettings:
    """Build conversion settings from ``FRESHBOOKS_*`` environment variables."""

    strict_paging = env_bool("FRESHBOOKS_STRICT_PAGING", or_value=False)

    return ConversionSettings(
        default_page=_non_negative("FRESHBOOKS_DEFAULT_PAGE", env_int("FRESHBOOKS_DEFAULT_PAGE"), DEFAULT_PAGE),
        default_per_page=_non_negative(
            "FRESHBOOKS_DEFAULT_PER_PAGE", env_int("FRESHBOOKS_DEFAULT_PER_PAGE"), DEFAULT_PER_PAGE
        ),
        default_pages=_non_negative("FRESHBOOKS_DEFAULT_PAGES", env_int("FRESHBOOKS_DEFAULT_PAGES"), DEFAULT_PAGES),
        default_total=_non_negative("FRESHBOOKS_DEFAULT_TOTAL", env_int("FRESHBOOKS_DEFAULT_TOTAL"), DEFAULT_TOTAL),
        strict_paging=bool(strict_paging),
    )


__all__ = [
    "ConversionSettings",
    "DEFAULT_PAGE",
    "DEFAULT_PAGES",
    "DEFAULT_PER_PAGE",
    "DEFAULT_TOTAL",
    "get_conversion_settings",
]
