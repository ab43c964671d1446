"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest

from freshbooks_convert.config import ConversionSettings, get_conversion_settings


@pytest.fixture(autouse=True)
def reset_conversion_settings(monkeypatch):
    """Isolate every test from FRESHBOOKS_* variables and the settings cache."""
    for name in list(os.environ):
        if name.startswith("FRESHBOOKS_"):
            monkeypatch.delenv(name, raising=False)
    get_conversion_settings.cache_clear()
    yield
    get_conversion_settings.cache_clear()


@pytest.fixture
def strict_settings() -> ConversionSettings:
    """Provide settings that raise on malformed paging fields."""
    return ConversionSettings(strict_paging=True)


@pytest.fixture
def invoice_list_xml() -> str:
    """Provide a FreshBooks invoice.list response."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<response xmlns="http://www.freshbooks.com/api/" status="ok">'
        '<invoices page="2" per_page="25" pages="4" total="88">'
        "<invoice><invoice_id>344</invoice_id><amount>45.00</amount></invoice>"
        "<invoice><invoice_id>345</invoice_id><amount>12.50</amount></invoice>"
        "</invoices>"
        "</response>"
    )
