"""Tests for environment-backed conversion settings."""

import pytest

from freshbooks_convert.config import ConfigurationError, ConversionSettings, get_conversion_settings


def test_defaults_without_environment():
    assert get_conversion_settings() == ConversionSettings(
        default_page=1,
        default_per_page=100,
        default_pages=1,
        default_total=0,
        strict_paging=False,
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_PAGE", "0")
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_PER_PAGE", "25")
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_PAGES", "3")
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_TOTAL", "10")
    monkeypatch.setenv("FRESHBOOKS_STRICT_PAGING", "true")

    settings = get_conversion_settings()

    assert settings.default_page == 0
    assert settings.default_per_page == 25
    assert settings.default_pages == 3
    assert settings.default_total == 10
    assert settings.strict_paging is True


def test_settings_are_cached(monkeypatch):
    first = get_conversion_settings()
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_PER_PAGE", "25")
    assert get_conversion_settings() is first

    get_conversion_settings.cache_clear()
    assert get_conversion_settings().default_per_page == 25


def test_negative_defaults_are_rejected(monkeypatch):
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_TOTAL", "-1")
    with pytest.raises(ConfigurationError, match="FRESHBOOKS_DEFAULT_TOTAL"):
        get_conversion_settings()


def test_malformed_integer_is_rejected(monkeypatch):
    monkeypatch.setenv("FRESHBOOKS_DEFAULT_PAGE", "first")
    with pytest.raises(ConfigurationError):
        get_conversion_settings()


def test_settings_are_immutable():
    settings = get_conversion_settings()
    with pytest.raises(AttributeError):
        settings.default_page = 5  # type: ignore[misc]
