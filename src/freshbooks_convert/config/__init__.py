"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_int, env_str
from .settings import ConversionSettings, get_conversion_settings

__all__ = [
    "ConfigurationError",
    "ConversionSettings",
    "env_bool",
    "env_int",
    "env_str",
    "get_conversion_settings",
]
