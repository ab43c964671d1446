"""Exception classes for FreshBooks response conversion.

All library exceptions inherit from ApplicationError so callers can catch
every conversion failure with a single handler.

Exception classes support two patterns:
1. No-argument raise: raise FormatError()
2. Contextual attributes: err = FormatError(value="abc", target="double"); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all freshbooks_convert errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConversionError(ApplicationError):
    """A FreshBooks value could not be converted."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "FreshBooks value could not be converted"
        super().__init__(message, **kwargs)


class FormatError(ConversionError, ValueError):
    """A non-empty FreshBooks string does not match the expected format."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "FreshBooks string does not match the expected format"
        super().__init__(message, **kwargs)

    @classmethod
    def for_value(cls, value: object, target: str) -> "FormatError":
        return cls(f"Cannot convert {value!r} to {target}", value=value, target=target)


class Int32OverflowError(ConversionError, OverflowError):
    """Parsed integer is outside the 32-bit signed range."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value was either too large or too small for a 32-bit integer"
        super().__init__(message, **kwargs)

    @classmethod
    def for_value(cls, value: int) -> "Int32OverflowError":
        return cls(f"Value {value} is outside the 32-bit signed integer range", value=value)

    @classmethod
    def for_text(cls, text: str) -> "Int32OverflowError":
        preview = text if len(text) <= 20 else f"{text[:20]}..."
        return cls(
            f"Integer text {preview!r} ({len(text)} characters) is outside the 32-bit signed integer range",
            value=text,
        )


class FieldBagError(ConversionError, TypeError):
    """Value has no enumerable public fields."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value has no enumerable public fields"
        super().__init__(message, **kwargs)

    @classmethod
    def missing_value(cls) -> "FieldBagError":
        return cls("Cannot build a field bag from None", value=None)

    @classmethod
    def unsupported_type(cls, value: object) -> "FieldBagError":
        return cls(f"Cannot enumerate fields of {type(value).__name__}", value=value)


class PayloadDecodeError(ApplicationError, ValueError):
    """FreshBooks response payload could not be decoded."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "FreshBooks response payload could not be decoded"
        super().__init__(message, **kwargs)

    @classmethod
    def malformed(cls, payload_format: str) -> "PayloadDecodeError":
        return cls(f"Malformed {payload_format} payload", payload_format=payload_format)

    @classmethod
    def not_an_object(cls, actual: type) -> "PayloadDecodeError":
        return cls(f"JSON payload must contain an object at the top level, got {actual.__name__}", actual=actual)


__all__ = [
    "ApplicationError",
    "ConversionError",
    "FieldBagError",
    "FormatError",
    "Int32OverflowError",
    "PayloadDecodeError",
]
