"""Conversion helpers between FreshBooks API responses and Python values."""

from .data_models import PagedResponse, StatusResponse, TypedPagedResponse
from .exceptions import (
    ApplicationError,
    ConversionError,
    FieldBagError,
    FormatError,
    Int32OverflowError,
    PayloadDecodeError,
)
from .field_bag import SupportsFieldBag, to_field_bag
from .response_bag import MappingResponseBag, ResponseBag, as_bag
from .response_converter import to_paged_response, to_response, to_typed_paged_response
from .response_payloads import bag_from_json, bag_from_xml
from .value_coercion import to_boolean, to_datetime, to_double, to_int32, to_percentage

__all__ = [
    "ApplicationError",
    "ConversionError",
    "FieldBagError",
    "FormatError",
    "Int32OverflowError",
    "MappingResponseBag",
    "PagedResponse",
    "PayloadDecodeError",
    "ResponseBag",
    "StatusResponse",
    "SupportsFieldBag",
    "TypedPagedResponse",
    "as_bag",
    "bag_from_json",
    "bag_from_xml",
    "to_boolean",
    "to_datetime",
    "to_double",
    "to_field_bag",
    "to_int32",
    "to_paged_response",
    "to_percentage",
    "to_response",
    "to_typed_paged_response",
]
