"""Data models produced by the FreshBooks response converters."""

from .responses import PagedResponse, StatusResponse, TypedPagedResponse

__all__ = ["PagedResponse", "StatusResponse", "TypedPagedResponse"]
