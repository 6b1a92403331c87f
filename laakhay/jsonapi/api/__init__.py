"""High-level API for JSON:API servers."""

from .endpoint import ResourceEndpoint
from .include import IncludeSchema, Relater, include, relater
from .json_api import JsonApi
from .query import PartialResourceQuery, ResourceQuery, format_filter_field, query

__all__ = [
    "IncludeSchema",
    "JsonApi",
    "PartialResourceQuery",
    "Relater",
    "ResourceEndpoint",
    "ResourceQuery",
    "format_filter_field",
    "include",
    "query",
    "relater",
]
