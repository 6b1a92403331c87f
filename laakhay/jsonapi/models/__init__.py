"""Data models for documents, resources and their wire format.

Architecture:
    Pydantic v2 models describe the validated wire format (``wire``), while
    the client-side graph is made of plain ``Resource`` subclasses linked by
    frozen ``Reference`` values. Pagination windows are immutable dataclasses.

Model Categories:
    - Wire: WireResource, ResourceIdentifier, ErrorObject, PaginationMeta
    - Graph: Resource, GenericResource, Reference
    - Responses: Document, Pagination, PartialPagination
"""

from .document import Document
from .pagination import PartialPagination, Pagination, format_page_field, pages, pagination
from .reference import Reference
from .relationship import (
    is_reference,
    is_reference_list,
    relationship_to_references,
    references_to_relationship,
    resolve,
    resolve_many,
    resolve_one,
)
from .resource import GenericResource, Resource
from .wire import ErrorObject, ErrorSource, PaginationMeta, ResourceIdentifier, WireResource

__all__ = [
    "Document",
    "ErrorObject",
    "ErrorSource",
    "GenericResource",
    "Pagination",
    "PaginationMeta",
    "PartialPagination",
    "Reference",
    "Resource",
    "ResourceIdentifier",
    "WireResource",
    "format_page_field",
    "is_reference",
    "is_reference_list",
    "pages",
    "pagination",
    "references_to_relationship",
    "relationship_to_references",
    "resolve",
    "resolve_many",
    "resolve_one",
]
