"""Laakhay JSON:API - Async client for paginated, linked REST resources."""

from .api import (
    JsonApi,
    PartialResourceQuery,
    Relater,
    ResourceEndpoint,
    ResourceQuery,
    include,
    query,
    relater,
)
from .core import (
    Cardinality,
    DocumentError,
    FetchError,
    FetchState,
    JsonApiError,
    Method,
    ModelNotRegisteredError,
    RegistryError,
    StatusError,
)
from .models import (
    Document,
    ErrorObject,
    GenericResource,
    Pagination,
    PartialPagination,
    Reference,
    Resource,
    WireResource,
    pages,
    pagination,
)
from .runtime import (
    Cache,
    HTTPClient,
    IncrementalFetch,
    ModelRegistry,
    ResourceMap,
    Transport,
    get_model_registry,
    register_model,
)

__version__ = "0.1.0"

__all__ = [
    # API
    "JsonApi",
    "ResourceEndpoint",
    "PartialResourceQuery",
    "ResourceQuery",
    "Relater",
    "include",
    "query",
    "relater",
    # Core
    "Cardinality",
    "FetchState",
    "Method",
    "JsonApiError",
    "StatusError",
    "RegistryError",
    "ModelNotRegisteredError",
    "DocumentError",
    "FetchError",
    # Models
    "Document",
    "ErrorObject",
    "GenericResource",
    "Pagination",
    "PartialPagination",
    "Reference",
    "Resource",
    "WireResource",
    "pages",
    "pagination",
    # Runtime
    "Cache",
    "HTTPClient",
    "IncrementalFetch",
    "ModelRegistry",
    "ResourceMap",
    "Transport",
    "get_model_registry",
    "register_model",
]
