"""Core components."""

from .enums import EXPECTED_STATUS, Cardinality, FetchState, Method
from .exceptions import (
    DocumentError,
    FetchError,
    JsonApiError,
    ModelNotRegisteredError,
    RegistryError,
    StatusError,
)

__all__ = [
    "Cardinality",
    "FetchState",
    "Method",
    "EXPECTED_STATUS",
    "JsonApiError",
    "StatusError",
    "RegistryError",
    "ModelNotRegisteredError",
    "DocumentError",
    "FetchError",
]
