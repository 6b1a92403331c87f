"""REST runtime abstractions."""

from .http_client import JSONAPI_MEDIA_TYPE, HTTPClient, RequestHook, join_url
from .status import expect_status, extract_errors, log_errors
from .transport import Transport

__all__ = [
    "HTTPClient",
    "JSONAPI_MEDIA_TYPE",
    "RequestHook",
    "Transport",
    "expect_status",
    "extract_errors",
    "join_url",
    "log_errors",
]
