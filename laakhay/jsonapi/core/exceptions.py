"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.wire import ErrorObject


class JsonApiError(Exception):
    """Base exception for all library errors."""

    pass


class StatusError(JsonApiError):
    """Server answered with a status other than the expected one.

    When the response body carried a JSON:API ``errors`` array, the parsed
    error objects are kept on ``errors`` so callers can inspect what the
    server reported instead of a generic status message.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        expected: tuple[int, ...] = (),
        errors: list[ErrorObject] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.expected = expected
        self.errors = errors or []


class RegistryError(JsonApiError):
    """Invalid model registry operation."""

    pass


class ModelNotRegisteredError(RegistryError):
    """No factory is bound for a resource type (or view).

    Raised while wrapping a document. Skipping the element would drop a graph
    node that relationships elsewhere may point at, so the wrap fails instead.
    """

    def __init__(self, resource_type: str, view: str | None = None) -> None:
        if view is None:
            message = f"No model registered for resource type '{resource_type}'"
        else:
            message = (
                f"No model registered for resource type '{resource_type}' (view '{view}')"
            )
        super().__init__(message)
        self.resource_type = resource_type
        self.view = view


class DocumentError(JsonApiError):
    """Malformed document or unsupported document operation."""

    pass


class FetchError(JsonApiError):
    """Invalid use of a fetch orchestration."""

    pass
