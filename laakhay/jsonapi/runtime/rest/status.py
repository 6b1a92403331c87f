"""Response status checking."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ...core.exceptions import StatusError
from ...models.wire import ErrorObject

logger = logging.getLogger(__name__)


def extract_errors(body: Any) -> list[ErrorObject]:
    """Parse the ``errors`` array of a response body, if any.

    Entries that are not valid error objects are skipped.
    """
    if not isinstance(body, dict):
        return []
    raw = body.get("errors")
    if not isinstance(raw, list):
        return []
    errors = []
    for entry in raw:
        try:
            errors.append(ErrorObject.model_validate(entry))
        except ValidationError:
            logger.debug("error_object_unparseable", extra={"entry": entry})
    return errors


def log_errors(errors: list[ErrorObject], *, url: str | None = None) -> None:
    for error in errors:
        logger.warning(
            "server_error",
            extra={
                "url": url,
                "status": error.status,
                "code": error.code,
                "title": error.title,
                "detail": error.detail,
            },
        )


def expect_status(
    status: int,
    body: Any,
    expected: tuple[int, ...],
    *,
    url: str | None = None,
) -> Any:
    """Return ``body`` if ``status`` is one of ``expected``.

    Raises:
        StatusError: Carrying the server's error objects when the body had
            any, otherwise a generic status mismatch message
    """
    if status in expected:
        return body

    errors = extract_errors(body)
    if errors:
        log_errors(errors, url=url)
        message = "; ".join(str(error) for error in errors)
    else:
        wanted = " or ".join(str(code) for code in expected)
        message = f"Expected status {wanted}, got {status}"
    raise StatusError(message, status_code=status, expected=expected, errors=errors)
