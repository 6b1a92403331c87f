"""Transport boundary used by the API facade."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ...core.enums import Method


@runtime_checkable
class Transport(Protocol):
    """Sends one request and returns ``(status, parsed_body)``.

    Network, timeout and decoding errors are raised by the transport and
    propagate to the caller unchanged. An empty response body is returned as
    an empty dict.
    """

    async def send(
        self,
        method: Method,
        url: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> tuple[int, Any]: ...
