"""HTTP client helper."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from ...core.enums import Method

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"

# Called with (method, url, headers) before each request; may edit headers
RequestHook = Callable[[Method, str, dict[str, str]], Awaitable[None] | None]


def join_url(base: str | None, url: str) -> str:
    """Join a relative URL onto a base URL. Absolute URLs pass through."""
    if not base or url.startswith(("http://", "https://")):
        return url
    return f"{base.rstrip('/')}/{url.lstrip('/')}"


class HTTPClient:
    """Async aiohttp transport speaking JSON:API.

    Request hooks run in registration order on every request and can attach
    per-request headers such as short-lived auth tokens. A failing hook
    aborts the request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        request_hooks: list[RequestHook] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {"Accept": JSONAPI_MEDIA_TYPE, **(headers or {})}
        self._request_hooks: list[RequestHook] = list(request_hooks or [])
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_request_hook(self, hook: RequestHook) -> None:
        """Register a hook applied to every following request."""
        self._request_hooks.append(hook)

    async def send(
        self,
        method: Method,
        url: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> tuple[int, Any]:
        """Send a request and return the status with the decoded body.

        Non-2xx statuses are returned, not raised; the caller checks them.
        """
        method = Method(method)
        target = join_url(self.base_url, url)
        headers = dict(self.headers)
        if body is not None:
            headers["Content-Type"] = JSONAPI_MEDIA_TYPE
        for hook in self._request_hooks:
            result = hook(method, target, headers)
            if inspect.isawaitable(result):
                await result

        async with self.session.request(
            method.value,
            target,
            params=params,
            json=body,
            headers=headers,
        ) as response:
            # content_type=None: servers answer with the JSON:API media type
            data = await response.json(content_type=None)
            return response.status, data if data is not None else {}

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
