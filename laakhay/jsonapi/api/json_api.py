"""High-level facade for JSON:API resource endpoints.

Architecture:
    JsonApi sits between user code and the transport. Each operation builds
    the query parameters, sends one or more requests through the transport,
    checks the status code and wraps the body into a Document using the
    injected ModelRegistry. Collection fetches are delegated to the paging
    executors.

Design Decisions:
    - Transport injection: any object with ``send`` works (tests use
      in-memory fakes); an aiohttp HTTPClient is created when none is given
    - Registry injection: defaults to the module-level registry
    - Defaults at construction: ``default_limit`` applies to every paginated
      request that does not set its own limit
    - No retries: failures surface to the caller unchanged

Expected statuses:
    GET 200, POST 201, PATCH 200 or 201, DELETE 204. Anything else raises
    StatusError carrying the server's error objects.

See Also:
    - BatchPageExecutor: get_all strategy
    - IncrementalFetch: get_all_incremental strategy
    - ResourceEndpoint: Per-type convenience wrapper
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.enums import EXPECTED_STATUS, Cardinality, Method
from ..models.document import Document
from ..models.pagination import PartialPagination
from ..models.reference import Reference
from ..models.resource import Resource
from ..runtime.model_registry import ModelRegistry, get_model_registry
from ..runtime.paging import BatchPageExecutor, IncrementalFetch
from ..runtime.resource_map import ResourceMap
from ..runtime.rest import HTTPClient, RequestHook, Transport, expect_status, join_url
from .query import PartialResourceQuery

logger = logging.getLogger(__name__)


class JsonApi:
    """Client for a JSON:API server.

    Example:
        >>> async with JsonApi(base_url="https://api.example.com") as api:
        ...     users = await api.get_all("/users/", query("users").include("friends"))
        ...     graph = ResourceMap.from_document(users)
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        base_url: str | None = None,
        registry: ModelRegistry | None = None,
        default_limit: int | None = None,
        timeout: float = 30.0,
        request_hooks: list[RequestHook] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Transport to send requests with (creates an
                HTTPClient for ``base_url`` if not provided)
            base_url: Base URL for the default HTTPClient
            registry: Model registry used to wrap documents
            default_limit: Page size for paginated requests without one
            timeout: Total request timeout of the default HTTPClient
            request_hooks: Hooks run before every request of the default
                HTTPClient (e.g. attaching auth headers)
        """
        if default_limit is not None and default_limit <= 0:
            raise ValueError("default_limit must be > 0")
        self._owns_transport = transport is None
        self._transport: Transport = transport or HTTPClient(
            base_url=base_url, timeout=timeout, request_hooks=request_hooks
        )
        self.registry = registry or get_model_registry()
        self.default_limit = default_limit

    async def request(
        self,
        method: Method,
        url: str,
        *,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and check its status against the method's expectation.

        Returns:
            The parsed response body

        Raises:
            StatusError: If the status is not the expected one
        """
        logger.debug("request", extra={"method": method.value, "url": url, "params": params})
        status, data = await self._transport.send(method, url, params, body)
        return expect_status(status, data, EXPECTED_STATUS[method], url=url)

    async def get_many(
        self,
        url: str,
        q: PartialResourceQuery | None = None,
        p: PartialPagination | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> Document:
        """Get a single page of a collection.

        Args:
            url: Collection URL
            q: Query parameters (filter, sort, include, ...)
            p: Window to request (default offset 0 and ``default_limit``)
            resource_map: Optional map to deposit the page's resources into
        """
        window = self._window(p)
        params = (q or PartialResourceQuery()).with_pagination(window).parameters()
        raw = await self.request(Method.GET, url, params=params)
        document = Document.wrap(raw, self.registry, Cardinality.MANY)
        if resource_map is not None:
            resource_map.put_document(document)
        return document

    async def get_all(
        self,
        url: str,
        q: PartialResourceQuery | None = None,
        p: PartialPagination | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> Document:
        """Get every page of a collection as one document.

        The first page is requested alone, since the total count is only
        known from its response. The remaining pages are then requested
        concurrently and merged in page order.
        """
        executor = BatchPageExecutor(
            lambda window: self.get_many(url, q, window),
            endpoint_id=url,
            resource_map=resource_map,
        )
        result = await executor.execute(self._window(p))
        return result.document

    def get_all_incremental(
        self,
        url: str,
        q: PartialResourceQuery | None = None,
        p: PartialPagination | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> IncrementalFetch:
        """Get every page of a collection, one page at a time.

        Nothing is requested until the returned fetch is iterated.
        """
        return IncrementalFetch(
            lambda window: self.get_many(url, q, window),
            self._window(p),
            endpoint_id=url,
            resource_map=resource_map,
        )

    async def get_one(
        self,
        url: str,
        q: PartialResourceQuery | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> Document:
        """Get a single resource by its URL."""
        params = (q or PartialResourceQuery()).parameters()
        raw = await self.request(Method.GET, url, params=params)
        document = Document.wrap(raw, self.registry, Cardinality.ONE)
        if resource_map is not None:
            resource_map.put_document(document)
        return document

    async def create(self, url: str, resource: Resource) -> Document:
        """POST a new resource to a collection URL (expects 201)."""
        body = Document(Cardinality.ONE, resource).unwrap()
        raw = await self.request(Method.POST, url, body=body)
        return Document.wrap(raw, self.registry, Cardinality.ONE)

    async def update(self, url: str, resource: Resource) -> Document:
        """PATCH an existing resource under its collection URL."""
        target = join_url(url, f"{resource.reference().id}/")
        body = Document(Cardinality.ONE, resource).unwrap()
        raw = await self.request(Method.PATCH, target, body=body)
        return Document.wrap(raw, self.registry, Cardinality.ONE)

    async def delete(self, url: str, reference: Reference | Resource) -> None:
        """DELETE a resource under its collection URL (expects 204)."""
        if isinstance(reference, Resource):
            reference = reference.reference()
        await self.request(Method.DELETE, join_url(url, f"{reference.id}/"))

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HTTPClient):
            await self._transport.close()

    async def __aenter__(self) -> JsonApi:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _window(self, p: PartialPagination | None) -> PartialPagination:
        """Fill in the default page size when the window has none."""
        window = p or PartialPagination()
        if window.limit is None and self.default_limit is not None:
            window = window.with_limit(self.default_limit)
        return window
