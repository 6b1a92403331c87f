"""Incremental execution of paginated collection fetches.

An IncrementalFetch hands every page to the caller as soon as it has been
wrapped, and only then decides whether another page is needed:

    | request page 1 | -> step(1) -> | request page 2 | -> step(2) -> ... -> done

At most one request is in flight, and no page is requested before its
predecessor has been delivered. Pages are produced by an explicit loop rather
than nested callbacks, so long collections do not deepen the call stack.

Example:
    >>> fetch = api.get_all_incremental("/users/")
    >>> async for page in fetch:
    ...     render(page.data)
    >>> fetch.state
    <FetchState.DONE: 'done'>
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Awaitable, Callable
from time import perf_counter
from typing import Any

from ...core.enums import FetchState
from ...core.exceptions import FetchError
from ...models.document import Document
from ...models.pagination import PartialPagination
from ..resource_map import ResourceMap
from .executors import FetchPage
from .telemetry import log_fetch_complete, log_page_completed, log_page_error

StepCallback = Callable[[Document], Awaitable[Any] | Any]


class IncrementalFetch:
    """Finite, non-restartable sequence of pages of one collection.

    Iterate it with ``async for`` or pass a step callback to ``each``. The
    end of iteration is the completion signal; ``state`` is then DONE. A
    failing page moves the fetch to FAILED and raises from the iteration;
    pages already delivered are not retracted.
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        first: PartialPagination | None = None,
        *,
        endpoint_id: str = "unknown",
        resource_map: ResourceMap | None = None,
    ) -> None:
        """Initialize the fetch. Nothing is requested until iteration starts.

        Args:
            fetch_page: Async function requesting and wrapping one page
            first: Window of the first request (default offset 0)
            endpoint_id: Identifier used in telemetry
            resource_map: Optional map each page is deposited into before
                it is delivered
        """
        self._fetch_page = fetch_page
        self._first = first or PartialPagination()
        self._endpoint_id = endpoint_id
        self._resource_map = resource_map
        self._started = False
        self.state = FetchState.INITIAL
        self.pages_delivered = 0
        self.rows_delivered = 0

    def __aiter__(self) -> AsyncIterator[Document]:
        if self._started:
            raise FetchError("An incremental fetch can only be iterated once")
        self._started = True
        return self._run()

    async def each(self, step: StepCallback) -> int:
        """Deliver every page to ``step``, awaiting it if it is a coroutine.

        Returns:
            Number of pages delivered
        """
        async for page in self:
            result = step(page)
            if inspect.isawaitable(result):
                await result
        return self.pages_delivered

    async def collect(self) -> Document:
        """Consume the fetch and merge all pages in order."""
        collected = [page async for page in self]
        return Document.combine(collected)

    async def _run(self) -> AsyncIterator[Document]:
        started = perf_counter()
        window: PartialPagination = self._first
        self.state = FetchState.FETCHING_FIRST

        while True:
            page = await self._fetch(window)
            if self._resource_map is not None:
                self._resource_map.put_document(page)

            self.pages_delivered += 1
            self.rows_delivered += len(page)
            yield page

            # Decide on the next page only after the caller had this one
            retrieved = len(page)
            p = page.pagination()
            following = p.advance(retrieved) if p is not None and retrieved > 0 else None
            if following is None:
                break
            self.state = FetchState.FETCHING_NEXT
            window = following.partial()

        self.state = FetchState.DONE
        log_fetch_complete(
            endpoint_id=self._endpoint_id,
            strategy="incremental",
            pages_used=self.pages_delivered,
            total_rows=self.rows_delivered,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

    async def _fetch(self, window: PartialPagination) -> Document:
        page_start = perf_counter()
        try:
            page = await self._fetch_page(window)
        except Exception as e:
            self.state = FetchState.FAILED
            log_page_error(
                endpoint_id=self._endpoint_id,
                page_index=self.pages_delivered,
                offset=window.offset,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        log_page_completed(
            endpoint_id=self._endpoint_id,
            page_index=self.pages_delivered,
            offset=window.offset,
            rows=len(page),
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )
        return page
