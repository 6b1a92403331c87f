"""Batch execution of paginated collection fetches.

This module provides the BatchPageExecutor, which requests the first page,
plans the remaining pages from its pagination metadata, requests all of them
concurrently and merges the results in page order.

    | request page 1 | -> | request page 2 | -> | merge | -> result
                          | request page 3 |
                          | ...            |
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from time import perf_counter

from ...core.enums import FetchState
from ...models.document import Document
from ...models.pagination import PartialPagination
from ..resource_map import ResourceMap
from .planners import PagePlanner
from .telemetry import log_fetch_complete, log_page_completed, log_page_error

FetchPage = Callable[[PartialPagination], Awaitable[Document]]


@dataclass
class PageResult:
    """Result of a batch fetch.

    Attributes:
        document: All pages merged into one MANY document
        pages_used: Number of page requests issued
        state: Final fetch state (always DONE on success)
    """

    document: Document
    pages_used: int
    state: FetchState = FetchState.DONE

    @property
    def total_rows(self) -> int:
        return len(self.document)


class BatchPageExecutor:
    """Fetches every page of a collection, remaining pages concurrently.

    Relative completion order of the remaining pages does not matter: pages
    are merged in the order they were planned. The first failing page fails
    the whole fetch and outstanding page requests are cancelled.
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        *,
        endpoint_id: str = "unknown",
        resource_map: ResourceMap | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            fetch_page: Async function requesting and wrapping one page
            endpoint_id: Identifier used in telemetry
            resource_map: Optional map to deposit every page's resources into
        """
        self._fetch_page = fetch_page
        self._endpoint_id = endpoint_id
        self._resource_map = resource_map
        self._planner = PagePlanner(endpoint_id)
        self.state = FetchState.INITIAL

    async def execute(self, first: PartialPagination | None = None) -> PageResult:
        """Fetch the whole collection.

        Args:
            first: Window of the first request (default offset 0)

        Returns:
            PageResult holding the aggregated document
        """
        started = perf_counter()
        self.state = FetchState.FETCHING_FIRST
        first_page = await self._fetch(0, first or PartialPagination())

        plans = self._planner.plan(first_page)
        pages = [first_page]
        if plans:
            self.state = FetchState.FETCHING_NEXT
            tasks = [
                asyncio.ensure_future(self._fetch(index, plan))
                for index, plan in enumerate(plans, start=1)
            ]
            try:
                pages.extend(await asyncio.gather(*tasks))
            except BaseException:
                for task in tasks:
                    task.cancel()
                raise

        # Deposit in page order, data before included within each page,
        # so duplicates resolve to the last occurrence
        if self._resource_map is not None:
            for page in pages:
                self._resource_map.put_document(page)

        document = Document.combine(pages)
        self.state = FetchState.DONE
        log_fetch_complete(
            endpoint_id=self._endpoint_id,
            strategy="batch",
            pages_used=len(pages),
            total_rows=len(document),
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return PageResult(document=document, pages_used=len(pages), state=self.state)

    async def _fetch(self, index: int, plan: PartialPagination) -> Document:
        page_start = perf_counter()
        try:
            page = await self._fetch_page(plan)
        except Exception as e:
            self.state = FetchState.FAILED
            log_page_error(
                endpoint_id=self._endpoint_id,
                page_index=index,
                offset=plan.offset,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_page_completed(
            endpoint_id=self._endpoint_id,
            page_index=index,
            offset=plan.offset,
            rows=len(page),
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )
        return page
