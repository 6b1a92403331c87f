"""Page planning after the first response of a collection fetch."""

from __future__ import annotations

from ...models.document import Document
from ...models.pagination import Pagination, PartialPagination, pages
from .telemetry import log_page_plan


class PagePlanner:
    """Works out which pages remain once the first page has arrived.

    The total number of resources is only known from the first response, so
    planning always starts from that page's reported pagination.
    """

    def __init__(self, endpoint_id: str = "unknown") -> None:
        self._endpoint_id = endpoint_id

    def plan(self, first: Document) -> list[PartialPagination]:
        """Plan the remaining pages.

        Args:
            first: The wrapped first page

        Returns:
            Windows still to request, in collection order. Empty when the
            response had no (valid) pagination or already covers the count.
        """
        p = first.pagination()
        retrieved = len(first)
        if p is None or p.is_exhausted(retrieved):
            return []
        return self.plan_from(p, retrieved)

    def plan_from(self, p: Pagination, retrieved: int = 0) -> list[PartialPagination]:
        plans = pages(p, retrieved)
        log_page_plan(
            endpoint_id=self._endpoint_id,
            total_pages=len(plans),
            retrieved=retrieved,
            count=p.count,
            limit=p.limit,
        )
        return plans
