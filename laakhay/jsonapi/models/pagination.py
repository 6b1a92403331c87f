"""Pagination windows over a resource collection.

A ``PartialPagination`` (offset, optional limit) is enough to request a page.
A complete ``Pagination`` additionally knows the total ``count`` and can only
be read back from a server response; it is required to work out which pages
remain.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from .wire import PaginationMeta


def format_page_field(field: str) -> str:
    return f"page[{field}]"


def _page_parameters(offset: int, limit: int | None) -> dict[str, str]:
    params = {format_page_field("offset"): str(offset)}
    if limit:
        params[format_page_field("limit")] = str(limit)
    return params


@dataclass(frozen=True)
class PartialPagination:
    """Request window without a known total.

    Attributes:
        offset: Index of the first resource requested
        limit: Maximum number of resources per page (None = server default)
    """

    offset: int = 0
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must be >= 0")
        if self.limit is not None and self.limit <= 0:
            raise ValueError("limit must be > 0")

    def parameters(self) -> dict[str, str]:
        return _page_parameters(self.offset, self.limit)

    def with_limit(self, limit: int | None) -> PartialPagination:
        return PartialPagination(self.offset, limit)


@dataclass(frozen=True)
class Pagination:
    """Complete pagination reported by the server.

    Attributes:
        offset: Index of the first resource in the page
        limit: Page size used by the server
        count: Total number of resources in the collection
    """

    offset: int
    limit: int
    count: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must be >= 0")
        if self.limit <= 0:
            raise ValueError("limit must be > 0")
        if self.count < 0:
            raise ValueError("count must be >= 0")

    @classmethod
    def from_meta(cls, meta: Any) -> Pagination | None:
        """Read the pagination block from document metadata.

        Returns None when ``meta.pagination`` is missing or malformed, which
        callers treat as "no further pages".
        """
        if not isinstance(meta, dict):
            return None
        raw = meta.get("pagination")
        if not isinstance(raw, dict):
            return None
        try:
            parsed = PaginationMeta.model_validate(raw)
        except ValidationError:
            return None
        return cls(offset=parsed.offset, limit=parsed.limit, count=parsed.count)

    def parameters(self) -> dict[str, str]:
        return _page_parameters(self.offset, self.limit)

    def partial(self) -> PartialPagination:
        return PartialPagination(self.offset, self.limit)

    def is_exhausted(self, retrieved: int) -> bool:
        """Whether ``retrieved`` items from this offset reach the end."""
        return self.offset + retrieved >= self.count

    def advance(self, by: int, limit: int | None = None) -> Pagination | None:
        """Get the window following this one.

        Args:
            by: Number of resources to move the offset forward
            limit: Override for the page size (defaults to the current limit)

        Returns:
            The next window, or None once the offset reaches ``count``
        """
        if self.is_exhausted(by):
            return None
        return Pagination(self.offset + by, limit or self.limit, self.count)

    def remaining(self, retrieved: int = 0) -> int:
        return max(self.count - self.offset - retrieved, 0)


def pagination(offset: int = 0, limit: int | None = None) -> PartialPagination:
    """Shorthand for a partial pagination.

    Only responses produce complete paginations, so there is no shorthand for
    those.
    """
    return PartialPagination(offset, limit)


def pages(p: Pagination, retrieved: int = 0) -> list[PartialPagination]:
    """List the windows left after ``retrieved`` items of ``p``.

    Windows are consecutive, share ``p.limit`` and together cover
    ``[p.offset + retrieved, p.count)``.
    """
    start = p.offset + retrieved
    total = math.ceil(p.remaining(retrieved) / p.limit)
    return [PartialPagination(start + i * p.limit, p.limit) for i in range(total)]
