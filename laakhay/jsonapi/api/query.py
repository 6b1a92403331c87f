"""Query parameters for resource requests.

Filter, sort, include, search and view values are opaque to the client and
forwarded as-is. Builders are fluent and every method returns a new query,
so a base query can be shared and specialised safely.

Example:
    >>> q = query().filter("status", ["active", "pending"]).sort("-created").include("author")
    >>> q.parameters()
    {'filter[status]': 'active,pending', 'sort': '-created', 'include': 'author'}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..models.pagination import PartialPagination, Pagination

logger = logging.getLogger(__name__)


def format_filter_field(field: str) -> str:
    return f"filter[{field}]"


class PartialResourceQuery:
    """Query parameters without a resource type."""

    def __init__(self, parameters: Mapping[str, str] | None = None) -> None:
        self._parameters: dict[str, str] = dict(parameters or {})

    def parameters(self) -> dict[str, str]:
        return dict(self._parameters)

    def set(self, field: str, value: str) -> PartialResourceQuery:
        return self._copy({**self._parameters, field: value})

    def sort(self, *fields: str) -> PartialResourceQuery:
        """Sort by fields; replaces any previous sort."""
        return self.set("sort", ",".join(fields))

    def search(self, value: str) -> PartialResourceQuery:
        return self.set("search", value)

    def view(self, name: str) -> PartialResourceQuery:
        """Ask the server for a named serialization view."""
        return self.set("view", name)

    def filter(self, field: str, value: str | int | Sequence[str] | Sequence[int]) -> PartialResourceQuery:
        """Filter by a field; replaces any previous filter on that field."""
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        return self.set(format_filter_field(field), str(value))

    def include(self, *fields: str) -> PartialResourceQuery:
        """Request side-loading of related resources."""
        return self.set("include", ",".join(fields))

    def with_(self, other: PartialResourceQuery | PartialPagination | Pagination) -> PartialResourceQuery:
        """Combine with other parameters; values of ``other`` win."""
        return self._copy({**self._parameters, **other.parameters()})

    def with_pagination(self, p: PartialPagination | Pagination | None) -> PartialResourceQuery:
        if p is None:
            return self
        return self.with_(p)

    def typed(self, resource_type: str) -> ResourceQuery:
        return ResourceQuery(resource_type, self._parameters)

    def _copy(self, parameters: dict[str, str]) -> PartialResourceQuery:
        return PartialResourceQuery(parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialResourceQuery):
            return NotImplemented
        return self._parameters == other._parameters

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"


class ResourceQuery(PartialResourceQuery):
    """Query parameters bound to a concrete resource type."""

    def __init__(self, resource_type: str, parameters: Mapping[str, str] | None = None) -> None:
        super().__init__(parameters)
        self.type = resource_type

    def typed(self, resource_type: str) -> ResourceQuery:
        if resource_type != self.type:
            logger.warning(
                "query_type_mismatch",
                extra={"query_type": self.type, "requested_type": resource_type},
            )
        return self

    def _copy(self, parameters: dict[str, str]) -> ResourceQuery:
        return ResourceQuery(self.type, parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceQuery):
            return super().__eq__(other)
        return self.type == other.type and self._parameters == other._parameters


def query(resource_type: str | None = None) -> PartialResourceQuery:
    """Shorthand for a new query, typed when ``resource_type`` is given."""
    if resource_type is None:
        return PartialResourceQuery()
    return ResourceQuery(resource_type)
