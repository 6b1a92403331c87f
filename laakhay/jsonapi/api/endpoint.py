"""Per-resource-type endpoint wrapper."""

from __future__ import annotations

from typing import Any

from ..models.document import Document
from ..models.pagination import PartialPagination
from ..models.reference import Reference
from ..models.resource import Resource
from ..runtime.paging import IncrementalFetch
from ..runtime.resource_map import ResourceMap
from ..runtime.rest import join_url
from .json_api import JsonApi
from .query import PartialResourceQuery, ResourceQuery, query


class ResourceEndpoint:
    """Access to one collection endpoint of a JSON:API server.

    Queries passed to the getters are bound to the endpoint's resource type.

    Example:
        >>> users = ResourceEndpoint(api, "/users/", "users")
        >>> async for page in users.get_all_incremental(query().sort("name")):
        ...     print(len(page))
    """

    def __init__(self, api: JsonApi, url: str, resource_type: str) -> None:
        self.api = api
        self.url = url
        self.type = resource_type

    def _typed(self, q: PartialResourceQuery | None) -> ResourceQuery:
        return (q or query()).typed(self.type)

    async def get(
        self,
        q: PartialResourceQuery | None = None,
        p: PartialPagination | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> Document:
        """Get a single page."""
        return await self.api.get_many(self.url, self._typed(q), p, resource_map=resource_map)

    async def get_all(
        self,
        q: PartialResourceQuery | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> Document:
        return await self.api.get_all(self.url, self._typed(q), resource_map=resource_map)

    def get_all_incremental(
        self,
        q: PartialResourceQuery | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> IncrementalFetch:
        return self.api.get_all_incremental(self.url, self._typed(q), resource_map=resource_map)

    async def get_one(
        self,
        id: str | Reference | Resource | dict[str, Any],
        q: PartialResourceQuery | None = None,
        *,
        resource_map: ResourceMap | None = None,
    ) -> Document:
        """Get one resource by id, reference, resource or raw identifier."""
        if isinstance(id, Resource):
            resource_id = id.reference().id
        elif isinstance(id, Reference):
            resource_id = id.id
        elif isinstance(id, dict):
            resource_id = str(id["id"])
        else:
            resource_id = id
        return await self.api.get_one(
            join_url(self.url, f"{resource_id}/"), self._typed(q), resource_map=resource_map
        )

    async def create(self, resource: Resource) -> Document:
        return await self.api.create(self.url, resource)

    async def update(self, resource: Resource) -> Document:
        return await self.api.update(self.url, resource)

    async def delete(self, resource: Reference | Resource) -> None:
        await self.api.delete(self.url, resource)
