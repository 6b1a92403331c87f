"""Shared fixtures for unit tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from laakhay.jsonapi import GenericResource, JsonApi, Method, ModelRegistry


def make_user(index: int, **extra: Any) -> dict[str, Any]:
    """Raw wire resource for a user."""
    return {
        "id": str(index),
        "type": "users",
        "attributes": {"name": f"user-{index}", **extra},
        "relationships": {"group": {"data": {"id": str(index % 2), "type": "groups"}}},
    }


def make_group(index: int) -> dict[str, Any]:
    return {"id": str(index), "type": "groups", "attributes": {"name": f"group-{index}"}}


class FakeTransport:
    """In-memory transport serving a paginated ``users`` collection.

    Honors ``page[offset]``/``page[limit]``, reports ``meta.pagination`` and
    side-loads the groups referenced by each page. ``replies`` answers given
    offsets with a fixed ``(status, body)``. Records every call and the
    highest number of concurrently outstanding requests.
    """

    def __init__(
        self,
        total: int = 5,
        page_size: int = 2,
        *,
        fail_at_offset: int | None = None,
        failure: BaseException | None = None,
        delays: dict[int, float] | None = None,
        replies: dict[int, tuple[int, Any]] | None = None,
        paginate: bool = True,
    ) -> None:
        self.users = [make_user(i) for i in range(total)]
        self.page_size = page_size
        self.fail_at_offset = fail_at_offset
        self.failure = failure or ConnectionError("connection reset")
        self.delays = delays or {}
        self.replies = replies or {}
        self.paginate = paginate
        self.calls: list[tuple[Method, str, dict[str, str] | None, dict[str, Any] | None]] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.responses: dict[tuple[Method, str], tuple[int, Any]] = {}

    async def send(
        self,
        method: Method,
        url: str,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> tuple[int, Any]:
        self.calls.append((method, url, params, body))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            params = params or {}
            offset = int(params.get("page[offset]", 0))
            await asyncio.sleep(self.delays.get(offset, 0))
            if (method, url) in self.responses:
                return self.responses[(method, url)]
            if self.fail_at_offset is not None and offset == self.fail_at_offset:
                raise self.failure
            if offset in self.replies:
                return self.replies[offset]
            return 200, self._page(offset, int(params.get("page[limit]", self.page_size)))
        finally:
            self.in_flight -= 1

    def _page(self, offset: int, limit: int) -> dict[str, Any]:
        data = self.users[offset : offset + limit]
        group_ids = sorted({u["relationships"]["group"]["data"]["id"] for u in data})
        document: dict[str, Any] = {
            "data": data,
            "included": [make_group(int(g)) for g in group_ids],
        }
        if self.paginate:
            document["meta"] = {
                "pagination": {"offset": offset, "limit": limit, "count": len(self.users)}
            }
        return document

    @property
    def offsets(self) -> list[int]:
        return [int((params or {}).get("page[offset]", 0)) for _, _, params, _ in self.calls]


@pytest.fixture
def registry() -> ModelRegistry:
    """Registry binding users and groups to GenericResource."""
    registry = ModelRegistry()
    registry.register("users", GenericResource.wrap)
    registry.register("groups", GenericResource.wrap)
    return registry


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api(transport: FakeTransport, registry: ModelRegistry) -> JsonApi:
    return JsonApi(transport, registry=registry)


@pytest.fixture
def fake_transport_cls() -> type[FakeTransport]:
    return FakeTransport


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def group_factory():
    return make_group
