"""Resource identity map.

The ResourceMap is the single source of truth for "have we already seen this
resource". It is a two-level mapping ``type -> id -> resource`` whose per-type
caches are created lazily on first insertion of that type.

Design Decisions:
    - Whole-resource replacement: a later resource with the same identity
      overwrites the earlier one (last write wins), fields are never merged
    - Passive: inserting never walks the graph; references only become
      resolvable, they are resolved by whoever calls ``get``
    - Scoped: one map per top-level fetch, or supplied by the caller to
      aggregate across calls. Not thread-safe.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .cache import Cache

if TYPE_CHECKING:
    from ..models.document import Document
    from ..models.reference import Reference
    from ..models.resource import Resource

logger = logging.getLogger(__name__)


class ResourceMap:
    """Container for accessing resources by type and id."""

    def __init__(self, ttl: float | None = None) -> None:
        """Initialize an empty map.

        Args:
            ttl: Optional lifetime of entries in seconds (None = no expiry)
        """
        self._ttl = ttl
        self._caches: dict[str, Cache[str, Resource]] = {}

    @classmethod
    def from_document(cls, document: Document, ttl: float | None = None) -> ResourceMap:
        return cls(ttl=ttl).put_document(document)

    def put(self, resource: Resource) -> ResourceMap:
        if resource.id is None:
            raise ValueError(f"Cannot store a {resource.resource_type} resource without an id")
        self._get_or_create_cache(resource.resource_type).set(resource.id, resource)
        return self

    def put_all(self, resources: Iterable[Resource] | None) -> ResourceMap:
        """Insert resources of any types. None is accepted and ignored."""
        if resources is not None:
            for resource in resources:
                self.put(resource)
        return self

    def put_all_of_type(self, resources: list[Resource]) -> ResourceMap:
        """Insert resources that all share one type.

        Skips the per-resource cache lookup that ``put_all`` performs.
        """
        if resources:
            cache = self._get_or_create_cache(resources[0].resource_type)
            for resource in resources:
                cache.set(resource.id, resource)  # type: ignore[arg-type]
        return self

    def put_document(self, document: Document) -> ResourceMap:
        """Insert a document's data, then its included resources.

        An identity present in both ends up as the included copy.
        """
        resources = document.resources()
        self.put_all(resources)
        logger.debug(
            "resource_map_document_stored",
            extra={"resources": len(resources), "types": len(self._caches)},
        )
        return self

    def get(self, reference: Reference) -> Resource | None:
        cache = self._caches.get(reference.type)
        if cache is None:
            return None
        return cache.get(reference.id)

    def get_all_of_type(self, resource_type: str) -> list[Resource]:
        """Get a new list of every stored resource of a type."""
        cache = self._caches.get(resource_type)
        if cache is None:
            return []
        return cache.values()

    def types(self) -> list[str]:
        return list(self._caches)

    def invalidate(self) -> None:
        self._caches.clear()

    def __contains__(self, reference: object) -> bool:
        return self.get(reference) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return sum(len(cache) for cache in self._caches.values())

    def _get_or_create_cache(self, resource_type: str) -> Cache[str, Resource]:
        cache = self._caches.get(resource_type)
        if cache is None:
            cache = Cache(self._ttl)
            self._caches[resource_type] = cache
        return cache
