"""Relationship fields and their resolution against a resource map.

A relationship field holds one of:
    - a ``Reference`` (to-one)
    - ``None`` (empty optional to-one, a true absence)
    - a list of ``Reference`` (to-many)

Resolution maps ``Reference.resolve`` over the field. Misses come back as
``None`` without raising, so partially-fetched graphs stay usable.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from .reference import Reference

if TYPE_CHECKING:
    from ..runtime.resource_map import ResourceMap
    from .resource import Resource


def is_reference(value: Any) -> bool:
    return isinstance(value, Reference)


def is_reference_list(value: Any) -> bool:
    """True for a list made only of references (an empty list counts)."""
    if not isinstance(value, list):
        return False
    return all(isinstance(item, Reference) for item in value)


def resolve_one(reference: Reference | None, resource_map: ResourceMap) -> Resource | None:
    if reference is None:
        return None
    return reference.resolve(resource_map)


def resolve_many(
    references: Iterable[Reference], resource_map: ResourceMap
) -> list[Resource | None]:
    return [reference.resolve(resource_map) for reference in references]


def resolve(
    value: Reference | list[Reference] | None, resource_map: ResourceMap
) -> Resource | list[Resource | None] | None:
    """Resolve any relationship field shape."""
    if isinstance(value, list):
        return resolve_many(value, resource_map)
    return resolve_one(value, resource_map)


def relationship_to_references(raw: Any) -> Reference | list[Reference] | None:
    """Convert a wire relationship object to references.

    Accepts ``{"data": {...}}``, ``{"data": [...]}`` or ``{"data": null}``.
    A relationship object without ``data`` (links only) yields ``None``.
    """
    if isinstance(raw, Mapping):
        raw = raw.get("data")
    if raw is None:
        return None
    if isinstance(raw, list):
        return [Reference.wrap(item) for item in raw]
    return Reference.wrap(raw)


def references_to_relationship(value: Reference | list[Reference] | None) -> dict[str, Any]:
    if value is None:
        return {"data": None}
    if isinstance(value, list):
        return {"data": Reference.unwrap_all(value)}
    return {"data": value.unwrap()}
