"""Resource references.

A reference names a resource by identity only. It never holds the resource
itself: resolution is an explicit lookup against a ``ResourceMap`` supplied at
the point of use, so each graph build resolves against its own data and
resources never point at each other through references.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    from ..runtime.resource_map import ResourceMap
    from .resource import Resource


@dataclass(frozen=True)
class Reference:
    """Pointer to a resource by ``(type, id)``.

    Attributes:
        type: JSON:API resource type
        id: Resource identifier, unique within its type
    """

    type: str
    id: str

    @classmethod
    def to(cls, resource_type: str, resource_id: str) -> Reference:
        return cls(type=resource_type, id=resource_id)

    @overload
    @classmethod
    def wrap(cls, raw: None) -> None: ...

    @overload
    @classmethod
    def wrap(cls, raw: Mapping[str, Any] | Any) -> Reference: ...

    @classmethod
    def wrap(cls, raw: Any) -> Reference | None:
        """Wrap a raw ``{"id", "type"}`` linkage.

        ``None`` passes through unchanged: an empty to-one relationship is a
        true absence, not an unresolved reference.
        """
        if raw is None:
            return None
        if isinstance(raw, Reference):
            return raw
        if isinstance(raw, Mapping):
            return cls(type=str(raw["type"]), id=str(raw["id"]))
        # pydantic ResourceIdentifier and friends
        return cls(type=str(raw.type), id=str(raw.id))

    @classmethod
    def wrap_all(cls, raws: Iterable[Any] | None) -> list[Reference] | None:
        if raws is None:
            return None
        return [cls.wrap(raw) for raw in raws]

    @staticmethod
    def unwrap_all(references: Iterable[Reference]) -> list[dict[str, str]]:
        return [reference.unwrap() for reference in references]

    def unwrap(self) -> dict[str, str]:
        return {"id": self.id, "type": self.type}

    def resolve(self, resource_map: ResourceMap) -> Resource | None:
        """Look the referenced resource up in a resource map.

        Resolving is idempotent and a miss simply returns ``None``.
        """
        return resource_map.get(self)

    def __str__(self) -> str:
        return f"{self.type}:{self.id}"
