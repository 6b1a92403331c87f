"""Base resource class.

Architecture:
    Every typed in-memory resource derives from ``Resource``. A subclass
    declares its JSON:API ``type``, knows how to build itself from a validated
    ``WireResource`` (``wrap``) and how to serialize back for outgoing
    requests (``unwrap``). Subclasses are bound to their type through a
    ``ModelRegistry``, usually with the ``register_model`` decorator.

See Also:
    - ModelRegistry: Dispatches wire resources to factories
    - GenericResource: Attribute-bag resource for untyped use
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .reference import Reference
from .relationship import relationship_to_references, references_to_relationship
from .wire import WireResource


class Resource(ABC):
    """Abstract base class for all client-side resources."""

    type: ClassVar[str] = ""

    def __init__(self, id: str | None = None) -> None:
        self.id = id

    @classmethod
    @abstractmethod
    def wrap(cls, data: WireResource) -> Resource:
        """Build a resource from wire data."""
        pass

    @abstractmethod
    def unwrap(self) -> dict[str, Any]:
        """Serialize to a wire resource object."""
        pass

    @property
    def resource_type(self) -> str:
        return self.type

    def reference(self) -> Reference:
        if self.id is None:
            raise ValueError(f"Cannot reference an unsaved {self.type} resource")
        return Reference(type=self.resource_type, id=self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.resource_type!r}, id={self.id!r})"


class GenericResource(Resource):
    """Resource that keeps attributes and relationships as-is.

    Handy when no dedicated model exists for a type, or in tests. The type is
    stored per instance since one class serves many resource types.
    Relationship values are converted to ``Reference`` objects (or lists of
    them, or ``None`` for an empty to-one).
    """

    def __init__(
        self,
        resource_type: str,
        id: str | None = None,
        *,
        view: str | None = None,
        attributes: dict[str, Any] | None = None,
        relationships: dict[str, Reference | list[Reference] | None] | None = None,
    ) -> None:
        super().__init__(id)
        self._type = resource_type
        self.view = view
        self.attributes = dict(attributes or {})
        self.relationships = dict(relationships or {})

    @property
    def resource_type(self) -> str:
        return self._type

    @classmethod
    def wrap(cls, data: WireResource) -> GenericResource:
        relationships = {
            name: relationship_to_references(value)
            for name, value in (data.relationships or {}).items()
        }
        return cls(
            data.type,
            data.id,
            view=data.view,
            attributes=data.attributes,
            relationships=relationships,
        )

    def unwrap(self) -> dict[str, Any]:
        raw: dict[str, Any] = {"type": self._type, "attributes": dict(self.attributes)}
        if self.id is not None:
            raw["id"] = self.id
        if self.relationships:
            raw["relationships"] = {
                name: references_to_relationship(value)
                for name, value in self.relationships.items()
            }
        return raw

    def __getitem__(self, key: str) -> Any:
        return self.attributes[key]
