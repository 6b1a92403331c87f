"""Model registry mapping resource types to factories.

Architecture:
    The ModelRegistry is the dispatch table used while wrapping documents.
    A binding maps a resource type, optionally narrowed by a view
    discriminator carried in the wire payload, to a factory that turns a
    validated ``WireResource`` into a typed ``Resource``.

Design Decisions:
    - Explicit object: documents and the API facade receive a registry, so
      independent registries can coexist (tests, multiple APIs)
    - Default registry: ``get_model_registry()`` returns a module-level
      instance for the common single-API case
    - Decorator registration: ``@register_model("users")`` keeps the binding
      next to the model definition
    - View fallback: a view-specific factory wins, otherwise the type-level
      factory is used
    - Register before fetching: bindings are not safe to mutate while wraps
      are in flight

See Also:
    - Document.wrap: Dispatches every data/included element through here
    - Resource: Base class whose ``wrap`` classmethod is the usual factory
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from ..core.exceptions import DocumentError, ModelNotRegisteredError, RegistryError
from ..models.wire import WireResource

if TYPE_CHECKING:
    from ..models.resource import Resource

logger = logging.getLogger(__name__)

ModelFactory = Callable[[WireResource], "Resource"]
T = TypeVar("T", bound=type)


class ModelRegistry:
    """Dispatch table from ``(type, view)`` to resource factories."""

    def __init__(self) -> None:
        # Key: (resource_type, view); view None is the type-level binding
        self._factories: dict[tuple[str, str | None], ModelFactory] = {}

    def register(
        self,
        resource_type: str,
        factory: ModelFactory,
        *,
        view: str | None = None,
        replace: bool = False,
    ) -> None:
        """Bind a factory to a resource type.

        Args:
            resource_type: JSON:API resource type
            factory: Callable building a resource from a WireResource
            view: Optional view discriminator to bind more narrowly
            replace: Allow overwriting an existing binding

        Raises:
            RegistryError: If the binding already exists and replace is False
        """
        if not resource_type:
            raise RegistryError("Resource type must be a non-empty string")
        key = (resource_type, view)
        if key in self._factories and not replace:
            suffix = f" (view '{view}')" if view is not None else ""
            raise RegistryError(f"Resource type '{resource_type}'{suffix} is already registered")
        self._factories[key] = factory
        logger.debug("model_registered", extra={"resource_type": resource_type, "view": view})

    def unregister(self, resource_type: str, *, view: str | None = None) -> None:
        key = (resource_type, view)
        if key not in self._factories:
            raise RegistryError(f"Resource type '{resource_type}' is not registered")
        del self._factories[key]

    def resolve(self, resource_type: str, view: str | None = None) -> ModelFactory | None:
        """Find the factory for a type, preferring a view-specific binding."""
        if view is not None:
            factory = self._factories.get((resource_type, view))
            if factory is not None:
                return factory
        return self._factories.get((resource_type, None))

    def is_registered(self, resource_type: str, view: str | None = None) -> bool:
        return self.resolve(resource_type, view) is not None

    def list_types(self) -> list[str]:
        return sorted({resource_type for resource_type, _ in self._factories})

    def wrap(self, data: WireResource | dict[str, Any]) -> Resource:
        """Build a typed resource from wire data.

        Raises:
            ModelNotRegisteredError: If no factory matches the type (or view)
        """
        if not isinstance(data, WireResource):
            try:
                data = WireResource.model_validate(data)
            except ValidationError as e:
                raise DocumentError(f"Malformed resource object: {e}") from e
        factory = self.resolve(data.type, data.view)
        if factory is None:
            raise ModelNotRegisteredError(data.type, data.view)
        return factory(data)

    def wrap_all(self, resources: Iterable[WireResource | dict[str, Any]]) -> list[Resource]:
        return [self.wrap(resource) for resource in resources]

    def __contains__(self, resource_type: object) -> bool:
        return isinstance(resource_type, str) and self.is_registered(resource_type)

    def __len__(self) -> int:
        return len(self._factories)


# Global registry instance (singleton)
_default_registry: ModelRegistry | None = None


def get_model_registry() -> ModelRegistry:
    """Get the module-level default registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ModelRegistry()
    return _default_registry


def register_model(
    resource_type: str | None = None,
    *,
    view: str | None = None,
    registry: ModelRegistry | None = None,
) -> Callable[[T], T]:
    """Class decorator binding a Resource subclass to its type.

    The class's ``wrap`` classmethod becomes the factory. The type defaults to
    the class attribute ``type``.

    Raises:
        RegistryError: If the class leaves ``wrap`` abstract

    Example:
        >>> @register_model()
        ... class User(Resource):
        ...     type = "users"
    """

    def decorator(cls: T) -> T:
        bound_type = resource_type or getattr(cls, "type", "")
        if "wrap" in getattr(cls, "__abstractmethods__", ()):
            raise RegistryError(f"{cls.__name__} cannot be registered without a wrap() implementation")
        (registry or get_model_registry()).register(bound_type, cls.wrap, view=view)  # type: ignore[attr-defined]
        return cls

    return decorator
