"""Unit tests for ModelRegistry."""

from __future__ import annotations

from typing import Any

import pytest

from laakhay.jsonapi.core import ModelNotRegisteredError, RegistryError
from laakhay.jsonapi.models import Resource, WireResource
from laakhay.jsonapi.runtime import ModelRegistry, get_model_registry, register_model


class User(Resource):
    type = "users"

    def __init__(self, id: str | None = None, name: str = "") -> None:
        super().__init__(id)
        self.name = name

    @classmethod
    def wrap(cls, data: WireResource) -> User:
        return cls(data.id, (data.attributes or {}).get("name", ""))

    def unwrap(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "attributes": {"name": self.name}}


class UserSummary(User):
    """Reduced serialization of a user."""


def test_register_and_wrap():
    """Test a registered factory builds typed resources."""
    registry = ModelRegistry()
    registry.register("users", User.wrap)

    user = registry.wrap({"id": "1", "type": "users", "attributes": {"name": "ada"}})

    assert isinstance(user, User)
    assert user.name == "ada"
    assert "users" in registry
    assert registry.list_types() == ["users"]


def test_register_duplicate():
    """Test registering the same binding twice raises."""
    registry = ModelRegistry()
    registry.register("users", User.wrap)
    with pytest.raises(RegistryError, match="already registered"):
        registry.register("users", User.wrap)
    registry.register("users", UserSummary.wrap, replace=True)
    assert registry.resolve("users") == UserSummary.wrap


def test_wrap_unregistered():
    registry = ModelRegistry()
    with pytest.raises(ModelNotRegisteredError) as info:
        registry.wrap({"id": "1", "type": "users"})
    assert info.value.resource_type == "users"


def test_view_specific_factory_wins():
    registry = ModelRegistry()
    registry.register("users", User.wrap)
    registry.register("users", UserSummary.wrap, view="summary")

    summary = registry.wrap({"id": "1", "type": "users", "view": "summary"})
    full = registry.wrap({"id": "2", "type": "users"})

    assert type(summary) is UserSummary
    assert type(full) is User


def test_view_falls_back_to_type():
    registry = ModelRegistry()
    registry.register("users", User.wrap)
    user = registry.wrap({"id": "1", "type": "users", "view": "detailed"})
    assert type(user) is User


def test_view_only_binding_misses_without_view():
    registry = ModelRegistry()
    registry.register("users", UserSummary.wrap, view="summary")
    with pytest.raises(ModelNotRegisteredError) as info:
        registry.wrap({"id": "1", "type": "users", "view": "full"})
    assert info.value.view == "full"


def test_unregister():
    registry = ModelRegistry()
    registry.register("users", User.wrap)
    registry.unregister("users")
    assert not registry.is_registered("users")
    with pytest.raises(RegistryError):
        registry.unregister("users")


def test_independent_registries():
    """Test registries do not share bindings."""
    first, second = ModelRegistry(), ModelRegistry()
    first.register("users", User.wrap)
    assert first.is_registered("users")
    assert not second.is_registered("users")


def test_register_model_decorator():
    registry = ModelRegistry()

    @register_model(registry=registry)
    class Group(Resource):
        type = "groups"

        @classmethod
        def wrap(cls, data: WireResource) -> Group:
            return cls(data.id)

        def unwrap(self) -> dict[str, Any]:
            return {"id": self.id, "type": self.type}

    group = registry.wrap({"id": "3", "type": "groups"})
    assert isinstance(group, Group)
    assert group.reference().type == "groups"


def test_register_model_requires_wrap():
    """Test a model without wrap() is rejected when it is registered."""
    registry = ModelRegistry()

    with pytest.raises(RegistryError, match="wrap"):

        @register_model(registry=registry)
        class Tag(Resource):
            type = "tags"

            def unwrap(self) -> dict[str, Any]:
                return {"id": self.id, "type": self.type}

    assert not registry.is_registered("tags")


def test_resource_without_wrap_is_abstract():
    class Tag(Resource):
        type = "tags"

        def unwrap(self) -> dict[str, Any]:
            return {"id": self.id, "type": self.type}

    with pytest.raises(TypeError):
        Tag("1")


def test_default_registry_is_shared():
    assert get_model_registry() is get_model_registry()
