"""Unit tests for include paths and relaters."""

from __future__ import annotations

import pytest

from laakhay.jsonapi.api import include, relater
from laakhay.jsonapi.core import DocumentError
from laakhay.jsonapi.models import Document, GenericResource
from laakhay.jsonapi.runtime import ResourceMap


def test_include_flattens_nested_paths():
    schema = {"author": None, "comments": include({"author": None, "tags": None})}
    assert include(schema) == ["author", "comments", "comments.author", "comments.tags"]


def test_include_empty():
    assert include({}) == []


def wire_group(user: GenericResource, resource_map: ResourceMap) -> None:
    user.attributes["group_name"] = user.relationships["group"].resolve(resource_map)["name"]


class TestRelater:
    """Test Relater wiring against documents."""

    def test_query_requests_includes(self):
        r = relater({"group": None}, wire_group)
        assert r.include == ["group"]
        assert r.query().parameters() == {"include": "group"}

    def test_map_single_document(self, registry, user_factory, group_factory):
        document = Document.wrap(
            {"data": user_factory(3), "included": [group_factory(1)]}, registry
        )
        user = relater({"group": None}, wire_group).map(document)
        assert user is document.data
        assert user["group_name"] == "group-1"

    def test_map_explicit_model(self, registry, user_factory, group_factory):
        document = Document.wrap(
            {"data": [user_factory(0)], "included": [group_factory(0)]}, registry
        )
        user = relater({"group": None}, wire_group).map(document, document.data[0])
        assert user["group_name"] == "group-0"

    def test_map_collection_needs_model(self, registry, user_factory):
        document = Document.wrap({"data": [user_factory(0)]}, registry)
        with pytest.raises(DocumentError):
            relater({"group": None}, wire_group).map(document)
