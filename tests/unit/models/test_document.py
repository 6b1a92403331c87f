"""Unit tests for Document wrap, merge and unwrap."""

from __future__ import annotations

import pytest

from laakhay.jsonapi.core import Cardinality, DocumentError, ModelNotRegisteredError
from laakhay.jsonapi.models import Document, GenericResource, Pagination, Reference


def many(users: list[dict], included: list[dict] | None = None, **extra) -> dict:
    raw = {"data": users, **extra}
    if included is not None:
        raw["included"] = included
    return raw


class TestWrap:
    """Test wrapping raw documents."""

    def test_wrap_many_with_included(self, registry, user_factory, group_factory):
        raw = many(
            [user_factory(1), user_factory(2)],
            [group_factory(0), group_factory(1)],
            meta={"pagination": {"offset": 0, "limit": 2, "count": 5}},
            links={"self": "/users/"},
        )
        document = Document.wrap(raw, registry)

        assert document.cardinality is Cardinality.MANY
        assert [r.id for r in document.data] == ["1", "2"]
        assert [r.resource_type for r in document.included] == ["groups", "groups"]
        assert document.links == {"self": "/users/"}
        assert document.pagination() == Pagination(0, 2, 5)

    def test_wrap_builds_relationship_references(self, registry, user_factory):
        document = Document.wrap({"data": user_factory(3)}, registry)
        assert document.cardinality is Cardinality.ONE
        assert document.data.relationships["group"] == Reference("groups", "1")

    def test_wrap_absent_data_uses_given_cardinality(self, registry):
        document = Document.wrap({"meta": {}}, registry, Cardinality.MANY)
        assert document.is_many
        assert document.data is None
        assert len(document) == 0

    def test_wrap_parses_errors(self, registry):
        document = Document.wrap(
            {"errors": [{"status": 404, "title": "Not Found"}]}, registry, Cardinality.ONE
        )
        assert document.errors[0].status == "404"
        assert document.errors[0].title == "Not Found"

    def test_unregistered_included_type_fails(self, registry, user_factory):
        """Test a registry miss in included fails the wrap, no partial document."""
        raw = many([user_factory(1)], [{"id": "9", "type": "tags"}])
        with pytest.raises(ModelNotRegisteredError) as info:
            Document.wrap(raw, registry)
        assert info.value.resource_type == "tags"

    def test_unregistered_data_type_fails(self, registry):
        with pytest.raises(ModelNotRegisteredError):
            Document.wrap({"data": [{"id": "1", "type": "tags"}]}, registry)

    def test_cardinality_mismatch(self, registry, user_factory):
        with pytest.raises(DocumentError):
            Document.wrap({"data": user_factory(1)}, registry, Cardinality.MANY)
        with pytest.raises(DocumentError):
            Document.wrap({"data": [user_factory(1)]}, registry, Cardinality.ONE)

    def test_malformed_resource(self, registry):
        with pytest.raises(DocumentError, match="Malformed"):
            Document.wrap({"data": [{"type": "users"}]}, registry)

    def test_non_object_document(self, registry):
        with pytest.raises(DocumentError):
            Document.wrap([], registry)


class TestMerge:
    """Test merging pages."""

    def test_merge_concatenates_in_order(self, registry, user_factory, group_factory):
        first = Document.wrap(many([user_factory(0), user_factory(1)], [group_factory(0)]), registry)
        second = Document.wrap(many([user_factory(2)], [group_factory(0)]), registry)

        merged = first.merge(second)

        assert [r.id for r in merged.data] == ["0", "1", "2"]
        # No deduplication of included
        assert [r.id for r in merged.included] == ["0", "0"]

    def test_merge_does_not_mutate_inputs(self, registry, user_factory):
        first = Document.wrap(many([user_factory(0)]), registry)
        second = Document.wrap(many([user_factory(1)]), registry)
        first.merge(second)
        assert len(first) == 1
        assert len(second) == 1

    def test_merge_keeps_receiver_meta(self, registry, user_factory):
        first = Document.wrap(many([user_factory(0)], meta={"page": 1}), registry)
        second = Document.wrap(many([user_factory(1)], meta={"page": 2}), registry)
        assert first.merge(second).meta == {"page": 1}

    def test_merge_with_absent_sides(self, registry, user_factory):
        empty = Document(Cardinality.MANY)
        page = Document.wrap(many([user_factory(0)]), registry)
        assert [r.id for r in empty.merge(page).data] == ["0"]
        assert page.merge(empty).included is None

    def test_merge_one_document_unsupported(self, registry, user_factory):
        one = Document.wrap({"data": user_factory(1)}, registry)
        page = Document.wrap(many([user_factory(2)]), registry)
        with pytest.raises(DocumentError):
            one.merge(page)
        with pytest.raises(DocumentError):
            page.merge(one)

    def test_combine_matches_sequential_merge(self, registry, user_factory, group_factory):
        """Test merge is associative over a sequence of pages."""
        docs = [
            Document.wrap(many([user_factory(i)], [group_factory(i % 2)]), registry)
            for i in range(3)
        ]
        combined = Document.combine(docs)
        left = docs[0].merge(docs[1]).merge(docs[2])
        right = docs[0].merge(docs[1].merge(docs[2]))

        for result in (left, right):
            assert result.data == combined.data
            assert result.included == combined.included

    def test_combine_empty(self):
        with pytest.raises(DocumentError):
            Document.combine([])


class TestUnwrap:
    """Test unwrapping for outgoing requests."""

    def test_unwrap_one(self):
        resource = GenericResource(
            "users",
            "1",
            attributes={"name": "ada"},
            relationships={"group": Reference("groups", "2"), "manager": None},
        )
        raw = Document(Cardinality.ONE, resource).unwrap()
        assert raw == {
            "data": {
                "id": "1",
                "type": "users",
                "attributes": {"name": "ada"},
                "relationships": {
                    "group": {"data": {"id": "2", "type": "groups"}},
                    "manager": {"data": None},
                },
            }
        }

    def test_unwrap_new_resource_has_no_id(self):
        raw = Document(Cardinality.ONE, GenericResource("users", attributes={"name": "x"})).unwrap()
        assert "id" not in raw["data"]

    def test_unwrap_omits_included(self, registry, user_factory, group_factory):
        document = Document.wrap(many([user_factory(1)], [group_factory(1)]), registry)
        raw = document.unwrap()
        assert "included" not in raw
        assert [r["id"] for r in raw["data"]] == ["1"]

    def test_resources_data_then_included(self, registry, user_factory, group_factory):
        document = Document.wrap(many([user_factory(1)], [group_factory(1)]), registry)
        assert [r.resource_type for r in document.resources()] == ["users", "groups"]

    def test_constructor_enforces_cardinality(self):
        with pytest.raises(DocumentError):
            Document(Cardinality.ONE, [])
        with pytest.raises(DocumentError):
            Document(Cardinality.MANY, GenericResource("users", "1"))
