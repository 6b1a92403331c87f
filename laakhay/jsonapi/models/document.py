"""Normalized view of a single JSON:API response.

Architecture:
    A Document wraps a raw wire document. Every element of ``data`` and
    ``included`` is dispatched through a ``ModelRegistry`` to produce typed
    resources; ``errors``, ``meta``, ``links`` and ``jsonapi`` are carried
    verbatim (errors parsed into ``ErrorObject``).

Design Decisions:
    - Cardinality is fixed at construction: ONE documents hold a single
      resource or None, MANY documents hold a list or None
    - Registry misses fail the whole wrap; no partial document is returned
    - merge() returns a new document and never mutates either input
    - included resources are not deduplicated on merge; the resource map
      reconciles duplicates on insertion (last write wins)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..core.enums import Cardinality
from ..core.exceptions import DocumentError
from .pagination import Pagination
from .wire import ErrorObject, WireResource

if TYPE_CHECKING:
    from ..runtime.model_registry import ModelRegistry
    from .resource import Resource


def _parse_resource(raw: Any) -> WireResource:
    try:
        return WireResource.model_validate(raw)
    except ValidationError as e:
        raise DocumentError(f"Malformed resource object: {e}") from e


def _parse_errors(raw: Any) -> list[ErrorObject] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise DocumentError("Document 'errors' must be an array")
    try:
        return [ErrorObject.model_validate(error) for error in raw]
    except ValidationError as e:
        raise DocumentError(f"Malformed error object: {e}") from e


class Document:
    """A response document with typed resources.

    Attributes:
        cardinality: ONE or MANY, fixed at construction
        data: Primary resource(s), or None
        included: Side-loaded resources, or None
        errors: Error objects reported by the server, or None
        meta: Free-form metadata (pagination lives under ``meta["pagination"]``)
        links: Document links
        jsonapi: Server implementation info
    """

    def __init__(
        self,
        cardinality: Cardinality,
        data: Resource | list[Resource] | None = None,
        *,
        included: list[Resource] | None = None,
        errors: list[ErrorObject] | None = None,
        meta: dict[str, Any] | None = None,
        links: dict[str, Any] | None = None,
        jsonapi: dict[str, Any] | None = None,
    ) -> None:
        if cardinality is Cardinality.MANY and data is not None and not isinstance(data, list):
            raise DocumentError("MANY document data must be a list")
        if cardinality is Cardinality.ONE and isinstance(data, list):
            raise DocumentError("ONE document data must be a single resource")
        self._cardinality = cardinality
        self.data = data
        self.included = included
        self.errors = errors
        self.meta = meta
        self.links = links
        self.jsonapi = jsonapi

    @property
    def cardinality(self) -> Cardinality:
        return self._cardinality

    @property
    def is_many(self) -> bool:
        return self._cardinality is Cardinality.MANY

    @classmethod
    def wrap(
        cls,
        raw: Mapping[str, Any],
        registry: ModelRegistry,
        cardinality: Cardinality | None = None,
    ) -> Document:
        """Wrap a raw wire document.

        Args:
            raw: Parsed JSON document
            registry: Registry used to build typed resources
            cardinality: Expected cardinality (inferred from ``data`` if None)

        Returns:
            A new document

        Raises:
            DocumentError: If the document is malformed or ``data`` contradicts
                the expected cardinality
            ModelNotRegisteredError: If any resource has no registered factory
        """
        if not isinstance(raw, Mapping):
            raise DocumentError(f"Expected a JSON object document, got {type(raw).__name__}")

        raw_data = raw.get("data")
        if cardinality is None:
            cardinality = Cardinality.MANY if isinstance(raw_data, list) else Cardinality.ONE

        data: Resource | list[Resource] | None
        if raw_data is None:
            data = None
        elif cardinality is Cardinality.MANY:
            if not isinstance(raw_data, list):
                raise DocumentError("Expected an array of resources in 'data'")
            data = [registry.wrap(_parse_resource(item)) for item in raw_data]
        else:
            if isinstance(raw_data, list):
                raise DocumentError("Expected a single resource in 'data'")
            data = registry.wrap(_parse_resource(raw_data))

        included = None
        raw_included = raw.get("included")
        if raw_included is not None:
            if not isinstance(raw_included, list):
                raise DocumentError("Document 'included' must be an array")
            included = [registry.wrap(_parse_resource(item)) for item in raw_included]

        return cls(
            cardinality,
            data,
            included=included,
            errors=_parse_errors(raw.get("errors")),
            meta=raw.get("meta"),
            links=raw.get("links"),
            jsonapi=raw.get("jsonapi"),
        )

    def merge(self, other: Document) -> Document:
        """Combine this page with a following page of the same collection.

        ``data`` and ``included`` are concatenated in order. Metadata, links
        and errors are taken from this document.

        Raises:
            DocumentError: If either document is not a MANY document
        """
        if not (self.is_many and other.is_many):
            raise DocumentError("Only MANY documents can be merged")

        data = self.data
        if other.data is not None:
            data = [*(self.data or []), *other.data]

        included = self.included
        if other.included is not None:
            included = [*(self.included or []), *other.included]

        return Document(
            Cardinality.MANY,
            list(data) if data is not None else None,
            included=list(included) if included is not None else None,
            errors=self.errors,
            meta=self.meta,
            links=self.links,
            jsonapi=self.jsonapi,
        )

    @classmethod
    def combine(cls, documents: Iterable[Document]) -> Document:
        """Merge a sequence of pages left to right."""
        iterator = iter(documents)
        try:
            combined = next(iterator)
        except StopIteration:
            raise DocumentError("Cannot combine an empty sequence of documents") from None
        for document in iterator:
            combined = combined.merge(document)
        return combined

    def unwrap(self) -> dict[str, Any]:
        """Serialize the primary data for an outgoing request.

        ``included`` is never needed on writes and is left out.
        """
        raw: dict[str, Any] = {}
        if isinstance(self.data, list):
            raw["data"] = [resource.unwrap() for resource in self.data]
        elif self.data is not None:
            raw["data"] = self.data.unwrap()
        if self.meta is not None:
            raw["meta"] = self.meta
        return raw

    def resources(self) -> list[Resource]:
        """All resources in the document, data first, then included."""
        result: list[Resource] = []
        if isinstance(self.data, list):
            result.extend(self.data)
        elif self.data is not None:
            result.append(self.data)
        if self.included:
            result.extend(self.included)
        return result

    def pagination(self) -> Pagination | None:
        return Pagination.from_meta(self.meta)

    def __len__(self) -> int:
        if isinstance(self.data, list):
            return len(self.data)
        return 0 if self.data is None else 1

    def __repr__(self) -> str:
        return (
            f"Document(cardinality={self._cardinality.value}, data={len(self)}, "
            f"included={len(self.included or [])})"
        )
