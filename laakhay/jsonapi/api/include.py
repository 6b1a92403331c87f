"""Include paths and relationship wiring helpers.

``include`` flattens a nested description of relationships into the dotted
paths JSON:API expects in the ``include`` parameter::

    include({"author": None, "comments": include({"author": None})})
    # -> ["author", "comments", "comments.author"]

A ``Relater`` bundles such a schema with a function that wires a model's
relationships against a ResourceMap, so a fetch can request exactly the
side-loaded resources the wiring needs.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ..core.exceptions import DocumentError
from ..models.document import Document
from ..models.resource import Resource
from ..runtime.resource_map import ResourceMap
from .query import PartialResourceQuery

R = TypeVar("R", bound=Resource)

IncludeSchema = Mapping[str, Sequence[str] | None]


def include(schema: IncludeSchema) -> list[str]:
    """Flatten a relationship schema into include paths.

    Each key is a relationship name. A None value includes just that
    relationship; a sequence of child paths also includes each child below it.
    """
    paths: list[str] = []
    for name, children in schema.items():
        paths.append(name)
        if children is not None:
            paths.extend(f"{name}.{child}" for child in children)
    return paths


@dataclass(frozen=True)
class Relater(Generic[R]):
    """Include paths plus the wiring that consumes them.

    Attributes:
        include: Flattened include paths
        relate_fn: Callable wiring a model against a resource map
    """

    include: list[str]
    relate_fn: Callable[[R, ResourceMap], None] = field(repr=False)

    def relate(self, model: R, resource_map: ResourceMap) -> R:
        self.relate_fn(model, resource_map)
        return model

    def map(self, document: Document, model: R | None = None) -> R:
        """Wire a model against the resources of a document.

        Args:
            document: Response whose data and included resources are used
            model: Model to wire (defaults to the document's single resource)
        """
        if model is None:
            if document.is_many or document.data is None:
                raise DocumentError("Relater.map needs a ONE document with data or a model")
            model = document.data  # type: ignore[assignment]
        return self.relate(model, ResourceMap.from_document(document))  # type: ignore[arg-type]

    def query(self) -> PartialResourceQuery:
        return PartialResourceQuery().include(*self.include)


def relater(schema: IncludeSchema, relate: Callable[[R, ResourceMap], None]) -> Relater[R]:
    return Relater(include=include(schema), relate_fn=relate)
