"""Pydantic models for the JSON:API wire format.

Only the parts of a document the client has to reason about are modelled:
resource objects, error objects and the pagination block of ``meta``. Free
form sections (``attributes``, ``meta``, ``links``) stay plain mappings and
are carried through verbatim.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResourceIdentifier(BaseModel):
    """Resource linkage, the ``{"id", "type"}`` pair."""

    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Servers occasionally send numeric identifiers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class WireResource(ResourceIdentifier):
    """A resource object as received from the server."""

    view: str | None = None
    attributes: dict[str, Any] | None = None
    relationships: dict[str, Any] | None = None
    links: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None


class ErrorSource(BaseModel):
    pointer: str | None = None
    parameter: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class ErrorObject(BaseModel):
    """An entry of a document's ``errors`` array."""

    id: str | None = None
    status: str | None = None
    code: str | None = None
    title: str | None = None
    detail: str | None = None
    source: ErrorSource | None = None
    links: dict[str, Any] | None = None
    meta: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @field_validator("id", "status", "code", mode="before")
    @classmethod
    def coerce_str(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def __str__(self) -> str:
        parts = [p for p in (self.status, self.code, self.title, self.detail) if p]
        return ": ".join(parts) if parts else "unknown error"


class PaginationMeta(BaseModel):
    """The ``meta.pagination`` block of a collection response."""

    offset: int = Field(..., ge=0)
    limit: int = Field(..., gt=0)
    count: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True, strict=True)
