"""Core enumerations shared across the library.

Key Types:
    - Cardinality: Whether a document carries one resource or a collection
    - Method: HTTP methods used against resource endpoints
    - FetchState: Lifecycle of a paginated fetch orchestration
"""

from enum import Enum


class Cardinality(str, Enum):
    """Shape of a document's primary data."""

    ONE = "one"
    MANY = "many"


class Method(str, Enum):
    """HTTP methods understood by the transport."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class FetchState(str, Enum):
    """States of a paginated fetch.

    A fetch moves ``INITIAL -> FETCHING_FIRST -> FETCHING_NEXT* -> DONE``, or
    to ``FAILED`` from any fetching state.
    """

    INITIAL = "initial"
    FETCHING_FIRST = "fetching_first"
    FETCHING_NEXT = "fetching_next"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (FetchState.DONE, FetchState.FAILED)


# Expected success statuses per method
EXPECTED_STATUS: dict[Method, tuple[int, ...]] = {
    Method.GET: (200,),
    Method.POST: (201,),
    Method.PATCH: (200, 201),
    Method.DELETE: (204,),
}
