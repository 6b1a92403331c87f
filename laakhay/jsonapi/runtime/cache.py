"""Key-value store with optional per-entry expiry."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from time import monotonic
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    value: V
    expiry: float | None = None


class Cache(Generic[K, V]):
    """Dictionary with an optional time-to-live.

    Args:
        ttl: Seconds an entry stays readable. None keeps entries forever,
            zero or a negative value disables reads entirely.
        clock: Monotonic clock, injectable for tests
    """

    def __init__(self, ttl: float | None = None, *, clock: Callable[[], float] = monotonic) -> None:
        self._entries: dict[K, CacheEntry[V]] = {}
        self._ttl = ttl
        self._clock = clock

    @property
    def disabled(self) -> bool:
        return self._ttl is not None and self._ttl <= 0

    def get(self, key: K) -> V | None:
        if self.disabled:
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expiry is not None and entry.expiry < self._clock():
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: K, value: V) -> V:
        expiry = self._clock() + self._ttl if self._ttl is not None else None
        self._entries[key] = CacheEntry(value, expiry)
        return value

    def values(self) -> list[V]:
        """Live values in insertion order; expired entries are purged."""
        if self.disabled:
            return []
        now = self._clock()
        expired = [k for k, e in self._entries.items() if e.expiry is not None and e.expiry < now]
        for key in expired:
            del self._entries[key]
        return [entry.value for entry in self._entries.values()]

    def invalidate(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.values())

    def __iter__(self) -> Iterator[V]:
        return iter(self.values())
