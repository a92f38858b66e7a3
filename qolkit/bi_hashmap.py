"""A two-level hash map addressed by ``(outer, inner)`` key pairs."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, MutableSequence
from typing import Any

from qolkit import mapping_ops

__all__ = ["BiHashMap"]


class BiHashMap:
    """A mapping from ``(outer, inner)`` keys to values, stored as nested dicts."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, inner: dict[Hashable, dict[Hashable, Any]] | None = None) -> None:
        self._map: dict[Hashable, dict[Hashable, Any]] = {} if inner is None else inner

    @classmethod
    def from_items(cls, items: Iterable[tuple[tuple[Hashable, Hashable], Any]]) -> BiHashMap:
        """Build a map from ``((outer, inner), value)`` pairs; later pairs win."""
        result = cls()
        for key, value in items:
            result.insert(key, value)
        return result

    @property
    def inner(self) -> dict[Hashable, dict[Hashable, Any]]:
        """The underlying nested dictionary."""
        return self._map

    def _bucket(self, outer: Hashable) -> dict[Hashable, Any]:
        return self._map.setdefault(outer, {})

    def get(self, key: tuple[Hashable, Hashable]) -> Any | None:
        """Return the value under ``(outer, inner)``, or None if absent."""
        outer, inner = key
        bucket = self._map.get(outer)
        if bucket is None:
            return None
        return bucket.get(inner)

    def insert(self, key: tuple[Hashable, Hashable], value: Any) -> Any | None:
        """Store ``value`` and return the value it replaced, or None."""
        outer, inner = key
        bucket = self._bucket(outer)
        previous = bucket.get(inner)
        bucket[inner] = value
        return previous

    def add_or_insert(self, key: tuple[Hashable, Hashable], value: Any) -> None:
        """Add ``value`` to the existing entry, or store it if there is none."""
        outer, inner = key
        mapping_ops.add_or_insert(self._bucket(outer), inner, value)

    def push_or_insert(self, key: tuple[Hashable, Hashable], value: Any) -> None:
        """Append ``value`` to the list under the key, creating it if needed."""
        outer, inner = key
        mapping_ops.push_or_insert(self._bucket(outer), inner, value)

    def append_or_insert(
        self, key: tuple[Hashable, Hashable], values: MutableSequence[Any]
    ) -> None:
        """Move all of ``values`` onto the list under the key; ``values`` is emptied."""
        outer, inner = key
        mapping_ops.append_or_insert(self._bucket(outer), inner, values)

    def __iter__(self) -> Iterator[tuple[tuple[Hashable, Hashable], Any]]:
        for outer, bucket in self._map.items():
            for inner, value in bucket.items():
                yield (outer, inner), value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BiHashMap):
            return NotImplemented
        return self._map == other._map

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._map.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._map!r})"