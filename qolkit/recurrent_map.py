"""Maps whose values are maps of the same kind, forming a tree of keys."""

from __future__ import annotations

import functools
from collections.abc import Hashable, Iterator

__all__ = ["RecurrentHashMap", "RecurrentBTreeMap"]


class RecurrentHashMap:
    """A map from keys to nested maps of the same type.

    Iteration yields ``(key, submap)`` pairs.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._map: dict[Hashable, RecurrentHashMap] = {}

    def get(self, key: Hashable) -> RecurrentHashMap | None:
        """Return the submap under ``key``, or None."""
        return self._map.get(key)

    def insert(self, key: Hashable, value: RecurrentHashMap) -> RecurrentHashMap | None:
        """Store ``value`` under ``key`` and return the submap it replaced."""
        previous = self._map.get(key)
        self._map[key] = value
        return previous

    def merge(self, key: Hashable, value: RecurrentHashMap) -> bool:
        """Merge ``value`` into the submap under ``key``, recursively.

        Returns True if ``key`` was already present.
        """
        existing = self._map.get(key)
        if existing is None:
            self._map[key] = value
            return False
        for sub_key, sub_value in value:
            existing.merge(sub_key, sub_value)
        return True

    def push(self, key: Hashable) -> bool:
        """Add an empty submap under ``key``; return True if it already existed."""
        if key in self._map:
            return True
        self._map[key] = type(self)()
        return False

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[tuple[Hashable, RecurrentHashMap]]:
        return iter(list(self._map.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecurrentHashMap):
            return NotImplemented
        return self._map == other._map

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self)!r})"


@functools.total_ordering
class RecurrentBTreeMap(RecurrentHashMap):
    """A recurrent map that iterates in key order and is itself orderable."""

    def __iter__(self) -> Iterator[tuple[Hashable, RecurrentBTreeMap]]:
        return iter(sorted(self._map.items(), key=lambda item: item[0]))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RecurrentBTreeMap):
            return NotImplemented
        return list(self) < list(other)