"""Update-or-create helpers for mappings whose values accumulate."""

from __future__ import annotations

from collections.abc import Hashable, MutableMapping, MutableSequence
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

__all__ = [
    "add_or_insert",
    "push_or_insert",
    "append_or_insert",
    "insert_or_insert",
]


def add_or_insert(mapping: MutableMapping[K, Any], key: K, value: Any) -> None:
    """Store ``value`` under ``key``, adding the existing entry to it if present.

    The new value is computed as ``value + existing``. The entry is removed and
    re-inserted, so in an insertion-ordered mapping it moves to the end.
    """
    if key in mapping:
        value = value + mapping.pop(key)
    mapping[key] = value


def push_or_insert(mapping: MutableMapping[K, list[V]], key: K, value: V) -> None:
    """Append ``value`` to the list under ``key``, creating the list if needed."""
    mapping.setdefault(key, []).append(value)


def append_or_insert(
    mapping: MutableMapping[K, list[V]], key: K, values: MutableSequence[V]
) -> None:
    """Move every item of ``values`` onto the list under ``key``.

    The list is created if ``key`` is absent. ``values`` is left empty.
    """
    moved = list(values)
    del values[:]
    mapping.setdefault(key, []).extend(moved)


def insert_or_insert(mapping: MutableMapping[K, set[V]], key: K, value: V) -> bool:
    """Add ``value`` to the set under ``key``, creating the set if needed.

    Returns True when ``value`` was not already present for ``key``.
    """
    bucket = mapping.get(key)
    if bucket is None:
        mapping[key] = {value}
        return True
    if value in bucket:
        return False
    bucket.add(value)
    return True