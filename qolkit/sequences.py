"""Small helpers for lists, optional values, errors and powers."""

from __future__ import annotations

import functools
import math
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from types import TracebackType
from typing import Any, TypeVar

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

__all__ = [
    "find_first",
    "swap_remove_first_item",
    "get_many",
    "unwrap_all",
    "inner_iter",
    "ok_or",
    "unwrap_or",
    "power",
]


def find_first(items: Iterable[T], item: T) -> int | None:
    """Return the index of the first element equal to ``item``, or None."""
    return next((idx for idx, other in enumerate(items) if other == item), None)


def swap_remove_first_item(items: list[T], item: T) -> bool:
    """Remove the first element equal to ``item`` by swapping in the last element.

    Order is not preserved. Returns True if an element was removed.
    """
    index = find_first(items, item)
    if index is None:
        return False
    last = items.pop()
    if index < len(items):
        items[index] = last
    return True


def get_many(
    container: Mapping[Any, T] | Sequence[T], keys: Sequence[Hashable]
) -> list[T] | None:
    """Look up several distinct keys at once.

    For a mapping the keys are mapping keys; for a sequence they are
    non-negative indices. Returns None if any key is missing or repeated.
    """
    keys = list(keys)
    if len(set(keys)) != len(keys):
        return None
    if isinstance(container, Mapping):
        if any(key not in container for key in keys):
            return None
        return [container[key] for key in keys]
    size = len(container)
    if any(
        not isinstance(key, int) or isinstance(key, bool) or not 0 <= key < size
        for key in keys
    ):
        return None
    return [container[key] for key in keys]


def unwrap_all(options: Iterable[T | None]) -> list[T] | None:
    """Return all values as a list, or None if any of them is None."""
    values = list(options)
    if any(value is None for value in values):
        return None
    return values


def inner_iter(iterable: Iterable[T] | None) -> Iterator[T]:
    """Iterate over ``iterable``, or over nothing if it is None."""
    if iterable is not None:
        yield from iterable


class _ErrorReplacer:
    """Context manager and decorator that swaps any exception for a fixed one."""

    def __init__(self, error: BaseException | type[BaseException]) -> None:
        self._error = error

    def __enter__(self) -> _ErrorReplacer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_type is None or not issubclass(exc_type, Exception):
            return False
        raise self._error from exc

    def __call__(self, func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with self:
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]


def ok_or(error: BaseException | type[BaseException]) -> _ErrorReplacer:
    """Replace any exception raised in the block with ``error``.

    Usable as a context manager or as a decorator.
    """
    return _ErrorReplacer(error)


def unwrap_or(value: T | None, default: T) -> T:
    """Return ``value`` unless it is None, otherwise ``default``."""
    return default if value is None else value


def _is_odd_integer(number: float) -> bool:
    return float(number).is_integer() and int(number) % 2 == 1


def power(base: float, exponent: int | float) -> float:
    """Raise ``base`` to ``exponent`` with IEEE floating-point results.

    Out-of-domain results give nan and overflow or division by zero give
    an infinity, instead of raising.
    """
    b = float(base)
    try:
        return math.pow(b, exponent)
    except OverflowError:
        negative = b < 0 and _is_odd_integer(exponent)
        return -math.inf if negative else math.inf
    except ValueError:
        if b == 0.0:
            negative = math.copysign(1.0, b) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan