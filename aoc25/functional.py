"""Small functional helpers."""

from collections.abc import Callable, Hashable, Iterable
from functools import cmp_to_key
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def identity(value: T) -> T:
    """Return ``value`` unchanged; useful as a default mapping or key function."""
    (result,) = (value,)
    return result


def key_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items into lists under the key each one maps to."""
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


def sort_by(items: Iterable[T], compare: Callable[[T, T], int]) -> list[T]:
    """Return a sorted copy; ``a`` goes before ``b`` when ``compare(a, b) > 0``."""

    def order(a: T, b: T) -> int:
        if compare(a, b) > 0:
            return -1
        if compare(b, a) > 0:
            return 1
        return 0

    return sorted(items, key=cmp_to_key(order))