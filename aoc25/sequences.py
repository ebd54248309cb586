"""List helpers that treat a list as a stack or a queue."""

from typing import Any, TypeVar

T = TypeVar("T")


def fill(items: list[T], value: Any) -> list:
    """Return a new list as long as ``items`` holding only ``value``."""
    return [value] * len(items)


def first(items: list[T]) -> T:
    """Return the first element."""
    return items[0]


def last(items: list[T]) -> T:
    """Return the last element."""
    return items[-1]


def pad(items: list[T], length: int, value: T) -> list[T]:
    """Return a copy of ``items`` extended with ``value`` to ``length``."""
    if len(items) > length:
        raise ValueError(f"cannot pad {len(items)} items to length {length}")
    return list(items) + [value] * (length - len(items))


def pop_n(items: list[T], n: int) -> list[T]:
    """Remove the last ``n`` elements and return them, last first."""
    if not 0 <= n <= len(items):
        raise IndexError(f"cannot pop {n} of {len(items)} items")
    cut = len(items) - n
    popped = items[cut:]
    del items[cut:]
    popped.reverse()
    return popped


def pop(items: list[T]) -> list[T]:
    """Remove the last element and return it in a one-element list."""
    return pop_n(items, 1)


def push(items: list[T], value: T) -> list[T]:
    """Append ``value`` and return the same list."""
    items.append(value)
    return items


def shift_n(items: list[T], n: int) -> list[T]:
    """Remove the first ``n`` elements and return them in order."""
    if not 0 <= n <= len(items):
        raise IndexError(f"cannot shift {n} of {len(items)} items")
    shifted = items[:n]
    del items[:n]
    return shifted


def shift(items: list[T]) -> T:
    """Remove and return the first element."""
    return shift_n(items, 1)[0]


def splice(items: list[T], start: int, length: int) -> list[T]:
    """Remove ``length`` elements from ``start`` and return them."""
    if start < 0 or length < 0 or start + length > len(items):
        raise IndexError(f"cannot splice {length} items at {start} of {len(items)}")
    removed = items[start : start + length]
    del items[start : start + length]
    return removed