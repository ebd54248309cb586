"""Operations on matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TraversalOffset:
    """How many rows and columns to skip at each edge while traversing."""

    start_x: int = 0
    start_y: int = 0
    end_x: int = 0
    end_y: int = 0


def symmetric_offset(n: int) -> TraversalOffset:
    """Return an offset that skips ``n`` at every edge."""
    return TraversalOffset(n, n, n, n)


def clone(matrix: list[list[T]]) -> list[list[T]]:
    """Return a copy whose rows can be changed independently."""
    return [list(row) for row in matrix]


def dimension(matrix: list[list[T]]) -> tuple[int, int]:
    """Return the number of rows and the length of the first row."""
    return len(matrix), len(matrix[0])


def transpose(matrix: list[list[T]]) -> list[list[T]]:
    """Swap rows and columns; the first row fixes the width."""
    width = len(matrix[0])
    if any(len(row) < width for row in matrix):
        raise ValueError("every row must be at least as long as the first")
    return [list(column) for column in zip(*(row[:width] for row in matrix))]


def rotate(matrix: list[list[T]]) -> list[list[T]]:
    """Rotate a matrix a quarter turn clockwise."""
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_n(matrix: list[list[T]], n: int) -> list[list[T]]:
    """Rotate a matrix ``n`` quarter turns clockwise."""
    rotated = clone(matrix)
    for _ in range(n):
        rotated = rotate(rotated)
    return rotated


def traverse(
    matrix: list[list[T]], offset: TraversalOffset | int | None = None
) -> Iterator[tuple[T, int, int]]:
    """Yield ``(item, x, y)`` with ``x`` the outer and ``y`` the inner index."""
    if offset is None:
        offset = symmetric_offset(0)
    elif isinstance(offset, int):
        offset = symmetric_offset(offset)
    for x in range(offset.start_x, len(matrix) - offset.end_x):
        row = matrix[x]
        for y in range(offset.start_y, len(row) - offset.end_y):
            yield row[y], x, y