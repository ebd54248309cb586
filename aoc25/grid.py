"""Parsing of puzzle text into grids, integers and linked nodes."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .matrix import transpose, traverse
from .vectors import ORTHOGONAL_DIRECTIONS, Vector2

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(eq=False)
class Node(Generic[T]):
    """A grid cell with its value and the neighbouring cells."""

    position: Vector2
    value: T
    siblings: list[Node[T]] = field(default_factory=list, repr=False)


def parse_grid(text: str) -> list[list[str]]:
    """Split text into characters indexed as ``grid[x][y]``."""
    return transpose([list(line) for line in text.split("\n")])


def parse_int(text: str) -> int:
    """Parse a decimal integer; invalid text gives 0, overflow is clamped."""
    if not _INT_PATTERN.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def parse_nodes(
    text: str,
    convert: Callable[[str], T],
    directions: Iterable[Vector2] = ORTHOGONAL_DIRECTIONS,
) -> list[Node[T]]:
    """Build a node for every cell and link neighbours in the given directions."""
    directions = tuple(directions)
    nodes = [
        Node(Vector2(x, y), convert(item)) for item, x, y in traverse(parse_grid(text))
    ]
    by_position = {node.position: node for node in nodes}
    for node in nodes:
        neighbours = (node.position + direction for direction in directions)
        node.siblings = [by_position[p] for p in neighbours if p in by_position]
    return nodes