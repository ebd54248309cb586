"""Day 4: paper rolls that a forklift can reach."""

from __future__ import annotations

from .grid import Node, parse_nodes
from .vectors import DIAGONAL_DIRECTIONS, ORTHOGONAL_DIRECTIONS

PAPER_ROLL = "@"
MAX_NEIGHBOURS = 4


def parse_paper_grid(text: str) -> list[Node[bool]]:
    """Return the nodes holding a paper roll, linked in all eight directions."""
    nodes = parse_nodes(
        text,
        lambda ch: ch == PAPER_ROLL,
        ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS,
    )
    return [node for node in nodes if node.value]


def adjacent_paper_rolls(node: Node[bool]) -> list[Node[bool]]:
    """Return the neighbours that still hold a paper roll."""
    return [sibling for sibling in node.siblings if sibling.value]


def is_accessible(node: Node[bool]) -> bool:
    """Tell whether fewer than four neighbours hold a paper roll."""
    return len(adjacent_paper_rolls(node)) < MAX_NEIGHBOURS


def part1(text: str) -> int:
    """Count the paper rolls that can be reached now."""
    return sum(1 for node in parse_paper_grid(text) if is_accessible(node))


def part2(text: str) -> int:
    """Remove reachable rolls round after round and count all removed."""
    nodes = parse_paper_grid(text)
    removed = 0
    while True:
        accessible = [node for node in nodes if is_accessible(node)]
        if not accessible:
            return removed
        removed += len(accessible)
        for node in accessible:
            node.value = False
        nodes = [node for node in nodes if node.value]