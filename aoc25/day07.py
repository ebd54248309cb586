"""Day 7: a tachyon beam split by a field of splitters."""

from __future__ import annotations

from dataclasses import dataclass

from .grid import parse_grid
from .matrix import traverse
from .vectors import Vector2

START = "S"
SPLITTER = "^"


@dataclass(frozen=True)
class TachyonManifold:
    """Where the beam enters and where the splitters stand, top row first."""

    start: Vector2
    splitters: tuple[Vector2, ...]


def parse_tachyon_manifold(text: str) -> TachyonManifold:
    """Find the start cell and every splitter; ``y`` counts rows downwards."""
    start = None
    splitters = []
    for item, x, y in traverse(parse_grid(text)):
        if item == START and start is None:
            start = Vector2(x, y)
        elif item == SPLITTER:
            splitters.append(Vector2(x, y))
    if start is None:
        raise ValueError("manifold has no start")
    return TachyonManifold(start, tuple(sorted(splitters, key=lambda s: s.y)))


def part1(text: str) -> int:
    """Count how often the beam is split before passing the last splitter row."""
    manifold = parse_tachyon_manifold(text)
    if not manifold.splitters:
        raise ValueError("manifold has no splitters")
    max_y = manifold.splitters[-1].y
    if max_y <= manifold.start.y:
        raise ValueError("no splitter below the start")

    splitters = set(manifold.splitters)
    beams = {manifold.start.x}
    y = manifold.start.y
    splits = 0
    while True:
        y += 1
        advanced: set[int] = set()
        for x in beams:
            if Vector2(x, y) in splitters:
                splits += 1
                advanced.update((x - 1, x + 1))
            else:
                advanced.add(x)
        if y == max_y:
            return splits
        beams = advanced