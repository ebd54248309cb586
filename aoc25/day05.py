"""Day 5: fresh ingredients and their identifier ranges."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grid import parse_int


@dataclass(frozen=True)
class FreshnessRange:
    """An inclusive range of fresh ingredient identifiers."""

    start: int
    end: int

    def contains(self, ingredient: int) -> bool:
        """Tell whether the ingredient lies in the range."""
        return self.start <= ingredient <= self.end

    def overlaps(self, other: FreshnessRange) -> bool:
        """Tell whether the two ranges share at least one identifier."""
        return (
            self.contains(other.start)
            or self.contains(other.end)
            or other.contains(self.start)
            or other.contains(self.end)
        )

    def count(self) -> int:
        """Return the number of identifiers in the range."""
        return self.end - self.start + 1


@dataclass
class IngredientDatabase:
    """Fresh ranges and the ingredients available."""

    freshness_ranges: list[FreshnessRange] = field(default_factory=list)
    available: list[int] = field(default_factory=list)

    def is_fresh(self, ingredient: int) -> bool:
        """Tell whether any range contains the ingredient."""
        return any(r.contains(ingredient) for r in self.freshness_ranges)


def parse_freshness_range(text: str) -> FreshnessRange:
    """Parse ``start-end``."""
    parts = text.split("-")
    if len(parts) < 2:
        raise ValueError(f"not a range: {text!r}")
    return FreshnessRange(parse_int(parts[0]), parse_int(parts[1]))


def parse_ingredient_database(text: str) -> IngredientDatabase:
    """Parse the ranges, a blank line, then one available ingredient per line."""
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("expected ranges and ingredients separated by a blank line")
    ranges = [parse_freshness_range(line) for line in parts[0].split("\n")]
    available = [parse_int(line) for line in parts[1].split("\n")]
    return IngredientDatabase(ranges, available)


def merge_range(
    ranges: list[FreshnessRange], new_range: FreshnessRange
) -> list[FreshnessRange]:
    """Return ``ranges`` with ``new_range`` added, merged with what it overlaps."""
    if not ranges:
        return [new_range]
    ordered = sorted(ranges, key=lambda r: r.start, reverse=True)
    overlapping = [r for r in ordered if r.overlaps(new_range)]
    if not overlapping:
        return [*ordered, new_range]
    kept = [r for r in ordered if not r.overlaps(new_range)]
    overlapping.append(new_range)
    merged = FreshnessRange(
        min(r.start for r in overlapping), max(r.end for r in overlapping)
    )
    return [*kept, merged]


def part1(text: str) -> int:
    """Count the available ingredients that are fresh."""
    db = parse_ingredient_database(text)
    return sum(1 for ingredient in db.available if db.is_fresh(ingredient))


def part2(text: str) -> int:
    """Count all identifiers that any range calls fresh."""
    merged: list[FreshnessRange] = []
    for freshness_range in parse_ingredient_database(text).freshness_ranges:
        merged = merge_range(merged, freshness_range)
    return sum(r.count() for r in merged)