"""Day 2: product identifiers made of repeated digit sequences."""

from __future__ import annotations

from .grid import parse_int


def expand_range(text: str) -> list[str]:
    """Expand ``start-end`` into every identifier in it, inclusive."""
    parts = text.split("-")
    if len(parts) < 2:
        raise ValueError(f"not a range: {text!r}")
    start, end = parse_int(parts[0]), parse_int(parts[1])
    if end - start + 1 < 0:
        raise ValueError(f"range ends before it starts: {text!r}")
    return [str(number) for number in range(start, end + 1)]


def parse_ids(text: str) -> list[str]:
    """Expand a comma-separated list of ranges."""
    return [identifier for part in text.split(",") for identifier in expand_range(part)]


def has_doubled_sequence(identifier: str) -> bool:
    """Tell whether the identifier is one sequence written twice."""
    length = len(identifier)
    if length == 0 or length % 2:
        return False
    half = length // 2
    return identifier[:half] == identifier[half:]


def whole_divisions(number: int) -> list[int]:
    """Return the divisors of ``number`` smaller than itself."""
    return [i for i in range(1, number) if number % i == 0]


def has_repeated_sequence(identifier: str) -> bool:
    """Tell whether the identifier is one sequence written at least twice."""
    length = len(identifier)
    return any(
        len({identifier[i : i + size] for i in range(0, length, size)}) == 1
        for size in whole_divisions(length)
    )


def part1(text: str) -> int:
    """Sum the identifiers that are a sequence written twice."""
    return sum(int(i) for i in parse_ids(text) if has_doubled_sequence(i))


def part2(text: str) -> int:
    """Sum the identifiers that are a sequence repeated any number of times."""
    return sum(int(i) for i in parse_ids(text) if has_repeated_sequence(i))