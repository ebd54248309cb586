"""Day 3: picking batteries for the highest joltage."""

from __future__ import annotations

from .grid import parse_int


def parse_battery_banks(text: str) -> list[list[int]]:
    """Parse one bank per line, one digit per battery."""
    return [[parse_int(ch) for ch in line] for line in text.split("\n")]


def highest_joltage(batteries: list[int], count: int) -> int:
    """Return the largest number formed by ``count`` batteries kept in order."""
    if count > len(batteries):
        raise ValueError(f"cannot pick {count} of {len(batteries)} batteries")
    joltage = 0
    start = 0
    for remaining in range(count, 0, -1):
        window = batteries[start : len(batteries) - remaining + 1]
        best = max(window)
        start += window.index(best) + 1
        joltage = joltage * 10 + best
    return joltage


def part1(text: str) -> int:
    """Sum the best two-battery joltage of every bank."""
    return sum(highest_joltage(bank, 2) for bank in parse_battery_banks(text))


def part2(text: str) -> int:
    """Sum the best twelve-battery joltage of every bank."""
    return sum(highest_joltage(bank, 12) for bank in parse_battery_banks(text))