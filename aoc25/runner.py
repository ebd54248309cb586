"""Command line entry point that runs one part of one day."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable

from . import day01, day02, day03, day04, day05, day06, day07
from .inputs import load_input, load_test_input

_SOLUTIONS: dict[int, tuple[Callable[[str], int], ...]] = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
    5: (day05.part1, day05.part2),
    6: (day06.part1, day06.part2),
    7: (day07.part1,),
}


def _solution(day: int, part: int) -> Callable[[str], int]:
    parts = _SOLUTIONS.get(day)
    if parts is None:
        raise ValueError(f"no solution for day {day}")
    if not 1 <= part <= len(parts):
        raise ValueError(f"no solution for day {day}, part {part}")
    return parts[part - 1]


def run(day: int, part: int, text: str) -> int:
    """Solve one part of one day for the given input."""
    return _solution(day, part)(text)


def main(argv: list[str] | None = None) -> int:
    """Run a solution on the stored input and report its runtime."""
    parser = argparse.ArgumentParser(prog="aoc25", description="Run a puzzle solution.")
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int)
    parser.add_argument("mode", nargs="?", help="'test' to use the example input")
    parser.add_argument("--inputs", default="inputs", help="directory of input files")
    args = parser.parse_args(argv)

    try:
        solution = _solution(args.day, args.part)
    except ValueError as exc:
        parser.error(str(exc))

    loader = load_test_input if args.mode == "test" else load_input
    text = loader(args.day, args.inputs)

    start = time.perf_counter_ns()
    result = solution(text)
    elapsed_us = (time.perf_counter_ns() - start) // 1000

    print(result)
    print(f"\nRuntime:\n{elapsed_us}μs \n{elapsed_us / 1000:f}ms", file=sys.stderr)
    return 0