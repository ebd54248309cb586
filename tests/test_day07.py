import pytest

from aoc25.day07 import parse_tachyon_manifold, part1
from aoc25.vectors import Vector2

EXAMPLE = "\n".join(
    [
        ".......S.......",
        "...............",
        ".......^.......",
        "...............",
        "......^.^......",
        "...............",
        ".....^.^.^.....",
        "...............",
        "....^.^...^....",
        "...............",
        "...^.^...^.^...",
        "...............",
        "..^...^.....^..",
        "...............",
        ".^.^.^.^.^...^.",
        "...............",
    ]
)


def test_part1_example():
    assert part1(EXAMPLE) == 21


def test_start_position():
    manifold = parse_tachyon_manifold(EXAMPLE)
    assert manifold.start == Vector2(EXAMPLE.split("\n")[0].index("S"), 0)


def test_splitters_sorted_top_down_and_all_found():
    manifold = parse_tachyon_manifold(EXAMPLE)
    ys = [s.y for s in manifold.splitters]
    assert ys == sorted(ys)
    assert len(manifold.splitters) == EXAMPLE.count("^")
    rows = EXAMPLE.split("\n")
    assert all(rows[s.y][s.x] == "^" for s in manifold.splitters)


def test_single_splitter_splits_once():
    assert part1("..S..\n.....\n..^..") == 1


def test_beam_missing_splitter_counts_nothing():
    assert part1("S....\n.....\n..^..") == 0


def test_missing_start_is_rejected():
    with pytest.raises(ValueError):
        parse_tachyon_manifold("...\n.^.")


def test_no_splitters_is_rejected():
    with pytest.raises(ValueError):
        part1("S..\n...")