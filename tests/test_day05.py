from itertools import combinations

import pytest

from aoc25.day05 import (
    FreshnessRange,
    IngredientDatabase,
    merge_range,
    parse_freshness_range,
    parse_ingredient_database,
    part1,
    part2,
)

EXAMPLE = "3-5\n10-14\n16-20\n12-18\n\n1\n5\n8\n11\n17\n32"


def test_parse_freshness_range():
    assert parse_freshness_range("3-5") == FreshnessRange(3, 5)


def test_parse_freshness_range_invalid():
    with pytest.raises(ValueError):
        parse_freshness_range("3")


def test_parse_database():
    db = parse_ingredient_database("1-2\n4-6\n\n3\n5")
    assert db == IngredientDatabase([FreshnessRange(1, 2), FreshnessRange(4, 6)], [3, 5])


def test_parse_database_needs_blank_line():
    with pytest.raises(ValueError):
        parse_ingredient_database("1-2\n3")


def test_contains_is_inclusive():
    r = FreshnessRange(3, 5)
    assert r.contains(3) and r.contains(5)
    assert not r.contains(2) and not r.contains(6)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (FreshnessRange(1, 5), FreshnessRange(5, 9), True),
        (FreshnessRange(1, 4), FreshnessRange(5, 9), False),
        (FreshnessRange(1, 10), FreshnessRange(3, 4), True),
    ],
)
def test_overlaps_is_symmetric(a, b, expected):
    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_count():
    assert FreshnessRange(3, 5).count() == len(range(3, 6))


def test_is_fresh():
    db = IngredientDatabase([FreshnessRange(3, 5)], [4])
    assert db.is_fresh(4)
    assert not db.is_fresh(6)


def test_merge_into_empty():
    r = FreshnessRange(1, 2)
    assert merge_range([], r) == [r]


def test_merge_keeps_union_and_disjointness():
    ranges = [FreshnessRange(3, 5), FreshnessRange(10, 14), FreshnessRange(16, 20),
              FreshnessRange(12, 18), FreshnessRange(1, 3), FreshnessRange(30, 31)]
    merged: list[FreshnessRange] = []
    for r in ranges:
        merged = merge_range(merged, r)
    for a, b in combinations(merged, 2):
        assert not a.overlaps(b)
    covered = {i for r in merged for i in range(r.start, r.end + 1)}
    expected = {i for r in ranges for i in range(r.start, r.end + 1)}
    assert covered == expected


def test_merge_does_not_modify_input():
    ranges = [FreshnessRange(1, 5)]
    merge_range(ranges, FreshnessRange(4, 8))
    assert ranges == [FreshnessRange(1, 5)]


def test_example_part1():
    assert part1(EXAMPLE) == 3


def test_example_part2():
    assert part2(EXAMPLE) == 14


def test_part2_matches_set_union():
    text = "1-4\n3-9\n20-22\n8-12\n\n1"
    db = parse_ingredient_database(text)
    union = {i for r in db.freshness_ranges for i in range(r.start, r.end + 1)}
    assert part2(text) == len(union)