import pytest

from aoc25.day06 import (
    MathProblem,
    parse_cephalopod_worksheet,
    parse_worksheet,
    part1,
    part2,
)

EXAMPLE = "\n".join(
    [
        "123 328  51 64 ",
        " 45 64  387 23 ",
        "  6 98  215 314",
        "*   +   *   +  ",
    ]
).strip()


def test_part1_example():
    assert part1(EXAMPLE) == 4277556


def test_part2_example():
    assert part2(EXAMPLE) == 3263827


def test_parse_worksheet_reads_columns_of_numbers():
    problems = parse_worksheet(EXAMPLE)
    assert problems[0] == MathProblem([123, 45, 6], "*")
    assert problems[3] == MathProblem([64, 23, 314], "+")
    assert [p.operator for p in problems] == ["*", "+", "*", "+"]


def test_cephalopod_worksheet_has_same_problem_count_and_operators():
    regular = parse_worksheet(EXAMPLE)
    cephalopod = parse_cephalopod_worksheet(EXAMPLE)
    assert len(cephalopod) == len(regular)
    assert [p.operator for p in cephalopod] == [p.operator for p in regular]


def test_cephalopod_numbers_use_the_same_digits():
    regular = parse_worksheet(EXAMPLE)
    cephalopod = parse_cephalopod_worksheet(EXAMPLE)
    for a, b in zip(regular, cephalopod):
        assert sorted("".join(map(str, a.numbers))) == sorted(
            "".join(map(str, b.numbers))
        )


def test_single_number_is_its_own_answer():
    assert MathProblem([7], "+").solve() == 7
    assert MathProblem([7], "*").solve() == 7


def test_unknown_operator_multiplies():
    assert MathProblem([3, 4], "-").solve() == MathProblem([3, 4], "*").solve()


def test_empty_product_is_one():
    assert MathProblem([], "*").solve() == 1


def test_short_row_is_rejected():
    with pytest.raises(ValueError):
        parse_worksheet("1 2\n3\n+ *")