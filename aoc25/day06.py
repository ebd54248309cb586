"""Day 6: a worksheet of column-wise arithmetic problems."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from .grid import parse_int
from .textpad import pad_right

ADD = "+"
MULTIPLY = "*"

_SPACES = re.compile(r"\s+")


@dataclass
class MathProblem:
    """Numbers combined by one operator."""

    numbers: list[int] = field(default_factory=list)
    operator: str = ""

    def solve(self) -> int:
        """Add the numbers for ``+``; multiply them for any other operator."""
        if self.operator == ADD:
            return sum(self.numbers)
        return math.prod(self.numbers)


def parse_worksheet(text: str) -> list[MathProblem]:
    """Read problems top to bottom, one column of numbers per problem."""
    lines = text.split("\n")
    rows = [
        [parse_int(word) for word in _SPACES.split(line.strip())]
        for line in lines[:-1]
    ]
    problems = []
    for index, operator in enumerate(_SPACES.split(lines[-1])):
        if not operator:
            raise ValueError("empty operator in worksheet")
        try:
            numbers = [row[index] for row in rows]
        except IndexError:
            raise ValueError(f"worksheet row has no number in column {index}") from None
        problems.append(MathProblem(numbers, operator[0]))
    return problems


def parse_cephalopod_worksheet(text: str) -> list[MathProblem]:
    """Read each character column as one number; blank columns separate problems."""
    lines = text.split("\n")
    width = max(len(line) for line in lines)
    lines = [pad_right(line, " ", width) for line in lines]
    operator_line, rows = lines[-1], lines[:-1]

    problems = []
    current = MathProblem()
    for column, operator in enumerate(operator_line):
        digits = "".join(row[column] for row in rows if row[column] != " ")
        number = parse_int(digits)
        if number == 0:
            problems.append(current)
            current = MathProblem()
            continue
        if operator != " ":
            current.operator = operator
        current.numbers.append(number)
    problems.append(current)
    return problems


def part1(text: str) -> int:
    """Sum the answers of the worksheet read row by row."""
    return sum(problem.solve() for problem in parse_worksheet(text))


def part2(text: str) -> int:
    """Sum the answers of the worksheet read column by column."""
    return sum(problem.solve() for problem in parse_cephalopod_worksheet(text))