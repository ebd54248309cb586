"""Day 1: a safe dial turned left and right."""

from __future__ import annotations

from dataclasses import dataclass

from .grid import parse_int

LEFT = "L"
RIGHT = "R"
DIAL_SIZE = 100
START_POSITION = 50

_STEP = {LEFT: -1, RIGHT: 1}


@dataclass(frozen=True)
class DialTurn:
    """One instruction: a direction letter and a number of clicks."""

    direction: str
    distance: int


@dataclass
class Dial:
    """A dial with positions 0 to 99 that wraps around."""

    position: int = START_POSITION

    def turn(self, turn: DialTurn) -> int:
        """Turn click by click and return how often the dial lands on 0."""
        try:
            step = _STEP[turn.direction]
        except KeyError:
            raise ValueError(f"unknown direction {turn.direction!r}") from None
        if turn.distance < 0:
            raise ValueError(f"distance must not be negative, got {turn.distance}")
        zeros = 0
        for _ in range(turn.distance):
            self.position = (self.position + step) % DIAL_SIZE
            if self.position == 0:
                zeros += 1
        return zeros


def parse_dial_turns(text: str) -> list[DialTurn]:
    """Parse one turn per line, such as ``L68`` or ``R5``."""
    turns = []
    for line in text.split("\n"):
        if not line:
            raise ValueError("empty line in dial instructions")
        turns.append(DialTurn(line[0], parse_int(line[1:])))
    return turns


def part1(text: str) -> int:
    """Count the turns during which the dial reaches 0 at least once."""
    dial = Dial()
    return sum(1 for turn in parse_dial_turns(text) if dial.turn(turn) > 0)


def part2(text: str) -> int:
    """Count every click that leaves the dial at 0."""
    dial = Dial()
    return sum(dial.turn(turn) for turn in parse_dial_turns(text))