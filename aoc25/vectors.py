"""Small integer and real vectors in two and three dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """A point or direction on a grid."""

    x: int
    y: int

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vector2:
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)


UP = Vector2(0, 1)
DOWN = Vector2(0, -1)
LEFT = Vector2(-1, 0)
RIGHT = Vector2(1, 0)
UP_RIGHT = Vector2(1, 1)
DOWN_RIGHT = Vector2(1, -1)
UP_LEFT = Vector2(-1, 1)
DOWN_LEFT = Vector2(-1, -1)

ORTHOGONAL_DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DIAGONAL_DIRECTIONS = (UP_RIGHT, DOWN_RIGHT, UP_LEFT, DOWN_LEFT)


@dataclass(frozen=True)
class Vector3:
    """A vector in three dimensions with integer or real components."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if isinstance(scalar, bool) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def magnitude(self) -> float:
        """Return the length; truncated to an int when all components are ints."""
        length = math.sqrt(self.x**2 + self.y**2 + self.z**2)
        if all(isinstance(c, int) for c in (self.x, self.y, self.z)):
            return int(length)
        return length