"""Two-dimensional points and vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass
class Point:
    """A 2D coordinate that also serves as a 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Point:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Point(self.x / scalar, self.y / scalar)

    def normalize(self) -> Point:
        """Return the unit vector in this direction, or the origin for a zero vector."""
        length = self.magnitude()
        if length == 0:
            return Point()
        return self / length

    def dot(self, other: Point) -> float:
        """Return the inner product with another vector."""
        return self.x * other.x + self.y * other.y

    def magnitude_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.magnitude_squared())