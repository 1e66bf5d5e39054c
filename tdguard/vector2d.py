"""Two-dimensional vector used for positions and velocities."""

from __future__ import annotations

import math
from dataclasses import dataclass

_ZERO_TOLERANCE = 0.0001


@dataclass
class Vector2D:
    """A mutable 2D vector ordered by length."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vector2D) -> Vector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vector2D) -> Vector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, scalar: float) -> Vector2D:
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vector2D:
        self.x /= scalar
        self.y /= scalar
        return self

    def __lt__(self, other: Vector2D) -> bool:
        return self.length() < other.length()

    def __gt__(self, other: Vector2D) -> bool:
        return self.length() > other.length()

    def dot(self, other: Vector2D) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2D:
        """Return a unit vector in the same direction, or zero for a zero vector."""
        length = self.length()
        if length == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / length, self.y / length)

    def approx_zero(self) -> bool:
        """Return True when the vector is practically zero."""
        return self.length() < _ZERO_TOLERANCE