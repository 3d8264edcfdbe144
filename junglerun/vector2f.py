"""A small mutable two-component float vector."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real

_SMALL = 0.001


class Vector2f:
    """A mutable 2D vector with arithmetic operators."""

    __slots__ = ("x", "y")
    __hash__ = None  # mutable, so not hashable

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vector2f index out of range: {index}")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = float(value)
        elif index == 1:
            self.y = float(value)
        else:
            raise IndexError(f"Vector2f index out of range: {index}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2f:
        return Vector2f(-self.x, -self.y)

    def __mul__(self, scale: float) -> Vector2f:
        if not isinstance(scale, Real):
            return NotImplemented
        return Vector2f(self.x * scale, self.y * scale)

    def __rmul__(self, scale: float) -> Vector2f:
        return self.__mul__(scale)

    def __truediv__(self, scale: float) -> Vector2f:
        if not isinstance(scale, Real):
            return NotImplemented
        if -_SMALL < scale < _SMALL:
            raise ValueError("scale too small in /")
        return Vector2f(self.x / scale, self.y / scale)

    def __repr__(self) -> str:
        return f"Vector2f({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2f:
        """Return a unit vector in the same direction."""
        m = self.magnitude()
        if -_SMALL < m < _SMALL:
            raise ValueError("Point too close in Vector2f.normalize")
        return Vector2f(self.x / m, self.y / m)

    def dot(self, other: Vector2f) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def copy(self) -> Vector2f:
        """Return an independent copy."""
        return Vector2f(self.x, self.y)