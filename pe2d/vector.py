"""Two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Union

_NEAR_ZERO = 1e-10


class PolarCoordinates(NamedTuple):
    """A vector expressed as a radius and an angle in radians."""

    radius: float
    angle: float


@dataclass(slots=True)
class Vector2D:
    """A mutable 2D vector with arithmetic and geometric helpers."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def __mul__(self, other: Union[float, Vector2D]) -> Vector2D:
        """Scale by a number, or multiply component-wise by another vector."""
        if isinstance(other, Vector2D):
            return Vector2D(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2D:
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union[float, Vector2D]) -> Vector2D:
        """Divide by a number, or component-wise by another vector.

        Dividing by zero raises ZeroDivisionError; in component-wise division
        any component whose divisor is (nearly) zero becomes zero.
        """
        if isinstance(other, Vector2D):
            x = 0.0 if abs(other.x) < _NEAR_ZERO else self.x / other.x
            y = 0.0 if abs(other.y) < _NEAR_ZERO else self.y / other.y
            return Vector2D(x, y)
        if isinstance(other, (int, float)):
            if other == 0:
                raise ZeroDivisionError("division of a vector by zero")
            return Vector2D(self.x / other, self.y / other)
        return NotImplemented

    def __getitem__(self, key: Union[int, str]) -> float:
        """Access a component by index (0, 1) or by name ("x", "y")."""
        if isinstance(key, str):
            if key == "x":
                return self.x
            if key == "y":
                return self.y
            raise KeyError(key)
        if key == 0:
            return self.x
        if key == 1:
            return self.y
        raise IndexError("vector index out of range")

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2D) -> float:
        """Signed area of the parallelogram spanned by both vectors."""
        return self.x * other.y - self.y * other.x

    def extended_cross(self, other: Vector2D) -> tuple[float, float, float]:
        """The cross product as a 3D vector lying on the z axis."""
        return (0.0, 0.0, self.cross(other))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector2D:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0.0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / mag, self.y / mag)

    def angle(self, other: Vector2D) -> float:
        """Angle between the two vectors in radians; zero if either is zero."""
        mag_self = self.magnitude()
        mag_other = other.magnitude()
        if mag_self == 0.0 or mag_other == 0.0:
            return 0.0
        cosine = self.dot(other) / (mag_self * mag_other)
        return math.acos(max(-1.0, min(1.0, cosine)))

    def projection(self, other: Vector2D) -> Vector2D:
        """Projection of this vector onto another."""
        mag_sq = other.magnitude() ** 2
        if mag_sq == 0.0:
            return Vector2D(0.0, 0.0)
        return other * (self.dot(other) / mag_sq)

    def rotate(self, angle: float) -> Vector2D:
        """Rotate about the origin by an angle in radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2D(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def translate(self, dx: float, dy: float) -> None:
        """Move this vector in place."""
        self.x += dx
        self.y += dy

    def reflect(self, normal: Vector2D) -> Vector2D:
        """Reflect this vector across the line with the given normal."""
        n = normal.normalize()
        return self - n * (self.dot(n) * 2)

    def interpolate(self, other: Vector2D, t: float) -> Vector2D:
        """Linear interpolation towards another vector."""
        return Vector2D(self.x + t * (other.x - self.x), self.y + t * (other.y - self.y))

    def to_polar(self) -> PolarCoordinates:
        return PolarCoordinates(self.magnitude(), math.atan2(self.y, self.x))

    def orthogonalize(self) -> Vector2D:
        """Unit vector perpendicular to this one (rotated a quarter turn)."""
        if self.x == 0 and self.y == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(-self.y, self.x).normalize()

    def linear_combination(
        self, scalar1: float, v1: Vector2D, scalar2: float, v2: Vector2D
    ) -> Vector2D:
        return v1 * scalar1 + v2 * scalar2