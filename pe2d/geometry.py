"""Planar shapes: triangles, polygons, rectangles, circles and capsules."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum

from .matrix import Matrix3x3
from .vector import Vector2D


class ShapeType(Enum):
    TRIANGLE = "triangle"
    POLYGON = "polygon"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    CAPSULE = "capsule"
    UNKNOWN = "unknown"


def _copy(v: Vector2D) -> Vector2D:
    return Vector2D(v.x, v.y)


class Shape(ABC):
    """Base class for every shape; tracks a reference position."""

    shape_type: ShapeType = ShapeType.UNKNOWN

    def __init__(self) -> None:
        self.position = Vector2D(0.0, 0.0)

    @abstractmethod
    def area(self) -> float:
        """Surface area of the shape."""

    def centroid(self) -> Vector2D:
        return Vector2D(0.0, 0.0)

    def vertices(self) -> list[Vector2D]:
        return []

    @abstractmethod
    def set_position(self, position: Vector2D) -> None:
        """Move the shape so that its reference position is ``position``."""

    def rotate(self, matrix: Matrix3x3) -> None:
        """Transform the shape by a matrix; shapes without vertices ignore it."""

    def _shift(self, position: Vector2D) -> Vector2D:
        delta = position - self.position
        self.position = _copy(position)
        return delta


class _VertexShape(Shape):
    """Shape stored as an explicit list of vertices."""

    def __init__(self, points: Iterable[Vector2D]) -> None:
        super().__init__()
        self._points = [_copy(p) for p in points]

    def vertices(self) -> list[Vector2D]:
        return [_copy(p) for p in self._points]

    def set_position(self, position: Vector2D) -> None:
        delta = self._shift(position)
        self._points = [p + delta for p in self._points]

    def rotate(self, matrix: Matrix3x3) -> None:
        self._points = [matrix * p for p in self._points]


class Triangle(_VertexShape):
    shape_type = ShapeType.TRIANGLE

    def __init__(self, p1: Vector2D, p2: Vector2D, p3: Vector2D) -> None:
        super().__init__((p1, p2, p3))
        self.position = self.centroid()

    def area(self) -> float:
        v1 = self._points[1] - self._points[0]
        v2 = self._points[2] - self._points[0]
        return 0.5 * abs(v1.cross(v2))

    def centroid(self) -> Vector2D:
        a, b, c = self._points
        return (a + b + c) / 3

    def vertices(self) -> list[Vector2D]:
        return super().vertices()

    def set_position(self, position: Vector2D) -> None:
        super().set_position(position)

    def rotate(self, matrix: Matrix3x3) -> None:
        super().rotate(matrix)


class Polygon(_VertexShape):
    """A simple polygon with at least three vertices in winding order."""

    shape_type = ShapeType.POLYGON

    def __init__(self, vertices: Iterable[Vector2D]) -> None:
        super().__init__(vertices)
        if len(self._points) < 3:
            raise ValueError("A polygon must have at least 3 vertices.")
        self.position = self.centroid()

    def _edges(self) -> Iterable[tuple[Vector2D, Vector2D]]:
        return zip(self._points, [*self._points[1:], self._points[0]])

    def area(self) -> float:
        return 0.5 * abs(sum(a.cross(b) for a, b in self._edges()))

    def centroid(self) -> Vector2D:
        """Area centroid; the origin for a polygon of zero area."""
        area = 0.0
        cx = 0.0
        cy = 0.0
        for a, b in self._edges():
            cross = a.cross(b)
            area += cross
            cx += (a.x + b.x) * cross
            cy += (a.y + b.y) * cross
        area *= 0.5
        if area == 0.0:
            return Vector2D(0.0, 0.0)
        return Vector2D(cx / (6.0 * area), cy / (6.0 * area))

    def vertices(self) -> list[Vector2D]:
        return super().vertices()

    def set_position(self, position: Vector2D) -> None:
        super().set_position(position)

    def rotate(self, matrix: Matrix3x3) -> None:
        super().rotate(matrix)


class Rectangle(Shape):
    shape_type = ShapeType.RECTANGLE

    def __init__(self, top_left: Vector2D, bottom_right: Vector2D) -> None:
        super().__init__()
        self.top_left = _copy(top_left)
        self.bottom_right = _copy(bottom_right)
        self.position = self.centroid()

    def area(self) -> float:
        width = abs(self.bottom_right.x - self.top_left.x)
        height = abs(self.bottom_right.y - self.top_left.y)
        return width * height

    def centroid(self) -> Vector2D:
        return Vector2D(
            (self.top_left.x + self.bottom_right.x) / 2,
            (self.top_left.y + self.bottom_right.y) / 2,
        )

    def vertices(self) -> list[Vector2D]:
        tl, br = self.top_left, self.bottom_right
        return [Vector2D(tl.x, br.y), _copy(tl), Vector2D(br.x, tl.y), _copy(br)]

    def set_position(self, position: Vector2D) -> None:
        delta = self._shift(position)
        self.top_left = self.top_left + delta
        self.bottom_right = self.bottom_right + delta

    def rotate(self, matrix: Matrix3x3) -> None:
        self.top_left = matrix * self.top_left
        self.bottom_right = matrix * self.bottom_right


class Circle(Shape):
    shape_type = ShapeType.CIRCLE

    def __init__(self, center: Vector2D, radius: float) -> None:
        super().__init__()
        self.center = _copy(center)
        self.radius = float(radius)
        self.position = _copy(center)

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def centroid(self) -> Vector2D:
        return _copy(self.center)

    def set_position(self, position: Vector2D) -> None:
        self._shift(position)
        self.center = _copy(self.position)


class Capsule(Shape):
    """A vertical capsule described by its base centre, radius and height."""

    shape_type = ShapeType.CAPSULE

    def __init__(self, center: Vector2D, radius: float, height: float) -> None:
        super().__init__()
        self.center = _copy(center)
        self.radius = float(radius)
        self.height = float(height)
        self.position = self.centroid()

    def area(self) -> float:
        return 2 * math.pi * self.radius * self.radius + self.height * (2 * self.radius)

    def centroid(self) -> Vector2D:
        return Vector2D(self.center.x, self.center.y + self.height / 2)

    def set_position(self, position: Vector2D) -> None:
        self._shift(position)
        self.center = _copy(self.position)