"""Axis-aligned bounding boxes and collision records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations

from .geometry import Capsule, Circle, Polygon, Rectangle, Shape, Triangle
from .vector import Vector2D


@dataclass
class CollisionInfo:
    """Result of a narrow-phase test; the normal points from the first shape to the second."""

    is_colliding: bool = False
    normal: Vector2D = field(default_factory=Vector2D)
    penetration: float = 0.0
    contact_point: Vector2D = field(default_factory=Vector2D)


@dataclass
class AABB:
    """A box given by its top-left (minimum) and bottom-right (maximum) corners."""

    top_left: Vector2D = field(default_factory=Vector2D)
    bottom_right: Vector2D = field(default_factory=Vector2D)
    obj_id: int = 0

    def __post_init__(self) -> None:
        self.top_left = Vector2D(self.top_left.x, self.top_left.y)
        self.bottom_right = Vector2D(self.bottom_right.x, self.bottom_right.y)

    @classmethod
    def from_shape(cls, shape: Shape) -> AABB:
        """Bounding box of a shape; raises ValueError for unsupported shapes."""
        if isinstance(shape, Circle):
            c, r = shape.center, shape.radius
            return cls(Vector2D(c.x - r, c.y - r), Vector2D(c.x + r, c.y + r))
        if isinstance(shape, Rectangle):
            return cls(shape.top_left, shape.bottom_right)
        if isinstance(shape, (Polygon, Triangle)):
            points = shape.vertices()
            xs = [p.x for p in points]
            ys = [p.y for p in points]
            return cls(Vector2D(min(xs), min(ys)), Vector2D(max(xs), max(ys)))
        if isinstance(shape, Capsule):
            c, r, half = shape.center, shape.radius, shape.height / 2
            return cls(Vector2D(c.x - r, c.y - half), Vector2D(c.x + r, c.y + half))
        raise ValueError("Unsupported shape type for AABB.")

    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    def center(self) -> Vector2D:
        return Vector2D(
            (self.top_left.x + self.bottom_right.x) / 2,
            (self.top_left.y + self.bottom_right.y) / 2,
        )

    def contains_point(self, point: Vector2D) -> bool:
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )

    def intersects(self, other: AABB) -> bool:
        """Whether the boxes overlap; touching edges count as overlapping."""
        return not (
            other.bottom_right.x < self.top_left.x
            or other.top_left.x > self.bottom_right.x
            or other.bottom_right.y < self.top_left.y
            or other.top_left.y > self.bottom_right.y
        )

    def expand_to_include(self, point: Vector2D) -> None:
        """Grow the box in place so that it contains the point."""
        self.top_left = Vector2D(min(self.top_left.x, point.x), min(self.top_left.y, point.y))
        self.bottom_right = Vector2D(
            max(self.bottom_right.x, point.x), max(self.bottom_right.y, point.y)
        )

    @staticmethod
    def batch_intersections(aabbs: Sequence[AABB]) -> list[tuple[int, int]]:
        """Object-id pairs of every intersecting pair of boxes, in list order."""
        return [(a.obj_id, b.obj_id) for a, b in combinations(aabbs, 2) if a.intersects(b)]

    @staticmethod
    def separating_axis_intersect(first: AABB, second: AABB) -> bool:
        """Overlap test by projecting both boxes on the x and y axes."""
        overlap_x = (
            first.bottom_right.x >= second.top_left.x
            and second.bottom_right.x >= first.top_left.x
        )
        overlap_y = (
            first.bottom_right.y >= second.top_left.y
            and second.bottom_right.y >= first.top_left.y
        )
        return overlap_x and overlap_y

    @staticmethod
    def multiple_intersections(aabbs: Sequence[AABB]) -> list[tuple[int, int]]:
        """Like batch_intersections, using the separating-axis test."""
        return [
            (a.obj_id, b.obj_id)
            for a, b in combinations(aabbs, 2)
            if AABB.separating_axis_intersect(a, b)
        ]