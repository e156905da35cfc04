"""Geometric predicates and scalar helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .vector import Vector2D


def distance_between_points(p1: Vector2D, p2: Vector2D) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def distance_from_point_to_line(point: Vector2D, line_start: Vector2D, line_end: Vector2D) -> float:
    """Distance from a point to the segment between two points."""
    a = point.x - line_start.x
    b = point.y - line_start.y
    c = line_end.x - line_start.x
    d = line_end.y - line_start.y
    if line_start == line_end:
        return distance_between_points(point, line_start)
    param = (a * c + b * d) / (c * c + d * d)
    if param < 0:
        closest = line_start
    elif param > 1:
        closest = line_end
    else:
        closest = Vector2D(line_start.x + param * c, line_start.y + param * d)
    return distance_between_points(point, closest)


def is_point_in_polygon(point: Vector2D, polygon: Sequence[Vector2D]) -> bool:
    """Even-odd ray casting test."""
    inside = False
    for vi, vj in zip(polygon, [*polygon[-1:], *polygon[:-1]]):
        if (vi.y > point.y) != (vj.y > point.y) and point.x < (vj.x - vi.x) * (
            point.y - vi.y
        ) / (vj.y - vi.y) + vi.x:
            inside = not inside
    return inside


def is_point_in_rectangle(point: Vector2D, top_left: Vector2D, bottom_right: Vector2D) -> bool:
    return top_left.x <= point.x <= bottom_right.x and top_left.y <= point.y <= bottom_right.y


def is_line_intersect(p1: Vector2D, p2: Vector2D, p3: Vector2D, p4: Vector2D) -> bool:
    """Whether segments p1-p2 and p3-p4 cross; parallel segments never do."""
    denom = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)
    if denom == 0.0:
        return False
    ua = ((p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)) / denom
    ub = ((p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)) / denom
    return 0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0


def _ccw(a: Vector2D, b: Vector2D, c: Vector2D) -> bool:
    return (c.y - a.y) * (b.x - a.x) > (b.y - a.y) * (c.x - a.x)


def is_segment_intersect(p1: Vector2D, p2: Vector2D, p3: Vector2D, p4: Vector2D) -> bool:
    """Orientation-based test for whether segments p1-p2 and p3-p4 cross."""
    return _ccw(p1, p3, p4) != _ccw(p2, p3, p4) and _ccw(p1, p2, p3) != _ccw(p1, p2, p4)


def is_circle_intersect(center1: Vector2D, radius1: float, center2: Vector2D, radius2: float) -> bool:
    dist_sq = (center1 - center2).magnitude_sq()
    return dist_sq <= (radius1 + radius2) ** 2


def is_circle_rectangle_intersect(
    center: Vector2D, radius: float, top_left: Vector2D, bottom_right: Vector2D
) -> bool:
    closest_x = clamp(center.x, top_left.x, bottom_right.x)
    closest_y = clamp(center.y, top_left.y, bottom_right.y)
    dx = center.x - closest_x
    dy = center.y - closest_y
    return dx * dx + dy * dy < radius * radius


def _circle_touches_edges(center: Vector2D, radius: float, vertices: Sequence[Vector2D]) -> bool:
    following = [*vertices[1:], *vertices[:1]]
    return any(
        distance_from_point_to_line(center, start, end) <= radius
        for start, end in zip(vertices, following)
    )


def is_circle_triangle_intersect(
    center: Vector2D, radius: float, triangle_points: Sequence[Vector2D]
) -> bool:
    """Whether a circle meets a triangle; anything but three points is False."""
    if len(triangle_points) != 3:
        return False
    if is_point_in_polygon(center, triangle_points):
        return True
    return _circle_touches_edges(center, radius, triangle_points)


def is_circle_polygon_intersect(
    center: Vector2D, radius: float, polygon_vertices: Sequence[Vector2D]
) -> bool:
    """Whether a circle meets a polygon; fewer than three vertices is False."""
    if len(polygon_vertices) < 3:
        return False
    if is_point_in_polygon(center, polygon_vertices):
        return True
    return _circle_touches_edges(center, radius, polygon_vertices)


def calculate_centroid(polygon: Sequence[Vector2D]) -> Vector2D:
    """Mean of the vertices."""
    if not polygon:
        raise ValueError("cannot take the centroid of no points")
    n = len(polygon)
    return Vector2D(sum(p.x for p in polygon) / n, sum(p.y for p in polygon) / n)


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3 - 2 * t)