"""Narrow-phase collision detection between pairs of shapes."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Optional

from .aabb import CollisionInfo
from .geometry import Capsule, Circle, Polygon, Shape, ShapeType
from .mathutils import calculate_centroid, clamp, is_point_in_polygon, is_segment_intersect
from .vector import Vector2D

_EPSILON = 1e-6
_POLYGONAL = frozenset({ShapeType.POLYGON, ShapeType.RECTANGLE, ShapeType.TRIANGLE})


def _edges(vertices: Sequence[Vector2D]) -> Iterator[tuple[Vector2D, Vector2D]]:
    """Consecutive vertex pairs, closing the loop."""
    return zip(vertices, [*vertices[1:], *vertices[:1]])


def _is_polygonal(shape: Shape) -> bool:
    return shape.shape_type in _POLYGONAL


class CollisionDetector:
    """Shape-pair collision tests based on the separating axis theorem."""

    @staticmethod
    def find_axis_least_penetration(
        a_vertices: Sequence[Vector2D], b_vertices: Sequence[Vector2D]
    ) -> Optional[tuple[Vector2D, float]]:
        """Smallest overlap of B on the edge normals of A.

        Returns the axis (oriented from A's vertex mean towards B's) and the
        overlap, or None when one of the axes separates the two point sets.
        """
        if not a_vertices or not b_vertices:
            raise ValueError("both vertex lists must be non-empty")
        penetration = math.inf
        normal = Vector2D()
        direction = calculate_centroid(b_vertices) - calculate_centroid(a_vertices)
        for start, end in _edges(a_vertices):
            edge = end - start
            axis = Vector2D(-edge.y, edge.x).normalize()
            proj_b = [axis.dot(v) for v in b_vertices]
            proj_a = [axis.dot(v) for v in a_vertices]
            overlap = min(max(proj_a), max(proj_b)) - max(min(proj_a), min(proj_b))
            if overlap < 0:
                return None
            if overlap < penetration:
                penetration = overlap
                normal = -axis if direction.dot(axis) < 0 else axis
        return normal, penetration

    @staticmethod
    def check_collision(a: Shape, b: Shape) -> Optional[CollisionInfo]:
        """Collision between two shapes, or None if they do not touch.

        Pairs without a dedicated test (such as circle against capsule)
        are reported as not colliding.
        """
        if a.shape_type is ShapeType.CIRCLE and b.shape_type is ShapeType.CIRCLE:
            return CollisionDetector.circle_vs_circle(a, b)
        if a.shape_type is ShapeType.CIRCLE and _is_polygonal(b):
            return CollisionDetector.circle_vs_polygon(a, Polygon(b.vertices()))
        if _is_polygonal(a) and b.shape_type is ShapeType.CIRCLE:
            return CollisionDetector.polygon_vs_circle(Polygon(a.vertices()), b)
        if _is_polygonal(a) and _is_polygonal(b):
            return CollisionDetector.polygon_vs_polygon(
                Polygon(a.vertices()), Polygon(b.vertices())
            )
        if a.shape_type is ShapeType.CAPSULE and _is_polygonal(b):
            return CollisionDetector.capsule_vs_polygon(a, Polygon(b.vertices()))
        if _is_polygonal(a) and b.shape_type is ShapeType.CAPSULE:
            return CollisionDetector.capsule_vs_polygon(b, Polygon(a.vertices()))
        return None

    @staticmethod
    def circle_vs_circle(a: Circle, b: Circle) -> Optional[CollisionInfo]:
        offset = b.center - a.center
        distance = offset.magnitude()
        radius_sum = a.radius + b.radius
        if distance >= radius_sum:
            return None
        normal = offset.normalize()
        return CollisionInfo(
            is_colliding=True,
            normal=normal,
            penetration=radius_sum - distance,
            contact_point=a.center + normal * a.radius,
        )

    @staticmethod
    def circle_vs_polygon(circle: Circle, polygon: Polygon) -> Optional[CollisionInfo]:
        """Collision of a circle whose centre lies within the polygon's projections."""
        return _point_set_vs_polygon(
            polygon.vertices(), [circle.center], circle.center, circle.radius
        )

    @staticmethod
    def polygon_vs_circle(polygon: Polygon, circle: Circle) -> Optional[CollisionInfo]:
        return _point_set_vs_polygon(
            polygon.vertices(), [circle.center], circle.center, circle.radius
        )

    @staticmethod
    def polygon_vs_polygon(a: Polygon, b: Polygon) -> Optional[CollisionInfo]:
        vertices_a = a.vertices()
        vertices_b = b.vertices()
        first = CollisionDetector.find_axis_least_penetration(vertices_a, vertices_b)
        if first is None:
            return None
        second = CollisionDetector.find_axis_least_penetration(vertices_b, vertices_a)
        if second is None:
            return None
        normal, penetration = first
        if second[1] > penetration:
            normal, penetration = second
        contact = find_contact_point(vertices_a, vertices_b)
        return CollisionInfo(
            is_colliding=True,
            normal=normal,
            penetration=penetration,
            contact_point=contact if contact is not None else Vector2D(),
        )

    @staticmethod
    def capsule_vs_polygon(capsule: Capsule, polygon: Polygon) -> Optional[CollisionInfo]:
        """Collision of the capsule's end points against the polygon."""
        half = Vector2D(0.0, capsule.height / 2)
        ends = [capsule.center + half, capsule.center - half]
        return _point_set_vs_polygon(polygon.vertices(), ends, capsule.center, capsule.radius)


def _point_set_vs_polygon(
    polygon: Sequence[Vector2D],
    points: Sequence[Vector2D],
    center: Vector2D,
    radius: float,
) -> Optional[CollisionInfo]:
    found = CollisionDetector.find_axis_least_penetration(polygon, points)
    if found is None:
        return None
    normal, penetration = found
    return CollisionInfo(
        is_colliding=True,
        normal=normal,
        penetration=penetration,
        contact_point=center + normal * (radius - penetration),
    )


def _edge_contact(
    a1: Vector2D, a2: Vector2D, b1: Vector2D, b2: Vector2D
) -> Optional[Vector2D]:
    """Meeting point of two crossing edges, or None if it cannot be settled."""
    a_dir = a2 - a1
    b_dir = b2 - b1
    cross = a_dir.cross(b_dir)
    to_b = b1 - a1
    if abs(cross) < _EPSILON:
        if abs(to_b.cross(a_dir)) >= _EPSILON:
            return None
        length_sq = a_dir.dot(a_dir)
        t0 = to_b.dot(a_dir) / length_sq
        t1 = (b2 - a1).dot(a_dir) / length_sq
        t_min = max(0.0, min(t0, t1))
        t_max = min(1.0, max(t0, t1))
        if t_min > t_max:
            return None
        return a1 + a_dir * ((t_min + t_max) * 0.5)
    t = to_b.cross(b_dir) / cross
    s = to_b.cross(a_dir) / cross
    if not (-_EPSILON <= t <= 1.0 + _EPSILON and -_EPSILON <= s <= 1.0 + _EPSILON):
        return None
    contact = a1 + a_dir * clamp(t, 0.0, 1.0)
    verify = b1 + b_dir * clamp(s, 0.0, 1.0)
    if (contact - verify).magnitude_sq() < _EPSILON * _EPSILON:
        return contact
    return None


def find_contact_point(
    verts_a: Sequence[Vector2D], verts_b: Sequence[Vector2D]
) -> Optional[Vector2D]:
    """Mean of the contained vertices and edge crossings of two polygons.

    Returns None when the polygons share no such point.
    """
    contacts = [v for v in verts_a if is_point_in_polygon(v, verts_b)]
    contacts += [v for v in verts_b if is_point_in_polygon(v, verts_a)]
    for a1, a2 in _edges(verts_a):
        for b1, b2 in _edges(verts_b):
            if not is_segment_intersect(a1, a2, b1, b2):
                continue
            contact = _edge_contact(a1, a2, b1, b2)
            if contact is None:
                continue
            if all((contact - e).magnitude_sq() >= _EPSILON * _EPSILON for e in contacts):
                contacts.append(contact)
    if not contacts:
        return None
    return sum(contacts, Vector2D()) / len(contacts)


def closest_point_on_segment(point: Vector2D, seg_a: Vector2D, seg_b: Vector2D) -> Vector2D:
    """Point of the segment nearest to the given point."""
    ab = seg_b - seg_a
    length_sq = ab.dot(ab)
    if length_sq == 0.0:
        return Vector2D(seg_a.x, seg_a.y)
    t = clamp((point - seg_a).dot(ab) / length_sq, 0.0, 1.0)
    return seg_a + ab * t


def segment_intersection(
    a0: Vector2D, a1: Vector2D, b0: Vector2D, b1: Vector2D
) -> Optional[Vector2D]:
    """Crossing point of segments a0-a1 and b0-b1; None if parallel or apart."""
    r = a1 - a0
    s = b1 - b0
    r_cross_s = r.cross(s)
    if r_cross_s == 0:
        return None
    q = b0 - a0
    t = q.cross(s) / r_cross_s
    u = q.cross(r) / r_cross_s
    if 0 <= t <= 1 and 0 <= u <= 1:
        return a0 + r * t
    return None


def clip_segment_to_line(
    contacts_in: Sequence[Vector2D], c0: Vector2D, c1: Vector2D
) -> list[Vector2D]:
    """Points where the closed outline through contacts_in crosses segment c0-c1."""
    crossings = (segment_intersection(p, q, c0, c1) for p, q in _edges(contacts_in))
    return [point for point in crossings if point is not None]


def edge_normal(current: Vector2D, following: Vector2D) -> Vector2D:
    """Unit normal of an edge: its direction turned a quarter counter-clockwise."""
    edge = following - current
    return Vector2D(-edge.y, edge.x).normalize()


def point_to_segment_distance(
    point: Vector2D, line_start: Vector2D, line_end: Vector2D
) -> float:
    line = line_end - line_start
    to_point = point - line_start
    length = line.magnitude()
    if length == 0.0:
        return to_point.magnitude()
    projection = max(0.0, min(to_point.dot(line) / length, length))
    closest = line_start + line * (projection / length)
    return (point - closest).magnitude()


def point_to_polygon_distance(point: Vector2D, polygon: Sequence[Vector2D]) -> float:
    """Distance to the nearest edge; infinite for an empty polygon."""
    return min(
        (point_to_segment_distance(point, a, b) for a, b in _edges(polygon)),
        default=math.inf,
    )


def closest_edge_normal(point: Vector2D, polygon: Sequence[Vector2D]) -> Vector2D:
    """Unit normal of the polygon edge nearest to the point."""
    best = Vector2D()
    best_distance = math.inf
    for current, following in _edges(polygon):
        distance = point_to_segment_distance(point, current, following)
        if distance < best_distance:
            best_distance = distance
            best = edge_normal(current, following)
    return best


def vertex_detection(
    polygon_a: Sequence[Vector2D], polygon_b: Sequence[Vector2D]
) -> Optional[CollisionInfo]:
    """Collision found from the first vertex of either polygon inside the other."""
    for vertices, other in ((polygon_a, polygon_b), (polygon_b, polygon_a)):
        for vertex in vertices:
            if is_point_in_polygon(vertex, other):
                return CollisionInfo(
                    is_colliding=True,
                    normal=closest_edge_normal(vertex, other),
                    penetration=point_to_polygon_distance(vertex, other),
                )
    return None