import math

import pytest

from pe2d.geometry import Capsule, Circle, Polygon, Rectangle, Shape, ShapeType, Triangle
from pe2d.matrix import Matrix3x3
from pe2d.vector import Vector2D


def _flat(vectors):
    return [component for vector in vectors for component in vector]


TRI = [Vector2D(0, 0), Vector2D(4, 0), Vector2D(0, 3)]


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_triangle_area_pinned():
    assert Triangle(*TRI).area() == pytest.approx(6.0)


def test_triangle_area_matches_polygon():
    assert Triangle(*TRI).area() == pytest.approx(Polygon(TRI).area())


def test_triangle_centroid_matches_polygon_centroid():
    expected = tuple(Polygon(TRI).centroid())
    assert tuple(Triangle(*TRI).centroid()) == pytest.approx(expected, abs=1e-9)


def test_triangle_initial_position_is_centroid():
    t = Triangle(*TRI)
    assert tuple(t.position) == pytest.approx(tuple(t.centroid()), abs=1e-9)


def test_triangle_set_position_moves_centroid():
    t = Triangle(*TRI)
    t.set_position(Vector2D(10, 20))
    assert tuple(t.centroid()) == pytest.approx((10.0, 20.0), abs=1e-9)
    assert t.area() == pytest.approx(Triangle(*TRI).area())


def test_triangle_vertices_are_copies():
    t = Triangle(*TRI)
    t.vertices()[0].x = 99
    assert t.vertices()[0] == TRI[0]


def test_triangle_rotate_half_turn_negates():
    t = Triangle(*TRI)
    t.rotate(Matrix3x3.rotate(math.pi))
    assert _flat(t.vertices()) == pytest.approx(_flat(-v for v in TRI), abs=1e-9)


def test_triangle_rotate_round_trip():
    t = Triangle(*TRI)
    t.rotate(Matrix3x3.rotate(0.7))
    t.rotate(Matrix3x3.rotate(-0.7))
    assert _flat(t.vertices()) == pytest.approx(_flat(TRI), abs=1e-9)


def test_polygon_needs_three_vertices():
    with pytest.raises(ValueError):
        Polygon([Vector2D(0, 0), Vector2D(1, 1)])


def test_polygon_degenerate_centroid_is_origin():
    p = Polygon([Vector2D(0, 0), Vector2D(1, 1), Vector2D(2, 2)])
    assert p.area() == 0.0
    assert p.centroid() == Vector2D(0.0, 0.0)


def test_polygon_area_independent_of_winding():
    square = [Vector2D(0, 0), Vector2D(2, 0), Vector2D(2, 2), Vector2D(0, 2)]
    assert Polygon(square).area() == pytest.approx(Polygon(square[::-1]).area())


def test_polygon_set_position_and_rotation_keep_area():
    square = [Vector2D(0, 0), Vector2D(2, 0), Vector2D(2, 2), Vector2D(0, 2)]
    p = Polygon(square)
    area = p.area()
    p.set_position(Vector2D(-5, 7))
    assert tuple(p.centroid()) == pytest.approx((-5.0, 7.0), abs=1e-9)
    p.rotate(Matrix3x3.rotate(1.1))
    assert p.area() == pytest.approx(area)


def test_rectangle_vertices_order():
    tl, br = Vector2D(1, 2), Vector2D(5, 8)
    r = Rectangle(tl, br)
    assert r.vertices() == [Vector2D(tl.x, br.y), tl, Vector2D(br.x, tl.y), br]


def test_rectangle_area_matches_polygon():
    r = Rectangle(Vector2D(1, 2), Vector2D(5, 8))
    assert r.area() == pytest.approx(Polygon(r.vertices()).area())


def test_rectangle_set_position():
    r = Rectangle(Vector2D(1, 2), Vector2D(5, 8))
    area = r.area()
    r.set_position(Vector2D(10, 10))
    assert tuple(r.centroid()) == pytest.approx((10.0, 10.0), abs=1e-9)
    assert r.area() == pytest.approx(area)


def test_rectangle_rotate_moves_corners():
    r = Rectangle(Vector2D(1, 2), Vector2D(5, 8))
    r.rotate(Matrix3x3.rotate(math.pi))
    assert tuple(r.top_left) == pytest.approx((-1.0, -2.0), abs=1e-9)
    assert tuple(r.bottom_right) == pytest.approx((-5.0, -8.0), abs=1e-9)


def test_circle_area_scales_with_square_of_radius():
    assert Circle(Vector2D(0, 0), 2).area() == pytest.approx(4 * Circle(Vector2D(0, 0), 1).area())


def test_circle_centroid_and_move():
    c = Circle(Vector2D(3, 4), 1)
    assert c.centroid() == Vector2D(3, 4)
    assert c.vertices() == []
    c.set_position(Vector2D(-1, 2))
    assert c.center == Vector2D(-1, 2)
    c.rotate(Matrix3x3.rotate(1.0))
    assert c.center == Vector2D(-1, 2)


def test_capsule_centroid_pinned():
    assert Capsule(Vector2D(1, 2), 1, 4).centroid() == Vector2D(1, 4)


def test_capsule_zero_height_area_is_two_circles():
    cap = Capsule(Vector2D(0, 0), 1.5, 0)
    assert cap.area() == pytest.approx(2 * Circle(Vector2D(0, 0), 1.5).area())


def test_capsule_set_position_sets_center():
    cap = Capsule(Vector2D(1, 2), 1, 4)
    cap.set_position(Vector2D(5, 5))
    assert cap.center == Vector2D(5, 5)
    assert cap.position == Vector2D(5, 5)


@pytest.mark.parametrize(
    "shape, kind",
    [
        (Triangle(*TRI), ShapeType.TRIANGLE),
        (Polygon(TRI), ShapeType.POLYGON),
        (Rectangle(Vector2D(0, 0), Vector2D(1, 1)), ShapeType.RECTANGLE),
        (Circle(Vector2D(0, 0), 1), ShapeType.CIRCLE),
        (Capsule(Vector2D(0, 0), 1, 1), ShapeType.CAPSULE),
    ],
)
def test_shape_types(shape, kind):
    assert shape.shape_type is kind