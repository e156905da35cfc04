import math

import pytest

from pe2d.vector import PolarCoordinates, Vector2D


def test_default_is_zero_vector():
    v = Vector2D()
    assert v.x == 0.0 and v.y == 0.0


def test_add_sub_round_trip():
    a, b = Vector2D(1.5, -2.0), Vector2D(3.25, 7.0)
    assert (a + b) - b == a
    assert a + b == b + a


def test_negation_cancels():
    a = Vector2D(1.5, -2.0)
    assert a + (-a) == Vector2D()


def test_scalar_multiplication():
    a = Vector2D(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_componentwise_multiply_and_divide_round_trip():
    a, b = Vector2D(3.0, 5.0), Vector2D(2.0, 4.0)
    assert (a * b) / b == a


def test_componentwise_division_by_near_zero_gives_zero():
    a, b = Vector2D(3.0, 4.0), Vector2D(0.0, 2.0)
    result = a / b
    assert result.x == 0.0
    assert result.y == a.y / b.y


def test_scalar_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2D(1.0, 1.0) / 0


def test_scalar_division_inverse_of_multiplication():
    a = Vector2D(3.0, -6.0)
    assert (a * 3) / 3 == a


def test_indexing():
    v = Vector2D(7.0, 9.0)
    assert v[0] == v.x
    assert v[1] == v.y
    assert v["x"] == v.x
    assert v["y"] == v.y
    assert tuple(v) == (v.x, v.y)


def test_indexing_errors():
    v = Vector2D(7.0, 9.0)
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(KeyError):
        v["z"]
    assert v[0] == 7.0
    assert v["y"] == 9.0


def test_dot_of_perpendicular_is_zero():
    assert Vector2D(1.0, 0.0).dot(Vector2D(0.0, 1.0)) == 0.0


def test_dot_with_self_is_magnitude_squared():
    a = Vector2D(1.5, -2.5)
    assert a.dot(a) == pytest.approx(a.magnitude_sq())


def test_cross_is_antisymmetric():
    a, b = Vector2D(1.0, 2.0), Vector2D(-3.0, 0.5)
    assert a.cross(b) == -b.cross(a)
    assert a.cross(a) == 0.0


def test_extended_cross():
    a, b = Vector2D(1.0, 2.0), Vector2D(-3.0, 0.5)
    assert a.extended_cross(b) == (0.0, 0.0, a.cross(b))


def test_magnitude():
    v = Vector2D(3.0, 4.0)
    assert v.magnitude() == pytest.approx(5.0)
    assert v.magnitude_sq() == pytest.approx(v.magnitude() ** 2)


def test_normalize():
    v = Vector2D(3.0, -7.0)
    n = v.normalize()
    assert n.magnitude() == pytest.approx(1.0)
    assert n.cross(v) == pytest.approx(0.0)
    assert Vector2D().normalize() == Vector2D()


def test_angle():
    assert Vector2D(1.0, 0.0).angle(Vector2D(0.0, 2.0)) == pytest.approx(math.pi / 2)
    assert Vector2D(1.0, 1.0).angle(Vector2D(2.0, 2.0)) == pytest.approx(0.0, abs=1e-6)
    assert Vector2D().angle(Vector2D(1.0, 1.0)) == 0.0


def test_projection():
    v = Vector2D(3.0, 4.0)
    axis = Vector2D(5.0, 0.0)
    assert tuple(v.projection(axis)) == pytest.approx((3.0, 0.0), abs=1e-9)
    assert v.projection(Vector2D()) == Vector2D()


def test_rotate_preserves_length_and_inverts():
    v = Vector2D(2.0, 1.0)
    r = v.rotate(0.7)
    assert r.magnitude() == pytest.approx(v.magnitude())
    assert tuple(r.rotate(-0.7)) == pytest.approx((2.0, 1.0), abs=1e-9)
    assert v.rotate(math.pi / 2).dot(v) == pytest.approx(0.0, abs=1e-12)


def test_translate_mutates_in_place():
    v = Vector2D(1.0, 2.0)
    original = Vector2D(v.x, v.y)
    v.translate(0.5, -1.5)
    assert v == original + Vector2D(0.5, -1.5)


def test_reflect():
    v = Vector2D(1.0, -1.0)
    normal = Vector2D(0.0, 3.0)
    reflected = v.reflect(normal)
    assert tuple(reflected) == pytest.approx((1.0, 1.0), abs=1e-9)
    assert tuple(reflected.reflect(normal)) == pytest.approx((1.0, -1.0), abs=1e-9)


def test_interpolate_endpoints():
    a, b = Vector2D(1.0, 2.0), Vector2D(-4.0, 8.0)
    assert a.interpolate(b, 0.0) == a
    assert a.interpolate(b, 1.0) == b
    assert tuple(a.interpolate(b, 0.5)) == pytest.approx((-1.5, 5.0), abs=1e-9)


def test_to_polar_round_trip():
    v = Vector2D(-2.0, 3.0)
    polar = v.to_polar()
    assert isinstance(polar, PolarCoordinates)
    assert polar.radius == pytest.approx(v.magnitude())
    back = (polar.radius * math.cos(polar.angle), polar.radius * math.sin(polar.angle))
    assert back == pytest.approx((-2.0, 3.0), abs=1e-9)


def test_orthogonalize():
    v = Vector2D(3.0, 4.0)
    o = v.orthogonalize()
    assert o.dot(v) == pytest.approx(0.0)
    assert o.magnitude() == pytest.approx(1.0)
    assert v.cross(o) > 0
    assert Vector2D().orthogonalize() == Vector2D()


def test_linear_combination():
    v1, v2 = Vector2D(1.0, 2.0), Vector2D(3.0, -1.0)
    assert Vector2D().linear_combination(2.0, v1, -0.5, v2) == v1 * 2.0 + v2 * -0.5