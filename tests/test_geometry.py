import math

import pytest

from wadengine.geometry import Point2D


def test_origin():
    assert Point2D.origin() == Point2D(0.0, 0.0)


def test_distance_worked_example():
    assert Point2D(0.0, 0.0).distance_to(Point2D(3.0, 4.0)) == pytest.approx(5.0)


def test_distance_is_symmetric():
    a = Point2D(1.5, -2.0)
    b = Point2D(-7.0, 3.25)
    assert a.distance_to(b) == pytest.approx(b.distance_to(a))


def test_distance_to_self_is_zero():
    p = Point2D(12.0, -9.0)
    assert p.distance_to(p) == 0.0


def test_dot_with_self_is_squared_length():
    p = Point2D(3.0, -2.0)
    assert p.dot(p) == pytest.approx(p.distance_to(Point2D.origin()) ** 2)


def test_dot_of_perpendicular_vectors():
    p = Point2D(2.0, 5.0)
    assert p.dot(p.rotate(math.pi / 2)) == pytest.approx(0.0, abs=1e-9)


def test_normalize_has_unit_length():
    n = Point2D(7.0, -24.0).normalize()
    assert n.distance_to(Point2D.origin()) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    p = Point2D(7.0, -24.0)
    n = p.normalize()
    assert n.x * p.y == pytest.approx(n.y * p.x)
    assert n.dot(p) > 0


def test_normalize_origin_is_origin():
    assert Point2D.origin().normalize() == Point2D.origin()


def test_rotate_quarter_turn():
    r = Point2D(1.0, 0.0).rotate(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_rotate_preserves_length():
    p = Point2D(3.0, 8.0)
    origin = Point2D.origin()
    assert p.rotate(1.234).distance_to(origin) == pytest.approx(p.distance_to(origin))


def test_rotate_full_turn_returns_to_start():
    p = Point2D(-4.0, 2.5)
    r = p.rotate(2 * math.pi)
    assert r.x == pytest.approx(p.x)
    assert r.y == pytest.approx(p.y)


def test_add_and_sub_round_trip():
    a = Point2D(1.25, -3.5)
    b = Point2D(-0.75, 9.0)
    assert (a + b) - b == a


def test_mul_matches_repeated_addition():
    p = Point2D(1.5, -2.25)
    assert p * 2.0 == p + p


def test_mul_by_non_number_raises():
    with pytest.raises(TypeError):
        Point2D(1.0, 1.0) * "x"


def test_str_formats_two_decimals():
    assert str(Point2D(1.5, -2.25)) == "(1.50, -2.25)"


def test_str_rounds():
    assert str(Point2D(0.0, 10.0)) == "(0.00, 10.00)"