import math

from planeshapes.point import Point


def test_default_coordinates_are_origin():
    p = Point()
    assert (p.x, p.y) == (0, 0)


def test_distance_pythagorean_triple():
    assert math.isclose(Point(0, 0).distance(Point(3, 4)), 5.0)


def test_distance_defaults_to_origin():
    p = Point(-2.5, 7.25)
    assert math.isclose(p.distance(), p.distance(Point()))
    assert math.isclose(p.distance(), math.hypot(p.x, p.y))


def test_distance_is_symmetric():
    p = Point(1.5, -3.0)
    q = Point(-4.0, 2.0)
    assert math.isclose(p.distance(q), q.distance(p))


def test_distance_to_self_is_zero():
    p = Point(12.0, -8.0)
    assert p.distance(p) == 0


def test_triangle_inequality():
    p, q, r = Point(0, 0), Point(5, 1), Point(2, 7)
    assert p.distance(r) <= p.distance(q) + q.distance(r)


def test_points_compare_by_value():
    assert Point(1, 2) == Point(1.0, 2.0)
    assert Point(1, 2) != Point(2, 1)