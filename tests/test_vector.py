import math

import pytest

from zenkit.types import Point2, Size2
from zenkit.vector import Vector2, Vector3, Vector4


def test_add_then_subtract_round_trip():
    a = Vector3(1.5, -2.0, 3.25)
    b = Vector3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_scalar_multiply_matches_repeated_add():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    assert a * 2 == a + a


def test_divide_undoes_multiply():
    a = Vector2(3.0, -5.0)
    assert (a * 4.0) / 4.0 == a


def test_componentwise_multiply_and_divide():
    a = Vector2(2.0, 8.0)
    b = Vector2(4.0, 2.0)
    assert (a * b) / b == a


def test_negation():
    a = Vector3(1.0, -2.0, 3.0)
    assert -a == Vector3(-1.0, 2.0, -3.0)
    assert a + (-a) == 0.0


def test_scalar_equality():
    assert Vector2(2.0, 2.0) == 2.0
    assert not (Vector2(2.0, 3.0) == 2.0)


def test_scalar_add_and_subtract():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    assert (a + 1.5) - 1.5 == a


def test_length_of_three_four():
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)
    assert Vector2(3.0, 4.0).length2() == pytest.approx(25.0)


def test_normalize_gives_unit_length():
    for v in (Vector2(3.0, -7.0), Vector3(1.0, 2.0, 2.0), Vector4(1.0, -1.0, 2.0, 5.0)):
        assert v.normalize().length() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3().normalize()


def test_dot_of_perpendicular_vectors_is_zero():
    assert Vector2(1.0, 2.0).dot(Vector2(-2.0, 1.0)) == 0.0


def test_distance_is_length_of_difference():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -1.0, 0.5)
    assert a.distance(b) == pytest.approx((b - a).length())
    assert a.distance2(b) == pytest.approx((b - a).length2())
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_lerp_end_points():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(5.0, 6.0, 7.0, 8.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_cross_of_axes():
    x = Vector3(1.0, 0.0, 0.0)
    y = Vector3(0.0, 1.0, 0.0)
    z = Vector3(0.0, 0.0, 1.0)
    assert x.cross(y) == z
    assert y.cross(x) == -z


def test_cross_is_perpendicular():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vector4_cross_matches_vector3_and_zeroes_w():
    a = Vector4(1.0, 2.0, 3.0, 9.0)
    b = Vector4(-2.0, 0.5, 4.0, 7.0)
    c = a.cross(b)
    expected = Vector3(1.0, 2.0, 3.0).cross(Vector3(-2.0, 0.5, 4.0))
    assert c == Vector4.from_vector3(expected, 0.0)
    assert c.w == 0.0


def test_project_onto_itself_and_parallel():
    v = Vector2(2.0, 6.0)
    assert v.project(v) == v
    p = Vector3(1.0, 0.0, 0.0)
    proj = Vector3(3.0, 4.0, 5.0).project(p)
    assert proj.y == 0.0 and proj.z == 0.0
    assert proj.x == pytest.approx(3.0)


def test_project_residual_is_perpendicular():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    p = Vector4(0.5, -1.0, 2.0, 1.0)
    residual = v - v.project(p)
    assert residual.dot(p) == pytest.approx(0.0)


def test_indexing_and_setting():
    v = Vector3(1.0, 2.0, 3.0)
    assert [v[0], v[1], v[2]] == [1.0, 2.0, 3.0]
    v[1] = 9.0
    assert v.y == 9.0
    with pytest.raises(IndexError):
        v[3]


def test_iteration_and_from_values():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert Vector4.from_values(list(v)) == v
    assert len(v) == 4
    with pytest.raises(ValueError):
        Vector2.from_values([1.0, 2.0, 3.0])


def test_from_vector3():
    v = Vector4.from_vector3(Vector3(1.0, 2.0, 3.0), 4.0)
    assert tuple(v) == (1.0, 2.0, 3.0, 4.0)


def test_point_and_size_conversions():
    v = Vector2.from_point(Point2(1.5, 2.5))
    assert v == Vector2(1.5, 2.5)
    assert v.to_point() == Point2(1.5, 2.5)
    assert v.to_size() == Size2(1.5, 2.5)


def test_str_format():
    assert str(Vector2(1.5, 2.0)) == "1.5,2"
    assert str(Vector3(0.0, -1.0, 3.0)) == "0,-1,3"
    assert str(Vector4(1.0, 3.0, 0.43, 3.0)) == "1,3,0.43,3"


def test_mixed_types_not_supported():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) + Vector3(1.0, 2.0, 3.0)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2(1.0, 2.0))


def test_length_matches_math_hypot():
    v = Vector3(2.0, 3.0, 6.0)
    assert v.length() == pytest.approx(math.hypot(2.0, 3.0, 6.0))