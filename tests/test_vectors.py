import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gamekit.vectors import Polar2D, Val2D, Val3D

coord = st.floats(min_value=-1000, max_value=1000, allow_nan=False)
angle = st.floats(min_value=-10, max_value=10, allow_nan=False)


def close(a, b, tol=1e-6):
    return all(math.isclose(p, q, abs_tol=tol) for p, q in zip(a, b))


def test_val2d_elementwise_arithmetic():
    a = Val2D(1, 2)
    b = Val2D(3, 5)
    assert a + b == Val2D(4, 7)
    assert b - a == Val2D(2, 3)
    assert a * b == Val2D(3, 10)
    assert a * 2 == Val2D(2, 4)
    assert 2 * a == Val2D(2, 4)
    assert -a == Val2D(-1, -2)
    assert list(a) == [1, 2]
    assert a[1] == 2


def test_val2d_comparison_is_componentwise_strict():
    assert Val2D(1, 1) < Val2D(2, 2)
    assert not Val2D(1, 3) < Val2D(2, 2)
    assert Val2D(3, 3) > Val2D(2, 2)
    assert Val2D(1, 3) <= Val2D(2, 2)


@given(coord, coord, coord, coord)
def test_dot_symmetric_cross_antisymmetric(ax, ay, bx, by):
    a, b = Val2D(ax, ay), Val2D(bx, by)
    assert a.dot(b) == b.dot(a)
    assert a.cross(b) == -b.cross(a)


@given(coord, coord, angle)
def test_rotate_preserves_length(x, y, t):
    v = Val2D(x, y)
    assert math.isclose(v.rotate(t).length(), v.length(), rel_tol=1e-9, abs_tol=1e-6)


def test_rotate_quarter_turn_is_counter_clockwise():
    r = Val2D(1, 0).rotate(math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_angle_and_angle_to():
    v = Val2D(0, 3)
    assert math.isclose(v.angle(), math.pi / 2)
    assert math.isclose(Val2D(1, 0).angle_to(v), math.pi / 2)
    assert math.isclose(v.angle_to(Val2D(1, 0)), -math.pi / 2)


@given(coord, coord)
def test_normalized_has_unit_length(x, y):
    v = Val2D(x, y)
    if v.length() > 1e-3:
        assert math.isclose(v.normalized().length(), 1.0, rel_tol=1e-9)
    else:
        assert v.length() <= 1e-3


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Val2D(0, 0).normalized()


def test_intersection_of_crossing_segments():
    l1 = (Val2D(0, 0), Val2D(4, 4))
    l2 = (Val2D(0, 4), Val2D(4, 0))
    p = Val2D.intersection(l1, l2)
    assert close(p, Val2D(2, 2))
    assert math.isclose((p - l1[0]).cross(l1[1] - l1[0]), 0, abs_tol=1e-9)
    assert math.isclose((p - l2[0]).cross(l2[1] - l2[0]), 0, abs_tol=1e-9)


def test_intersection_misses():
    parallel = Val2D.intersection((Val2D(0, 0), Val2D(1, 0)), (Val2D(0, 1), Val2D(1, 1)))
    assert parallel == Val2D(math.inf, math.inf)
    apart = Val2D.intersection((Val2D(0, 0), Val2D(1, 1)), (Val2D(5, 0), Val2D(4, 1)))
    assert apart == Val2D(math.inf, math.inf)


@given(coord, coord, coord, coord)
def test_distance_matches_length_of_difference(ax, ay, bx, by):
    a, b = Val2D(ax, ay), Val2D(bx, by)
    assert math.isclose(Val2D.distance(a, b), (a - b).length())
    assert math.isclose(Val2D.distance(a, b), Val2D.distance(b, a))


def test_lerp_endpoints():
    a, b = Val2D(1, 2), Val2D(5, 10)
    assert Val2D.lerp(a, b, 0) == a
    assert Val2D.lerp(a, b, 1) == b
    assert Val2D.lerp(a, b, 0.5) == (a + b) / 2


def test_val2d_to_string_format():
    assert Val2D(1, 2).to_string() == "{   1.000000,    2.000000}"
    assert Val2D(1.5, -2).to_string(0, 1) == "{1.5, -2.0}"
    assert str(Val2D(1, 2)) == Val2D(1, 2).to_string()


@given(coord, coord, coord, coord, coord, coord)
def test_val3d_cross_orthogonal(ax, ay, az, bx, by, bz):
    a, b = Val3D(ax, ay, az), Val3D(bx, by, bz)
    c = a.cross(b)
    scale = max(1.0, a.length() * b.length() * max(a.length(), b.length()))
    assert abs(c.dot(a)) <= 1e-9 * scale
    assert abs(c.dot(b)) <= 1e-9 * scale


def test_val3d_cross_of_axes():
    assert Val3D(1, 0, 0).cross(Val3D(0, 1, 0)) == Val3D(0, 0, 1)


def test_val3d_arithmetic_and_ordering():
    a = Val3D(1, 2, 3)
    assert a + a == a * 2
    assert a - a == Val3D()
    assert Val3D(0, 0, 0) < a
    assert not Val3D(0, 5, 0) < a
    assert list(-a) == [-1, -2, -3]


@given(coord, coord, coord, angle)
def test_val3d_rotations_preserve_length(x, y, z, t):
    v = Val3D(x, y, z)
    for r in (v.rotate_x(t), v.rotate_y(t), v.rotate_z(t), v.rotate(Val3D(t, t, t))):
        assert math.isclose(r.length(), v.length(), rel_tol=1e-9, abs_tol=1e-6)


@given(coord, coord, coord, angle)
def test_val3d_rotation_keeps_axis_component(x, y, z, t):
    v = Val3D(x, y, z)
    assert v.rotate_x(t).x == v.x
    assert v.rotate_y(t).y == v.y
    assert v.rotate_z(t).z == v.z


def test_rotate_base_matches_rotate_x():
    v = Val3D(1, 2, 3)
    assert Val3D.rotate_base(v, 0.7) == v.rotate_x(0.7)
    assert close(Val3D.rotate_base(Val3D(0, 1, 0), math.pi / 2), Val3D(0, 0, 1))


def test_val3d_angles():
    v = Val3D(1, 2, 3)
    assert v.angles() == Val3D(v.angle_x(), v.angle_y(), v.angle_z())
    assert math.isclose(v.angle_z(), Val2D(1, 2).angle())
    assert math.isclose(v.angle_x(), Val2D(2, 3).angle())
    assert math.isclose(v.angle_y(), Val2D(3, 1).angle())


def test_val3d_distance_uses_xy_plane():
    assert Val3D.distance(Val3D(1, 2, 3), Val3D(1, 2, 10)) == 0
    a, b = Val3D(1, 2, 3), Val3D(4, 6, 3)
    assert math.isclose(Val3D.distance(a, b), Val2D.distance(Val2D(1, 2), Val2D(4, 6)))


def test_val3d_lerp_and_normalize():
    a, b = Val3D(0, 0, 0), Val3D(2, 4, 6)
    assert Val3D.lerp(a, b, 0.5) == b / 2
    assert math.isclose(b.normalized().length(), 1.0)


def test_val3d_to_string():
    assert Val3D(1, 2, 3).to_string(0, 2) == "{1.00, 2.00, 3.00}"


@given(coord, coord)
def test_polar_round_trip(x, y):
    v = Val2D(x, y)
    p = Polar2D.parse(v)
    assert math.isclose(p.radius, v.length())
    assert close(p.pos(), v, tol=1e-6 * max(1.0, v.length()))


def test_polar_pos_of_angle():
    p = Polar2D(2, math.pi)
    assert close(p.pos(), Val2D(-2, 0))
    assert Polar2D().pos() == Val2D(0, 0)