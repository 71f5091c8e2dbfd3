import pytest
from hypothesis import given, strategies as st

from gamekit.rects import Rect2D, Rect3D
from gamekit.vectors import Val2D, Val3D

ints = st.integers(-1000, 1000)
sizes = st.integers(0, 1000)


def test_mid_center_even_size():
    assert Rect2D(0, 0, 10, 20).mid_center() == Val2D(5, 10)


def test_integer_halving_truncates_toward_zero():
    assert Rect2D(0, 0, 5, 5).mid_center() == Val2D(2, 2)
    assert Rect2D(0, 0, -5, -5).mid_center() == Val2D(-2, -2)


@given(ints, ints, sizes, sizes)
def test_absolute_holds_far_corner(x, y, w, h):
    r = Rect2D(x, y, w, h)
    a = r.absolute()
    assert a.left_top() == r.left_top()
    assert Val2D(a.w, a.h) == r.right_bottom()


@given(ints, ints, sizes, sizes)
def test_corners_are_inside(x, y, w, h):
    r = Rect2D(x, y, w, h)
    for p in (r.left_top(), r.right_top(), r.left_bottom(), r.right_bottom(), r.mid_center()):
        assert r.in_rect(p)


@given(ints, ints, sizes, sizes)
def test_points_beyond_corners_are_outside(x, y, w, h):
    r = Rect2D(x, y, w, h)
    assert not r.in_rect(r.right_bottom() + 1)
    assert not r.in_rect(r.left_top() - 1)


@given(ints, ints, sizes, sizes)
def test_anchor_points_are_consistent(x, y, w, h):
    r = Rect2D(x, y, w, h)
    assert r.center_top().x == r.mid_center().x == r.center_bottom().x
    assert r.mid_left().y == r.mid_center().y == r.mid_right().y
    assert r.center_top().y == r.left_top().y == r.right_top().y
    assert r.left_bottom().y == r.right_bottom().y == r.center_bottom().y
    assert r.mid_left().x == r.left_top().x
    assert r.mid_right().x == r.right_bottom().x


@given(ints, ints, st.integers(0, 500), st.integers(0, 500))
def test_offset_center_puts_center_on_offset(x, y, hw, hh):
    r = Rect2D(x, y, hw * 2, hh * 2)
    moved = r.offset_center()
    assert moved.mid_center() == r.left_top()
    assert moved.size == r.size


@given(ints, ints, ints, ints)
def test_json_round_trip_2d(x, y, w, h):
    r = Rect2D(x, y, w, h)
    assert r.to_json() == [[x, y], [w, h]]
    assert Rect2D.from_json(r.to_json()) == r


@pytest.mark.parametrize("bad", [[1, 2, 3, 4], [[1, 2]], [[1, 2, 3], [4, 5]], None])
def test_from_json_rejects_bad_shape_2d(bad):
    with pytest.raises(ValueError):
        Rect2D.from_json(bad)


@given(ints, ints, ints, ints)
def test_arithmetic_is_elementwise(x, y, w, h):
    r = Rect2D(x, y, w, h)
    assert r * 2 == r + r
    assert 2 * r == r + r
    assert (r + r) - r == r
    assert r + Rect2D() == r


def test_to_string_contains_both_corners():
    r = Rect2D(1.5, 2.5, 3.0, 4.0)
    s = r.to_string()
    assert s.startswith("{") and s.endswith("}")
    assert r.left_top().to_string() in s
    assert r.right_bottom().to_string() in s


@given(ints, ints, ints, st.integers(0, 500), st.integers(0, 500), st.integers(0, 500))
def test_rect3d_center_and_offset_center(x, y, z, hw, hh, hd):
    r = Rect3D(x, y, z, hw * 2, hh * 2, hd * 2)
    assert r.offset_center().center() == r.left_bottom_back()
    assert r.absolute().off == r.left_bottom_back()
    assert r.absolute().size == r.right_top_front()


@given(ints, ints, ints, sizes, sizes, sizes)
def test_rect3d_in_rect(x, y, z, w, h, d):
    r = Rect3D(x, y, z, w, h, d)
    assert r.in_rect(r.center())
    assert r.in_rect(r.left_bottom_back())
    assert not r.in_rect(r.right_top_front() + 1)
    assert not r.in_rect(r.left_bottom_back() - 1)


@given(ints, ints, ints, ints, ints, ints)
def test_rect3d_json_round_trip(x, y, z, w, h, d):
    r = Rect3D(x, y, z, w, h, d)
    assert r.to_json() == [[x, y, z], [w, h, d]]
    assert Rect3D.from_json(r.to_json()) == r


def test_rect3d_from_json_rejects_bad_shape():
    with pytest.raises(ValueError):
        Rect3D.from_json([[1, 2], [3, 4]])


def test_rect3d_to_string_contains_corners():
    r = Rect3D(0.0, 1.0, 2.0, 3.0, 4.0, 5.0)
    s = r.to_string()
    assert r.left_bottom_back().to_string() in s
    assert r.right_top_front().to_string() in s
    assert Val3D(3.0, 5.0, 7.0).to_string() in s