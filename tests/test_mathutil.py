import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gamekit.mathutil import abs_value, combination, lerp


def test_abs_value_of_negative():
    assert abs_value(-2.5) == 2.5


def test_abs_value_of_positive_is_unchanged():
    assert abs_value(3.25) == 3.25


def test_abs_value_clears_sign_of_negative_zero():
    assert math.copysign(1.0, abs_value(-0.0)) == 1.0


@given(st.floats(allow_nan=False, allow_infinity=True))
def test_abs_value_is_even_and_non_negative(x):
    result = abs_value(x)
    assert result >= 0
    assert result == abs_value(-x)


def test_combination_pinned_value():
    assert combination(5, 2) == 10


@pytest.mark.parametrize("n", [0, 1, 4, 9])
def test_combination_edges(n):
    assert combination(n, 0) == 1
    assert combination(n, n) == 1


@pytest.mark.parametrize("n", [1, 3, 7, 20])
def test_combination_choose_one(n):
    assert combination(n, 1) == n


def test_combination_out_of_range_is_zero():
    assert combination(3, 4) == 0
    assert combination(3, -1) == 0


@given(st.integers(min_value=1, max_value=60), st.data())
def test_combination_pascal_and_symmetry(n, data):
    k = data.draw(st.integers(min_value=1, max_value=n))
    assert combination(n, k) == combination(n, n - k)
    assert combination(n, k) == combination(n - 1, k - 1) + combination(n - 1, k)


def test_lerp_midpoint():
    assert lerp(2, 4, 0.5) == 3


@given(
    st.floats(min_value=-1e6, max_value=1e6),
    st.floats(min_value=-1e6, max_value=1e6),
)
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0) == a
    assert lerp(a, b, 1) == pytest.approx(b, abs=1e-6)


def test_lerp_works_with_complex_values():
    assert lerp(1 + 1j, 3 + 3j, 0.5) == 2 + 2j