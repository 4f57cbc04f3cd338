import math

import pytest

from aockit.vector import DOWN, LEFT, RIGHT, UP, Vector, to_vector, zero


def test_to_vector_parses_components():
    assert tuple(to_vector("1,2.5,-3")) == (1.0, 2.5, -3.0)


@pytest.mark.parametrize("text", ["1,x", " 1,2", "1,,2"])
def test_to_vector_malformed_gives_zero(text):
    assert to_vector(text) == zero(len(text.split(",")))


def test_zero_has_requested_length():
    vec = zero(3)
    assert len(vec) == 3
    assert all(c == 0.0 for c in vec)


def test_add_sub_round_trip():
    a = Vector([1.5, -2, 7])
    b = Vector([4, 0.25, -1])
    assert a.add(b).sub(b) == a


def test_add_length_mismatch_returns_self():
    a = Vector([1, 2])
    assert a.add(Vector([1, 2, 3])) is a
    assert a.sub(Vector([1])) is a


def test_magnitude_of_classic_triangle():
    assert Vector([3, 4]).magnitude() == 5.0


def test_mul_scales_magnitude():
    vec = Vector([1, -2, 2])
    assert math.isclose(vec.mul(2.5).magnitude(), 2.5 * vec.magnitude())


def test_normalized_has_unit_length():
    vec = Vector([2, -7, 1])
    assert math.isclose(vec.normalized().magnitude(), 1.0)


def test_normalized_zero_vector_is_nan():
    result = zero(2).normalized()
    assert [math.isnan(c) for c in result] == [True, True]


def test_ceil_rounds_away_from_zero():
    assert Vector([0.5, -0.5, 2.0]).ceil() == Vector([1, -1, 2])


def test_opposite_directions_cancel():
    assert UP.add(DOWN) == zero(2)
    assert LEFT.add(RIGHT) == zero(2)


def test_vectors_are_hashable_by_value():
    assert {Vector([1, 2]), Vector([1.0, 2.0])} == {Vector([1, 2])}