import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kdcluster.utility import at, distance

coords = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)
points3 = st.tuples(coords, coords, coords)


def test_at_returns_coordinate():
    point = (1.5, 2.5, 3.5)
    assert [at(point, axis) for axis in range(3)] == [1.5, 2.5, 3.5]


def test_at_rejects_axis_beyond_dimension():
    with pytest.raises(IndexError, match="axis out of range"):
        at((1.0, 2.0, 3.0), 3)


def test_at_respects_smaller_dimension():
    with pytest.raises(IndexError):
        at((1.0, 2.0, 3.0), 2, dimension=2)
    assert at((1.0, 2.0, 3.0), 1, dimension=2) == 2.0


def test_distance_worked_example():
    assert distance((0.0, 0.0, 0.0), (3.0, 4.0, 0.0)) == pytest.approx(5.0)


def test_distance_uses_only_first_dimension_axes():
    assert distance((0.0, 0.0, 100.0), (3.0, 4.0, -50.0), dimension=2) == pytest.approx(5.0)


def test_distance_with_custom_value_at():
    def value_at(point, axis):
        return point["xyz"[axis]]

    p1 = {"x": 1.0, "y": 1.0, "z": 1.0}
    p2 = {"x": 1.0, "y": 1.0, "z": 4.0}
    assert distance(p1, p2, value_at) == pytest.approx(3.0)


@given(points3, points3)
def test_distance_is_symmetric_and_non_negative(p1, p2):
    d = distance(p1, p2)
    assert d >= 0.0
    assert math.isclose(d, distance(p2, p1))


@given(points3)
def test_distance_to_self_is_zero(p):
    assert distance(p, p) == 0.0