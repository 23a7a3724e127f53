"""Tests for NURBS curve construction and accessors."""

import pytest

from nurbseval.curve import (
    curve_control_points,
    curve_copy,
    curve_degree,
    curve_domain,
    curve_is_homogenized,
    curve_knots,
    curve_points,
    curve_weights,
    curves_equal,
    is_nurbs_curve,
    nurbs_curve,
)
from nurbseval.errors import InvalidGeometryError

PTS = [(-10, 15, 5), (10, 5, 5), (20, 0, 0)]


def _weighted_curve():
    return nurbs_curve(PTS, 2, [1, 1, 1, 1, 1, 1], [0.5, 0.5, 0.5])


def test_create_curve():
    c = nurbs_curve(PTS, 2, [1, 1, 1, 1, 1, 1])
    assert is_nurbs_curve(c)
    assert c[0] == 'nurbs_curve'
    assert curve_degree(c) == 2
    assert curve_knots(c) == [1.0] * 6


def test_weighted_control_points_are_homogenized():
    c = _weighted_curve()
    assert curve_control_points(c)[2] == [10.0, 0.0, 0.0, 0.5]
    assert curve_weights(c) == [0.5, 0.5, 0.5]
    assert curve_points(c)[0] == pytest.approx([-10, 15, 5])
    assert curve_is_homogenized(c)


def test_domain():
    c = nurbs_curve(PTS, 2, [1, 1, 1, 1, 1, 1])
    assert curve_domain(c) == (1.0, 1.0)
    c2 = nurbs_curve([(0, 0), (1, 1), (2, 0), (3, 1)], 3, [0, 0, 0, 0, 2, 2, 2, 2])
    assert curve_domain(c2) == (0.0, 2.0)


def test_default_knots():
    c = nurbs_curve([(0, 0), (1, 1), (2, -1), (3, 0), (4, 2)], 3)
    assert curve_knots(c) == [0.0, 0.0, 0.0, 0.0, 0.5, 1.0, 1.0, 1.0, 1.0]
    assert curve_control_points(c)[1] == [1.0, 1.0, 0.0, 1.0]


def test_invalid_curve_raises():
    with pytest.raises(InvalidGeometryError):
        nurbs_curve(PTS, 2, [0, 0, 0, 1, 1])
    with pytest.raises(InvalidGeometryError):
        nurbs_curve(PTS, 2, [0, 0, 0.2, 0.8, 1, 1])
    with pytest.raises(ValueError):
        nurbs_curve(PTS, 2, weights=[1.0, -1.0, 1.0])


def test_copy_is_equal_and_independent():
    c = _weighted_curve()
    d = curve_copy(c)
    assert curves_equal(c, d)
    d[1][0][0] = 99.0
    assert curve_control_points(c)[0][0] == -5.0
    assert not curves_equal(c, d)


def test_equality_is_position_wise():
    a = nurbs_curve(PTS, 2)
    b = nurbs_curve(list(reversed(PTS)), 2)
    assert not curves_equal(a, b)
    assert curves_equal(a, nurbs_curve(PTS, 2))
    assert not curves_equal(a, nurbs_curve(PTS, 2, weights=[1.0, 2.0, 1.0]))
    assert not curves_equal(a, nurbs_curve(PTS, 1, [0, 0, 0.5, 1, 1]))


@pytest.mark.parametrize('points,degree', [
    ([], 2),
    ([(0, 0, 0), (1, 1, 0)], 2),
    ([(0, 0, 0), (1, 1, 0), (2, 0, 0)], 0),
])
def test_bad_data_without_knots_raises_invalid_geometry(points, degree):
    with pytest.raises(InvalidGeometryError):
        nurbs_curve(points, degree)
