import pytest

from nurbseval.homogeneous import (
    binomial,
    dehomogenize,
    dehomogenize_all,
    homogenize,
    homogenize_grid,
    rational_points,
    weights,
    weights_grid,
)


def test_homogenize_weighted_points():
    pts = [(-10, 15, 5), (10, 5, 5), (20, 0, 0)]
    hpts = homogenize(pts, [0.5, 0.5, 0.5])
    assert hpts[0] == [-5.0, 7.5, 2.5, 0.5]
    assert hpts[2] == [10.0, 0.0, 0.0, 0.5]


def test_homogenize_defaults_to_unit_weights():
    hpts = homogenize([(1, 2, 3), (4, 5)])
    assert hpts == [[1.0, 2.0, 3.0, 1.0], [4.0, 5.0, 0.0, 1.0]]


def test_homogenize_rejects_bad_weights():
    with pytest.raises(ValueError):
        homogenize([(0, 0, 0), (1, 0, 0)], [1.0])
    with pytest.raises(ValueError):
        homogenize([(0, 0, 0), (1, 0, 0)], [1.0, 0.0])
    with pytest.raises(ValueError):
        homogenize([(0, 0, 0)], [True])


def test_dehomogenize_round_trip():
    pts = [(1, 2, 3), (-4, 0.5, 2)]
    hpts = homogenize(pts, [2.0, 0.25])
    assert dehomogenize(hpts[0]) == pytest.approx([1, 2, 3])
    assert dehomogenize_all(hpts)[1] == pytest.approx([-4, 0.5, 2])


def test_weights_and_rational_points():
    hpts = [[2.0, 4.0, 6.0, 2.0], [1.0, 1.0, 1.0, 0.5]]
    assert weights(hpts) == [2.0, 0.5]
    assert rational_points(hpts) == [[2.0, 4.0, 6.0], [1.0, 1.0, 1.0]]


def test_grid_helpers():
    grid = homogenize_grid([[(0, 0, 0), (0, 1, 0)], [(1, 0, 0), (1, 1, 1)]],
                           [[1.0, 2.0], [0.5, 1.0]])
    assert weights_grid(grid) == [[1.0, 2.0], [0.5, 1.0]]
    assert grid[0][1] == [0.0, 2.0, 0.0, 2.0]
    with pytest.raises(ValueError):
        homogenize_grid([[(0, 0, 0)]], [[1.0], [1.0]])


@pytest.mark.parametrize('n,k,expected', [
    (0, 0, 1.0),
    (4, 2, 6.0),
    (5, 1, 5.0),
    (6, 3, 20.0),
    (3, 4, 0.0),
    (3, -1, 0.0),
])
def test_binomial(n, k, expected):
    assert binomial(n, k) == expected
