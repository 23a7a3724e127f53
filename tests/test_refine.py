"""Tests for knot refinement and curve splitting."""

from copy import deepcopy

import pytest

from nurbseval.curve import (
    curve_control_points,
    curve_domain,
    curve_knots,
    curves_equal,
    nurbs_curve,
)
from nurbseval.curve_eval import evaluate_curve
from nurbseval.refine import (
    curve_knot_refine,
    refine_knot_vect,
    split_curve,
    surface_knot_refine,
)
from nurbseval.surface import (
    nurbs_surface,
    surface_control_points,
    surface_knots_u,
    surface_knots_v,
    surfaces_equal,
)
from nurbseval.surface_eval import evaluate_surface

KNOTS = [0, 0, 0, 0, 1, 2, 3, 4, 5, 5, 5, 5]


def _cubic(weighted=True):
    pts = [(float(i), float(i % 3), 0.1 * i * i) for i in range(8)]
    weights = [1.0, 2.0, 0.5, 1.0, 1.5, 1.0, 3.0, 1.0] if weighted else None
    return nurbs_curve(pts, 3, KNOTS, weights)


def _surface():
    net = [[(float(i), float(j), float((i * j) % 3)) for j in range(5)] for i in range(4)]
    weights = [[1.0 + 0.25 * ((i + j) % 3) for j in range(5)] for i in range(4)]
    return nurbs_surface(net, 2, 3, [0, 0, 0, 0.6, 1, 1, 1],
                         [0, 0, 0, 0, 0.5, 1, 1, 1, 1], weights)


def _params(lo, hi, n=21):
    return [lo + (hi - lo) * i / (n - 1) for i in range(n)]


def test_refine_knot_vect_inserts_sorted_knots():
    hpts = [[float(i), 0.0, 0.0, 1.0] for i in range(8)]
    ubar, qw = refine_knot_vect(3, KNOTS, hpts, [0.5, 2.0, 4.5])
    assert ubar == [0, 0, 0, 0, 0.5, 1, 2, 2, 3, 4, 4.5, 5, 5, 5, 5]
    assert len(qw) == 11


def test_curve_refine_preserves_shape():
    curve = _cubic()
    refined = curve_knot_refine(curve, [2.5, 0.5, 4.2, 2.5])
    assert len(curve_control_points(refined)) == 12
    assert curve_knots(refined) == [0, 0, 0, 0, 0.5, 1, 2, 2.5, 2.5, 3, 4, 4.2, 5, 5, 5, 5]
    for t in _params(0.0, 5.0):
        assert evaluate_curve(refined, t) == pytest.approx(evaluate_curve(curve, t))


def test_curve_refine_at_existing_knot():
    curve = _cubic()
    refined = curve_knot_refine(curve, [2.0, 2.0])
    assert curve_knots(refined).count(2.0) == 3
    for t in _params(0.0, 5.0):
        assert evaluate_curve(refined, t) == pytest.approx(evaluate_curve(curve, t))


def test_curve_refine_with_nothing_returns_copy():
    curve = _cubic()
    refined = curve_knot_refine(curve, [])
    assert refined is not curve
    assert curves_equal(refined, curve)


def test_curve_refine_leaves_input_untouched():
    curve = _cubic()
    before = deepcopy(curve)
    curve_knot_refine(curve, [1.5, 3.5])
    assert curve == before


@pytest.mark.parametrize('use_u', [True, False])
def test_surface_refine_preserves_shape(use_u):
    surf = _surface()
    before = deepcopy(surf)
    refined = surface_knot_refine(surf, [0.25, 0.75, 0.75], use_u)
    assert surf == before
    net = surface_control_points(refined)
    if use_u:
        assert len(net) == 7 and len(net[0]) == 5
        assert surface_knots_u(refined) == [0, 0, 0, 0.25, 0.6, 0.75, 0.75, 1, 1, 1]
        assert surface_knots_v(refined) == surface_knots_v(surf)
    else:
        assert len(net) == 4 and len(net[0]) == 8
        assert surface_knots_v(refined) == [0, 0, 0, 0, 0.25, 0.5, 0.75, 0.75, 1, 1, 1, 1]
        assert surface_knots_u(refined) == surface_knots_u(surf)
    for u in _params(0.0, 1.0, 9):
        for v in _params(0.0, 1.0, 9):
            assert evaluate_surface(refined, u, v) == pytest.approx(evaluate_surface(surf, u, v))


def test_surface_refine_with_nothing_returns_copy():
    surf = _surface()
    refined = surface_knot_refine(surf, [], use_u=False)
    assert refined is not surf
    assert surfaces_equal(refined, surf)


@pytest.mark.parametrize('t', [0.5, 2.0, 3.5])
def test_split_curve(t):
    curve = _cubic()
    first, second = split_curve(curve, t)

    assert curve_knots(first)[-4:] == [t] * 4
    assert curve_knots(second)[:4] == [t] * 4
    assert curve_domain(first) == (0, t)
    assert curve_domain(second) == (t, 5)

    joint = evaluate_curve(curve, t)
    assert evaluate_curve(first, t) == pytest.approx(joint)
    assert evaluate_curve(second, t) == pytest.approx(joint)
    assert curve_control_points(first)[-1] == pytest.approx(curve_control_points(second)[0])

    for s in _params(0.0, t):
        assert evaluate_curve(first, s) == pytest.approx(evaluate_curve(curve, s))
    for s in _params(t, 5.0):
        assert evaluate_curve(second, s) == pytest.approx(evaluate_curve(curve, s))


@pytest.mark.parametrize('t', [0.0, 5.0, -1.0, 6.0])
def test_split_outside_domain_raises(t):
    with pytest.raises(ValueError):
        split_curve(_cubic(), t)
