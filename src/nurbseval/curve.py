## Copyright (c) 2025 the nurbseval authors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""NURBS curve definitions.

A curve is the list ``['nurbs_curve', hpts, meta]`` where ``hpts`` holds
the homogeneous control points (see :mod:`nurbseval.homogeneous`) and
``meta`` is ``{'degree': int, 'knots': list}``.
"""

from __future__ import annotations

from copy import deepcopy
from typing import List, Optional, Sequence, Tuple

from nurbseval.check import validate_curve_data
from nurbseval.homogeneous import dehomogenize_all, homogenize, weights as point_weights
from nurbseval.knots import knot_domain, knot_epsilon, uniform_knots
from nurbseval.vec import epsilon, vclose


def nurbs_curve(points: Sequence[Sequence[float]], degree: int,
                knots: Optional[Sequence[float]] = None,
                weights: Optional[Sequence[float]] = None) -> list:
    """Create a NURBS curve.

    Parameters
    ----------
    points : list of points
        Cartesian control points, 2D or 3D.
    degree : int
        Degree of the curve.
    knots : list of float, optional
        Clamped knot vector of ``len(points) + degree + 1`` values.
        Defaults to a clamped, equally spaced vector on ``[0, 1]``.
    weights : list of float, optional
        Positive weights, one per control point.  Defaults to 1.0.

    Returns
    -------
    list
        ``['nurbs_curve', homogeneous_points, meta_dict]``

    Raises
    ------
    InvalidGeometryError
        If the degree, knots and control points do not form a valid curve.
    """

    degree = int(degree)
    if knots is None:
        # no default knot vector exists for a bad degree or too few points
        knots = uniform_knots(degree, len(points)) if 1 <= degree < len(points) else []
    knots = [float(k) for k in knots]
    hpts = homogenize(points, weights)
    validate_curve_data(degree, knots, hpts)
    return from_homogeneous(hpts, degree, knots)


def from_homogeneous(hpts: Sequence[Sequence[float]], degree: int,
                     knots: Sequence[float]) -> list:
    """Wrap already homogeneous control points into a curve, without
    validation."""

    return ['nurbs_curve',
            [list(p) for p in hpts],
            {'degree': int(degree), 'knots': list(knots)}]


def is_nurbs_curve(obj) -> bool:
    """Return ``True`` if ``obj`` is a NURBS curve."""

    return (isinstance(obj, list) and len(obj) == 3 and obj[0] == 'nurbs_curve'
            and isinstance(obj[1], list) and isinstance(obj[2], dict))


def curve_degree(curve) -> int:
    return curve[2]['degree']


def curve_knots(curve) -> List[float]:
    return curve[2]['knots']


def curve_control_points(curve) -> List[List[float]]:
    """Homogeneous control points of ``curve``."""
    return curve[1]


def curve_points(curve) -> List[List[float]]:
    """Cartesian control points of ``curve``."""
    return dehomogenize_all(curve[1])


def curve_weights(curve) -> List[float]:
    return point_weights(curve[1])


def curve_domain(curve) -> Tuple[float, float]:
    return knot_domain(curve_knots(curve))


def curve_is_homogenized(curve) -> bool:
    """Return ``True`` if every control point carries a positive weight channel."""

    return all(len(p) == 4 and p[3] > 0.0 for p in curve[1])


def curve_copy(curve) -> list:
    return deepcopy(curve)


def curves_equal(a, b) -> bool:
    """Position-wise comparison of two curves.

    Degrees must match and knots and homogeneous control points must
    agree index by index.
    """

    if curve_degree(a) != curve_degree(b):
        return False
    ka, kb = curve_knots(a), curve_knots(b)
    if len(ka) != len(kb) or not vclose(ka, kb, knot_epsilon):
        return False
    pa, pb = curve_control_points(a), curve_control_points(b)
    if len(pa) != len(pb):
        return False
    return all(vclose(p, q, epsilon) for p, q in zip(pa, pb))


__all__ = [
    'nurbs_curve',
    'from_homogeneous',
    'is_nurbs_curve',
    'curve_degree',
    'curve_knots',
    'curve_control_points',
    'curve_points',
    'curve_weights',
    'curve_domain',
    'curve_is_homogenized',
    'curve_copy',
    'curves_equal',
]
