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

"""NURBS surface definitions.

A surface is the list ``['nurbs_surface', hpts, meta]``.  ``hpts`` is the
2D net of homogeneous control points indexed ``hpts[i][j]``, with ``i``
running along U and ``j`` along V.  ``meta`` holds ``degree_u``,
``degree_v``, ``knots_u`` and ``knots_v``.
"""

from __future__ import annotations

from copy import deepcopy
from typing import List, Optional, Sequence, Tuple

from nurbseval.check import validate_surface_data
from nurbseval.homogeneous import dehomogenize_grid, homogenize_grid, weights_grid
from nurbseval.knots import knot_domain, knot_epsilon, uniform_knots
from nurbseval.vec import epsilon, vclose


def nurbs_surface(points: Sequence[Sequence[Sequence[float]]],
                  degree_u: int, degree_v: int,
                  knots_u: Optional[Sequence[float]] = None,
                  knots_v: Optional[Sequence[float]] = None,
                  weights: Optional[Sequence[Sequence[float]]] = None) -> list:
    """Create a NURBS surface.

    Parameters
    ----------
    points : list of list of points
        Control net ``[u_rows][v_cols]`` of Cartesian points.
    degree_u, degree_v : int
        Degrees in the U and V directions.
    knots_u, knots_v : list of float, optional
        Clamped knot vectors.  Default to equally spaced vectors on
        ``[0, 1]``.
    weights : list of list of float, optional
        Weight net matching ``points``.  Defaults to 1.0 everywhere.

    Returns
    -------
    list
        ``['nurbs_surface', homogeneous_net, meta_dict]``
    """

    degree_u = int(degree_u)
    degree_v = int(degree_v)
    hpts = homogenize_grid(points, weights)
    rows = len(hpts)
    cols = len(hpts[0]) if hpts else 0
    # no default knot vector exists for a bad degree or too few points
    if knots_u is None:
        knots_u = uniform_knots(degree_u, rows) if 1 <= degree_u < rows else []
    if knots_v is None:
        knots_v = uniform_knots(degree_v, cols) if 1 <= degree_v < cols else []
    knots_u = [float(k) for k in knots_u]
    knots_v = [float(k) for k in knots_v]
    validate_surface_data(degree_u, degree_v, knots_u, knots_v, hpts)
    return from_homogeneous(hpts, degree_u, degree_v, knots_u, knots_v)


def from_homogeneous(hpts, degree_u: int, degree_v: int,
                     knots_u: Sequence[float], knots_v: Sequence[float]) -> list:
    """Wrap an already homogeneous control net into a surface, without
    validation."""

    meta = {
        'degree_u': int(degree_u),
        'degree_v': int(degree_v),
        'knots_u': list(knots_u),
        'knots_v': list(knots_v),
    }
    return ['nurbs_surface', [[list(p) for p in row] for row in hpts], meta]


def surface_by_four_points(p1, p2, p3, p4) -> list:
    """Bilinear surface through four corner points given counter-clockwise."""

    pts = [[p1, p4],
           [p2, p3]]
    return nurbs_surface(pts, 1, 1, [0.0, 0.0, 1.0, 1.0], [0.0, 0.0, 1.0, 1.0])


def is_nurbs_surface(obj) -> bool:
    """Return ``True`` if ``obj`` is a NURBS surface."""

    return (isinstance(obj, list) and len(obj) == 3 and obj[0] == 'nurbs_surface'
            and isinstance(obj[1], list) and isinstance(obj[2], dict)
            and 'knots_u' in obj[2] and 'knots_v' in obj[2])


def surface_degree_u(surf) -> int:
    return surf[2]['degree_u']


def surface_degree_v(surf) -> int:
    return surf[2]['degree_v']


def surface_knots_u(surf) -> List[float]:
    return surf[2]['knots_u']


def surface_knots_v(surf) -> List[float]:
    return surf[2]['knots_v']


def surface_control_points(surf) -> List[List[List[float]]]:
    """Homogeneous control net of ``surf``."""
    return surf[1]


def surface_points(surf) -> List[List[List[float]]]:
    """Cartesian control net of ``surf``."""
    return dehomogenize_grid(surf[1])


def surface_weights(surf) -> List[List[float]]:
    return weights_grid(surf[1])


def surface_domain_u(surf) -> Tuple[float, float]:
    return knot_domain(surface_knots_u(surf))


def surface_domain_v(surf) -> Tuple[float, float]:
    return knot_domain(surface_knots_v(surf))


def surface_copy(surf) -> list:
    return deepcopy(surf)


def surfaces_equal(a, b) -> bool:
    """Position-wise comparison of two surfaces."""

    if (surface_degree_u(a) != surface_degree_u(b)
            or surface_degree_v(a) != surface_degree_v(b)):
        return False
    for ka, kb in ((surface_knots_u(a), surface_knots_u(b)),
                   (surface_knots_v(a), surface_knots_v(b))):
        if len(ka) != len(kb) or not vclose(ka, kb, knot_epsilon):
            return False
    na, nb = surface_control_points(a), surface_control_points(b)
    if len(na) != len(nb):
        return False
    for ra, rb in zip(na, nb):
        if len(ra) != len(rb):
            return False
        if not all(vclose(p, q, epsilon) for p, q in zip(ra, rb)):
            return False
    return True


__all__ = [
    'nurbs_surface',
    'from_homogeneous',
    'surface_by_four_points',
    'is_nurbs_surface',
    'surface_degree_u',
    'surface_degree_v',
    'surface_knots_u',
    'surface_knots_v',
    'surface_control_points',
    'surface_points',
    'surface_weights',
    'surface_domain_u',
    'surface_domain_v',
    'surface_copy',
    'surfaces_equal',
]
