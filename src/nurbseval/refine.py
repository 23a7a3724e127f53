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

"""Knot refinement for NURBS curves and surfaces.

Refinement inserts new knots without changing the shape of the geometry,
producing more control points.  Every function returns new geometry; the
inputs are never modified.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from nurbseval.check import require_valid_relation
from nurbseval.curve import (
    curve_control_points,
    curve_copy,
    curve_degree,
    curve_knots,
    from_homogeneous as curve_from_homogeneous,
)
from nurbseval.knots import find_span, knot_epsilon, knot_multiplicity
from nurbseval.surface import (
    from_homogeneous as surface_from_homogeneous,
    surface_control_points,
    surface_copy,
    surface_degree_u,
    surface_degree_v,
    surface_knots_u,
    surface_knots_v,
)

log = logging.getLogger(__name__)


def refine_knot_vect(degree: int, knots: Sequence[float], hpts: Sequence[Sequence[float]],
                     x: Sequence[float]) -> Tuple[List[float], List[List[float]]]:
    """Insert the sorted knots ``x`` into ``knots``.

    Algorithm A5.4 from *The NURBS Book*.  Returns the refined knot vector
    and control points ``(ubar, qw)``.
    """

    p = degree
    n = len(hpts) - 1
    m = n + p + 1
    r = len(x) - 1
    a = find_span(p, knots, x[0])
    b = find_span(p, knots, x[r]) + 1

    qw: List[List[float]] = [[] for _ in range(n + r + 2)]
    ubar = [0.0] * (m + r + 2)
    # unchanged control points and knots on both ends
    for j in range(a - p + 1):
        qw[j] = list(hpts[j])
    for j in range(b - 1, n + 1):
        qw[j + r + 1] = list(hpts[j])
    for j in range(a + 1):
        ubar[j] = knots[j]
    for j in range(b + p, m + 1):
        ubar[j + r + 1] = knots[j]

    i = b + p - 1
    k = b + p + r
    for j in range(r, -1, -1):
        while x[j] <= knots[i] and i > a:
            qw[k - p - 1] = list(hpts[i - p - 1])
            ubar[k] = knots[i]
            k -= 1
            i -= 1
        qw[k - p - 1] = list(qw[k - p])
        for t in range(1, p + 1):
            ind = k - p + t
            alpha = ubar[k + t] - x[j]
            if abs(alpha) < knot_epsilon:
                qw[ind - 1] = list(qw[ind])
            else:
                alpha /= ubar[k + t] - knots[i - p + t]
                qw[ind - 1] = [alpha * c0 + (1.0 - alpha) * c1
                               for c0, c1 in zip(qw[ind - 1], qw[ind])]
        ubar[k] = x[j]
        k -= 1

    return ubar, qw


def curve_knot_refine(curve, knots_to_insert: Sequence[float]) -> list:
    """Return a copy of ``curve`` with ``knots_to_insert`` added to its knots."""

    if len(knots_to_insert) == 0:
        return curve_copy(curve)

    degree = curve_degree(curve)
    knots = curve_knots(curve)
    hpts = curve_control_points(curve)
    require_valid_relation(knots, degree, len(hpts))

    x = sorted(float(k) for k in knots_to_insert)
    ubar, qw = refine_knot_vect(degree, knots, hpts, x)
    return curve_from_homogeneous(qw, degree, ubar)


def surface_knot_refine(surf, knots_to_insert: Sequence[float], use_u: bool = True) -> list:
    """Return a copy of ``surf`` with knots inserted in one direction.

    With ``use_u`` the knots go into the U knot vector and every column of
    the control net is refined, otherwise every row is refined against the
    V knot vector.
    """

    if len(knots_to_insert) == 0:
        return surface_copy(surf)

    p = surface_degree_u(surf)
    q = surface_degree_v(surf)
    knots_u = surface_knots_u(surf)
    knots_v = surface_knots_v(surf)
    hpts = surface_control_points(surf)
    require_valid_relation(knots_u, p, len(hpts), 'u')
    require_valid_relation(knots_v, q, len(hpts[0]), 'v')

    x = sorted(float(k) for k in knots_to_insert)
    log.debug('refining surface in %s direction with knots %s', 'u' if use_u else 'v', x)

    if use_u:
        columns = []
        new_knots: List[float] = []
        for j in range(len(hpts[0])):
            new_knots, col = refine_knot_vect(p, knots_u, [row[j] for row in hpts], x)
            columns.append(col)
        net = [[columns[j][i] for j in range(len(columns))]
               for i in range(len(columns[0]))]
        return surface_from_homogeneous(net, p, q, new_knots, knots_v)

    net = []
    new_knots = []
    for row in hpts:
        new_knots, new_row = refine_knot_vect(q, knots_v, row, x)
        net.append(new_row)
    return surface_from_homogeneous(net, p, q, knots_u, new_knots)


def split_curve(curve, t: float) -> Tuple[list, list]:
    """Split ``curve`` at parameter ``t`` into two curves.

    ``t`` is inserted until it has multiplicity ``degree + 1``; the first
    curve ends and the second starts at the point ``curve(t)``.
    """

    degree = curve_degree(curve)
    knots = curve_knots(curve)
    if not knots[0] < t < knots[-1]:
        raise ValueError(f'split parameter {t} must lie inside the domain '
                         f'({knots[0]}, {knots[-1]})')

    needed = degree + 1 - knot_multiplicity(knots, t)
    refined = curve_knot_refine(curve, [t] * max(needed, 0))
    rknots = curve_knots(refined)
    rpts = curve_control_points(refined)

    # first index of the control point lying on the curve at t
    k = find_span(degree, rknots, t) - degree
    first = curve_from_homogeneous(rpts[:k], degree, rknots[:k + degree + 1])
    second = curve_from_homogeneous(rpts[k:], degree, rknots[k:])
    return first, second


__all__ = [
    'refine_knot_vect',
    'curve_knot_refine',
    'surface_knot_refine',
    'split_curve',
]
