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

"""Point, derivative and normal evaluation for NURBS surfaces."""

from __future__ import annotations

from typing import List

from nurbseval.basis import basis_functions, derivative_basis_functions
from nurbseval.check import require_valid_relation
from nurbseval.homogeneous import binomial, dehomogenize, rational_grid, weights_grid
from nurbseval.knots import find_span
from nurbseval.surface import (
    surface_control_points,
    surface_degree_u,
    surface_degree_v,
    surface_knots_u,
    surface_knots_v,
)
from nurbseval.vec import add_mul, cross, scale, sub_mul, zeros


def _checked(surf):
    p = surface_degree_u(surf)
    q = surface_degree_v(surf)
    knots_u = surface_knots_u(surf)
    knots_v = surface_knots_v(surf)
    hpts = surface_control_points(surf)
    require_valid_relation(knots_u, p, len(hpts), 'u')
    require_valid_relation(knots_v, q, len(hpts[0]), 'v')
    return p, q, knots_u, knots_v, hpts


def surface_point(surf, u: float, v: float) -> List[float]:
    """Evaluate the homogeneous point of ``surf`` at ``(u, v)``.

    Each of the ``degree_u+1`` active rows of the control net is first
    collapsed with the V basis, and the row results are then combined with
    the U basis (Algorithm A3.5).
    """

    p, q, knots_u, knots_v, hpts = _checked(surf)
    dim = len(hpts[0][0])

    span_u = find_span(p, knots_u, u)
    span_v = find_span(q, knots_v, v)
    Nu = basis_functions(p, knots_u, u, span_u)
    Nv = basis_functions(q, knots_v, v, span_v)

    position = zeros(dim)
    for k in range(p + 1):
        row = hpts[span_u - p + k]
        temp = zeros(dim)
        for l in range(q + 1):
            add_mul(temp, Nv[l], row[span_v - q + l])
        add_mul(position, Nu[k], temp)
    return position


def evaluate_surface(surf, u: float, v: float) -> List[float]:
    """Evaluate the Cartesian point of ``surf`` at ``(u, v)``."""

    return dehomogenize(surface_point(surf, u, v))


def surface_derivatives(surf, u: float, v: float, order: int = 1) -> List[List[List[float]]]:
    """Return the homogeneous partial derivatives of ``surf`` at ``(u, v)``.

    ``SKL[k][l]`` is the derivative taken ``k`` times in U and ``l`` times
    in V (Algorithm A3.6).  The table is ``(order+1) x (order+1)``; cells
    beyond ``k + l <= order`` or beyond the degree in either direction are
    zero vectors.
    """

    p, q, knots_u, knots_v, hpts = _checked(surf)
    dim = len(hpts[0][0])
    du = min(order, p)
    dv = min(order, q)

    SKL = [[zeros(dim) for _ in range(order + 1)] for _ in range(order + 1)]
    span_u = find_span(p, knots_u, u)
    span_v = find_span(q, knots_v, v)
    uders = derivative_basis_functions(span_u, u, p, du, knots_u)
    vders = derivative_basis_functions(span_v, v, q, dv, knots_v)

    temp = [zeros(dim) for _ in range(q + 1)]
    for k in range(du + 1):
        for s in range(q + 1):
            temp[s] = zeros(dim)
            for r in range(p + 1):
                add_mul(temp[s], uders[k][r], hpts[span_u - p + r][span_v - q + s])
        dd = min(order - k, dv)
        for l in range(dd + 1):
            for s in range(q + 1):
                add_mul(SKL[k][l], vders[l][s], temp[s])
    return SKL


def rational_surface_derivatives(surf, u: float, v: float, order: int = 1) -> List[List[List[float]]]:
    """Return the partial derivatives of the Cartesian surface at ``(u, v)``.

    Algorithm A4.4.  The result is triangular: row ``k`` holds
    ``order - k + 1`` cells.  Each cell only depends on cells with smaller
    or equal indices, so rows and columns are filled in increasing order.
    """

    ders = surface_derivatives(surf, u, v, order)
    Aders = rational_grid(ders)
    wders = weights_grid(ders)
    dim = len(Aders[0][0])

    SKL: List[List[List[float]]] = []
    for k in range(order + 1):
        SKL.append([])
        for l in range(order - k + 1):
            t1 = list(Aders[k][l])
            for j in range(1, l + 1):
                sub_mul(t1, binomial(l, j) * wders[0][j], SKL[k][l - j])
            for i in range(1, k + 1):
                sub_mul(t1, binomial(k, i) * wders[i][0], SKL[k - i][l])
                t2 = zeros(dim)
                for j in range(1, l + 1):
                    add_mul(t2, binomial(l, j) * wders[i][j], SKL[k - i][l - j])
                sub_mul(t1, binomial(k, i), t2)
            SKL[k].append(scale(t1, 1.0 / wders[0][0]))
    return SKL


def surface_normal(surf, u: float, v: float) -> List[float]:
    """Return the unnormalized normal of ``surf`` at ``(u, v)``.

    This is ``dS/du x dS/dv``; its length is zero where the surface is
    degenerate.
    """

    ders = rational_surface_derivatives(surf, u, v, 1)
    return cross(ders[1][0], ders[0][1])


def sample_surface(surf, *, u_samples: int = 16, v_samples: int = 16) -> List[List[List[float]]]:
    """Sample ``surf`` on an evenly spaced ``u_samples x v_samples`` grid."""

    if u_samples < 2 or v_samples < 2:
        raise ValueError('u_samples and v_samples must be >= 2')

    knots_u = surface_knots_u(surf)
    knots_v = surface_knots_v(surf)
    u0, u1 = knots_u[0], knots_u[-1]
    v0, v1 = knots_v[0], knots_v[-1]

    grid: List[List[List[float]]] = []
    for i in range(u_samples):
        u = u1 if i == u_samples - 1 else u0 + (u1 - u0) * (i / (u_samples - 1))
        row = []
        for j in range(v_samples):
            v = v1 if j == v_samples - 1 else v0 + (v1 - v0) * (j / (v_samples - 1))
            row.append(evaluate_surface(surf, u, v))
        grid.append(row)
    return grid


__all__ = [
    'surface_point',
    'evaluate_surface',
    'surface_derivatives',
    'rational_surface_derivatives',
    'surface_normal',
    'sample_surface',
]
