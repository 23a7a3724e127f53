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

"""Point and derivative evaluation for NURBS curves.

The non-rational routines work on the homogeneous control points and
return homogeneous 4-vectors.  :func:`rational_curve_derivatives` then
applies the quotient rule (Algorithm A4.2 of *The NURBS Book*) to get the
derivatives of the Cartesian curve.
"""

from __future__ import annotations

from typing import List

from nurbseval.basis import basis_functions, derivative_basis_functions
from nurbseval.check import require_valid_relation
from nurbseval.curve import curve_control_points, curve_degree, curve_knots
from nurbseval.homogeneous import binomial, dehomogenize, rational_points, weights
from nurbseval.knots import find_span
from nurbseval.vec import add_mul, scale, sub_mul, zeros


def curve_point(curve, t: float) -> List[float]:
    """Evaluate the homogeneous point of ``curve`` at ``t``.

    Algorithm A3.1.  Use :func:`evaluate_curve` for the Cartesian point.
    """

    degree = curve_degree(curve)
    knots = curve_knots(curve)
    hpts = curve_control_points(curve)
    require_valid_relation(knots, degree, len(hpts))

    span = find_span(degree, knots, t)
    N = basis_functions(degree, knots, t, span)
    position = zeros(len(hpts[0]))
    for i in range(degree + 1):
        add_mul(position, N[i], hpts[span - degree + i])
    return position


def evaluate_curve(curve, t: float) -> List[float]:
    """Evaluate the Cartesian point of ``curve`` at ``t``."""

    return dehomogenize(curve_point(curve, t))


def curve_derivatives(curve, t: float, order: int = 1) -> List[List[float]]:
    """Return derivatives ``0..order`` of the homogeneous curve at ``t``.

    Algorithm A3.2.  Derivatives above the curve degree are zero vectors.
    """

    degree = curve_degree(curve)
    knots = curve_knots(curve)
    hpts = curve_control_points(curve)
    require_valid_relation(knots, degree, len(hpts))

    dim = len(hpts[0])
    du = min(order, degree)
    CK = [zeros(dim) for _ in range(order + 1)]
    span = find_span(degree, knots, t)
    nders = derivative_basis_functions(span, t, degree, du, knots)

    for k in range(du + 1):
        for j in range(degree + 1):
            add_mul(CK[k], nders[k][j], hpts[span - degree + j])
    return CK


def rational_curve_derivatives(curve, t: float, order: int = 1) -> List[List[float]]:
    """Return derivatives ``0..order`` of the Cartesian curve at ``t``.

    Level ``k`` is ``(A(k) - sum C(k,i) w(i) C(k-i)) / w``, where ``A`` are
    the spatial parts of the homogeneous derivatives and ``w`` the weight
    derivatives, so levels are built in increasing order.
    """

    ders = curve_derivatives(curve, t, order)
    Aders = rational_points(ders)
    wders = weights(ders)

    CK: List[List[float]] = []
    for k in range(order + 1):
        v = list(Aders[k])
        for i in range(1, k + 1):
            sub_mul(v, binomial(k, i) * wders[i], CK[k - i])
        CK.append(scale(v, 1.0 / wders[0]))
    return CK


def curve_tangent(curve, t: float) -> List[float]:
    """Return the (unnormalized) tangent vector of ``curve`` at ``t``."""

    return rational_curve_derivatives(curve, t, 1)[1]


def sample_curve(curve, *, samples: int = 64) -> List[List[float]]:
    """Sample ``curve`` into evenly spaced Cartesian points over its domain."""

    if samples < 2:
        raise ValueError('samples must be >= 2')

    knots = curve_knots(curve)
    u_start = knots[0]
    u_end = knots[-1]

    samples_out: List[List[float]] = []
    for i in range(samples):
        if i == samples - 1:
            u = u_end
        else:
            u = u_start + (u_end - u_start) * (i / (samples - 1))
        samples_out.append(evaluate_curve(curve, u))
    return samples_out


__all__ = [
    'curve_point',
    'evaluate_curve',
    'curve_derivatives',
    'rational_curve_derivatives',
    'curve_tangent',
    'sample_curve',
]
