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

"""B-spline basis functions and their derivatives.

Both evaluators follow Piegl & Tiller, *The NURBS Book* (2nd ed.):
:func:`basis_functions` is Algorithm A2.2 (the bottom-up Cox-de Boor
recurrence, which never forms 0/0) and :func:`derivative_basis_functions`
is Algorithm A2.3.  Only the ``degree+1`` functions that are non-zero on
the knot span are computed.

Neither routine checks its span or parameter.  Passing a parameter outside
the knot domain, or a span that does not contain the parameter, gives
meaningless numbers rather than an exception.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from nurbseval.knots import find_span
from nurbseval.vec import zeros, zeros2d


def basis_functions(degree: int, knots: Sequence[float], u: float,
                    span: Optional[int] = None) -> List[float]:
    """Compute the non-vanishing basis functions at ``u``.

    Parameters
    ----------
    degree : int
        Degree of the basis.
    knots : list of float
        Knot vector.
    u : float
        Parameter value.
    span : int, optional
        Index of the knot span containing ``u``.  Found with
        :func:`nurbseval.knots.find_span` when omitted.

    Returns
    -------
    list of float
        ``N[span-degree] ... N[span]`` evaluated at ``u``.  The values
        sum to one.
    """

    if span is None:
        span = find_span(degree, knots, u)

    left = zeros(degree + 1)
    right = zeros(degree + 1)
    N = zeros(degree + 1)
    N[0] = 1.0

    for j in range(1, degree + 1):
        left[j] = u - knots[span + 1 - j]
        right[j] = knots[span + j] - u
        saved = 0.0
        for r in range(j):
            temp = N[r] / (right[r + 1] + left[j - r])
            N[r] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        N[j] = saved

    return N


def derivative_basis_functions(span: int, u: float, degree: int, order: int,
                               knots: Sequence[float]) -> List[List[float]]:
    """Compute the non-vanishing basis functions and their derivatives.

    Parameters
    ----------
    span : int
        Index of the knot span containing ``u``.
    u : float
        Parameter value.
    degree : int
        Degree of the basis.
    order : int
        Highest derivative wanted.
    knots : list of float
        Knot vector.

    Returns
    -------
    list of list of float
        ``ders[k][j]`` is the ``k``-th derivative of basis function
        ``span - degree + j``.  ``ders[0]`` matches
        :func:`basis_functions`.  Rows above ``degree`` are zero, since a
        polynomial of that degree has no higher derivatives.
    """

    ders = zeros2d(order + 1, degree + 1)
    top = min(order, degree)

    left = zeros(degree + 1)
    right = zeros(degree + 1)
    # ndu[j][r] for r < j holds knot differences, for r >= j basis values
    ndu = zeros2d(degree + 1, degree + 1)
    ndu[0][0] = 1.0

    for j in range(1, degree + 1):
        left[j] = u - knots[span + 1 - j]
        right[j] = knots[span + j] - u
        saved = 0.0
        for r in range(j):
            ndu[j][r] = right[r + 1] + left[j - r]
            temp = ndu[r][j - 1] / ndu[j][r]
            ndu[r][j] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        ndu[j][j] = saved

    for j in range(degree + 1):
        ders[0][j] = ndu[j][degree]

    a = zeros2d(2, degree + 1)
    for r in range(degree + 1):
        s1 = 0
        s2 = 1
        a[0][0] = 1.0

        for k in range(1, top + 1):
            d = 0.0
            rk = r - k
            pk = degree - k

            if r >= k:
                a[s2][0] = a[s1][0] / ndu[pk + 1][rk]
                d = a[s2][0] * ndu[rk][pk]

            j1 = 1 if rk >= -1 else -rk
            j2 = k - 1 if r - 1 <= pk else degree - r

            for j in range(j1, j2 + 1):
                a[s2][j] = (a[s1][j] - a[s1][j - 1]) / ndu[pk + 1][rk + j]
                d += a[s2][j] * ndu[rk + j][pk]

            if r <= pk:
                a[s2][k] = -a[s1][k - 1] / ndu[pk + 1][r]
                d += a[s2][k] * ndu[r][pk]

            ders[k][r] = d
            s1, s2 = s2, s1

    acc = degree
    for k in range(1, top + 1):
        for j in range(degree + 1):
            ders[k][j] *= acc
        acc *= degree - k

    return ders


__all__ = [
    'basis_functions',
    'derivative_basis_functions',
]
