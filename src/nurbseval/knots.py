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

"""Knot vector helpers.

A knot vector is a plain ``list`` of non-decreasing floats.  For a curve
of degree ``p`` with ``n+1`` control points it holds ``n+p+2`` values.
The functions here never modify the vectors they are given.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

## tolerance for comparing knot values
knot_epsilon = 1e-10


def knots_valid(knots: Sequence[float], degree: int, count: int) -> bool:
    """Return ``True`` if ``knots`` fits ``count`` control points of ``degree``."""

    return len(knots) == count + degree + 1


def find_span(degree: int, knots: Sequence[float], u: float) -> int:
    """Return the index of the knot span containing ``u``.

    Algorithm A2.1 from *The NURBS Book*.  A parameter at (or beyond) the
    end of the domain maps to the last non-degenerate span, one at (or
    before) the start maps to ``degree``.
    """

    n = len(knots) - degree - 2
    if u >= knots[n + 1]:
        return n
    if u <= knots[degree]:
        return degree

    low = degree
    high = n + 1
    mid = (low + high) // 2
    while u < knots[mid] or u >= knots[mid + 1]:
        if u < knots[mid]:
            high = mid
        else:
            low = mid
        mid = (low + high) // 2
    return mid


def knot_multiplicities(knots: Sequence[float]) -> Dict[float, int]:
    """Return a ``{knot: multiplicity}`` mapping in knot order."""

    mults: Dict[float, int] = {}
    for k in knots:
        k = float(k)
        mults[k] = mults.get(k, 0) + 1
    return mults


def knot_multiplicity(knots: Sequence[float], u: float, tol: float = knot_epsilon) -> int:
    """Return the multiplicity of the knot equal to ``u`` within ``tol``, or 0."""

    for k, mult in knot_multiplicities(knots).items():
        if abs(u - k) < tol:
            return mult
    return 0


def is_nondecreasing(knots: Sequence[float], tol: float = knot_epsilon) -> bool:
    """Return ``True`` if ``knots`` never decreases, repeats allowed."""

    if not knots:
        return False
    rep = knots[0]
    for i in range(len(knots)):
        if knots[i] < rep - tol:
            return False
        rep = knots[i]
    return True


def is_valid_knot_vector(knots: Sequence[float], degree: int, tol: float = knot_epsilon) -> bool:
    """Return ``True`` if ``knots`` is a clamped knot vector for ``degree``.

    The vector must be non-decreasing, hold at least ``2*(degree+1)``
    values, and start and end with ``degree+1`` repeated values.
    """

    if not knots:
        return False
    if len(knots) < (degree + 1) * 2:
        return False
    first = knots[0]
    for i in range(degree + 1):
        if abs(knots[i] - first) > tol:
            return False
    last = knots[-1]
    for i in range(len(knots) - degree - 1, len(knots)):
        if abs(knots[i] - last) > tol:
            return False
    return is_nondecreasing(knots, tol)


def knot_domain(knots: Sequence[float]) -> Tuple[float, float]:
    """Return the ``(first, last)`` parameter values of ``knots``."""

    return float(knots[0]), float(knots[-1])


def uniform_knots(degree: int, count: int, clamped: bool = True) -> List[float]:
    """Return an equally spaced knot vector on ``[0, 1]``.

    A clamped vector repeats each end value ``degree+1`` times, so the
    curve touches its first and last control points.  An unclamped vector
    spaces all ``count + degree + 1`` values evenly.
    """

    if degree < 1:
        raise ValueError('degree must be >= 1')
    if count < degree + 1:
        raise ValueError(f'need at least {degree + 1} control points for degree {degree}')

    if clamped:
        repeat = degree
        segments = count - (degree + 1)
    else:
        repeat = 0
        segments = degree + count - 1

    knots = [0.0] * repeat
    for i in range(segments + 2):
        knots.append(i / (segments + 1))
    knots.extend([1.0] * repeat)
    return knots


__all__ = [
    'knot_epsilon',
    'knots_valid',
    'find_span',
    'knot_multiplicities',
    'knot_multiplicity',
    'is_nondecreasing',
    'is_valid_knot_vector',
    'knot_domain',
    'uniform_knots',
]
