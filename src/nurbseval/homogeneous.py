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

"""Homogeneous point utilities.

A homogeneous control point is the 4-vector ``[w*x, w*y, w*z, w]``: the
Cartesian coordinates premultiplied by the weight, with the weight
appended as the last channel.  Rational curves and surfaces can then be
evaluated with non-rational B-spline machinery and projected back with
:func:`dehomogenize`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Sequence

import mpmath as mpm

from nurbseval.vec import isgoodnum, xyz


def homogenize(points: Sequence[Sequence[float]],
               weights: Optional[Sequence[float]] = None) -> List[List[float]]:
    """Return homogeneous 4-vectors for ``points`` and ``weights``.

    ``weights`` defaults to 1.0 for every point.
    """

    if weights is None:
        weights = [1.0] * len(points)
    if len(weights) != len(points):
        raise ValueError(f'expected {len(points)} weights, got {len(weights)}')

    hpts = []
    for p, w in zip(points, weights):
        if not isgoodnum(w) or w <= 0.0:
            raise ValueError(f'weights must be positive numbers, got {w!r}')
        x, y, z = xyz(p)
        w = float(w)
        hpts.append([x * w, y * w, z * w, w])
    return hpts


def homogenize_grid(points: Sequence[Sequence[Sequence[float]]],
                    weights: Optional[Sequence[Sequence[float]]] = None) -> List[List[List[float]]]:
    """2D version of :func:`homogenize`, for surface control nets."""

    if weights is None:
        return [homogenize(row) for row in points]
    if len(weights) != len(points):
        raise ValueError(f'expected {len(points)} rows of weights, got {len(weights)}')
    return [homogenize(row, wrow) for row, wrow in zip(points, weights)]


def dehomogenize(hpt: Sequence[float]) -> List[float]:
    """Project a homogeneous point back to Cartesian space."""

    w = hpt[-1]
    return [c / w for c in hpt[:-1]]


def dehomogenize_all(hpts: Sequence[Sequence[float]]) -> List[List[float]]:
    return [dehomogenize(p) for p in hpts]


def dehomogenize_grid(hpts: Sequence[Sequence[Sequence[float]]]) -> List[List[List[float]]]:
    return [dehomogenize_all(row) for row in hpts]


def weights(hpts: Sequence[Sequence[float]]) -> List[float]:
    """Return the weight channel of each homogeneous point."""

    return [p[-1] for p in hpts]


def weights_grid(hpts: Sequence[Sequence[Sequence[float]]]) -> List[List[float]]:
    return [weights(row) for row in hpts]


def rational_points(hpts: Sequence[Sequence[float]]) -> List[List[float]]:
    """Return the spatial part of each homogeneous vector, not divided by
    the weight."""

    return [list(p[:-1]) for p in hpts]


def rational_grid(hpts: Sequence[Sequence[Sequence[float]]]) -> List[List[List[float]]]:
    return [rational_points(row) for row in hpts]


@lru_cache(maxsize=None)
def binomial(n: int, k: int) -> float:
    """Return the binomial coefficient ``C(n, k)`` as a float."""

    if k < 0 or k > n:
        return 0.0
    return float(mpm.binomial(n, k))


__all__ = [
    'homogenize',
    'homogenize_grid',
    'dehomogenize',
    'dehomogenize_all',
    'dehomogenize_grid',
    'weights',
    'weights_grid',
    'rational_points',
    'rational_grid',
    'binomial',
]
