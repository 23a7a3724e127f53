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

"""scalar and vector primitives for **nurbseval**

Vectors are ordinary Python ``list`` objects of ``float``.  Unlike a
fixed 4-vector library, the routines here work on any length, since the
evaluators push both homogeneous 4-vectors (``[w*x, w*y, w*z, w]``) and
Cartesian 3-vectors through the same accumulation code.

``epsilon`` is the geometric closeness tolerance used throughout the
package.  Redefine it at your peril.
"""

from __future__ import annotations

from math import sqrt
from typing import List, Sequence

## constants
epsilon = 0.000005


## operations on scalars
## -----------------------

def isgoodnum(n) -> bool:
    """Return ``True`` if ``n`` is an int or float, and not a boolean."""
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a: float, b: float, tol: float = epsilon) -> bool:
    """are two scalars the same within ``tol``"""
    return abs(a - b) < tol


## operations on vectors
## ------------------------

def zeros(n: int) -> List[float]:
    """Return a zero vector of length ``n``."""
    return [0.0] * n


def zeros2d(rows: int, cols: int) -> List[List[float]]:
    return [[0.0] * cols for _ in range(rows)]


def add(a: Sequence[float], b: Sequence[float]) -> List[float]:
    """component-wise `a + b`"""
    return [x + y for x, y in zip(a, b)]


def sub(a: Sequence[float], b: Sequence[float]) -> List[float]:
    """component-wise `a - b`"""
    return [x - y for x, y in zip(a, b)]


def scale(a: Sequence[float], c: float) -> List[float]:
    """vector ``a`` times scalar ``c``"""
    return [x * c for x in a]


## in-place accumulation into a scratch vector.  ``acc`` must be owned
## by the caller; ``v`` is never modified.
def add_mul(acc: List[float], s: float, v: Sequence[float]) -> List[float]:
    """`acc += s * v`, in place"""
    for i in range(len(acc)):
        acc[i] += s * v[i]
    return acc


def sub_mul(acc: List[float], s: float, v: Sequence[float]) -> List[float]:
    """`acc -= s * v`, in place"""
    for i in range(len(acc)):
        acc[i] -= s * v[i]
    return acc


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def cross(a: Sequence[float], b: Sequence[float]) -> List[float]:
    """cross product of 3 vectors ``a`` and ``b``"""
    return [a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0]]


def mag(a: Sequence[float]) -> float:
    """euclidean length of ``a``"""
    return sqrt(dot(a, a))


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """euclidean distance between points ``a`` and ``b``"""
    return mag(sub(a, b))


def unit(a: Sequence[float]) -> List[float]:
    """Return ``a`` scaled to unit length.

    Raises ``ValueError`` for a vector shorter than ``epsilon``.
    """
    length = mag(a)
    if length < epsilon:
        raise ValueError('cannot normalize a zero-length vector')
    return [x / length for x in a]


def vclose(a: Sequence[float], b: Sequence[float], tol: float = epsilon) -> bool:
    """are two vectors the same, to within ``tol``"""
    if len(a) != len(b):
        return False
    return all(abs(x - y) < tol for x, y in zip(a, b))


def xyz(p: Sequence[float]) -> List[float]:
    """Return the XYZ components of a 2D or 3D+ point as a 3 vector."""
    if len(p) == 2:
        return [float(p[0]), float(p[1]), 0.0]
    if len(p) < 2:
        raise ValueError('point must have at least two components')
    return [float(p[0]), float(p[1]), float(p[2])]


__all__ = [
    'epsilon',
    'isgoodnum',
    'close',
    'zeros',
    'zeros2d',
    'add',
    'sub',
    'scale',
    'add_mul',
    'sub_mul',
    'dot',
    'cross',
    'mag',
    'dist',
    'unit',
    'vclose',
    'xyz',
]
