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

"""Validation helpers for nurbseval curve and surface data."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from nurbseval.errors import InvalidGeometryError
from nurbseval.knots import is_valid_knot_vector, knots_valid

log = logging.getLogger(__name__)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


def check_curve_data(degree: int, knots: Sequence[float], hpts: Sequence) -> CheckResult:
    """Check the degree, knot vector and control points of a curve."""

    warnings: List[str] = []
    if not hpts:
        warnings.append('control points cannot be empty')
    if degree < 1:
        warnings.append(f'degree must be >= 1, got {degree}')
    if knots is None or len(knots) == 0:
        warnings.append('knots cannot be empty')
        return CheckResult(False, warnings)

    if not knots_valid(knots, degree, len(hpts)):
        warnings.append('len(control points) + degree + 1 must equal len(knots): '
                        f'{len(hpts)} + {degree} + 1 != {len(knots)}')
    if not is_valid_knot_vector(knots, degree):
        warnings.append('invalid knot vector, should be non-decreasing and begin and '
                        'end with degree + 1 repeated values')
    return CheckResult(not warnings, warnings)


def check_surface_data(degree_u: int, degree_v: int,
                       knots_u: Sequence[float], knots_v: Sequence[float],
                       hpts: Sequence[Sequence]) -> CheckResult:
    """Check both parametric directions of a surface independently."""

    if not hpts or not hpts[0]:
        return CheckResult(False, ['control points cannot be empty'])

    warnings: List[str] = []
    cols = len(hpts[0])
    if any(len(row) != cols for row in hpts):
        warnings.append('all rows of control points must have the same length')

    column = [row[0] for row in hpts]
    for direction, degree, knots, pts in (('u', degree_u, knots_u, column),
                                          ('v', degree_v, knots_v, hpts[0])):
        result = check_curve_data(degree, knots, pts)
        warnings.extend(f'{direction}: {w}' for w in result.warnings)
    return CheckResult(not warnings, warnings)


def validate_curve_data(degree: int, knots: Sequence[float], hpts: Sequence) -> None:
    """Raise :class:`InvalidGeometryError` if the curve data fails its check."""

    result = check_curve_data(degree, knots, hpts)
    if not result:
        log.debug('rejecting curve data: %s', result.warnings)
        raise InvalidGeometryError('; '.join(result.warnings))


def validate_surface_data(degree_u: int, degree_v: int,
                          knots_u: Sequence[float], knots_v: Sequence[float],
                          hpts: Sequence[Sequence]) -> None:
    """Raise :class:`InvalidGeometryError` if the surface data fails its check."""

    result = check_surface_data(degree_u, degree_v, knots_u, knots_v, hpts)
    if not result:
        log.debug('rejecting surface data: %s', result.warnings)
        raise InvalidGeometryError('; '.join(result.warnings))


def require_valid_relation(knots: Sequence[float], degree: int, count: int,
                           direction: Optional[str] = None) -> None:
    """Guard for evaluator entry points.

    Only the count relation is checked here; full knot vector validation
    belongs to construction time.
    """

    if not knots_valid(knots, degree, count):
        where = f' in {direction} direction' if direction else ''
        raise InvalidGeometryError(
            f'invalid relation between control points, knots and degree{where}: '
            f'{count} + {degree} + 1 != {len(knots)}')


__all__ = [
    'CheckResult',
    'check_curve_data',
    'check_surface_data',
    'validate_curve_data',
    'validate_surface_data',
    'require_valid_relation',
]
