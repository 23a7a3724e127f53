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

"""Iso-parametric curve extraction for NURBS surfaces."""

from __future__ import annotations

import logging
from typing import Callable

from nurbseval.check import require_valid_relation
from nurbseval.curve import from_homogeneous as curve_from_homogeneous
from nurbseval.knots import find_span, knot_epsilon, knot_multiplicity
from nurbseval.refine import surface_knot_refine
from nurbseval.surface import (
    surface_control_points,
    surface_degree_u,
    surface_degree_v,
    surface_knots_u,
    surface_knots_v,
)

log = logging.getLogger(__name__)


def surface_isocurve(surf, t: float = 0.0, use_u: bool = True,
                     refine: Callable = surface_knot_refine) -> list:
    """Extract the curve of ``surf`` at a fixed parameter.

    Parameters
    ----------
    surf : nurbs_surface
        The surface.
    t : float
        Fixed parameter value.
    use_u : bool
        If ``True``, ``t`` is a U parameter and the result runs along V.
        Otherwise ``t`` is a V parameter and the result runs along U.
    refine : callable, optional
        ``refine(surf, knots_to_insert, use_u) -> surface``.  Used to raise
        the multiplicity of ``t`` to ``degree + 1`` so that a row (or
        column) of the refined control net lies on the curve.

    Returns
    -------
    nurbs_curve
        The iso-parametric curve.

    Raises
    ------
    InvalidGeometryError
        If either direction of ``surf`` breaks the knot count relation.
    """

    hpts = surface_control_points(surf)
    require_valid_relation(surface_knots_u(surf), surface_degree_u(surf), len(hpts), 'u')
    require_valid_relation(surface_knots_v(surf), surface_degree_v(surf), len(hpts[0]), 'v')

    knots = surface_knots_u(surf) if use_u else surface_knots_v(surf)
    degree = surface_degree_u(surf) if use_u else surface_degree_v(surf)

    to_insert = degree + 1 - knot_multiplicity(knots, t)
    if to_insert > 0:
        log.debug('inserting knot %s %d times for isocurve', t, to_insert)
        refined = refine(surf, [t] * to_insert, use_u)
    else:
        refined = surf

    hpts = surface_control_points(refined)
    rknots = surface_knots_u(refined) if use_u else surface_knots_v(refined)
    count = len(hpts) if use_u else len(hpts[0])

    if abs(t - rknots[0]) < knot_epsilon:
        index = 0
    elif abs(t - rknots[-1]) < knot_epsilon:
        index = count - 1
    else:
        index = find_span(degree, rknots, t) - degree

    if use_u:
        return curve_from_homogeneous(hpts[index],
                                      surface_degree_v(refined),
                                      surface_knots_v(refined))
    return curve_from_homogeneous([row[index] for row in hpts],
                                  surface_degree_u(refined),
                                  surface_knots_u(refined))


__all__ = ['surface_isocurve']
