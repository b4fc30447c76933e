## decision tables for conic/plane intersection in anageom

## Copyright (c) 2026 anageom contributors
## All rights reserved

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

"""Case classification for plane sections of planar conics.

Intersecting a circle or an ellipse with a plane falls into exactly one
of the ``Section`` cases below.  The classifiers are pure functions of
a few scalars so each branch can be exercised on its own; the conic
classes call them and then build the matching result.

=============  ============================================  ===========
case           condition                                     result
=============  ============================================  ===========
COPLANAR       conic plane and cutting plane coincide        the conic
PARALLEL       planes parallel and distinct                  ``None``
DISJOINT       line of intersection misses the conic         ``None``
TANGENT        line touches the conic                        ``Point``
SECANT         line crosses the conic                        ``Segment``
=============  ============================================  ===========
"""

from __future__ import annotations

from enum import Enum

from anageom.tolerance import epsilon, close, greater, less

## slope above which the line/ellipse solve swaps the frame axes.  This
## is a numerical-conditioning constant, not a geometric one: any value
## that keeps m = v.y/v.x moderate works.
SLOPE_LIMIT = 100.0


class Section(Enum):
    """Outcome of intersecting a planar conic with a plane."""
    COPLANAR = "coplanar"
    PARALLEL = "parallel"
    DISJOINT = "disjoint"
    TANGENT = "tangent"
    SECANT = "secant"


def classify_planes(conic_normal, center, plane, tol=epsilon):
    """classify the relation of a conic's supporting plane to ``plane``

    Returns ``Section.COPLANAR`` or ``Section.PARALLEL`` when the normals
    are parallel, and ``None`` when the planes cross in a line and the
    caller must go on to the line/conic solve.
    """
    if conic_normal.is_parallel_to(plane.normal, tol):
        if center.belongs_to(plane, tol):
            return Section.COPLANAR
        return Section.PARALLEL
    return None


def classify_offset(offset, radius, tol=epsilon):
    """classify a line at perpendicular distance ``offset`` from the
    center of a circle of ``radius``

    The comparison is always ``abs(offset) - radius`` against ``tol``.
    """
    if greater(abs(offset), radius, tol):
        return Section.DISJOINT
    if close(abs(offset), radius, tol):
        return Section.TANGENT
    return Section.SECANT


def classify_discriminant(det, tol=epsilon):
    """classify the discriminant of the line/ellipse quadratic"""
    if less(det, 0.0, tol):
        return Section.DISJOINT
    if close(det, 0.0, tol):
        return Section.TANGENT
    return Section.SECANT


def needs_axis_swap(vx, vy):
    """is a line with local direction ``(vx, vy)`` too steep to solve
    as ``y = m*x + c``"""
    return abs(vy) > SLOPE_LIMIT * abs(vx)


__all__ = [
    "SLOPE_LIMIT",
    "Section",
    "classify_planes",
    "classify_offset",
    "classify_discriminant",
    "needs_axis_swap",
]
