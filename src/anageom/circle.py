## circles in 3D space for anageom

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

"""Circles embedded in 3D space.

A ``Circle`` is a center, a radius and a normal.  The normal only
carries direction: it is stored exactly as given, any non-zero scaling
describes the same circle, and equality only asks for parallel normals.

Circles are immutable.  ``replace()`` and the rigid transforms return
new circles.  Algorithms that are the same for circles and ellipses
(projection onto a plane) go through ``to_ellipse()``.
"""

from __future__ import annotations

import logging
from math import cos, pi, sin, sqrt

from anageom.tolerance import epsilon, isgoodnum
from anageom.errors import DegenerateInputError
from anageom.primitives import Plane, Point, Segment, coordstr, gstr
from anageom.frame import Frame, GLOBAL_FRAME
from anageom.sections import (
    Section,
    classify_offset,
    classify_planes,
)
from anageom.ellipse import Ellipse, planar_relation

logger = logging.getLogger(__name__)


class Circle:
    """circle with center ``center``, radius ``radius`` and normal ``normal``"""

    def __init__(self, center, radius, normal):
        if not isgoodnum(radius):
            raise ValueError('bad radius passed to Circle: {}'.format(radius))
        self._center = center
        self._r = float(radius)
        self._normal = normal

    __hash__ = None

    @classmethod
    def from_points(cls, p1, p2, p3, tol=epsilon):
        """circle through three non-collinear points

        The three points are expressed in a frame anchored at ``p1``
        whose plane contains both chords, which reduces the problem to
        the planar circumcenter.
        """
        v1 = p2 - p1
        v2 = p3 - p1
        normal = v1.cross(v2)
        if normal.norm < tol:
            logger.debug("collinear points %s, %s, %s", p1, p2, p3)
            raise DegenerateInputError('collinear points do not define a circle')

        cs = Frame(p1, v1, v2, tol=tol)
        a1 = p1.convert_to(cs)
        a2 = p2.convert_to(cs)
        a3 = p3.convert_to(cs)

        d1 = a1.x ** 2 + a1.y ** 2
        d2 = a2.x ** 2 + a2.y ** 2
        d3 = a3.x ** 2 + a3.y ** 2
        f = 2.0 * (a1.x * (a2.y - a3.y) - a1.y * (a2.x - a3.x) + a2.x * a3.y - a3.x * a2.y)

        x = (d1 * (a2.y - a3.y) + d2 * (a3.y - a1.y) + d3 * (a1.y - a2.y)) / f
        y = (d1 * (a3.x - a2.x) + d2 * (a1.x - a3.x) + d3 * (a2.x - a1.x)) / f

        center = cs.point_to_global(Point(x, y, 0.0))
        r = sqrt((x - a1.x) ** 2 + (y - a1.y) ** 2)
        return cls(center, r, normal)

    def replace(self, center=None, radius=None, normal=None):
        """new circle with the given fields replaced"""
        return Circle(self._center if center is None else center,
                      self._r if radius is None else radius,
                      self._normal if normal is None else normal)

    ## properties
    ## ----------

    @property
    def center(self):
        return self._center

    @property
    def radius(self):
        return self._r

    @property
    def normal(self):
        return self._normal

    @property
    def is_oriented(self):
        return False

    @property
    def perimeter(self):
        return 2.0 * pi * self._r

    @property
    def area(self):
        return pi * self._r ** 2

    def _basis(self):
        # two orthogonal in-plane vectors of length r, zero when r is 0
        u = self._normal.orthogonal_vector.normalized
        v = self._normal.cross(u).normalized
        return u * self._r, v * self._r

    def to_ellipse(self):
        """the circle as an ellipse with equal semiaxes"""
        v1, v2 = self._basis()
        return Ellipse(self._center, v1, v2)

    ## parallel and orthogonal tests
    ## -----------------------------

    def is_parallel_to(self, obj, tol=epsilon):
        """parallel to a linear object (has ``direction``) or a planar
        object (has ``normal``)"""
        return planar_relation(self._normal, obj, parallel=True, tol=tol)

    def is_not_parallel_to(self, obj, tol=epsilon):
        return not self.is_parallel_to(obj, tol)

    def is_orthogonal_to(self, obj, tol=epsilon):
        return planar_relation(self._normal, obj, parallel=False, tol=tol)

    ## parametric form and sampling
    ## ----------------------------

    def parametric_form(self, t):
        """point on the circle at parameter ``t`` (0 <= t < 2*pi)"""
        v1, v2 = self._basis()
        return self._center + v1 * cos(t) + v2 * sin(t)

    def sample(self, n):
        """yield ``n`` points evenly spaced over ``[0, 2*pi)``"""
        v1, v2 = self._basis()
        for i in range(n):
            t = 2.0 * pi * i / n
            yield self._center + v1 * cos(t) + v2 * sin(t)

    ## projection and intersection
    ## ---------------------------

    def projection_to(self, plane, tol=epsilon):
        """orthogonal projection onto ``plane``, generally an ellipse"""
        return self.to_ellipse().projection_to(plane, tol)

    def section_with(self, plane, tol=epsilon):
        """classify the intersection with ``plane`` as a ``Section``"""
        kind = classify_planes(self._normal, self._center, plane, tol)
        if kind is not None:
            return kind
        _, p = self._local_line(plane, tol)
        return classify_offset(p.y, self._r, tol)

    def _local_line(self, plane, tol):
        l = plane.intersection_with(self._supporting_plane(), tol)
        cs = Frame(self._center, l.direction, self._normal.cross(l.direction), tol=tol)
        return cs, l.point.convert_to(cs)

    def _supporting_plane(self):
        return Plane(self._center, self._normal)

    def intersection_with(self, plane, tol=epsilon):
        """intersection of the circle with ``plane``

        Returns ``None`` (no intersection), the circle itself (coplanar),
        a ``Point`` (tangent) or a ``Segment`` joining the two crossing
        points.
        """
        kind = classify_planes(self._normal, self._center, plane, tol)
        if kind is Section.COPLANAR:
            logger.debug("circle is coplanar with %s", plane)
            return self
        if kind is Section.PARALLEL:
            logger.debug("circle is parallel to %s", plane)
            return None

        cs, p = self._local_line(plane, tol)
        kind = classify_offset(p.y, self._r, tol)
        logger.debug("circle section %s, offset %g, radius %g", kind.value, p.y, self._r)
        if kind is Section.DISJOINT:
            return None
        if kind is Section.TANGENT:
            r = self._r if p.y > 0.0 else -self._r
            return cs.point_to_global(Point(0.0, r, 0.0))

        d = sqrt(max(self._r ** 2 - p.y ** 2, 0.0))
        return Segment(cs.point_to_global(Point(-d, p.y, 0.0)),
                       cs.point_to_global(Point(d, p.y, 0.0)))

    ## rigid transforms
    ## ----------------

    def translate(self, v):
        return Circle(self._center.translate(v), self._r, self._normal)

    def rotate(self, rotation, pivot=None):
        """rotate by any rotation encoding, about the origin or ``pivot``"""
        return Circle(self._center.rotate(rotation, pivot), self._r,
                      self._normal.rotate(rotation))

    def reflect_in(self, obj):
        """reflect in a ``Point``, ``Line`` or ``Plane``"""
        return Circle(self._center.reflect_in(obj), self._r,
                      self._normal.reflect_in(obj))

    ## equality and string form
    ## ------------------------

    def equals(self, other, tol=epsilon):
        """same center, radius within ``tol`` and parallel normals"""
        if type(other) is not Circle:
            return False
        return (self._center.equals(other._center, tol) and
                abs(self._r - other._r) <= tol and
                self._normal.is_parallel_to(other._normal, tol))

    def __eq__(self, other):
        if not isinstance(other, Circle):
            return NotImplemented
        return self.equals(other)

    def __repr__(self):
        return "Circle({!r}, {!r}, {!r})".format(self._center, self._r, self._normal)

    def __str__(self):
        return self.to_string()

    def to_string(self, frame=None):
        """diagnostic multi-line rendering relative to ``frame``"""
        if frame is None:
            frame = GLOBAL_FRAME
        p = self._center.convert_to(frame)
        n = self._normal.convert_to(frame)
        lines = ["Circle: ",
                 "  Center -> {}".format(coordstr(p.x, p.y, p.z)),
                 "  Radius -> {}".format(gstr(self._r)),
                 "  Normal -> {}".format(coordstr(n.x, n.y, n.z))]
        return "\n".join(lines)


__all__ = ["Circle"]
