## ellipses in 3D space for anageom

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

"""ellipses embedded in 3D space for **anageom**

===============
Overview
===============

An ``Ellipse`` is a center and two orthogonal semiaxis vectors.  The
longer vector is always stored as the major semiaxis ``v1`` and the
shorter as the minor semiaxis ``v2``, whatever order they were given
in, so ``a >= b`` holds for every ellipse.  The normal is ``v1 x v2``.

A circle is the degenerate ellipse with ``a == b``; ``Circle`` reuses
the projection algorithm below through ``Circle.to_ellipse()``.

parametrization
---------------

``parametric_form(t) = center + v1 cos(t) + v2 sin(t)`` for
``0 <= t < 2*pi``.  The curve is closed and periodic, and evaluating it
keeps no state, so ``sample()`` can be restarted at will.

projection onto a plane
-----------------------

Projecting the center and the two semiaxis end points gives a pair of
conjugate semi-diameters ``f1``, ``f2`` of the projected ellipse, which
are generally not orthogonal.  The principal semiaxes are the extremes
of ``|f1 cos(t) + f2 sin(t)|``, reached at

    t0 = 0.5 * atan2(2 f1.f2, f1.f1 - f2.f2)

and at ``t0 + pi/2``.

intersection with a plane
-------------------------

The cutting plane meets the ellipse's plane in a line.  In a frame
built from the ellipse's own axes the line becomes ``y = m x + c`` and
the ellipse ``x^2/a^2 + y^2/b^2 = 1``, whose common points follow from
the discriminant ``a^2 m^2 + b^2 - c^2``.  When the line is nearly
parallel to the frame's y axis the slope would blow up, so the frame
axes (and ``a``, ``b``) are swapped first.  The discriminant and its
square root are evaluated with ``mpmath``.
"""

from __future__ import annotations

import logging
from math import atan2, cos, pi, sin, sqrt

import mpmath as mpm

from anageom.tolerance import epsilon, close
from anageom.errors import InvalidArgumentError
from anageom.primitives import Plane, Point, Segment, Vector, coordstr
from anageom.frame import Frame, GLOBAL_FRAME
from anageom.sections import (
    Section,
    classify_discriminant,
    classify_planes,
    needs_axis_swap,
)

logger = logging.getLogger(__name__)


def planar_relation(normal, obj, parallel=True, tol=epsilon):
    """parallel/orthogonal test of a planar object with normal ``normal``
    against ``obj``

    ``obj`` is planar when it has a ``normal`` (planes, circles,
    ellipses) and linear when it has a ``direction`` (lines, segments).
    A planar object is parallel to a line when its normal is orthogonal
    to the line, and orthogonal to it when the two are parallel.
    """
    if hasattr(obj, "normal"):
        if parallel:
            return normal.is_parallel_to(obj.normal, tol)
        return normal.is_orthogonal_to(obj.normal, tol)
    if hasattr(obj, "direction"):
        if parallel:
            return normal.is_orthogonal_to(obj.direction, tol)
        return normal.is_parallel_to(obj.direction, tol)
    raise ValueError('bad object passed to parallel/orthogonal test: {}'.format(obj))


class Ellipse:
    """ellipse with center ``center`` and orthogonal semiaxes"""

    def __init__(self, center, semiaxis_a, semiaxis_b, tol=epsilon):
        if not semiaxis_a.is_orthogonal_to(semiaxis_b, tol):
            logger.debug("rejecting semiaxes %s, %s", semiaxis_a, semiaxis_b)
            raise InvalidArgumentError('semiaxes not orthogonal')
        self._center = center
        if semiaxis_a.norm >= semiaxis_b.norm:
            self._v1 = semiaxis_a
            self._v2 = semiaxis_b
        else:
            self._v1 = semiaxis_b
            self._v2 = semiaxis_a

    __hash__ = None

    ## properties
    ## ----------

    @property
    def center(self):
        return self._center

    @property
    def major_semiaxis(self):
        return self._v1

    @property
    def minor_semiaxis(self):
        return self._v2

    @property
    def normal(self):
        return self._v1.cross(self._v2)

    @property
    def is_oriented(self):
        return False

    @property
    def a(self):
        """length of the major semiaxis"""
        return self._v1.norm

    @property
    def b(self):
        """length of the minor semiaxis"""
        return self._v2.norm

    @property
    def linear_eccentricity(self):
        """distance from the center to either focus"""
        return sqrt(self.a ** 2 - self.b ** 2)

    @property
    def f1(self):
        """first focus, on the positive side of the major semiaxis"""
        return self._center.translate(self._v1.normalized * self.linear_eccentricity)

    @property
    def f2(self):
        return self._center.translate(self._v1.normalized * -self.linear_eccentricity)

    @property
    def eccentricity(self):
        a = self.a
        if a == 0.0:
            return 0.0
        return sqrt(1.0 - self.b ** 2 / a ** 2)

    @property
    def area(self):
        return pi * self.a * self.b

    @property
    def perimeter(self):
        """Ramanujan's second approximation of the circumference"""
        a = self.a
        b = self.b
        if a + b == 0.0:
            return 0.0
        h = (a - b) ** 2 / (a + b) ** 2
        return pi * (a + b) * (1.0 + 3.0 * h / (10.0 + sqrt(4.0 - 3.0 * h)))

    def is_circular(self, tol=epsilon):
        return close(self.a, self.b, tol)

    ## parallel and orthogonal tests
    ## -----------------------------

    def is_parallel_to(self, obj, tol=epsilon):
        return planar_relation(self.normal, obj, parallel=True, tol=tol)

    def is_not_parallel_to(self, obj, tol=epsilon):
        return not self.is_parallel_to(obj, tol)

    def is_orthogonal_to(self, obj, tol=epsilon):
        return planar_relation(self.normal, obj, parallel=False, tol=tol)

    ## parametric form and sampling
    ## ----------------------------

    def parametric_form(self, t):
        """point on the ellipse at parameter ``t`` (0 <= t < 2*pi)"""
        return self._center + self._v1 * cos(t) + self._v2 * sin(t)

    def sample(self, n):
        """yield ``n`` points evenly spaced in parameter over ``[0, 2*pi)``"""
        for i in range(n):
            yield self.parametric_form(2.0 * pi * i / n)

    ## projection and intersection
    ## ---------------------------

    def projection_to(self, plane, tol=epsilon):
        """orthogonal projection of the ellipse onto ``plane``"""
        c = self._center.projection_to(plane)
        q = self._center.translate(self._v1).projection_to(plane)
        p = self._center.translate(self._v2).projection_to(plane)

        f1 = p - c
        f2 = q - c

        t0 = 0.5 * atan2(2.0 * f1.dot(f2), f1.dot(f1) - f2.dot(f2))
        v1 = f1 * cos(t0) + f2 * sin(t0)
        v2 = f1 * cos(t0 + pi / 2) + f2 * sin(t0 + pi / 2)

        ## seen edge-on the ellipse projects to a segment, and the
        ## collapsed semiaxis is only rounding noise
        if v1.norm <= tol:
            v1 = Vector(0.0, 0.0, 0.0)
        if v2.norm <= tol:
            v2 = Vector(0.0, 0.0, 0.0)

        return Ellipse(c, v1, v2, tol)

    def _local_line(self, plane, tol):
        l = plane.intersection_with(Plane(self._center, self.normal), tol)
        cs = Frame(self._center, self._v1, self._v2, tol=tol)
        p = l.point.convert_to(cs)
        v = l.direction.convert_to(cs)
        a = self.a
        b = self.b

        if needs_axis_swap(v.x, v.y):
            logger.debug("line is almost vertical in ellipse frame, swapping axes")
            cs = Frame(self._center, self._v2, self._v1, tol=tol)
            p = l.point.convert_to(cs)
            v = l.direction.convert_to(cs)
            a, b = b, a

        ## line equation in the form y = m*x + c, solved in extended
        ## precision
        m = mpm.mpf(v.y) / mpm.mpf(v.x)
        c = mpm.mpf(p.y) - m * mpm.mpf(p.x)
        mpa = mpm.mpf(a)
        mpb = mpm.mpf(b)
        amb = mpa * mpa * m * m + mpb * mpb
        det = amb - c * c
        return cs, mpa, mpb, m, c, amb, det

    def section_with(self, plane, tol=epsilon):
        """classify the intersection with ``plane`` as a ``Section``"""
        kind = classify_planes(self.normal, self._center, plane, tol)
        if kind is not None:
            return kind
        det = self._local_line(plane, tol)[-1]
        return classify_discriminant(float(det), tol)

    def intersection_with(self, plane, tol=epsilon):
        """intersection of the ellipse with ``plane``

        Returns ``None`` (no intersection), the ellipse itself
        (coplanar), a ``Point`` (tangent) or a ``Segment`` joining the
        two crossing points.
        """
        kind = classify_planes(self.normal, self._center, plane, tol)
        if kind is Section.COPLANAR:
            logger.debug("ellipse is coplanar with %s", plane)
            return self
        if kind is Section.PARALLEL:
            logger.debug("ellipse is parallel to %s", plane)
            return None

        cs, a, b, m, c, amb, det = self._local_line(plane, tol)
        kind = classify_discriminant(float(det), tol)
        logger.debug("ellipse section %s, discriminant %g", kind.value, float(det))
        if kind is Section.DISJOINT:
            return None
        if kind is Section.TANGENT:
            x = -a * a * m * c / amb
            y = b * b * c / amb
            return cs.point_to_global(Point(float(x), float(y), 0.0))

        root = a * b * mpm.sqrt(det)
        x1 = (-a * a * m * c + root) / amb
        x2 = (-a * a * m * c - root) / amb
        y1 = (b * b * c + root * m) / amb
        y2 = (b * b * c - root * m) / amb
        return Segment(cs.point_to_global(Point(float(x1), float(y1), 0.0)),
                       cs.point_to_global(Point(float(x2), float(y2), 0.0)))

    ## rigid transforms
    ## ----------------

    def translate(self, v):
        return Ellipse(self._center.translate(v), self._v1, self._v2)

    def rotate(self, rotation, pivot=None):
        """rotate by any rotation encoding, about the origin or ``pivot``"""
        return Ellipse(self._center.rotate(rotation, pivot),
                       self._v1.rotate(rotation), self._v2.rotate(rotation))

    def reflect_in(self, obj):
        """reflect in a ``Point``, ``Line`` or ``Plane``"""
        return Ellipse(self._center.reflect_in(obj),
                       self._v1.reflect_in(obj), self._v2.reflect_in(obj))

    ## equality and string form
    ## ------------------------

    def equals(self, other, tol=epsilon):
        """geometric equality within ``tol``

        Two circular ellipses compare as circles, ignoring how their
        axes are oriented in the plane.  A circular ellipse never equals
        a non-circular one.  Otherwise centers, both semiaxis lengths
        and the directions of both axes must agree.
        """
        if type(other) is not Ellipse:
            return False
        if self.is_circular(tol) or other.is_circular(tol):
            if not (self.is_circular(tol) and other.is_circular(tol)):
                return False
            return (self._center.equals(other._center, tol) and
                    close(self.a, other.a, tol) and
                    other.normal.is_parallel_to(self.normal, tol))
        return (self._center.equals(other._center, tol) and
                close(self.a, other.a, tol) and
                close(self.b, other.b, tol) and
                other._v1.is_parallel_to(self._v1, tol) and
                other._v2.is_parallel_to(self._v2, tol))

    def __eq__(self, other):
        if not isinstance(other, Ellipse):
            return NotImplemented
        return self.equals(other)

    def __repr__(self):
        return "Ellipse({!r}, {!r}, {!r})".format(self._center, self._v1, self._v2)

    def __str__(self):
        return self.to_string()

    def to_string(self, frame=None):
        """diagnostic multi-line rendering relative to ``frame``"""
        if frame is None:
            frame = GLOBAL_FRAME
        p = self._center.convert_to(frame)
        v1 = self._v1.convert_to(frame)
        v2 = self._v2.convert_to(frame)
        lines = ["Ellipse: ",
                 "  Center -> {}".format(coordstr(p.x, p.y, p.z)),
                 "  Semiaxis A -> {}".format(coordstr(v1.x, v1.y, v1.z)),
                 "  Semiaxis B -> {}".format(coordstr(v2.x, v2.y, v2.z))]
        return "\n".join(lines)


__all__ = ["Ellipse", "planar_relation"]
