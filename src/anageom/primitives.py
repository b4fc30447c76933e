## point, vector, line, segment and plane value types for anageom

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

"""primitive 3D value types for **anageom**

===============
Overview
===============

The conic and rotation modules convert everything they touch through a
small set of primitives: ``Point``, ``Vector``, ``Line``, ``Segment``
and ``Plane``.  All of them are immutable, and every operation returns
a new value rather than modifying its receiver, so two shapes never
share mutable state.

points vs. vectors
------------------

A ``Point`` is a location and a ``Vector`` is a displacement.  They
transform differently: translating a point moves it, translating a
vector is meaningless, and reflecting a vector in a point simply
negates it.  Subtracting two points yields a vector; adding a vector to
a point yields a point.

All coordinates are global.  ``convert_to(frame)`` returns the same
kind of value expressed in the coordinates of a ``Frame`` (see
``anageom.frame``); the result is a plain value whose components are
local coordinates.

tolerance
---------

Equality of points and the parallel/orthogonal tests of vectors are
approximate.  Each takes a ``tol`` keyword defaulting to
``anageom.tolerance.epsilon``; ``==`` uses the default.  Because the
comparisons are approximate the types are deliberately unhashable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import sqrt

from anageom.tolerance import epsilon, isgoodnum
from anageom.errors import DegenerateInputError

logger = logging.getLogger(__name__)


def gstr(x):
    """format a scalar to five significant digits in a ten-wide field"""
    return "{:10.5g}".format(x)


def coordstr(x, y, z):
    """format a coordinate triple as ``(x, y, z)`` using ``gstr``"""
    return "({}, {}, {})".format(gstr(x), gstr(y), gstr(z))


def _checknums(*vals):
    for v in vals:
        if not isgoodnum(v):
            raise ValueError('bad coordinate value: {}'.format(v))


## operations on points
## --------------------

@dataclass(frozen=True, eq=False)
class Point:
    """A location in 3D space."""

    x: float
    y: float
    z: float = 0.0

    def __post_init__(self):
        _checknums(self.x, self.y, self.z)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    def __str__(self):
        return "Point{}".format(coordstr(self.x, self.y, self.z))

    def equals(self, other, tol=epsilon):
        """are two points the same to within ``tol``"""
        return type(other) is Point and self.distance_to(other) <= tol

    def to_vector(self):
        """position vector of the point"""
        return Vector(self.x, self.y, self.z)

    def distance_to(self, other):
        """euclidean distance between two points"""
        return (self - other).norm

    def translate(self, v):
        return self + v

    def rotate(self, rotation, pivot=None):
        """rotate the point by any rotation encoding, about the origin
        or about ``pivot`` when given"""
        if pivot is None:
            return rotation.to_matrix().apply(self.to_vector()).to_point()
        return pivot + rotation.to_matrix().apply(self - pivot)

    def reflect_in(self, obj):
        """reflect the point in a ``Point``, ``Line`` or ``Plane``"""
        if isinstance(obj, Point):
            return obj + (obj - self)
        if isinstance(obj, Line):
            foot = obj.projection_of(self)
            return foot + (foot - self)
        if isinstance(obj, Plane):
            foot = self.projection_to(obj)
            return foot + (foot - self)
        raise ValueError('bad thing passed to reflect_in: {}'.format(obj))

    def projection_to(self, plane):
        """orthogonal projection of the point onto ``plane``"""
        n = plane.normal.normalized
        return self - n * n.dot(self - plane.point)

    def belongs_to(self, plane, tol=epsilon):
        """does the point lie on ``plane`` within ``tol``"""
        return abs(plane.signed_distance(self)) <= tol

    def convert_to(self, frame):
        """coordinates of the point in ``frame``"""
        return frame.point_to_local(self)


## operations on vectors
## ---------------------

@dataclass(frozen=True, eq=False)
class Vector:
    """A displacement, direction or normal in 3D space."""

    x: float
    y: float
    z: float = 0.0

    def __post_init__(self):
        _checknums(self.x, self.y, self.z)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    __hash__ = None

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, c):
        if isgoodnum(c):
            return Vector(self.x * c, self.y * c, self.z * c)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, c):
        if isgoodnum(c):
            return Vector(self.x / c, self.y / c, self.z / c)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __str__(self):
        return "Vector{}".format(coordstr(self.x, self.y, self.z))

    def equals(self, other, tol=epsilon):
        """are two vectors the same to within ``tol``"""
        return type(other) is Vector and (self - other).norm <= tol

    def to_point(self):
        return Point(self.x, self.y, self.z)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    @property
    def norm(self):
        return sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    @property
    def normalized(self):
        """unit vector in the same direction"""
        m = self.norm
        if m == 0.0:
            raise DegenerateInputError('zero-length vector cannot be normalized')
        return self / m

    @property
    def orthogonal_vector(self):
        """a non-zero vector orthogonal to this one

        The companion is obtained by zeroing the smallest-magnitude
        component and swapping the other two, so it is deterministic
        and well conditioned.
        """
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax == ay == az == 0.0:
            raise DegenerateInputError('zero-length vector has no orthogonal companion')
        if ax <= ay and ax <= az:
            return Vector(0.0, self.z, -self.y)
        elif ay <= ax and ay <= az:
            return Vector(self.z, 0.0, -self.x)
        return Vector(self.y, -self.x, 0.0)

    def is_parallel_to(self, other, tol=epsilon):
        """is the sine of the enclosed angle below ``tol``"""
        return self.cross(other).norm <= tol * self.norm * other.norm

    def is_not_parallel_to(self, other, tol=epsilon):
        return not self.is_parallel_to(other, tol)

    def is_orthogonal_to(self, other, tol=epsilon):
        """is the cosine of the enclosed angle below ``tol``"""
        return abs(self.dot(other)) <= tol * self.norm * other.norm

    def rotate(self, rotation):
        return rotation.to_matrix().apply(self)

    def reflect_in(self, obj):
        """reflect the vector in a ``Point``, ``Line`` or ``Plane``"""
        if isinstance(obj, Point):
            return -self
        if isinstance(obj, Line):
            d = obj.direction.normalized
            return d * (2.0 * self.dot(d)) - self
        if isinstance(obj, Plane):
            n = obj.normal.normalized
            return self - n * (2.0 * self.dot(n))
        raise ValueError('bad thing passed to reflect_in: {}'.format(obj))

    def convert_to(self, frame):
        """components of the vector in ``frame``"""
        return frame.vector_to_local(self)


## operations on lines and segments
## --------------------------------

@dataclass(frozen=True, eq=False)
class Line:
    """An infinite line through ``point`` along ``direction``."""

    point: Point
    direction: Vector

    def __post_init__(self):
        if self.direction.norm == 0.0:
            raise DegenerateInputError('zero-length line direction not allowed')

    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.equals(other)

    def __str__(self):
        return "Line: point {} direction {}".format(
            coordstr(*self.point), coordstr(*self.direction))

    def equals(self, other, tol=epsilon):
        """do two lines coincide"""
        if type(other) is not Line:
            return False
        return (self.direction.is_parallel_to(other.direction, tol) and
                self.distance_to(other.point) <= tol)

    def projection_of(self, p):
        """foot of the perpendicular from point ``p`` to the line"""
        d = self.direction.normalized
        return self.point + d * d.dot(p - self.point)

    def distance_to(self, p):
        return p.distance_to(self.projection_of(p))


@dataclass(frozen=True, eq=False)
class Segment:
    """A finite line segment between two points."""

    p1: Point
    p2: Point

    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return self.equals(other)

    def __str__(self):
        return "Segment: {} -> {}".format(coordstr(*self.p1), coordstr(*self.p2))

    def equals(self, other, tol=epsilon):
        """same endpoints in either order"""
        if type(other) is not Segment:
            return False
        return ((self.p1.equals(other.p1, tol) and self.p2.equals(other.p2, tol)) or
                (self.p1.equals(other.p2, tol) and self.p2.equals(other.p1, tol)))

    @property
    def length(self):
        return self.p1.distance_to(self.p2)

    @property
    def direction(self):
        return self.p2 - self.p1

    @property
    def midpoint(self):
        return self.p1 + (self.p2 - self.p1) * 0.5


## operations on planes
## --------------------

@dataclass(frozen=True, eq=False)
class Plane:
    """An infinite plane through ``point`` with normal ``normal``."""

    point: Point
    normal: Vector

    def __post_init__(self):
        if self.normal.norm == 0.0:
            raise DegenerateInputError('zero-length plane normal not allowed')

    __hash__ = None

    @classmethod
    def from_points(cls, p1, p2, p3, tol=epsilon):
        """plane through three non-collinear points"""
        n = (p2 - p1).cross(p3 - p1)
        if n.norm < tol:
            raise DegenerateInputError('collinear points do not define a plane')
        return cls(p1, n)

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return self.equals(other)

    def __str__(self):
        return "Plane: point {} normal {}".format(
            coordstr(*self.point), coordstr(*self.normal))

    def equals(self, other, tol=epsilon):
        """do two planes coincide"""
        if type(other) is not Plane:
            return False
        return (self.normal.is_parallel_to(other.normal, tol) and
                other.point.belongs_to(self, tol))

    def signed_distance(self, p):
        """distance of ``p`` from the plane, positive on the normal side"""
        return self.normal.normalized.dot(p - self.point)

    def contains(self, p, tol=epsilon):
        return p.belongs_to(self, tol)

    def intersection_with(self, other, tol=epsilon):
        """intersection of two planes

        Returns the line of intersection, this plane when the two
        coincide, or ``None`` when they are parallel and distinct.
        """
        n1 = self.normal
        n2 = other.normal
        if n1.is_parallel_to(n2, tol):
            if other.point.belongs_to(self, tol):
                return self
            return None

        direction = n1.cross(n2)
        d1 = n1.dot(self.point.to_vector())
        d2 = n2.dot(other.point.to_vector())
        n11 = n1.dot(n1)
        n22 = n2.dot(n2)
        n12 = n1.dot(n2)
        det = n11 * n22 - n12 * n12
        c1 = (d1 * n22 - d2 * n12) / det
        c2 = (d2 * n11 - d1 * n12) / det
        return Line((n1 * c1 + n2 * c2).to_point(), direction)


__all__ = ["Point", "Vector", "Line", "Segment", "Plane", "gstr", "coordstr"]
