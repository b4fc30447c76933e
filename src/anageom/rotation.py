## rotation matrix, axis-angle and quaternion encodings for anageom

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

"""rotation representations for **anageom**

===============
Overview
===============

A rigid rotation of 3D space can be written down in several ways.
This module provides three of them, each convertible into the others:

``RotationMatrix``
    a proper orthonormal 3x3 matrix (determinant +1), stored as a
    read-only ``numpy`` array.  Vectors are treated as columns, so
    ``R.apply(v)`` computes ``R v``.

``AxisAngle``
    a unit axis and a right-handed rotation angle in radians,
    normalized into the interval ``(-pi, pi]``.

``Quaternion``
    a unit quaternion ``w + x i + y j + z k`` in scalar-first order,
    normalized on construction.

equivalence, not identity
-------------------------

The encodings are not unique.  ``AxisAngle(v, t)`` and
``AxisAngle(-v, -t)`` describe the same rotation, as do the quaternions
``q`` and ``-q``.  At a half turn the axis sign itself stops mattering:
``(v, pi)`` and ``(-v, pi)`` are the same rotation, and the quaternion
of a half turn has ``w = 0`` so its conjugate coincides with ``-q``.

Equality therefore means *same rotation*.  ``RotationMatrix`` compares
element-wise, ``AxisAngle`` compares through its matrix, and
``Quaternion`` compares component-wise up to a global sign.  Each type
compares only against its own type; ``is_same_rotation()`` compares any
two encodings.

Every class exposes ``to_matrix()``, which is what the point, vector
and conic transforms call, so any of the three can be passed wherever a
rotation is expected.
"""

from __future__ import annotations

import logging
from math import atan2, cos, pi, sin, sqrt

import numpy as np

from anageom.tolerance import epsilon
from anageom.errors import DegenerateInputError, InvalidArgumentError
from anageom.primitives import Vector, gstr

logger = logging.getLogger(__name__)

pi2 = 2.0 * pi


def normalize_angle(angle):
    """map ``angle`` (radians) into ``(-pi, pi]``"""
    a = angle % pi2
    if a > pi:
        a -= pi2
    return a


def _unit_axis(axis):
    if axis.norm == 0.0:
        logger.debug("rejecting zero-length rotation axis")
        raise DegenerateInputError('zero-length rotation axis not allowed')
    return axis.normalized


def _skew(u):
    return np.array([[0.0, -u.z, u.y],
                     [u.z, 0.0, -u.x],
                     [-u.y, u.x, 0.0]])


class RotationMatrix:
    """3x3 proper orthonormal rotation matrix"""

    def __init__(self, rows, tol=epsilon):
        if isinstance(rows, RotationMatrix):
            m = rows.matrix
        else:
            m = np.array(rows, dtype=float)
        if m.shape != (3, 3):
            raise InvalidArgumentError('rotation matrix must be 3x3, got shape {}'.format(m.shape))
        if np.max(np.abs(m @ m.T - np.eye(3))) > tol:
            logger.debug("rejecting non-orthonormal matrix %s", m.tolist())
            raise InvalidArgumentError('matrix is not orthonormal')
        if abs(np.linalg.det(m) - 1.0) > tol:
            logger.debug("rejecting improper matrix %s", m.tolist())
            raise InvalidArgumentError('matrix determinant is not +1')
        self._m = m
        self._m.setflags(write=False)

    __hash__ = None

    @classmethod
    def identity(cls):
        return cls(np.eye(3))

    @classmethod
    def from_axis_angle(cls, axis, angle):
        """Rodrigues' formula, ``R = I + sin(t) K + (1 - cos(t)) K^2``"""
        k = _skew(_unit_axis(axis))
        return cls(np.eye(3) + sin(angle) * k + (1.0 - cos(angle)) * (k @ k))

    @classmethod
    def from_quaternion(cls, q):
        w, x, y, z = q.components
        return cls([[1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
                    [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
                    [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)]])

    def __repr__(self):
        return "RotationMatrix({})".format(self._m.tolist())

    def __str__(self):
        rows = ["  ({}, {}, {})".format(*(gstr(v) for v in row)) for row in self._m]
        return "RotationMatrix:\n" + "\n".join(rows)

    def __getitem__(self, ij):
        return float(self._m[ij])

    def __eq__(self, other):
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        return self.equals(other)

    def __matmul__(self, other):
        if isinstance(other, RotationMatrix):
            return RotationMatrix(self._m @ other._m)
        if isinstance(other, Vector):
            return self.apply(other)
        return NotImplemented

    @property
    def matrix(self):
        """copy of the underlying 3x3 array"""
        return self._m.copy()

    @property
    def determinant(self):
        return float(np.linalg.det(self._m))

    def equals(self, other, tol=epsilon):
        """element-wise comparison within ``tol``"""
        if type(other) is not RotationMatrix:
            return False
        return bool(np.max(np.abs(self._m - other._m)) <= tol)

    def is_same_rotation(self, other, tol=epsilon):
        return self.equals(other.to_matrix(), tol)

    def apply(self, v):
        """rotate vector ``v``"""
        r = self._m @ np.array([v.x, v.y, v.z])
        return Vector(float(r[0]), float(r[1]), float(r[2]))

    def inverse(self):
        return RotationMatrix(self._m.T)

    def to_matrix(self):
        return self

    def to_axis_angle(self):
        """axis and angle of the rotation, angle in ``[0, pi]``

        The sine of the angle comes from the antisymmetric part of the
        matrix and the cosine from its trace.  Below a quarter turn the
        antisymmetric part also gives a well conditioned axis; above it
        the axis is read from the symmetric part ``u u^T``, using the
        column of its largest diagonal entry, with the sign taken from
        the antisymmetric part.
        """
        m = self._m
        anti = np.array([m[2, 1] - m[1, 2], m[0, 2] - m[2, 0], m[1, 0] - m[0, 1]])
        s = 0.5 * np.linalg.norm(anti)
        c = 0.5 * (np.trace(m) - 1.0)
        angle = atan2(s, c)

        if s == 0.0 and c > 0.0:
            return AxisAngle(Vector(1, 0, 0), 0.0)

        if angle < 0.5 * pi:
            axis = anti
        else:
            uu = (0.5 * (m + m.T) - c * np.eye(3)) / (1.0 - c)
            i = int(np.argmax(np.diag(uu)))
            axis = uu[:, i] / sqrt(uu[i, i])
            if np.dot(axis, anti) < 0.0:
                axis = -axis
        return AxisAngle(Vector(float(axis[0]), float(axis[1]), float(axis[2])), angle)

    def to_quaternion(self):
        """unit quaternion of the rotation

        Branches on whichever of the trace and the three diagonal
        entries is largest, so the divisor is never close to zero.
        """
        m = self._m
        tr = float(np.trace(m))
        d0, d1, d2 = float(m[0, 0]), float(m[1, 1]), float(m[2, 2])

        if tr >= max(d0, d1, d2):
            w = 0.5 * sqrt(1.0 + tr)
            f = 0.25 / w
            return Quaternion(w,
                              (m[2, 1] - m[1, 2]) * f,
                              (m[0, 2] - m[2, 0]) * f,
                              (m[1, 0] - m[0, 1]) * f)
        elif d0 >= d1 and d0 >= d2:
            x = 0.5 * sqrt(1.0 + d0 - d1 - d2)
            f = 0.25 / x
            return Quaternion((m[2, 1] - m[1, 2]) * f,
                              x,
                              (m[0, 1] + m[1, 0]) * f,
                              (m[0, 2] + m[2, 0]) * f)
        elif d1 >= d2:
            y = 0.5 * sqrt(1.0 + d1 - d0 - d2)
            f = 0.25 / y
            return Quaternion((m[0, 2] - m[2, 0]) * f,
                              (m[0, 1] + m[1, 0]) * f,
                              y,
                              (m[1, 2] + m[2, 1]) * f)
        else:
            z = 0.5 * sqrt(1.0 + d2 - d0 - d1)
            f = 0.25 / z
            return Quaternion((m[1, 0] - m[0, 1]) * f,
                              (m[0, 2] + m[2, 0]) * f,
                              (m[1, 2] + m[2, 1]) * f,
                              z)


class AxisAngle:
    """rotation by ``angle`` radians about ``axis`` (right-hand rule)"""

    def __init__(self, axis, angle):
        self._axis = _unit_axis(axis)
        self._angle = normalize_angle(float(angle))

    __hash__ = None

    @classmethod
    def from_matrix(cls, m):
        return m.to_axis_angle()

    @classmethod
    def from_quaternion(cls, q):
        return q.to_axis_angle()

    def __repr__(self):
        return "AxisAngle({!r}, {!r})".format(self._axis, self._angle)

    def __eq__(self, other):
        if not isinstance(other, AxisAngle):
            return NotImplemented
        return self.equals(other)

    @property
    def axis(self):
        return self._axis

    @property
    def angle(self):
        return self._angle

    def equals(self, other, tol=epsilon):
        """same rotation: the two matrices agree within ``tol``"""
        if type(other) is not AxisAngle:
            return False
        return self.to_matrix().equals(other.to_matrix(), tol)

    def is_same_rotation(self, other, tol=epsilon):
        return self.to_matrix().equals(other.to_matrix(), tol)

    def to_matrix(self):
        return RotationMatrix.from_axis_angle(self._axis, self._angle)

    def to_quaternion(self):
        return Quaternion.from_axis_angle(self._axis, self._angle)

    def to_axis_angle(self):
        return self

    def apply(self, v):
        return self.to_matrix().apply(v)

    def inverse(self):
        return AxisAngle(self._axis, -self._angle)


class Quaternion:
    """unit quaternion ``w + x i + y j + z k``

    The four components are scaled to unit length on construction; a
    zero quaternion has no direction and is rejected.
    """

    def __init__(self, w, x, y, z):
        n = sqrt(w * w + x * x + y * y + z * z)
        if n == 0.0:
            logger.debug("rejecting zero quaternion")
            raise DegenerateInputError('zero quaternion cannot represent a rotation')
        self._q = (float(w) / n, float(x) / n, float(y) / n, float(z) / n)

    __hash__ = None

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis, angle):
        u = _unit_axis(axis)
        s = sin(0.5 * angle)
        return cls(cos(0.5 * angle), u.x * s, u.y * s, u.z * s)

    @classmethod
    def from_matrix(cls, m):
        return m.to_quaternion()

    def __repr__(self):
        return "Quaternion({!r}, {!r}, {!r}, {!r})".format(*self._q)

    def __str__(self):
        return "Quaternion({}, {}, {}, {})".format(*(gstr(c) for c in self._q))

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.equals(other)

    def __neg__(self):
        w, x, y, z = self._q
        return Quaternion(-w, -x, -y, -z)

    def __mul__(self, other):
        """Hamilton product ``self * other`` (apply ``other`` first)"""
        if not isinstance(other, Quaternion):
            return NotImplemented
        w1, x1, y1, z1 = self._q
        w2, x2, y2, z2 = other._q
        return Quaternion(w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                          w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                          w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                          w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2)

    @property
    def components(self):
        """``(w, x, y, z)`` tuple"""
        return self._q

    @property
    def w(self):
        return self._q[0]

    @property
    def x(self):
        return self._q[1]

    @property
    def y(self):
        return self._q[2]

    @property
    def z(self):
        return self._q[3]

    @property
    def norm(self):
        return sqrt(sum(c * c for c in self._q))

    @property
    def conjugate(self):
        w, x, y, z = self._q
        return Quaternion(w, -x, -y, -z)

    def inverse(self):
        return self.conjugate

    @property
    def axis(self):
        return self.to_axis_angle().axis

    @property
    def angle(self):
        return self.to_axis_angle().angle

    def equals(self, other, tol=epsilon):
        """component-wise comparison within ``tol``, up to global sign"""
        if type(other) is not Quaternion:
            return False
        same = all(abs(a - b) <= tol for a, b in zip(self._q, other._q))
        flipped = all(abs(a + b) <= tol for a, b in zip(self._q, other._q))
        return same or flipped

    def is_same_rotation(self, other, tol=epsilon):
        return self.to_matrix().equals(other.to_matrix(), tol)

    def apply(self, v):
        """rotate vector ``v``, ``v + 2w (u x v) + 2 u x (u x v)``"""
        w = self._q[0]
        u = Vector(self._q[1], self._q[2], self._q[3])
        t = u.cross(v) * 2.0
        return v + t * w + u.cross(t)

    def to_matrix(self):
        return RotationMatrix.from_quaternion(self)

    def to_quaternion(self):
        return self

    def to_axis_angle(self):
        w, x, y, z = self._q
        s = sqrt(x * x + y * y + z * z)
        if s == 0.0:
            return AxisAngle(Vector(1, 0, 0), 0.0)
        return AxisAngle(Vector(x, y, z), 2.0 * atan2(s, w))


__all__ = ["RotationMatrix", "AxisAngle", "Quaternion", "normalize_angle"]
