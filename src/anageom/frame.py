## local coordinate systems for anageom

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

"""Local coordinate frames.

A ``Frame`` is a right-handed orthonormal coordinate system: an origin
plus three unit axes.  The conic algorithms use frames to reduce a 3D
problem to a planar one; a frame is built, used to convert a handful of
points and vectors, and discarded.

The basis is stored as a read-only 3x3 ``numpy`` array whose rows are
the x, y and z axes in global coordinates, so converting to local
coordinates is a single matrix-vector product and converting back is a
product with the transpose.
"""

from __future__ import annotations

import logging

import numpy as np

from anageom.tolerance import epsilon
from anageom.errors import DegenerateInputError, InvalidArgumentError
from anageom.primitives import Point, Vector, coordstr

logger = logging.getLogger(__name__)


def _asarray(v):
    return np.array([v.x, v.y, v.z], dtype=float)


class Frame:
    """Right-handed orthonormal frame.

    ``Frame(origin, axis1, axis2)`` takes the x axis along ``axis1``,
    the z axis along ``axis1 x axis2`` and completes the basis with
    ``y = z x x``, so ``axis2`` only needs to be non-collinear with
    ``axis1``; it lands in the half of the xy plane with positive y.

    ``Frame(origin, axis1, axis2, axis3)`` instead requires the three
    axes to already be mutually orthogonal and right-handed, and only
    normalizes them.
    """

    def __init__(self, origin, axis1, axis2, axis3=None, tol=epsilon):
        if axis3 is None:
            x = _asarray(axis1)
            nx = np.linalg.norm(x)
            z = np.cross(x, _asarray(axis2))
            nz = np.linalg.norm(z)
            if nx == 0.0 or nz < tol * nx * np.linalg.norm(_asarray(axis2)):
                logger.debug("rejecting frame with collinear axes %s, %s",
                             axis1, axis2)
                raise DegenerateInputError('frame axes are collinear')
            x = x / nx
            z = z / nz
            y = np.cross(z, x)
        else:
            for a, b in ((axis1, axis2), (axis2, axis3), (axis1, axis3)):
                if not a.is_orthogonal_to(b, tol):
                    raise InvalidArgumentError('frame axes are not orthogonal')
            x = _asarray(axis1.normalized)
            y = _asarray(axis2.normalized)
            z = _asarray(axis3.normalized)
            if np.dot(np.cross(x, y), z) < 0.0:
                raise InvalidArgumentError('frame axes are not right-handed')

        self._origin = Point(origin.x, origin.y, origin.z)
        self._axes = np.vstack((x, y, z))
        self._axes.setflags(write=False)

    def __repr__(self):
        return "Frame(origin={}, x={}, y={}, z={})".format(
            coordstr(*self._origin), coordstr(*self._axes[0]),
            coordstr(*self._axes[1]), coordstr(*self._axes[2]))

    @property
    def origin(self):
        return self._origin

    @property
    def xaxis(self):
        return Vector(*self._axes[0])

    @property
    def yaxis(self):
        return Vector(*self._axes[1])

    @property
    def zaxis(self):
        return Vector(*self._axes[2])

    @property
    def axes(self):
        """copy of the 3x3 basis, one axis per row"""
        return self._axes.copy()

    def point_to_local(self, p):
        """local coordinates of global point ``p``"""
        local = self._axes @ (_asarray(p) - _asarray(self._origin))
        return Point(*(float(c) for c in local))

    def point_to_global(self, p):
        """global point with local coordinates ``p``"""
        world = _asarray(self._origin) + self._axes.T @ _asarray(p)
        return Point(*(float(c) for c in world))

    def vector_to_local(self, v):
        local = self._axes @ _asarray(v)
        return Vector(*(float(c) for c in local))

    def vector_to_global(self, v):
        world = self._axes.T @ _asarray(v)
        return Vector(*(float(c) for c in world))


GLOBAL_FRAME = Frame(Point(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))


__all__ = ["Frame", "GLOBAL_FRAME"]
