## exception types raised by anageom constructors

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

"""Geometry-specific exceptions.

Construction-time violations of a structural invariant raise one of the
classes below before any field is stored.  A query that has no answer,
such as a plane that misses a circle, is not an error and returns
``None`` instead.

Both concrete classes derive from ``ValueError`` so code written
against the plain ``ValueError`` convention keeps catching them.
"""


class GeometryError(ValueError):
    """Base class for anageom construction failures."""


class DegenerateInputError(GeometryError):
    """Inputs collapse to a configuration with no unique answer.

    Raised for collinear points given to the circumcircle constructor,
    collinear frame axes, and zero-length vectors that must be
    normalized (rotation axes, quaternions).
    """


class InvalidArgumentError(GeometryError):
    """Inputs violate a structural invariant of the constructed value.

    Raised for non-orthogonal ellipse semiaxes, matrices that are not
    proper rotations, and explicit frame axes that are not a
    right-handed orthogonal triple.
    """


__all__ = ["GeometryError", "DegenerateInputError", "InvalidArgumentError"]
