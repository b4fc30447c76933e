## shared tolerance and scalar comparison helpers for anageom

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

"""tolerance handling for **anageom**

``epsilon`` is the default tolerance used by every approximate
comparison in the package.  It is never read implicitly inside an
algorithm: each comparison, validating constructor and intersection
routine takes a ``tol`` keyword that defaults to ``epsilon``, so a
caller that needs a different tolerance passes it explicitly.

Scalar numbers are ordinary Python ``int`` or ``float`` values, so the
empirically chosen default of 5E-6 reflects double precision round-off
accumulated through frame conversions.  Redefine it at your peril.
"""

## constants
epsilon = 0.000005


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) <= tol


def greater(a, b, tol=epsilon):
    """ is ``a`` greater than ``b`` by more than ``tol``
    """
    return a - b > tol


def less(a, b, tol=epsilon):
    """ is ``a`` less than ``b`` by more than ``tol``
    """
    return b - a > tol


__all__ = ["epsilon", "isgoodnum", "close", "greater", "less"]
