# -*- coding: utf-8 -*-
import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("anageom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from anageom.tolerance import epsilon, close, greater, less
from anageom.errors import GeometryError, DegenerateInputError, InvalidArgumentError
from anageom.primitives import Point, Vector, Line, Segment, Plane
from anageom.frame import Frame, GLOBAL_FRAME
from anageom.sections import Section
from anageom.rotation import RotationMatrix, AxisAngle, Quaternion
from anageom.circle import Circle
from anageom.ellipse import Ellipse

__all__ = [
    "epsilon",
    "close",
    "greater",
    "less",
    "GeometryError",
    "DegenerateInputError",
    "InvalidArgumentError",
    "Point",
    "Vector",
    "Line",
    "Segment",
    "Plane",
    "Frame",
    "GLOBAL_FRAME",
    "Section",
    "RotationMatrix",
    "AxisAngle",
    "Quaternion",
    "Circle",
    "Ellipse",
]
