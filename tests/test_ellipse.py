"""Tests for the ellipse primitive."""

import pytest
from math import pi, sqrt

from anageom.circle import Circle
from anageom.ellipse import Ellipse
from anageom.errors import InvalidArgumentError
from anageom.frame import Frame
from anageom.primitives import Line, Plane, Point, Segment, Vector, coordstr
from anageom.rotation import AxisAngle
from anageom.sections import Section


def xy_ellipse():
    return Ellipse(Point(0, 0, 0), Vector(4, 0, 0), Vector(0, 2, 0))


def on_ellipse(e, p, tol=1e-9):
    w = p - e.center
    s = w.dot(e.major_semiaxis) / e.a ** 2
    t = w.dot(e.minor_semiaxis) / e.b ** 2
    return abs(s * s + t * t - 1.0) < tol and abs(w.dot(e.normal.normalized)) < tol


class TestEllipseConstruction:
    """Test ellipse construction and validation."""

    def test_basic(self):
        e = xy_ellipse()
        assert e.center == Point(0, 0, 0)
        assert e.major_semiaxis == Vector(4, 0, 0)
        assert e.minor_semiaxis == Vector(0, 2, 0)
        assert e.a == 4.0
        assert e.b == 2.0

    def test_swaps_axes(self):
        """The longer semiaxis is always stored as the major one."""
        e = Ellipse(Point(0, 0, 0), Vector(0, 2, 0), Vector(4, 0, 0))
        assert e.major_semiaxis == Vector(4, 0, 0)
        assert e.minor_semiaxis == Vector(0, 2, 0)

    def test_not_orthogonal(self):
        with pytest.raises(InvalidArgumentError, match="semiaxes not orthogonal"):
            Ellipse(Point(0, 0, 0), Vector(4, 0, 0), Vector(1, 2, 0))

    def test_orthogonality_tolerance(self):
        Ellipse(Point(0, 0, 0), Vector(4, 0, 0), Vector(1e-6, 2, 0))
        with pytest.raises(InvalidArgumentError):
            Ellipse(Point(0, 0, 0), Vector(4, 0, 0), Vector(1e-6, 2, 0), tol=1e-9)

    def test_normal(self):
        e = xy_ellipse()
        assert e.normal == Vector(0, 0, 8)
        assert not e.is_oriented


class TestEllipseProperties:
    """Test derived quantities."""

    def test_foci_and_eccentricity(self):
        e = Ellipse(Point(1, 1, 1), Vector(5, 0, 0), Vector(0, 3, 0))
        assert abs(e.linear_eccentricity - 4.0) < 1e-12
        assert e.f1 == Point(5, 1, 1)
        assert e.f2 == Point(-3, 1, 1)
        assert abs(e.eccentricity - 0.8) < 1e-12

    def test_area_and_perimeter(self):
        e = Ellipse(Point(0, 0, 0), Vector(5, 0, 0), Vector(0, 3, 0))
        assert abs(e.area - 15 * pi) < 1e-12
        assert abs(e.perimeter - 25.527) < 1e-3

    def test_circular_measures(self):
        e = Ellipse(Point(0, 0, 0), Vector(2, 0, 0), Vector(0, 2, 0))
        assert e.is_circular()
        assert abs(e.perimeter - 4 * pi) < 1e-12
        assert e.eccentricity == 0.0
        assert e.f1 == e.center


class TestEllipseParametric:
    """Test parametric evaluation and sampling."""

    def test_cardinal_points(self):
        e = xy_ellipse()
        assert e.parametric_form(0) == Point(4, 0, 0)
        assert e.parametric_form(pi / 2) == Point(0, 2, 0)
        assert e.parametric_form(pi) == Point(-4, 0, 0)

    def test_periodic(self):
        e = Ellipse(Point(1, 2, 3), Vector(2, 2, 0), Vector(-1, 1, 1))
        for t in [0.0, 1.1, 4.0]:
            assert e.parametric_form(t + 2 * pi).equals(e.parametric_form(t), tol=1e-9)

    def test_sample(self):
        e = Ellipse(Point(1, 2, 3), Vector(2, 2, 0), Vector(-1, 1, 1))
        pts = list(e.sample(12))
        assert len(pts) == 12
        assert all(on_ellipse(e, p) for p in pts)
        assert len(list(e.sample(12))) == 12


class TestEllipseProjection:
    """Test orthogonal projection onto a plane."""

    def test_parallel_plane(self):
        e = xy_ellipse()
        proj = e.projection_to(Plane(Point(0, 0, 7), Vector(0, 0, 1)))
        assert proj == e.translate(Vector(0, 0, 7))

    def test_tilted_minor_axis(self):
        e = Ellipse(Point(0, 0, 0), Vector(4, 0, 0), Vector(0, 2, 2))
        proj = e.projection_to(Plane(Point(0, 0, 0), Vector(0, 0, 1)))
        assert abs(proj.a - 4.0) < 1e-9
        assert abs(proj.b - 2.0) < 1e-9
        assert proj.major_semiaxis.is_parallel_to(Vector(1, 0, 0))

    def test_conjugate_diameters(self):
        """Projected semiaxes are orthogonal even when the images of the
        original semiaxes are not."""
        e = Ellipse(Point(1, 0, 0), Vector(3, 0, 3), Vector(0, 2, 0))
        s = Plane(Point(0, 0, 0), Vector(1, 1, 1))
        proj = e.projection_to(s)
        assert proj.major_semiaxis.is_orthogonal_to(proj.minor_semiaxis)
        assert proj.normal.is_parallel_to(s.normal)
        for t in [0.0, 0.5, 2.0, 4.0]:
            p = e.parametric_form(t).projection_to(s)
            assert on_ellipse(proj, p)

    def test_edge_on_projection(self):
        """Seen edge-on the ellipse projects to a segment."""
        e = Ellipse(Point(1, 2, 3), Vector(3, 0, 3), Vector(1, 2, -1))
        s = Plane(Point(0, 0, 0), Vector(1, 1, 0))
        assert e.normal.is_orthogonal_to(s.normal)
        proj = e.projection_to(s)
        assert proj.center == Point(-0.5, 0.5, 3)
        assert abs(proj.a - sqrt(15)) < 1e-9
        assert proj.b == 0.0
        assert proj.major_semiaxis.is_parallel_to(Vector(1, -1, 2))
        for t in [0.0, 0.5, 2.0, 4.0]:
            w = e.parametric_form(t).projection_to(s) - proj.center
            assert w.is_parallel_to(proj.major_semiaxis, tol=1e-9)
            assert w.norm <= proj.a + 1e-9


class TestEllipsePlaneIntersection:
    """Test the ellipse/plane decision table."""

    def test_coplanar(self):
        e = xy_ellipse()
        s = Plane(Point(1, 1, 0), Vector(0, 0, 1))
        assert e.section_with(s) is Section.COPLANAR
        assert e.intersection_with(s) == e

    def test_parallel(self):
        e = xy_ellipse()
        s = Plane(Point(0, 0, 1), Vector(0, 0, 1))
        assert e.section_with(s) is Section.PARALLEL
        assert e.intersection_with(s) is None

    def test_secant_horizontal_line(self):
        e = xy_ellipse()
        s = Plane(Point(0, 1, 0), Vector(0, 1, 0))
        result = e.intersection_with(s)
        assert isinstance(result, Segment)
        assert result == Segment(Point(2 * sqrt(3), 1, 0), Point(-2 * sqrt(3), 1, 0))

    def test_tangent_horizontal_line(self):
        e = xy_ellipse()
        s = Plane(Point(0, 2, 0), Vector(0, 1, 0))
        assert e.section_with(s) is Section.TANGENT
        assert e.intersection_with(s) == Point(0, 2, 0)

    def test_secant_vertical_line(self):
        """A line along the minor axis direction needs the axis swap."""
        e = xy_ellipse()
        s = Plane(Point(2, 0, 0), Vector(1, 0, 0))
        result = e.intersection_with(s)
        assert isinstance(result, Segment)
        assert result == Segment(Point(2, sqrt(3), 0), Point(2, -sqrt(3), 0))

    def test_tangent_vertical_line(self):
        e = xy_ellipse()
        s = Plane(Point(4, 0, 0), Vector(1, 0, 0))
        assert e.section_with(s) is Section.TANGENT
        assert e.intersection_with(s) == Point(4, 0, 0)

    def test_disjoint(self):
        e = xy_ellipse()
        s = Plane(Point(5, 0, 0), Vector(1, 0, 0))
        assert e.section_with(s) is Section.DISJOINT
        assert e.intersection_with(s) is None
        s = Plane(Point(0, 3, 0), Vector(0, 1, 1))
        assert e.intersection_with(s) is None

    def test_diagonal_line(self):
        e = xy_ellipse()
        s = Plane(Point(0, 0, 0), Vector(1, -1, 0))
        result = e.intersection_with(s)
        x = 8 / sqrt(20)
        assert result == Segment(Point(x, x, 0), Point(-x, -x, 0))

    def test_general_position(self):
        """Both endpoints lie on the ellipse and on the plane."""
        e = Ellipse(Point(1, 2, 3), Vector(2, 2, 0), Vector(-1, 1, 1))
        s = Plane(Point(1.5, 2, 3), Vector(1, 0.3, 0.2))
        result = e.intersection_with(s)
        assert isinstance(result, Segment)
        for p in (result.p1, result.p2):
            assert on_ellipse(e, p)
            assert abs(s.signed_distance(p)) < 1e-9

    def test_nearly_vertical_general_position(self):
        """Endpoints stay on the ellipse across the swap threshold."""
        e = xy_ellipse()
        for slope in [50.0, 99.0, 101.0, 1e4]:
            s = Plane(Point(1, 0, 0), Vector(slope, -1, 0))
            result = e.intersection_with(s)
            assert isinstance(result, Segment)
            for p in (result.p1, result.p2):
                assert on_ellipse(e, p)
                assert abs(s.signed_distance(p)) < 1e-9


class TestEllipseTransforms:
    """Test rigid transforms."""

    def test_translate(self):
        e = xy_ellipse().translate(Vector(1, 2, 3))
        assert e.center == Point(1, 2, 3)
        assert e.major_semiaxis == Vector(4, 0, 0)

    def test_rotate(self):
        e = xy_ellipse().rotate(AxisAngle(Vector(0, 0, 1), pi / 2))
        assert e.major_semiaxis == Vector(0, 4, 0)
        assert e.minor_semiaxis == Vector(-2, 0, 0)
        assert abs(e.a - 4.0) < 1e-12
        assert abs(e.b - 2.0) < 1e-12

    def test_rotate_about_pivot(self):
        e = xy_ellipse().rotate(AxisAngle(Vector(0, 0, 1), pi), Point(1, 0, 0))
        assert e.center == Point(2, 0, 0)
        assert e == xy_ellipse().translate(Vector(2, 0, 0))

    def test_reflect(self):
        e = Ellipse(Point(0, 0, 1), Vector(4, 0, 0), Vector(0, 2, 0))
        f = e.reflect_in(Plane(Point(0, 0, 0), Vector(0, 0, 1)))
        assert f.center == Point(0, 0, -1)
        assert f.a == 4.0
        assert f.b == 2.0
        g = e.reflect_in(Line(Point(0, 0, 0), Vector(0, 1, 0)))
        assert g.center == Point(0, 0, -1)
        assert g == f
        h = e.reflect_in(Point(0, 0, 0))
        assert h == f


class TestEllipseEquality:
    """Test equality semantics."""

    def test_axis_order_and_sign(self):
        e = xy_ellipse()
        assert e == Ellipse(Point(0, 0, 0), Vector(0, 2, 0), Vector(4, 0, 0))
        assert e == Ellipse(Point(0, 0, 0), Vector(-4, 0, 0), Vector(0, -2, 0))

    def test_orientation_matters(self):
        e = xy_ellipse()
        f = Ellipse(Point(0, 0, 0), Vector(0, 4, 0), Vector(2, 0, 0))
        assert e != f
        assert f != e

    def test_lengths_matter(self):
        e = xy_ellipse()
        assert e != Ellipse(Point(0, 0, 0), Vector(4, 0, 0), Vector(0, 3, 0))
        assert e != Ellipse(Point(1, 0, 0), Vector(4, 0, 0), Vector(0, 2, 0))

    def test_circular_ignores_orientation(self):
        e = Ellipse(Point(0, 0, 0), Vector(2, 0, 0), Vector(0, 2, 0))
        f = Ellipse(Point(0, 0, 0), Vector(sqrt(2), sqrt(2), 0), Vector(-sqrt(2), sqrt(2), 0))
        assert e == f
        assert f == e
        assert e != Ellipse(Point(0, 0, 0), Vector(2, 0, 0), Vector(0, 0, 2))

    def test_circular_vs_not(self):
        e = Ellipse(Point(0, 0, 0), Vector(2, 0, 0), Vector(0, 2, 0))
        f = Ellipse(Point(0, 0, 0), Vector(2, 0, 0), Vector(0, 1, 0))
        assert e != f
        assert f != e

    def test_reflexive(self):
        e = Ellipse(Point(1, 2, 3), Vector(2, 2, 0), Vector(-1, 1, 1))
        assert e == e

    def test_circle_to_ellipse(self):
        c = Circle(Point(1, 2, 3), 2.0, Vector(0, 0, 1))
        assert c.to_ellipse() == Ellipse(Point(1, 2, 3), Vector(0, 2, 0), Vector(2, 0, 0))

    def test_no_cross_type_equality(self):
        e = Ellipse(Point(0, 0, 0), Vector(2, 0, 0), Vector(0, 2, 0))
        assert e != Circle(Point(0, 0, 0), 2.0, Vector(0, 0, 1))


class TestEllipsePredicates:
    """Test parallel/orthogonal predicates."""

    def test_predicates(self):
        e = xy_ellipse()
        assert e.is_parallel_to(Plane(Point(0, 0, 3), Vector(0, 0, 1)))
        assert e.is_parallel_to(Line(Point(0, 0, 0), Vector(1, 2, 0)))
        assert e.is_orthogonal_to(Line(Point(0, 0, 0), Vector(0, 0, 1)))
        assert e.is_orthogonal_to(Plane(Point(0, 0, 0), Vector(0, 1, 0)))
        assert e.is_not_parallel_to(Plane(Point(0, 0, 0), Vector(0, 1, 1)))

    def test_bad_object(self):
        with pytest.raises(ValueError):
            xy_ellipse().is_parallel_to(42)


class TestEllipseString:
    """Test the diagnostic string form."""

    def test_global(self):
        lines = str(xy_ellipse()).split("\n")
        assert lines[0].startswith("Ellipse:")
        assert lines[1] == "  Center -> " + coordstr(0, 0, 0)
        assert lines[2] == "  Semiaxis A -> " + coordstr(4, 0, 0)
        assert lines[3] == "  Semiaxis B -> " + coordstr(0, 2, 0)

    def test_relative_to_frame(self):
        cs = Frame(Point(0, 0, 0), Vector(0, 1, 0), Vector(-1, 0, 0))
        s = xy_ellipse().to_string(cs)
        assert "  Semiaxis B -> " + coordstr(2, 0, 0) in s
