"""Unit tests for wedges and circle fitting.

Tests cover:
- Wedge construction (regular, degenerate, coincident arms)
- Loose and strict containment
- Circles through a point and tangent to an edge, in both wedge kinds
- Selecting the circle outside the hull
"""

import math

import pytest

from mintriangle.core.wedge import Wedge, choose_outer_fit
from mintriangle.domain import Line, Side, Vec2
from mintriangle.exceptions import GeometryError

HALO = 1e-9
SQRT2 = math.sqrt(2.0)


@pytest.fixture
def quadrant() -> Wedge:
    """Wedge with vertex at the origin covering the first quadrant."""
    return Wedge.from_arms(
        Line(Vec2(0.0, 0.0), Vec2(0.0, 5.0)),
        Line(Vec2(0.0, 0.0), Vec2(5.0, 0.0)),
        HALO,
    )


@pytest.fixture
def strip() -> Wedge:
    """Degenerate wedge between y=0 and y=4."""
    return Wedge.from_arms(
        Line(Vec2(0.0, 0.0), Vec2(1.0, 0.0)),
        Line(Vec2(0.0, 4.0), Vec2(1.0, 4.0)),
        HALO,
    )


class TestWedgeConstruction:
    """Tests for building wedges from arms."""

    def test_regular_wedge_vertex(self, quadrant):
        assert not quadrant.is_degenerate
        assert quadrant.vertex == Vec2(0.0, 0.0)

    def test_inner_sides(self, quadrant):
        """Interior sides face the other arm."""
        assert quadrant.left_inner is Side.RIGHT
        assert quadrant.right_inner is Side.LEFT

    def test_parallel_arms_are_degenerate(self, strip):
        assert strip.is_degenerate
        assert strip.vertex is None

    def test_opposite_directions_still_degenerate(self):
        wedge = Wedge.from_arms(
            Line(Vec2(0.0, 0.0), Vec2(1.0, 0.0)),
            Line(Vec2(1.0, 4.0), Vec2(0.0, 4.0)),
            HALO,
        )
        assert wedge.is_degenerate

    def test_coincident_arms_rejected(self):
        with pytest.raises(GeometryError):
            Wedge.from_arms(
                Line(Vec2(0.0, 0.0), Vec2(1.0, 0.0)),
                Line(Vec2(2.0, 0.0), Vec2(3.0, 0.0)),
                HALO,
            )

    def test_vertex_away_from_arm_endpoints(self):
        """Arms given as segments still meet at their extended intersection."""
        wedge = Wedge.from_arms(
            Line(Vec2(0.0, 1.0), Vec2(0.0, 5.0)),
            Line(Vec2(2.0, 0.0), Vec2(5.0, 0.0)),
            HALO,
        )
        assert wedge.vertex == Vec2(0.0, 0.0)


class TestContainment:
    """Tests for loose and strict containment."""

    def test_interior_point(self, quadrant):
        assert quadrant.strictly_contains(Vec2(1.0, 1.0), HALO)
        assert quadrant.loosely_contains(Vec2(1.0, 1.0), HALO)

    def test_point_on_arm(self, quadrant):
        """Boundary points are loosely but not strictly contained."""
        assert quadrant.loosely_contains(Vec2(0.0, 3.0), HALO)
        assert not quadrant.strictly_contains(Vec2(0.0, 3.0), HALO)

    def test_point_near_arm_within_halo(self, quadrant):
        assert quadrant.loosely_contains(Vec2(-0.001, 3.0), 0.01)
        assert not quadrant.strictly_contains(Vec2(0.001, 3.0), 0.01)

    def test_exterior_point(self, quadrant):
        assert not quadrant.loosely_contains(Vec2(-1.0, 1.0), HALO)
        assert not quadrant.strictly_contains(Vec2(1.0, -1.0), HALO)

    def test_strip_containment(self, strip):
        assert strip.strictly_contains(Vec2(100.0, 2.0), HALO)
        assert strip.loosely_contains(Vec2(-50.0, 4.0), HALO)
        assert not strip.loosely_contains(Vec2(0.0, 5.0), HALO)


class TestFitPointRegular:
    """Circles through a point in a regular wedge."""

    def test_single_circle(self, quadrant):
        fits = quadrant.fit_circles(Vec2(1.0, 1.0), HALO)
        assert fits is not None
        assert len(fits) == 1
        assert fits[0].tangent_parameter is None

    def test_circle_touches_both_arms_on_far_side(self, quadrant):
        """The circle is the excircle of the triangle cut by the tangent."""
        circle = quadrant.fit_circles(Vec2(1.0, 1.0), HALO)[0].circle
        assert circle.centre.x == pytest.approx(2.0 + SQRT2)
        assert circle.centre.y == pytest.approx(2.0 + SQRT2)
        assert circle.radius == pytest.approx(2.0 + SQRT2)

    def test_circle_passes_through_point(self, quadrant):
        point = Vec2(1.0, 3.0)
        circle = quadrant.fit_circles(point, HALO)[0].circle
        assert (point - circle.centre).norm == pytest.approx(circle.radius)
        assert circle.centre.x == pytest.approx(circle.radius)
        assert circle.centre.y == pytest.approx(circle.radius)

    def test_tangent_line(self, quadrant):
        """Tangent at (1, 1) is the line x + y = 2."""
        tangent = quadrant.fit_circles(Vec2(1.0, 1.0), HALO)[0].tangent
        assert tangent.start == Vec2(1.0, 1.0)
        assert tangent.distance_to_point(Vec2(2.0, 0.0)) == pytest.approx(0.0, abs=1e-9)
        assert tangent.distance_to_point(Vec2(0.0, 2.0)) == pytest.approx(0.0, abs=1e-9)

    def test_point_outside_has_no_circle(self, quadrant):
        assert quadrant.fit_circles(Vec2(-1.0, -1.0), HALO) is None


class TestFitPointDegenerate:
    """Circles through a point in a strip."""

    def test_two_circles(self, strip):
        fits = strip.fit_circles(Vec2(3.0, 1.0), HALO)
        assert fits is not None
        assert len(fits) == 2

    def test_circles_span_strip(self, strip):
        point = Vec2(3.0, 1.0)
        fits = strip.fit_circles(point, HALO)
        xs = sorted(fit.circle.centre.x for fit in fits)
        assert xs[0] == pytest.approx(3.0 - math.sqrt(3.0))
        assert xs[1] == pytest.approx(3.0 + math.sqrt(3.0))
        for fit in fits:
            assert fit.circle.radius == pytest.approx(2.0)
            assert fit.circle.centre.y == pytest.approx(2.0)
            assert (point - fit.circle.centre).norm == pytest.approx(2.0)

    def test_point_outside_strip(self, strip):
        assert strip.fit_circles(Vec2(3.0, 5.0), HALO) is None


class TestFitEdgeRegular:
    """Circles tangent to an edge in a regular wedge."""

    def test_contact_inside_edge(self, quadrant):
        edge = Line(Vec2(2.0, 0.0), Vec2(0.0, 2.0))
        fits = quadrant.fit_circles(edge, HALO)
        assert fits is not None
        assert len(fits) == 1
        fit = fits[0]
        assert fit.tangent_parameter == pytest.approx(0.5)
        assert fit.circle.radius == pytest.approx(2.0 + SQRT2)
        assert fit.tangent == edge

    def test_contact_beyond_edge(self, quadrant):
        """Contact on the extension of the edge gives a parameter outside (0, 1)."""
        edge = Line(Vec2(4.0, 0.0), Vec2(3.0, 1.0))
        fit = quadrant.fit_circles(edge, HALO)[0]
        assert fit.tangent_parameter == pytest.approx(2.0)

    def test_edge_parallel_to_arm(self, quadrant):
        """Cutting line parallel to an arm never closes a triangle."""
        edge = Line(Vec2(3.0, 2.0), Vec2(1.0, 2.0))
        assert quadrant.fit_circles(edge, HALO) is None

    def test_edge_through_vertex(self, quadrant):
        edge = Line(Vec2(1.0, 1.0), Vec2(2.0, 2.0))
        assert quadrant.fit_circles(edge, HALO) is None


class TestFitEdgeDegenerate:
    """Circles tangent to an edge in a strip."""

    def test_two_circles_either_side(self, strip):
        edge = Line(Vec2(1.0, 0.0), Vec2(1.0, 4.0))
        fits = strip.fit_circles(edge, HALO)
        assert fits is not None
        centres = sorted((fit.circle.centre.x, fit.circle.centre.y) for fit in fits)
        assert centres[0] == pytest.approx((-1.0, 2.0))
        assert centres[1] == pytest.approx((3.0, 2.0))
        for fit in fits:
            assert fit.tangent_parameter == pytest.approx(0.5)

    def test_slanted_edge(self, strip):
        edge = Line(Vec2(0.0, 0.0), Vec2(4.0, 4.0))
        for fit in strip.fit_circles(edge, HALO):
            assert edge.distance_to_point(fit.circle.centre) == pytest.approx(2.0)
            assert fit.circle.centre.y == pytest.approx(2.0)

    def test_edge_parallel_to_strip(self, strip):
        edge = Line(Vec2(0.0, 1.0), Vec2(3.0, 1.0))
        assert strip.fit_circles(edge, HALO) is None


class TestChooseOuterFit:
    """Tests for selecting the circle outside the hull."""

    HULL = [Vec2(1.0, 0.0), Vec2(3.0, 0.0), Vec2(3.0, 4.0), Vec2(1.0, 4.0)]

    def test_single_fit_returned(self, quadrant):
        fits = quadrant.fit_circles(Vec2(1.0, 1.0), HALO)
        assert choose_outer_fit(fits, self.HULL, HALO) is fits[0]

    def test_picks_circle_outside_hull(self, strip):
        edge = Line(Vec2(1.0, 4.0), Vec2(1.0, 0.0))
        fits = strip.fit_circles(edge, HALO)
        chosen = choose_outer_fit(fits, self.HULL, HALO, reference=edge)
        assert chosen.circle.centre.x == pytest.approx(-1.0)

    def test_order_of_candidates_irrelevant(self, strip):
        edge = Line(Vec2(1.0, 4.0), Vec2(1.0, 0.0))
        fits = strip.fit_circles(edge, HALO)
        chosen = choose_outer_fit((fits[1], fits[0]), self.HULL, HALO, reference=edge)
        assert chosen.circle.centre.x == pytest.approx(-1.0)

    def test_point_fit_uses_tangent(self, strip):
        """Without a reference line the first candidate's tangent decides."""
        hull = [Vec2(0.0, 0.0), Vec2(4.0, 0.0), Vec2(4.0, 4.0), Vec2(0.0, 4.0)]
        fits = strip.fit_circles(Vec2(4.0, 2.0), HALO)
        chosen = choose_outer_fit(fits, hull, HALO)
        assert chosen.circle.centre.x == pytest.approx(6.0)
