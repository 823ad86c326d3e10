"""Property tests for the minimum perimeter enclosing triangle.

Runs the full search on sample hulls and checks enclosure, tangency and
invariance under rotation and reflection of the input.
"""

import math

import pytest

from mintriangle import min_triangle, min_triangle_with_base
from mintriangle.core import line_tangent_to_hull
from mintriangle.domain import Line, Triangle, Vec2

TOLERANCE = 1e-6


def hull_perimeter(points: list[Vec2]) -> float:
    return sum(Line(points[i - 1], points[i]).length for i in range(len(points)))


def side_lengths(triangle: Triangle) -> list[float]:
    return sorted(side.length for side in triangle.sides)


class TestEnclosure:
    """The result contains the hull and touches it."""

    def test_triangle_found(self, hull):
        assert min_triangle(hull, TOLERANCE) is not None

    def test_encloses_hull(self, hull):
        triangle = min_triangle(hull, TOLERANCE)
        assert triangle.encloses(hull, TOLERANCE)

    def test_perimeter_exceeds_hull_perimeter(self, hull):
        triangle = min_triangle(hull, TOLERANCE)
        assert triangle.perimeter > hull_perimeter(hull)

    def test_every_side_touches_hull(self, hull):
        triangle = min_triangle(hull, TOLERANCE)
        for side in triangle.sides:
            assert min(side.distance_to_point(p) for p in hull) < TOLERANCE

    def test_sides_support_hull_at_looser_tolerance(self, hull):
        """A side that supports the hull keeps doing so with a larger halo."""
        triangle = min_triangle(hull, TOLERANCE)
        for side in triangle.sides:
            assert line_tangent_to_hull(side, hull, TOLERANCE).holds
            assert line_tangent_to_hull(side, hull, 1e-3).holds


class TestOptimality:
    """The result is the best over all bases."""

    def test_not_worse_than_any_base(self, hull):
        best = min_triangle(hull, TOLERANCE)
        for k in range(len(hull)):
            candidate = min_triangle_with_base(hull[k:] + hull[:k], TOLERANCE)
            if candidate is not None:
                assert best.perimeter <= candidate.perimeter

    def test_square_improves_on_first_round(self):
        """The first round on a 4x4 square gives 16 + 8 * sqrt(2)."""
        square = [Vec2(0.0, 0.0), Vec2(4.0, 0.0), Vec2(4.0, 4.0), Vec2(0.0, 4.0)]
        triangle = min_triangle(square, TOLERANCE)
        assert triangle.perimeter < 27.0

    def test_hexagon_bound(self):
        """Extending alternate edges gives an equilateral triangle with perimeter 9 * r."""
        hexagon = [
            Vec2(10.0 * math.cos(math.pi * k / 3), 10.0 * math.sin(math.pi * k / 3))
            for k in range(6)
        ]
        triangle = min_triangle(hexagon, TOLERANCE)
        assert triangle.perimeter < 95.0


class TestInvariance:
    """Rotating or mirroring the input does not change the answer."""

    def test_rotation_invariance(self, hull):
        expected = min_triangle(hull, TOLERANCE).perimeter
        for k in range(1, len(hull)):
            rotated = hull[k:] + hull[:k]
            assert min_triangle(rotated, TOLERANCE).perimeter == pytest.approx(expected)

    def test_mirror_congruence(self, hull):
        triangle = min_triangle(hull, TOLERANCE)
        mirrored = min_triangle([Vec2(-p.x, p.y) for p in hull], TOLERANCE)
        assert side_lengths(mirrored) == pytest.approx(side_lengths(triangle))
