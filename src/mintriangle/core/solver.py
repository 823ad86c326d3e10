"""Minimum perimeter triangle enclosing a convex hull.

The search follows the generic algorithm for minimal enclosing triangles
(Windsor thesis, p. 22 onwards) with the base side BC fixed to one hull
edge:

1. Bootstrap a degenerate wedge from BC and its parallel through the
   antipodal vertex.
2. Alternately find the shortest side AC for the wedge (BC, AB) and the
   shortest side AB for the wedge (BC, AC) until their hull contacts sit at
   equal distances from C and B.
3. Repeat for every hull edge as base and keep the smallest perimeter.

Key functions:
- find_antipode: Vertex farthest from the base edge
- min_triangle_with_base: Triangle for the base hull[0] -> hull[-1]
- min_triangle: Best triangle over all bases

Key classes:
- TriangleSolver: Runs min_triangle with logging and statistics
"""

import logging
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

import structlog

from mintriangle.config import MinTriangleSettings, SolverConfig
from mintriangle.core.enclosing import find_enclosing_side
from mintriangle.core.geometry import remove_repeated_points
from mintriangle.core.wedge import Wedge
from mintriangle.domain import Line, Triangle, Vec2
from mintriangle.utils import SolverLogger, SolverStats

logger = logging.getLogger(__name__)

CONVERGENCE_THRESHOLD = 0.1
MAX_ITERATIONS = 100


def find_antipode(points: Sequence[Vec2]) -> int:
    """Index of the point farthest from the line through the first and last point.

    Ties keep the first maximum; index 0 is returned when no point is off
    the line.
    """
    base = Line(points[0], points[-1])
    farthest_index = 0
    farthest_distance = 0.0

    for i, point in enumerate(points):
        distance = base.distance_to_point(point)
        if distance > farthest_distance:
            farthest_distance = distance
            farthest_index = i

    return farthest_index


def min_triangle_with_base(
    hull: Sequence[Vec2],
    tolerance: float,
    convergence_threshold: float = CONVERGENCE_THRESHOLD,
    max_iterations: int = MAX_ITERATIONS,
) -> Triangle | None:
    """Minimal perimeter triangle with one side along the edge hull[-1] -> hull[0].

    Args:
        hull: Convex hull points in consistent winding order
        tolerance: Geometric tolerance
        convergence_threshold: Stop once |AB| - |AC| is at most this length
        max_iterations: Refinement rounds before giving up

    Returns:
        Triangle with B and C on the base line, or None if a side search
        fails or the refinement does not converge

    Raises:
        GeometryError: If the hull is degenerate (all points collinear) or
            the converged sides do not intersect
    """
    points = list(hull)
    n = len(points)
    if n < 3:
        return None

    base = Line(points[0], points[-1])
    antipode = find_antipode(points)

    wedge = Wedge.from_arms(base, base.parallel_through(points[antipode]), tolerance)

    # Vertex cursors only move backwards between rounds
    p_cursor = n
    q_cursor = antipode + 1

    for iteration in range(1, max_iterations + 1):
        found = find_enclosing_side(wedge, min(n - 1, p_cursor), antipode, points, tolerance)
        if found is None:
            return None
        ac, p_cursor = found.side, found.stop_vertex

        wedge = Wedge.from_arms(wedge.left_arm, ac, tolerance)

        found = find_enclosing_side(wedge, min(antipode, q_cursor), 0, points, tolerance)
        if found is None:
            return None
        ab, q_cursor = found.side, found.stop_vertex

        wedge = Wedge.from_arms(wedge.left_arm, ab, tolerance)

        # |AB| >= |AC| throughout; they meet at the optimum
        if ab.length - ac.length <= convergence_threshold:
            logger.debug(
                "Base converged after %d iterations (|AB|=%.6f, |AC|=%.6f)",
                iteration, ab.length, ac.length
            )
            break
    else:
        logger.debug("Base did not converge within %d iterations", max_iterations)
        return None

    return Triangle(
        a=ac.require_intersection(ab, 0.0),
        b=ab.start,
        c=ac.start,
    )


def iter_rotations(
    points: Sequence[Vec2],
    tolerance: float,
    config: SolverConfig,
) -> Iterator[tuple[int, Triangle | None]]:
    """Run the base algorithm once per hull edge.

    Rotation k moves the first k points to the end, making the edge between
    points[k - 1] and points[k] the base.

    Yields:
        Tuples of (rotation, triangle or None)
    """
    for rotation in range(len(points)):
        rotated = list(points[rotation:]) + list(points[:rotation])
        yield rotation, min_triangle_with_base(
            rotated,
            tolerance,
            convergence_threshold=config.convergence_threshold,
            max_iterations=config.max_iterations,
        )


def min_triangle(
    hull: Iterable[Any],
    tolerance: float | None = None,
    config: SolverConfig | None = None,
) -> Triangle | None:
    """Find the minimum perimeter triangle enclosing a convex hull.

    Consecutive repeated vertices, including a closing copy of the first
    vertex, are dropped before counting points.

    Args:
        hull: Hull vertices in consistent winding order, as Vec2 instances,
            (x, y) pairs or objects/mappings with x and y
        tolerance: Geometric tolerance, chosen relative to the coordinate
            magnitudes (config.tolerance if None)
        config: Solver settings (defaults if None)

    Returns:
        The enclosing triangle, the distinct input points for exactly three
        of them, or None for fewer than three points or when every base fails

    Examples:
        >>> triangle = min_triangle([(0, 0), (4, 0), (4, 4), (0, 4)], 1e-6)
        >>> triangle.perimeter < 16 + 8 * 2 ** 0.5
        True
    """
    config = config or SolverConfig()
    if tolerance is None:
        tolerance = config.tolerance

    points = remove_repeated_points([Vec2.coerce(p) for p in hull])
    if len(points) < 3:
        return None
    if len(points) == 3:
        return Triangle(*points)

    best: Triangle | None = None
    for rotation, triangle in iter_rotations(points, tolerance, config):
        if triangle is None:
            logger.debug("No triangle for rotation %d", rotation)
            continue
        if best is None or triangle.perimeter < best.perimeter:
            best = triangle

    return best


@dataclass(frozen=True)
class SolveResult:
    """Outcome of TriangleSolver.solve."""

    triangle: Triangle | None
    stats: SolverStats

    @property
    def found(self) -> bool:
        return self.triangle is not None


class TriangleSolver:
    """Runs the enclosing triangle search with logging and statistics.

    Example:
        solver = TriangleSolver(MinTriangleSettings())
        result = solver.solve([(0, 0), (4, 0), (4, 4), (0, 4)])
        print(result.triangle.perimeter, result.stats.rotations_failed)
    """

    def __init__(
        self,
        settings: MinTriangleSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            settings: Application settings (defaults if None)
            logger: Structured logger (module default if None)
        """
        self.settings = settings or MinTriangleSettings()
        self.config = self.settings.solver
        self.logger = logger or structlog.get_logger("mintriangle")

    def solve(
        self,
        hull: Iterable[Any],
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> SolveResult:
        """Find the minimum perimeter enclosing triangle.

        Args:
            hull: Hull vertices in consistent winding order; consecutive
                repeats are dropped
            progress_callback: Optional callback(completed, total) called
                after each rotation

        Returns:
            SolveResult with the triangle (or None) and run statistics
        """
        solver_logger = SolverLogger(self.logger)
        stats = solver_logger.stats
        stats.start_time = time.time()

        points = remove_repeated_points([Vec2.coerce(p) for p in hull])
        tolerance = self.config.tolerance

        if len(points) <= 3:
            triangle = min_triangle(points, tolerance, self.config)
            solver_logger.log_trivial(
                len(points), "too few points" if triangle is None else "hull is a triangle"
            )
            if triangle is not None:
                stats.best_perimeter = triangle.perimeter
            stats.end_time = time.time()
            return SolveResult(triangle=triangle, stats=stats)

        solver_logger.log_solve_start(len(points), tolerance)

        best: Triangle | None = None
        for rotation, triangle in iter_rotations(points, tolerance, self.config):
            if triangle is None:
                solver_logger.log_rotation_failed(rotation)
            else:
                improved = best is None or triangle.perimeter < best.perimeter
                if improved:
                    best = triangle
                solver_logger.log_rotation_complete(rotation, triangle.perimeter, improved)

            if progress_callback is not None:
                progress_callback(rotation + 1, len(points))

        solver_logger.log_solve_complete()
        stats.end_time = time.time()
        return SolveResult(triangle=best, stats=stats)
