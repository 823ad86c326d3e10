"""Search for the shortest triangle side closing a wedge around a hull.

Given a wedge whose arms already touch the hull, the search walks hull
vertices backwards and, for each, tries the edge to the previous vertex and
then the vertex itself as the contact of the third side. The first contact
whose fitted circle yields a line keeping the whole hull on one side wins.
"""

import logging
from dataclasses import dataclass

from mintriangle.core.wedge import Wedge, choose_outer_fit
from mintriangle.domain import Line, Side, Vec2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HullTangency:
    """Result of checking a line against a hull.

    Attributes:
        holds: True if all hull points off the line are on one side
        side: The side those points are on (ON if every point is on the line)
    """

    holds: bool
    side: Side


@dataclass(frozen=True, slots=True)
class EnclosingSide:
    """A triangle side found by the search.

    Attributes:
        side: Line starting on the wedge's left arm and ending at the hull
            contact point
        stop_vertex: Hull vertex index at which the search stopped
    """

    side: Line
    stop_vertex: int


def line_tangent_to_hull(line: Line, points: list[Vec2], halo: float) -> HullTangency:
    """Check that a line supports the hull.

    Points within halo of the line are ignored.

    Args:
        line: Candidate supporting line
        points: Hull points
        halo: Geometric tolerance

    Returns:
        HullTangency with the verdict and the side the hull lies on
    """
    side = Side.ON
    for point in points:
        test = line.point_on_side(point, halo)
        if test is Side.ON:
            continue
        if side is Side.ON:
            side = test
        elif test is not side:
            return HullTangency(holds=False, side=side)
    return HullTangency(holds=True, side=side)


def _side_from_edge(wedge: Wedge, vertex: int, points: list[Vec2], halo: float) -> Line | None:
    p1 = points[vertex]
    p2 = points[vertex - 1]
    if not (wedge.loosely_contains(p1, halo) and wedge.loosely_contains(p2, halo)):
        return None

    edge = Line(p1, p2)
    fits = wedge.fit_circles(edge, halo)
    if fits is None:
        return None

    # The circle must touch the edge itself, not its extension
    t = choose_outer_fit(fits, points, halo, reference=edge).tangent_parameter
    if t is None or not 0 < t < 1:
        return None

    joint = wedge.left_arm.require_intersection(edge, halo)
    return Line(joint, edge.evaluate(t))


def _side_from_vertex(wedge: Wedge, vertex: int, points: list[Vec2], halo: float) -> Line | None:
    point = points[vertex]
    if not wedge.strictly_contains(point, halo):
        return None

    fits = wedge.fit_circles(point, halo)
    if fits is None:
        return None

    # The tangent separates the circle from the hull; it is a side only if
    # it also supports the hull
    tangent = choose_outer_fit(fits, points, halo).tangent
    if not line_tangent_to_hull(tangent, points, halo).holds:
        return None

    joint = wedge.left_arm.require_intersection(tangent, halo)
    return Line(joint, point)


def find_enclosing_side(
    wedge: Wedge,
    start_vertex: int,
    end_vertex: int,
    points: list[Vec2],
    halo: float,
) -> EnclosingSide | None:
    """Find the shortest third side for a wedge such that they enclose the hull.

    Vertices are scanned from start_vertex down to end_vertex inclusive. At
    each vertex the edge to its predecessor is tried first (only while the
    predecessor is still in range), then the vertex alone.

    Args:
        wedge: Current wedge; the side starts on its left arm
        start_vertex: First vertex index to examine
        end_vertex: Last vertex index to examine
        points: Hull points
        halo: Geometric tolerance

    Returns:
        The side and the vertex where the scan stopped, or None if no vertex
        in range yields a side

    Raises:
        IntersectionError: If a found side is parallel to the left arm
    """
    for vertex in range(start_vertex, end_vertex - 1, -1):
        side = None
        if vertex > end_vertex:
            side = _side_from_edge(wedge, vertex, points, halo)
        if side is None:
            side = _side_from_vertex(wedge, vertex, points, halo)
        if side is not None:
            return EnclosingSide(side=side, stop_vertex=vertex)

    logger.debug(
        "No enclosing side between vertices %d and %d", start_vertex, end_vertex
    )
    return None
