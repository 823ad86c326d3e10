"""Polygon-level geometric helpers.

This module provides utilities shared by the solver and its callers:
- Signed area calculation (shoelace formula)
- Convexity check for caller-side validation
- Side of a hull relative to a line
- Removal of repeated vertices from hull input

All functions are pure and stateless.
"""

from collections.abc import Sequence

from mintriangle.domain import Line, Side, Vec2


def signed_area(points: Sequence[Vec2]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 1.0), Vec2(0.0, 1.0)]
        >>> signed_area(square)  # CCW square
        1.0
        >>> signed_area(square[::-1])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def is_convex(points: Sequence[Vec2], halo: float = 0.0) -> bool:
    """Check whether the points form a convex polygon in their given order.

    Turns whose deviation from a straight line is within halo are ignored,
    so collinear runs are accepted.

    Args:
        points: Polygon vertices in order
        halo: Distance below which a vertex counts as collinear

    Returns:
        True if every non-straight turn has the same orientation
    """
    n = len(points)
    if n < 3:
        return False

    orientation = Side.ON
    for i in range(n):
        edge = Line(points[i], points[(i + 1) % n])
        if edge.length == 0.0:
            continue
        turn = edge.point_on_side(points[(i + 2) % n], halo)
        if turn is Side.ON:
            continue
        if orientation is Side.ON:
            orientation = turn
        elif turn is not orientation:
            return False

    return orientation is not Side.ON


def hull_side(line: Line, points: Sequence[Vec2], halo: float) -> Side:
    """Side of the line the hull lies on, judged by its first off-line point.

    Args:
        line: Reference line
        points: Hull points
        halo: Points within this distance of the line are skipped

    Returns:
        Side of the first point not ON the line, or ON if there is none
    """
    for point in points:
        side = line.point_on_side(point, halo)
        if side is not Side.ON:
            return side
    return Side.ON


def remove_repeated_points(points: Sequence[Vec2]) -> list[Vec2]:
    """Drop vertices equal to their predecessor, including a closing repeat.

    Closed rings that end with their first point become open polygons.

    Args:
        points: Polygon vertices in order

    Returns:
        Vertices with no two consecutive points equal (cyclically)

    Examples:
        >>> ring = [Vec2(0.0, 0.0), Vec2(1.0, 0.0), Vec2(1.0, 0.0), Vec2(0.0, 0.0)]
        >>> remove_repeated_points(ring)
        [Vec2(x=0.0, y=0.0), Vec2(x=1.0, y=0.0)]
    """
    result: list[Vec2] = []
    for point in points:
        if not result or point != result[-1]:
            result.append(point)

    while len(result) > 1 and result[-1] == result[0]:
        result.pop()

    return result
