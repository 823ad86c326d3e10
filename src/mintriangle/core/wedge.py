"""Wedges and the circles fitted against their arms.

A wedge is the angular region between two lines (arms). The solver looks for
a third line cutting the wedge into a triangle; a triangle cut off a wedge has
half its perimeter equal to the tangent length from the wedge vertex to the
circle tangent to both arms and to the cutting line on the far side (the
excircle). Minimizing the perimeter therefore means finding the smallest such
circle that still touches the hull.

When the arms are parallel the wedge is degenerate: it is a strip, every
circle touching both arms has the strip width as diameter, and fitting a
circle through a point or against an edge yields two candidates.
"""

import math
from dataclasses import dataclass

from mintriangle.core.geometry import hull_side
from mintriangle.domain import Line, Side, Vec2
from mintriangle.exceptions import GeometryError

# Denominators at or below this are treated as zero (circle at infinity)
_EPSILON = 1e-10


@dataclass(frozen=True, slots=True)
class Circle:
    """A circle given by centre and radius."""

    centre: Vec2
    radius: float


@dataclass(frozen=True, slots=True)
class CircleFit:
    """A circle fitted against a wedge together with its tangent at the target.

    Attributes:
        circle: The fitted circle
        tangent: Line tangent to the circle at the target point, or the edge
            line itself for edge fits
        tangent_parameter: Position of the contact point along the edge
            (0 at edge start, 1 at edge end); None for point fits
    """

    circle: Circle
    tangent: Line
    tangent_parameter: float | None = None


def _farthest_endpoint(line: Line, other: Line) -> Vec2:
    """Endpoint of line lying farthest from other."""
    if other.distance_to_point(line.start) >= other.distance_to_point(line.end):
        return line.start
    return line.end


def _tangent_at(point: Vec2, centre: Vec2) -> Line:
    """Line tangent at point to the circle with the given centre."""
    return Line(point, point + (point - centre).perpendicular())


def _parameter_along(line: Line, point: Vec2) -> float:
    delta = line.delta
    return (point - line.start).dot(delta) / delta.dot(delta)


@dataclass(frozen=True)
class Wedge:
    """Angular region between two arms.

    Use ``Wedge.from_arms`` to build one. The interior side of each arm is the
    side holding the far end of the other arm.

    Attributes:
        left_arm: First arm; the sides found by the solver start on it
        right_arm: Second arm
        vertex: Intersection of the arms, None when they are parallel
        left_inner: Side of left_arm facing the interior
        right_inner: Side of right_arm facing the interior
    """

    left_arm: Line
    right_arm: Line
    vertex: Vec2 | None
    left_inner: Side
    right_inner: Side

    @classmethod
    def from_arms(cls, left_arm: Line, right_arm: Line, halo: float) -> "Wedge":
        """Build a wedge from two arms.

        Args:
            left_arm: First arm
            right_arm: Second arm
            halo: Tolerance for treating the arms as parallel

        Returns:
            Wedge instance, degenerate when the arms are parallel

        Raises:
            GeometryError: If the arms lie on the same line
        """
        left_ref = _farthest_endpoint(left_arm, right_arm)
        right_ref = _farthest_endpoint(right_arm, left_arm)

        left_inner = left_arm.point_on_side(right_ref)
        right_inner = right_arm.point_on_side(left_ref)
        if left_inner is Side.ON or right_inner is Side.ON:
            raise GeometryError("Wedge arms are coincident")

        return cls(
            left_arm=left_arm,
            right_arm=right_arm,
            vertex=left_arm.intersection_point(right_arm, halo),
            left_inner=left_inner,
            right_inner=right_inner,
        )

    @property
    def is_degenerate(self) -> bool:
        """True when the arms are parallel and the wedge is a strip."""
        return self.vertex is None

    def _arms(self) -> tuple[tuple[Line, Side], tuple[Line, Side]]:
        return ((self.left_arm, self.left_inner), (self.right_arm, self.right_inner))

    def loosely_contains(self, point: Vec2, halo: float) -> bool:
        """Point is inside the wedge or within halo of an arm."""
        for arm, inner in self._arms():
            side = arm.point_on_side(point, halo)
            if side is not Side.ON and side is not inner:
                return False
        return True

    def strictly_contains(self, point: Vec2, halo: float) -> bool:
        """Point is inside the wedge and farther than halo from both arms."""
        return all(arm.point_on_side(point, halo) is inner for arm, inner in self._arms())

    def fit_circles(
        self, target: Vec2 | Line, halo: float
    ) -> tuple[CircleFit] | tuple[CircleFit, CircleFit] | None:
        """Fit circles tangent to both arms against a point or an edge.

        For a point, the circles pass through it; for an edge, they are
        tangent to the edge line. A regular wedge gives one circle, a
        degenerate one gives two.

        Args:
            target: Hull vertex or hull edge
            halo: Geometric tolerance

        Returns:
            Tuple of one or two fits, or None if no circle exists
        """
        vertex = self.vertex
        if isinstance(target, Line):
            if vertex is None:
                return self._fit_edge_in_strip(target)
            return self._fit_edge_in_angle(vertex, target, halo)

        if vertex is None:
            return self._fit_point_in_strip(target)
        return self._fit_point_in_angle(vertex, target)

    def _bisector(self, vertex: Vec2) -> tuple[Vec2, float, float]:
        """Unit interior bisector and sine/cosine of the half angle at vertex."""
        left_ray = (_farthest_endpoint(self.left_arm, self.right_arm) - vertex).normalized()
        right_ray = (_farthest_endpoint(self.right_arm, self.left_arm) - vertex).normalized()
        bisector = (left_ray + right_ray).normalized()
        return bisector, abs(left_ray.cross(bisector)), left_ray.dot(bisector)

    def _strip(self) -> tuple[Vec2, Vec2, Vec2, float]:
        """Direction, inward normal, midline origin and half width of a strip."""
        direction = self.left_arm.delta.normalized()
        inward = direction.perpendicular()
        if self.left_inner is Side.RIGHT:
            inward = -inward
        radius = self.left_arm.distance_to_point(self.right_arm.start) / 2.0
        origin = self.left_arm.start + inward * radius
        return direction, inward, origin, radius

    def _fit_point_in_angle(self, vertex: Vec2, point: Vec2) -> tuple[CircleFit] | None:
        # Centre at vertex + s * bisector, radius s * sin(half angle). Of the
        # two circles through the point, the larger one has the point on the
        # arc facing the vertex.
        bisector, sin_half, cos_half = self._bisector(vertex)

        offset = point - vertex
        projection = bisector.dot(offset)
        cos_sq = cos_half * cos_half
        discriminant = projection * projection - cos_sq * offset.dot(offset)
        if discriminant < 0 or cos_sq <= _EPSILON:
            return None

        s = (projection + math.sqrt(discriminant)) / cos_sq
        if s <= 0:
            return None

        centre = vertex + bisector * s
        return (CircleFit(Circle(centre, s * sin_half), _tangent_at(point, centre)),)

    def _fit_point_in_strip(
        self, point: Vec2
    ) -> tuple[CircleFit, CircleFit] | None:
        direction, inward, origin, radius = self._strip()
        relative = point - origin
        along = relative.dot(direction)
        across = relative.dot(inward)

        reach_sq = radius * radius - across * across
        if reach_sq < 0:
            return None
        reach = math.sqrt(reach_sq)

        first = origin + direction * (along + reach)
        second = origin + direction * (along - reach)
        return (
            CircleFit(Circle(first, radius), _tangent_at(point, first)),
            CircleFit(Circle(second, radius), _tangent_at(point, second)),
        )

    def _fit_edge_in_angle(self, vertex: Vec2, edge: Line, halo: float) -> tuple[CircleFit] | None:
        bisector, sin_half, _ = self._bisector(vertex)

        # Orient the edge normal away from the vertex
        normal = edge.delta.perpendicular().normalized()
        offset = normal.dot(vertex - edge.start)
        if abs(offset) <= halo:
            return None
        if offset > 0:
            normal = -normal

        # Signed distance of the centre to the edge line equals the radius
        denom = normal.dot(bisector) - sin_half
        if denom <= _EPSILON:
            return None
        s = abs(offset) / denom

        centre = vertex + bisector * s
        radius = s * sin_half
        contact = centre - normal * radius
        return (CircleFit(Circle(centre, radius), edge, _parameter_along(edge, contact)),)

    def _fit_edge_in_strip(
        self, edge: Line
    ) -> tuple[CircleFit, CircleFit] | None:
        direction, _, origin, radius = self._strip()
        normal = edge.delta.perpendicular().normalized()

        slope = normal.dot(direction)
        if abs(slope) <= _EPSILON:
            return None
        base = normal.dot(origin - edge.start)

        fits = []
        for sign in (1.0, -1.0):
            centre = origin + direction * ((sign * radius - base) / slope)
            contact = centre - normal * (sign * radius)
            fits.append(
                CircleFit(Circle(centre, radius), edge, _parameter_along(edge, contact))
            )
        return (fits[0], fits[1])


def choose_outer_fit(
    fits: tuple[CircleFit, ...],
    points: list[Vec2],
    halo: float,
    reference: Line | None = None,
) -> CircleFit:
    """Pick the fitted circle lying outside the hull.

    A single candidate is returned as is. Of two candidates, the first is
    chosen when its centre is on the opposite side of the reference line from
    the hull, otherwise the second.

    Args:
        fits: One or two candidate fits
        points: Hull points
        halo: Geometric tolerance
        reference: Line to judge sides against; defaults to the first
            candidate's tangent

    Returns:
        The selected fit
    """
    if len(fits) == 1:
        return fits[0]

    line = reference if reference is not None else fits[0].tangent
    if line.point_on_side(fits[0].circle.centre, halo) is not hull_side(line, points, halo):
        return fits[0]
    return fits[1]
