"""Directed lines and point side classification."""

from dataclasses import dataclass
from enum import Enum, auto

from mintriangle.domain.vec2 import Vec2
from mintriangle.exceptions import GeometryError, IntersectionError


class Side(Enum):
    """Position of a point relative to a directed line.

    - ON: within tolerance of the line (neutral in consistency checks)
    - LEFT: counter-clockwise of the line direction
    - RIGHT: clockwise of the line direction
    """

    ON = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """A directed line through two points.

    The line is treated as infinite for distance, side and intersection
    queries; ``start`` and ``end`` fix its direction and parametrization.

    Attributes:
        start: Point at parameter 0
        end: Point at parameter 1
    """

    start: Vec2
    end: Vec2

    @property
    def delta(self) -> Vec2:
        """Direction vector ``end - start``."""
        return self.end - self.start

    @property
    def length(self) -> float:
        """Distance between start and end."""
        return self.delta.norm

    def evaluate(self, t: float) -> Vec2:
        """Point at parameter ``t`` (extrapolates outside [0, 1])."""
        return self.start + self.delta * t

    def signed_distance(self, point: Vec2) -> float:
        """Perpendicular distance, positive on the left of the line.

        Raises:
            GeometryError: If start and end coincide
        """
        length = self.length
        if length == 0.0:
            raise GeometryError(
                f"Line through {self.start.to_tuple()} has zero length"
            )
        return self.delta.cross(point - self.start) / length

    def distance_to_point(self, point: Vec2) -> float:
        """Unsigned perpendicular distance from point to the infinite line."""
        return abs(self.signed_distance(point))

    def point_on_side(self, point: Vec2, halo: float = 0.0) -> Side:
        """Classify point against the line.

        Args:
            point: Point to classify
            halo: Points closer than this to the line are ON

        Returns:
            Side of the point
        """
        distance = self.signed_distance(point)
        if abs(distance) <= halo:
            return Side.ON
        return Side.LEFT if distance > 0 else Side.RIGHT

    def intersection_point(self, other: "Line", tolerance: float) -> Vec2 | None:
        """Intersection of two infinite lines.

        Args:
            other: Line to intersect with
            tolerance: Lines whose angle has a sine within this value are
                treated as parallel

        Returns:
            Intersection point, or None if the lines are parallel
        """
        d1 = self.delta
        d2 = other.delta
        denom = d1.cross(d2)

        if abs(denom) <= tolerance * d1.norm * d2.norm:
            return None

        t = (other.start - self.start).cross(d2) / denom
        return self.evaluate(t)

    def require_intersection(self, other: "Line", tolerance: float) -> Vec2:
        """Intersection that must exist by construction.

        Raises:
            IntersectionError: If the lines are parallel within tolerance
        """
        point = self.intersection_point(other, tolerance)
        if point is None:
            raise IntersectionError(
                f"Lines {self.start.to_tuple()}->{self.end.to_tuple()} and "
                f"{other.start.to_tuple()}->{other.end.to_tuple()} do not intersect"
            )
        return point

    def parallel_through(self, point: Vec2) -> "Line":
        """Line through point with the same direction as this line."""
        return Line(point, point + self.delta)

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}
