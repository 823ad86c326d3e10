"""Triangle result type."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from mintriangle.domain.line import Line, Side
from mintriangle.domain.vec2 import Vec2


@dataclass(frozen=True, slots=True)
class Triangle:
    """A triangle enclosing a hull.

    As produced by the solver, ``a`` is the apex where the two searched sides
    meet, while ``b`` and ``c`` lie on the line of the fixed base edge.

    Attributes:
        a: Apex vertex
        b: Base vertex on the AB side
        c: Base vertex on the AC side
    """

    a: Vec2
    b: Vec2
    c: Vec2

    @property
    def vertices(self) -> tuple[Vec2, Vec2, Vec2]:
        return (self.a, self.b, self.c)

    @property
    def sides(self) -> tuple[Line, Line, Line]:
        """Sides A->B, B->C, C->A."""
        return (Line(self.a, self.b), Line(self.b, self.c), Line(self.c, self.a))

    @property
    def perimeter(self) -> float:
        return (self.a - self.b).norm + (self.b - self.c).norm + (self.c - self.a).norm

    @property
    def area(self) -> float:
        return abs((self.b - self.a).cross(self.c - self.a)) / 2.0

    def encloses(self, points: Iterable[Vec2], halo: float) -> bool:
        """Check that every point is inside the triangle or within halo of it.

        Each side is tested against the side its opposite vertex lies on.

        Args:
            points: Points to test
            halo: Slack allowed outside each side

        Returns:
            True if no point is farther than halo outside any side
        """
        points = list(points)
        for side, opposite in zip(self.sides, (self.c, self.a, self.b)):
            inner = side.point_on_side(opposite)
            if inner is Side.ON:
                # Degenerate (flat) triangle
                return False
            for point in points:
                test = side.point_on_side(point, halo)
                if test is not Side.ON and test is not inner:
                    return False
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"A": self.a.to_dict(), "B": self.b.to_dict(), "C": self.c.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Triangle":
        return cls(
            a=Vec2.from_dict(data["A"]),
            b=Vec2.from_dict(data["B"]),
            c=Vec2.from_dict(data["C"]),
        )
