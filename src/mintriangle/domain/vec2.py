"""Two-dimensional vector type used for hull points and directions."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vec2:
    """A point or direction in the plane.

    Immutable and hashable. Arithmetic returns new instances.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def dot(self, other: "Vec2") -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vec2") -> float:
        """Z component of the 3-D cross product of the two vectors.

        Positive when ``other`` is counter-clockwise from ``self``.
        """
        return self.x * other.y - self.y * other.x

    @property
    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vec2":
        """Return the unit vector with the same direction.

        Raises:
            ValueError: If the vector has zero length
        """
        length = self.norm
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length vector")
        return Vec2(self.x / length, self.y / length)

    def perpendicular(self) -> "Vec2":
        """Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        return Vec2(-self.y, self.x)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vec2":
        return cls(x=float(data["x"]), y=float(data["y"]))

    @classmethod
    def coerce(cls, value: Any) -> "Vec2":
        """Build a Vec2 from any common point representation.

        Accepts a Vec2, an ``(x, y)`` pair, a mapping with ``x`` and ``y``
        keys, or any object exposing ``x`` and ``y`` attributes.

        Args:
            value: Point-like value

        Returns:
            Vec2 instance

        Raises:
            TypeError: If the value cannot be interpreted as a point
        """
        if isinstance(value, Vec2):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(float(value[0]), float(value[1]))
        if hasattr(value, "x") and hasattr(value, "y"):
            return cls(float(value.x), float(value.y))
        raise TypeError(f"Cannot interpret {value!r} as a 2-D point")
