"""Domain models for mintriangle.

This module contains the value types the solver works with. All models are:

- Immutable (frozen dataclasses)
- Created fresh per solver call and never shared
- Independent of any file format

Key classes:
- Vec2: A 2D point or direction
- Side: Classification of a point against a directed line
- Line: A directed infinite line through two points
- Triangle: The enclosing triangle returned by the solver
"""

from mintriangle.domain.line import Line, Side
from mintriangle.domain.triangle import Triangle
from mintriangle.domain.vec2 import Vec2

__all__: list[str] = [
    # Enums
    "Side",
    # Core types
    "Vec2",
    "Line",
    "Triangle",
]
