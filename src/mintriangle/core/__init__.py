"""Core algorithms for mintriangle.

This module contains the enclosing triangle search:

- Polygon helpers (signed area, convexity, hull side)
- Wedges and circle fitting against their arms
- Enclosing side search over a vertex range
- Base algorithm and rotation over all hull edges

All functions are pure and reentrant; the only stateful piece is the
TriangleSolver orchestrator, which keeps per-call statistics.

Key functions:
- min_triangle: Minimum perimeter triangle enclosing a hull
- min_triangle_with_base: Same, with the base fixed to hull[-1] -> hull[0]
- find_enclosing_side: Shortest third side for a wedge
- line_tangent_to_hull: Check a line supports the hull
- find_antipode: Hull vertex farthest from the base edge
- remove_repeated_points: Clean closed rings and duplicate vertices

Key classes:
- Wedge: Angular region between two arms, with circle fitting
- TriangleSolver: Runs the search with logging and statistics
"""

from mintriangle.core.enclosing import (
    EnclosingSide,
    HullTangency,
    find_enclosing_side,
    line_tangent_to_hull,
)
from mintriangle.core.geometry import (
    hull_side,
    is_convex,
    remove_repeated_points,
    signed_area,
)
from mintriangle.core.solver import (
    SolveResult,
    TriangleSolver,
    find_antipode,
    iter_rotations,
    min_triangle,
    min_triangle_with_base,
)
from mintriangle.core.wedge import Circle, CircleFit, Wedge, choose_outer_fit

__all__ = [
    # Wedge classes
    "Circle",
    "CircleFit",
    # Search results
    "EnclosingSide",
    "HullTangency",
    # Solver classes
    "SolveResult",
    "TriangleSolver",
    "Wedge",
    # Functions
    "choose_outer_fit",
    "find_antipode",
    "find_enclosing_side",
    "hull_side",
    "is_convex",
    "iter_rotations",
    "line_tangent_to_hull",
    "min_triangle",
    "min_triangle_with_base",
    "remove_repeated_points",
    "signed_area",
]
