"""mintriangle - Minimum perimeter triangles enclosing convex polygons.

Given the vertices of a convex hull in order, mintriangle finds the triangle
of smallest perimeter containing it, trying every hull edge as the side the
triangle rests on.

Example:
    >>> from mintriangle import min_triangle
    >>> triangle = min_triangle([(0, 0), (4, 0), (4, 4), (0, 4)], tolerance=1e-6)

Or from the command line:
    $ mintriangle hull.json
"""

__version__ = "0.1.0"

from mintriangle.core import TriangleSolver, min_triangle, min_triangle_with_base
from mintriangle.domain import Line, Side, Triangle, Vec2

__all__ = [
    "Line",
    "Side",
    "Triangle",
    "TriangleSolver",
    "Vec2",
    "__version__",
    "min_triangle",
    "min_triangle_with_base",
]
