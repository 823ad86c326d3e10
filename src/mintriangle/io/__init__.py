"""Hull and result I/O for mintriangle.

This module handles reading hull files and writing solver results. It is
glue around the solver: the algorithm itself never touches files.

Key classes:
- HullReader: Load hull points from JSON or text files
- TriangleWriter: Save solver results as JSON
"""

from mintriangle.io.reader import HullReader, read_hull
from mintriangle.io.writer import TriangleWriter, triangle_to_dict

__all__ = [
    "HullReader",
    "TriangleWriter",
    "read_hull",
    "triangle_to_dict",
]
