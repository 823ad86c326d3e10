"""Writer for solver results.

Results are saved as JSON:

    {
      "triangle": {"A": {"x": .., "y": ..}, "B": {...}, "C": {...}},
      "perimeter": ..,
      "area": ..,
      "hull": [{"x": .., "y": ..}, ...]
    }
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from mintriangle.domain import Triangle, Vec2


def triangle_to_dict(
    triangle: Triangle | None, hull: Sequence[Vec2] | None = None
) -> dict[str, Any]:
    """Build the JSON document for a solver result.

    Args:
        triangle: Solver result, None when no triangle was found
        hull: Optional input hull to embed

    Returns:
        JSON-serializable dictionary
    """
    result: dict[str, Any] = {
        "triangle": triangle.to_dict() if triangle else None,
        "perimeter": triangle.perimeter if triangle else None,
        "area": triangle.area if triangle else None,
    }
    if hull is not None:
        result["hull"] = [p.to_dict() for p in hull]
    return result


class TriangleWriter:
    """Writes solver results to JSON files.

    Example:
        writer = TriangleWriter(Path("hull-triangle.json"))
        writer.save(triangle, hull=points)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the result will be saved
        """
        self._output_path = output_path

    def save(self, triangle: Triangle | None, hull: Sequence[Vec2] | None = None) -> None:
        """Save the result.

        Raises:
            IOError: If file cannot be written
        """
        document = triangle_to_dict(triangle, hull)
        self._output_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")

    @staticmethod
    def get_result_path(input_path: Path) -> Path:
        """Generate output path next to the hull file.

        Converts: hull.json -> hull-triangle.json
                  points.csv -> points-triangle.json

        Args:
            input_path: Hull file path

        Returns:
            Path with -triangle suffix and .json extension
        """
        return input_path.parent / f"{input_path.stem}-triangle.json"
