"""Hull reader for loading polygon vertices from files.

This module provides the HullReader class for loading hull files and
converting their contents into domain points.

Supported formats:
- JSON: a list of [x, y] pairs or {"x": .., "y": ..} objects, optionally
  wrapped in an object under a "points" or "hull" key
- Text (CSV): one "x,y" or "x y" pair per line; blank lines and lines
  starting with "#" are skipped
"""

import json
import re
from pathlib import Path
from typing import Any

from mintriangle.domain import Vec2
from mintriangle.exceptions import HullFormatError, HullLoadError

_SEPARATOR = re.compile(r"[,;\s]+")


class HullReader:
    """Loads hull files and extracts their points.

    Example:
        reader = HullReader(Path("hull.json"))
        reader.load()
        for point in reader.points:
            print(point.x, point.y)
    """

    def __init__(self, hull_path: Path) -> None:
        """Initialize the hull reader.

        Args:
            hull_path: Path to the JSON or text hull file
        """
        self._hull_path = hull_path
        self._points: list[Vec2] | None = None
        self._format: str | None = None

    def load(self) -> None:
        """Load and parse the hull file.

        Raises:
            HullLoadError: If the file does not exist or cannot be read
            HullFormatError: If the contents are not a list of points
        """
        if not self._hull_path.exists():
            raise HullLoadError(str(self._hull_path), "file not found")

        try:
            text = self._hull_path.read_text(encoding="utf-8")
        except OSError as e:
            raise HullLoadError(str(self._hull_path), str(e)) from e

        if self._hull_path.suffix.lower() == ".json" or text.lstrip().startswith(("[", "{")):
            self._format = "JSON"
            self._points = self._parse_json(text)
        else:
            self._format = "CSV"
            self._points = self._parse_text(text)

    @property
    def format(self) -> str:
        """Return the detected file format ('JSON' or 'CSV').

        Raises:
            RuntimeError: If the hull has not been loaded yet
        """
        if self._format is None:
            raise RuntimeError("Hull not loaded. Call load() first.")
        return self._format

    @property
    def points(self) -> list[Vec2]:
        """Return the hull points in file order.

        Raises:
            RuntimeError: If the hull has not been loaded yet
        """
        if self._points is None:
            raise RuntimeError("Hull not loaded. Call load() first.")
        return list(self._points)

    def _parse_json(self, text: str) -> list[Vec2]:
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise HullFormatError(str(self._hull_path), f"invalid JSON: {e}") from e

        if isinstance(data, dict):
            key = next((k for k in ("points", "hull") if k in data), None)
            if key is None:
                raise HullFormatError(
                    str(self._hull_path), "expected a 'points' or 'hull' list"
                )
            data = data[key]

        if not isinstance(data, list):
            raise HullFormatError(str(self._hull_path), "expected a list of points")

        points = []
        for index, item in enumerate(data):
            try:
                points.append(Vec2.coerce(item))
            except (TypeError, ValueError, KeyError) as e:
                raise HullFormatError(
                    str(self._hull_path), f"point {index}: {e}"
                ) from e
        return points

    def _parse_text(self, text: str) -> list[Vec2]:
        points = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            fields = [f for f in _SEPARATOR.split(line) if f]
            if len(fields) != 2:
                raise HullFormatError(
                    str(self._hull_path),
                    f"line {line_number}: expected 2 coordinates, got {len(fields)}",
                )
            try:
                points.append(Vec2(float(fields[0]), float(fields[1])))
            except ValueError as e:
                raise HullFormatError(
                    str(self._hull_path), f"line {line_number}: {e}"
                ) from e
        return points

    def __enter__(self) -> "HullReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        return None


def read_hull(hull_path: Path) -> list[Vec2]:
    """Load hull points from a file.

    Args:
        hull_path: Path to the JSON or text hull file

    Returns:
        Hull points in file order
    """
    with HullReader(hull_path) as reader:
        return reader.points
