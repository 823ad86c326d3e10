"""Exception hierarchy for mintriangle."""


class MinTriangleError(Exception):
    """Base exception for all mintriangle errors."""

    pass


class HullError(MinTriangleError):
    """Errors related to loading hull data."""

    pass


class HullLoadError(HullError):
    """Error reading a hull file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load hull '{path}': {reason}")


class HullFormatError(HullError):
    """Hull file could be read but its contents are not a point list."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid hull format '{path}': {details}")


class GeometryError(MinTriangleError):
    """Errors in geometric calculations.

    Raised when a construction that must succeed for a convex hull does not,
    which points at malformed input (non-convex or degenerate hull).
    """

    pass


class IntersectionError(GeometryError):
    """Two lines expected to cross are parallel."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
