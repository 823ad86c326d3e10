"""Shared fixtures for the mintriangle test suite."""

import logging
import math

import pytest
import structlog

from mintriangle.domain import Vec2


def regular_polygon(sides: int, radius: float = 10.0) -> list[Vec2]:
    """Counter-clockwise regular polygon centred on the origin."""
    return [
        Vec2(radius * math.cos(2 * math.pi * k / sides), radius * math.sin(2 * math.pi * k / sides))
        for k in range(sides)
    ]


HULLS = {
    "square": [Vec2(0.0, 0.0), Vec2(4.0, 0.0), Vec2(4.0, 4.0), Vec2(0.0, 4.0)],
    "square_cw": [Vec2(0.0, 0.0), Vec2(0.0, 4.0), Vec2(4.0, 4.0), Vec2(4.0, 0.0)],
    "pentagon": [
        Vec2(0.0, 0.0),
        Vec2(5.0, 0.0),
        Vec2(6.0, 3.0),
        Vec2(3.0, 6.0),
        Vec2(-1.0, 3.0),
    ],
    "hexagon": regular_polygon(6),
    "dodecagon": regular_polygon(12),
}


@pytest.fixture(params=sorted(HULLS))
def hull(request) -> list[Vec2]:
    """Each sample convex hull in turn."""
    return HULLS[request.param]


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handlers and structlog configuration installed by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()
