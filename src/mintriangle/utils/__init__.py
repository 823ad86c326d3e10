"""Utility functions for mintriangle.

This module provides utility functions including:

- Logging setup and configuration
- Solver statistics tracking
"""

from mintriangle.utils.logging import (
    SolverLogger,
    SolverStats,
    configure_logging,
)

__all__ = [
    "SolverLogger",
    "SolverStats",
    "configure_logging",
]
