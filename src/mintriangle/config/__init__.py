"""Configuration management for mintriangle.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SolverConfig: Tolerance and convergence settings for the search
- LoggingConfig: Logging settings
- MinTriangleSettings: Main application settings
"""

from mintriangle.config.settings import (
    LoggingConfig,
    MinTriangleSettings,
    SolverConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "MinTriangleSettings",
    "SolverConfig",
    "get_default_settings",
]
