"""Configuration settings for mintriangle."""

from pathlib import Path

from pydantic import BaseModel, Field


class SolverConfig(BaseModel):
    """Configuration for the enclosing triangle search.

    Tolerance and convergence threshold are absolute values in the units of
    the hull coordinates; neither is scaled to the hull size.
    """

    tolerance: float = Field(
        default=1e-6,
        ge=0.0,
        description="Slack for side classification, containment and parallel-line detection",
    )
    convergence_threshold: float = Field(
        default=0.1,
        gt=0.0,
        description="Stop refining a base once |AB| - |AC| drops to this length",
    )
    max_iterations: int = Field(
        default=100,
        ge=1,
        le=100_000,
        description="Refinement rounds per base before giving up on it",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MinTriangleSettings(BaseModel):
    """Main application settings."""

    solver: SolverConfig = Field(default_factory=SolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> MinTriangleSettings:
    """Get default application settings."""
    return MinTriangleSettings()
