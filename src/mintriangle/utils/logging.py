"""Logging utilities for mintriangle."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class SolverStats:
    """Statistics from one solver run."""

    hull_size: int = 0
    rotations_tried: int = 0
    rotations_failed: int = 0
    failed_rotations: list[int] = field(default_factory=list)
    best_rotation: int | None = None
    best_perimeter: float | None = None
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate solving duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def rotations_succeeded(self) -> int:
        return self.rotations_tried - self.rotations_failed


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("mintriangle")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SolverLogger:
    """Logger for tracking rotation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = SolverStats()

    def log_solve_start(self, hull_size: int, tolerance: float) -> None:
        """Log start of a solve."""
        self._logger.info("Solving hull", points=hull_size, tolerance=tolerance)
        self._stats.hull_size = hull_size

    def log_trivial(self, hull_size: int, reason: str) -> None:
        """Log a hull answered without searching."""
        self._logger.debug("Trivial hull", points=hull_size, reason=reason)
        self._stats.hull_size = hull_size

    def log_rotation_complete(self, rotation: int, perimeter: float, improved: bool) -> None:
        """Log a rotation that produced a triangle."""
        self._logger.debug(
            "Rotation solved",
            rotation=rotation,
            perimeter=round(perimeter, 6),
            improved=improved,
        )
        self._stats.rotations_tried += 1
        if improved:
            self._stats.best_rotation = rotation
            self._stats.best_perimeter = perimeter

    def log_rotation_failed(self, rotation: int) -> None:
        """Log a rotation whose base produced no triangle."""
        self._logger.debug("Rotation failed", rotation=rotation)
        self._stats.rotations_tried += 1
        self._stats.rotations_failed += 1
        self._stats.failed_rotations.append(rotation)

    def log_solve_complete(self) -> None:
        """Log the overall outcome."""
        if self._stats.best_perimeter is None:
            self._logger.warning(
                "No enclosing triangle found",
                rotations=self._stats.rotations_tried,
            )
        else:
            self._logger.info(
                "Enclosing triangle found",
                perimeter=round(self._stats.best_perimeter, 6),
                rotation=self._stats.best_rotation,
                failed=self._stats.rotations_failed,
            )

    @property
    def stats(self) -> SolverStats:
        """Get current solver statistics."""
        return self._stats
