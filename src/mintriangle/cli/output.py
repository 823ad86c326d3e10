"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from mintriangle.domain import Triangle
from mintriangle.utils import SolverStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for the rotation search.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]mintriangle[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_hull_info(hull_path: str, hull_format: str, point_count: int, winding: str) -> None:
    """Print hull information.

    Args:
        hull_path: Path to the hull file
        hull_format: Detected file format
        point_count: Number of hull vertices
        winding: Winding direction description
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(hull_path)
    line1.append(f" ({hull_format})")
    console.print(line1)
    console.print(f"  {point_count:,} points {SYM_DOT} {winding}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_triangle(triangle: Triangle, stats: SolverStats) -> None:
    """Print the solver result with summary.

    Args:
        triangle: Enclosing triangle
        stats: Statistics of the run
    """
    console.print(
        f"\n[bold green]{SYM_OK} Triangle found[/bold green] in "
        f"{_format_time(stats.duration_seconds)}"
    )
    for label, vertex in zip("ABC", triangle.vertices):
        console.print(f"  {label}  ({vertex.x:.6f}, {vertex.y:.6f})")
    console.print(
        f"  perimeter {triangle.perimeter:.6f} {SYM_DOT} area {triangle.area:.6f}"
    )

    if stats.rotations_tried:
        failed_style = "yellow" if stats.rotations_failed > 0 else "green"
        console.print(
            f"  {stats.rotations_tried} bases {SYM_DOT} best base {stats.best_rotation} "
            f"{SYM_DOT} [{failed_style}]{stats.rotations_failed} failed[/{failed_style}]"
        )


def print_saved(output_path: str) -> None:
    """Print where the result was written."""
    line = Text("  saved ")
    line.append(output_path, style="bold")
    console.print(line)


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"\n[bold yellow]{SYM_WARN} Warning:[/bold yellow] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
