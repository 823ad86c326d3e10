"""CLI application entry point for mintriangle.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from mintriangle import __version__
from mintriangle.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_hull_info,
    print_saved,
    print_step,
    print_triangle,
    print_warning,
)
from mintriangle.config import LoggingConfig, MinTriangleSettings, SolverConfig
from mintriangle.core import (
    SolveResult,
    TriangleSolver,
    is_convex,
    remove_repeated_points,
    signed_area,
)
from mintriangle.domain import Vec2
from mintriangle.exceptions import GeometryError, HullError, MinTriangleError
from mintriangle.io import HullReader, TriangleWriter, triangle_to_dict
from mintriangle.utils import configure_logging

# Exit code when the solver finds no triangle
EXIT_NO_TRIANGLE = 2

# Create the Typer app
app = typer.Typer(
    name="mintriangle",
    help="Find the minimum perimeter triangle enclosing a convex polygon.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]mintriangle[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def solve(
    hull_file: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON or CSV file with the hull vertices in order",
            show_default=False,
        ),
    ],
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Geometric tolerance in hull coordinate units",
            min=0.0,
        ),
    ] = 1e-6,
    threshold: Annotated[
        float,
        typer.Option(
            "--threshold",
            help="Convergence threshold for refining each base",
            min=0.0,
        ),
    ] = 0.1,
    max_iterations: Annotated[
        int,
        typer.Option(
            "--max-iterations",
            help="Refinement rounds per base before giving up",
            min=1,
        ),
    ] = 100,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the result as JSON to this path",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON instead of a summary",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Find the minimum perimeter triangle enclosing a convex hull.

    The hull file lists the polygon vertices in order (clockwise or
    counter-clockwise), either as JSON ([[x, y], ...]) or as one "x,y" pair
    per line.

    Example:
        mintriangle hull.json --tolerance 1e-6
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if threshold <= 0:
        print_error("Convergence threshold must be positive")
        raise typer.Exit(code=1)

    settings = MinTriangleSettings(
        solver=SolverConfig(
            tolerance=tolerance,
            convergence_threshold=threshold,
            max_iterations=max_iterations,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )
    show = not quiet and not as_json

    try:
        if show:
            print_header(__version__)
            print_step("Loading hull")

        reader = HullReader(hull_file)
        reader.load()
        # Closed rings repeat their first point
        points = remove_repeated_points(reader.points)

        if show:
            area = signed_area(points)
            if area > 0:
                winding = "counter-clockwise"
            elif area < 0:
                winding = "clockwise"
            else:
                winding = "degenerate"
            print_hull_info(str(hull_file), reader.format, len(points), winding)

        if len(points) > 3 and not is_convex(points, tolerance) and not as_json:
            print_warning("Hull does not look convex; results are undefined")

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet or as_json,
        )
        solver = TriangleSolver(settings, logger=logger)

        if show:
            print_step("Searching")
            with create_progress() as progress:
                task_id = progress.add_task("Searching bases", total=len(points))

                def update_progress(completed: int, total: int) -> None:
                    progress.update(task_id, completed=completed, total=total)

                result = solver.solve(points, progress_callback=update_progress)
        else:
            result = solver.solve(points)

        _report(result, points, output, as_json, show)

    except HullError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GeometryError as e:
        print_error(f"Geometry failure: {e}", details="Check that the hull is convex and non-degenerate.")
        raise typer.Exit(code=1)
    except MinTriangleError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _report(
    result: SolveResult,
    points: list[Vec2],
    output: Path | None,
    as_json: bool,
    show: bool,
) -> None:
    """Print and optionally save the solver result.

    Raises:
        typer.Exit: With EXIT_NO_TRIANGLE when nothing was found
    """
    if output is not None:
        TriangleWriter(output).save(result.triangle, hull=points)

    if as_json:
        console.print_json(json.dumps(triangle_to_dict(result.triangle)))
    elif show:
        if result.triangle is not None:
            print_triangle(result.triangle, result.stats)
        if output is not None:
            print_saved(str(output))

    if result.triangle is None:
        if not as_json:
            print_error(
                "No enclosing triangle found",
                details="The hull needs at least 3 points and every base search failed.",
            )
        raise typer.Exit(code=EXIT_NO_TRIANGLE)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
