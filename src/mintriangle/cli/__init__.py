"""Command-line interface for mintriangle.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.
"""

from mintriangle.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
