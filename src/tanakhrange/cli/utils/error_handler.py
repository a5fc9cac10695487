"""Error handling utilities for CLI commands."""

from __future__ import annotations

import traceback
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from tanakhrange.cli.formatters.json_formatter import JsonFormatter
from tanakhrange.config import get_logger
from tanakhrange.exceptions import TanakhRangeError

logger = get_logger(__name__)
console = Console()


def handle_cli_error(
    error: Exception,
    verbose: bool = False,
    json_output: bool = False,
    exit_code: int = 1,
) -> NoReturn:
    """Report an error raised by a CLI command and exit.

    Args:
        error: The exception that was raised
        verbose: Whether to show details and tracebacks
        json_output: Whether to print a JSON error response instead of text
        exit_code: Exit code to use when exiting

    Raises:
        typer.Exit: Always
    """
    if json_output:
        print(JsonFormatter().format_error_response(error, exit_code))
        logger.error(
            "Command failed",
            error_type=type(error).__name__,
            error=str(error),
            exit_code=exit_code,
        )
        raise typer.Exit(exit_code)

    if isinstance(error, TanakhRangeError):
        console.print(f"[red]✗ {escape(error.message)}[/red]")

        if error.hint:
            console.print(f"[yellow]→ {escape(error.hint)}[/yellow]")

        if verbose and error.details:
            console.print("\n[dim]Details:[/dim]")
            for key, value in error.details.items():
                console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")

        logger.error(
            "tanakh-range error occurred",
            error_type=type(error).__name__,
            message=error.message,
            hint=error.hint,
            details=error.details,
            exit_code=exit_code,
        )

    else:
        console.print(f"[red]✗ Unexpected error: {escape(str(error))}[/red]")

        if verbose:
            console.print("\n[dim]Full traceback:[/dim]")
            console.print(escape(traceback.format_exc()))
        else:
            console.print("[dim]Run with --verbose for full error details[/dim]")

        logger.error(
            "Unexpected error occurred",
            error=str(error),
            error_type=type(error).__name__,
            exit_code=exit_code,
            exc_info=True,
        )

    raise typer.Exit(exit_code)
