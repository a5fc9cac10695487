"""Main CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from tanakhrange import __version__
from tanakhrange.cli.commands import books_command, extract_command
from tanakhrange.cli.formatters import JsonFormatter
from tanakhrange.cli.utils.error_handler import handle_cli_error
from tanakhrange.config import (
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="tanakh-range",
    help="Extract and print verse ranges from a Tanakh JSON corpus",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="extract")(extract_command)
app.command(name="books")(books_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show tanakh-range version."""
    if json_output:
        print(JsonFormatter().format({"name": "tanakh-range", "version": __version__}))
    else:
        console.print(f"tanakh-range v{__version__}")


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="TANAKH_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging", envvar="TANAKH_DEBUG"),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        os.environ["TANAKH_LOG_LEVEL"] = "DEBUG"
        os.environ["TANAKH_DEBUG"] = "true"
        clear_settings_cache()
    elif verbose:
        os.environ["TANAKH_LOG_LEVEL"] = "INFO"
        clear_settings_cache()

    try:
        if config:
            set_settings(get_settings_for_cli(config_file=config))
        configure_logging(get_settings())
    except Exception as e:
        handle_cli_error(e, verbose=debug or verbose)

    logger.debug("Logging configured", debug=debug, config_file=str(config))


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
