"""tanakh-range CLI commands."""

from __future__ import annotations

from tanakhrange.cli.commands.books import books_command
from tanakhrange.cli.commands.extract import extract_command

__all__ = ["books_command", "extract_command"]
