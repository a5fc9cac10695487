"""List the books of the corpus."""

from rich.console import Console
from rich.table import Table

from tanakhrange.cli.commands.options import (
    CorpusOption,
    JsonOption,
    UrlOption,
    VerboseOption,
)
from tanakhrange.cli.formatters import JsonFormatter
from tanakhrange.cli.utils.error_handler import handle_cli_error
from tanakhrange.config import get_settings_for_cli
from tanakhrange.loader import CorpusLoader

console = Console()


def books_command(
    corpus: CorpusOption = None,
    url: UrlOption = None,
    json_output: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """List book names with their chapter and verse counts, in corpus order."""
    try:
        settings = get_settings_for_cli(cli_overrides={"corpus_path": corpus})
        data = CorpusLoader(settings).load(path=corpus, url=url)
    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)

    rows = [
        {
            "book": book.name,
            "chapters": len(book.chapters),
            "verses": book.verse_count,
        }
        for book in data
    ]

    if json_output:
        print(JsonFormatter().format(rows))
        return

    if not rows:
        console.print("[yellow]The corpus contains no books.[/yellow]")
        return

    table = Table(title="Books")
    table.add_column("Book", style="cyan")
    table.add_column("Chapters", justify="right")
    table.add_column("Verses", justify="right")
    for row in rows:
        table.add_row(row["book"], str(row["chapters"]), str(row["verses"]))
    console.print(table)
