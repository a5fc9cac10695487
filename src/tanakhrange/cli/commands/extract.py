"""Extract a verse range and print it."""

from typing import Annotated

import typer
from rich.console import Console

from tanakhrange.cli.commands.options import (
    CorpusOption,
    JsonOption,
    UrlOption,
    VerboseOption,
)
from tanakhrange.cli.formatters import RangeFormatter
from tanakhrange.cli.utils.error_handler import handle_cli_error
from tanakhrange.config import get_logger, get_settings_for_cli
from tanakhrange.extractor import RangeExtractor
from tanakhrange.loader import CorpusLoader
from tanakhrange.models import RangeLocator
from tanakhrange.renderer import RangeRenderer

logger = get_logger(__name__)
console = Console()


def extract_command(
    book: Annotated[str, typer.Argument(help='Book name, e.g. "צפניה"')],
    start_chapter: Annotated[str, typer.Argument(help="First chapter label")],
    start_verse: Annotated[str, typer.Argument(help="First verse label")],
    end_chapter: Annotated[str, typer.Argument(help="Last chapter label")],
    end_verse: Annotated[str, typer.Argument(help="Last verse label")],
    corpus: CorpusOption = None,
    url: UrlOption = None,
    json_output: JsonOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the verses from START_CHAPTER:START_VERSE to END_CHAPTER:END_VERSE.

    Labels are matched exactly against the corpus (Hebrew letter numerals in
    the standard Tanakh corpus), for example:

        tanakh-range extract צפניה א א א ה
    """
    try:
        settings = get_settings_for_cli(cli_overrides={"corpus_path": corpus})
        data = CorpusLoader(settings).load(path=corpus, url=url)

        locator = RangeLocator(
            book=book,
            start_chapter=start_chapter,
            start_verse=start_verse,
            end_chapter=end_chapter,
            end_verse=end_verse,
        )
        result = RangeExtractor().extract(data, locator)
        logger.info(
            "Range extracted",
            book=result.book,
            range=result.range_description,
            verses=result.verse_count,
        )

        formatter = RangeFormatter(
            RangeRenderer(settings.chapter_prefix, settings.separator_width),
            console,
        )
        formatter.print(result, as_json=json_output)
    except Exception as e:
        handle_cli_error(e, verbose=verbose, json_output=json_output)
