"""Option declarations shared by corpus-reading commands."""

from pathlib import Path
from typing import Annotated

import typer

CorpusOption = Annotated[
    Path | None,
    typer.Option(
        "--corpus",
        "-f",
        help="Local JSON corpus file (default: TANAKH_CORPUS_PATH or corpus_url)",
        envvar="TANAKH_CORPUS_PATH",
    ),
]
UrlOption = Annotated[
    str | None,
    typer.Option("--url", help="Fetch the JSON corpus from this URL"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Show error details")
]
