"""Formatter for extracted verse ranges."""

from __future__ import annotations

from rich.console import Console

from tanakhrange.cli.formatters.json_formatter import JsonFormatter
from tanakhrange.models import RangeResult
from tanakhrange.renderer import RangeRenderer


class RangeFormatter:
    """Writes a RangeResult to the terminal as rendered text or as JSON."""

    def __init__(
        self,
        renderer: RangeRenderer | None = None,
        console: Console | None = None,
    ) -> None:
        self.renderer = renderer or RangeRenderer()
        self.console = console or Console()

    def format(self, result: RangeResult, as_json: bool = False) -> str:
        if as_json:
            return JsonFormatter().format(result)
        return self.renderer.render(result)

    def print(self, result: RangeResult, as_json: bool = False) -> None:
        """Print the formatted result.

        JSON goes through plain ``print`` so it carries no ANSI codes. Rendered
        text is printed verbatim: verse text may contain brackets that rich
        would otherwise read as markup.
        """
        output = self.format(result, as_json)
        if as_json:
            print(output)
            return
        self.console.print(
            output,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
            end="",
        )
