"""Output formatters for the tanakh-range CLI."""

from tanakhrange.cli.formatters.json_formatter import JsonFormatter
from tanakhrange.cli.formatters.range_formatter import RangeFormatter

__all__ = ["JsonFormatter", "RangeFormatter"]
