"""Plain-text rendering of extracted verse ranges."""

from __future__ import annotations

from tanakhrange.models import RangeResult

DEFAULT_CHAPTER_PREFIX = "פרק"
DEFAULT_SEPARATOR_WIDTH = 20


class RangeRenderer:
    """Renders a RangeResult chapter by chapter.

    Each chapter is a header line, a dashed separator line, one
    ``(label) text [parasha]`` line per verse and a trailing blank line.
    """

    def __init__(
        self,
        chapter_prefix: str = DEFAULT_CHAPTER_PREFIX,
        separator_width: int = DEFAULT_SEPARATOR_WIDTH,
    ) -> None:
        """Initialize the renderer.

        Args:
            chapter_prefix: Word printed before the chapter label in headers
            separator_width: Number of '-' characters under each header
        """
        self.chapter_prefix = chapter_prefix
        self.separator_width = separator_width

    def render(self, result: RangeResult) -> str:
        lines: list[str] = []
        for chapter_label, chapter in result.chapters.items():
            lines.append(f"{self.chapter_prefix} {chapter_label}:")
            lines.append("-" * self.separator_width)
            for verse_label, verse in chapter.items():
                line = f"({verse_label}) {verse.text}"
                if verse.parasha:
                    line += f" {verse.parasha}"
                lines.append(line)
            lines.append("")
        return "".join(f"{line}\n" for line in lines)


def render_range(result: RangeResult) -> str:
    """Render ``result`` with the default header prefix and separator width."""
    return RangeRenderer().render(result)
