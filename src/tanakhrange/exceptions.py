"""Custom exception hierarchy for tanakh-range with helpful error messages."""

from __future__ import annotations

from typing import Any


class TanakhRangeError(Exception):
    """Base exception with helpful formatting for all tanakh-range errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class RangeError(TanakhRangeError):
    """Invalid range request: unknown labels or endpoints out of order."""

    pass


class BookNotFoundError(RangeError):
    """Requested book name has no match in the corpus."""

    def __init__(self, book: str, available_books: list[str] | None = None) -> None:
        """Initialize book lookup error.

        Args:
            book: Book name that was requested
            available_books: Names of the books in the corpus, if known
        """
        self.book = book
        details: dict[str, Any] = {"book": book}
        hint = None
        if available_books:
            sample = available_books[:5]
            details["available_books"] = sample
            hint = "Book names must match exactly, e.g. " + ", ".join(sample)
        super().__init__(
            message=f'Book "{book}" not found', hint=hint, details=details
        )


class ChapterNotFoundError(RangeError):
    """Requested chapter label is absent from the book."""

    def __init__(self, book: str, chapter: str, endpoint: str) -> None:
        """Initialize chapter lookup error.

        Args:
            book: Book that was searched
            chapter: Chapter label that was requested
            endpoint: Which end of the range the label belongs to (start or end)
        """
        self.book = book
        self.chapter = chapter
        self.endpoint = endpoint
        super().__init__(
            message=f'Chapter "{chapter}" not found in book "{book}"',
            details={"book": book, "chapter": chapter, "endpoint": endpoint},
        )


class InvalidChapterOrderError(RangeError):
    """Start chapter is positioned after the end chapter."""

    def __init__(self, start_chapter: str, end_chapter: str) -> None:
        self.start_chapter = start_chapter
        self.end_chapter = end_chapter
        super().__init__(
            message="Start chapter cannot come after the end chapter",
            hint="Swap the start and end chapters",
            details={"start_chapter": start_chapter, "end_chapter": end_chapter},
        )


class VerseNotFoundError(RangeError):
    """Requested verse label is absent from its chapter."""

    def __init__(self, book: str, chapter: str, verse: str, endpoint: str) -> None:
        """Initialize verse lookup error.

        Args:
            book: Book that was searched
            chapter: Chapter label the verse was looked up in
            verse: Verse label that was requested
            endpoint: Which end of the range the label belongs to (start or end)
        """
        self.book = book
        self.chapter = chapter
        self.verse = verse
        self.endpoint = endpoint
        super().__init__(
            message=f'Verse "{verse}" not found in chapter "{chapter}"',
            details={
                "book": book,
                "chapter": chapter,
                "verse": verse,
                "endpoint": endpoint,
            },
        )


class InvalidVerseOrderError(RangeError):
    """Start verse is positioned after the end verse within one chapter."""

    def __init__(self, chapter: str, start_verse: str, end_verse: str) -> None:
        self.chapter = chapter
        self.start_verse = start_verse
        self.end_verse = end_verse
        super().__init__(
            message="Start verse cannot come after the end verse",
            hint="Swap the start and end verses",
            details={
                "chapter": chapter,
                "start_verse": start_verse,
                "end_verse": end_verse,
            },
        )


class CorpusError(TanakhRangeError):
    """Malformed corpus document: wrong shape, duplicate labels, missing text."""

    pass


class CorpusFetchError(TanakhRangeError):
    """Network or HTTP failure while fetching the corpus."""

    pass


class ConfigurationError(TanakhRangeError):
    """Configuration errors including invalid settings and missing config files."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "corpus": "corpus_path",
        "corpus_file": "corpus_path",
        "url": "corpus_url",
        "timeout": "fetch_timeout",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
