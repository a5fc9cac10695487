"""Extraction of a contiguous verse range from the corpus."""

from __future__ import annotations

from tanakhrange.config import get_logger
from tanakhrange.exceptions import (
    BookNotFoundError,
    ChapterNotFoundError,
    InvalidChapterOrderError,
    InvalidVerseOrderError,
    VerseNotFoundError,
)
from tanakhrange.models import (
    Book,
    Chapter,
    Corpus,
    OrderedLabelMap,
    RangeLocator,
    RangeResult,
)

logger = get_logger(__name__)


class RangeExtractor:
    """Slices a book of the corpus down to the verses between two endpoints.

    The corpus is only read. Chapters in the result are always new maps, and
    the frozen ``Verse`` values are shared with the corpus.
    """

    def extract(self, corpus: Corpus, locator: RangeLocator) -> RangeResult:
        """Extract the range described by ``locator``.

        Args:
            corpus: Corpus to read from
            locator: Book name and the labels of both endpoints

        Returns:
            A new RangeResult holding exactly the requested verses

        Raises:
            BookNotFoundError: If no book has the requested name
            ChapterNotFoundError: If an endpoint chapter is not in the book
            InvalidChapterOrderError: If the start chapter follows the end chapter
            VerseNotFoundError: If an endpoint verse is not in its chapter
            InvalidVerseOrderError: If, within one chapter, the start verse
                follows the end verse
        """
        book = corpus.get_book(locator.book)
        if book is None:
            raise BookNotFoundError(locator.book, corpus.book_names())

        start_index, end_index = self._resolve_chapters(book, locator)
        logger.debug(
            "Resolved chapter range",
            book=book.name,
            start_index=start_index,
            end_index=end_index,
        )

        chapters: list[tuple[str, Chapter]] = []
        for index in range(start_index, end_index + 1):
            label = book.chapters.key_at(index)
            chapter = book.chapters.value_at(index)

            if start_index == end_index:
                selected = self._single_chapter(book, label, chapter, locator)
            elif index == start_index:
                first = self._verse_index(
                    book, label, chapter, locator.start_verse, "start"
                )
                selected = chapter.slice(first, len(chapter) - 1)
            elif index == end_index:
                last = self._verse_index(book, label, chapter, locator.end_verse, "end")
                selected = chapter.slice(0, last)
            else:
                selected = chapter.copy()

            chapters.append((label, selected))

        result = RangeResult(
            book=book.name,
            range_description=locator.description,
            chapters=OrderedLabelMap(chapters),
        )
        logger.debug(
            "Extracted range",
            book=result.book,
            range=result.range_description,
            chapters=len(result.chapters),
            verses=result.verse_count,
        )
        return result

    def extract_range(
        self,
        corpus: Corpus,
        book_name: str,
        start_chapter: str,
        start_verse: str,
        end_chapter: str,
        end_verse: str,
    ) -> RangeResult:
        """Extract a range given as separate book, chapter and verse labels."""
        locator = RangeLocator(
            book=book_name,
            start_chapter=start_chapter,
            start_verse=start_verse,
            end_chapter=end_chapter,
            end_verse=end_verse,
        )
        return self.extract(corpus, locator)

    @staticmethod
    def _resolve_chapters(book: Book, locator: RangeLocator) -> tuple[int, int]:
        start_index = book.chapters.index_of(locator.start_chapter)
        end_index = book.chapters.index_of(locator.end_chapter)

        if start_index is None:
            raise ChapterNotFoundError(book.name, locator.start_chapter, "start")
        if end_index is None:
            raise ChapterNotFoundError(book.name, locator.end_chapter, "end")
        if start_index > end_index:
            raise InvalidChapterOrderError(locator.start_chapter, locator.end_chapter)
        return start_index, end_index

    @staticmethod
    def _verse_index(
        book: Book, chapter_label: str, chapter: Chapter, verse: str, endpoint: str
    ) -> int:
        index = chapter.index_of(verse)
        if index is None:
            raise VerseNotFoundError(book.name, chapter_label, verse, endpoint)
        return index

    def _single_chapter(
        self, book: Book, label: str, chapter: Chapter, locator: RangeLocator
    ) -> Chapter:
        first = self._verse_index(book, label, chapter, locator.start_verse, "start")
        last = self._verse_index(book, label, chapter, locator.end_verse, "end")
        if first > last:
            raise InvalidVerseOrderError(label, locator.start_verse, locator.end_verse)
        return chapter.slice(first, last)


_default_extractor = RangeExtractor()


def extract_range(
    corpus: Corpus,
    book_name: str,
    start_chapter: str,
    start_verse: str,
    end_chapter: str,
    end_verse: str,
) -> RangeResult:
    """Extract the verses from ``start_chapter:start_verse`` to
    ``end_chapter:end_verse`` of ``book_name``.

    See :meth:`RangeExtractor.extract` for the errors raised.
    """
    return _default_extractor.extract_range(
        corpus, book_name, start_chapter, start_verse, end_chapter, end_verse
    )
