"""Loading the JSON corpus from a decoded value, a file, or a URL."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx

from tanakhrange.config import TanakhRangeSettings, get_logger, get_settings
from tanakhrange.exceptions import CorpusError, CorpusFetchError
from tanakhrange.models import Book, Chapter, Corpus, OrderedLabelMap, Verse

logger = get_logger(__name__)


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    """``object_pairs_hook`` that fails on repeated keys instead of keeping the last."""
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise CorpusError(
                message=f"Duplicate key {key!r} in corpus document",
                hint="Chapter and verse labels must be unique within their parent",
                details={"key": key},
            )
        result[key] = value
    return result


def _parse_verse(book: str, chapter: str, label: str, raw: Any) -> Verse:
    where = f"{book} {chapter}:{label}"
    if not isinstance(raw, dict):
        raise CorpusError(
            message=f"Verse {where} must be an object",
            details={"found_type": type(raw).__name__},
        )
    text = raw.get("text")
    if not isinstance(text, str):
        raise CorpusError(
            message=f"Verse {where} has no text",
            hint='Every verse needs a string "text" field',
        )
    parasha = raw.get("parasha")
    if parasha is not None and not isinstance(parasha, str):
        raise CorpusError(
            message=f"Verse {where} has a non-string parasha",
            details={"found_type": type(parasha).__name__},
        )
    return Verse(text=text, parasha=parasha or None)


def _parse_chapter(book: str, label: str, raw: Any) -> Chapter:
    if not isinstance(raw, dict):
        raise CorpusError(
            message=f'Chapter "{label}" of "{book}" must be an object of verses',
            details={"found_type": type(raw).__name__},
        )
    return OrderedLabelMap(
        (verse_label, _parse_verse(book, label, verse_label, verse))
        for verse_label, verse in raw.items()
    )


def _parse_book(position: int, raw: Any) -> Book:
    if not isinstance(raw, dict) or not isinstance(raw.get("book"), str):
        raise CorpusError(
            message=f"Corpus entry {position} is not a book",
            hint='Each entry needs a string "book" and a "chapters" object',
        )
    name = raw["book"]
    chapters = raw.get("chapters")
    if not isinstance(chapters, dict):
        raise CorpusError(
            message=f'Book "{name}" has no chapters object',
            details={"found_type": type(chapters).__name__},
        )
    return Book(
        name=name,
        chapters=OrderedLabelMap(
            (label, _parse_chapter(name, label, chapter))
            for label, chapter in chapters.items()
        ),
    )


def parse_corpus(data: Any) -> Corpus:
    """Convert a decoded JSON corpus document into a Corpus.

    Args:
        data: List of ``{"book": ..., "chapters": {...}}`` objects

    Returns:
        The parsed corpus, in document order

    Raises:
        CorpusError: If the document does not have the expected shape
    """
    if not isinstance(data, list):
        raise CorpusError(
            message="Corpus document must be a list of books",
            details={"found_type": type(data).__name__},
        )

    books = tuple(_parse_book(position, raw) for position, raw in enumerate(data))

    seen: set[str] = set()
    for book in books:
        if book.name in seen:
            raise CorpusError(
                message=f'Book "{book.name}" appears more than once',
                details={"book": book.name},
            )
        seen.add(book.name)

    logger.debug("Parsed corpus", books=len(books))
    return Corpus(books=books)


def parse_corpus_text(text: str) -> Corpus:
    """Decode and parse a JSON corpus document."""
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise CorpusError(
            message="Corpus document is not valid JSON",
            details={"line": e.lineno, "column": e.colno, "reason": e.msg},
        ) from e
    return parse_corpus(data)


def load_corpus_file(path: Path | str) -> Corpus:
    """Read and parse a UTF-8 JSON corpus file.

    Raises:
        CorpusError: If the file is missing, unreadable, or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CorpusError(
            message=f"Corpus file not found: {path}",
            hint="Pass --corpus or set TANAKH_CORPUS_PATH to an existing file",
            details={"path": str(path)},
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(
            message=f"Cannot read corpus file: {path}",
            details={"path": str(path), "reason": str(e)},
        ) from e

    logger.info("Loading corpus file", path=str(path))
    return parse_corpus_text(text)


def fetch_corpus(
    url: str, timeout: float = 30.0, client: httpx.Client | None = None
) -> Corpus:
    """Download and parse the corpus from ``url``.

    Args:
        url: Address of the JSON corpus document
        timeout: Request timeout in seconds
        client: Optional client to use; one is created and closed otherwise

    Raises:
        CorpusFetchError: On network errors or non-2xx responses
        CorpusError: If the downloaded document is malformed
    """
    logger.info("Fetching corpus", url=url)
    owns_client = client is None
    http = client or httpx.Client(timeout=httpx.Timeout(timeout))
    try:
        response = http.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise CorpusFetchError(
            message=f"Corpus download failed with HTTP {e.response.status_code}",
            hint="Check corpus_url or use a local corpus file",
            details={"url": url, "status_code": e.response.status_code},
        ) from e
    except httpx.HTTPError as e:
        raise CorpusFetchError(
            message="Corpus download failed",
            hint="Check your network connection or use a local corpus file",
            details={"url": url, "error": f"{type(e).__name__}: {e}"},
        ) from e
    finally:
        if owns_client:
            http.close()

    return parse_corpus_text(response.text)


class CorpusLoader:
    """Loads the corpus from a local file when one is configured, else from a URL."""

    def __init__(
        self,
        settings: TanakhRangeSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.client = client

    def load(self, path: Path | None = None, url: str | None = None) -> Corpus:
        """Load the corpus.

        Source priority: ``path``, then ``url``, then ``settings.corpus_path``,
        then ``settings.corpus_url``.
        """
        if path is not None:
            return load_corpus_file(path)
        if url is not None:
            return fetch_corpus(url, self.settings.fetch_timeout, self.client)
        if self.settings.corpus_path is not None:
            return load_corpus_file(self.settings.corpus_path)
        return fetch_corpus(
            self.settings.corpus_url, self.settings.fetch_timeout, self.client
        )
