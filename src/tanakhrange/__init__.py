"""tanakh-range: extract and print contiguous verse ranges from a Tanakh corpus.

The corpus is an ordered list of books, each an ordered mapping of chapter
labels to ordered mappings of verse labels to verses. Labels are opaque
strings (Hebrew letter numerals in the standard corpus) resolved by their
position, never by value.

Example:
    >>> from tanakhrange import extract_range, load_corpus_file, render_range
    >>> corpus = load_corpus_file("tanakh.json")
    >>> print(render_range(extract_range(corpus, "צפניה", "א", "א", "א", "ה")))
"""

__version__ = "0.1.0"

from tanakhrange.exceptions import (
    BookNotFoundError,
    ChapterNotFoundError,
    CorpusError,
    CorpusFetchError,
    InvalidChapterOrderError,
    InvalidVerseOrderError,
    RangeError,
    TanakhRangeError,
    VerseNotFoundError,
)
from tanakhrange.extractor import RangeExtractor, extract_range
from tanakhrange.loader import (
    CorpusLoader,
    fetch_corpus,
    load_corpus_file,
    parse_corpus,
)
from tanakhrange.models import (
    Book,
    Corpus,
    OrderedLabelMap,
    RangeLocator,
    RangeResult,
    Verse,
)
from tanakhrange.renderer import RangeRenderer, render_range

__all__ = [
    "Book",
    "BookNotFoundError",
    "ChapterNotFoundError",
    "Corpus",
    "CorpusError",
    "CorpusFetchError",
    "CorpusLoader",
    "InvalidChapterOrderError",
    "InvalidVerseOrderError",
    "OrderedLabelMap",
    "RangeError",
    "RangeExtractor",
    "RangeLocator",
    "RangeRenderer",
    "RangeResult",
    "TanakhRangeError",
    "Verse",
    "VerseNotFoundError",
    "__version__",
    "extract_range",
    "fetch_corpus",
    "load_corpus_file",
    "parse_corpus",
    "render_range",
]
