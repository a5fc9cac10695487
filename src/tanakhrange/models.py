"""Data models for the corpus and for extracted verse ranges."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

V = TypeVar("V")


class OrderedLabelMap(Mapping[str, V], Generic[V]):
    """Read-only mapping of opaque string labels whose order is explicit.

    Order invariant: iteration, ``keys_in_order()`` and ``index_of()`` all
    follow the order in which labels were supplied to the constructor. The
    order is kept in a dedicated key list rather than taken from the
    underlying dict. Labels are never compared by value, only by equality
    and position. Duplicate labels are rejected.
    """

    __slots__ = ("_index", "_keys", "_values")

    def __init__(self, items: Iterable[tuple[str, V]] = ()) -> None:
        """Build the map from ``(label, value)`` pairs.

        Args:
            items: Pairs in source order

        Raises:
            ValueError: If a label occurs more than once
        """
        self._keys: list[str] = []
        self._values: dict[str, V] = {}
        self._index: dict[str, int] = {}
        for label, value in items:
            if label in self._index:
                raise ValueError(f"Duplicate label: {label!r}")
            self._index[label] = len(self._keys)
            self._keys.append(label)
            self._values[label] = value

    def keys_in_order(self) -> list[str]:
        """Return the labels in order, as a new list."""
        return list(self._keys)

    def index_of(self, label: str) -> int | None:
        """Return the zero-based position of ``label``, or None if absent."""
        return self._index.get(label)

    def key_at(self, index: int) -> str:
        return self._keys[index]

    def value_at(self, index: int) -> V:
        return self._values[self._keys[index]]

    def slice(self, start: int, end: int) -> OrderedLabelMap[V]:
        """Return a new map with the entries at positions ``start..end`` inclusive."""
        return OrderedLabelMap(
            (label, self._values[label]) for label in self._keys[start : end + 1]
        )

    def copy(self) -> OrderedLabelMap[V]:
        """Return a shallow copy: a new map holding the same values."""
        return OrderedLabelMap((label, self._values[label]) for label in self._keys)

    def to_dict(self) -> dict[str, V]:
        """Return a plain dict built in label order."""
        return {label: self._values[label] for label in self._keys}

    def __getitem__(self, label: str) -> V:
        return self._values[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedLabelMap):
            return self._keys == other._keys and self._values == other._values
        return super().__eq__(other)

    def __repr__(self) -> str:
        body = ", ".join(f"{label!r}: {self._values[label]!r}" for label in self._keys)
        return f"OrderedLabelMap({{{body}}})"


@dataclass(frozen=True)
class Verse:
    """A single verse and its optional parasha annotation."""

    text: str
    parasha: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"text": self.text}
        if self.parasha:
            data["parasha"] = self.parasha
        return data


Chapter = OrderedLabelMap[Verse]


@dataclass(frozen=True)
class Book:
    """A named book with its chapters in source order."""

    name: str
    chapters: OrderedLabelMap[Chapter]

    @property
    def verse_count(self) -> int:
        return sum(len(chapter) for chapter in self.chapters.values())


@dataclass(frozen=True)
class Corpus:
    """Ordered collection of books."""

    books: tuple[Book, ...] = ()

    def get_book(self, name: str) -> Book | None:
        """Return the first book whose name equals ``name`` exactly."""
        for book in self.books:
            if book.name == name:
                return book
        return None

    def book_names(self) -> list[str]:
        return [book.name for book in self.books]

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def __len__(self) -> int:
        return len(self.books)


@dataclass(frozen=True)
class RangeLocator:
    """Book name plus the chapter and verse labels of both range endpoints."""

    book: str
    start_chapter: str
    start_verse: str
    end_chapter: str
    end_verse: str

    @property
    def description(self) -> str:
        """Human-readable range, e.g. ``א:א - ב:ה``."""
        return (
            f"{self.start_chapter}:{self.start_verse} - "
            f"{self.end_chapter}:{self.end_verse}"
        )


@dataclass
class RangeResult:
    """Verses selected by a range request, grouped by chapter."""

    book: str
    range_description: str
    chapters: OrderedLabelMap[Chapter] = field(default_factory=OrderedLabelMap)

    @property
    def verse_count(self) -> int:
        return sum(len(chapter) for chapter in self.chapters.values())

    def to_dict(self) -> dict[str, Any]:
        """Return the result in the same nested shape as the JSON corpus."""
        return {
            "book": self.book,
            "range": self.range_description,
            "chapters": {
                chapter_label: {
                    verse_label: verse.to_dict()
                    for verse_label, verse in chapter.items()
                }
                for chapter_label, chapter in self.chapters.items()
            },
        }
