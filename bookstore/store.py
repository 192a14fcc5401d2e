"""In-memory ordered collection of books shared by the HTTP handlers."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from bookstore.id import make_id
from bookstore.models import Author, Book

logger = logging.getLogger(__name__)


def seed_books() -> list[Book]:
    """Records every fresh process starts with."""
    return [
        Book(id="1", title="Война и мир", author=Author(first_name="Толстой", last_name="Лев")),
        Book(id="2", title="Отцы и дети", author=Author(first_name="Тургенев", last_name="Иван")),
    ]


@dataclass(frozen=True)
class ReplaceResult:
    """Outcome of ``BookStore.replace``.

    ``book`` is the stored record, or ``None`` when the id was unknown.
    ``books`` is the collection as it stood when the replace ran.
    """

    book: Book | None
    books: list[Book] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.book is not None


class BookStore:
    """Ordered list of books guarded by a single lock.

    Insertion order is visible through ``list()``. Replacing a book moves it
    to the tail; deleting one leaves the order of the rest untouched.
    Lookups that miss return values rather than raising: ``get`` gives the
    zero-valued ``Book()`` and ``replace`` gives a result with no book.
    """

    def __init__(
        self,
        books: Iterable[Book] | None = None,
        id_factory: Callable[[], str] = make_id,
    ) -> None:
        self._books: list[Book] = list(books or [])
        self._id_factory = id_factory
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls, **kwargs) -> BookStore:
        return cls(seed_books(), **kwargs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        with self._lock:
            return self._index(book_id) is not None

    def list(self) -> list[Book]:
        with self._lock:
            return list(self._books)

    def get(self, book_id: str) -> Book:
        with self._lock:
            index = self._index(book_id)
            if index is None:
                return Book()
            return self._books[index]

    def create(self, candidate: Book) -> Book:
        with self._lock:
            book = candidate.with_id(self._new_id())
            self._books.append(book)
        logger.debug("Created book %s", book.id)
        return book

    def replace(self, book_id: str, candidate: Book) -> ReplaceResult:
        with self._lock:
            index = self._index(book_id)
            if index is None:
                return ReplaceResult(book=None, books=list(self._books))
            del self._books[index]
            book = candidate.with_id(book_id)
            self._books.append(book)
            result = ReplaceResult(book=book, books=list(self._books))
        logger.debug("Replaced book %s", book_id)
        return result

    def delete(self, book_id: str) -> list[Book]:
        with self._lock:
            index = self._index(book_id)
            if index is not None:
                del self._books[index]
                logger.debug("Deleted book %s", book_id)
            return list(self._books)

    def _index(self, book_id: object) -> int | None:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    def _new_id(self) -> str:
        # Caller holds the lock.
        taken = {book.id for book in self._books}
        while True:
            book_id = self._id_factory()
            if book_id and book_id not in taken:
                return book_id
            logger.debug("Discarding generated id %r", book_id)
