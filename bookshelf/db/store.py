from __future__ import annotations

from collections.abc import Iterator
from threading import RLock
from typing import Optional

from fastapi import Request

from bookshelf.models.book import Book


class BookStore:
    """Ordered in-memory collection of books keyed by id.

    Iteration follows insertion order.  Replacing an existing id keeps its
    position; removing one closes the gap.  Callers that need several
    primitives to act as one step hold ``lock`` around them.
    """

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}
        self.lock = RLock()

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def __iter__(self) -> Iterator[Book]:
        return iter(self.all())

    def all(self) -> list[Book]:
        with self.lock:
            return list(self._books.values())

    def get(self, book_id: str) -> Optional[Book]:
        with self.lock:
            return self._books.get(book_id)

    def add(self, book: Book) -> Book:
        with self.lock:
            if book.id in self._books:
                raise KeyError(f"duplicate book id {book.id!r}")
            self._books[book.id] = book
            return book

    def replace(self, book: Book) -> Book:
        with self.lock:
            if book.id not in self._books:
                raise KeyError(book.id)
            self._books[book.id] = book
            return book

    def remove(self, book_id: str) -> Optional[Book]:
        with self.lock:
            return self._books.pop(book_id, None)


def get_book_store(request: Request) -> BookStore:
    """Return the store owned by the running application."""
    return request.app.state.book_store
