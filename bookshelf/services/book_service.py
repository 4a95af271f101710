from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Optional

from fastapi import Depends
from pydantic import ValidationError

from bookshelf.core.exceptions import BookNotFoundError, BookValidationError
from bookshelf.db.store import BookStore, get_book_store
from bookshelf.models.book import Book, utcnow
from bookshelf.schemas.book import BookPayload

logger = logging.getLogger(__name__)

MSG_CREATED = "Book added successfully"
MSG_CREATE_NAME_REQUIRED = "Failed to add book. Please provide the book name"
MSG_CREATE_READ_PAGE = "Failed to add book. readPage cannot be greater than pageCount"
MSG_NOT_FOUND = "Book not found"
MSG_UPDATED = "Book updated successfully"
MSG_UPDATE_NOT_FOUND = "Failed to update book. Id not found"
MSG_UPDATE_NAME_REQUIRED = "Failed to update book. Please provide the book name"
MSG_UPDATE_READ_PAGE = "Failed to update book. readPage cannot be greater than pageCount"
MSG_DELETED = "Book deleted successfully"
MSG_DELETE_NOT_FOUND = "Failed to delete book. Id not found"
MSG_INVALID_PAYLOAD = "Invalid request payload"


def _as_payload(payload: BookPayload | Mapping[str, Any] | None) -> BookPayload:
    if isinstance(payload, BookPayload):
        return payload
    try:
        return BookPayload.model_validate(payload)
    except ValidationError as exc:
        raise BookValidationError(MSG_INVALID_PAYLOAD) from exc


def _read_page_exceeds(payload: BookPayload) -> bool:
    if payload.read_page is None or payload.page_count is None:
        return False
    return payload.read_page > payload.page_count


def _is_finished(payload: BookPayload) -> bool:
    return payload.page_count == payload.read_page


class BookService:
    """Business logic layer for the in-memory bookshelf.

    Each public method runs under the store's lock, so checks and the
    mutation that follows them cannot interleave with another request.
    """

    def __init__(self, store: BookStore):
        self.store = store

    def _now(self) -> datetime:
        return utcnow()

    def _next_updated_at(self, previous: datetime) -> datetime:
        now = self._now()
        if now <= previous:
            return previous + timedelta(microseconds=1)
        return now

    def _require(self, book_id: str, message: str) -> Book:
        book = self.store.get(book_id)
        if book is None:
            logger.info("Book %s not found", book_id)
            raise BookNotFoundError(message, book_id=book_id)
        return book

    def _validate(self, payload: BookPayload, name_message: str, read_page_message: str) -> None:
        if not payload.name:
            raise BookValidationError(name_message)
        if _read_page_exceeds(payload):
            raise BookValidationError(read_page_message)

    def create_book(self, payload: BookPayload) -> Book:
        with self.store.lock:
            try:
                self._validate(payload, MSG_CREATE_NAME_REQUIRED, MSG_CREATE_READ_PAGE)
            except BookValidationError as exc:
                logger.info("Rejected new book: %s", exc.message)
                raise

            now = self._now()
            book = Book(
                **payload.model_dump(),
                finished=_is_finished(payload),
                inserted_at=now,
                updated_at=now,
            )
            self.store.add(book)

        logger.info("Added book %s (%r)", book.id, book.name)
        return book

    def list_books(
        self,
        name: Optional[str] = None,
        reading: Optional[bool] = None,
        finished: Optional[bool] = None,
    ) -> list[Book]:
        books = self.store.all()

        if name:
            needle = name.lower()
            books = [book for book in books if needle in book.name.lower()]
        if reading is not None:
            books = [book for book in books if book.reading is reading]
        if finished is not None:
            books = [book for book in books if book.finished is finished]

        return books

    def get_book(self, book_id: str) -> Book:
        return self._require(book_id, MSG_NOT_FOUND)

    def update_book(self, book_id: str, payload: BookPayload | Mapping[str, Any] | None) -> Book:
        """Replace an existing book.

        The id is resolved before the body is looked at, so an unknown id is
        reported as not found even when the body is malformed.
        """
        with self.store.lock:
            current = self._require(book_id, MSG_UPDATE_NOT_FOUND)
            try:
                payload = _as_payload(payload)
                self._validate(payload, MSG_UPDATE_NAME_REQUIRED, MSG_UPDATE_READ_PAGE)
            except BookValidationError as exc:
                logger.info("Rejected update of book %s: %s", book_id, exc.message)
                raise

            book = Book(
                **payload.model_dump(),
                finished=_is_finished(payload),
                id=current.id,
                inserted_at=current.inserted_at,
                updated_at=self._next_updated_at(current.updated_at),
            )
            self.store.replace(book)

        logger.info("Updated book %s", book_id)
        return book

    def delete_book(self, book_id: str) -> None:
        with self.store.lock:
            self._require(book_id, MSG_DELETE_NOT_FOUND)
            self.store.remove(book_id)

        logger.info("Deleted book %s", book_id)


def get_book_service(store: BookStore = Depends(get_book_store)) -> BookService:
    return BookService(store)
