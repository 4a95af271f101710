from __future__ import annotations

from fastapi import status


class BookshelfError(Exception):
    """Base class for client errors raised by the book operations."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookValidationError(BookshelfError):
    """A required field is missing or a value constraint is violated."""

    status_code = status.HTTP_400_BAD_REQUEST


class BookNotFoundError(BookshelfError):
    """The referenced book id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, book_id: str):
        super().__init__(message)
        self.book_id = book_id
