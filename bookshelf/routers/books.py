from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from bookshelf.schemas.book import (
    BookCreatedResponse,
    BookDetailData,
    BookDetailResponse,
    BookIdData,
    BookListData,
    BookListResponse,
    BookOut,
    BookPayload,
    BookSummary,
    FailResponse,
    MessageResponse,
)
from bookshelf.services.book_service import (
    MSG_CREATED,
    MSG_DELETED,
    MSG_UPDATED,
    BookService,
    get_book_service,
)

router = APIRouter(prefix="/books", tags=["books"])

_FAIL_400 = {status.HTTP_400_BAD_REQUEST: {"model": FailResponse}}
_FAIL_404 = {status.HTTP_404_NOT_FOUND: {"model": FailResponse}}


def _as_flag(value: Optional[str]) -> Optional[bool]:
    if value == "1":
        return True
    if value == "0":
        return False
    return None


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BookCreatedResponse,
    responses=_FAIL_400,
)
def create_book(
    payload: BookPayload,
    service: BookService = Depends(get_book_service),
) -> BookCreatedResponse:
    """Add a book to the shelf and return its generated id."""
    book = service.create_book(payload)
    return BookCreatedResponse(message=MSG_CREATED, data=BookIdData(book_id=book.id))


@router.get(
    "",
    response_model=BookListResponse,
)
def list_books(
    name: Optional[str] = Query(default=None),
    reading: Optional[str] = Query(default=None),
    finished: Optional[str] = Query(default=None),
    service: BookService = Depends(get_book_service),
) -> BookListResponse:
    """Return id, name and publisher of every book, in insertion order.

    ``name`` matches case-insensitively anywhere in the title; ``reading``
    and ``finished`` take ``0`` or ``1``.
    """
    books = service.list_books(name=name, reading=_as_flag(reading), finished=_as_flag(finished))
    return BookListResponse(
        data=BookListData(books=[BookSummary.model_validate(book) for book in books]),
    )


@router.get(
    "/{book_id}",
    response_model=BookDetailResponse,
    responses=_FAIL_404,
)
def get_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> BookDetailResponse:
    book = service.get_book(book_id)
    return BookDetailResponse(data=BookDetailData(book=BookOut.model_validate(book)))


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    responses={**_FAIL_400, **_FAIL_404},
    openapi_extra={
        "requestBody": {"content": {"application/json": {"schema": BookPayload.model_json_schema(by_alias=True)}}},
    },
)
def update_book(
    book_id: str,
    payload: Any = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> MessageResponse:
    """Replace every editable field of an existing book.

    The body is validated by the service after the id is resolved.
    """
    service.update_book(book_id, payload)
    return MessageResponse(message=MSG_UPDATED)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    responses=_FAIL_404,
)
def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> MessageResponse:
    service.delete_book(book_id)
    return MessageResponse(message=MSG_DELETED)
