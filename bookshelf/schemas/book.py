from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookPayload(BaseModel):
    """Body accepted by both create and update.

    ``name`` is optional here so that a missing name is reported with the
    service's own message rather than a generic schema error.  Unknown keys,
    including a client-sent ``finished``, are ignored.
    """

    name: Optional[str] = None
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = Field(default=None, alias="pageCount")
    read_page: Optional[int] = Field(default=None, alias="readPage")
    reading: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_scalar_name(cls, value: Any) -> Any:
        # falsy scalars count as a missing name; other scalars keep their text
        if isinstance(value, (bool, int, float)):
            return str(value) if value else None
        return value


class BookOut(BaseModel):
    id: str
    name: str
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = Field(default=None, alias="pageCount")
    read_page: Optional[int] = Field(default=None, alias="readPage")
    finished: bool
    reading: Optional[bool] = None
    inserted_at: datetime = Field(alias="insertedAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        extra="forbid",
    )


class BookSummary(BaseModel):
    """Projection returned by the list endpoint."""

    id: str
    name: str
    publisher: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class BookIdData(BaseModel):
    book_id: str = Field(alias="bookId")

    model_config = ConfigDict(populate_by_name=True)


class BookListData(BaseModel):
    books: list[BookSummary]


class BookDetailData(BaseModel):
    book: BookOut


class BookCreatedResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str
    data: BookIdData


class BookListResponse(BaseModel):
    status: Literal["success"] = "success"
    data: BookListData


class BookDetailResponse(BaseModel):
    status: Literal["success"] = "success"
    data: BookDetailData


class MessageResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str


class FailResponse(BaseModel):
    status: Literal["fail"] = "fail"
    message: str
