from .book import (
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

__all__ = [
    "BookCreatedResponse",
    "BookDetailData",
    "BookDetailResponse",
    "BookIdData",
    "BookListData",
    "BookListResponse",
    "BookOut",
    "BookPayload",
    "BookSummary",
    "FailResponse",
    "MessageResponse",
]
