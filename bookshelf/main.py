from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookshelf.core.exceptions import BookshelfError
from bookshelf.core.logging_config import setup_logging
from bookshelf.core.settings import AppSettings, get_settings
from bookshelf.db.store import BookStore
from bookshelf.routers.books import router as books_router
from bookshelf.schemas.book import FailResponse, MessageResponse
from bookshelf.services.book_service import MSG_INVALID_PAYLOAD

logger = logging.getLogger(__name__)


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=FailResponse(message=message).model_dump())


async def _handle_bookshelf_error(request: Request, exc: BookshelfError) -> JSONResponse:
    return _fail(exc.status_code, exc.message)


async def _handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Malformed request to %s %s: %s", request.method, request.url.path, exc.errors())
    return _fail(status.HTTP_400_BAD_REQUEST, MSG_INVALID_PAYLOAD)


def create_app(settings: Optional[AppSettings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Build a FastAPI application that owns its own book store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s ready with %d book(s)", settings.title, len(app.state.book_store))
        yield
        logger.info("%s shutting down", settings.title)

    app = FastAPI(title=settings.title, lifespan=lifespan)
    app.state.book_store = store if store is not None else BookStore()
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(BookshelfError, _handle_bookshelf_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)

    @app.get("/", response_model=MessageResponse)
    def read_root() -> MessageResponse:
        return MessageResponse(message=f"{settings.title} is running")

    app.include_router(books_router)
    return app


app = create_app()


def run() -> None:
    """Serve ``app`` on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
