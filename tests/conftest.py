from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bookshelf.core.settings import AppSettings
from bookshelf.db.store import BookStore
from bookshelf.main import create_app
from bookshelf.services.book_service import BookService


@pytest.fixture()
def store() -> BookStore:
    return BookStore()


@pytest.fixture()
def service(store: BookStore) -> BookService:
    return BookService(store)


@pytest.fixture()
def test_settings() -> AppSettings:
    return AppSettings(
        title="Bookshelf Test",
        host="127.0.0.1",
        port=9000,
        log_level="WARNING",
        cors_origins=["*"],
    )


@pytest.fixture()
def client(test_settings: AppSettings, store: BookStore):
    app = create_app(settings=test_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
