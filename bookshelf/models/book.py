from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Book:
    """In-memory representation of a single book record."""

    name: str
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = None
    read_page: Optional[int] = None
    reading: Optional[bool] = None
    finished: bool = False
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    inserted_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.inserted_at

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Book(id={self.id!r}, name={self.name!r}, publisher={self.publisher!r})"
