from .book import Book, utcnow

__all__ = ["Book", "utcnow"]
