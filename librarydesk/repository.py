"""Thread-safe in-memory storage for books."""

from __future__ import annotations

import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from librarydesk.model import Book


class BookNotFoundError(LookupError):
    """Raised when no book has the requested id."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"book with ID {book_id} not found")
        self.book_id = book_id


def _now() -> datetime:
    return datetime.now().astimezone()


def sample_books() -> list[Book]:
    """Return the books the default repository starts with."""
    now = _now()
    return [
        Book(
            id=str(uuid.uuid4()),
            title="The Go Programming Language",
            author="Alan A. A. Donovan, Brian W. Kernighan",
            isbn="978-0134190440",
            description=(
                "The Go Programming Language is the authoritative resource for any "
                "programmer who wants to learn Go."
            ),
            price=34.99,
            created_at=now,
            updated_at=now,
        ),
        Book(
            id=str(uuid.uuid4()),
            title="Go in Action",
            author="William Kennedy, Brian Ketelsen, Erik St. Martin",
            isbn="978-1617291784",
            description=(
                "Go in Action introduces the Go language, guiding you from "
                "inquisitive developer to Go guru."
            ),
            price=29.99,
            created_at=now,
            updated_at=now,
        ),
    ]


class InMemoryBookRepository:
    """Books held in a dictionary keyed by id; seeded with samples by default."""

    def __init__(self, books: Optional[Iterable[Book]] = None) -> None:
        self._lock = threading.Lock()
        seed = sample_books() if books is None else books
        self._books: dict[str, Book] = {book.id: replace(book) for book in seed}

    def find_all(self) -> list[Book]:
        """Return copies of every stored book."""
        with self._lock:
            return [replace(book) for book in self._books.values()]

    def find_by_id(self, book_id: str) -> Book:
        """Return a copy of the book with this id."""
        with self._lock:
            try:
                return replace(self._books[book_id])
            except KeyError:
                raise BookNotFoundError(book_id) from None

    def create(self, book: Book) -> Book:
        """Store a new book, giving it an id if it has none and fresh timestamps."""
        with self._lock:
            now = _now()
            stored = replace(
                book,
                id=book.id or str(uuid.uuid4()),
                created_at=now,
                updated_at=now,
            )
            self._books[stored.id] = stored
            return replace(stored)

    def update(self, book_id: str, book: Book) -> Book:
        """Replace a stored book, keeping its id and creation time."""
        with self._lock:
            existing = self._books.get(book_id)
            if existing is None:
                raise BookNotFoundError(book_id)
            stored = replace(
                book,
                id=book_id,
                created_at=existing.created_at,
                updated_at=_now(),
            )
            self._books[book_id] = stored
            return replace(stored)

    def delete(self, book_id: str) -> None:
        """Remove the book with this id."""
        with self._lock:
            if book_id not in self._books:
                raise BookNotFoundError(book_id)
            del self._books[book_id]