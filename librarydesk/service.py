"""Book operations on top of a repository."""

from __future__ import annotations

from librarydesk.model import Book
from librarydesk.repository import InMemoryBookRepository


class BookService:
    """Passes book operations through to a repository; errors propagate."""

    def __init__(self, repository: InMemoryBookRepository) -> None:
        self._repository = repository

    def get_all_books(self) -> list[Book]:
        """Return every book."""
        return self._repository.find_all()

    def get_book_by_id(self, book_id: str) -> Book:
        """Return the book with this id."""
        return self._repository.find_by_id(book_id)

    def create_book(self, book: Book) -> Book:
        """Store a new book and return it as stored."""
        return self._repository.create(book)

    def update_book(self, book_id: str, book: Book) -> Book:
        """Replace the book with this id and return it as stored."""
        return self._repository.update(book_id, book)

    def delete_book(self, book_id: str) -> None:
        """Remove the book with this id."""
        self._repository.delete(book_id)