import uuid

import pytest

from librarydesk.model import Book
from librarydesk.repository import BookNotFoundError, InMemoryBookRepository, sample_books


def _book(**overrides):
    values = dict(title="Title", author="Author", isbn="ISBN", price=9.5)
    values.update(overrides)
    return Book(**values)


def test_default_repository_has_sample_books():
    titles = {b.title for b in InMemoryBookRepository().find_all()}
    assert titles == {"The Go Programming Language", "Go in Action"}


def test_sample_books_have_unique_uuid_ids():
    books = sample_books()
    ids = [b.id for b in books]
    assert len(set(ids)) == len(ids)
    assert all(str(uuid.UUID(i)) == i for i in ids)


def test_empty_repository():
    assert InMemoryBookRepository([]).find_all() == []


def test_create_assigns_uuid_and_timestamps():
    repo = InMemoryBookRepository([])
    created = repo.create(_book())
    assert str(uuid.UUID(created.id)) == created.id
    assert created.created_at == created.updated_at
    assert repo.find_by_id(created.id) == created


def test_create_keeps_given_id():
    repo = InMemoryBookRepository([])
    created = repo.create(_book(id="given"))
    assert created.id == "given"
    assert repo.find_by_id("given").title == "Title"


def test_find_by_id_missing_raises():
    repo = InMemoryBookRepository([])
    with pytest.raises(BookNotFoundError) as info:
        repo.find_by_id("nope")
    assert str(info.value) == "book with ID nope not found"


def test_update_keeps_id_and_created_at():
    repo = InMemoryBookRepository([])
    created = repo.create(_book())
    updated = repo.update(created.id, _book(id="ignored", title="New"))
    assert updated.id == created.id
    assert updated.title == "New"
    assert updated.created_at == created.created_at
    assert updated.updated_at >= created.updated_at
    assert repo.find_by_id(created.id) == updated


def test_update_missing_raises():
    repo = InMemoryBookRepository([])
    with pytest.raises(BookNotFoundError):
        repo.update("nope", _book())


def test_delete_removes_book():
    repo = InMemoryBookRepository([])
    created = repo.create(_book())
    repo.delete(created.id)
    assert repo.find_all() == []
    with pytest.raises(BookNotFoundError):
        repo.find_by_id(created.id)


def test_delete_missing_raises():
    repo = InMemoryBookRepository([])
    with pytest.raises(BookNotFoundError):
        repo.delete("nope")


def test_returned_books_are_copies():
    repo = InMemoryBookRepository([])
    created = repo.create(_book())
    fetched = repo.find_by_id(created.id)
    fetched.title = "changed"
    assert repo.find_by_id(created.id).title == "Title"