"""The book record and its JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_REQUIRED = (("title", "Title"), ("author", "Author"), ("isbn", "ISBN"), ("price", "Price"))
_STRING_FIELDS = ("id", "title", "author", "isbn", "description")


class BookValidationError(ValueError):
    """Raised when data cannot be turned into a valid book."""


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _parse_time(name: str, value: Any) -> datetime:
    if not isinstance(value, str):
        raise BookValidationError(f"field '{name}' must be a time string")
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise BookValidationError(f"field '{name}' is not a valid time: {value!r}") from exc
    if parsed.tzinfo is None:
        raise BookValidationError(f"field '{name}' has no time zone: {value!r}")
    return parsed


@dataclass
class Book:
    """A book in the catalogue."""

    id: str = ""
    title: str = ""
    author: str = ""
    isbn: str = ""
    description: str = ""
    price: float = 0.0
    created_at: datetime = field(default=ZERO_TIME)
    updated_at: datetime = field(default=ZERO_TIME)

    @classmethod
    def from_dict(cls, data: Any) -> "Book":
        """Build a book from decoded JSON, checking types and required fields."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise BookValidationError(
                f"cannot unmarshal {type(data).__name__} into Book: a JSON object is required"
            )
        values: dict[str, Any] = {}
        for name in _STRING_FIELDS:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise BookValidationError(f"field '{name}' must be a string")
            values[name] = value
        price = data.get("price")
        if price is not None:
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                raise BookValidationError("field 'price' must be a number")
            values["price"] = float(price)
        for name in ("created_at", "updated_at"):
            value = data.get(name)
            if value is not None:
                values[name] = _parse_time(name, value)

        book = cls(**values)
        problems = [
            f"Key: 'Book.{label}' Error:Field validation for '{label}' failed on the 'required' tag"
            for attr, label in _REQUIRED
            if not getattr(book, attr)
        ]
        if problems:
            raise BookValidationError("\n".join(problems))
        return book

    def to_dict(self) -> dict[str, Any]:
        """Return the book as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "description": self.description,
            "price": self.price,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }