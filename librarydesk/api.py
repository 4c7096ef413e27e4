"""HTTP API for the book catalogue."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Optional, Sequence

from flask import Flask, jsonify, request

from librarydesk import response
from librarydesk.model import Book
from librarydesk.repository import InMemoryBookRepository
from librarydesk.service import BookService

logger = logging.getLogger(__name__)

BOOKS_PATH = "/api/v1/books"
GREETING = "Xin chào từ server!"


def _bind_book() -> Book:
    payload = json.loads(request.get_data(as_text=True))
    return Book.from_dict(payload)


def create_app(service: Optional[BookService] = None) -> Flask:
    """Build the Flask application serving the book routes."""
    if service is None:
        service = BookService(InMemoryBookRepository())

    app = Flask(__name__)
    app.json.sort_keys = False

    def reply(status: int, body: response.ApiResponse):
        return jsonify(body.to_dict()), status

    @app.get("/")
    def index():
        return app.response_class(GREETING, status=200, mimetype="text/plain")

    @app.get(BOOKS_PATH)
    def get_all_books():
        try:
            books = service.get_all_books()
        except Exception as exc:
            return reply(500, response.error("Failed to fetch books", exc))
        return reply(200, response.success("Books retrieved successfully", books))

    @app.get(BOOKS_PATH + "/<book_id>")
    def get_book_by_id(book_id: str):
        try:
            book = service.get_book_by_id(book_id)
        except Exception as exc:
            return reply(404, response.error("Book not found", exc))
        return reply(200, response.success("Book retrieved successfully", book))

    @app.post(BOOKS_PATH)
    def create_book():
        try:
            book = _bind_book()
        except ValueError as exc:
            return reply(400, response.error("Invalid input", exc))
        try:
            created = service.create_book(book)
        except Exception as exc:
            return reply(500, response.error("Failed to create book", exc))
        return reply(201, response.success("Book created successfully", created))

    @app.put(BOOKS_PATH + "/<book_id>")
    def update_book(book_id: str):
        try:
            book = _bind_book()
        except ValueError as exc:
            return reply(400, response.error("Invalid input", exc))
        try:
            updated = service.update_book(book_id, book)
        except Exception as exc:
            return reply(404, response.error("Failed to update book", exc))
        return reply(200, response.success("Book updated successfully", updated))

    @app.delete(BOOKS_PATH + "/<book_id>")
    def delete_book(book_id: str):
        try:
            service.delete_book(book_id)
        except Exception as exc:
            return reply(404, response.error("Failed to delete book", exc))
        return reply(200, response.success("Book deleted successfully", None))

    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the book API server."""
    parser = argparse.ArgumentParser(description="Serve the book catalogue over HTTP.")
    parser.add_argument("--host", default="0.0.0.0", help="interface to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Starting server on %s:%d...", args.host, args.port)
    app = create_app()
    try:
        app.run(host=args.host, port=args.port)
    except OSError as exc:
        logger.error("Failed to run server: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())