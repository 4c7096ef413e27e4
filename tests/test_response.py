from librarydesk.model import Book
from librarydesk.response import ApiResponse, error, success


def test_success_with_data():
    resp = success("Books retrieved successfully", [1, 2])
    assert resp.to_dict() == {
        "success": True,
        "message": "Books retrieved successfully",
        "data": [1, 2],
    }


def test_success_without_data_omits_key():
    assert success("Book deleted successfully", None).to_dict() == {
        "success": True,
        "message": "Book deleted successfully",
    }


def test_empty_list_data_is_kept():
    assert success("ok", []).to_dict()["data"] == []


def test_error_uses_exception_text():
    resp = error("Book not found", ValueError("boom"))
    assert resp == ApiResponse(success=False, message="Book not found", error="boom")
    assert resp.to_dict() == {"success": False, "message": "Book not found", "error": "boom"}


def test_book_data_is_serialised():
    book = Book(id="x", title="T", author="A", isbn="I", price=2.5)
    assert success("ok", book).to_dict()["data"] == book.to_dict()


def test_book_list_is_serialised():
    books = [Book(id="a", title="T"), Book(id="b", title="U")]
    assert success("ok", books).to_dict()["data"] == [b.to_dict() for b in books]