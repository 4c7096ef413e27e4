# librarydesk

librarydesk has two parts:

- **A user registry** (`librarydesk.users`). It keeps users in memory and can add, look up, update and delete them. It can also print them as readable lines.
- **A book API** (`librarydesk.api`). This is a small JSON HTTP service built on Flask. It keeps a catalogue of books in memory and offers create, read, update and delete operations.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## The book API

To start the server, run:

```
librarydesk-api
```

By default the server listens on `0.0.0.0:8080`. You can change this with `--host` and `--port`:

```
librarydesk-api --host 127.0.0.1 --port 5000
```

The server starts with two sample books in the catalogue. Each sample book has a freshly generated id.

| Method | Path                 | Action                    |
|--------|----------------------|---------------------------|
| GET    | `/`                  | Health check (plain text) |
| GET    | `/api/v1/books`      | List all books            |
| GET    | `/api/v1/books/<id>` | Fetch one book            |
| POST   | `/api/v1/books`      | Create a book             |
| PUT    | `/api/v1/books/<id>` | Replace a book            |
| DELETE | `/api/v1/books/<id>` | Delete a book             |

### Request bodies

POST and PUT requests take a JSON object with these fields:

- `title`, `author`, `isbn` and `price` are required. An empty string, or a price of `0`, counts as missing.
- `description` is optional.

Each field must have the right type: the four text fields are strings and `price` is a number. A body that is not valid JSON, or that breaks these rules, gets status 400.

How a request sets the book's id and timestamps:

- **On create**, the book keeps the `id` you send. If you send none, it gets a new UUID. `created_at` and `updated_at` are both set to the current time.
- **On update**, the id comes from the path, not the body. `created_at` stays as it was, and `updated_at` is set to the current time.

### Responses

Every reply uses the same envelope:

```json
{"success": true, "message": "Book retrieved successfully", "data": {"id": "...", "title": "..."}}
```

Books appear with the fields:

- `id`
- `title`
- `author`
- `isbn`
- `description`
- `price`
- `created_at`
- `updated_at`

The two timestamps are ISO 8601 strings.

When a request fails, `success` is `false` and an `error` field carries the reason, for example `book with ID 42 not found`. These statuses are used:

- 400 for invalid input.
- 404 when the id is unknown on fetch, update or delete.
- 500 when listing or creating fails inside the service.

### Using it from Python

You can build the application in code, for example to embed it or to test it:

```python
from librarydesk.api import create_app
from librarydesk.model import Book
from librarydesk.repository import InMemoryBookRepository
from librarydesk.service import BookService

repository = InMemoryBookRepository(books=[])   # start empty instead of with samples
app = create_app(BookService(repository))
client = app.test_client()
print(client.get("/api/v1/books").get_json())
```

The building blocks can also be used on their own:

- **`InMemoryBookRepository`** is thread-safe. It has these methods:
  - `find_all`
  - `find_by_id`
  - `create`
  - `update`
  - `delete`

  Each method returns copies of the stored books. `find_by_id`, `update` and `delete` raise `BookNotFoundError` (a `LookupError`) when the id is unknown. `sample_books()` returns the two books the repository starts with by default.
- **`BookService`** passes calls through to a repository. It has these methods:
  - `get_all_books`
  - `get_book_by_id`
  - `create_book`
  - `update_book`
  - `delete_book`
- **`Book.from_dict`** checks decoded JSON and raises `BookValidationError` (a `ValueError`) when the data is not valid. `Book.to_dict` produces the JSON form.
- **`librarydesk.response`** builds the reply envelope. It provides `success(message, data)`, `error(message, err)` and `ApiResponse.to_dict()`.

## The user registry

To run a short demonstration, enter:

```
librarydesk-users
```

The demonstration adds three users and looks one up by id. It then deletes one, updates another, and prints the list after each step. Its messages are in Vietnamese.

You can also use the registry directly:

```python
from librarydesk.users import User, UserService, format_user, print_users

service = UserService()
service.add(User(1, "Ada", "ada@example.com", 36))
service.update(User(1, "Ada L.", "ada@example.com", 37))
print(format_user(service.get_by_id(1)))
print_users(service.get_all())
```

The registry behaves as follows:

- `get_by_id` returns `None` when no user has the given id.
- `update` does nothing when the user is not already registered.
- `delete` ignores ids that are not registered.
- `print_user` and `print_users` write to standard output, or to the `file` you pass.
- `print_users` prints `Danh sách người dùng trống!` when the list is empty.

## What it does not do

All data lives in memory, and nothing is saved. When the server stops, the book catalogue is lost, including any books added through the API. The user registry is likewise lost when the program ends. The API has no authentication and no search or paging. The user registry has no command line beyond the fixed demonstration.