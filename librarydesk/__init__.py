"""In-memory user registry and a Flask JSON API for a book catalogue."""

__version__ = "0.1.0"
__all__ = ["__version__"]