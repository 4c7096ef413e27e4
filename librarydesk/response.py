"""The standard envelope for API replies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def _plain(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    return value


@dataclass
class ApiResponse:
    """A reply carrying a success flag, a message and either data or an error."""

    success: bool
    message: str
    data: Any = None
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; data and error are left out when absent."""
        body: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            body["data"] = _plain(self.data)
        if self.error is not None:
            body["error"] = self.error
        return body


def success(message: str, data: Any = None) -> ApiResponse:
    """Build a successful reply."""
    return ApiResponse(success=True, message=message, data=data)


def error(message: str, err: BaseException) -> ApiResponse:
    """Build a failed reply whose error is the text of ``err``."""
    return ApiResponse(success=False, message=message, error=str(err))