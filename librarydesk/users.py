"""User records, an in-memory user store and console formatting helpers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

EMPTY_LIST_MESSAGE = "Danh sách người dùng trống!"


@dataclass
class User:
    """A user of the system."""

    id: int
    name: str
    email: str
    age: int


class UserService:
    """Keeps users in memory, keyed by their id."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}

    def add(self, user: User) -> None:
        """Store a user, replacing any existing user with the same id."""
        self._users[user.id] = user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with this id, or None when there is none."""
        return self._users.get(user_id)

    def get_all(self) -> list[User]:
        """Return every stored user."""
        return list(self._users.values())

    def update(self, user: User) -> None:
        """Replace a stored user; users that are not stored are ignored."""
        if user.id in self._users:
            self._users[user.id] = user

    def delete(self, user_id: int) -> None:
        """Remove the user with this id if it is stored."""
        self._users.pop(user_id, None)


def format_user(user: User) -> str:
    """Render one user as a single line of text."""
    return f"ID: {user.id}, Tên: {user.name}, Email: {user.email}, Tuổi: {user.age}"


def print_user(user: User, file: Optional[TextIO] = None) -> None:
    """Write one user's details to ``file`` (standard output by default)."""
    print(format_user(user), file=file if file is not None else sys.stdout)


def print_users(users: Iterable[User], file: Optional[TextIO] = None) -> None:
    """Write every user's details, or a notice when there are none."""
    out = file if file is not None else sys.stdout
    users = list(users)
    if not users:
        print(EMPTY_LIST_MESSAGE, file=out)
        return
    for user in users:
        print_user(user, file=out)