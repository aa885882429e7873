"""Small producers of containers used by the CLI, the docs and the tests."""

from __future__ import annotations

from dataclasses import dataclass

from .option import Option, none, some
from .result import Result, err, ok

ERROR_MESSAGE_DIVIDE: str = "Division by zero."


def divide(a: float, b: float) -> Result[float, str]:
    if a == 0 or b == 0:
        return err(ERROR_MESSAGE_DIVIDE)
    return ok(a / b)


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


USERS: tuple[User, ...] = (
    User(id=1, name="Alice"),
    User(id=2, name="Bob"),
)


def find_user_by_id(user_id: int, users: tuple[User, ...] = USERS) -> Option[User]:
    user: User
    for user in users:
        if user.id == user_id:
            return some(user)
    return none()
