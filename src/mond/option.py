from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

from .errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")

NOTHING_UNWRAP_MESSAGE: str = "called unwrap on an absent value"


@dataclass(frozen=True, slots=True)
class Some(Generic[T]):
    """A present value."""

    __match_args__ = ("value",)

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def match(self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        return some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent value. ``None`` is taken by Python, hence the name."""

    __match_args__ = ()

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError(NOTHING_UNWRAP_MESSAGE)

    def unwrap_or(self, default: U) -> U:
        return default

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message)

    def match(self, *, some: Callable[[NoReturn], U], none: Callable[[], U]) -> U:
        return none()

    def __repr__(self) -> str:
        return "Nothing()"


Option = Union[Some[T], Nothing]


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[NoReturn]:
    return Nothing()
