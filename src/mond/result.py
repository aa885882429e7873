from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from typing_extensions import TypeIs

from .errors import UnwrapError
from .option import Option, none, some

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success branch of a :data:`Result`."""

    __match_args__ = ("value",)

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or_else(self, fallback: Callable[[Any], T]) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"called unwrap_err on an Ok value: {self.value!r}", self.value)

    def expect_err(self, message: str) -> NoReturn:
        raise UnwrapError(message, self.value)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def match(self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:
        return ok(self.value)

    def unpack(self) -> tuple[T, None]:
        return self.value, None

    def ok(self) -> Option[T]:
        return some(self.value)

    def err(self) -> Option[NoReturn]:
        return none()

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure branch of a :data:`Result`.

    ``and_then`` and ``map`` hand back this very instance, so an error passes
    through a chain of transformations untouched.
    """

    __match_args__ = ("error",)

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(str(self.error), self.error)

    def unwrap_or(self, default: U) -> U:
        return default

    def expect(self, message: str) -> NoReturn:
        raise UnwrapError(message, self.error)

    def unwrap_or_else(self, fallback: Callable[[E], U]) -> U:
        return fallback(self.error)

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, message: str) -> E:
        return self.error

    def and_then(self, fn: Callable[[Any], Result[U, E]]) -> Err[E]:
        return self

    def map(self, fn: Callable[[Any], U]) -> Err[E]:
        return self

    def match(self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def unpack(self) -> tuple[None, E]:
        return None, self.error

    def ok(self) -> Option[NoReturn]:
        return none()

    def err(self) -> Option[E]:
        return some(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def ok(value: T) -> Result[T, NoReturn]:
    return Ok(value)


def err(error: E) -> Result[NoReturn, E]:
    return Err(error)


# Function forms of the accessors, for callers that prefer ``unwrap(result)``
# over ``result.unwrap()``.


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()


def unwrap(result: Result[T, E]) -> T:
    return result.unwrap()


def unwrap_or(result: Result[T, E], default: T) -> T:
    return result.unwrap_or(default)


def unwrap_or_else(result: Result[T, E], fallback: Callable[[E], T]) -> T:
    return result.unwrap_or_else(fallback)


def expect(result: Result[T, E], message: str) -> T:
    return result.expect(message)


def and_then(result: Result[T, E], fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
    return result.and_then(fn)
