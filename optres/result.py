"""Result type for operations that can fail.

A Result is exactly one of:
  - Ok(value), the computation succeeded with ``value``
  - Err(error), the computation failed with ``error``

Both variants expose the same combinators, so a chain like

    parse(raw).map(normalize).and_then(validate).unwrap_or(fallback)

never needs an explicit branch. Only ``unwrap``/``expect`` on an Err and
``unwrap_err``/``expect_err`` on an Ok raise (UnwrapError); everything else
is total.

The variants are frozen dataclasses, so they compare structurally and work
with ``match``:

    match result:
        case Ok(value): ...
        case Err(error): ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar

from .errors import UnwrapError
from .option import NOTHING, Nothing, Some

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultKind(Enum):
    OK = "ok"
    ERR = "err"


# ---------------------------------------------------------------------------
# Ok
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ok(Generic[T, E]):
    """The success variant."""

    value: T

    @property
    def kind(self) -> ResultKind:
        return ResultKind.OK

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def ok(self) -> Some[T]:
        return Some(self.value)

    def err(self) -> Nothing[E]:
        return NOTHING

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return self.value

    def expect(self, msg: str) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"called unwrap_err on an Ok value: {self.value!r}")

    def expect_err(self, msg: str) -> NoReturn:
        raise UnwrapError(f"{msg}: {self.value!r}")

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return ok(self.value)

    def map(self, fn: Callable[[T], U]) -> Ok[U, E]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], F]) -> Ok[T, F]:
        return Ok(self.value)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Ok[T, F]:
        return Ok(self.value)


# ---------------------------------------------------------------------------
# Err
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Err(Generic[T, E]):
    """The failure variant. Mirror image of Ok."""

    error: E

    @property
    def kind(self) -> ResultKind:
        return ResultKind.ERR

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def ok(self) -> Nothing[T]:
        return NOTHING

    def err(self) -> Some[E]:
        return Some(self.error)

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"called unwrap on an Err value: {self.error!r}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def expect(self, msg: str) -> NoReturn:
        raise UnwrapError(f"{msg}: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, msg: str) -> E:
        return self.error

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def map(self, fn: Callable[[T], U]) -> Err[U, E]:
        return Err(self.error)

    def map_err(self, fn: Callable[[E], F]) -> Err[T, F]:
        return Err(fn(self.error))

    # Narrower than Result[U, E]: a failure stays a failure.
    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Err[U, E]:
        return Err(self.error)

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)


type Result[T, E] = Ok[T, E] | Err[T, E]
