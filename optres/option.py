"""Option type: a value that may be absent.

  - Some(value), a value is present
  - Nothing(), no value (``None`` is taken by Python itself)

``NOTHING`` is the shared absent instance; any ``Nothing()`` compares equal
to it. ``Result.ok()`` and ``Result.err()`` project into this type, and
``ok_or`` goes back the other way.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from .errors import UnwrapError

if TYPE_CHECKING:
    from .result import Err, Ok

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class OptionKind(Enum):
    SOME = "some"
    NONE = "none"


@dataclass(frozen=True)
class Some(Generic[T]):
    """A present value."""

    value: T

    @property
    def kind(self) -> OptionKind:
        return OptionKind.SOME

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return self.value

    def expect(self, msg: str) -> T:
        return self.value

    def match(self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        return some(self.value)

    def map(self, fn: Callable[[T], U]) -> Some[U]:
        return Some(fn(self.value))

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.value)

    def ok_or(self, error: E) -> Ok[T, E]:
        from .result import Ok

        return Ok(self.value)


@dataclass(frozen=True)
class Nothing(Generic[T]):
    """The absent value."""

    @property
    def kind(self) -> OptionKind:
        return OptionKind.NONE

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise UnwrapError("called unwrap on a Nothing value")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return fn()

    def expect(self, msg: str) -> NoReturn:
        raise UnwrapError(msg)

    def match(self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:
        return none()

    def map(self, fn: Callable[[T], U]) -> Nothing[U]:
        return NOTHING

    def and_then(self, fn: Callable[[T], Option[U]]) -> Nothing[U]:
        return NOTHING

    def ok_or(self, error: E) -> Err[T, E]:
        from .result import Err

        return Err(error)


NOTHING: Nothing[Any] = Nothing()

type Option[T] = Some[T] | Nothing[T]
