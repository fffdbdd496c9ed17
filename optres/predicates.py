"""Runtime checks for values of unknown origin.

Code that only ever builds values through ``Ok``/``Err``/``Some``/``Nothing``
does not need these. They exist for trust boundaries (decoded payloads,
``Any``-typed callbacks) where a value must be validated before it is
treated as a Result or Option.
"""

from __future__ import annotations

from typing import Any, TypeGuard

from .errors import NotAnOptionError, NotAResultError
from .option import Nothing, Some
from .result import Err, Ok


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


def is_result(value: object) -> bool:
    """True iff ``value`` is an ``Ok`` or ``Err``.

    Duck-typed lookalikes (anything with ``is_ok`` methods or a ``kind``
    attribute) are rejected.
    """
    return isinstance(value, (Ok, Err))


def _require_result(value: object) -> None:
    if not is_result(value):
        raise NotAResultError(f"value is not a Result: {value!r}")


def is_ok(value: Any) -> TypeGuard[Ok[Any, Any]]:
    """Narrow ``value`` to ``Ok``. Raises NotAResultError for foreign values."""
    _require_result(value)
    return value.is_ok()


def is_err(value: Any) -> TypeGuard[Err[Any, Any]]:
    """Narrow ``value`` to ``Err``. Raises NotAResultError for foreign values."""
    _require_result(value)
    return value.is_err()


# ---------------------------------------------------------------------------
# Option
# ---------------------------------------------------------------------------


def is_option(value: object) -> bool:
    return isinstance(value, (Some, Nothing))


def _require_option(value: object) -> None:
    if not is_option(value):
        raise NotAnOptionError(f"value is not an Option: {value!r}")


def is_some(value: Any) -> TypeGuard[Some[Any]]:
    _require_option(value)
    return value.is_some()


def is_none(value: Any) -> TypeGuard[Nothing[Any]]:
    _require_option(value)
    return value.is_none()
