"""Exceptions raised when Option/Result values are misused.

These signal programmer error (the wrong variant was assumed, or a foreign
value was passed where a Result/Option was expected). Ordinary failures
travel as ``Err`` payloads and never raise.
"""


class OptresError(Exception):
    """Base class for all optres errors."""


class UnwrapError(OptresError):
    """A payload was extracted from the variant that does not carry it."""


class NotAResultError(OptresError, TypeError):
    """A value that is not an ``Ok`` or ``Err`` reached a Result predicate."""


class NotAnOptionError(OptresError, TypeError):
    """A value that is not a ``Some`` or ``Nothing`` reached an Option predicate."""
