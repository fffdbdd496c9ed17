"""optres: Option and Result container types with combinators."""

from .errors import NotAnOptionError, NotAResultError, OptresError, UnwrapError
from .option import NOTHING, Nothing, Option, OptionKind, Some
from .result import Err, Ok, Result, ResultKind
from .predicates import is_err, is_none, is_ok, is_option, is_result, is_some
from .serialization import dumps, from_json, loads, to_json, try_loads
from .config import Settings, get_settings

__all__ = [
    # Result
    "Ok", "Err", "Result", "ResultKind",
    # Option
    "Some", "Nothing", "NOTHING", "Option", "OptionKind",
    # Predicates
    "is_result", "is_ok", "is_err", "is_option", "is_some", "is_none",
    # Errors
    "OptresError", "UnwrapError", "NotAResultError", "NotAnOptionError",
    # Serialization
    "to_json", "from_json", "dumps", "loads", "try_loads",
    # Config
    "Settings", "get_settings",
]
