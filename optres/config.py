"""Library settings read from the environment (and a ``.env`` file, if any).

Variables already set in the process take precedence over the file, and the
file is only read, never loaded into ``os.environ``. Recognised variables:

  OPTRES_JSON_INDENT  default indent for ``serialization.dumps``;
                      a non-negative integer, or ``none`` for compact output.
"""

from __future__ import annotations

import functools
import logging
import os
from dataclasses import dataclass

from dotenv import dotenv_values, find_dotenv

from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

JSON_INDENT_VAR = "OPTRES_JSON_INDENT"


@dataclass(frozen=True)
class Settings:
    json_indent: int | None = 2

    @classmethod
    def from_env(cls) -> Result[Settings, ValueError]:
        """Build settings from the environment.

        Returns ``Err`` for a malformed value instead of raising, so the
        caller decides whether to fall back or abort.
        """
        raw = _read_var(JSON_INDENT_VAR)
        if raw is None or not raw.strip():
            return Ok(cls())
        return _parse_indent(raw.strip()).map(lambda indent: cls(json_indent=indent))


def _read_var(name: str) -> str | None:
    """Look up ``name`` in the process environment, then in a ``.env`` file
    found from the working directory. Nothing is written to ``os.environ``.
    """
    if name in os.environ:
        return os.environ[name]
    path = find_dotenv(usecwd=True)
    if not path:
        return None
    return dotenv_values(path).get(name)


def _parse_indent(raw: str) -> Result[int | None, ValueError]:
    if raw.lower() == "none":
        return Ok(None)
    try:
        indent = int(raw)
    except ValueError:
        return Err(ValueError(f"{JSON_INDENT_VAR} must be an integer or 'none', got {raw!r}"))
    if indent < 0:
        return Err(ValueError(f"{JSON_INDENT_VAR} must be >= 0, got {indent}"))
    return Ok(indent)


@functools.cache
def get_settings() -> Settings:
    """Process-wide settings, resolved once. Invalid values fall back to defaults."""
    match Settings.from_env():
        case Ok(settings):
            pass
        case Err(e):
            logger.warning("Ignoring invalid environment configuration: %s", e)
            settings = Settings()
    logger.debug("Resolved settings: %r", settings)
    return settings
