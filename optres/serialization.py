"""JSON serialization for Result and Option values.

Every value serializes to a dict with a "type" discriminator field:

    Ok(v)      -> {"type": "ok", "value": v}
    Err(e)     -> {"type": "err", "error": e}
    Some(v)    -> {"type": "some", "value": v}
    Nothing()  -> {"type": "none"}

Nested Result/Option payloads are encoded recursively. A plain dict payload
that has its own "type" key is wrapped as {"type": "dict", "value": {...}}
so it cannot be mistaken for a variant. Tuples come back as lists, so
round-trip equality holds for JSON-native payloads:
from_json(to_json(x)) == x.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Literal

from .config import get_settings
from .option import NOTHING, Nothing, Option, Some
from .predicates import is_option, is_result
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)

_PAYLOAD_KEYS = {"ok": "value", "err": "error", "some": "value"}
_DISCRIMINATORS = frozenset({"ok", "err", "some", "none"})
_DICT_TAG = "dict"


class _Default(Enum):
    INDENT = "configured"


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


def _encode_payload(p: Any) -> Any:
    if is_result(p) or is_option(p):
        return to_json(p)
    elif isinstance(p, (list, tuple)):
        return [_encode_payload(x) for x in p]
    elif isinstance(p, dict):
        encoded = {k: _encode_payload(v) for k, v in p.items()}
        if "type" in p:
            return {"type": _DICT_TAG, "value": encoded}
        return encoded
    return p


def _decode_payload(p: Any) -> Any:
    if isinstance(p, dict):
        if "type" not in p:
            return {k: _decode_payload(v) for k, v in p.items()}
        t = p["type"]
        if isinstance(t, str) and t in _DISCRIMINATORS:
            return from_json(p)
        if t == _DICT_TAG:
            inner = p.get("value")
            if not isinstance(inner, dict):
                logger.debug("Rejecting dict wrapper without an object value: %r", p)
                raise ValueError("'dict' wrapper is missing its object 'value' field")
            return {k: _decode_payload(v) for k, v in inner.items()}
        logger.debug("Rejecting nested payload with discriminator %r", t)
        raise ValueError(f"Unknown nested payload type: {t!r}")
    elif isinstance(p, list):
        return [_decode_payload(x) for x in p]
    return p


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def to_json(x: Result[Any, Any] | Option[Any]) -> dict[str, Any]:
    if isinstance(x, Ok):
        return {"type": "ok", "value": _encode_payload(x.value)}
    elif isinstance(x, Err):
        return {"type": "err", "error": _encode_payload(x.error)}
    elif isinstance(x, Some):
        return {"type": "some", "value": _encode_payload(x.value)}
    elif isinstance(x, Nothing):
        return {"type": "none"}
    raise TypeError(f"Not a Result or Option: {type(x)}")


def from_json(d: Any) -> Result[Any, Any] | Option[Any]:
    if not isinstance(d, dict):
        logger.debug("Rejecting non-object payload: %r", d)
        raise ValueError(f"Expected a JSON object, got {type(d).__name__}")
    t = d.get("type")
    if t == "none":
        return NOTHING
    key = _PAYLOAD_KEYS.get(t) if isinstance(t, str) else None
    if key is None:
        logger.debug("Rejecting payload with discriminator %r", t)
        raise ValueError(f"Unknown Result/Option type: {t!r}")
    if key not in d:
        logger.debug("Rejecting %r payload without %r field", t, key)
        raise ValueError(f"{t!r} value is missing its {key!r} field")
    payload = _decode_payload(d[key])
    if t == "ok":
        return Ok(payload)
    elif t == "err":
        return Err(payload)
    return Some(payload)


# ---------------------------------------------------------------------------
# Convenience: dump / load as JSON strings
# ---------------------------------------------------------------------------


def dumps(
    x: Result[Any, Any] | Option[Any],
    indent: int | None | Literal[_Default.INDENT] = _Default.INDENT,
) -> str:
    """Serialize to a JSON string.

    Without ``indent`` the configured default applies; ``indent=None`` gives
    compact output.
    """
    if indent is _Default.INDENT:
        indent = get_settings().json_indent
    return json.dumps(to_json(x), indent=indent)


def loads(s: str) -> Result[Any, Any] | Option[Any]:
    return from_json(json.loads(s))


def try_loads(s: str) -> Result[Result[Any, Any] | Option[Any], ValueError]:
    """Like ``loads``, but malformed input comes back as ``Err`` instead of raising."""
    try:
        return Ok(loads(s))
    except ValueError as e:
        return Err(e)
