"""Lenient JSON request body parsing.

Policy:
  - empty body reads as ``{}``
  - undecodable or malformed JSON reads as ``None`` (absent)
  - NaN, Infinity and float literals that overflow are malformed
  - the Content-Type header is not checked
"""

from __future__ import annotations

import json
import math
from typing import Any

from starlette.requests import Request

from .errors import ClientInputError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"JSON number out of range: {text}")
    return value


def parse_json_body(raw: bytes) -> Any | None:
    if not raw:
        return {}
    try:
        return json.loads(
            raw.decode("utf-8"),
            parse_constant=_reject_constant,
            parse_float=_finite_float,
        )
    except (UnicodeDecodeError, ValueError):
        return None


async def read_json_body(request: Request) -> Any | None:
    """Read the whole body and parse it; never raises on bad input."""

    return parse_json_body(await request.body())


def is_blank(value: Any) -> bool:
    """True for null, false, 0 and "".

    Empty arrays and objects are not blank.
    """

    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and value == 0:
        return True
    return value == ""


def require_field(body: Any | None, name: str) -> Any:
    """Return ``body[name]``, raising ClientInputError when it is missing.

    A blank value (see :func:`is_blank`) counts as missing, as does any body
    that is not a JSON object.
    """

    value = body.get(name) if isinstance(body, dict) else None
    if is_blank(value):
        raise ClientInputError(f"{name} is required")
    return value
