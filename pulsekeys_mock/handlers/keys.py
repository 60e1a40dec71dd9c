"""Key endpoints.

Implements:
- GET  /api/key
- POST /api/key/validate  body: {"key": ...}
- POST /api/key/revoke    body: {"key": ...}

There is no key registry: validate and revoke succeed for any non-empty key.
"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from ..body import read_json_body, require_field
from ..responses import json_response, ok
from ..tokens import key_token


KEY_TTL_SECONDS = 900


async def get_key(request: Request) -> Response:
    return json_response(ok({"key": key_token(), "expiresIn": KEY_TTL_SECONDS}))


async def post_key_validate(request: Request) -> Response:
    key = require_field(await read_json_body(request), "key")
    return json_response(ok({"valid": True, "key": key}))


async def post_key_revoke(request: Request) -> Response:
    key = require_field(await read_json_body(request), "key")
    return json_response(ok({"revoked": True, "key": key}))
