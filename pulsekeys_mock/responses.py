"""Response envelope helpers.

Success bodies start with ``ok: true`` and merge the payload keys into the
top-level object. Error bodies are ``{"ok": false, "error": <message>}``.

All JSON responses are pretty-printed and carry a permissive
Access-Control-Allow-Origin header so browser UIs can call the mock directly.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from starlette.responses import JSONResponse, Response


JsonObject = dict[str, Any]

ALLOW_ORIGIN = "*"
ALLOW_METHODS = "GET,POST,OPTIONS"
ALLOW_HEADERS = "Content-Type"


class PrettyJSONResponse(JSONResponse):
    """JSONResponse rendered with a two-space indent."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
        ).encode("utf-8")


def ok(payload: Mapping[str, Any] | None = None) -> JsonObject:
    """Build a successful response body."""

    out: JsonObject = {"ok": True}
    if payload:
        out.update(dict(payload))
    return out


def fail(message: str) -> JsonObject:
    """Build an error response body."""

    return {"ok": False, "error": message}


def json_response(payload: Mapping[str, Any], *, status_code: int = 200) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        dict(payload),
        status_code=status_code,
        headers={"Access-Control-Allow-Origin": ALLOW_ORIGIN},
    )


def preflight_response() -> Response:
    """Empty 204 answering any CORS preflight."""

    return Response(
        status_code=204,
        headers={
            "Access-Control-Allow-Origin": ALLOW_ORIGIN,
            "Access-Control-Allow-Methods": ALLOW_METHODS,
            "Access-Control-Allow-Headers": ALLOW_HEADERS,
        },
    )
