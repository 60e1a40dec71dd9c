"""Checkpoint endpoints.

Implements:
- GET  /api/checkpoint/next
- POST /api/checkpoint/complete  body: any non-blank JSON value, echoed as ``received``
- POST /api/checkpoint/verify    body: {"proofToken": ...}

The checkpoint counter never advances server-side and proof tokens are never
matched against what /next handed out.
"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from ..body import is_blank, read_json_body, require_field
from ..errors import ClientInputError
from ..responses import json_response, ok
from ..tokens import proof_token


PROVIDER = "shortlink"
NEXT_CHECKPOINT = 2
COMPLETION_TTL_SECONDS = 120


async def get_checkpoint_next(request: Request) -> Response:
    return json_response(
        ok(
            {
                "checkpoint": 1,
                "provider": PROVIDER,
                "proofToken": proof_token(),
            }
        )
    )


async def post_checkpoint_complete(request: Request) -> Response:
    body = await read_json_body(request)
    if is_blank(body):
        raise ClientInputError("Invalid JSON body")

    return json_response(
        ok(
            {
                "received": body,
                "nextCheckpoint": NEXT_CHECKPOINT,
                "nextUrl": f"/checkpoint/{NEXT_CHECKPOINT}",
                "expiresIn": COMPLETION_TTL_SECONDS,
            }
        )
    )


async def post_checkpoint_verify(request: Request) -> Response:
    body = await read_json_body(request)
    token = require_field(body, "proofToken")
    return json_response(ok({"verified": True, "proofToken": token}))
