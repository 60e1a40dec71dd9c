"""Session endpoints.

Implements:
- POST /api/session/start
- GET  /api/session/status?sessionId=...
- POST /api/session/refresh

Sessions are not stored. Start and refresh mint a fresh id every time, and
status reports checkpoint 1 for whatever id the caller passes.
"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from ..errors import ClientInputError
from ..responses import json_response, ok
from ..tokens import session_id


SESSION_TTL_SECONDS = 600
FIRST_CHECKPOINT = 1


async def post_session_start(request: Request) -> Response:
    return json_response(
        ok(
            {
                "sessionId": session_id(),
                "nextCheckpoint": FIRST_CHECKPOINT,
                "expiresIn": SESSION_TTL_SECONDS,
            }
        )
    )


async def get_session_status(request: Request) -> Response:
    sid = request.query_params.get("sessionId")
    if not sid:
        raise ClientInputError("sessionId is required")

    return json_response(
        ok(
            {
                "sessionId": sid,
                "checkpoint": FIRST_CHECKPOINT,
                "completed": False,
            }
        )
    )


async def post_session_refresh(request: Request) -> Response:
    return json_response(ok({"sessionId": session_id(), "expiresIn": SESSION_TTL_SECONDS}))
