"""Health and static configuration endpoints."""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import Response

from ..responses import json_response, ok
from ..tokens import now_utc_iso


CHECKPOINTS = 3
COOLDOWN_SECONDS = 900
PROVIDERS = ("shortlink", "ad", "captcha")


async def get_health(request: Request) -> Response:
    return json_response(ok({"status": "healthy", "time": now_utc_iso()}))


async def get_config(request: Request) -> Response:
    return json_response(
        ok(
            {
                "checkpoints": CHECKPOINTS,
                "cooldownSeconds": COOLDOWN_SECONDS,
                "providers": list(PROVIDERS),
            }
        )
    )
