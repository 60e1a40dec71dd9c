"""Static route table for the mock.

Keys are ``"<METHOD> <path>"`` strings; the dispatcher builds the same key
from the incoming request (query string stripped) and looks it up here.
Anything not listed is a 404, whatever the method.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Awaitable, Callable, Mapping

from starlette.requests import Request
from starlette.responses import Response

from .handlers.checkpoint import get_checkpoint_next, post_checkpoint_complete, post_checkpoint_verify
from .handlers.keys import get_key, post_key_revoke, post_key_validate
from .handlers.session import get_session_status, post_session_refresh, post_session_start
from .handlers.system import get_config, get_health


Handler = Callable[[Request], Awaitable[Response]]
RouteTable = Mapping[str, Handler]


def route_key(method: str, path: str) -> str:
    return f"{method.upper()} {path}"


ROUTES: RouteTable = MappingProxyType(
    {
        route_key("GET", "/api/health"): get_health,
        route_key("GET", "/api/config"): get_config,
        route_key("POST", "/api/session/start"): post_session_start,
        route_key("GET", "/api/session/status"): get_session_status,
        route_key("POST", "/api/session/refresh"): post_session_refresh,
        route_key("GET", "/api/checkpoint/next"): get_checkpoint_next,
        route_key("POST", "/api/checkpoint/complete"): post_checkpoint_complete,
        route_key("POST", "/api/checkpoint/verify"): post_checkpoint_verify,
        route_key("GET", "/api/key"): get_key,
        route_key("POST", "/api/key/validate"): post_key_validate,
        route_key("POST", "/api/key/revoke"): post_key_revoke,
    }
)
