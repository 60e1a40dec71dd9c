"""HTTP server and dispatcher for the mock.

Routing is not delegated to FastAPI path matching: a single catch-all route
accepts every method and path, builds the ``"<METHOD> <path>"`` key and looks
it up in the static route table. This keeps unknown method+path pairs at 404
(FastAPI would answer 405 for a known path with the wrong method).

Status policy:
  - OPTIONS (any path): 204 preflight, route table bypassed
  - unknown key: 404 "Not found"
  - ClientInputError from a handler: 400 with its message
  - any other exception: 500 "Server error", detail only in the log
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from starlette.types import Receive, Scope, Send

from . import __version__
from .errors import HANDLER_FAULT, ROUTE_NOT_FOUND, ClientInputError, error_from_exception
from .responses import json_response, preflight_response
from .routes import ROUTES, RouteTable, route_key


log = logging.getLogger("pulsekeys_mock.server")


def raw_request_path(request: Request) -> str:
    """Path as sent on the wire: not percent-decoded, query stripped."""

    raw = request.scope.get("raw_path")
    if not raw:
        return request.url.path
    return raw.decode("latin-1").split("?", 1)[0]


async def dispatch(request: Request, routes: RouteTable) -> Response:
    if request.method == "OPTIONS":
        return preflight_response()

    key = route_key(request.method, raw_request_path(request))
    handler = routes.get(key)
    if handler is None:
        log.debug("%s: %s", ROUTE_NOT_FOUND.name, key)
        return json_response(ROUTE_NOT_FOUND.as_error(), status_code=ROUTE_NOT_FOUND.status_code)

    try:
        return await handler(request)
    except ClientInputError as exc:
        log.info("%s: %s: %s", exc.kind.name, key, exc.message)
        status_code, payload = error_from_exception(exc)
        return json_response(payload, status_code=status_code)
    except Exception as exc:  # noqa: BLE001
        log.exception("%s: %s", HANDLER_FAULT.name, key)
        status_code, payload = error_from_exception(exc)
        return json_response(payload, status_code=status_code)


class Dispatcher:
    """ASGI endpoint wrapping :func:`dispatch`.

    Mounted as a class instance so Starlette matches it for every method;
    plain function endpoints default to GET only.
    """

    def __init__(self, routes: RouteTable) -> None:
        self.routes = routes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = await dispatch(request, self.routes)
        await response(scope, receive, send)


def create_app(routes: RouteTable | None = None) -> FastAPI:
    table: RouteTable = ROUTES if routes is None else routes

    app = FastAPI(
        title="PulseKeys Mock API",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        """Ensure unexpected exceptions never escape as framework 500 pages."""

        try:
            return await call_next(request)
        except Exception as exc:  # noqa: BLE001
            log.exception("unhandled error on %s %s", request.method, request.url.path)
            status_code, payload = error_from_exception(exc)
            return json_response(payload, status_code=status_code)

    app.add_route("/{full_path:path}", Dispatcher(table), include_in_schema=False)

    return app


app = create_app()
