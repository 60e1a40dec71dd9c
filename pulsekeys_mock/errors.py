"""Error catalog for the mock server.

Only three kinds exist. Each failure is terminal for its own request and
never affects the next one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .responses import fail


@dataclass(frozen=True, slots=True)
class ErrorKind:
    """A stable error kind: HTTP status plus the message sent when none is given."""

    name: str
    status_code: int
    default_message: str

    def as_error(self, *, message: str | None = None) -> dict[str, Any]:
        return fail(message if message is not None else self.default_message)


CLIENT_INPUT = ErrorKind(
    name="ClientInputError",
    status_code=400,
    default_message="Invalid request",
)

ROUTE_NOT_FOUND = ErrorKind(
    name="RouteNotFound",
    status_code=404,
    default_message="Not found",
)

# Detail is logged server-side only.
HANDLER_FAULT = ErrorKind(
    name="HandlerFault",
    status_code=500,
    default_message="Server error",
)


class ClientInputError(Exception):
    """Raised by handlers when a required field or the body itself is missing."""

    kind = CLIENT_INPUT

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.kind.default_message
        super().__init__(self.message)

    def as_error(self) -> dict[str, Any]:
        return self.kind.as_error(message=self.message)


def error_from_exception(exc: Exception) -> tuple[int, dict[str, Any]]:
    """Map any exception to a (status, body) pair.

    Client input errors keep their message; everything else is a handler fault
    with a generic message.
    """

    if isinstance(exc, ClientInputError):
        return exc.kind.status_code, exc.as_error()
    return HANDLER_FAULT.status_code, HANDLER_FAULT.as_error()
