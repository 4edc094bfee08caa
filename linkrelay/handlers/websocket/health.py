"""Plain HTTP health check served on the WebSocket port."""

from __future__ import annotations

from http import HTTPStatus
from collections.abc import Callable

from websockets.http11 import Request, Response
from websockets.asyncio.server import ServerConnection

ProcessRequestFn = Callable[[ServerConnection, Request], Response | None]


def build_health_check(health_path: str) -> ProcessRequestFn:
    def process_request(connection: ServerConnection, request: Request) -> Response | None:
        if request.path == health_path:
            return connection.respond(HTTPStatus.OK, "OK\n")
        return None

    return process_request


__all__ = ["ProcessRequestFn", "build_health_check"]
