"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib
from typing import Any

from linkrelay.state.runtime import RuntimeDeps
from linkrelay.relay.probe import ProbeTracker
from linkrelay.config.websocket import WS_BUSY_MESSAGE, WS_CLOSE_BUSY_CODE, WS_CLOSE_BUSY_REASON

from .session import ConnectionSession
from .connection import ClientConnection
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def _reject_connection(connection: ClientConnection, ws: Any) -> None:
    await connection.send(WS_BUSY_MESSAGE)
    connection.mark_closed()
    with contextlib.suppress(Exception):
        await ws.close(code=WS_CLOSE_BUSY_CODE, reason=WS_CLOSE_BUSY_REASON)


def build_session(connection: ClientConnection, runtime_deps: RuntimeDeps) -> ConnectionSession:
    settings = runtime_deps.settings
    return ConnectionSession(
        connection,
        fetcher=runtime_deps.fetcher,
        probes=ProbeTracker(),
        probe_keyword=settings.probe.keyword,
        default_scheme=settings.fetch.default_scheme,
    )


async def handle_websocket_connection(ws: Any, runtime_deps: RuntimeDeps) -> None:
    connections = runtime_deps.connections
    connection = ClientConnection(ws)
    if not await connections.admit(connection):
        logger.warning(
            "Rejecting connection=%s: server at capacity (%s)",
            connection.id,
            connections.capacity,
        )
        await _reject_connection(connection, ws)
        return

    session = build_session(connection, runtime_deps)
    try:
        logger.info("Client connected connection=%s. Active: %s", connection.id, connections.active_count)
        await run_message_loop(ws, session)
    finally:
        await connections.release(connection)
        logger.info("WebSocket connection closed connection=%s. Active: %s", connection.id, connections.active_count)


__all__ = ["build_session", "handle_websocket_connection"]
