"""Client connection handle with an explicit open/closed state."""

from __future__ import annotations

import uuid
import logging
from typing import Any
from collections.abc import Awaitable

from websockets.exceptions import ConnectionClosed

from linkrelay.state.connection import ConnectionState

logger = logging.getLogger(__name__)


class ClientConnection:
    """Wrap one transport connection.

    Every component that writes to the client goes through ``send()``, which
    refuses once the connection is closed instead of writing to a dead socket.
    """

    def __init__(self, ws: Any, *, connection_id: str | None = None) -> None:
        self._ws = ws
        self._state = ConnectionState.OPEN
        self.id = connection_id or uuid.uuid4().hex[:12]

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def alive(self) -> bool:
        return self._state is ConnectionState.OPEN

    def mark_closed(self) -> bool:
        """Close the handle; True only for the call that performed the transition."""
        if self._state is ConnectionState.CLOSED:
            return False
        self._state = ConnectionState.CLOSED
        return True

    async def send(self, payload: str | bytes) -> bool:
        if not self.alive:
            logger.debug("send suppressed on closed connection=%s", self.id)
            return False
        try:
            await self._ws.send(payload)
        except ConnectionClosed:
            return False
        except Exception:
            logger.debug("WebSocket send failed connection=%s", self.id, exc_info=True)
            return False
        return True

    async def ping(self, payload: str) -> Awaitable[Any] | None:
        """Send a ping frame; the returned waiter resolves when its pong arrives."""
        if not self.alive:
            return None
        try:
            return await self._ws.ping(payload)
        except ConnectionClosed:
            return None
        except Exception:
            logger.warning("WebSocket ping failed connection=%s", self.id, exc_info=True)
            return None


__all__ = ["ClientConnection"]
