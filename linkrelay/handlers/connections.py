"""Admission control: a bounded registry of live client connections."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from linkrelay.handlers.websocket.connection import ClientConnection


class ConnectionManager:
    """Admit at most ``max_connections`` clients, keyed by connection id."""

    def __init__(self, *, max_connections: int) -> None:
        self._max = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._active: dict[str, ClientConnection] = {}

    @property
    def capacity(self) -> int:
        return self._max

    @property
    def active_count(self) -> int:
        return len(self._active)

    async def admit(self, connection: ClientConnection) -> bool:
        async with self._lock:
            if connection.id in self._active:
                return True
            if len(self._active) >= self._max:
                return False
            self._active[connection.id] = connection
            return True

    async def release(self, connection: ClientConnection) -> None:
        async with self._lock:
            self._active.pop(connection.id, None)

    def lookup(self, connection_id: str) -> ClientConnection | None:
        return self._active.get(connection_id)


__all__ = ["ConnectionManager"]
