from __future__ import annotations

import pytest

from linkrelay.handlers.connections import ConnectionManager
from linkrelay.handlers.websocket.connection import ClientConnection

from .fakes import FakeWebSocket


@pytest.mark.asyncio
async def test_connection_manager_enforces_capacity() -> None:
    manager = ConnectionManager(max_connections=1)
    first = ClientConnection(FakeWebSocket(), connection_id="first")
    second = ClientConnection(FakeWebSocket(), connection_id="second")

    assert await manager.admit(first) is True
    assert await manager.admit(second) is False
    assert manager.active_count == 1
    assert manager.lookup("first") is first
    assert manager.lookup("second") is None

    await manager.release(first)
    assert manager.active_count == 0
    assert await manager.admit(second) is True
    assert manager.lookup("second") is second


@pytest.mark.asyncio
async def test_readmitting_same_connection_does_not_consume_capacity() -> None:
    manager = ConnectionManager(max_connections=1)
    conn = ClientConnection(FakeWebSocket(), connection_id="only")

    assert await manager.admit(conn) is True
    assert await manager.admit(conn) is True
    assert manager.active_count == 1
    assert manager.capacity == 1


@pytest.mark.asyncio
async def test_release_of_unknown_connection_is_noop() -> None:
    manager = ConnectionManager(max_connections=2)

    await manager.release(ClientConnection(FakeWebSocket(), connection_id="ghost"))

    assert manager.active_count == 0
