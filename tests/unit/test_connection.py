from __future__ import annotations

import pytest

from linkrelay.state.connection import ConnectionState
from linkrelay.handlers.websocket.connection import ClientConnection

from .fakes import FakeWebSocket


def test_mark_closed_transitions_exactly_once() -> None:
    conn = ClientConnection(FakeWebSocket())
    assert conn.alive is True
    assert conn.state is ConnectionState.OPEN

    assert conn.mark_closed() is True
    assert conn.mark_closed() is False
    assert conn.alive is False
    assert conn.state is ConnectionState.CLOSED


@pytest.mark.asyncio
async def test_send_is_suppressed_after_close() -> None:
    ws = FakeWebSocket()
    conn = ClientConnection(ws)

    assert await conn.send("first") is True
    conn.mark_closed()
    assert await conn.send("second") is False
    assert await conn.ping("2026-10-18T12:00:00.000Z") is None
    assert ws.sent == ["first"]
    assert ws.pings == []


@pytest.mark.asyncio
async def test_send_reports_transport_closure() -> None:
    ws = FakeWebSocket()
    ws.closed = True
    conn = ClientConnection(ws)

    assert await conn.send("late") is False
