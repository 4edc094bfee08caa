from __future__ import annotations

import time
import asyncio

import pytest

from linkrelay.relay.probe import ProbeTracker
from linkrelay.relay.timestamps import format_timestamp
from linkrelay.handlers.websocket.connection import ClientConnection

from .fakes import FakeClock, FakeWebSocket


@pytest.mark.asyncio
async def test_probe_reports_simulated_delay() -> None:
    clock = FakeClock()
    ws = FakeWebSocket()
    conn = ClientConnection(ws)
    tracker = ProbeTracker(now_fn=clock)

    payload, waiter = await tracker.send_probe(conn)
    assert ws.sent == ["Ping from server"]
    assert ws.pings == [payload]
    assert payload == format_timestamp(clock.now)
    assert waiter is not None
    assert tracker.pending is not None

    clock.advance(milliseconds=50)
    elapsed = await tracker.on_reply(conn, payload)

    assert elapsed == 50
    assert ws.sent[-1] == "Ping/pong on server (in millis): 50"
    assert tracker.pending is None


@pytest.mark.asyncio
async def test_probe_round_trip_is_bounded_by_wall_clock() -> None:
    ws = FakeWebSocket()
    conn = ClientConnection(ws)
    tracker = ProbeTracker()

    started = time.monotonic()
    payload, _ = await tracker.send_probe(conn)
    await asyncio.sleep(0.02)
    elapsed = await tracker.on_reply(conn, payload)
    waited_ms = (time.monotonic() - started) * 1000

    assert elapsed is not None
    # Payload carries millisecond precision, so allow one tick of truncation plus slack.
    assert 0 <= elapsed <= waited_ms + 5


@pytest.mark.asyncio
async def test_malformed_reply_sends_nothing() -> None:
    ws = FakeWebSocket()
    conn = ClientConnection(ws)
    tracker = ProbeTracker()

    await tracker.send_probe(conn)
    assert await tracker.on_reply(conn, "not-a-date") is None
    assert ws.sent == ["Ping from server"]
    assert tracker.pending is not None


@pytest.mark.asyncio
async def test_new_probe_overwrites_unanswered_one() -> None:
    clock = FakeClock()
    ws = FakeWebSocket()
    conn = ClientConnection(ws)
    tracker = ProbeTracker(now_fn=clock)

    first, _ = await tracker.send_probe(conn)
    clock.advance(milliseconds=10)
    second, _ = await tracker.send_probe(conn)
    assert tracker.pending is not None
    assert tracker.pending.payload == second

    clock.advance(milliseconds=5)
    # Stale reply is still measured against its own payload.
    assert await tracker.on_reply(conn, first) == 15
    assert tracker.pending is not None
    assert tracker.pending.payload == second


@pytest.mark.asyncio
async def test_reply_after_close_is_not_written() -> None:
    clock = FakeClock()
    ws = FakeWebSocket()
    conn = ClientConnection(ws)
    tracker = ProbeTracker(now_fn=clock)

    payload, _ = await tracker.send_probe(conn)
    conn.mark_closed()
    clock.advance(milliseconds=7)

    assert await tracker.on_reply(conn, payload) == 7
    assert ws.sent == ["Ping from server"]


@pytest.mark.asyncio
async def test_back_to_back_pings_get_distinct_payloads() -> None:
    clock = FakeClock()
    ws = FakeWebSocket()
    conn = ClientConnection(ws)
    tracker = ProbeTracker(now_fn=clock)

    first, first_waiter = await tracker.send_probe(conn)
    second, second_waiter = await tracker.send_probe(conn)

    assert first != second
    assert ws.pings == [first, second]
    assert first_waiter is not None
    assert second_waiter is not None
    assert tracker.pending is not None
    assert tracker.pending.payload == second

    clock.advance(milliseconds=3)
    assert await tracker.on_reply(conn, first) == 3
    assert await tracker.on_reply(conn, second) == 2
    assert tracker.pending is None
