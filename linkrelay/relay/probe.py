"""Round-trip latency probes over the transport's ping/pong frames."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any
from collections.abc import Callable, Awaitable

from linkrelay.state.probe import ProbeState
from linkrelay.config.websocket import WS_PROBE_NOTICE, WS_PROBE_RESULT_PREFIX

from .timestamps import utc_now, parse_timestamp, format_timestamp

if TYPE_CHECKING:
    from linkrelay.handlers.websocket.connection import ClientConnection

logger = logging.getLogger(__name__)

NowFn = Callable[[], datetime]

_ONE_MS = timedelta(milliseconds=1)
_ONE_US = timedelta(microseconds=1)


class ProbeTracker:
    """Track the most recent probe sent on one connection.

    Elapsed time is computed from the reply payload alone, so a late reply to a
    superseded probe still measures against its own timestamp.
    """

    def __init__(self, *, now_fn: NowFn | None = None) -> None:
        self._now = now_fn or utc_now
        self._pending: ProbeState | None = None
        self._last_sent_at: datetime | None = None

    @property
    def pending(self) -> ProbeState | None:
        return self._pending

    async def send_probe(self, connection: ClientConnection) -> tuple[str, Awaitable[Any] | None]:
        await connection.send(WS_PROBE_NOTICE)
        sent_at = self._now()
        # Ping payloads must be unique per connection while a pong is outstanding.
        if self._last_sent_at is not None and sent_at <= self._last_sent_at:
            sent_at = self._last_sent_at + _ONE_US
        self._last_sent_at = sent_at
        payload = format_timestamp(sent_at)
        # No queueing: a new probe replaces an unanswered one.
        self._pending = ProbeState(sent_at=sent_at, payload=payload)
        waiter = await connection.ping(payload)
        return payload, waiter

    async def on_reply(self, connection: ClientConnection, payload: str | bytes) -> int | None:
        parsed = parse_timestamp(payload)
        # The transport only resolves pongs echoing our own payloads; this branch guards direct callers.
        if parsed is None:
            logger.warning("malformed pong payload connection=%s payload=%r", connection.id, payload)
            return None

        elapsed_ms = (self._now() - parsed) // _ONE_MS
        if self._pending is not None and self._pending.payload == _as_text(payload):
            self._pending = None

        message = f"{WS_PROBE_RESULT_PREFIX}{elapsed_ms}"
        logger.info("connection=%s %s", connection.id, message)
        await connection.send(message)
        return elapsed_ms


def _as_text(payload: str | bytes) -> str:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload


__all__ = ["NowFn", "ProbeTracker"]
