"""Per-connection relay state machine."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import Awaitable, Coroutine

from websockets.exceptions import ConnectionClosed

from linkrelay.relay.scanner import scan
from linkrelay.relay.fetch import FetchRelay
from linkrelay.relay.probe import ProbeTracker
from linkrelay.relay.protocols import Fetcher
from linkrelay.config.probe import PROBE_KEYWORD
from linkrelay.config.fetch import FETCH_DEFAULT_SCHEME
from linkrelay.state.connection import ConnectionState

from .connection import ClientConnection

logger = logging.getLogger(__name__)


class ConnectionSession:
    """Classify inbound messages and dispatch them for one connection.

    Precedence: an embedded address starts a fetch, otherwise the probe
    keyword starts a probe, otherwise the message is echoed. Background work
    (fetch streaming, pong waits) runs on tasks this session cancels on close.
    """

    def __init__(
        self,
        connection: ClientConnection,
        *,
        fetcher: Fetcher,
        probes: ProbeTracker | None = None,
        probe_keyword: str = PROBE_KEYWORD,
        default_scheme: str = FETCH_DEFAULT_SCHEME,
    ) -> None:
        self._connection = connection
        self._fetcher = fetcher
        self._probes = probes or ProbeTracker()
        self._probe_keyword = probe_keyword
        self._default_scheme = default_scheme
        self._tasks: set[asyncio.Task] = set()

    @property
    def connection(self) -> ClientConnection:
        return self._connection

    @property
    def state(self) -> ConnectionState:
        return self._connection.state

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    async def handle_message(self, message: str | bytes) -> None:
        if not self._connection.alive:
            logger.debug("dropping message on closed connection=%s", self._connection.id)
            return

        text = message.decode("utf-8", errors="replace") if isinstance(message, bytes) else message
        logger.info("connection=%s > %s", self._connection.id, text)

        found = scan(text, default_scheme=self._default_scheme)
        if found is not None:
            relay = FetchRelay(self._connection, self._fetcher, found.address)
            await relay.start()
            self._spawn(relay.stream())
            return

        if self._probe_keyword and self._probe_keyword in text:
            payload, waiter = await self._probes.send_probe(self._connection)
            if waiter is not None:
                self._spawn(self._await_pong(payload, waiter))
            return

        await self._connection.send(message)

    async def on_pong(self, payload: str | bytes) -> int | None:
        # Replies are measured in either state; ClientConnection drops the write once closed.
        return await self._probes.on_reply(self._connection, payload)

    def on_error(self, code: int | None, description: str) -> None:
        logger.warning("Error %s %s connection=%s", code, description, self._connection.id)

    async def close(self) -> None:
        if not self._connection.mark_closed():
            return
        logger.info("Client disconnected connection=%s", self._connection.id)
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _await_pong(self, payload: str, waiter: Awaitable[Any]) -> None:
        try:
            await waiter
        except ConnectionClosed:
            logger.debug("pong never arrived connection=%s payload=%s", self._connection.id, payload)
            return
        await self.on_pong(payload)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("relay task failed connection=%s", self._connection.id, exc_info=exc)


__all__ = ["ConnectionSession"]
