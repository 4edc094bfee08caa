"""Stream one outbound fetch back over the connection that asked for it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from linkrelay.errors import FetchError
from linkrelay.config.websocket import WS_FETCH_ACK_PREFIX

from .headers import format_headers
from .protocols import Fetcher

if TYPE_CHECKING:
    from linkrelay.handlers.websocket.connection import ClientConnection

logger = logging.getLogger(__name__)


class FetchRelay:
    """Own the lifecycle of one fetch bound to one connection.

    ``start()`` acknowledges the address; ``stream()`` runs the fetch and is
    expected to run on a task the session cancels when the connection closes.
    Cancellation and every other exit path destroy the response exactly once.
    """

    def __init__(self, connection: ClientConnection, fetcher: Fetcher, address: httpx.URL) -> None:
        self._connection = connection
        self._fetcher = fetcher
        self._address = address

    @property
    def address(self) -> httpx.URL:
        return self._address

    async def start(self) -> None:
        await self._connection.send(f"{WS_FETCH_ACK_PREFIX}{self._address}")

    async def stream(self) -> None:
        try:
            handle = await self._fetcher.open(self._address)
        except FetchError as exc:
            logger.warning("fetch failed connection=%s address=%s reason=%s", self._connection.id, exc.address, exc.reason)
            return

        try:
            if not self._connection.alive:
                logger.info("connection=%s closed before response from %s", self._connection.id, self._address)
                return
            await self._connection.send(format_headers(handle.headers))
            async for chunk in handle.iter_chunks():
                if not await self._connection.send(chunk):
                    break
        except FetchError as exc:
            logger.warning("fetch broke connection=%s address=%s reason=%s", self._connection.id, exc.address, exc.reason)
        finally:
            await handle.destroy()


__all__ = ["FetchRelay"]
