"""Outbound response handle owned by one fetch relay."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Mapping, AsyncIterator

import httpx

from linkrelay.errors import FetchError

logger = logging.getLogger(__name__)


class FetchHandle:
    """Wrap a streaming response so it can be destroyed exactly once.

    ``response`` is anything shaped like ``httpx.Response`` opened with
    ``stream=True``: ``headers``, ``aiter_text()`` and ``aclose()``.
    """

    def __init__(self, response: Any, *, address: str) -> None:
        self._response = response
        self._address = address
        self._destroyed = False

    @property
    def headers(self) -> Mapping[str, str]:
        return self._response.headers

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    async def iter_chunks(self) -> AsyncIterator[str]:
        try:
            async for chunk in self._response.aiter_text():
                if chunk:
                    yield chunk
        except httpx.HTTPError as exc:
            raise FetchError(address=self._address, reason=str(exc) or type(exc).__name__) from exc

    async def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        try:
            await self._response.aclose()
        except Exception:
            logger.debug("response close failed address=%s", self._address, exc_info=True)


__all__ = ["FetchHandle"]
