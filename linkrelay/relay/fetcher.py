"""httpx-backed outbound fetcher."""

from __future__ import annotations

import logging

import httpx

from linkrelay.errors import FetchError
from linkrelay.state.settings import FetchSettings

from .handle import FetchHandle

logger = logging.getLogger(__name__)


class HttpxFetcher:
    def __init__(self, settings: FetchSettings, *, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.timeout_s if settings.timeout_s > 0 else None),
            follow_redirects=settings.follow_redirects,
            headers={"User-Agent": settings.user_agent},
        )

    async def open(self, address: httpx.URL) -> FetchHandle:
        request = self._client.build_request("GET", address)
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise FetchError(address=str(address), reason=str(exc) or type(exc).__name__) from exc
        logger.debug("fetch opened address=%s status=%s", address, response.status_code)
        return FetchHandle(response, address=str(address))

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = ["HttpxFetcher"]
