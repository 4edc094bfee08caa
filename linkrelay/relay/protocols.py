"""Structural type for the outbound fetch boundary."""

from __future__ import annotations

from typing import Protocol

import httpx

from .handle import FetchHandle


class Fetcher(Protocol):
    async def open(self, address: httpx.URL) -> FetchHandle:
        """Issue a GET and return once response headers have arrived."""
        ...

    async def aclose(self) -> None: ...


__all__ = ["Fetcher"]
