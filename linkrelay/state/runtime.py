"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from linkrelay.relay.protocols import Fetcher
    from linkrelay.state.settings import AppSettings
    from linkrelay.handlers.connections import ConnectionManager


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionManager
    fetcher: Fetcher
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            await self.fetcher.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
