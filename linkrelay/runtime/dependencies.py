"""Runtime dependency construction (outbound fetcher + admission control)."""

from __future__ import annotations

import logging

from linkrelay.state import RuntimeDeps
from linkrelay.state.settings import AppSettings
from linkrelay.relay.fetcher import HttpxFetcher
from linkrelay.handlers.connections import ConnectionManager

from .settings import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    fetcher = HttpxFetcher(settings.fetch)
    connections = ConnectionManager(max_connections=settings.limits.max_concurrent_connections)
    logger.debug(
        "runtime deps built max_connections=%s fetch_timeout_s=%s",
        settings.limits.max_concurrent_connections,
        settings.fetch.timeout_s,
    )
    return RuntimeDeps(connections=connections, fetcher=fetcher, settings=settings)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
