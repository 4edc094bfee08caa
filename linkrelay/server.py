"""WebSocket relay server entry point."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from websockets.asyncio.server import Server, ServerConnection, serve

from linkrelay.state.runtime import RuntimeDeps
from linkrelay.runtime.logging import configure_logging
from linkrelay.runtime.dependencies import build_runtime_deps
from linkrelay.handlers.websocket.health import build_health_check
from linkrelay.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)


class RelayServer:
    """Listening socket with an explicit start/stop lifecycle."""

    def __init__(self, runtime_deps: RuntimeDeps) -> None:
        self._deps = runtime_deps
        self._server: Server | None = None

    @property
    def port(self) -> int:
        if self._server is None:
            raise RuntimeError("server is not started")
        sock = next(iter(self._server.sockets))
        return int(sock.getsockname()[1])

    async def start(self, port: int | None = None, *, host: str | None = None) -> None:
        if self._server is not None:
            raise RuntimeError("server is already started")
        ws_settings = self._deps.settings.websocket
        ping_interval = ws_settings.keepalive_ping_interval_s or None
        self._server = await serve(
            self._handle,
            host if host is not None else ws_settings.host,
            ws_settings.port if port is None else port,
            process_request=build_health_check(ws_settings.health_path),
            ping_interval=ping_interval,
            max_size=ws_settings.max_message_bytes,
        )
        logger.info("Starting server on port %s", self.port)

    async def serve_forever(self) -> None:
        if self._server is None:
            raise RuntimeError("server is not started")
        await self._server.serve_forever()

    async def stop(self) -> None:
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        await server.wait_closed()
        logger.info("server stopped")

    async def _handle(self, ws: ServerConnection) -> None:
        await handle_websocket_connection(ws, self._deps)


async def _serve() -> None:
    runtime_deps = await build_runtime_deps()
    server = RelayServer(runtime_deps)
    await server.start()
    try:
        await server.serve_forever()
    finally:
        await server.stop()
        await runtime_deps.shutdown()


def main() -> None:
    configure_logging()
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_serve())


if __name__ == "__main__":
    main()


__all__ = ["RelayServer", "main"]
