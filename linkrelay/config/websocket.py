"""WebSocket transport configuration and client-visible protocol constants."""

from __future__ import annotations

import os

# Listener
WS_HOST = (os.getenv("WS_HOST") or "0.0.0.0").strip()

_WS_PORT_RAW = (os.getenv("WS_PORT") or "").strip()
try:
    WS_PORT: int = int(_WS_PORT_RAW) if _WS_PORT_RAW else 9000
except Exception:
    WS_PORT = 9000

WS_HEALTH_PATH = (os.getenv("WS_HEALTH_PATH") or "/healthz").strip()

# Transport keepalive pings (websockets' own, separate from client probes). 0 disables.
_WS_KEEPALIVE_PING_INTERVAL_S_RAW = (os.getenv("WS_KEEPALIVE_PING_INTERVAL_S") or "").strip()
try:
    WS_KEEPALIVE_PING_INTERVAL_S: float = (
        float(_WS_KEEPALIVE_PING_INTERVAL_S_RAW) if _WS_KEEPALIVE_PING_INTERVAL_S_RAW else 20.0
    )
except Exception:
    WS_KEEPALIVE_PING_INTERVAL_S = 20.0
if WS_KEEPALIVE_PING_INTERVAL_S < 0:
    WS_KEEPALIVE_PING_INTERVAL_S = 0.0

_WS_MAX_MESSAGE_BYTES_RAW = (os.getenv("WS_MAX_MESSAGE_BYTES") or "").strip()
try:
    WS_MAX_MESSAGE_BYTES: int = int(_WS_MAX_MESSAGE_BYTES_RAW) if _WS_MAX_MESSAGE_BYTES_RAW else 1024 * 1024
except Exception:
    WS_MAX_MESSAGE_BYTES = 1024 * 1024
WS_MAX_MESSAGE_BYTES = max(1, int(WS_MAX_MESSAGE_BYTES))

# Close codes
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_BUSY_REASON = "server at capacity"

# Client-visible messages
WS_FETCH_ACK_PREFIX = "Fetching "
WS_PROBE_NOTICE = "Ping from server"
WS_PROBE_RESULT_PREFIX = "Ping/pong on server (in millis): "
WS_BUSY_MESSAGE = "Server cannot accept new connections. Please try again later."

__all__ = [
    "WS_HOST",
    "WS_PORT",
    "WS_HEALTH_PATH",
    "WS_KEEPALIVE_PING_INTERVAL_S",
    "WS_MAX_MESSAGE_BYTES",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_BUSY_REASON",
    "WS_FETCH_ACK_PREFIX",
    "WS_PROBE_NOTICE",
    "WS_PROBE_RESULT_PREFIX",
    "WS_BUSY_MESSAGE",
]
