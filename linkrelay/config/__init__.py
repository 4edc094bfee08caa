"""Configuration module exports (env-resolved constants only)."""

from .probe import PROBE_KEYWORD
from .limits import MAX_CONCURRENT_CONNECTIONS
from .websocket import WS_PORT

__all__ = [
    "MAX_CONCURRENT_CONNECTIONS",
    "PROBE_KEYWORD",
    "WS_PORT",
]
