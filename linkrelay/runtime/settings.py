"""Load runtime settings.

Configuration values are resolved from the environment in `linkrelay/config/*`
and exposed here as structured dataclasses for the rest of the server.
"""

from __future__ import annotations

from linkrelay.config.probe import PROBE_KEYWORD
from linkrelay.config.limits import MAX_CONCURRENT_CONNECTIONS
from linkrelay.state.settings import (
    AppSettings,
    FetchSettings,
    ProbeSettings,
    LimitsSettings,
    WebSocketSettings,
)
from linkrelay.config.fetch import (
    FETCH_TIMEOUT_S,
    FETCH_USER_AGENT,
    FETCH_DEFAULT_SCHEME,
    FETCH_FOLLOW_REDIRECTS,
)
from linkrelay.config.websocket import (
    WS_HOST,
    WS_PORT,
    WS_HEALTH_PATH,
    WS_MAX_MESSAGE_BYTES,
    WS_KEEPALIVE_PING_INTERVAL_S,
)


def load_settings() -> AppSettings:
    return AppSettings(
        websocket=WebSocketSettings(
            host=WS_HOST,
            port=WS_PORT,
            health_path=WS_HEALTH_PATH,
            keepalive_ping_interval_s=WS_KEEPALIVE_PING_INTERVAL_S,
            max_message_bytes=WS_MAX_MESSAGE_BYTES,
        ),
        fetch=FetchSettings(
            default_scheme=FETCH_DEFAULT_SCHEME,
            timeout_s=FETCH_TIMEOUT_S,
            follow_redirects=FETCH_FOLLOW_REDIRECTS,
            user_agent=FETCH_USER_AGENT,
        ),
        probe=ProbeSettings(keyword=PROBE_KEYWORD),
        limits=LimitsSettings(max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS),
    )


__all__ = ["load_settings"]
