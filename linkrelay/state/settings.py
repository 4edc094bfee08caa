"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    host: str
    port: int
    health_path: str
    keepalive_ping_interval_s: float
    max_message_bytes: int


@dataclass(frozen=True, slots=True)
class FetchSettings:
    default_scheme: str
    timeout_s: float
    follow_redirects: bool
    user_agent: str


@dataclass(frozen=True, slots=True)
class ProbeSettings:
    keyword: str


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    websocket: WebSocketSettings
    fetch: FetchSettings
    probe: ProbeSettings
    limits: LimitsSettings


__all__ = [
    "AppSettings",
    "FetchSettings",
    "LimitsSettings",
    "ProbeSettings",
    "WebSocketSettings",
]
