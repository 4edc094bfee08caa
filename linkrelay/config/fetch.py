"""Outbound fetch configuration (env-resolved constants only)."""

from __future__ import annotations

import os

_TRUE_VALUES = {"1", "true", "yes", "on"}

FETCH_DEFAULT_SCHEME = (os.getenv("FETCH_DEFAULT_SCHEME") or "http").strip().lower()
if FETCH_DEFAULT_SCHEME not in {"http", "https"}:
    FETCH_DEFAULT_SCHEME = "http"

# No timeout unless an operator asks for one; a stalled upstream keeps its fetch open.
_FETCH_TIMEOUT_S_RAW = (os.getenv("FETCH_TIMEOUT_S") or "").strip()
try:
    FETCH_TIMEOUT_S: float = float(_FETCH_TIMEOUT_S_RAW) if _FETCH_TIMEOUT_S_RAW else 0.0
except Exception:
    FETCH_TIMEOUT_S = 0.0
if FETCH_TIMEOUT_S < 0:
    FETCH_TIMEOUT_S = 0.0

FETCH_FOLLOW_REDIRECTS = (os.getenv("FETCH_FOLLOW_REDIRECTS") or "").strip().lower() in _TRUE_VALUES

FETCH_USER_AGENT = (os.getenv("FETCH_USER_AGENT") or "linkrelay/0.1").strip()

__all__ = [
    "FETCH_DEFAULT_SCHEME",
    "FETCH_TIMEOUT_S",
    "FETCH_FOLLOW_REDIRECTS",
    "FETCH_USER_AGENT",
]
