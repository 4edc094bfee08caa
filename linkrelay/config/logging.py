"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Transport libraries are chatty at DEBUG; keep them at WARNING unless asked.
SHOW_TRANSPORT_LOGS = (os.getenv("SHOW_TRANSPORT_LOGS") or "").strip().lower() in {"1", "true", "yes"}

__all__ = ["LOG_LEVEL", "LOG_FORMAT", "SHOW_TRANSPORT_LOGS"]
