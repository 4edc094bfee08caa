"""Liveness probe configuration."""

from __future__ import annotations

import os

# Case-sensitive substring that triggers a probe.
PROBE_KEYWORD = os.getenv("PROBE_KEYWORD") or "ping"

__all__ = ["PROBE_KEYWORD"]
