"""Per-connection liveness probe state (dataclasses only)."""

from __future__ import annotations

from datetime import datetime
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProbeState:
    sent_at: datetime
    payload: str


__all__ = ["ProbeState"]
