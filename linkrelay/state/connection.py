"""Connection lifecycle states."""

from __future__ import annotations

import enum


class ConnectionState(enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


__all__ = ["ConnectionState"]
