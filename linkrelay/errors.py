"""Shared error types for the relay server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class FetchError(Exception):
    """Raised when an outbound fetch fails to connect or breaks mid-body."""

    address: str
    reason: str

    def __str__(self) -> str:
        return f"{self.address}: {self.reason}"


__all__ = ["FetchError"]
