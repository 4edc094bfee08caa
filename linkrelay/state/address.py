"""Address scan results (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass(frozen=True, slots=True)
class AddressMatch:
    """An address found inside free-form text.

    ``matched`` runs from ``start`` to the end of the scanned text; ``address``
    is the parsed URL taken from its leading token.
    """

    start: int
    matched: str
    address: httpx.URL


__all__ = ["AddressMatch"]
