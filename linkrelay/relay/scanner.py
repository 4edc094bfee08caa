"""Detect a fetchable address inside free-form text."""

from __future__ import annotations

import re

import httpx

from linkrelay.state.address import AddressMatch
from linkrelay.config.fetch import FETCH_DEFAULT_SCHEME

# Naive host heuristic: optional scheme, dot-terminated labels, 2-6 letter final label.
ADDRESS_PATTERN = re.compile(r"(http://)?([\da-z-]+\.)+([a-z]{2,6})", re.IGNORECASE)

_FETCHABLE_SCHEMES = {"http", "https"}

# The pattern only anchors `http://`; an `https://` right before the host is recovered here.
_SECURE_PREFIX = "https://"


def parse_address(candidate: str, *, has_scheme: bool, default_scheme: str = FETCH_DEFAULT_SCHEME) -> httpx.URL | None:
    """Parse the leading token of ``candidate`` as a URL, or return None."""
    tokens = candidate.split(maxsplit=1)
    if not tokens:
        return None
    token = tokens[0]
    if not has_scheme:
        token = f"{default_scheme}://{token}"
    try:
        url = httpx.URL(token)
    except httpx.InvalidURL:
        return None
    if url.scheme not in _FETCHABLE_SCHEMES or not url.host:
        return None
    return url


def scan(text: str, *, default_scheme: str = FETCH_DEFAULT_SCHEME) -> AddressMatch | None:
    """Return the leftmost address in ``text``.

    Everything from the detected host onward is the candidate, so a trailing
    path and query ride along even though the pattern only anchors the host.
    """
    match = ADDRESS_PATTERN.search(text)
    if match is None:
        return None
    start = match.start()
    has_scheme = match.group(1) is not None
    if not has_scheme and text[:start].lower().endswith(_SECURE_PREFIX):
        start -= len(_SECURE_PREFIX)
        has_scheme = True
    matched = text[start:]
    address = parse_address(matched, has_scheme=has_scheme, default_scheme=default_scheme)
    if address is None:
        return None
    return AddressMatch(start=start, matched=matched, address=address)


__all__ = ["ADDRESS_PATTERN", "parse_address", "scan"]
