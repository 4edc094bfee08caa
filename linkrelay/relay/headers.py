"""Human-readable snapshot of response headers."""

from __future__ import annotations

from collections.abc import Mapping

import orjson


def format_headers(headers: Mapping[str, str]) -> str:
    # httpx.Headers joins repeated names with ", " when read as a mapping.
    snapshot = {str(name): str(value) for name, value in headers.items()}
    return orjson.dumps(snapshot, option=orjson.OPT_INDENT_2).decode("utf-8")


__all__ = ["format_headers"]
