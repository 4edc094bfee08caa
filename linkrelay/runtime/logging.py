"""Logging initialization."""

from __future__ import annotations

import logging

from linkrelay.config.logging import LOG_LEVEL, LOG_FORMAT, SHOW_TRANSPORT_LOGS

_TRANSPORT_LOGGERS = ("websockets", "httpx", "httpcore")


def configure_logging() -> None:
    if not SHOW_TRANSPORT_LOGS:
        for name in _TRANSPORT_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
