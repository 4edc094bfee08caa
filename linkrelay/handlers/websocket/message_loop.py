"""Deliver transport events for one connection to its session."""

from __future__ import annotations

import logging
from typing import Any

from websockets.exceptions import ConnectionClosedError

from .session import ConnectionSession

logger = logging.getLogger(__name__)


async def run_message_loop(ws: Any, session: ConnectionSession) -> None:
    """Feed inbound messages to ``session`` until the transport closes.

    Normal closure ends iteration quietly; an abnormal one is reported as a
    transport error. Either way the session is closed before returning.
    """
    try:
        async for message in ws:
            await session.handle_message(message)
    except ConnectionClosedError as exc:
        rcvd = exc.rcvd
        code = rcvd.code if rcvd is not None else None
        reason = rcvd.reason if rcvd is not None else "connection lost"
        session.on_error(code, reason)
    finally:
        await session.close()


__all__ = ["run_message_loop"]
