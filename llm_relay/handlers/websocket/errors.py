"""Error and send helpers for the relay socket."""

from __future__ import annotations

import logging

from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from .framing import render_error

logger = logging.getLogger(__name__)


def is_socket_open(ws: WebSocket) -> bool:
    return ws.client_state == WebSocketState.CONNECTED and ws.application_state == WebSocketState.CONNECTED


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def send_error(ws: WebSocket, *, framing: str, error_code: str, message: str) -> bool:
    if not is_socket_open(ws):
        return False
    return await safe_send_text(ws, render_error(framing, error_code, message))


async def reject_connection(
    ws: WebSocket,
    *,
    framing: str,
    error_code: str,
    message: str,
    close_code: int,
) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        # If accept fails, nothing else to do.
        return
    await send_error(ws, framing=framing, error_code=error_code, message=message)
    try:
        await ws.close(code=close_code, reason=message[:120])
    except Exception:
        return


__all__ = [
    "is_socket_open",
    "reject_connection",
    "safe_send_text",
    "send_error",
]
