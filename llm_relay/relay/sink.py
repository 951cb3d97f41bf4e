"""Framed writes from the relay to one client socket."""

from __future__ import annotations

from fastapi import WebSocket

from llm_relay.handlers.websocket.errors import is_socket_open, safe_send_text
from llm_relay.handlers.websocket.framing import render_error, render_stream, render_complete


class ResponseSink:
    """Every send checks the socket first and reports `False` once it is gone."""

    def __init__(self, ws: WebSocket, *, framing: str) -> None:
        self._ws = ws
        self._framing = framing

    @property
    def framing(self) -> str:
        return self._framing

    def is_open(self) -> bool:
        return is_socket_open(self._ws)

    async def _send(self, text: str) -> bool:
        if not self.is_open():
            return False
        return await safe_send_text(self._ws, text)

    async def send_fragment(self, fragment: str) -> bool:
        return await self._send(render_stream(self._framing, fragment))

    async def send_complete(self, transcript: str, *, filtered: bool = False) -> bool:
        for frame in render_complete(self._framing, transcript, filtered=filtered):
            if not await self._send(frame):
                return False
        return True

    async def send_error(self, code: str, message: str) -> bool:
        return await self._send(render_error(self._framing, code, message))


__all__ = ["ResponseSink"]
