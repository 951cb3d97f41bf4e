"""Inbound prompt loop for the relay socket (`/ws/llm`)."""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from llm_relay.relay.sink import ResponseSink
from llm_relay.relay.session import RelaySession
from llm_relay.state.settings import LimitsSettings
from llm_relay.config.websocket import WS_ERROR_INVALID_MESSAGE
from llm_relay.handlers.limits import SlidingWindowRateLimiter
from llm_relay.config.prompts import EMPTY_PROMPT_MESSAGE, PROMPT_TOO_LONG_MESSAGE

from .limits import consume_limiter
from .lifecycle import WebSocketLifecycle

logger = logging.getLogger(__name__)


class _Closed(Exception):
    pass


def _message_text(message: dict) -> str | None:
    """Text of one inbound frame; binary frames must be UTF-8."""
    if message.get("type") == "websocket.disconnect":
        raise _Closed
    text = message.get("text")
    if text is not None:
        return text
    data = message.get("bytes")
    if data is None:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


async def _recv_with_watchdog(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[dict | None, bool]:
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=lifecycle.watchdog_tick_s * 2)
        return message, False
    except TimeoutError:
        return None, lifecycle.should_close()


def validate_prompt(raw: str, limits: LimitsSettings) -> tuple[str | None, str | None]:
    """Return `(prompt, None)` or `(None, error message)`."""
    prompt = raw.strip()
    if not prompt:
        return None, EMPTY_PROMPT_MESSAGE
    if limits.max_prompt_chars > 0 and len(prompt) > limits.max_prompt_chars:
        return None, PROMPT_TOO_LONG_MESSAGE.format(length=len(prompt), limit=limits.max_prompt_chars)
    return prompt, None


async def run_message_loop(
    ws: WebSocket,
    lifecycle: WebSocketLifecycle,
    limiter: SlidingWindowRateLimiter,
    relay_session: RelaySession,
    sink: ResponseSink,
    limits: LimitsSettings,
) -> int:
    """Read prompts until the client leaves or the watchdog closes the socket.

    Returns the number of prompts handed to the relay session.
    """
    submitted = 0
    try:
        while True:
            message, should_exit = await _recv_with_watchdog(ws, lifecycle)
            if should_exit:
                return submitted
            if message is None:
                continue

            lifecycle.touch()

            raw = _message_text(message)
            if raw is None:
                await sink.send_error(WS_ERROR_INVALID_MESSAGE, "Prompts must be UTF-8 text.")
                continue

            prompt, problem = validate_prompt(raw, limits)
            if prompt is None:
                await sink.send_error(WS_ERROR_INVALID_MESSAGE, problem or EMPTY_PROMPT_MESSAGE)
                continue

            if not await consume_limiter(sink, limiter):
                continue

            if await relay_session.submit(prompt):
                submitted += 1
    except (_Closed, WebSocketDisconnect):
        return submitted
    finally:
        # Never leave an upstream request running for a socket that is gone.
        await relay_session.cancel()


__all__ = ["run_message_loop", "validate_prompt"]
