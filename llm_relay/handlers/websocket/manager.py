"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import uuid
import logging
import contextlib

from fastapi import WebSocket

from llm_relay.relay.sink import ResponseSink
from llm_relay.state.runtime import RuntimeDeps
from llm_relay.state.auth import AuthResult
from llm_relay.relay.session import RelaySession
from llm_relay.state.phase import ConnectionPhase
from llm_relay.state.connection import ConnectionState
from llm_relay.handlers.limits import SlidingWindowRateLimiter
from llm_relay.config.prompts import AT_CAPACITY_MESSAGE, AUTH_REQUIRED_MESSAGE, AUTH_UNAVAILABLE_MESSAGE
from llm_relay.config.websocket import (
    WS_CLOSE_BUSY_CODE,
    WS_ERROR_AUTH_REQUIRED,
    WS_ERROR_AUTH_UNAVAILABLE,
    WS_CLOSE_UNAUTHORIZED_CODE,
    WS_ERROR_SERVER_AT_CAPACITY,
    WS_CLOSE_TRY_AGAIN_LATER_CODE,
)

from .errors import reject_connection
from .auth import authenticate_websocket
from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


def _create_rate_limiter(runtime_deps: RuntimeDeps) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        limit=runtime_deps.settings.limits.ws_max_messages_per_window,
        window_seconds=runtime_deps.settings.limits.ws_message_window_seconds,
    )


async def _authenticate(ws: WebSocket, state: ConnectionState, runtime_deps: RuntimeDeps) -> bool:
    settings = runtime_deps.settings
    state.phase = ConnectionPhase.AUTHENTICATING
    result: AuthResult = await authenticate_websocket(ws, runtime_deps.session_store, settings.auth.cookie_name)
    if result.authenticated:
        state.user = result.user
        return True

    if not settings.auth.required:
        logger.debug("conn=%s unauthenticated (%s); auth not required", state.connection_id, result.status.value)
        return True

    logger.info("conn=%s rejected: %s", state.connection_id, result.status.value)
    state.phase = ConnectionPhase.REJECTED
    if result.service_error:
        await reject_connection(
            ws,
            framing=settings.relay.framing,
            error_code=WS_ERROR_AUTH_UNAVAILABLE,
            message=AUTH_UNAVAILABLE_MESSAGE,
            close_code=WS_CLOSE_TRY_AGAIN_LATER_CODE,
        )
    else:
        await reject_connection(
            ws,
            framing=settings.relay.framing,
            error_code=WS_ERROR_AUTH_REQUIRED,
            message=AUTH_REQUIRED_MESSAGE,
            close_code=WS_CLOSE_UNAUTHORIZED_CODE,
        )
    return False


async def _prepare_connection(ws: WebSocket, state: ConnectionState, runtime_deps: RuntimeDeps) -> bool:
    if not await _authenticate(ws, state, runtime_deps):
        return False

    if not await runtime_deps.connections.connect(state):
        state.phase = ConnectionPhase.REJECTED
        await reject_connection(
            ws,
            framing=runtime_deps.settings.relay.framing,
            error_code=WS_ERROR_SERVER_AT_CAPACITY,
            message=AT_CAPACITY_MESSAGE,
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(state.connection_id)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    settings = runtime_deps.settings
    state = ConnectionState(connection_id=uuid.uuid4().hex[:12])
    lifecycle: WebSocketLifecycle | None = None
    admitted = False
    submitted = 0
    try:
        if not await _prepare_connection(ws, state, runtime_deps):
            return
        admitted = True
        state.phase = ConnectionPhase.IDLE

        sink = ResponseSink(ws, framing=settings.relay.framing)
        relay_session = RelaySession(
            state,
            sink,
            runtime_deps.upstream,
            settings=settings,
            topic_filter=runtime_deps.topic_filter,
        )
        lifecycle = WebSocketLifecycle(
            ws,
            is_busy_fn=lambda: state.busy,
            idle_timeout_s=settings.websocket.idle_timeout_s,
            watchdog_tick_s=settings.websocket.watchdog_tick_s,
            max_connection_duration_s=settings.websocket.max_connection_duration_s,
        )
        lifecycle.start()

        logger.info(
            "conn=%s accepted user=%s. Active: %s",
            state.connection_id,
            state.user.user_id if state.user else None,
            runtime_deps.connections.get_connection_count(),
        )
        submitted = await run_message_loop(
            ws,
            lifecycle,
            _create_rate_limiter(runtime_deps),
            relay_session,
            sink,
            settings.limits,
        )
    finally:
        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        if admitted:
            with contextlib.suppress(Exception):
                await runtime_deps.connections.disconnect(state.connection_id)
            state.phase = ConnectionPhase.CLOSED
            logger.info(
                "conn=%s closed prompts=%s. Active: %s",
                state.connection_id,
                submitted,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
