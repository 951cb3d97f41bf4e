"""Session-cookie authentication for socket handshakes."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from llm_relay.sessions.store import SessionStore
from llm_relay.errors import SessionStoreUnavailable
from llm_relay.sessions.cookies import extract_session_id
from llm_relay.state.auth import AuthResult, AuthStatus
from llm_relay.config.database import DEFAULT_SESSION_COOKIE_NAME

logger = logging.getLogger(__name__)


def get_session_id(ws: WebSocket, cookie_name: str = DEFAULT_SESSION_COOKIE_NAME) -> str | None:
    return extract_session_id(ws.headers.get("cookie"), cookie_name)


async def authenticate_websocket(
    ws: WebSocket,
    store: SessionStore,
    cookie_name: str = DEFAULT_SESSION_COOKIE_NAME,
) -> AuthResult:
    session_id = get_session_id(ws, cookie_name)
    if session_id is None:
        return AuthResult(status=AuthStatus.MISSING_COOKIE)

    try:
        user = await store.lookup_user(session_id)
    except SessionStoreUnavailable as exc:
        logger.error("handshake auth failed: %s", exc)
        return AuthResult(status=AuthStatus.UNAVAILABLE)

    if user is None:
        return AuthResult(status=AuthStatus.UNKNOWN_SESSION)
    return AuthResult(status=AuthStatus.AUTHENTICATED, user=user)


__all__ = ["authenticate_websocket", "get_session_id"]
