"""Read-only access to the shared session/user tables."""

from __future__ import annotations

import time
import asyncio
import logging
from typing import Any
from collections.abc import Callable

import orjson
from sqlalchemy import Engine, select
from sqlalchemy.exc import SQLAlchemyError

from llm_relay.errors import SessionStoreUnavailable
from llm_relay.state.auth import AuthenticatedUser
from llm_relay.config.database import SESSION_USER_ID_KEY

from .tables import users_table, sessions_table

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]


class SessionStore:
    """Resolve session ids to users.

    Lookups run on a worker thread so the blocking driver never stalls the
    event loop; concurrency is bounded by the engine's connection pool.
    """

    def __init__(self, engine: Engine, *, now_fn: TimeFn | None = None) -> None:
        self._engine = engine
        self._now = now_fn or time.time

    async def lookup_user(self, session_id: str) -> AuthenticatedUser | None:
        if not session_id:
            return None
        return await asyncio.to_thread(self._lookup_user_sync, session_id)

    def _lookup_user_sync(self, session_id: str) -> AuthenticatedUser | None:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    select(sessions_table.c.data, sessions_table.c.expires).where(
                        sessions_table.c.session_id == session_id
                    )
                ).first()
                if row is None:
                    logger.debug("session lookup miss")
                    return None
                if self._is_expired(row.expires):
                    logger.debug("session expired")
                    return None

                user_id = self._parse_user_id(row.data)
                if user_id is None:
                    return None

                user = conn.execute(
                    select(users_table.c.id, users_table.c.full_name).where(users_table.c.id == user_id)
                ).first()
        except SQLAlchemyError as exc:
            raise SessionStoreUnavailable(detail=type(exc).__name__) from exc

        if user is None:
            logger.debug("session references missing user_id=%s", user_id)
            return None
        return AuthenticatedUser(user_id=user.id, full_name=user.full_name)

    def _is_expired(self, expires: Any) -> bool:
        if expires is None:
            return False
        try:
            return float(expires) <= self._now()
        except (TypeError, ValueError):
            return False

    @staticmethod
    def _parse_user_id(data: Any) -> int | None:
        if data is None:
            return None
        try:
            payload = orjson.loads(data)
        except (orjson.JSONDecodeError, TypeError):
            logger.debug("session payload is not valid JSON")
            return None
        if not isinstance(payload, dict):
            return None
        user_id = payload.get(SESSION_USER_ID_KEY)
        if not user_id or isinstance(user_id, bool):
            return None
        if isinstance(user_id, str):
            # users.id is an integer column; only plain ASCII digits can match it.
            if not (user_id.isascii() and user_id.isdecimal()):
                return None
            return int(user_id)
        if isinstance(user_id, int):
            return user_id
        return None


__all__ = ["SessionStore"]
