"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from llm_relay.state.settings import AppSettings
    from llm_relay.sessions.store import SessionStore
    from llm_relay.upstream.client import OllamaClient
    from llm_relay.handlers.topic_filter import TopicFilter
    from llm_relay.handlers.connections import ConnectionRegistry


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionRegistry
    session_store: SessionStore
    upstream: OllamaClient
    topic_filter: TopicFilter | None
    settings: AppSettings
    _http_client: Any = None
    _engine: Any = None

    async def shutdown(self) -> None:
        if self._http_client is not None:
            try:
                await self._http_client.aclose()
            except Exception:
                logger.exception("runtime shutdown: http client close failed")
        if self._engine is not None:
            try:
                self._engine.dispose()
            except Exception:
                logger.exception("runtime shutdown: engine dispose failed")


__all__ = ["RuntimeDeps"]
