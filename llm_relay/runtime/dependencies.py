"""Runtime dependency construction (session store, upstream client, admission control)."""

from __future__ import annotations

import logging

import httpx

from llm_relay.state import RuntimeDeps
from llm_relay.sessions.store import SessionStore
from llm_relay.sessions.engine import build_engine
from llm_relay.upstream.client import OllamaClient
from llm_relay.state.settings import AppSettings
from llm_relay.handlers.topic_filter import TopicFilter
from llm_relay.handlers.connections import ConnectionRegistry

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_http_client(settings: AppSettings) -> httpx.AsyncClient:
    # No read timeout: generations stream for as long as the model talks and the
    # overall budget is enforced per request by the relay session.
    return httpx.AsyncClient(
        base_url=settings.upstream.base_url,
        timeout=httpx.Timeout(None, connect=settings.upstream.connect_timeout_s),
    )


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    engine = build_engine(settings.database)
    http_client = build_http_client(settings)
    topic_filter = TopicFilter() if settings.relay.topic_filter_enabled else None

    logger.info(
        "runtime: upstream=%s model=%s framing=%s auth_required=%s topic_filter=%s max_connections=%s",
        settings.upstream.base_url,
        settings.upstream.model,
        settings.relay.framing,
        settings.auth.required,
        topic_filter is not None,
        settings.limits.max_concurrent_connections,
    )

    return RuntimeDeps(
        connections=ConnectionRegistry(max_connections=settings.limits.max_concurrent_connections),
        session_store=SessionStore(engine),
        upstream=OllamaClient(http_client, settings.upstream),
        topic_filter=topic_filter,
        settings=settings,
        _http_client=http_client,
        _engine=engine,
    )


async def probe_upstream(runtime_deps: RuntimeDeps) -> bool:
    """Log whether the model server is reachable and has the configured model."""
    upstream = runtime_deps.upstream
    try:
        models = await upstream.list_models()
    except httpx.HTTPError as exc:
        logger.warning(
            "runtime: model server at %s not reachable (%s); start it with `ollama serve`",
            upstream.base_url,
            type(exc).__name__,
        )
        return False
    if upstream.model not in models:
        logger.warning(
            "runtime: model %s not listed by %s; run `ollama pull %s`",
            upstream.model,
            upstream.base_url,
            upstream.model,
        )
        return False
    logger.info("runtime: model server ready with %s", upstream.model)
    return True


__all__ = ["RuntimeDeps", "build_http_client", "build_runtime_deps", "probe_upstream"]
