"""Main FastAPI server for the Smart Code Hub LLM relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import Callable, Awaitable

import httpx
from fastapi import FastAPI, Request, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from llm_relay.state.runtime import RuntimeDeps
from llm_relay.runtime.settings import load_settings
from llm_relay.config.websocket import WS_ENDPOINT_PATH
from llm_relay.runtime.logging import configure_logging
from llm_relay.runtime.dependencies import probe_upstream, build_runtime_deps
from llm_relay.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

DepsFactory = Callable[[], Awaitable[RuntimeDeps]]


def _runtime_deps(app: FastAPI) -> RuntimeDeps:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def create_app(build_deps: DepsFactory = build_runtime_deps, *, probe_on_startup: bool = True) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = await build_deps()
        app.state.runtime_deps = runtime_deps
        if probe_on_startup:
            await probe_upstream(runtime_deps)
        logger.info("runtime: ready on %s", WS_ENDPOINT_PATH)
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(load_settings().websocket.cors_allow_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health(request: Request) -> dict[str, str]:
        return {"status": "ok", "model": _runtime_deps(request.app).upstream.model}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health/upstream")
    async def health_upstream(request: Request):
        upstream = _runtime_deps(request.app).upstream
        try:
            models = await upstream.list_models()
        except httpx.HTTPError as exc:
            logger.warning("upstream probe failed: %s", exc)
            return ORJSONResponse(
                status_code=503,
                content={
                    "status": "error",
                    "error": f"Cannot reach the model server at {upstream.base_url}",
                    "detail": str(exc) or type(exc).__name__,
                },
            )
        return {"status": "ok", "model": upstream.model, "model_available": upstream.model in models, "models": models}

    @app.websocket(WS_ENDPOINT_PATH)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await handle_websocket_connection(websocket, _runtime_deps(websocket.app))

    return app


configure_logging()

app = create_app()

__all__ = ["app", "create_app"]
