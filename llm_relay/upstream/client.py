"""Thin async wrapper around the Ollama HTTP API."""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import AsyncIterator

import httpx
import orjson

from llm_relay.state.records import GenerationRequest
from llm_relay.state.settings import UpstreamSettings
from llm_relay.config.upstream import OLLAMA_TAGS_PATH, OLLAMA_GENERATE_PATH
from llm_relay.errors import (
    UpstreamRejected,
    UpstreamEmptyBody,
    UpstreamUnavailable,
    UpstreamModelMissing,
)

from .payload import build_generate_payload

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


def _truncate(text: str, limit: int) -> str:
    text = text.strip()
    if limit <= 0 or len(text) <= limit:
        return text
    return text[: max(0, limit - 3)].rstrip() + "..."


def _error_text(body: bytes) -> str:
    """Prefer Ollama's `{"error": "..."}` message over the raw body."""
    try:
        parsed = orjson.loads(body)
    except orjson.JSONDecodeError:
        return body.decode("utf-8", errors="replace")
    if isinstance(parsed, dict) and isinstance(parsed.get("error"), str):
        return parsed["error"]
    return body.decode("utf-8", errors="replace")


class OllamaClient:
    def __init__(self, http: httpx.AsyncClient, settings: UpstreamSettings) -> None:
        self._http = http
        self._settings = settings

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def model(self) -> str:
        return self._settings.model

    async def stream_generate(self, request: GenerationRequest) -> AsyncIterator[bytes]:
        """Yield raw body chunks of a streaming generate call, in arrival order."""
        content = orjson.dumps(build_generate_payload(request))
        try:
            async with self._http.stream(
                "POST",
                OLLAMA_GENERATE_PATH,
                content=content,
                headers=_JSON_HEADERS,
            ) as response:
                await self._raise_for_status(response, request.model)
                received = 0
                async for chunk in response.aiter_bytes():
                    if not chunk:
                        continue
                    received += len(chunk)
                    yield chunk
                if received == 0:
                    raise UpstreamEmptyBody(status_code=response.status_code)
        except (httpx.ConnectError, httpx.ConnectTimeout) as exc:
            raise UpstreamUnavailable(
                base_url=self.base_url,
                model=request.model,
                detail=str(exc) or type(exc).__name__,
            ) from exc

    async def list_models(self) -> list[str]:
        response = await self._http.get(OLLAMA_TAGS_PATH, timeout=self._settings.probe_timeout_s)
        response.raise_for_status()
        try:
            data: Any = orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            # A 200 from something that is not Ollama (proxy page, wrong port).
            raise httpx.DecodingError(
                f"{OLLAMA_TAGS_PATH} did not return JSON", request=response.request
            ) from exc
        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            return []
        return [m["name"] for m in models if isinstance(m, dict) and isinstance(m.get("name"), str)]

    async def _raise_for_status(self, response: httpx.Response, model: str) -> None:
        if response.status_code < 400:
            return
        body = _truncate(_error_text(await response.aread()), self._settings.error_body_max_chars)
        logger.warning("generate rejected status=%s body=%s", response.status_code, body)
        if response.status_code == 404:
            raise UpstreamModelMissing(model=model, body=body)
        raise UpstreamRejected(status_code=response.status_code, body=body)


__all__ = ["OllamaClient"]
