"""Single-flight prompt handling for one connection."""

from __future__ import annotations

import asyncio
import logging
import contextlib

from llm_relay.errors import UpstreamError
from llm_relay.state.settings import AppSettings
from llm_relay.state.outcome import RelayOutcome
from llm_relay.state.phase import ConnectionPhase
from llm_relay.upstream.client import OllamaClient
from llm_relay.handlers.topic_filter import TopicFilter
from llm_relay.config.logging import LOG_PROMPT_PREVIEW_CHARS
from llm_relay.upstream.payload import build_generation_request
from llm_relay.state.records import RelayResult, GenerationRequest
from llm_relay.state.connection import InflightRequest, ConnectionState
from llm_relay.config.websocket import WS_ERROR_BUSY, WS_ERROR_TIMEOUT, WS_ERROR_INTERNAL
from llm_relay.config.prompts import BUSY_MESSAGE, TIMEOUT_MESSAGE, INTERNAL_ERROR_MESSAGE

from .sink import ResponseSink
from .streamer import relay_stream

logger = logging.getLogger(__name__)


def _preview(prompt: str) -> str:
    if len(prompt) <= LOG_PROMPT_PREVIEW_CHARS:
        return prompt
    return prompt[:LOG_PROMPT_PREVIEW_CHARS] + "..."


class RelaySession:
    """At most one generation in flight per connection.

    `submit` never blocks on the generation itself: it starts a task and
    returns, so the socket keeps reading and can refuse overlapping prompts.
    """

    def __init__(
        self,
        state: ConnectionState,
        sink: ResponseSink,
        client: OllamaClient,
        *,
        settings: AppSettings,
        topic_filter: TopicFilter | None = None,
    ) -> None:
        self._state = state
        self._sink = sink
        self._client = client
        self._settings = settings
        self._topic_filter = topic_filter
        self.last_result: RelayResult | None = None

    @property
    def busy(self) -> bool:
        return self._state.busy

    def _clear_stale_guard(self) -> None:
        inflight = self._state.inflight
        if inflight is not None and inflight.task.done():
            logger.warning(
                "conn=%s clearing stale guard request=%s",
                self._state.connection_id,
                inflight.request_id,
            )
            self._state.inflight = None
            if self._state.phase is ConnectionPhase.STREAMING:
                self._state.phase = ConnectionPhase.IDLE

    async def submit(self, prompt: str) -> bool:
        """Start relaying `prompt`; returns False when nothing was started."""
        self._clear_stale_guard()
        if self.busy:
            logger.info("conn=%s prompt refused while busy", self._state.connection_id)
            await self._sink.send_error(WS_ERROR_BUSY, BUSY_MESSAGE)
            return False

        if self._topic_filter is not None and not self._topic_filter.is_on_topic(prompt):
            logger.info("conn=%s prompt filtered: %r", self._state.connection_id, _preview(prompt))
            message = self._settings.relay.filter_message
            await self._sink.send_complete(message, filtered=True)
            self.last_result = RelayResult(outcome=RelayOutcome.FILTERED, transcript=message)
            return False

        request = build_generation_request(prompt, self._settings.upstream, self._settings.relay)
        self._state.prompts_started += 1
        request_id = f"{self._state.connection_id}-{self._state.prompts_started}"
        logger.info(
            "conn=%s request=%s model=%s prompt=%r",
            self._state.connection_id,
            request_id,
            request.model,
            _preview(prompt),
        )

        task = asyncio.create_task(self._run(request_id, request), name=f"relay-{request_id}")
        self._state.inflight = InflightRequest(request_id=request_id, task=task)
        self._state.phase = ConnectionPhase.STREAMING
        return True

    async def _run(self, request_id: str, request: GenerationRequest) -> RelayResult:
        timeout_s = self._settings.limits.request_timeout_s
        stream = relay_stream(
            self._client, request, self._sink, error_max_chars=self._settings.upstream.error_body_max_chars
        )
        result = RelayResult(outcome=RelayOutcome.FAILED)
        try:
            if timeout_s > 0:
                result = await asyncio.wait_for(stream, timeout=timeout_s)
            else:
                result = await stream
        except asyncio.CancelledError:
            logger.info("conn=%s request=%s cancelled", self._state.connection_id, request_id)
            result = RelayResult(outcome=RelayOutcome.CANCELLED)
            raise
        except TimeoutError:
            logger.warning("conn=%s request=%s timed out after %.1fs", self._state.connection_id, request_id, timeout_s)
            await self._sink.send_error(WS_ERROR_TIMEOUT, TIMEOUT_MESSAGE.format(timeout_s=timeout_s))
            result = RelayResult(outcome=RelayOutcome.TIMED_OUT)
        except UpstreamError as exc:
            logger.warning("conn=%s request=%s upstream failure: %s", self._state.connection_id, request_id, exc)
            await self._sink.send_error(exc.code, exc.user_message())
            result = RelayResult(outcome=RelayOutcome.UPSTREAM_ERROR)
        except Exception:
            logger.exception("conn=%s request=%s relay failed", self._state.connection_id, request_id)
            await self._sink.send_error(WS_ERROR_INTERNAL, INTERNAL_ERROR_MESSAGE)
            result = RelayResult(outcome=RelayOutcome.FAILED)
        finally:
            self._release(request_id)
            self.last_result = result
        logger.info(
            "conn=%s request=%s finished outcome=%s chars=%d",
            self._state.connection_id,
            request_id,
            result.outcome.value,
            len(result.transcript),
        )
        return result

    def _release(self, request_id: str) -> None:
        inflight = self._state.inflight
        if inflight is not None and inflight.request_id == request_id:
            self._state.inflight = None
        if self._state.phase is ConnectionPhase.STREAMING:
            self._state.phase = ConnectionPhase.IDLE

    async def wait(self) -> RelayResult | None:
        """Wait for the in-flight request, if any, and return its result."""
        inflight = self._state.inflight
        if inflight is None:
            return self.last_result
        with contextlib.suppress(asyncio.CancelledError):
            await asyncio.shield(inflight.task)
        return self.last_result

    async def cancel(self) -> None:
        """Cancel the in-flight request and wait for it to unwind. Safe to call twice."""
        inflight = self._state.inflight
        if inflight is None:
            return
        task = inflight.task
        if not task.done():
            task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        self._release(inflight.request_id)


__all__ = ["RelaySession"]
