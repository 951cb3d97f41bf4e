"""Decode one upstream generate stream and forward it to the client."""

from __future__ import annotations

import logging
import contextlib

from llm_relay.errors import StreamCancelled
from llm_relay.state.outcome import RelayOutcome
from llm_relay.upstream.client import OllamaClient
from llm_relay.upstream.decoder import NdjsonDecoder
from llm_relay.config.websocket import WS_ERROR_UPSTREAM
from llm_relay.state.records import RelayResult, StreamRecord, GenerationRequest

from .sink import ResponseSink

logger = logging.getLogger(__name__)


async def _forward(
    record: StreamRecord, transcript: list[str], sink: ResponseSink, error_max_chars: int
) -> RelayOutcome | None:
    if record.response:
        transcript.append(record.response)
        if not await sink.send_fragment(record.response):
            raise StreamCancelled("client socket closed")
    if record.error:
        logger.warning("upstream reported error mid-stream: %s", record.error)
        message = record.error[:error_max_chars] if error_max_chars > 0 else record.error
        await sink.send_error(WS_ERROR_UPSTREAM, message)
        return RelayOutcome.UPSTREAM_ERROR
    if record.done:
        if not await sink.send_complete("".join(transcript)):
            raise StreamCancelled("client socket closed")
        return RelayOutcome.COMPLETED
    return None


async def relay_stream(
    client: OllamaClient,
    request: GenerationRequest,
    sink: ResponseSink,
    *,
    error_max_chars: int = 0,
) -> RelayResult:
    """Relay fragments in arrival order until done, error, end of body or a closed socket.

    Leaving the `aclosing` block closes the upstream response, so stopping early
    (done record, closed socket, task cancellation) never leaks the request.
    Mid-stream error text is cut to `error_max_chars` when that is positive.
    Upstream setup failures propagate to the caller.
    """
    decoder = NdjsonDecoder()
    transcript: list[str] = []
    chunks = client.stream_generate(request)

    try:
        async with contextlib.aclosing(chunks):
            async for chunk in chunks:
                if not sink.is_open():
                    raise StreamCancelled("client socket closed")
                for record in decoder.feed(chunk):
                    outcome = await _forward(record, transcript, sink, error_max_chars)
                    if outcome is not None:
                        return RelayResult(outcome=outcome, transcript="".join(transcript))

        for record in decoder.flush():
            outcome = await _forward(record, transcript, sink, error_max_chars)
            if outcome is not None:
                return RelayResult(outcome=outcome, transcript="".join(transcript))
    except StreamCancelled as exc:
        logger.info("stream stopped: %s", exc)
        return RelayResult(outcome=RelayOutcome.CANCELLED, transcript="".join(transcript))

    # End of body without a done record is tolerated; the client still gets one
    # completion frame so it can accept the next prompt.
    logger.debug("stream ended without completion record; skipped %d lines", decoder.skipped_lines)
    await sink.send_complete("".join(transcript))
    return RelayResult(outcome=RelayOutcome.ENDED, transcript="".join(transcript))


__all__ = ["relay_stream"]
