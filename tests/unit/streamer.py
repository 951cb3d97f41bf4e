from __future__ import annotations

import pytest

from llm_relay.relay.streamer import relay_stream
from llm_relay.state.outcome import RelayOutcome
from llm_relay.state.records import GenerationRequest
from tests.utils.fakes import FakeUpstream, RecordingSink, ndjson

REQUEST = GenerationRequest(prompt="hi", model="codellama:latest")


@pytest.mark.asyncio
async def test_relay_stream_forwards_fragments_then_one_complete() -> None:
    body = ndjson({"response": "def "}, {"response": "f():"}, {"response": " pass"}, {"response": "", "done": True})
    # Split mid-record to exercise the carry-over buffer.
    upstream = FakeUpstream([body[:7], body[7:30], body[30:]])
    sink = RecordingSink()

    result = await relay_stream(upstream, REQUEST, sink)

    assert result.outcome is RelayOutcome.COMPLETED
    assert result.transcript == "def f(): pass"
    assert sink.events == [
        ("stream", "def "),
        ("stream", "f():"),
        ("stream", " pass"),
        ("complete", "def f(): pass", ""),
    ]
    assert upstream.closed == 1


@pytest.mark.asyncio
async def test_relay_stream_stops_reading_after_done() -> None:
    upstream = FakeUpstream([ndjson({"response": "a", "done": True}), ndjson({"response": "late"})])
    sink = RecordingSink()

    result = await relay_stream(upstream, REQUEST, sink)

    assert result.outcome is RelayOutcome.COMPLETED
    assert upstream.chunks_sent == 1
    assert sink.kinds() == ["stream", "complete"]


@pytest.mark.asyncio
async def test_relay_stream_error_record_sends_error_and_stops() -> None:
    upstream = FakeUpstream([ndjson({"response": "par"}, {"error": "model crashed"}, {"response": "never"})])
    sink = RecordingSink()

    result = await relay_stream(upstream, REQUEST, sink)

    assert result.outcome is RelayOutcome.UPSTREAM_ERROR
    assert sink.events == [("stream", "par"), ("error", "upstream_error", "model crashed")]


@pytest.mark.asyncio
async def test_relay_stream_cuts_error_text_to_limit() -> None:
    upstream = FakeUpstream([ndjson({"error": "out of memory while loading model weights"})])
    sink = RecordingSink()

    result = await relay_stream(upstream, REQUEST, sink, error_max_chars=13)

    assert result.outcome is RelayOutcome.UPSTREAM_ERROR
    assert sink.events == [("error", "upstream_error", "out of memory")]


@pytest.mark.asyncio
async def test_relay_stream_end_of_body_without_done_is_tolerated() -> None:
    upstream = FakeUpstream([ndjson({"response": "partial"})])
    sink = RecordingSink()

    result = await relay_stream(upstream, REQUEST, sink)

    assert result.outcome is RelayOutcome.ENDED
    assert sink.events == [("stream", "partial"), ("complete", "partial", "")]


@pytest.mark.asyncio
async def test_relay_stream_parses_trailing_line_without_newline() -> None:
    upstream = FakeUpstream([b'{"response": "x"}\n{"done": true}'])
    sink = RecordingSink()

    result = await relay_stream(upstream, REQUEST, sink)

    assert result.outcome is RelayOutcome.COMPLETED
    assert sink.events[-1] == ("complete", "x", "")


@pytest.mark.asyncio
async def test_relay_stream_closed_socket_cancels_upstream_read() -> None:
    chunks = [ndjson({"response": str(i)}) for i in range(10)]
    upstream = FakeUpstream(chunks)
    sink = RecordingSink(open_for=2)

    result = await relay_stream(upstream, REQUEST, sink)

    assert result.outcome is RelayOutcome.CANCELLED
    assert result.transcript.startswith("01")
    assert sink.kinds() == ["stream", "stream"]
    assert upstream.chunks_sent < len(chunks)
    assert upstream.closed == 1
    assert "error" not in sink.kinds()
