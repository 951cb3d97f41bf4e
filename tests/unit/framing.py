from __future__ import annotations

import orjson

from llm_relay.handlers.websocket.framing import render_error, render_stream, build_envelope, render_complete


def test_envelope_frames() -> None:
    assert orjson.loads(render_stream("envelope", "tok")) == {"type": "stream", "content": "tok"}
    assert orjson.loads(render_complete("envelope", "all")[0]) == {"type": "complete", "content": "all"}
    assert orjson.loads(render_error("envelope", "busy", "wait")) == {"type": "error", "content": "wait", "code": "busy"}


def test_envelope_filtered_complete_is_flagged() -> None:
    (frame,) = render_complete("envelope", "Please ask about code.", filtered=True)
    assert orjson.loads(frame) == {"type": "complete", "content": "Please ask about code.", "filtered": True}


def test_legacy_frames() -> None:
    assert render_stream("legacy", "tok") == "tok"
    assert render_complete("legacy", "whole transcript") == ["\n[✅ Done]"]
    assert render_complete("legacy", "Please ask about code.", filtered=True) == [
        "Please ask about code.",
        "\n[✅ Done]",
    ]
    assert render_error("legacy", "timeout", "too slow") == "[❌ Error] too slow"


def test_build_envelope_drops_empty_extras() -> None:
    assert build_envelope("stream", "x", code=None) == {"type": "stream", "content": "x"}
