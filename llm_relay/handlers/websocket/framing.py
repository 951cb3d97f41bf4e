"""Server -> client frame rendering for both framing styles.

`envelope`: one JSON object per frame, `{"type": ..., "content": ...}`.
`legacy`:   bare text fragments plus in-band done/error markers.
"""

from __future__ import annotations

from typing import Any

import orjson

from llm_relay.config.websocket import (
    WS_KEY_CODE,
    WS_KEY_TYPE,
    WS_TYPE_ERROR,
    WS_KEY_CONTENT,
    WS_TYPE_STREAM,
    WS_KEY_FILTERED,
    WS_TYPE_COMPLETE,
    WS_FRAMING_LEGACY,
    WS_LEGACY_DONE_MARKER,
    WS_LEGACY_ERROR_PREFIX,
)


def _dumps(envelope: dict[str, Any]) -> str:
    return orjson.dumps(envelope).decode("utf-8")


def build_envelope(msg_type: str, content: str, **extra: Any) -> dict[str, Any]:
    envelope: dict[str, Any] = {WS_KEY_TYPE: msg_type, WS_KEY_CONTENT: content}
    envelope.update({k: v for k, v in extra.items() if v is not None})
    return envelope


def render_stream(framing: str, fragment: str) -> str:
    if framing == WS_FRAMING_LEGACY:
        return fragment
    return _dumps(build_envelope(WS_TYPE_STREAM, fragment))


def render_complete(framing: str, transcript: str, *, filtered: bool = False) -> list[str]:
    """Completion frames; legacy filtered replies need the text sent before the marker."""
    if framing == WS_FRAMING_LEGACY:
        if filtered:
            return [transcript, WS_LEGACY_DONE_MARKER]
        return [WS_LEGACY_DONE_MARKER]
    extra: dict[str, Any] = {WS_KEY_FILTERED: True} if filtered else {}
    return [_dumps(build_envelope(WS_TYPE_COMPLETE, transcript, **extra))]


def render_error(framing: str, code: str, message: str) -> str:
    if framing == WS_FRAMING_LEGACY:
        return f"{WS_LEGACY_ERROR_PREFIX}{message}"
    return _dumps(build_envelope(WS_TYPE_ERROR, message, **{WS_KEY_CODE: code}))


__all__ = ["build_envelope", "render_complete", "render_error", "render_stream"]
