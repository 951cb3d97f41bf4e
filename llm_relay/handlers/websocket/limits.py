"""Rate limiting for inbound prompts."""

from __future__ import annotations

import math

from llm_relay.errors import RateLimitError
from llm_relay.relay.sink import ResponseSink
from llm_relay.config.websocket import WS_ERROR_RATE_LIMITED
from llm_relay.handlers.limits import SlidingWindowRateLimiter


def rate_limit_message(exc: RateLimitError) -> str:
    retry_in_s = int(max(1, math.ceil(float(exc.retry_in)))) if exc.retry_in else 1
    return (
        f"Too many prompts: at most {exc.limit} per {int(exc.window_seconds)} seconds; "
        f"retry in {retry_in_s} seconds."
    )


async def consume_limiter(sink: ResponseSink, limiter: SlidingWindowRateLimiter) -> bool:
    try:
        limiter.consume()
    except RateLimitError as exc:
        await sink.send_error(WS_ERROR_RATE_LIMITED, rate_limit_message(exc))
        return False
    return True


__all__ = ["consume_limiter", "rate_limit_message"]
