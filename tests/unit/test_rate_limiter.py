from __future__ import annotations

import pytest

from llm_relay.errors import RateLimitError
from llm_relay.handlers.limits import SlidingWindowRateLimiter
from llm_relay.handlers.websocket.limits import rate_limit_message


class _Clock:
    def __init__(self) -> None:
        self.t = 0.0

    def __call__(self) -> float:
        return self.t


def test_rate_limiter_rejects_when_saturated() -> None:
    clock = _Clock()
    limiter = SlidingWindowRateLimiter(limit=2, window_seconds=10, now_fn=clock)
    limiter.consume()
    limiter.consume()

    clock.t = 4.0
    with pytest.raises(RateLimitError) as exc:
        limiter.consume()
    assert exc.value.limit == 2
    assert exc.value.window_seconds == 10
    assert exc.value.retry_in == pytest.approx(6.0)
    assert "retry in 6 seconds" in rate_limit_message(exc.value)


def test_rate_limiter_frees_slots_as_window_slides() -> None:
    clock = _Clock()
    limiter = SlidingWindowRateLimiter(limit=1, window_seconds=5, now_fn=clock)
    limiter.consume()
    assert limiter.remaining() == 0

    clock.t = 5.0
    assert limiter.remaining() == 1
    limiter.consume()


def test_rate_limiter_disabled_with_zero_limit() -> None:
    limiter = SlidingWindowRateLimiter(limit=0, window_seconds=10)
    for _ in range(100):
        limiter.consume()
    assert limiter.remaining() is None
