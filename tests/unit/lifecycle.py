from __future__ import annotations

import asyncio

import pytest

from llm_relay.handlers.websocket.lifecycle import WebSocketLifecycle
from llm_relay.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    WS_CLOSE_MAX_DURATION_CODE,
    WS_CLOSE_MAX_DURATION_REASON,
)


class _FakeWebSocket:
    def __init__(self) -> None:
        self.closed = asyncio.Event()
        self.close_code: int | None = None
        self.close_reason: str | None = None

    async def close(self, *, code: int = 1000, reason: str | None = None) -> None:
        self.close_code = code
        self.close_reason = reason or ""
        self.closed.set()


class _Clock:
    def __init__(self) -> None:
        self.t = 0.0

    def __call__(self) -> float:
        return self.t


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_on_max_duration() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(
        ws,
        idle_timeout_s=9999.0,
        watchdog_tick_s=0.01,
        max_connection_duration_s=0.05,
    )
    lifecycle.start()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    assert ws.close_code == WS_CLOSE_MAX_DURATION_CODE
    assert ws.close_reason == WS_CLOSE_MAX_DURATION_REASON
    assert lifecycle.should_close()

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_when_idle() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0.03, watchdog_tick_s=0.01, max_connection_duration_s=0)
    lifecycle.start()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    assert ws.close_code == WS_CLOSE_IDLE_CODE
    assert ws.close_reason == WS_CLOSE_IDLE_REASON

    await lifecycle.stop()


def test_idle_time_is_not_counted_while_busy() -> None:
    clock = _Clock()
    busy = True
    lifecycle = WebSocketLifecycle(
        _FakeWebSocket(),
        is_busy_fn=lambda: busy,
        idle_timeout_s=10.0,
        watchdog_tick_s=1.0,
        max_connection_duration_s=0,
        now_fn=clock,
    )

    clock.t = 60.0
    assert lifecycle.check() is None

    busy = False
    assert lifecycle.check() == (WS_CLOSE_IDLE_CODE, WS_CLOSE_IDLE_REASON)

    lifecycle.touch()
    assert lifecycle.check() is None


def test_max_duration_applies_even_while_busy() -> None:
    clock = _Clock()
    lifecycle = WebSocketLifecycle(
        _FakeWebSocket(),
        is_busy_fn=lambda: True,
        idle_timeout_s=0,
        watchdog_tick_s=1.0,
        max_connection_duration_s=30.0,
        now_fn=clock,
    )
    clock.t = 31.0
    assert lifecycle.check() == (WS_CLOSE_MAX_DURATION_CODE, WS_CLOSE_MAX_DURATION_REASON)
