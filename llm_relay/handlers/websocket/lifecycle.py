"""Per-connection watchdog: idle timeout and maximum connection duration."""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable

from llm_relay.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    WS_CLOSE_MAX_DURATION_CODE,
    DEFAULT_WS_WATCHDOG_TICK_S,
    WS_CLOSE_MAX_DURATION_REASON,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]


class WebSocketLifecycle:
    """Closes the socket when it sits idle or outlives its maximum duration.

    Idleness is not counted while `is_busy_fn()` reports a generation in
    flight; the maximum duration applies regardless.
    """

    def __init__(
        self,
        websocket: Any,
        *,
        is_busy_fn: Callable[[], bool] | None = None,
        idle_timeout_s: float | None = None,
        watchdog_tick_s: float | None = None,
        max_connection_duration_s: float | None = None,
        now_fn: TimeFn | None = None,
    ) -> None:
        self._ws = websocket
        self._is_busy_fn = is_busy_fn or (lambda: False)
        self._idle_timeout_s = float(DEFAULT_WS_IDLE_TIMEOUT_S if idle_timeout_s is None else idle_timeout_s)
        self._watchdog_tick_s = float(DEFAULT_WS_WATCHDOG_TICK_S if watchdog_tick_s is None else watchdog_tick_s)
        self._max_connection_duration_s = float(
            DEFAULT_WS_MAX_CONNECTION_DURATION_S if max_connection_duration_s is None else max_connection_duration_s
        )
        self._now = now_fn or time.monotonic
        self._connection_start = self._now()
        self._last_activity = self._connection_start
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None
        self.close_code: int | None = None

    @property
    def watchdog_tick_s(self) -> float:
        return self._watchdog_tick_s

    def touch(self) -> None:
        self._last_activity = self._now()

    def should_close(self) -> bool:
        return self._stop_event.is_set()

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._watchdog_loop())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None

    def check(self) -> tuple[int, str] | None:
        """Return the close code and reason due now, if any."""
        now = self._now()
        if self._max_connection_duration_s > 0 and (now - self._connection_start) >= self._max_connection_duration_s:
            return WS_CLOSE_MAX_DURATION_CODE, WS_CLOSE_MAX_DURATION_REASON
        if self._is_busy_fn():
            return None
        if self._idle_timeout_s > 0 and (now - self._last_activity) >= self._idle_timeout_s:
            return WS_CLOSE_IDLE_CODE, WS_CLOSE_IDLE_REASON
        return None

    async def _close(self, code: int, reason: str) -> None:
        logger.info("WebSocket watchdog closing connection code=%s reason=%s", code, reason)
        self.close_code = code
        self._stop_event.set()
        with contextlib.suppress(Exception):
            await self._ws.close(code=code, reason=reason)

    async def _watchdog_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._watchdog_tick_s)
                if self._stop_event.is_set():
                    break
                due = self.check()
                if due is not None:
                    await self._close(*due)
                    break
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("watchdog exiting due to unexpected error", exc_info=True)


__all__ = ["WebSocketLifecycle"]
