"""WebSocket connection admission and bookkeeping."""

from __future__ import annotations

import asyncio

from llm_relay.state.connection import ConnectionState


class ConnectionRegistry:
    """Owns the live `ConnectionState` for every admitted socket."""

    def __init__(self, *, max_connections: int) -> None:
        self._max = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._active: dict[str, ConnectionState] = {}

    @property
    def max_connections(self) -> int:
        return self._max

    async def connect(self, state: ConnectionState) -> bool:
        """Attempt to admit a connection (without accepting the socket)."""
        async with self._lock:
            if state.connection_id in self._active:
                return True
            if len(self._active) >= self._max:
                return False
            self._active[state.connection_id] = state
            return True

    async def disconnect(self, connection_id: str) -> ConnectionState | None:
        async with self._lock:
            return self._active.pop(connection_id, None)

    def get(self, connection_id: str) -> ConnectionState | None:
        return self._active.get(connection_id)

    def get_connection_count(self) -> int:
        return len(self._active)

    def get_busy_count(self) -> int:
        return sum(1 for state in self._active.values() if state.busy)


__all__ = ["ConnectionRegistry"]
