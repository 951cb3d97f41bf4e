from __future__ import annotations

import pytest

from llm_relay.state.connection import ConnectionState
from llm_relay.handlers.connections import ConnectionRegistry


@pytest.mark.asyncio
async def test_registry_enforces_capacity() -> None:
    registry = ConnectionRegistry(max_connections=2)

    assert await registry.connect(ConnectionState(connection_id="a"))
    assert await registry.connect(ConnectionState(connection_id="b"))
    assert not await registry.connect(ConnectionState(connection_id="c"))
    assert registry.get_connection_count() == 2

    removed = await registry.disconnect("a")
    assert removed is not None and removed.connection_id == "a"
    assert await registry.connect(ConnectionState(connection_id="c"))
    assert registry.get("c") is not None
    assert registry.get("a") is None


@pytest.mark.asyncio
async def test_registry_disconnect_is_idempotent() -> None:
    registry = ConnectionRegistry(max_connections=1)
    await registry.connect(ConnectionState(connection_id="a"))

    await registry.disconnect("a")
    assert await registry.disconnect("a") is None
    assert registry.get_connection_count() == 0
