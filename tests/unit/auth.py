from __future__ import annotations

import pytest

from llm_relay.state.auth import AuthStatus, AuthenticatedUser
from llm_relay.handlers.websocket.auth import authenticate_websocket
from tests.utils.fakes import FakeSessionStore


class _FakeWebSocket:
    def __init__(self, cookie: str | None = None) -> None:
        self.headers = {"cookie": cookie} if cookie is not None else {}


ADA = AuthenticatedUser(user_id=7, full_name="Ada Lovelace")


@pytest.mark.asyncio
async def test_authenticate_websocket_resolves_user() -> None:
    store = FakeSessionStore({"abc": ADA})
    result = await authenticate_websocket(_FakeWebSocket("lang=en; sessionId=s%3Aabc.sig"), store)
    assert result.authenticated
    assert result.user == ADA
    assert store.lookups == ["abc"]


@pytest.mark.asyncio
async def test_authenticate_websocket_missing_cookie_skips_lookup() -> None:
    store = FakeSessionStore({"abc": ADA})
    result = await authenticate_websocket(_FakeWebSocket(), store)
    assert result.status is AuthStatus.MISSING_COOKIE
    assert not result.authenticated
    assert store.lookups == []


@pytest.mark.asyncio
async def test_authenticate_websocket_unknown_session() -> None:
    result = await authenticate_websocket(_FakeWebSocket("sessionId=nope"), FakeSessionStore())
    assert result.status is AuthStatus.UNKNOWN_SESSION
    assert not result.service_error


@pytest.mark.asyncio
async def test_authenticate_websocket_store_down_is_a_service_error() -> None:
    result = await authenticate_websocket(_FakeWebSocket("sessionId=abc"), FakeSessionStore(unavailable=True))
    assert result.status is AuthStatus.UNAVAILABLE
    assert result.service_error
    assert not result.authenticated
