from __future__ import annotations

import httpx
import orjson
import pytest

from llm_relay.upstream.client import OllamaClient
from llm_relay.state.records import GenerationRequest
from tests.utils.fakes import make_settings, ndjson
from llm_relay.upstream.payload import build_generate_payload, build_generation_request
from llm_relay.errors import UpstreamRejected, UpstreamEmptyBody, UpstreamUnavailable, UpstreamModelMissing

REQUEST = GenerationRequest(prompt="hi", model="codellama:latest", system="be brief", options={"temperature": 0.7})


def _client(handler) -> OllamaClient:
    settings = make_settings()
    http = httpx.AsyncClient(base_url="http://ollama.test", transport=httpx.MockTransport(handler))
    return OllamaClient(http, settings.upstream)


async def _collect(client: OllamaClient) -> bytes:
    return b"".join([chunk async for chunk in client.stream_generate(REQUEST)])


@pytest.mark.asyncio
async def test_stream_generate_posts_streaming_request() -> None:
    seen: list[httpx.Request] = []
    body = ndjson({"response": "a"}, {"response": "", "done": True})

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=body)

    assert await _collect(_client(handler)) == body
    (request,) = seen
    assert request.method == "POST"
    assert request.url.path == "/api/generate"
    assert orjson.loads(request.content) == {
        "model": "codellama:latest",
        "prompt": "hi",
        "stream": True,
        "system": "be brief",
        "options": {"temperature": 0.7},
    }


@pytest.mark.asyncio
async def test_stream_generate_connect_error_is_unavailable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(UpstreamUnavailable) as exc:
        await _collect(_client(handler))
    assert "ollama serve" in exc.value.user_message()
    assert exc.value.base_url == "http://localhost:11434"


@pytest.mark.asyncio
async def test_stream_generate_404_is_model_missing() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "model 'codellama:latest' not found"})

    with pytest.raises(UpstreamModelMissing) as exc:
        await _collect(_client(handler))
    assert "ollama pull codellama:latest" in exc.value.user_message()
    assert "not found" in exc.value.body


@pytest.mark.asyncio
async def test_stream_generate_500_body_is_truncated() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, content=b"x" * 5000)

    with pytest.raises(UpstreamRejected) as exc:
        await _collect(_client(handler))
    assert exc.value.status_code == 500
    assert len(exc.value.body) <= 300


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [200, 204])
async def test_stream_generate_empty_body(status: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status)

    with pytest.raises(UpstreamEmptyBody):
        await _collect(_client(handler))


@pytest.mark.asyncio
async def test_list_models_reads_tags() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/tags"
        return httpx.Response(200, json={"models": [{"name": "codellama:latest"}, {"name": "llama3:8b"}, {}]})

    assert await _client(handler).list_models() == ["codellama:latest", "llama3:8b"]


@pytest.mark.asyncio
async def test_list_models_non_json_body_is_decoding_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy login</html>")

    with pytest.raises(httpx.DecodingError):
        await _client(handler).list_models()


def test_generation_request_prefix_style() -> None:
    settings = make_settings()
    relay = settings.relay.__class__(
        framing="envelope",
        system_prompt="You are helpful.",
        system_prompt_style="prefix",
        topic_filter_enabled=False,
        filter_message="",
    )
    request = build_generation_request("sort a list", settings.upstream, relay)
    assert request.system is None
    assert request.prompt == "You are helpful.\n\nUser: sort a list"


def test_generate_payload_omits_unset_fields() -> None:
    payload = build_generate_payload(GenerationRequest(prompt="p", model="m"))
    assert payload == {"model": "m", "prompt": "p", "stream": True}
