"""Request body construction for `POST /api/generate`."""

from __future__ import annotations

from typing import Any

from llm_relay.state.records import GenerationRequest
from llm_relay.state.settings import RelaySettings, UpstreamSettings
from llm_relay.config.prompts import (
    PREFIX_PROMPT_TEMPLATE,
    SYSTEM_PROMPT_STYLE_PREFIX,
    SYSTEM_PROMPT_STYLE_SYSTEM,
)


def build_sampling_options(upstream: UpstreamSettings) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if upstream.temperature is not None:
        options["temperature"] = upstream.temperature
    if upstream.top_p is not None:
        options["top_p"] = upstream.top_p
    if upstream.top_k is not None:
        options["top_k"] = upstream.top_k
    return options


def build_generation_request(prompt: str, upstream: UpstreamSettings, relay: RelaySettings) -> GenerationRequest:
    system: str | None = None
    text = prompt
    preamble = relay.system_prompt.strip()
    if preamble and relay.system_prompt_style == SYSTEM_PROMPT_STYLE_SYSTEM:
        system = preamble
    elif preamble and relay.system_prompt_style == SYSTEM_PROMPT_STYLE_PREFIX:
        text = PREFIX_PROMPT_TEMPLATE.format(system=preamble, prompt=prompt)

    return GenerationRequest(
        prompt=text,
        model=upstream.model,
        system=system,
        options=build_sampling_options(upstream),
    )


def build_generate_payload(request: GenerationRequest) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "model": request.model,
        "prompt": request.prompt,
        "stream": True,
    }
    if request.system:
        payload["system"] = request.system
    if request.options:
        payload["options"] = dict(request.options)
    return payload


__all__ = ["build_generate_payload", "build_generation_request", "build_sampling_options"]
