"""Generation backend (Ollama) configuration."""

from __future__ import annotations

ENV_OLLAMA_URL = "OLLAMA_URL"
ENV_MODEL_NAME = "MODEL_NAME"
ENV_OLLAMA_CONNECT_TIMEOUT_S = "OLLAMA_CONNECT_TIMEOUT_S"
ENV_OLLAMA_PROBE_TIMEOUT_S = "OLLAMA_PROBE_TIMEOUT_S"
ENV_OLLAMA_TEMPERATURE = "OLLAMA_TEMPERATURE"
ENV_OLLAMA_TOP_P = "OLLAMA_TOP_P"
ENV_OLLAMA_TOP_K = "OLLAMA_TOP_K"
ENV_OLLAMA_ERROR_BODY_MAX_CHARS = "OLLAMA_ERROR_BODY_MAX_CHARS"

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_MODEL_NAME = "codellama:latest"
DEFAULT_OLLAMA_CONNECT_TIMEOUT_S = 5.0
DEFAULT_OLLAMA_PROBE_TIMEOUT_S = 5.0
DEFAULT_OLLAMA_TEMPERATURE: float | None = 0.7
DEFAULT_OLLAMA_TOP_P: float | None = None
DEFAULT_OLLAMA_TOP_K: int | None = None
DEFAULT_OLLAMA_ERROR_BODY_MAX_CHARS = 300

OLLAMA_GENERATE_PATH = "/api/generate"
OLLAMA_TAGS_PATH = "/api/tags"

__all__ = [
    "ENV_OLLAMA_URL",
    "ENV_MODEL_NAME",
    "ENV_OLLAMA_CONNECT_TIMEOUT_S",
    "ENV_OLLAMA_PROBE_TIMEOUT_S",
    "ENV_OLLAMA_TEMPERATURE",
    "ENV_OLLAMA_TOP_P",
    "ENV_OLLAMA_TOP_K",
    "ENV_OLLAMA_ERROR_BODY_MAX_CHARS",
    "DEFAULT_OLLAMA_URL",
    "DEFAULT_MODEL_NAME",
    "DEFAULT_OLLAMA_CONNECT_TIMEOUT_S",
    "DEFAULT_OLLAMA_PROBE_TIMEOUT_S",
    "DEFAULT_OLLAMA_TEMPERATURE",
    "DEFAULT_OLLAMA_TOP_P",
    "DEFAULT_OLLAMA_TOP_K",
    "DEFAULT_OLLAMA_ERROR_BODY_MAX_CHARS",
    "OLLAMA_GENERATE_PATH",
    "OLLAMA_TAGS_PATH",
]
