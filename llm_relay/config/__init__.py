"""Configuration module exports (env names, defaults and protocol constants only)."""

from .websocket import WS_ENDPOINT_PATH
from .upstream import DEFAULT_OLLAMA_URL, DEFAULT_MODEL_NAME

__all__ = [
    "DEFAULT_MODEL_NAME",
    "DEFAULT_OLLAMA_URL",
    "WS_ENDPOINT_PATH",
]
