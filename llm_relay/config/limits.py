"""Admission control and rate limit configuration."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
ENV_WS_MESSAGE_WINDOW_SECONDS = "WS_MESSAGE_WINDOW_SECONDS"
ENV_WS_MAX_MESSAGES_PER_WINDOW = "WS_MAX_MESSAGES_PER_WINDOW"
ENV_RELAY_MAX_PROMPT_CHARS = "RELAY_MAX_PROMPT_CHARS"
ENV_RELAY_REQUEST_TIMEOUT_S = "RELAY_REQUEST_TIMEOUT_S"

DEFAULT_MAX_CONCURRENT_CONNECTIONS = 100
DEFAULT_WS_MESSAGE_WINDOW_SECONDS = 60.0

# Each prompt triggers a full generation, so the window is far tighter than a
# token-streaming protocol would need.
DEFAULT_WS_MAX_MESSAGES_PER_WINDOW = 30

DEFAULT_RELAY_MAX_PROMPT_CHARS = 8000

# Overall wall-clock budget for one generation; 0 disables.
DEFAULT_RELAY_REQUEST_TIMEOUT_S = 300.0

__all__ = [
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "ENV_WS_MESSAGE_WINDOW_SECONDS",
    "ENV_WS_MAX_MESSAGES_PER_WINDOW",
    "ENV_RELAY_MAX_PROMPT_CHARS",
    "ENV_RELAY_REQUEST_TIMEOUT_S",
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_WS_MESSAGE_WINDOW_SECONDS",
    "DEFAULT_WS_MAX_MESSAGES_PER_WINDOW",
    "DEFAULT_RELAY_MAX_PROMPT_CHARS",
    "DEFAULT_RELAY_REQUEST_TIMEOUT_S",
]
