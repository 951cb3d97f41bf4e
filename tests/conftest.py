from __future__ import annotations

import sys
from pathlib import Path

import pytest

_RELAY_ENV = (
    "OLLAMA_URL",
    "MODEL_NAME",
    "OLLAMA_CONNECT_TIMEOUT_S",
    "OLLAMA_PROBE_TIMEOUT_S",
    "OLLAMA_TEMPERATURE",
    "OLLAMA_TOP_P",
    "OLLAMA_TOP_K",
    "OLLAMA_ERROR_BODY_MAX_CHARS",
    "DATABASE_URL",
    "SESSION_COOKIE_NAME",
    "RELAY_AUTH_REQUIRED",
    "RELAY_FRAMING",
    "RELAY_SYSTEM_PROMPT",
    "RELAY_SYSTEM_PROMPT_STYLE",
    "RELAY_TOPIC_FILTER",
    "RELAY_FILTER_MESSAGE",
    "RELAY_MAX_PROMPT_CHARS",
    "RELAY_REQUEST_TIMEOUT_S",
    "MAX_CONCURRENT_CONNECTIONS",
    "WS_MESSAGE_WINDOW_SECONDS",
    "WS_MAX_MESSAGES_PER_WINDOW",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "WS_MAX_CONNECTION_DURATION_S",
    "CORS_ALLOW_ORIGINS",
)


def pytest_configure() -> None:
    # Keep `import llm_relay...` and `import tests.utils...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture(autouse=True)
def _clean_relay_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _RELAY_ENV:
        monkeypatch.delenv(name, raising=False)
