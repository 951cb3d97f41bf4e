"""Environment parsing for runtime settings.

Env names and defaults live in `llm_relay/config/*`; this module turns them
into the structured dataclasses the rest of the server consumes.
"""

from __future__ import annotations

import os

from llm_relay.config.websocket import (
    WS_FRAMING_STYLES,
    WS_FRAMING_ENVELOPE,
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_CORS_ALLOW_ORIGINS,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_CORS_ALLOW_ORIGINS,
    DEFAULT_WS_WATCHDOG_TICK_S,
    ENV_WS_MAX_CONNECTION_DURATION_S,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)
from llm_relay.config.prompts import (
    ENV_RELAY_FRAMING,
    SYSTEM_PROMPT_STYLES,
    ENV_RELAY_SYSTEM_PROMPT,
    DEFAULT_RELAY_SYSTEM_PROMPT,
    ENV_RELAY_SYSTEM_PROMPT_STYLE,
    DEFAULT_RELAY_SYSTEM_PROMPT_STYLE,
)
from llm_relay.config.filters import (
    ENV_RELAY_TOPIC_FILTER,
    ENV_RELAY_FILTER_MESSAGE,
    DEFAULT_RELAY_TOPIC_FILTER,
    DEFAULT_RELAY_FILTER_MESSAGE,
)
from llm_relay.config.limits import (
    ENV_RELAY_MAX_PROMPT_CHARS,
    ENV_RELAY_REQUEST_TIMEOUT_S,
    ENV_WS_MESSAGE_WINDOW_SECONDS,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    ENV_WS_MAX_MESSAGES_PER_WINDOW,
    DEFAULT_RELAY_MAX_PROMPT_CHARS,
    DEFAULT_RELAY_REQUEST_TIMEOUT_S,
    DEFAULT_WS_MESSAGE_WINDOW_SECONDS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_WS_MAX_MESSAGES_PER_WINDOW,
)
from llm_relay.config.database import (
    ENV_DATABASE_URL,
    ENV_DB_POOL_SIZE,
    DEFAULT_DATABASE_URL,
    DEFAULT_DB_POOL_SIZE,
    ENV_DB_POOL_RECYCLE_S,
    ENV_DB_POOL_TIMEOUT_S,
    ENV_RELAY_AUTH_REQUIRED,
    ENV_SESSION_COOKIE_NAME,
    DEFAULT_DB_POOL_RECYCLE_S,
    DEFAULT_DB_POOL_TIMEOUT_S,
    DEFAULT_RELAY_AUTH_REQUIRED,
    DEFAULT_SESSION_COOKIE_NAME,
)
from llm_relay.config.upstream import (
    ENV_OLLAMA_URL,
    ENV_MODEL_NAME,
    ENV_OLLAMA_TOP_K,
    ENV_OLLAMA_TOP_P,
    DEFAULT_OLLAMA_URL,
    DEFAULT_MODEL_NAME,
    DEFAULT_OLLAMA_TOP_K,
    DEFAULT_OLLAMA_TOP_P,
    ENV_OLLAMA_TEMPERATURE,
    DEFAULT_OLLAMA_TEMPERATURE,
    ENV_OLLAMA_PROBE_TIMEOUT_S,
    ENV_OLLAMA_CONNECT_TIMEOUT_S,
    DEFAULT_OLLAMA_PROBE_TIMEOUT_S,
    ENV_OLLAMA_ERROR_BODY_MAX_CHARS,
    DEFAULT_OLLAMA_CONNECT_TIMEOUT_S,
    DEFAULT_OLLAMA_ERROR_BODY_MAX_CHARS,
)
from llm_relay.state.settings import (
    AppSettings,
    AuthSettings,
    RelaySettings,
    LimitsSettings,
    DatabaseSettings,
    UpstreamSettings,
    WebSocketSettings,
)

_DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off", "false", "no"}


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    if raw.strip().lower() in _DISABLED_VALUES - {"0"}:
        return None
    try:
        return float(raw)
    except Exception:
        return default


def _optional_int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    if raw.strip().lower() in _DISABLED_VALUES - {"0"}:
        return None
    try:
        return int(raw)
    except Exception:
        return default


def _choice_env(name: str, default: str, choices: frozenset[str]) -> str:
    v = _str_env(name, default).lower()
    return v if v in choices else default


def _origins_env(name: str, default: str) -> tuple[str, ...]:
    raw = _str_env(name, default)
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or (default,)


def _load_auth_settings() -> AuthSettings:
    return AuthSettings(
        required=_bool_env(ENV_RELAY_AUTH_REQUIRED, DEFAULT_RELAY_AUTH_REQUIRED),
        cookie_name=_str_env(ENV_SESSION_COOKIE_NAME, DEFAULT_SESSION_COOKIE_NAME),
    )


def _load_limits_settings() -> LimitsSettings:
    max_connections = max(1, _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS))
    msg_window = _float_env(ENV_WS_MESSAGE_WINDOW_SECONDS, DEFAULT_WS_MESSAGE_WINDOW_SECONDS)
    if msg_window <= 0:
        msg_window = DEFAULT_WS_MESSAGE_WINDOW_SECONDS
    request_timeout = _float_env(ENV_RELAY_REQUEST_TIMEOUT_S, DEFAULT_RELAY_REQUEST_TIMEOUT_S)

    return LimitsSettings(
        max_concurrent_connections=max_connections,
        ws_message_window_seconds=msg_window,
        ws_max_messages_per_window=_int_env(ENV_WS_MAX_MESSAGES_PER_WINDOW, DEFAULT_WS_MAX_MESSAGES_PER_WINDOW),
        max_prompt_chars=max(0, _int_env(ENV_RELAY_MAX_PROMPT_CHARS, DEFAULT_RELAY_MAX_PROMPT_CHARS)),
        request_timeout_s=max(0.0, request_timeout),
    )


def _load_websocket_settings() -> WebSocketSettings:
    watchdog_tick = _float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S)
    if watchdog_tick <= 0:
        watchdog_tick = DEFAULT_WS_WATCHDOG_TICK_S

    return WebSocketSettings(
        idle_timeout_s=_float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S),
        watchdog_tick_s=watchdog_tick,
        max_connection_duration_s=_float_env(ENV_WS_MAX_CONNECTION_DURATION_S, DEFAULT_WS_MAX_CONNECTION_DURATION_S),
        cors_allow_origins=_origins_env(ENV_CORS_ALLOW_ORIGINS, DEFAULT_CORS_ALLOW_ORIGINS),
    )


def _load_upstream_settings() -> UpstreamSettings:
    return UpstreamSettings(
        base_url=_str_env(ENV_OLLAMA_URL, DEFAULT_OLLAMA_URL).rstrip("/"),
        model=_str_env(ENV_MODEL_NAME, DEFAULT_MODEL_NAME),
        connect_timeout_s=_float_env(ENV_OLLAMA_CONNECT_TIMEOUT_S, DEFAULT_OLLAMA_CONNECT_TIMEOUT_S),
        probe_timeout_s=_float_env(ENV_OLLAMA_PROBE_TIMEOUT_S, DEFAULT_OLLAMA_PROBE_TIMEOUT_S),
        temperature=_optional_float_env(ENV_OLLAMA_TEMPERATURE, DEFAULT_OLLAMA_TEMPERATURE),
        top_p=_optional_float_env(ENV_OLLAMA_TOP_P, DEFAULT_OLLAMA_TOP_P),
        top_k=_optional_int_env(ENV_OLLAMA_TOP_K, DEFAULT_OLLAMA_TOP_K),
        error_body_max_chars=max(0, _int_env(ENV_OLLAMA_ERROR_BODY_MAX_CHARS, DEFAULT_OLLAMA_ERROR_BODY_MAX_CHARS)),
    )


def _load_database_settings() -> DatabaseSettings:
    return DatabaseSettings(
        url=_str_env(ENV_DATABASE_URL, DEFAULT_DATABASE_URL),
        pool_size=max(1, _int_env(ENV_DB_POOL_SIZE, DEFAULT_DB_POOL_SIZE)),
        pool_timeout_s=_float_env(ENV_DB_POOL_TIMEOUT_S, DEFAULT_DB_POOL_TIMEOUT_S),
        pool_recycle_s=_int_env(ENV_DB_POOL_RECYCLE_S, DEFAULT_DB_POOL_RECYCLE_S),
    )


def _load_relay_settings() -> RelaySettings:
    return RelaySettings(
        framing=_choice_env(ENV_RELAY_FRAMING, WS_FRAMING_ENVELOPE, WS_FRAMING_STYLES),
        system_prompt=_str_env(ENV_RELAY_SYSTEM_PROMPT, DEFAULT_RELAY_SYSTEM_PROMPT),
        system_prompt_style=_choice_env(
            ENV_RELAY_SYSTEM_PROMPT_STYLE, DEFAULT_RELAY_SYSTEM_PROMPT_STYLE, SYSTEM_PROMPT_STYLES
        ),
        topic_filter_enabled=_bool_env(ENV_RELAY_TOPIC_FILTER, DEFAULT_RELAY_TOPIC_FILTER),
        filter_message=_str_env(ENV_RELAY_FILTER_MESSAGE, DEFAULT_RELAY_FILTER_MESSAGE),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
        upstream=_load_upstream_settings(),
        database=_load_database_settings(),
        relay=_load_relay_settings(),
    )


__all__ = ["load_settings"]
