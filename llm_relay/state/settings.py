"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    required: bool
    cookie_name: str


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    ws_message_window_seconds: float
    ws_max_messages_per_window: int
    max_prompt_chars: int
    request_timeout_s: float


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float
    cors_allow_origins: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    base_url: str
    model: str
    connect_timeout_s: float
    probe_timeout_s: float
    temperature: float | None
    top_p: float | None
    top_k: int | None
    error_body_max_chars: int


@dataclass(frozen=True, slots=True)
class DatabaseSettings:
    url: str
    pool_size: int
    pool_timeout_s: float
    pool_recycle_s: int


@dataclass(frozen=True, slots=True)
class RelaySettings:
    framing: str
    system_prompt: str
    system_prompt_style: str
    topic_filter_enabled: bool
    filter_message: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    limits: LimitsSettings
    websocket: WebSocketSettings
    upstream: UpstreamSettings
    database: DatabaseSettings
    relay: RelaySettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "DatabaseSettings",
    "LimitsSettings",
    "RelaySettings",
    "UpstreamSettings",
    "WebSocketSettings",
]
