"""WebSocket protocol configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/ws/llm"

# Envelope keys
WS_KEY_TYPE = "type"
WS_KEY_CONTENT = "content"
WS_KEY_CODE = "code"
WS_KEY_FILTERED = "filtered"

# Envelope types
WS_TYPE_STREAM = "stream"
WS_TYPE_COMPLETE = "complete"
WS_TYPE_ERROR = "error"

# Framing styles
WS_FRAMING_ENVELOPE = "envelope"
WS_FRAMING_LEGACY = "legacy"
WS_FRAMING_STYLES = frozenset({WS_FRAMING_ENVELOPE, WS_FRAMING_LEGACY})

WS_LEGACY_DONE_MARKER = "\n[✅ Done]"
WS_LEGACY_ERROR_PREFIX = "[❌ Error] "

# Close codes
WS_CLOSE_CLIENT_REQUEST_CODE = 1000
WS_CLOSE_TRY_AGAIN_LATER_CODE = 1013
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_UNAUTHORIZED_CODE = 4001
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Errors (code values)
WS_ERROR_AUTH_REQUIRED = "authentication_required"
WS_ERROR_AUTH_UNAVAILABLE = "authentication_unavailable"
WS_ERROR_SERVER_AT_CAPACITY = "server_at_capacity"
WS_ERROR_INVALID_MESSAGE = "invalid_message"
WS_ERROR_RATE_LIMITED = "rate_limited"
WS_ERROR_BUSY = "busy"
WS_ERROR_TIMEOUT = "timeout"
WS_ERROR_UPSTREAM = "upstream_error"
WS_ERROR_INTERNAL = "internal_error"

# Idle watchdog
ENV_WS_IDLE_TIMEOUT_S = "WS_IDLE_TIMEOUT_S"
ENV_WS_WATCHDOG_TICK_S = "WS_WATCHDOG_TICK_S"
ENV_WS_MAX_CONNECTION_DURATION_S = "WS_MAX_CONNECTION_DURATION_S"

DEFAULT_WS_IDLE_TIMEOUT_S = 600.0
DEFAULT_WS_WATCHDOG_TICK_S = 5.0
DEFAULT_WS_MAX_CONNECTION_DURATION_S = 0.0

ENV_CORS_ALLOW_ORIGINS = "CORS_ALLOW_ORIGINS"
DEFAULT_CORS_ALLOW_ORIGINS = "*"

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_CONTENT",
    "WS_KEY_CODE",
    "WS_KEY_FILTERED",
    "WS_TYPE_STREAM",
    "WS_TYPE_COMPLETE",
    "WS_TYPE_ERROR",
    "WS_FRAMING_ENVELOPE",
    "WS_FRAMING_LEGACY",
    "WS_FRAMING_STYLES",
    "WS_LEGACY_DONE_MARKER",
    "WS_LEGACY_ERROR_PREFIX",
    "WS_CLOSE_CLIENT_REQUEST_CODE",
    "WS_CLOSE_TRY_AGAIN_LATER_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_UNAUTHORIZED_CODE",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_ERROR_AUTH_REQUIRED",
    "WS_ERROR_AUTH_UNAVAILABLE",
    "WS_ERROR_SERVER_AT_CAPACITY",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_RATE_LIMITED",
    "WS_ERROR_BUSY",
    "WS_ERROR_TIMEOUT",
    "WS_ERROR_UPSTREAM",
    "WS_ERROR_INTERNAL",
    "ENV_WS_IDLE_TIMEOUT_S",
    "ENV_WS_WATCHDOG_TICK_S",
    "ENV_WS_MAX_CONNECTION_DURATION_S",
    "DEFAULT_WS_IDLE_TIMEOUT_S",
    "DEFAULT_WS_WATCHDOG_TICK_S",
    "DEFAULT_WS_MAX_CONNECTION_DURATION_S",
    "ENV_CORS_ALLOW_ORIGINS",
    "DEFAULT_CORS_ALLOW_ORIGINS",
]
