"""Session store configuration (shared with the REST backend)."""

from __future__ import annotations

ENV_DATABASE_URL = "DATABASE_URL"
ENV_DB_POOL_SIZE = "DB_POOL_SIZE"
ENV_DB_POOL_TIMEOUT_S = "DB_POOL_TIMEOUT_S"
ENV_DB_POOL_RECYCLE_S = "DB_POOL_RECYCLE_S"
ENV_SESSION_COOKIE_NAME = "SESSION_COOKIE_NAME"
ENV_RELAY_AUTH_REQUIRED = "RELAY_AUTH_REQUIRED"

DEFAULT_DATABASE_URL = "mysql+pymysql://root:@127.0.0.1:3306/smart_code_hub"
DEFAULT_DB_POOL_SIZE = 10
DEFAULT_DB_POOL_TIMEOUT_S = 30.0
DEFAULT_DB_POOL_RECYCLE_S = 1800
DEFAULT_SESSION_COOKIE_NAME = "sessionId"
DEFAULT_RELAY_AUTH_REQUIRED = True

# Table layout written by the express MySQL session store and the user routes.
SESSIONS_TABLE = "sessions"
USERS_TABLE = "users"

# Signed cookie values look like "s:<id>.<signature>".
SESSION_SIGNED_PREFIX = "s:"
SESSION_SIGNED_PREFIX_ENCODED = "s%3a"
SESSION_SIGNATURE_SEPARATOR = "."
SESSION_USER_ID_KEY = "userId"

__all__ = [
    "ENV_DATABASE_URL",
    "ENV_DB_POOL_SIZE",
    "ENV_DB_POOL_TIMEOUT_S",
    "ENV_DB_POOL_RECYCLE_S",
    "ENV_SESSION_COOKIE_NAME",
    "ENV_RELAY_AUTH_REQUIRED",
    "DEFAULT_DATABASE_URL",
    "DEFAULT_DB_POOL_SIZE",
    "DEFAULT_DB_POOL_TIMEOUT_S",
    "DEFAULT_DB_POOL_RECYCLE_S",
    "DEFAULT_SESSION_COOKIE_NAME",
    "DEFAULT_RELAY_AUTH_REQUIRED",
    "SESSIONS_TABLE",
    "USERS_TABLE",
    "SESSION_SIGNED_PREFIX",
    "SESSION_SIGNED_PREFIX_ENCODED",
    "SESSION_SIGNATURE_SEPARATOR",
    "SESSION_USER_ID_KEY",
]
