"""Session id extraction from the handshake `Cookie` header."""

from __future__ import annotations

import re
from urllib.parse import unquote

from llm_relay.config.database import (
    SESSION_SIGNED_PREFIX,
    DEFAULT_SESSION_COOKIE_NAME,
    SESSION_SIGNATURE_SEPARATOR,
    SESSION_SIGNED_PREFIX_ENCODED,
)


def _cookie_pattern(cookie_name: str) -> re.Pattern[str]:
    return re.compile(rf"(?:^|;)\s*{re.escape(cookie_name)}=([^;]*)")


def extract_session_id(cookie_header: str | None, cookie_name: str = DEFAULT_SESSION_COOKIE_NAME) -> str | None:
    """Return the bare session id from a signed `s:<id>.<signature>` cookie.

    The signature is not verified; the id is only used as a lookup key into the
    session table written by the REST backend.
    """
    if not cookie_header:
        return None
    match = _cookie_pattern(cookie_name).search(cookie_header)
    if match is None:
        return None

    value = match.group(1).strip().strip('"')
    if value.lower().startswith(SESSION_SIGNED_PREFIX_ENCODED):
        value = unquote(value)[len(SESSION_SIGNED_PREFIX) :]
    elif value.startswith(SESSION_SIGNED_PREFIX):
        value = value[len(SESSION_SIGNED_PREFIX) :]

    session_id, _, _signature = value.partition(SESSION_SIGNATURE_SEPARATOR)
    session_id = session_id.strip()
    return session_id or None


__all__ = ["extract_session_id"]
