"""Network helpers for the relay client scripts."""

from __future__ import annotations

from urllib.parse import urlparse, urlunparse

from llm_relay.config.websocket import WS_ENDPOINT_PATH
from llm_relay.config.database import DEFAULT_SESSION_COOKIE_NAME


def ws_url(server: str, secure: bool) -> str:
    """Build the relay socket URL from host:port, an http(s) URL or a ws(s) URL."""
    server = (server or "").strip()
    if server.startswith(("ws://", "wss://", "http://", "https://")):
        parsed = urlparse(server)
        if parsed.scheme in {"ws", "wss"}:
            scheme = parsed.scheme
        else:
            scheme = "wss" if (parsed.scheme == "https" or secure) else "ws"
        base_path = (parsed.path or "").rstrip("/")
        if not base_path.endswith(WS_ENDPOINT_PATH):
            base_path = f"{base_path}{WS_ENDPOINT_PATH}"
        return urlunparse((scheme, parsed.netloc, base_path, "", parsed.query, parsed.fragment))
    scheme = "wss" if secure else "ws"
    return f"{scheme}://{server.rstrip('/')}{WS_ENDPOINT_PATH}"


def session_cookie_header(session_id: str | None, cookie_name: str = DEFAULT_SESSION_COOKIE_NAME) -> dict[str, str]:
    if not session_id:
        return {}
    return {"Cookie": f"{cookie_name}={session_id}"}


__all__ = ["session_cookie_header", "ws_url"]
