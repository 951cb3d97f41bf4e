"""Test and client script utilities.

- fakes.py: in-process doubles for the socket sink, model server and session store
- network.py: relay URL and cookie helpers
- env.py: defaults for client scripts
"""

from __future__ import annotations

from .network import ws_url, session_cookie_header
from .env import derive_session_id, derive_default_server
from .fakes import FakeUpstream, RecordingSink, FakeSessionStore, ndjson, make_settings

__all__ = [
    "FakeSessionStore",
    "FakeUpstream",
    "RecordingSink",
    "derive_default_server",
    "derive_session_id",
    "make_settings",
    "ndjson",
    "session_cookie_header",
    "ws_url",
]
