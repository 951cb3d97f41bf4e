from .store import SessionStore
from .cookies import extract_session_id
from .tables import metadata, users_table, sessions_table
from .engine import build_engine

__all__ = [
    "SessionStore",
    "build_engine",
    "extract_session_id",
    "metadata",
    "sessions_table",
    "users_table",
]
