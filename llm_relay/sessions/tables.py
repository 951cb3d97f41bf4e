"""Table definitions for the session and user rows the relay reads."""

from __future__ import annotations

from sqlalchemy import Text, Table, Column, String, Integer, MetaData, BigInteger

from llm_relay.config.database import USERS_TABLE, SESSIONS_TABLE

metadata = MetaData()

# Layout of the express MySQL session store: `data` is the JSON-serialized
# session object and `expires` is in unix seconds.
sessions_table = Table(
    SESSIONS_TABLE,
    metadata,
    Column("session_id", String(128), primary_key=True),
    Column("expires", BigInteger, nullable=True),
    Column("data", Text, nullable=True),
)

users_table = Table(
    USERS_TABLE,
    metadata,
    Column("id", Integer, primary_key=True),
    Column("full_name", String(255), nullable=True),
    Column("email", String(255), nullable=True),
)

__all__ = ["metadata", "sessions_table", "users_table"]
