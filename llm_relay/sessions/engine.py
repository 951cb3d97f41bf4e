"""SQLAlchemy engine construction for the session store."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine

from llm_relay.state.settings import DatabaseSettings


def build_engine(settings: DatabaseSettings) -> Engine:
    # Fixed-size pool with no overflow: concurrent handshakes queue for a
    # connection (up to pool_timeout) instead of opening new ones.
    return create_engine(
        settings.url,
        pool_size=settings.pool_size,
        max_overflow=0,
        pool_timeout=settings.pool_timeout_s,
        pool_recycle=settings.pool_recycle_s,
        pool_pre_ping=True,
        future=True,
    )


__all__ = ["build_engine"]
