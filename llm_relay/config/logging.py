"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_SHOW_HTTP_LOGS = "SHOW_HTTP_LOGS"
NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "sqlalchemy.pool")

# Prompts are user content; keep log lines bounded.
LOG_PROMPT_PREVIEW_CHARS = 80

__all__ = [
    "LOG_LEVEL",
    "LOG_FORMAT",
    "ENV_SHOW_HTTP_LOGS",
    "NOISY_LOGGERS",
    "LOG_PROMPT_PREVIEW_CHARS",
]
