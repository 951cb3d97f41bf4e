"""Listener configuration for the standalone entry point."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

__all__ = ["ENV_HOST", "ENV_PORT", "DEFAULT_HOST", "DEFAULT_PORT"]
