"""Per-connection relay state."""

from __future__ import annotations

import time
import asyncio
from dataclasses import field, dataclass

from .phase import ConnectionPhase
from .auth import AuthenticatedUser


@dataclass(slots=True)
class InflightRequest:
    request_id: str
    task: asyncio.Task
    started_at: float = field(default_factory=time.monotonic)


@dataclass(slots=True)
class ConnectionState:
    connection_id: str
    user: AuthenticatedUser | None = None
    phase: ConnectionPhase = ConnectionPhase.CONNECTING
    inflight: InflightRequest | None = None
    prompts_started: int = 0

    @property
    def busy(self) -> bool:
        return self.inflight is not None


__all__ = ["ConnectionState", "InflightRequest"]
