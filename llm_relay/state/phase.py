"""Connection lifecycle phases."""

from __future__ import annotations

from enum import Enum


class ConnectionPhase(str, Enum):
    """Connecting -> Authenticating -> {Rejected, Idle}; Idle <-> Streaming; any -> Closed."""

    CONNECTING = "connecting"
    AUTHENTICATING = "authenticating"
    REJECTED = "rejected"
    IDLE = "idle"
    STREAMING = "streaming"
    CLOSED = "closed"


__all__ = ["ConnectionPhase"]
