"""How a single relayed generation ended."""

from __future__ import annotations

from enum import Enum


class RelayOutcome(str, Enum):
    COMPLETED = "completed"
    ENDED = "ended"
    UPSTREAM_ERROR = "upstream_error"
    FAILED = "failed"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"
    FILTERED = "filtered"


__all__ = ["RelayOutcome"]
