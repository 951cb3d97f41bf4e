"""Request/response value types for one relay round-trip."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass

from .outcome import RelayOutcome


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    prompt: str
    model: str
    system: str | None = None
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class StreamRecord:
    """One decoded line of the upstream body.

    Only `response`, `done` and `error` are recognized; anything else is ignored
    and a field of the wrong type counts as absent.
    """

    response: str | None = None
    done: bool = False
    error: str | None = None

    @classmethod
    def from_json(cls, obj: Any) -> StreamRecord | None:
        if not isinstance(obj, dict):
            return None
        response = obj.get("response")
        error = obj.get("error")
        return cls(
            response=response if isinstance(response, str) else None,
            done=obj.get("done") is True,
            error=error if isinstance(error, str) and error else None,
        )


@dataclass(frozen=True, slots=True)
class RelayResult:
    outcome: RelayOutcome
    transcript: str = ""


__all__ = ["GenerationRequest", "RelayResult", "StreamRecord"]
