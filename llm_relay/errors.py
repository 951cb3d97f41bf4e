"""Shared error types for the LLM relay."""

from __future__ import annotations

from typing import ClassVar
from dataclasses import dataclass


@dataclass(eq=False, slots=True)
class RateLimitError(Exception):
    """Raised when a sliding-window rate limiter is saturated."""

    retry_in: float
    limit: int
    window_seconds: float


@dataclass(eq=False)
class SessionStoreUnavailable(Exception):
    """The session/user tables could not be queried (driver or pool failure)."""

    detail: str

    def __str__(self) -> str:
        return f"session store unavailable: {self.detail}"


@dataclass(eq=False)
class StreamCancelled(Exception):
    """The relay stopped reading upstream on purpose; never reported to the client."""

    reason: str = "cancelled"

    def __str__(self) -> str:
        return self.reason


@dataclass(eq=False)
class UpstreamError(Exception):
    """Base for failures setting up the generation call."""

    code: ClassVar[str] = "upstream_error"

    def user_message(self) -> str:
        return "The model server failed to answer."


@dataclass(eq=False)
class UpstreamUnavailable(UpstreamError):
    base_url: str
    model: str
    detail: str = ""

    code: ClassVar[str] = "upstream_unavailable"

    def __str__(self) -> str:
        return f"cannot connect to {self.base_url}: {self.detail}"

    def user_message(self) -> str:
        return (
            f"Cannot reach the model server at {self.base_url}. Start Ollama (`ollama serve`) "
            f"and make sure the model is pulled (`ollama pull {self.model}`)."
        )


@dataclass(eq=False)
class UpstreamModelMissing(UpstreamError):
    model: str
    body: str = ""

    code: ClassVar[str] = "model_not_found"

    def __str__(self) -> str:
        return f"model {self.model!r} not found: {self.body}"

    def user_message(self) -> str:
        return f"Model '{self.model}' is not available on the model server. Run `ollama pull {self.model}`."


@dataclass(eq=False)
class UpstreamRejected(UpstreamError):
    status_code: int
    body: str = ""

    code: ClassVar[str] = "upstream_rejected"

    def __str__(self) -> str:
        return f"upstream responded {self.status_code}: {self.body}"

    def user_message(self) -> str:
        if self.body:
            return f"Model server responded with status {self.status_code}: {self.body}"
        return f"Model server responded with status {self.status_code}."


@dataclass(eq=False)
class UpstreamEmptyBody(UpstreamError):
    status_code: int

    code: ClassVar[str] = "upstream_empty_body"

    def __str__(self) -> str:
        return f"upstream returned no body (status {self.status_code})"

    def user_message(self) -> str:
        return "Model server returned an empty response."


__all__ = [
    "RateLimitError",
    "SessionStoreUnavailable",
    "StreamCancelled",
    "UpstreamEmptyBody",
    "UpstreamError",
    "UpstreamModelMissing",
    "UpstreamRejected",
    "UpstreamUnavailable",
]
