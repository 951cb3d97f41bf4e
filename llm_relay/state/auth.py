"""Authentication results for socket handshakes."""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass


class AuthStatus(str, Enum):
    AUTHENTICATED = "authenticated"
    MISSING_COOKIE = "missing_cookie"
    UNKNOWN_SESSION = "unknown_session"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    user_id: int | str
    full_name: str | None = None


@dataclass(frozen=True, slots=True)
class AuthResult:
    status: AuthStatus
    user: AuthenticatedUser | None = None

    @property
    def authenticated(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATED and self.user is not None

    @property
    def service_error(self) -> bool:
        return self.status is AuthStatus.UNAVAILABLE


__all__ = ["AuthResult", "AuthStatus", "AuthenticatedUser"]
