from .runtime import RuntimeDeps
from .phase import ConnectionPhase
from .outcome import RelayOutcome
from .settings import AppSettings
from .connection import ConnectionState, InflightRequest
from .records import RelayResult, StreamRecord, GenerationRequest
from .auth import AuthResult, AuthStatus, AuthenticatedUser

__all__ = [
    "AppSettings",
    "AuthResult",
    "AuthStatus",
    "AuthenticatedUser",
    "ConnectionPhase",
    "ConnectionState",
    "GenerationRequest",
    "InflightRequest",
    "RelayOutcome",
    "RelayResult",
    "RuntimeDeps",
    "StreamRecord",
]
