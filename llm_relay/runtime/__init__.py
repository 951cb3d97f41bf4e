"""Runtime package.

Keep this module dependency-light: importing `llm_relay.runtime.*` from unit
tests should not open database or HTTP connections.
"""

__all__: list[str] = []
