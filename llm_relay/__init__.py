"""Smart Code Hub LLM relay: a WebSocket bridge from browsers to a local Ollama server."""

__version__ = "0.1.0"

__all__ = ["__version__"]
