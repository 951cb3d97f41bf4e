"""Assistant persona and canned replies."""

from __future__ import annotations

ENV_RELAY_SYSTEM_PROMPT = "RELAY_SYSTEM_PROMPT"
ENV_RELAY_SYSTEM_PROMPT_STYLE = "RELAY_SYSTEM_PROMPT_STYLE"
ENV_RELAY_FRAMING = "RELAY_FRAMING"

DEFAULT_RELAY_SYSTEM_PROMPT = (
    "You are Smart Code Hub, a helpful coding assistant. You answer questions about programming, "
    "Data Structures and Algorithms (DSA), debugging and software tooling. You are not developed by "
    "OpenAI or Meta. Be polite, precise and informative, and prefer short runnable examples."
)

# "system": sent as the generate request's `system` field.
# "prefix": prepended to the prompt text.
# "none":   no preamble at all.
SYSTEM_PROMPT_STYLE_SYSTEM = "system"
SYSTEM_PROMPT_STYLE_PREFIX = "prefix"
SYSTEM_PROMPT_STYLE_NONE = "none"
SYSTEM_PROMPT_STYLES = frozenset({SYSTEM_PROMPT_STYLE_SYSTEM, SYSTEM_PROMPT_STYLE_PREFIX, SYSTEM_PROMPT_STYLE_NONE})
DEFAULT_RELAY_SYSTEM_PROMPT_STYLE = SYSTEM_PROMPT_STYLE_SYSTEM

PREFIX_PROMPT_TEMPLATE = "{system}\n\nUser: {prompt}"

BUSY_MESSAGE = "Still answering your previous question. Please wait for it to finish."
TIMEOUT_MESSAGE = "The model took too long to answer (limit {timeout_s:g}s). Please try again."
INTERNAL_ERROR_MESSAGE = "Something went wrong while generating a response. Please try again."
EMPTY_PROMPT_MESSAGE = "Prompt must not be empty."
PROMPT_TOO_LONG_MESSAGE = "Prompt is too long ({length} characters, limit {limit})."
AUTH_REQUIRED_MESSAGE = "Authentication required. Please log in again."
AUTH_UNAVAILABLE_MESSAGE = "Authentication service is temporarily unavailable. Please retry shortly."
AT_CAPACITY_MESSAGE = "Server cannot accept new connections. Please try again later."

__all__ = [
    "ENV_RELAY_SYSTEM_PROMPT",
    "ENV_RELAY_SYSTEM_PROMPT_STYLE",
    "ENV_RELAY_FRAMING",
    "DEFAULT_RELAY_SYSTEM_PROMPT",
    "SYSTEM_PROMPT_STYLE_SYSTEM",
    "SYSTEM_PROMPT_STYLE_PREFIX",
    "SYSTEM_PROMPT_STYLE_NONE",
    "SYSTEM_PROMPT_STYLES",
    "DEFAULT_RELAY_SYSTEM_PROMPT_STYLE",
    "PREFIX_PROMPT_TEMPLATE",
    "BUSY_MESSAGE",
    "TIMEOUT_MESSAGE",
    "INTERNAL_ERROR_MESSAGE",
    "EMPTY_PROMPT_MESSAGE",
    "PROMPT_TOO_LONG_MESSAGE",
    "AUTH_REQUIRED_MESSAGE",
    "AUTH_UNAVAILABLE_MESSAGE",
    "AT_CAPACITY_MESSAGE",
]
