"""Prompt relaying: single-flight sessions, stream forwarding and framed sends."""

from .sink import ResponseSink
from .session import RelaySession
from .streamer import relay_stream

__all__ = ["RelaySession", "ResponseSink", "relay_stream"]
