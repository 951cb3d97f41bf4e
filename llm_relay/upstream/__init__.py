from .client import OllamaClient
from .decoder import NdjsonDecoder
from .payload import build_generate_payload, build_generation_request

__all__ = ["NdjsonDecoder", "OllamaClient", "build_generate_payload", "build_generation_request"]
