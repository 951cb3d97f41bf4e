"""Run the relay under uvicorn: `python -m llm_relay` or the `llm-relay` script."""

from __future__ import annotations

import os
import argparse

import uvicorn

from llm_relay.config.server import ENV_HOST, ENV_PORT, DEFAULT_HOST, DEFAULT_PORT


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smart Code Hub LLM relay")
    parser.add_argument("--host", default=os.getenv(ENV_HOST, DEFAULT_HOST))
    parser.add_argument("--port", type=int, default=int(os.getenv(ENV_PORT, str(DEFAULT_PORT))))
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    uvicorn.run("llm_relay.server:app", host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()
