"""CLI entry point for v0-bridge.

This module provides the command-line interface for starting the v0-bridge
server. It can be invoked as `v0-bridge` (via the script entry point) or
`python -m v0_bridge`.

Every flag is optional; a flag that is given overrides the matching
V0_BRIDGE_* environment variable.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

import uvicorn

from v0_bridge import __version__, create_app
from v0_bridge.config import V0BridgeSettings

# Settings fields that can be overridden from the command line
CLI_OVERRIDES = (
    "host",
    "port",
    "ollama_host",
    "model",
    "max_tool_rounds",
    "turn_timeout_seconds",
    "log_level",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="v0-bridge",
        description="Chat-assistant bridge exposing the v0 Platform API as LLM tools",
    )
    parser.add_argument("--version", action="version", version=f"v0-bridge {__version__}")

    server = parser.add_argument_group("server")
    server.add_argument("--host", help="Bind address (default: 127.0.0.1, env V0_BRIDGE_HOST)")
    server.add_argument("--port", type=int, help="Bind port (default: 8000, env V0_BRIDGE_PORT)")
    server.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, env V0_BRIDGE_LOG_LEVEL)",
    )

    model = parser.add_argument_group("model")
    model.add_argument(
        "--ollama-host",
        help="Ollama server URL (default: http://localhost:11434, env V0_BRIDGE_OLLAMA_HOST)",
    )
    model.add_argument("--model", help="Ollama model (default: llama3.1:8b, env V0_BRIDGE_MODEL)")

    turn = parser.add_argument_group("turn limits")
    turn.add_argument(
        "--max-tool-rounds",
        type=int,
        help="Tool rounds allowed per turn (default: 8, env V0_BRIDGE_MAX_TOOL_ROUNDS)",
    )
    turn.add_argument(
        "--turn-timeout-seconds",
        type=float,
        help="Deadline for one turn (default: 120, env V0_BRIDGE_TURN_TIMEOUT_SECONDS)",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> V0BridgeSettings:
    """Load settings from the environment, with given flags taking precedence."""
    overrides = {
        name: getattr(args, name)
        for name in CLI_OVERRIDES
        if getattr(args, name, None) is not None
    }
    return V0BridgeSettings(**overrides)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments, configure logging and serve the app with uvicorn."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        f"Starting v0-bridge {__version__} on {settings.host}:{settings.port} "
        f"(model {settings.model}, {settings.max_tool_rounds} tool rounds, "
        f"{settings.turn_timeout_seconds}s per turn)"
    )

    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
