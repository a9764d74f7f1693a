"""v0-bridge: Chat-assistant bridge exposing the v0 Platform API as LLM tools.

This package provides a FastAPI service that runs conversation turns against
an Ollama model, letting the model call schema-validated v0 Platform API
operations until it produces a final answer.
"""

__version__ = "0.1.0"

from v0_bridge.app import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
