"""Ollama client wrapper and integration layer.

This package provides the async client used to run tool-enabled chat
generations against the Ollama API.
"""

from v0_bridge.ollama.client import OllamaClient
from v0_bridge.ollama.types import ChatResult, ToolCall

__all__ = ["ChatResult", "OllamaClient", "ToolCall"]
