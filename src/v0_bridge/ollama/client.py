"""Async Ollama client wrapper.

This module provides an async wrapper around the ollama.AsyncClient for
communicating with the Ollama API. The client is designed to be created once
at startup and reused across all turns.
"""

import logging
from typing import Any

import ollama

from v0_bridge.errors import GenerationFailure
from v0_bridge.ollama.types import ChatResult

logger = logging.getLogger(__name__)


class OllamaClient:
    """Async client for interacting with Ollama API.

    This client wraps ollama.AsyncClient and provides the single generation
    call the turn orchestrator needs, plus a connectivity check for the
    health endpoint.

    Attributes:
        host: The Ollama server URL (e.g., "http://localhost:11434")
        _client: The underlying ollama.AsyncClient instance
    """

    def __init__(self, host: str) -> None:
        """Initialize the Ollama client.

        Args:
            host: The Ollama server URL
        """
        self.host = host
        self._client = ollama.AsyncClient(host=host)
        logger.info(f"OllamaClient initialized with host: {host}")

    async def check_connection(self) -> bool:
        """Check if the Ollama server is reachable.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            # Try to list models as a connectivity check
            await self._client.list()
            logger.debug("Ollama connection check: successful")
            return True
        except Exception as e:
            logger.warning(f"Ollama connection check failed: {e}")
            return False

    async def chat(
        self,
        model: str,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        options: dict[str, Any] | None = None,
    ) -> ChatResult:
        """Run one non-streamed chat generation.

        The model decides on its own whether to answer directly or to request
        tool calls; tool choice is always automatic.

        Args:
            model: The model name to use for the chat
            messages: List of message dicts in Ollama format:
                      [{"role": "user", "content": "..."}, ...]
            tools: Function-calling tool schemas offered to the model
            options: Optional model parameters (temperature, etc.)

        Returns:
            ChatResult: Reply text and any requested tool calls

        Raises:
            GenerationFailure: If the Ollama API request fails
        """
        logger.debug(
            f"Starting chat with model: {model}, messages: {len(messages)}, "
            f"tools: {len(tools or [])}"
        )

        try:
            response = await self._client.chat(
                model=model,
                messages=messages,
                tools=tools,
                stream=False,
                options=options,
            )
        except Exception as e:
            logger.error(f"Chat request failed: {e}")
            raise GenerationFailure(f"Ollama chat request failed: {e}") from e

        result = ChatResult.from_ollama_response(response)
        logger.debug(
            f"Chat completed: content_length={len(result.content)}, "
            f"tool_calls={len(result.tool_calls)}"
        )
        return result

    async def close(self) -> None:
        """Close the client and clean up resources.

        ollama.AsyncClient uses httpx internally which handles cleanup, so
        this only exists to mirror the lifespan of the other clients.
        """
        logger.debug("OllamaClient closed")
