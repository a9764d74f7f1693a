"""Turn orchestration service.

This module provides the TurnOrchestrator which drives one user turn to a
final answer: it calls the model with the system prompt, the conversation and
the full tool catalog, executes any tool calls the model requests, feeds the
results back, and repeats until the model replies with text.

Per turn the flow is Idle -> ModelGenerating -> (ToolRound -> ModelGenerating)*
-> Done, or Failed, in which case the fixed fallback text is returned.
"""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from v0_bridge.errors import GenerationFailure, ToolRoundLimitExceeded
from v0_bridge.ollama import OllamaClient
from v0_bridge.services.system_prompts import FALLBACK_MESSAGE, SYSTEM_PROMPT
from v0_bridge.tools import ToolExecutionService

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOOL_ROUNDS = 8
DEFAULT_TURN_TIMEOUT_SECONDS = 120.0


def convert_messages_to_ollama_format(messages: Sequence[Any]) -> list[dict[str, Any]]:
    """Convert conversation messages to Ollama API format.

    Accepts pydantic message models or plain dicts. The input sequence is
    not modified.

    Args:
        messages: Caller-supplied conversation, oldest first

    Returns:
        List of message dicts in Ollama format: [{"role": "...", "content": "..."}, ...]
    """
    ollama_messages = []

    for msg in messages:
        data = msg.model_dump() if hasattr(msg, "model_dump") else dict(msg)

        ollama_msg: dict[str, Any] = {
            "role": data.get("role"),
            "content": data.get("content") or "",
        }

        # Assistant tool calls and tool result names carry over when present
        if data.get("tool_calls"):
            ollama_msg["tool_calls"] = data["tool_calls"]
        if data.get("tool_name"):
            ollama_msg["tool_name"] = data["tool_name"]

        ollama_messages.append(ollama_msg)

    return ollama_messages


class TurnOrchestrator:
    """Service for driving a single conversation turn to a final answer.

    The orchestrator keeps no state between turns; concurrent turns only
    share the immutable tool catalog and the clients.

    Attributes:
        ollama_client: The language-model provider client
        tool_executor: Executes tool calls against the catalog
        model: Ollama model name
        max_tool_rounds: Maximum number of tool rounds per turn
        turn_timeout: Deadline for the whole turn in seconds
        system_prompt: System prompt sent with every turn
    """

    def __init__(
        self,
        ollama_client: OllamaClient,
        tool_executor: ToolExecutionService,
        model: str,
        max_tool_rounds: int = DEFAULT_MAX_TOOL_ROUNDS,
        turn_timeout: float | None = DEFAULT_TURN_TIMEOUT_SECONDS,
        system_prompt: str = SYSTEM_PROMPT,
    ) -> None:
        self.ollama_client = ollama_client
        self.tool_executor = tool_executor
        self.model = model
        self.max_tool_rounds = max_tool_rounds
        self.turn_timeout = turn_timeout
        self.system_prompt = system_prompt
        self._tools = tool_executor.catalog.to_ollama_tools()

    async def respond(self, messages: Sequence[Any]) -> str:
        """Run one turn and return the final answer text.

        Never raises for failures inside the turn: provider errors, deadline
        expiry, the round cap and unexpected exceptions are logged by category
        and replaced with the fallback message.

        Args:
            messages: Caller-supplied conversation, oldest first

        Returns:
            str: The model's final answer, or the fallback message
        """
        try:
            return await asyncio.wait_for(
                self._run_turn(messages), timeout=self.turn_timeout
            )
        except asyncio.TimeoutError:
            logger.error(f"Turn exceeded deadline of {self.turn_timeout}s")
        except GenerationFailure as e:
            logger.error(f"Generation failed: {e}")
        except ToolRoundLimitExceeded as e:
            logger.error(f"Turn aborted: {e}")
        except Exception:
            logger.exception("Unexpected error while processing turn")
        return FALLBACK_MESSAGE

    async def _run_turn(self, messages: Sequence[Any]) -> str:
        """Alternate model calls and tool rounds until the model answers."""
        conversation = [{"role": "system", "content": self.system_prompt}]
        conversation.extend(convert_messages_to_ollama_format(messages))

        logger.info(f"Starting turn with {len(messages)} messages and model {self.model}")

        rounds = 0
        while True:
            result = await self.ollama_client.chat(
                model=self.model,
                messages=conversation,
                tools=self._tools,
            )

            if not result.has_tool_calls:
                logger.info(
                    f"Turn completed after {rounds} tool round(s): "
                    f"{len(result.content)} characters"
                )
                return result.content

            if rounds >= self.max_tool_rounds:
                raise ToolRoundLimitExceeded(self.max_tool_rounds)
            rounds += 1

            logger.info(
                f"Tool round {rounds}: "
                f"{', '.join(call.name for call in result.tool_calls)}"
            )
            tool_results = await self.tool_executor.execute_all(result.tool_calls)

            conversation.append(result.to_assistant_message())
            conversation.extend(tool_result.to_message() for tool_result in tool_results)
