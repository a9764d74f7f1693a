"""Type definitions for Ollama integration.

This module contains dataclasses representing the parts of an Ollama chat
response that the turn orchestrator works with: the reply text and any tool
calls the model requested.
"""

import json
from dataclasses import dataclass, field
from typing import Any


def _get_value(obj: Any, key: str, default: Any = None) -> Any:
    """Get a value from either an object attribute or a dict key."""
    if isinstance(obj, dict):
        return obj.get(key, default)
    return getattr(obj, key, default)


@dataclass
class ToolCall:
    """A single tool call requested by the model.

    Attributes:
        name: Name of the tool the model selected
        arguments: Raw, unvalidated arguments generated by the model
    """

    name: str
    arguments: Any = field(default_factory=dict)

    @staticmethod
    def from_ollama(tool_call: Any) -> "ToolCall":
        """Create a ToolCall from an Ollama tool call object or dict."""
        function = _get_value(tool_call, "function", {})
        name = _get_value(function, "name", "") or ""
        arguments = _get_value(function, "arguments", {})

        # Some models emit the arguments as a JSON string
        if isinstance(arguments, str):
            try:
                arguments = json.loads(arguments)
            except json.JSONDecodeError:
                pass

        if arguments is None:
            arguments = {}

        return ToolCall(name=name, arguments=arguments)

    def to_message_dict(self) -> dict[str, Any]:
        """Render the call in the shape Ollama expects in assistant messages.

        Ollama requires an object here; arguments of any other shape are kept
        verbatim under ``_raw`` so the history shows what the model sent.
        """
        if isinstance(self.arguments, dict):
            arguments = self.arguments
        else:
            arguments = {"_raw": self.arguments}
        return {"function": {"name": self.name, "arguments": arguments}}


@dataclass
class ChatResult:
    """The outcome of one non-streamed chat generation.

    Attributes:
        content: Reply text (may be empty when the model only calls tools)
        tool_calls: Tool calls requested by the model, in emission order
        model: Name of the model that produced the reply
        eval_count: Number of tokens generated
        prompt_eval_count: Number of tokens in the prompt
    """

    content: str = ""
    tool_calls: list[ToolCall] = field(default_factory=list)
    model: str = ""
    eval_count: int | None = None
    prompt_eval_count: int | None = None

    @staticmethod
    def from_ollama_response(response: Any) -> "ChatResult":
        """Create a ChatResult from an Ollama chat response object or dict."""
        message = _get_value(response, "message", {}) or {}
        raw_tool_calls = _get_value(message, "tool_calls", None) or []

        return ChatResult(
            content=_get_value(message, "content", "") or "",
            tool_calls=[ToolCall.from_ollama(call) for call in raw_tool_calls],
            model=_get_value(response, "model", "") or "",
            eval_count=_get_value(response, "eval_count"),
            prompt_eval_count=_get_value(response, "prompt_eval_count"),
        )

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)

    def to_assistant_message(self) -> dict[str, Any]:
        """Render this reply as an assistant message for the next model call."""
        message: dict[str, Any] = {"role": "assistant", "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = [call.to_message_dict() for call in self.tool_calls]
        return message
