"""Pydantic models for chat API requests and responses.

This module defines the request and response schemas for the chat endpoint,
which runs one turn over a caller-supplied conversation.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ConversationMessage(BaseModel):
    """A single message of the caller-supplied conversation."""

    role: Literal["system", "user", "assistant", "tool"] = Field(
        description="Message role"
    )
    content: str = Field(default="", description="Message text")
    tool_calls: list[dict[str, Any]] | None = Field(
        default=None, description="Tool calls made by the assistant (if any)"
    )
    tool_name: str | None = Field(
        default=None, description="Tool that produced this result (tool messages)"
    )


class ChatRequest(BaseModel):
    """Request body for POST /api/v1/chat."""

    messages: list[ConversationMessage] = Field(
        description="Conversation history, oldest first. The last message is usually the user's."
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"messages": [{"role": "user", "content": "What's 2+2?"}]},
                {
                    "messages": [
                        {"role": "user", "content": "Create a project named Foo"},
                    ]
                },
            ]
        }
    )


class ChatResponse(BaseModel):
    """Response body for POST /api/v1/chat.

    ``text`` is either the model's final answer or the fixed fallback message.
    """

    text: str = Field(description="Final answer text")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "I created the project **Foo**. Summary: one project created.",
            }
        }
    )
