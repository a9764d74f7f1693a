"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from v0_bridge.models.chat import ChatRequest, ChatResponse, ConversationMessage
from v0_bridge.models.health import HealthResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ConversationMessage",
    "HealthResponse",
]
