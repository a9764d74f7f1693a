"""Chat API endpoint.

This module provides the endpoint that runs one conversation turn: the
caller posts the conversation so far and receives the final answer text.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from v0_bridge.dependencies import get_orchestrator
from v0_bridge.models.chat import ChatRequest, ChatResponse
from v0_bridge.services import TurnOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def respond_to_conversation(
    request_body: ChatRequest,
    orchestrator: TurnOrchestrator = Depends(get_orchestrator),
) -> ChatResponse:
    """Run one turn over the supplied conversation.

    The model may call v0 tools any number of times (up to the configured
    round cap) before answering. Failures inside the turn never surface as
    HTTP errors; the response then carries the fallback message instead.

    Args:
        request_body: Chat request containing the conversation
        orchestrator: Injected turn orchestrator

    Returns:
        ChatResponse with the final answer text

    Raises:
        HTTPException: 400 if the conversation is empty
    """
    if not request_body.messages:
        raise HTTPException(
            status_code=400,
            detail={
                "error": {
                    "code": "empty_history",
                    "message": "Conversation has no messages to process",
                    "details": {},
                }
            },
        )

    logger.info(f"Received turn with {len(request_body.messages)} messages")

    text = await orchestrator.respond(request_body.messages)

    logger.info(f"Turn finished: {len(text)} characters")
    return ChatResponse(text=text)
