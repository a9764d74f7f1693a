"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from v0_bridge import __version__
from v0_bridge.models.health import HealthResponse
from v0_bridge.ollama import OllamaClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of v0-bridge.
    Also checks connectivity to the Ollama server if the client is initialized
    and reports the configured model and catalog size.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    ollama_connected = None
    ollama_host = None
    tool_count = None

    # Check if Ollama client is available and test connectivity
    if hasattr(request.app.state, "ollama_client"):
        ollama_client: OllamaClient = request.app.state.ollama_client
        ollama_host = ollama_client.host

        try:
            ollama_connected = await ollama_client.check_connection()
            logger.debug(f"Ollama connectivity check: {ollama_connected}")
        except Exception as e:
            logger.warning(f"Ollama connectivity check failed: {e}")
            ollama_connected = False

    if hasattr(request.app.state, "tool_catalog"):
        tool_count = len(request.app.state.tool_catalog)

    return HealthResponse(
        status="ok",
        version=__version__,
        ollama_connected=ollama_connected,
        ollama_host=ollama_host,
        model=request.app.state.settings.model,
        tool_count=tool_count,
    )
