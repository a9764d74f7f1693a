"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from v0_bridge import __version__
from v0_bridge.config import V0BridgeSettings
from v0_bridge.ollama import OllamaClient
from v0_bridge.routers import chat, health
from v0_bridge.services import TurnOrchestrator
from v0_bridge.tools import ToolExecutionService, build_tool_catalog
from v0_bridge.v0 import V0Client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Expensive objects (the Ollama and v0 clients, the tool catalog and the
    orchestrator) are created once at startup and stored in app.state for
    reuse across all requests. The tool catalog is immutable after this
    point; building it fails startup if two tools share a name.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: V0BridgeSettings = app.state.settings

    # Startup: Initialize clients
    app.state.ollama_client = OllamaClient(host=settings.ollama_host)
    logger.info(f"Initialized Ollama client with host: {settings.ollama_host}")

    app.state.v0_client = V0Client(
        api_key=settings.v0_api_key,
        base_url=settings.v0_api_url,
        timeout=settings.v0_request_timeout,
    )

    # Build the tool catalog and the orchestrator
    app.state.tool_catalog = build_tool_catalog(app.state.v0_client)
    app.state.orchestrator = TurnOrchestrator(
        ollama_client=app.state.ollama_client,
        tool_executor=ToolExecutionService(app.state.tool_catalog),
        model=settings.model,
        max_tool_rounds=settings.max_tool_rounds,
        turn_timeout=settings.turn_timeout_seconds,
    )

    # Check initial connectivity
    connected = await app.state.ollama_client.check_connection()
    if connected:
        logger.info("Successfully connected to Ollama")
    else:
        logger.warning("Could not connect to Ollama - check if server is running")

    yield

    # Shutdown: Clean up resources
    if hasattr(app.state, "v0_client"):
        await app.state.v0_client.close()
        logger.info("v0 client closed")
    if hasattr(app.state, "ollama_client"):
        await app.state.ollama_client.close()
        logger.info("Ollama client closed")


def create_app(settings: V0BridgeSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI instance with all routers,
    middleware, and configuration applied. It can accept an optional
    settings object for testing or explicit configuration.

    Args:
        settings: Optional V0BridgeSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from v0_bridge.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="v0-bridge",
        description="Chat-assistant bridge exposing the v0 Platform API as LLM tools",
        version=__version__,
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan access
    app.state.settings = settings

    # Configure CORS
    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health.router)
    app.include_router(chat.router)

    return app
