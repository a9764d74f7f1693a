"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
routers to inject common dependencies like settings and services.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from v0_bridge.config import V0BridgeSettings
from v0_bridge.services import TurnOrchestrator


@lru_cache
def get_settings() -> V0BridgeSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the V0_BRIDGE_ prefix.

    Returns:
        V0BridgeSettings: The application configuration settings.
    """
    return V0BridgeSettings()


def get_orchestrator(request: Request) -> TurnOrchestrator:
    """Get the turn orchestrator from app state.

    The orchestrator is created once during application startup and is
    stateless across turns, so a single instance serves all requests.

    Args:
        request: The FastAPI request object.

    Returns:
        TurnOrchestrator: The orchestrator instance.

    Raises:
        HTTPException: If the orchestrator is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "orchestrator"):
        raise HTTPException(
            status_code=503,
            detail="Turn orchestrator not initialized",
        )
    return request.app.state.orchestrator
