"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
Each router module defines endpoints for a specific domain (health, chat).
"""

from v0_bridge.routers import chat, health

__all__ = [
    "chat",
    "health",
]
