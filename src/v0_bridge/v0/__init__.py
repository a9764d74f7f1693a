"""v0 Platform API client layer.

This package provides the async HTTP client for the remote platform whose
chat, project, deployment, webhook and account operations the tools wrap.
"""

from v0_bridge.v0.client import V0Client

__all__ = ["V0Client"]
