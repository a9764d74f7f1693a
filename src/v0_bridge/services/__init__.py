"""Business logic services for v0-bridge.

This package contains the turn orchestrator and the fixed prompt texts it
uses.
"""

from v0_bridge.services.orchestrator import TurnOrchestrator
from v0_bridge.services.system_prompts import FALLBACK_MESSAGE, SYSTEM_PROMPT

__all__ = ["FALLBACK_MESSAGE", "SYSTEM_PROMPT", "TurnOrchestrator"]
