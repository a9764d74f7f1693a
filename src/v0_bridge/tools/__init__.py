"""Tool catalog, schema conversion, and execution layer.

This package turns the declarative table of v0 Platform API operations into
schema-validated tools the model can call, converts their input models to
function-calling schemas, and executes tool calls during a turn.
"""

from v0_bridge.tools.catalog import (
    ToolCatalog,
    ToolDefinition,
    ToolSpec,
    build_tool_catalog,
)
from v0_bridge.tools.execution import ToolExecutionService, ToolResult

__all__ = [
    "ToolCatalog",
    "ToolDefinition",
    "ToolExecutionService",
    "ToolResult",
    "ToolSpec",
    "build_tool_catalog",
]
