"""Tool execution for model-requested tool calls.

This module resolves tool calls emitted by the model against the catalog and
runs them. Errors the model can act on (unknown tool, invalid arguments,
rejected remote call) are contained here and returned as failed results so
the model can correct itself or explain the failure. Anything else
propagates to the turn orchestrator.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any

from v0_bridge.errors import RemoteOperationError, SchemaValidationError
from v0_bridge.ollama.types import ToolCall
from v0_bridge.tools.catalog import ToolCatalog

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Result of executing one tool call.

    Attributes:
        tool_name: Name of the tool the model called
        ok: Whether the call succeeded
        content: Result value on success, error object on failure
    """

    tool_name: str
    ok: bool
    content: Any

    @staticmethod
    def success(tool_name: str, value: Any) -> "ToolResult":
        return ToolResult(tool_name=tool_name, ok=True, content={"result": value})

    @staticmethod
    def failure(
        tool_name: str, error_type: str, message: str, details: Any = None
    ) -> "ToolResult":
        return ToolResult(
            tool_name=tool_name,
            ok=False,
            content={
                "error": {
                    "type": error_type,
                    "message": message,
                    "details": details if details is not None else {},
                }
            },
        )

    def to_message(self) -> dict[str, Any]:
        """Render the result as a tool message for the next model call."""
        return {
            "role": "tool",
            "tool_name": self.tool_name,
            "content": json.dumps(self.content, default=str),
        }


class ToolExecutionService:
    """Service for executing model-requested tool calls against the catalog.

    Attributes:
        catalog: The immutable tool catalog
    """

    def __init__(self, catalog: ToolCatalog) -> None:
        self.catalog = catalog

    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute a single tool call.

        Args:
            tool_call: The tool call as emitted by the model

        Returns:
            ToolResult: Success value or a contained, structured failure
        """
        tool = self.catalog.get(tool_call.name)
        if tool is None:
            logger.warning(f"Model requested unknown tool: {tool_call.name!r}")
            return ToolResult.failure(
                tool_call.name,
                "unknown_tool",
                f"No tool named '{tool_call.name}' is available",
                {"available_tools": sorted(self.catalog)},
            )

        try:
            value = await tool.invoke(tool_call.arguments)
        except SchemaValidationError as e:
            logger.warning(f"Schema validation failed for {tool.name}: {e.errors}")
            return ToolResult.failure(
                tool.name, "schema_validation_error", str(e), e.errors
            )
        except RemoteOperationError as e:
            logger.warning(
                f"Remote operation {e.operation} failed for {tool.name}: "
                f"status={e.status_code} {e}"
            )
            return ToolResult.failure(
                tool.name,
                "remote_operation_error",
                str(e),
                {"status_code": e.status_code, "response": e.detail},
            )

        logger.info(f"Tool {tool.name} executed successfully")
        return ToolResult.success(tool.name, value)

    async def execute_all(self, tool_calls: list[ToolCall]) -> list[ToolResult]:
        """Execute one round of tool calls concurrently.

        Results are returned in the order the calls were requested. If a call
        raises an error that is not contained as a failed result, the other
        calls of the round are cancelled and awaited before the first such
        error is re-raised.
        """
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self.execute(call)) for call in tool_calls]
        except ExceptionGroup as eg:
            logger.error(f"Tool round aborted, {len(eg.exceptions)} call(s) failed")
            raise eg.exceptions[0]
        return [task.result() for task in tasks]
