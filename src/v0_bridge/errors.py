"""Exception types for v0-bridge.

Tool-level errors (schema validation, remote operation failures) are contained
at the tool boundary and reported back to the model as failed tool results.
Turn-level errors (generation failures, round cap) end the turn and are
replaced with the fallback text by the orchestrator.
"""

from typing import Any


class V0BridgeError(Exception):
    """Base class for all v0-bridge errors."""


class DuplicateToolError(V0BridgeError):
    """Raised when the tool catalog is built with a repeated tool name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' is registered more than once")


class SchemaValidationError(V0BridgeError):
    """Tool-call arguments do not satisfy the tool's input contract.

    Attributes:
        tool_name: Name of the tool whose arguments were rejected
        errors: Structured error list (pydantic ``errors()`` format)
    """

    def __init__(self, tool_name: str, errors: list[dict[str, Any]]) -> None:
        self.tool_name = tool_name
        self.errors = errors
        super().__init__(
            f"Invalid arguments for tool '{tool_name}': {len(errors)} validation error(s)"
        )


class RemoteOperationError(V0BridgeError):
    """A v0 Platform API call was rejected or could not be completed.

    Attributes:
        operation: Name of the remote operation (e.g. "projects.create")
        status_code: HTTP status code, or None for transport failures
        detail: Response body or transport error detail
    """

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: int | None = None,
        detail: Any = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class GenerationFailure(V0BridgeError):
    """The language-model provider call failed."""


class ToolRoundLimitExceeded(V0BridgeError):
    """The model kept requesting tools past the per-turn round cap."""

    def __init__(self, max_rounds: int) -> None:
        self.max_rounds = max_rounds
        super().__init__(f"Exceeded maximum of {max_rounds} tool rounds per turn")
