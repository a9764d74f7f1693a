"""Tool definitions and the immutable tool catalog.

A ToolDefinition binds a name, a description and an input model to a single
remote operation. Invoking a tool validates the untyped arguments produced by
the model against the input model first; the operation only ever receives the
narrowed, already-valid input.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from v0_bridge.errors import DuplicateToolError, SchemaValidationError
from v0_bridge.tools.function_schema import to_function_schema
from v0_bridge.tools.schemas import ToolInput

logger = logging.getLogger(__name__)

Operation = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolSpec:
    """Declarative entry for one tool.

    Attributes:
        name: Stable identifier the model selects the tool by
        description: Human-readable description shown to the model
        input_model: Input contract for the tool's arguments
        operation_name: Name of the client method that performs the call
    """

    name: str
    description: str
    input_model: type[ToolInput]
    operation_name: str


@dataclass(frozen=True)
class ToolDefinition:
    """A self-describing, invocable tool.

    Attributes:
        name: Stable identifier the model selects the tool by
        description: Human-readable description shown to the model
        input_model: Input contract for the tool's arguments
        operation: Async callable performing the remote call
    """

    name: str
    description: str
    input_model: type[ToolInput]
    operation: Operation

    def validate(self, arguments: Any) -> ToolInput:
        """Validate untyped arguments against the input model.

        Args:
            arguments: Arguments as generated by the model

        Returns:
            ToolInput: The narrowed input

        Raises:
            SchemaValidationError: If the arguments violate the input contract
        """
        if arguments is None:
            arguments = {}
        try:
            return self.input_model.model_validate(arguments)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False)
            raise SchemaValidationError(self.name, errors) from e

    async def invoke(self, arguments: Any) -> Any:
        """Validate the arguments, then call the remote operation once.

        Raises:
            SchemaValidationError: If the arguments are invalid; the operation
                is not called in that case
            RemoteOperationError: If the remote call fails
        """
        params = self.validate(arguments)
        logger.debug(f"Invoking tool {self.name}")
        return await self.operation(params)

    def to_ollama_tool(self) -> dict[str, Any]:
        """Render the function-calling schema for this tool."""
        return to_function_schema(self.name, self.description, self.input_model)


class ToolCatalog(Mapping[str, ToolDefinition]):
    """Read-only mapping from tool name to ToolDefinition.

    Built once at startup and shared by all turns without synchronization.
    """

    def __init__(self, tools: Iterable[ToolDefinition]) -> None:
        registry: dict[str, ToolDefinition] = {}
        for tool in tools:
            if tool.name in registry:
                raise DuplicateToolError(tool.name)
            registry[tool.name] = tool
        self._tools = MappingProxyType(registry)
        self._ollama_tools = tuple(tool.to_ollama_tool() for tool in registry.values())

    def __getitem__(self, name: str) -> ToolDefinition:
        return self._tools[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def to_ollama_tools(self) -> list[dict[str, Any]]:
        """Return the function-calling schemas for every tool in the catalog."""
        return list(self._ollama_tools)


def build_tool_catalog(client: Any, specs: Iterable[ToolSpec] | None = None) -> ToolCatalog:
    """Build the tool catalog by binding each spec to a client method.

    Args:
        client: Object exposing one async method per spec's operation_name
                (normally a V0Client)
        specs: Declarative tool table; defaults to the full v0 catalog

    Returns:
        ToolCatalog: The immutable catalog

    Raises:
        DuplicateToolError: If two specs share a name
        AttributeError: If the client lacks a referenced operation
    """
    if specs is None:
        from v0_bridge.tools.definitions import TOOL_SPECS

        specs = TOOL_SPECS

    catalog = ToolCatalog(
        ToolDefinition(
            name=spec.name,
            description=spec.description,
            input_model=spec.input_model,
            operation=getattr(client, spec.operation_name),
        )
        for spec in specs
    )
    logger.info(f"Built tool catalog with {len(catalog)} tools")
    return catalog
