"""Input contracts for the v0 tools.

Each tool accepts exactly one of the models below. Models forbid unknown
fields, use strict scalar types so that e.g. ``1`` is not accepted for a
string, and expose their fields under the camelCase names the v0 Platform API
uses on the wire.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel

ModelId = Literal["v0-1.5-sm", "v0-1.5-md", "v0-1.5-lg"]

Privacy = Literal["public", "private", "team", "team-edit", "unlisted"]

HookEvent = Literal[
    "chat.created",
    "chat.updated",
    "chat.deleted",
    "message.created",
    "message.updated",
    "message.deleted",
    "project.created",
    "project.updated",
    "project.deleted",
]


class ToolInput(BaseModel):
    """Base class for all tool input models."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        frozen=True,
        protected_namespaces=(),
    )

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """Reject explicit nulls; optional fields are omitted, never null."""
        if value is None:
            raise ValueError("null is not allowed, omit the field instead")
        return value

    def to_payload(self, exclude: set[str] | None = None) -> dict[str, Any]:
        """Return the validated fields under their wire names.

        Only fields that were present in the validated input are included, so
        the payload mirrors what the model sent.

        Args:
            exclude: Python field names to leave out (e.g. path parameters)

        Returns:
            dict: The payload keyed by camelCase field names
        """
        return self.model_dump(by_alias=True, exclude_unset=True, exclude=exclude)


class EmptyInput(ToolInput):
    """Input for operations that take no arguments."""


# --- Shared shapes ---


class FileEntry(ToolInput):
    name: StrictStr
    content: StrictStr


class ModelConfiguration(ToolInput):
    """Model configuration for a new v0 chat."""

    model_id: ModelId = Field(
        description="v0 model: v0-1.5-sm (fast), v0-1.5-md (balanced), v0-1.5-lg (complex tasks)"
    )
    image_generations: StrictBool = Field(description="Allow image generation")
    thinking: StrictBool = Field(description="Enable extended reasoning")


class ChatIdInput(ToolInput):
    chat_id: StrictStr


class DeploymentIdInput(ToolInput):
    deployment_id: StrictStr


class HookIdInput(ToolInput):
    hook_id: StrictStr


class ScopeInput(ToolInput):
    scope: StrictStr | None = None


# --- Chats ---


class InitializeChatInput(ToolInput):
    files: list[FileEntry] = Field(description="Files to seed the chat with")


class CreateChatInput(ToolInput):
    system: StrictStr = Field(description="System message for the v0 chat")
    message: StrictStr = Field(description="First user message")
    model_configuration: ModelConfiguration = Field(
        description="Object with modelId (v0-1.5-sm, v0-1.5-md or v0-1.5-lg), "
        "imageGenerations (boolean) and thinking (boolean)"
    )


class FindChatsInput(ToolInput):
    limit: StrictStr | None = None
    offset: StrictStr | None = None
    is_favorite: StrictStr | None = None


class UpdateChatInput(ChatIdInput):
    name: StrictStr | None = None
    privacy: Privacy | None = None


class FavoriteChatInput(ChatIdInput):
    is_favorite: StrictBool


class ForkChatInput(ChatIdInput):
    version_id: StrictStr


class SendMessageInput(ChatIdInput):
    message: StrictStr


class ResumeMessageInput(ChatIdInput):
    message_id: StrictStr


# --- Projects ---


class CreateProjectInput(ToolInput):
    name: StrictStr
    description: StrictStr | None = None


class ProjectIdInput(ToolInput):
    project_id: StrictStr


class AssignProjectInput(ProjectIdInput):
    chat_id: StrictStr


# --- Deployments ---


class DeploymentTargetInput(ToolInput):
    project_id: StrictStr
    chat_id: StrictStr
    version_id: StrictStr


class DeploymentLogsInput(DeploymentIdInput):
    since: StrictStr | None = None


# --- Hooks ---


class CreateHookInput(ToolInput):
    name: StrictStr
    url: StrictStr
    events: list[HookEvent] = Field(description="Events the webhook subscribes to")
    chat_id: StrictStr | None = None
    project_id: StrictStr | None = None


class UpdateHookInput(HookIdInput):
    name: StrictStr | None = None
    url: StrictStr | None = None
    events: list[HookEvent] | None = None
