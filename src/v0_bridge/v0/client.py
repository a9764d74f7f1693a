"""Async v0 Platform API client.

This module provides an async wrapper around httpx.AsyncClient for the v0
Platform API. Every method takes the validated tool input for its operation,
moves path parameters into the URL and passes the remaining fields through
unmodified as the JSON body or query string.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from v0_bridge.errors import RemoteOperationError
from v0_bridge.tools.schemas import (
    AssignProjectInput,
    ChatIdInput,
    CreateChatInput,
    CreateHookInput,
    CreateProjectInput,
    DeploymentIdInput,
    DeploymentLogsInput,
    DeploymentTargetInput,
    EmptyInput,
    FavoriteChatInput,
    FindChatsInput,
    ForkChatInput,
    HookIdInput,
    InitializeChatInput,
    ProjectIdInput,
    ResumeMessageInput,
    ScopeInput,
    SendMessageInput,
    UpdateChatInput,
    UpdateHookInput,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.v0.dev/v1"


def _segment(value: str) -> str:
    """Quote a value for use as a single URL path segment."""
    return quote(value, safe="")


class V0Client:
    """Async client for the v0 Platform API.

    The client is created once at startup and shared by all turns. It holds no
    per-request state, so concurrent calls from different turns are safe.

    Attributes:
        base_url: The API root (e.g., "https://api.v0.dev/v1")
        _client: The underlying httpx.AsyncClient instance
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the v0 client.

        Args:
            api_key: v0 API key sent as a bearer token
            base_url: The API root URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        else:
            logger.warning("No v0 API key configured; remote calls will be rejected")

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        logger.info(f"V0Client initialized with base URL: {self.base_url}")

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            RemoteOperationError: On transport failure or a non-2xx response
        """
        logger.debug(f"v0 {operation}: {method} {path}")

        try:
            response = await self._client.request(method, path, json=json, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"v0 {operation} failed to reach the API: {e}")
            raise RemoteOperationError(
                operation,
                f"Request to v0 API failed: {e}",
                detail=str(e),
            ) from e

        if response.is_error:
            try:
                detail: Any = response.json()
            except ValueError:
                detail = response.text
            logger.warning(f"v0 {operation} returned HTTP {response.status_code}")
            raise RemoteOperationError(
                operation,
                f"v0 API returned HTTP {response.status_code} for {operation}",
                status_code=response.status_code,
                detail=detail,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            return response.text

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()
        logger.debug("V0Client closed")

    # --- Chats ---

    async def init_chat(self, params: InitializeChatInput) -> Any:
        return await self._request("chats.init", "POST", "/chats/init", json=params.to_payload())

    async def create_chat(self, params: CreateChatInput) -> Any:
        return await self._request("chats.create", "POST", "/chats", json=params.to_payload())

    async def find_chats(self, params: FindChatsInput) -> Any:
        return await self._request("chats.find", "GET", "/chats", params=params.to_payload())

    async def delete_chat(self, params: ChatIdInput) -> Any:
        return await self._request(
            "chats.delete", "DELETE", f"/chats/{_segment(params.chat_id)}"
        )

    async def get_chat(self, params: ChatIdInput) -> Any:
        return await self._request(
            "chats.getById", "GET", f"/chats/{_segment(params.chat_id)}"
        )

    async def update_chat(self, params: UpdateChatInput) -> Any:
        return await self._request(
            "chats.update",
            "PATCH",
            f"/chats/{_segment(params.chat_id)}",
            json=params.to_payload(exclude={"chat_id"}),
        )

    async def favorite_chat(self, params: FavoriteChatInput) -> Any:
        return await self._request(
            "chats.favorite",
            "PUT",
            f"/chats/{_segment(params.chat_id)}/favorite",
            json=params.to_payload(exclude={"chat_id"}),
        )

    async def fork_chat(self, params: ForkChatInput) -> Any:
        return await self._request(
            "chats.fork",
            "POST",
            f"/chats/{_segment(params.chat_id)}/fork",
            json=params.to_payload(exclude={"chat_id"}),
        )

    async def send_message(self, params: SendMessageInput) -> Any:
        return await self._request(
            "chats.sendMessage",
            "POST",
            f"/chats/{_segment(params.chat_id)}/messages",
            json=params.to_payload(exclude={"chat_id"}),
        )

    async def resume_message(self, params: ResumeMessageInput) -> Any:
        return await self._request(
            "chats.resume",
            "POST",
            f"/chats/{_segment(params.chat_id)}/messages/{_segment(params.message_id)}/resume",
        )

    # --- Projects ---

    async def get_project_by_chat_id(self, params: ChatIdInput) -> Any:
        return await self._request(
            "projects.getByChatId", "GET", f"/chats/{_segment(params.chat_id)}/project"
        )

    async def find_projects(self, params: EmptyInput) -> Any:
        return await self._request("projects.find", "GET", "/projects")

    async def create_project(self, params: CreateProjectInput) -> Any:
        return await self._request(
            "projects.create", "POST", "/projects", json=params.to_payload()
        )

    async def get_project(self, params: ProjectIdInput) -> Any:
        return await self._request(
            "projects.getById", "GET", f"/projects/{_segment(params.project_id)}"
        )

    async def assign_project(self, params: AssignProjectInput) -> Any:
        return await self._request(
            "projects.assign",
            "POST",
            f"/projects/{_segment(params.project_id)}/assign",
            json=params.to_payload(exclude={"project_id"}),
        )

    # --- Deployments ---

    async def find_deployments(self, params: DeploymentTargetInput) -> Any:
        return await self._request(
            "deployments.find", "GET", "/deployments", params=params.to_payload()
        )

    async def create_deployment(self, params: DeploymentTargetInput) -> Any:
        return await self._request(
            "deployments.create", "POST", "/deployments", json=params.to_payload()
        )

    async def get_deployment(self, params: DeploymentIdInput) -> Any:
        return await self._request(
            "deployments.getById",
            "GET",
            f"/deployments/{_segment(params.deployment_id)}",
        )

    async def delete_deployment(self, params: DeploymentIdInput) -> Any:
        return await self._request(
            "deployments.delete",
            "DELETE",
            f"/deployments/{_segment(params.deployment_id)}",
        )

    async def find_deployment_logs(self, params: DeploymentLogsInput) -> Any:
        return await self._request(
            "deployments.findLogs",
            "GET",
            f"/deployments/{_segment(params.deployment_id)}/logs",
            params=params.to_payload(exclude={"deployment_id"}),
        )

    async def find_deployment_errors(self, params: DeploymentIdInput) -> Any:
        return await self._request(
            "deployments.findErrors",
            "GET",
            f"/deployments/{_segment(params.deployment_id)}/errors",
        )

    # --- Hooks ---

    async def find_hooks(self, params: EmptyInput) -> Any:
        return await self._request("hooks.find", "GET", "/hooks")

    async def create_hook(self, params: CreateHookInput) -> Any:
        return await self._request("hooks.create", "POST", "/hooks", json=params.to_payload())

    async def get_hook(self, params: HookIdInput) -> Any:
        return await self._request(
            "hooks.getById", "GET", f"/hooks/{_segment(params.hook_id)}"
        )

    async def update_hook(self, params: UpdateHookInput) -> Any:
        return await self._request(
            "hooks.update",
            "PATCH",
            f"/hooks/{_segment(params.hook_id)}",
            json=params.to_payload(exclude={"hook_id"}),
        )

    async def delete_hook(self, params: HookIdInput) -> Any:
        return await self._request(
            "hooks.delete", "DELETE", f"/hooks/{_segment(params.hook_id)}"
        )

    # --- Rate limits and user ---

    async def find_rate_limits(self, params: ScopeInput) -> Any:
        return await self._request(
            "rateLimits.find", "GET", "/rate-limits", params=params.to_payload()
        )

    async def get_user(self, params: EmptyInput) -> Any:
        return await self._request("user.get", "GET", "/user")

    async def get_user_billing(self, params: ScopeInput) -> Any:
        return await self._request(
            "user.getBilling", "GET", "/user/billing", params=params.to_payload()
        )

    async def get_user_plan(self, params: EmptyInput) -> Any:
        return await self._request("user.getPlan", "GET", "/user/plan")

    async def get_user_scopes(self, params: EmptyInput) -> Any:
        return await self._request("user.getScopes", "GET", "/user/scopes")
