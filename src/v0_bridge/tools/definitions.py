"""The v0 tool table.

Each entry names a tool, describes it for the model, declares its input
model and points at the V0Client method that performs the call. Tool names
are stable identifiers the system prompt and the model rely on.
"""

from v0_bridge.tools.catalog import ToolSpec
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

CHAT_TOOLS = (
    ToolSpec(
        "initializeChat",
        "Initialize a chat with a set of files",
        InitializeChatInput,
        "init_chat",
    ),
    ToolSpec(
        "createChat",
        "Create a chat with system message and user message. "
        "Specify model configuration based on task complexity.",
        CreateChatInput,
        "create_chat",
    ),
    ToolSpec(
        "findChats",
        "Find and list chats with optional pagination and filtering",
        FindChatsInput,
        "find_chats",
    ),
    ToolSpec("deleteChat", "Delete a specific chat by ID", ChatIdInput, "delete_chat"),
    ToolSpec(
        "getChat",
        "Get detailed information about a specific chat",
        ChatIdInput,
        "get_chat",
    ),
    ToolSpec(
        "updateChat",
        "Update chat metadata like name and privacy settings",
        UpdateChatInput,
        "update_chat",
    ),
    ToolSpec(
        "favoriteChat",
        "Mark or unmark a chat as favorite",
        FavoriteChatInput,
        "favorite_chat",
    ),
    ToolSpec(
        "forkChat",
        "Create a fork of a chat from a specific version",
        ForkChatInput,
        "fork_chat",
    ),
    ToolSpec(
        "sendMessage",
        "Send a message to an existing chat",
        SendMessageInput,
        "send_message",
    ),
    ToolSpec(
        "resumeMessage",
        "Resume processing of a previously interrupted message",
        ResumeMessageInput,
        "resume_message",
    ),
)

PROJECT_TOOLS = (
    ToolSpec(
        "getProjectByChatId",
        "Get project details by chat ID",
        ChatIdInput,
        "get_project_by_chat_id",
    ),
    ToolSpec("findProjects", "List all projects", EmptyInput, "find_projects"),
    ToolSpec("createProject", "Create a new project", CreateProjectInput, "create_project"),
    ToolSpec("getProject", "Get project details by ID", ProjectIdInput, "get_project"),
    ToolSpec(
        "assignProjectToChat",
        "Assign a project to a chat",
        AssignProjectInput,
        "assign_project",
    ),
)

DEPLOYMENT_TOOLS = (
    ToolSpec(
        "findDeployments",
        "Find deployments for a specific project, chat, and version",
        DeploymentTargetInput,
        "find_deployments",
    ),
    ToolSpec(
        "createDeployment",
        "Create a new deployment",
        DeploymentTargetInput,
        "create_deployment",
    ),
    ToolSpec(
        "getDeployment",
        "Get deployment details by ID",
        DeploymentIdInput,
        "get_deployment",
    ),
    ToolSpec(
        "deleteDeployment",
        "Delete a deployment",
        DeploymentIdInput,
        "delete_deployment",
    ),
    ToolSpec(
        "findDeploymentLogs",
        "Get logs for a specific deployment",
        DeploymentLogsInput,
        "find_deployment_logs",
    ),
    ToolSpec(
        "findDeploymentErrors",
        "Get errors for a specific deployment",
        DeploymentIdInput,
        "find_deployment_errors",
    ),
)

HOOK_TOOLS = (
    ToolSpec("findHooks", "List all webhooks", EmptyInput, "find_hooks"),
    ToolSpec("createHook", "Create a new webhook", CreateHookInput, "create_hook"),
    ToolSpec("getHook", "Get webhook details by ID", HookIdInput, "get_hook"),
    ToolSpec("updateHook", "Update an existing webhook", UpdateHookInput, "update_hook"),
    ToolSpec("deleteHook", "Delete a webhook", HookIdInput, "delete_hook"),
)

ACCOUNT_TOOLS = (
    ToolSpec(
        "findRateLimits",
        "Get rate limit information",
        ScopeInput,
        "find_rate_limits",
    ),
    ToolSpec("getUser", "Get current user information", EmptyInput, "get_user"),
    ToolSpec(
        "getUserBilling",
        "Get user billing information",
        ScopeInput,
        "get_user_billing",
    ),
    ToolSpec("getUserPlan", "Get user plan information", EmptyInput, "get_user_plan"),
    ToolSpec("getUserScopes", "Get user scopes", EmptyInput, "get_user_scopes"),
)

TOOL_SPECS: tuple[ToolSpec, ...] = (
    CHAT_TOOLS + PROJECT_TOOLS + DEPLOYMENT_TOOLS + HOOK_TOOLS + ACCOUNT_TOOLS
)
