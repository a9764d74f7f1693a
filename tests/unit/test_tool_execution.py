"""Unit tests for the ToolExecutionService."""

import asyncio
import json

import pytest

from v0_bridge.errors import RemoteOperationError
from v0_bridge.ollama import ToolCall
from v0_bridge.tools import ToolResult


class TestToolResult:
    """Tests for tool result rendering."""

    def test_success_message(self):
        result = ToolResult.success("createProject", {"id": "prj_1", "name": "Foo"})
        message = result.to_message()

        assert message["role"] == "tool"
        assert message["tool_name"] == "createProject"
        assert json.loads(message["content"]) == {"result": {"id": "prj_1", "name": "Foo"}}

    def test_failure_message(self):
        result = ToolResult.failure("getChat", "unknown_tool", "No such tool")

        assert result.ok is False
        assert json.loads(result.to_message()["content"]) == {
            "error": {"type": "unknown_tool", "message": "No such tool", "details": {}}
        }

    def test_non_json_values_are_stringified(self):
        result = ToolResult.success("getUser", {"created": object()})
        assert "created" in json.loads(result.to_message()["content"])["result"]


class TestExecute:
    """Tests for executing single tool calls."""

    @pytest.mark.asyncio
    async def test_successful_call(self, tool_executor, mock_v0_client):
        mock_v0_client.create_project.return_value = {"id": "prj_1", "name": "Foo"}

        result = await tool_executor.execute(
            ToolCall(name="createProject", arguments={"name": "Foo"})
        )

        assert result.ok is True
        assert result.tool_name == "createProject"
        assert result.content == {"result": {"id": "prj_1", "name": "Foo"}}
        mock_v0_client.create_project.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_tool_is_reported(self, tool_executor):
        result = await tool_executor.execute(ToolCall(name="dropDatabase", arguments={}))

        assert result.ok is False
        error = result.content["error"]
        assert error["type"] == "unknown_tool"
        assert "createProject" in error["details"]["available_tools"]

    @pytest.mark.asyncio
    async def test_schema_error_is_reported(self, tool_executor, mock_v0_client):
        result = await tool_executor.execute(
            ToolCall(
                name="createHook",
                arguments={"name": "ci", "url": "https://x", "events": ["chat.archived"]},
            )
        )

        assert result.ok is False
        error = result.content["error"]
        assert error["type"] == "schema_validation_error"
        assert error["details"]
        mock_v0_client.create_hook.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remote_error_is_reported(self, tool_executor, mock_v0_client):
        mock_v0_client.delete_chat.side_effect = RemoteOperationError(
            "chats.delete",
            "v0 API returned HTTP 404 for chats.delete",
            status_code=404,
            detail={"error": "Chat not found"},
        )

        result = await tool_executor.execute(
            ToolCall(name="deleteChat", arguments={"chatId": "chat_404"})
        )

        assert result.ok is False
        error = result.content["error"]
        assert error["type"] == "remote_operation_error"
        assert error["details"] == {"status_code": 404, "response": {"error": "Chat not found"}}

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self, tool_executor, mock_v0_client):
        mock_v0_client.get_user.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError):
            await tool_executor.execute(ToolCall(name="getUser", arguments={}))


class TestExecuteAll:
    """Tests for executing one round of tool calls."""

    @pytest.mark.asyncio
    async def test_results_follow_request_order(self, tool_executor, mock_v0_client):
        mock_v0_client.get_chat.return_value = {"id": "chat_1"}
        mock_v0_client.get_project.return_value = {"id": "prj_1"}

        results = await tool_executor.execute_all(
            [
                ToolCall(name="getChat", arguments={"chatId": "chat_1"}),
                ToolCall(name="getProject", arguments={"projectId": "prj_1"}),
            ]
        )

        assert [result.tool_name for result in results] == ["getChat", "getProject"]
        assert [result.content["result"]["id"] for result in results] == ["chat_1", "prj_1"]

    @pytest.mark.asyncio
    async def test_calls_run_concurrently(self, tool_executor, mock_v0_client):
        """Each call waits for the other to start, so sequential execution would hang."""
        chat_started = asyncio.Event()
        project_started = asyncio.Event()

        async def get_chat(params):
            chat_started.set()
            await project_started.wait()
            return {"id": params.chat_id}

        async def get_project(params):
            project_started.set()
            await chat_started.wait()
            return {"id": params.project_id}

        mock_v0_client.get_chat.side_effect = get_chat
        mock_v0_client.get_project.side_effect = get_project

        results = await asyncio.wait_for(
            tool_executor.execute_all(
                [
                    ToolCall(name="getChat", arguments={"chatId": "chat_1"}),
                    ToolCall(name="getProject", arguments={"projectId": "prj_1"}),
                ]
            ),
            timeout=2.0,
        )

        assert all(result.ok for result in results)

    @pytest.mark.asyncio
    async def test_failures_do_not_block_other_calls(self, tool_executor, mock_v0_client):
        mock_v0_client.get_chat.return_value = {"id": "chat_1"}

        results = await tool_executor.execute_all(
            [
                ToolCall(name="getChat", arguments={"chatId": "chat_1"}),
                ToolCall(name="getChat", arguments={"chat_id": "chat_1"}),
            ]
        )

        assert [result.ok for result in results] == [True, False]
        mock_v0_client.get_chat.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_round(self, tool_executor):
        assert await tool_executor.execute_all([]) == []

    @pytest.mark.asyncio
    async def test_unexpected_error_cancels_rest_of_round(self, tool_executor, mock_v0_client):
        """A call that raises stops its siblings before the error reaches the caller."""
        delete_started = asyncio.Event()
        completed = []
        cancelled = []

        async def delete_chat(params):
            delete_started.set()
            try:
                await asyncio.sleep(0.2)
            except asyncio.CancelledError:
                cancelled.append(params.chat_id)
                raise
            completed.append(params.chat_id)

        async def get_user(params):
            await delete_started.wait()
            raise RuntimeError("bug in client")

        mock_v0_client.delete_chat.side_effect = delete_chat
        mock_v0_client.get_user.side_effect = get_user

        with pytest.raises(RuntimeError, match="bug in client"):
            await tool_executor.execute_all(
                [
                    ToolCall(name="deleteChat", arguments={"chatId": "c9"}),
                    ToolCall(name="getUser", arguments={}),
                ]
            )

        # Siblings are already settled when execute_all raises
        assert cancelled == ["c9"]
        await asyncio.sleep(0.3)
        assert completed == []
