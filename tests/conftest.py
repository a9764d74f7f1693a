"""Pytest configuration and shared fixtures for v0-bridge tests.

This module provides common fixtures used across all test modules,
including test app creation, async client setup and a mocked v0 client.
"""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from v0_bridge import create_app
from v0_bridge.config import V0BridgeSettings
from v0_bridge.ollama import ChatResult, ToolCall
from v0_bridge.tools import ToolExecutionService, build_tool_catalog
from v0_bridge.v0 import V0Client


@pytest.fixture
def test_settings():
    """Create test settings with fixed values.

    Returns:
        V0BridgeSettings: Settings instance configured for testing.
    """
    return V0BridgeSettings(
        host="127.0.0.1",
        port=8000,
        ollama_host="http://localhost:11434",
        model="llama3.1:8b",
        v0_api_url="https://api.v0.test/v1",
        v0_api_key="test-key",
        max_tool_rounds=3,
        turn_timeout_seconds=5.0,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def mock_v0_client():
    """A V0Client stand-in whose every operation is an AsyncMock."""
    return AsyncMock(spec=V0Client)


@pytest.fixture
def tool_catalog(mock_v0_client):
    """The full tool catalog bound to the mocked v0 client."""
    return build_tool_catalog(mock_v0_client)


@pytest.fixture
def tool_executor(tool_catalog):
    return ToolExecutionService(tool_catalog)


def text_reply(content: str) -> ChatResult:
    """Build a model reply that answers with text only."""
    return ChatResult(content=content, model="llama3.1:8b")


def tool_reply(*calls: tuple[str, object]) -> ChatResult:
    """Build a model reply that requests the given (name, arguments) tool calls."""
    return ChatResult(
        content="",
        tool_calls=[ToolCall(name=name, arguments=arguments) for name, arguments in calls],
        model="llama3.1:8b",
    )


@pytest.fixture
def make_text_reply():
    return text_reply


@pytest.fixture
def make_tool_reply():
    return tool_reply
