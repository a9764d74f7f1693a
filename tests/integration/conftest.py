"""Pytest configuration for integration tests.

This module provides integration-test-specific fixtures that replace the
Ollama and v0 clients created during app startup with mocks, so whole turns
can be driven through the HTTP API.
"""

from unittest.mock import AsyncMock, patch

import pytest

from v0_bridge.v0 import V0Client


@pytest.fixture(autouse=True)
def mock_ollama_client():
    """Mock OllamaClient for all integration tests.

    This fixture patches the OllamaClient class before the app is created,
    ensuring the lifespan uses our mock instead of creating a real client.
    Tests script replies via ``mock_ollama_client.chat``.
    """
    with patch("v0_bridge.app.OllamaClient") as mock_client_class:
        mock_instance = AsyncMock()
        mock_instance.host = "http://localhost:11434"
        mock_instance.check_connection.return_value = True

        mock_client_class.return_value = mock_instance

        yield mock_instance


@pytest.fixture(autouse=True)
def mock_remote_client():
    """Mock V0Client for all integration tests.

    The tool catalog built at startup binds to this mock, so every remote
    operation can be inspected with the usual AsyncMock assertions.
    """
    with patch("v0_bridge.app.V0Client") as mock_client_class:
        mock_instance = AsyncMock(spec=V0Client)
        mock_client_class.return_value = mock_instance

        yield mock_instance
