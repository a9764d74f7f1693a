"""Unit tests for the FastAPI app factory and configuration."""

import pytest
from fastapi import FastAPI

from v0_bridge import __version__, create_app
from v0_bridge.config import V0BridgeSettings


def test_create_app_returns_fastapi_instance():
    """Test that create_app returns a FastAPI instance."""
    app = create_app()
    assert isinstance(app, FastAPI)


def test_create_app_with_settings(test_settings):
    """Test that create_app accepts custom settings."""
    app = create_app(settings=test_settings)
    assert isinstance(app, FastAPI)
    assert app.state.settings is test_settings


def test_create_app_metadata():
    """Test that app has correct metadata."""
    app = create_app()
    assert app.title == "v0-bridge"
    assert app.version == "0.1.0"
    assert "v0 Platform API" in app.description


def test_create_app_includes_routes():
    """Test that health and chat routers are registered."""
    app = create_app()

    routes = [route.path for route in app.routes]  # type: ignore[attr-defined]
    assert "/api/v1/health" in routes
    assert "/api/v1/chat" in routes


def test_create_app_has_cors_middleware(test_settings):
    """Test that CORS middleware is configured."""
    app = create_app(settings=test_settings)

    middleware_classes = [m.cls.__name__ for m in app.user_middleware]  # type: ignore[attr-defined]
    assert "CORSMiddleware" in middleware_classes


def test_version_constant():
    """Test that __version__ is defined and matches app version."""
    assert __version__ == "0.1.0"


def test_settings_default_values(monkeypatch):
    """Test that settings have correct default values."""
    monkeypatch.delenv("V0_API_KEY", raising=False)
    settings = V0BridgeSettings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.ollama_host == "http://localhost:11434"
    assert settings.model == "llama3.1:8b"
    assert settings.v0_api_url == "https://api.v0.dev/v1"
    assert settings.v0_api_key == ""
    assert settings.max_tool_rounds == 8
    assert settings.turn_timeout_seconds == 120.0
    assert settings.log_level == "INFO"


def test_settings_env_prefix(monkeypatch):
    """Test that settings respect V0_BRIDGE_ environment variable prefix."""
    monkeypatch.setenv("V0_BRIDGE_PORT", "9000")
    monkeypatch.setenv("V0_BRIDGE_OLLAMA_HOST", "http://custom:11434")
    monkeypatch.setenv("V0_BRIDGE_MAX_TOOL_ROUNDS", "2")

    settings = V0BridgeSettings()

    assert settings.port == 9000
    assert settings.ollama_host == "http://custom:11434"
    assert settings.max_tool_rounds == 2


def test_settings_plain_api_key_variable(monkeypatch):
    """Test that the API key is read from V0_API_KEY."""
    monkeypatch.setenv("V0_API_KEY", "v0-secret")

    assert V0BridgeSettings().v0_api_key == "v0-secret"


def test_settings_api_key_keyword():
    """Test that the API key can be passed by field name."""
    assert V0BridgeSettings(v0_api_key="explicit").v0_api_key == "explicit"


@pytest.mark.asyncio
async def test_chat_without_startup_returns_503(test_settings):
    """Test that the chat endpoint reports 503 before the lifespan has run."""
    from httpx import ASGITransport, AsyncClient

    app = create_app(settings=test_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post(
            "/api/v1/chat", json={"messages": [{"role": "user", "content": "hi"}]}
        )

    assert response.status_code == 503
