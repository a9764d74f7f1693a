"""Configuration module for v0-bridge using pydantic-settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class V0BridgeSettings(BaseSettings):
    """Main configuration settings for v0-bridge.

    All settings can be overridden via environment variables with the V0_BRIDGE_ prefix.
    For example, V0_BRIDGE_OLLAMA_HOST will override the ollama_host setting.
    The v0 API key is also read from the plain V0_API_KEY variable.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Ollama
    ollama_host: str = "http://localhost:11434"
    model: str = "llama3.1:8b"

    # v0 Platform API
    v0_api_url: str = "https://api.v0.dev/v1"
    v0_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("V0_BRIDGE_V0_API_KEY", "V0_API_KEY", "v0_api_key"),
    )
    v0_request_timeout: float = 60.0

    # Turn limits
    max_tool_rounds: int = 8
    turn_timeout_seconds: float = 120.0

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="V0_BRIDGE_", populate_by_name=True)
