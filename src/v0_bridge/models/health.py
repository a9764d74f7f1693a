"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of v0-bridge.
        ollama_connected: Optional boolean indicating Ollama connectivity.
        ollama_host: Optional string with the Ollama host URL.
        model: Optional name of the configured model.
        tool_count: Optional number of tools in the catalog.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of v0-bridge")
    ollama_connected: bool | None = Field(
        default=None,
        description="Whether Ollama is connected",
    )
    ollama_host: str | None = Field(
        default=None,
        description="Ollama host URL",
    )
    model: str | None = Field(default=None, description="Configured Ollama model")
    tool_count: int | None = Field(
        default=None, description="Number of tools offered to the model"
    )
