"""
Configuration settings for the Perplexity Search MCP server
"""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PerplexityModel = Literal["sonar", "sonar-pro"]
TransportType = Literal["stdio", "sse"]

PERPLEXITY_MODELS: tuple[str, ...] = get_args(PerplexityModel)
TRANSPORT_TYPES: tuple[str, ...] = get_args(TransportType)

# Fixed generation parameters sent with every search.
MAX_TOKENS = 8192
TEMPERATURE = 0.2


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Service
    service_version: str = "0.1.0"
    log_level: str = "INFO"

    # Perplexity API
    perplexity_api_key: str = Field(
        default="",
        description="Perplexity API key (sent as a bearer token on every search)",
    )
    perplexity_api_url: str = "https://api.perplexity.ai/chat/completions"
    perplexity_model: PerplexityModel = "sonar-pro"
    perplexity_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Timeout in seconds for the outbound chat/completions call",
    )

    # MCP transport
    mcp_transport: TransportType = "stdio"
    mcp_host: str = "0.0.0.0"
    port: int = 3001


class ServerConfig(BaseModel):
    """Process-wide search configuration, shared read-only by every invocation."""

    model_config = ConfigDict(frozen=True)

    model: PerplexityModel
    api_key: str = ""
    max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE
    api_url: str = "https://api.perplexity.ai/chat/completions"
    timeout: float = 60.0

    @classmethod
    def from_settings(cls, settings: Settings, model: str | None = None) -> "ServerConfig":
        return cls(
            model=model or settings.perplexity_model,
            api_key=settings.perplexity_api_key,
            api_url=settings.perplexity_api_url,
            timeout=settings.perplexity_timeout,
        )


# Global settings instance
settings = Settings()
