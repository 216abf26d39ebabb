# microCMS Gateway Configuration
"""Configuration settings loaded from environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from microcms_mcp.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://your-service.microcms.io"


class Settings(BaseSettings):
    """microCMS gateway settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # microCMS connection
    microcms_api_key: str = Field(
        default="",
        description="microCMS API key sent as X-MICROCMS-API-KEY",
    )
    microcms_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="microCMS service URL, e.g. https://example.microcms.io",
    )
    microcms_timeout: float = Field(
        default=30.0,
        description="microCMS request timeout in seconds",
    )

    # Batch execution
    batch_max_concurrency: int = Field(
        default=1,
        ge=1,
        description="Parallel requests per batch run (1 = sequential)",
    )

    # HTTP transport authentication
    service_api_key: str = Field(
        default="",
        description="Bearer token required by the HTTP transport (empty = no auth)",
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8020, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    # MCP protocol settings
    mcp_protocol_version: str = Field(
        default="2025-06-18",
        description="MCP protocol version",
    )
    mcp_server_name: str = Field(
        default="microcms-mcp",
        description="MCP server name",
    )
    mcp_server_version: str = Field(
        default="1.0.0",
        description="MCP server version",
    )

    @field_validator("microcms_base_url")
    @classmethod
    def _strip_trailing_slashes(cls, value: str) -> str:
        return value.strip().rstrip("/")

    def require_credentials(self) -> None:
        """
        Ensure the microCMS connection settings are present.

        Raises:
            ConfigurationError: If the API key or base URL is missing
        """
        if not self.microcms_api_key:
            raise ConfigurationError("MICROCMS_API_KEY is not set")
        if not self.microcms_base_url:
            raise ConfigurationError("MICROCMS_BASE_URL is not set")


# Global settings instance
settings = Settings()
