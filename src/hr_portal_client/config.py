"""Configuration for the HR portal client.

Uses Pydantic settings for environment-based configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hr_portal_client.enums import Environment


class ClientSettings(BaseSettings):
    """Configuration settings for the HR portal client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="HR_PORTAL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "hr-portal-client"

    # Environment
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment for the client",
    )

    # Backend API
    API_BASE_URL: str = Field(
        default="http://localhost:3001",
        description="HR portal API base URL",
    )

    # Credential storage
    CREDENTIAL_STORE_PATH: Path = Field(
        default=Path.home() / ".hr_portal" / "credentials.json",
        description="JSON file holding the bearer token and role between runs",
    )
    TOKEN_KEY: str = Field(default="token", description="Storage key of the bearer token")
    ROLE_KEY: str = Field(default="rol", description="Storage key of the companion role")

    # Response decoding
    FALLBACK_COLLECTION: str = Field(
        default="employees",
        description="Collection name used for the empty fallback payload",
    )
    STRICT_PARSING: bool = Field(
        default=False,
        description="Report unparseable success bodies as failures instead of the fallback",
    )

    # HTTP client configuration
    HTTP_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        description="Request timeout for the shared HTTP client; None disables it",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    @field_validator("API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def url_for(self, path: str) -> str:
        """Join a relative API path onto the configured base URL."""
        return f"{self.API_BASE_URL}/{path.lstrip('/')}"


# Global settings instance
settings = ClientSettings()
