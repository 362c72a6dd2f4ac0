"""Configuration settings for the TRP adapter."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TRPSettings(BaseSettings):
    """Transaction Resolve Protocol (TRP) endpoint configuration.

    All settings can be configured via environment variables with TRP_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint: str = Field(
        default="http://localhost:8164",
        description="TRP JSON-RPC endpoint URL",
    )
    api_key: str = Field(
        default="",
        description="API key sent as the dmtr-api-key header (empty to omit)",
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
    )
    retry_attempts: int = Field(
        default=3,
        description="Attempts for requests that failed to connect",
    )
    retry_min_wait_seconds: float = Field(
        default=0.5,
        description="Minimum wait time between retries in seconds",
    )
    retry_max_wait_seconds: float = Field(
        default=5.0,
        description="Maximum wait time between retries in seconds",
    )
