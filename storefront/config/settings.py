"""
Storefront Dashboard
Centralized Configuration Management

This module provides configuration management using Pydantic settings with
environment variable support, validation, and type safety. The collection
store base URL has no default: building the settings fails fast when it is
missing.
"""

from functools import lru_cache
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PayloadSettings(BaseSettings):
    """Remote Collection Store Configuration"""

    model_config = SettingsConfigDict(env_prefix="PAYLOAD_", env_file=".env", extra="ignore")

    api_url: str = Field(..., description="Base URL of the collection store API")
    timeout_seconds: float = Field(default=10.0, description="Transport timeout in seconds")

    # Page sizes
    recent_orders_limit: int = Field(default=10, ge=1, description="Orders shown in the recent orders list")
    list_page_size: int = Field(default=100, ge=1, description="Page size for product/customer lists")
    stats_page_size: int = Field(default=1000, ge=1, description="Page size for dashboard stats queries")

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Reject blank URLs and normalize the trailing slash"""
        v = v.strip()
        if not v:
            raise ValueError("PAYLOAD_API_URL is not set")
        return v.rstrip("/")


class LoggingSettings(BaseSettings):
    """Logging Configuration"""

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL", description="Logging level")
    log_format: str = Field(default="json", alias="LOG_FORMAT", description="Log format: json or text")


class Settings(BaseSettings):
    """
    Main Application Settings

    Aggregates all configuration sections and provides a single entry point
    for accessing application configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="storefront-dashboard", alias="APP_NAME", description="Application name")
    app_env: str = Field(default="development", alias="APP_ENV", description="Environment")
    debug: bool = Field(default=False, alias="DEBUG", description="Debug mode")

    # API Server
    api_host: str = Field(default="0.0.0.0", alias="API_HOST", description="API host")
    api_port: int = Field(default=8000, alias="API_PORT", description="API port")

    # Version
    version: str = Field(default="1.0.0", description="Application version")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # Subsystem configurations
    payload: PayloadSettings = Field(default_factory=PayloadSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("app_env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment value"""
        allowed = ["development", "staging", "production", "testing"]
        if v.lower() not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.app_env == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once. Raises a
    pydantic ``ValidationError`` when ``PAYLOAD_API_URL`` is unset.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
