"""
Application configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
All configuration is centralized here to support dependency injection
and avoid scattering os.getenv() calls throughout the codebase.
"""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    All fields have sensible defaults for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = "resource-service"

    # Resource routes are mounted under this prefix
    resource_prefix: str = "/teas"

    # Storage Backend Selection
    # Only the in-memory store exists; records do not survive a restart.
    storage_backend: Literal["memory"] = "memory"

    # When enabled, create/update accept a missing price and store None
    allow_missing_price: bool = False

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("PORT", "SERVER_PORT"),
    )
    debug: bool = True

    # Logging
    log_level: str = "INFO"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    Use this function to get settings instance throughout the application.
    The @lru_cache ensures we only parse environment once.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
