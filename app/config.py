# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().ENVIRONMENT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every setting has a default, so the service starts with an empty environment.
# =============================================================================

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    The app factory captures one instance at startup and hands it to
    route handlers through dependencies.
    """

    # -------------------------------------------------------------------------
    # Service Identity
    # -------------------------------------------------------------------------

    APP_NAME: str = Field(
        default="DevOps Python App",
        description="Human-readable application name reported by /api/info"
    )

    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version reported by / and /api/info"
    )

    SERVICE_NAME: str = Field(
        default="devops-nodejs-app",
        description="Service identifier reported by /health"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    # Free-form: reported verbatim, so no Literal here
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
        description="Current environment name (ENVIRONMENT or NODE_ENV)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("API_PORT", "PORT"),
        description="Port for the API server (API_PORT or PORT)"
    )

    # -------------------------------------------------------------------------
    # Request Body Settings
    # -------------------------------------------------------------------------

    MAX_BODY_SIZE_KB: int = Field(
        default=100,
        ge=1,
        le=10240,
        description="Maximum accepted request body size in KB"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables fall back to the default (NODE_ENV= -> "development")
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def max_body_size_bytes(self) -> int:
        """
        Convert KB to bytes for body size validation.
        """
        return self.MAX_BODY_SIZE_KB * 1024

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. This is the recommended pattern for
    pydantic-settings.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
