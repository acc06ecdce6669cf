"""
Application configuration.

Settings are read from environment variables (case-insensitive) and,
for local development, from a ``.env`` file in the working directory.

Usage:
    from bookcatalog.config import get_settings

    settings = get_settings()
    print(settings.data_file)
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Book Catalog",
        description="Application name displayed in docs and logs",
    )
    debug: bool = Field(
        default=False,
        description="Return exception details in 500 responses",
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )
    host: str = Field(default="127.0.0.1", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # -------------------------------------------------------------------------
    # Storage Settings
    # -------------------------------------------------------------------------
    data_file: Optional[Path] = Field(
        default=None,
        validation_alias="CATALOG_DATA_FILE",
        description="JSON file holding the catalog state; memory only when unset",
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first call."""
    return Settings()
