"""Configuration management for the build state store using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BUILDSTATE_",
        extra="ignore",
    )

    # Store Settings
    character_store_id: str = Field(
        default="CHARACTER", description="Store ID used for the character being built"
    )
    default_registry_path: Path | None = Field(
        default=None,
        description="Alternative YAML file for the default variable registry",
    )

    # History source labels
    default_set_source: str = Field(
        default="Updated", description="History source label when set_variable gets none"
    )
    default_adjust_source: str = Field(
        default="Adjusted", description="History source label when adj_variable gets none"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
