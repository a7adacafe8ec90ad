"""Configuration management using Pydantic Settings.

This module provides centralized, type-safe configuration for Maven Modules.
Configuration is loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maven_modules.core.exceptions import ConfigurationError


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(env_prefix="APP_")

    env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class GraphSettings(BaseSettings):
    """Graph engine settings."""

    model_config = SettingsConfigDict(env_prefix="GRAPH_")

    # 1 disables the thread pool
    max_workers: int = Field(default=4, ge=1, le=64)


class MavenSettings(BaseSettings):
    """Maven project discovery and module classification settings."""

    model_config = SettingsConfigDict(env_prefix="MAVEN_")

    pom_filename: str = "pom.xml"
    default_packaging: str = "jar"
    source_dir: str = "src/main"
    include_parent_edges: bool = False
    test_marker: str = "-test"

    @field_validator("pom_filename", "default_packaging")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class Settings(BaseSettings):
    """Main settings container aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    graph: GraphSettings = Field(default_factory=GraphSettings)
    maven: MavenSettings = Field(default_factory=MavenSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings: The application settings instance.
    """
    return Settings()


def load_settings() -> Settings:
    """Get settings, reporting invalid values as a ConfigurationError.

    Raises:
        ConfigurationError: If the environment holds invalid values.
    """
    try:
        return get_settings()
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(
            message=f"Invalid configuration: {', '.join(fields)}",
            details={"fields": fields},
            cause=e,
        ) from e
