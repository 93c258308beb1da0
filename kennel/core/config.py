"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Datastore configuration."""

    url: str = Field(
        default="sqlite:///kennel.db", alias="KENNEL_DATABASE_URL", description="SQLAlchemy database connection URL"
    )
    echo: bool = Field(default=False, alias="KENNEL_DATABASE_ECHO", description="Echo emitted SQL statements")
    create_schema: bool = Field(
        default=True,
        alias="KENNEL_CREATE_SCHEMA",
        description="Create missing tables when the datastore is opened (dev/test only)",
    )

    model_config = {"populate_by_name": True}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="KENNEL_LOG_LEVEL", description="Root console log level")
    format: str = Field(
        default="detailed", alias="KENNEL_LOG_FORMAT", description="Log format (simple, detailed or json)"
    )
    file_dir: str = Field(default="logs", alias="KENNEL_LOG_FILE_DIR", description="Directory for the log file")
    enable_file: bool = Field(
        default=False, alias="KENNEL_ENABLE_FILE_LOGGING", description="Write DEBUG logs to a file as well"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite:///kennel.db",
        description="SQLAlchemy database connection URL",
        alias="KENNEL_DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements",
        alias="KENNEL_DATABASE_ECHO",
    )
    create_schema: bool = Field(
        default=True,
        description="Create missing tables when the datastore is opened",
        alias="KENNEL_CREATE_SCHEMA",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="KENNEL_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log format (simple, detailed, json)",
        alias="KENNEL_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file",
        alias="KENNEL_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write DEBUG logs to a file as well",
        alias="KENNEL_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get datastore configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()


settings = get_settings()
