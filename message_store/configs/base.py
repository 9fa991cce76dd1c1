"""
Base configuration settings.

Shared pydantic-settings base for the message store config modules:
`.env` loading, case-insensitive environment lookup, and the log level
applied by the schema script.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class for message store settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for configure_logging() (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
