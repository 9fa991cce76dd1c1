"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the package
"""

from functools import lru_cache

from pydantic import Field

from message_store.configs.base import BaseSettings
from message_store.configs.database import DatabaseSettings
from message_store.configs.message_store import MessageStoreSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    message_store: MessageStoreSettings = Field(default_factory=MessageStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached after the first call.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from message_store.configs import get_settings
        settings = get_settings()
    """
    return Settings()
