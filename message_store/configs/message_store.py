"""
Message store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Table naming for the SQL message store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from message_store.configs.base import BaseSettings


class MessageStoreSettings(BaseSettings):
    """Message store table configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MESSAGE_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    table_name: str = Field(
        default="chat_messages",
        min_length=1,
        description="Table holding the serialized message bags",
    )
