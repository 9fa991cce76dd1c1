"""
Database configuration settings.

Manages connection parameters for the SQLAlchemy engine backing the
message store. Any SQLAlchemy-supported backend can be targeted, either
through a full URL or through its individual parts.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL

from message_store.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Relational database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the individual connection fields",
    )
    driver: str = Field(default="postgresql+psycopg", description="SQLAlchemy dialect+driver name")
    host: str = Field(default="localhost", description="Database host")
    port: int | None = Field(default=5432, description="Database port")
    user: str | None = Field(default="postgres", description="Database user")
    password: str | None = Field(default="postgres", description="Database password")
    name: str = Field(default="messages", description="Database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def database_url(self) -> str:
        """
        Construct the SQLAlchemy connection URL.

        Returns:
            str: `url` when set, otherwise a URL assembled from the parts
        """
        if self.url:
            return self.url

        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
        ).render_as_string(hide_password=False)
