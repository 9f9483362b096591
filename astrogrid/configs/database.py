"""
Database configuration settings.

Manages MySQL connection parameters for the SQLAlchemy-backed storage pool,
plus the switches that select the storage implementation and the
unknown-collection policy.

Dependencies: pydantic, pydantic_settings
System role: Storage configuration for the document adapter
"""

from enum import Enum
from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from astrogrid.configs.base import BaseSettings


class UnknownCollectionPolicy(str, Enum):
    """
    How reads against an unregistered collection name behave.

    WARN keeps the historical behavior: registry reads log a warning and
    return an empty result. RAISE makes them fail like writes do.
    """

    WARN = "warn"
    RAISE = "raise"


class DatabaseSettings(BaseSettings):
    """MySQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="MySQL host")
    port: int = Field(default=3306, description="MySQL port")
    user: str = Field(default="root", description="MySQL user")
    password: str = Field(default="", description="MySQL password")
    name: str = Field(default="astrogrid", description="MySQL database name")

    pool_size: int = Field(default=10, ge=1, description="Maximum concurrent connections")
    pool_timeout: float | None = Field(
        default=None,
        description="Seconds to wait for a free connection (None waits forever)",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    backend: Literal["mysql", "canned"] = Field(
        default="mysql",
        description="Storage implementation: real MySQL pool or canned sample data",
    )
    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides host/port/user/password/name",
    )
    unknown_collection_policy: UnknownCollectionPolicy = Field(
        default=UnknownCollectionPolicy.WARN,
        description="Read behavior for unregistered collection names",
    )

    @property
    def database_url(self) -> str:
        """
        Construct async MySQL connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        if self.url:
            return self.url
        return (
            f"mysql+aiomysql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}"
        )
