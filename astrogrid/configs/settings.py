"""
Unified application settings.

Aggregates the config modules into one Settings object that the hosting
application reads once at startup to build its storage handle and
registry.

Dependencies: astrogrid.configs.base, astrogrid.configs.database
System role: Central configuration aggregator for the adapter
"""

from functools import lru_cache

from pydantic import Field

from astrogrid.configs.base import BaseSettings
from astrogrid.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Adapter settings: process-level fields plus the DB_ group."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Process-wide settings, read from the environment on first call.

    Tests that change the environment must call get_settings.cache_clear().

    Returns:
        Settings: Cached settings instance
    """
    return Settings()
