"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from astrogrid.configs.database import DatabaseSettings, UnknownCollectionPolicy
from astrogrid.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "Settings", "UnknownCollectionPolicy", "get_settings"]
