"""Configuration management for fontgroups.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StorageConfig: Database and upload locations
- LoggingConfig: Logging settings
- FontGroupsSettings: Main application settings
"""

from fontgroups.config.settings import (
    FontGroupsSettings,
    LoggingConfig,
    StorageConfig,
    get_default_settings,
)

__all__ = [
    "FontGroupsSettings",
    "LoggingConfig",
    "StorageConfig",
    "get_default_settings",
]
