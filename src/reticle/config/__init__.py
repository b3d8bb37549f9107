"""Configuration management for reticle.

This module provides application settings using Pydantic models.
Settings can be provided via CLI arguments or defaults. They are distinct
from crosshair configurations, which are domain values.

Key classes:
- StorageConfig: Persistence location
- PreviewConfig: Preview surface and authoring canvas sizes
- LoggingConfig: Logging settings
- ReticleSettings: Main application settings
"""

from reticle.config.settings import (
    LoggingConfig,
    PreviewConfig,
    ReticleSettings,
    StorageConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PreviewConfig",
    "ReticleSettings",
    "StorageConfig",
    "get_default_settings",
]
