"""Configuration management for polyhit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Containment and hit-testing tolerances
- ViewportConfig: Pan and zoom settings
- LoggingConfig: Logging settings
- PolyhitSettings: Main application settings
"""

from polyhit.config.settings import (
    GeometryConfig,
    LoggingConfig,
    PolyhitSettings,
    ViewportConfig,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "PolyhitSettings",
    "ViewportConfig",
    "get_default_settings",
]
