"""Configuration management for lilufo.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- OutlineConfig: Glyph outline normalization settings
- KerningConfig: Kerning edit settings
- LoggingConfig: Logging settings
- LogLevel: Accepted logging levels
- LilUfoSettings: Main application settings
"""

from lilufo.config.settings import (
    KerningConfig,
    LilUfoSettings,
    LoggingConfig,
    LogLevel,
    OutlineConfig,
    get_default_settings,
)

__all__ = [
    "KerningConfig",
    "LilUfoSettings",
    "LoggingConfig",
    "LogLevel",
    "OutlineConfig",
    "get_default_settings",
]
