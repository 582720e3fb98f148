"""Configuration management for pathbool.

This module provides configuration management using Pydantic models.
Every boolean operation accepts an optional settings object; defaults are
used when none is given.

Key classes:
- GeometryConfig: Numerical tolerances
- ValidationConfig: Input validation switches
- ContainmentConfig: Point containment rule
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- BooleanSettings: Main settings aggregate
"""

from pathbool.config.settings import (
    BooleanSettings,
    ContainmentConfig,
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
    ValidationConfig,
    get_default_settings,
)

__all__ = [
    "BooleanSettings",
    "ContainmentConfig",
    "GeometryConfig",
    "LoggingConfig",
    "ProcessingConfig",
    "ValidationConfig",
    "get_default_settings",
]
