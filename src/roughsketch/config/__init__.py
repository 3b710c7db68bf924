"""Configuration management for roughsketch.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- DrawConfig: Roughness parameters and the owned randomizer
- FillerConfig: Fill pattern settings
- FillStyle: Fill pattern selector
- RenderConfig: SVG painter settings
- LoggingConfig: Logging settings
- SketchSettings: Main application settings
"""

from roughsketch.config.settings import (
    DrawConfig,
    FillerConfig,
    FillStyle,
    LoggingConfig,
    RenderConfig,
    SketchSettings,
    get_default_settings,
)

__all__ = [
    "DrawConfig",
    "FillStyle",
    "FillerConfig",
    "LoggingConfig",
    "RenderConfig",
    "SketchSettings",
    "get_default_settings",
]
