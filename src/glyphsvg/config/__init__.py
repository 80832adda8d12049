"""Configuration management for glyphsvg.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Document size and margin
- RenderConfig: Render mode and reference characters
- ScanConfig: Worker bound, ignore patterns and file extensions
- LoggingConfig: Logging settings
- RenderRequest: Frozen per-run request shared across workers
- GlyphSvgSettings: Main application settings
"""

from glyphsvg.config.settings import (
    DEFAULT_REFERENCE_CHARACTERS,
    CanvasConfig,
    GlyphSvgSettings,
    LoggingConfig,
    RenderConfig,
    RenderMode,
    RenderRequest,
    ScanConfig,
)

__all__ = [
    "DEFAULT_REFERENCE_CHARACTERS",
    "CanvasConfig",
    "GlyphSvgSettings",
    "LoggingConfig",
    "RenderConfig",
    "RenderMode",
    "RenderRequest",
    "ScanConfig",
]
