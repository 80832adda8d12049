"""Utility functions for glyphsvg.

This module provides utility functions including:

- Logging setup and configuration
- Scan statistics and progress logging
"""

from glyphsvg.utils.logging import (
    ScanLogger,
    ScanStats,
    configure_logging,
    configure_structlog,
    reset_logging,
)

__all__ = [
    "ScanLogger",
    "ScanStats",
    "configure_logging",
    "configure_structlog",
    "reset_logging",
]
