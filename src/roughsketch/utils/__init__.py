"""Utility functions for roughsketch.

This module provides utility functions including:

- Logging setup and configuration
- Generation statistics
"""

from roughsketch.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
