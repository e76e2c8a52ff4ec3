"""Utility functions for lilufo.

This module provides utility functions including:

- Logging setup and configuration
- Normalization progress and statistics tracking
"""

from lilufo.utils.logging import (
    NormalizationLogger,
    NormalizationStats,
    configure_logging,
)

__all__ = [
    "NormalizationLogger",
    "NormalizationStats",
    "configure_logging",
]
