"""Utility functions for polyhit.

This module provides utility functions including:

- Logging setup and configuration
- Query statistics for the inspection CLI
"""

from polyhit.utils.logging import (
    QueryLogger,
    QueryStats,
    configure_logging,
)

__all__ = [
    "QueryLogger",
    "QueryStats",
    "configure_logging",
]
