"""Utility functions for pathbool.

This module provides:

- Logging setup and configuration
- Per-operation and batch statistics
"""

from pathbool.utils.logging import (
    OperationLogger,
    OperationStats,
    ProcessingStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "ProcessingStats",
    "configure_logging",
    "get_logger",
]
