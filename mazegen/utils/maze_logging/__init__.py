"""
Logging utilities for mazegen.

Usage:
    >>> from mazegen.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating maze...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configuration_summary,
    configure_logging,
    get_logger,
    log_maze_generation,
    log_validation_error,
)

__all__ = [
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
    "configuration_summary",
    "configure_logging",
    "get_logger",
    "log_maze_generation",
    "log_validation_error",
]
