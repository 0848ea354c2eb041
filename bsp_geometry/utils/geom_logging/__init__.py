"""
Logging utilities for bsp_geometry.

Usage:
    >>> from bsp_geometry.utils.geom_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Merging trees...")
"""

from __future__ import annotations

from .logger import (
    GeometryFormatter,
    GeometryLogger,
    LoggedOperation,
    configure_from_config,
    configure_logging,
    get_logger,
    log_validation_error,
)

__all__ = [
    "GeometryFormatter",
    "GeometryLogger",
    "LoggedOperation",
    "configure_from_config",
    "configure_logging",
    "get_logger",
    "log_validation_error",
]
