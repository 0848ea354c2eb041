"""Utilities: exceptions, logging and numerical helpers."""

from .exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    GeometryError,
    InconsistentStateAt2PiWrapping,
    InternalGeometryError,
    NotAnIntervalError,
    NotConvexHyperplanesError,
    validate_interval,
    validate_tolerance,
)
from .geom_logging import LoggedOperation, configure_logging, get_logger
from .numerics import SAFE_MIN, TWO_PI, normalize_angle

__all__ = [
    "SAFE_MIN",
    "TWO_PI",
    "ConfigurationError",
    "DimensionMismatchError",
    "GeometryError",
    "InconsistentStateAt2PiWrapping",
    "InternalGeometryError",
    "LoggedOperation",
    "NotAnIntervalError",
    "NotConvexHyperplanesError",
    "configure_logging",
    "get_logger",
    "normalize_angle",
    "validate_interval",
    "validate_tolerance",
]
