"""
Configuration management for bsp_geometry.

Quick Start
-----------
>>> from bsp_geometry.config import GeometryConfig, set_config
>>> set_config(GeometryConfig(tolerance=1e-8))

>>> # Or load from YAML
>>> from bsp_geometry.config import load_geometry_config
>>> set_config(load_geometry_config("geometry.yaml"))
"""

from .core import (
    GeometryConfig,
    LoggingConfig,
    get_config,
    reset_config,
    resolve_tolerance,
    set_config,
)
from .io import load_geometry_config, save_geometry_config, validate_yaml_config

__all__ = [
    "GeometryConfig",
    "LoggingConfig",
    "get_config",
    "load_geometry_config",
    "reset_config",
    "resolve_tolerance",
    "save_geometry_config",
    "set_config",
    "validate_yaml_config",
]
