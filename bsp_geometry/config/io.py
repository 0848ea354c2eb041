"""
YAML I/O for geometry configurations.

This module provides functions to load and save geometry configurations
from/to YAML files with schema validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from bsp_geometry.utils.geom_logging import get_logger, log_validation_error

if TYPE_CHECKING:
    from .core import GeometryConfig

logger = get_logger(__name__)


def load_geometry_config(path: str | Path) -> GeometryConfig:
    """
    Load geometry configuration from YAML file.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    GeometryConfig
        Validated geometry configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If configuration is invalid
    yaml.YAMLError
        If YAML syntax is invalid

    YAML Format
    -----------
    tolerance: 1.0e-10
    logging:
      level: DEBUG
      use_colors: false
    """
    from .core import GeometryConfig

    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}

    try:
        return GeometryConfig.model_validate(data)
    except ValidationError as e:
        log_validation_error(
            logger,
            "load_geometry_config",
            f"{e.error_count()} invalid field(s) in {path}",
            "Check the keys against GeometryConfig",
        )
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_geometry_config(config: GeometryConfig, path: str | Path) -> None:
    """
    Save geometry configuration to YAML file.

    Parameters
    ----------
    config : GeometryConfig
        Configuration to save
    path : str | Path
        Output file path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)


def validate_yaml_config(path: str | Path) -> tuple[bool, str]:
    """
    Validate YAML configuration without keeping it.

    Returns
    -------
    tuple[bool, str]
        (is_valid, message) - True if valid, False with error message otherwise
    """
    try:
        load_geometry_config(path)
        return True, "Configuration is valid"
    except FileNotFoundError as e:
        return False, str(e)
    except yaml.YAMLError as e:
        return False, f"YAML syntax error: {e}"
    except ValueError as e:
        return False, f"Validation error: {e}"
