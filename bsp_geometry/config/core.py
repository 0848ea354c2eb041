"""
Core geometry configuration classes.

Configurations specify the numerical policy shared by every region and
hyperplane (default tolerance) together with logging preferences. Explicit
tolerances passed to constructors always take precedence over the
configured default.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, model_validator

from bsp_geometry.utils.exceptions import validate_tolerance

if TYPE_CHECKING:
    from pathlib import Path


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: INFO)
    use_colors : bool
        Colored console output (default: True)
    include_location : bool
        Append ``[file:line]`` to each record (default: False)
    log_to_file : bool
        Also write records to a file (default: False)
    log_file_path : str | None
        Target file when ``log_to_file`` is set (default: None)
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    use_colors: bool = True
    include_location: bool = False
    log_to_file: bool = False
    log_file_path: str | None = None

    @model_validator(mode="after")
    def validate_log_file(self) -> LoggingConfig:
        """Validate that log_file_path is provided if log_to_file is True."""
        if self.log_to_file and self.log_file_path is None:
            raise ValueError("log_file_path must be provided when log_to_file is True")
        return self


class GeometryConfig(BaseModel):
    """
    Package-wide geometry configuration.

    Attributes
    ----------
    tolerance : float
        Default tolerance below which points are considered to lie on a
        hyperplane, used when a region or hyperplane is built without an
        explicit tolerance (default: 1e-10)
    logging : LoggingConfig
        Logging configuration

    Examples
    --------
    >>> config = GeometryConfig(tolerance=1e-8)
    >>> set_config(config)
    >>> ArcsSet.from_bounds(0.0, 1.0).tolerance
    1e-08

    >>> config = GeometryConfig.from_yaml("geometry.yaml")
    """

    tolerance: float = Field(default=1e-10, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_yaml(self, path: str | Path) -> None:
        """
        Save configuration to YAML file.

        Parameters
        ----------
        path : str | Path
            Output file path
        """
        from .io import save_geometry_config

        save_geometry_config(self, path)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GeometryConfig:
        """
        Load configuration from YAML file.

        Parameters
        ----------
        path : str | Path
            Path to YAML configuration file

        Returns
        -------
        GeometryConfig
            Validated configuration
        """
        from .io import load_geometry_config

        return load_geometry_config(path)

    def model_dump_yaml(self) -> dict:
        """Dump configuration as dictionary suitable for YAML serialization."""
        return self.model_dump(exclude_none=True, mode="json")


_config_lock = threading.Lock()
_active_config = GeometryConfig()


def get_config() -> GeometryConfig:
    """Return the active geometry configuration."""
    with _config_lock:
        return _active_config


def set_config(config: GeometryConfig) -> None:
    """Replace the active geometry configuration and apply its logging section."""
    global _active_config

    from bsp_geometry.utils.geom_logging import configure_from_config

    with _config_lock:
        _active_config = config
    configure_from_config(config.logging)


def reset_config() -> None:
    """Restore the default geometry configuration."""
    set_config(GeometryConfig())


def resolve_tolerance(tolerance: float | None, parameter_name: str = "tolerance") -> float:
    """
    Resolve a user supplied tolerance.

    Parameters
    ----------
    tolerance : float | None
        Explicit tolerance, or None to use the configured default

    Returns
    -------
    float
        Validated positive tolerance

    Raises
    ------
    ConfigurationError
        If the explicit tolerance is not a finite positive number
    """
    if tolerance is None:
        return get_config().tolerance
    return validate_tolerance(tolerance, parameter_name)
