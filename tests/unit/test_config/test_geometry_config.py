"""
Unit tests for the geometry configuration.

Tests the pydantic models, the active configuration registry, tolerance
resolution and YAML persistence.
"""

import pytest
from pydantic import ValidationError

import yaml

from bsp_geometry import ArcsSet, IntervalsSet
from bsp_geometry.config import (
    GeometryConfig,
    LoggingConfig,
    get_config,
    load_geometry_config,
    resolve_tolerance,
    save_geometry_config,
    set_config,
    validate_yaml_config,
)
from bsp_geometry.utils.exceptions import ConfigurationError


class TestLoggingConfig:
    """Test logging configuration."""

    def test_default_values(self):
        """Test default parameter values."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.use_colors is True
        assert config.include_location is False
        assert config.log_to_file is False
        assert config.log_file_path is None

    def test_invalid_level(self):
        """Test that unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")

    def test_log_file_required(self):
        """Test log_file_path must be set when logging to file."""
        with pytest.raises(ValidationError, match="log_file_path must be provided"):
            LoggingConfig(log_to_file=True)

    def test_log_file_given(self, tmp_path):
        """Test logging to file with an explicit path."""
        config = LoggingConfig(log_to_file=True, log_file_path=str(tmp_path / "geometry.log"))
        assert config.log_file_path.endswith("geometry.log")


class TestGeometryConfig:
    """Test package-wide geometry configuration."""

    def test_default_values(self):
        """Test default parameter values."""
        config = GeometryConfig()
        assert config.tolerance == 1e-10
        assert isinstance(config.logging, LoggingConfig)

    @pytest.mark.parametrize("tolerance", [0.0, -1e-8])
    def test_tolerance_positive(self, tolerance):
        """Test tolerance must be positive."""
        with pytest.raises(ValidationError, match="greater than 0"):
            GeometryConfig(tolerance=tolerance)

    def test_nested_logging(self):
        """Test nested logging section from a dictionary."""
        config = GeometryConfig.model_validate({"tolerance": 1e-6, "logging": {"level": "DEBUG"}})
        assert config.tolerance == 1e-6
        assert config.logging.level == "DEBUG"

    def test_model_dump_yaml(self):
        """Test dump omits unset optional values."""
        dumped = GeometryConfig().model_dump_yaml()
        assert dumped["tolerance"] == 1e-10
        assert "log_file_path" not in dumped["logging"]


class TestActiveConfig:
    """Test the active configuration and tolerance resolution."""

    def test_default_active(self):
        """Test the active configuration starts at defaults."""
        assert get_config().tolerance == 1e-10

    def test_set_config_changes_default_tolerance(self):
        """Test regions built without tolerance pick the configured default."""
        set_config(GeometryConfig(tolerance=1e-8, logging=LoggingConfig(use_colors=False)))

        assert get_config().tolerance == 1e-8
        assert ArcsSet.from_bounds(0.0, 1.0).tolerance == 1e-8
        assert IntervalsSet.from_bounds(0.0, 1.0).tolerance == 1e-8

    def test_explicit_tolerance_wins(self):
        """Test explicit tolerances take precedence over the configuration."""
        set_config(GeometryConfig(tolerance=1e-8))
        assert ArcsSet.from_bounds(0.0, 1.0, 1e-3).tolerance == 1e-3

    def test_resolve_tolerance(self):
        """Test tolerance resolution and validation."""
        assert resolve_tolerance(None) == get_config().tolerance
        assert resolve_tolerance(1e-4) == 1e-4

        with pytest.raises(ConfigurationError):
            resolve_tolerance(-1.0)

    def test_invalid_tolerance_in_constructor(self):
        """Test regions reject invalid explicit tolerances."""
        with pytest.raises(ConfigurationError):
            ArcsSet.from_bounds(0.0, 1.0, 0.0)


class TestYamlIO:
    """Test YAML persistence."""

    def test_round_trip(self, tmp_path):
        """Test save then load gives an equal configuration."""
        config = GeometryConfig(tolerance=1e-7, logging=LoggingConfig(level="WARNING", use_colors=False))
        path = tmp_path / "configs" / "geometry.yaml"

        config.to_yaml(path)
        loaded = GeometryConfig.from_yaml(path)

        assert path.exists()
        assert loaded == config

    def test_save_is_plain_yaml(self, tmp_path):
        """Test the saved file is readable YAML."""
        path = tmp_path / "geometry.yaml"
        save_geometry_config(GeometryConfig(tolerance=1e-9), path)

        with open(path) as f:
            data = yaml.safe_load(f)
        assert data["tolerance"] == 1e-9
        assert data["logging"]["level"] == "INFO"

    def test_load_missing_file(self, tmp_path):
        """Test loading a missing file."""
        with pytest.raises(FileNotFoundError):
            load_geometry_config(tmp_path / "missing.yaml")

    def test_load_empty_file(self, tmp_path):
        """Test an empty file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_geometry_config(path) == GeometryConfig()

    def test_load_invalid_values(self, tmp_path):
        """Test invalid values are reported as ValueError."""
        path = tmp_path / "invalid.yaml"
        path.write_text("tolerance: -1.0\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_geometry_config(path)

    def test_load_invalid_syntax(self, tmp_path):
        """Test invalid YAML syntax."""
        path = tmp_path / "broken.yaml"
        path.write_text("tolerance: [1e-10\n")

        with pytest.raises(yaml.YAMLError):
            load_geometry_config(path)

    def test_validate_yaml_config(self, tmp_path):
        """Test validation helper messages."""
        good = tmp_path / "good.yaml"
        good.write_text("tolerance: 1.0e-6\n")
        bad = tmp_path / "bad.yaml"
        bad.write_text("logging:\n  level: LOUD\n")

        assert validate_yaml_config(good) == (True, "Configuration is valid")

        is_valid, message = validate_yaml_config(bad)
        assert not is_valid
        assert message.startswith("Validation error")

        is_valid, message = validate_yaml_config(tmp_path / "missing.yaml")
        assert not is_valid
        assert "not found" in message
