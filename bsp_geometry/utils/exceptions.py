"""
Exception classes for bsp_geometry with helpful error messages and user guidance.

This module provides specialized exception classes that give users clear,
actionable error messages with suggested solutions. Three kinds of failure are
distinguished:

- Precondition violations (bad bounds, mismatched spaces, bad tolerance)
- Degenerate states detected while computing geometrical properties
- Internal invariant violations, which indicate a bug in the library
"""

from __future__ import annotations

import math
from typing import Any


class GeometryError(Exception):
    """
    Base exception for geometry errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "Geometry"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        # Format comprehensive error message
        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   • {key}: {value}"

        super().__init__(full_message)


class NotAnIntervalError(GeometryError):
    """Exception raised when endpoints do not define an interval."""

    def __init__(self, lower: float, upper: float, component: str | None = None):
        self.lower = lower
        self.upper = upper

        diagnostic_data = {
            "lower": lower,
            "upper": upper,
        }

        if not (math.isfinite(lower) and math.isfinite(upper)):
            suggested_action = "Use finite endpoints"
        else:
            suggested_action = f"Swap the endpoints or use lower <= upper (got {lower} > {upper})"

        super().__init__(
            message=f"Endpoints [{lower}, {upper}] do not specify an interval",
            component=component,
            suggested_action=suggested_action,
            error_code="ENDPOINTS_NOT_AN_INTERVAL",
            diagnostic_data=diagnostic_data,
        )


class DimensionMismatchError(GeometryError):
    """Exception raised when geometric objects from different spaces are combined."""

    def __init__(
        self,
        operation: str,
        expected_space: Any,
        provided_space: Any,
        component: str | None = None,
    ):
        diagnostic_data = {
            "operation": operation,
            "expected_space": str(expected_space),
            "provided_space": str(provided_space),
        }

        super().__init__(
            message=f"Space mismatch in {operation}",
            component=component,
            suggested_action="Combine only regions, hyperplanes and points built on the same space",
            error_code="DIMENSION_MISMATCH",
            diagnostic_data=diagnostic_data,
        )


class NotConvexHyperplanesError(GeometryError):
    """Exception raised when hyperplanes do not bound a convex region."""

    def __init__(self, hyperplane: Any, component: str | None = None):
        super().__init__(
            message="Hyperplanes do not define a convex region",
            component=component or "RegionFactory",
            suggested_action="Check hyperplane orientations: the region must lie on the minus side of each one",
            error_code="NOT_CONVEX_HYPERPLANES",
            diagnostic_data={"offending_hyperplane": repr(hyperplane)},
        )


class InconsistentStateAt2PiWrapping(GeometryError):
    """Exception raised when a circle partition disagrees with itself across angle 0."""

    def __init__(self, limits_count: int | None = None, component: str | None = None):
        diagnostic_data: dict[str, Any] = {}
        if limits_count is not None:
            diagnostic_data["boundary_limits"] = limits_count

        super().__init__(
            message="Inconsistent inside/outside state at 2π wrapping",
            component=component or "ArcsSet",
            suggested_action="The cells before the smallest limit and after the largest one must share their state;"
            " check the tree labelling or use a smaller tolerance",
            error_code="INCONSISTENT_STATE_AT_2PI_WRAPPING",
            diagnostic_data=diagnostic_data,
        )


class InternalGeometryError(GeometryError):
    """Exception raised when an algorithm reaches a state it proves impossible."""

    def __init__(self, detail: str, component: str | None = None):
        super().__init__(
            message=f"Internal error: {detail}",
            component=component,
            suggested_action="Please report this as a bug along with the input that triggered it",
            error_code="INTERNAL_ERROR",
        )


class ConfigurationError(GeometryError):
    """Exception raised when a configuration parameter is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if "tolerance" in parameter_name.lower() and isinstance(provided_value, (int, float)):
        if not provided_value > 0:
            suggestions.append("Tolerance must be positive")
        elif provided_value > 1e-2:
            suggestions.append("Consider a smaller tolerance, large values merge distinct cut points")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios


def validate_tolerance(value: Any, parameter_name: str = "tolerance", component: str | None = None) -> float:
    """Validate that a tolerance is a finite positive real and return it as float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=float,
            component=component,
        )

    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=(0, math.inf),
            component=component,
        )

    return float(value)


def validate_interval(lower: float, upper: float, component: str | None = None) -> None:
    """Validate that (lower, upper) are ordered and not NaN."""
    if math.isnan(lower) or math.isnan(upper) or lower > upper:
        raise NotAnIntervalError(lower, upper, component=component)
