"""Arcs of the 1-sphere."""

from __future__ import annotations

import math

from bsp_geometry.config import resolve_tolerance
from bsp_geometry.geometry.partitioning.region import Location
from bsp_geometry.utils.exceptions import NotAnIntervalError
from bsp_geometry.utils.numerics import TWO_PI, normalize_angle


class Arc:
    """
    Connected arc of the circle.

    The lower bound is normalized into [0, 2π) and the upper bound is kept
    at the same distance from it, so it may exceed 2π for arcs crossing the
    angle 0. Equal bounds, or bounds at least 2π apart, give the whole
    circle.

    Args:
        lower: Lower angular bound
        upper: Upper angular bound, must not be smaller than ``lower``
        tolerance: Tolerance below which angles are considered identical,
            None for the configured default

    Raises:
        NotAnIntervalError: If ``lower > upper`` or a bound is not finite

    Examples:
        >>> arc = Arc(5.7 - TWO_PI, 2.3)
        >>> round(arc.inf, 6), round(arc.sup, 6)
        (5.7, 8.583185)
    """

    def __init__(self, lower: float, upper: float, tolerance: float | None = None):
        self._tolerance = resolve_tolerance(tolerance)
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise NotAnIntervalError(lower, upper, component="Arc")

        if lower == upper or upper - lower >= TWO_PI:
            self._lower = 0.0
            self._upper = TWO_PI
            self._middle = math.pi
        elif lower < upper:
            self._lower = normalize_angle(lower, math.pi)
            self._upper = self._lower + (upper - lower)
            self._middle = 0.5 * (self._lower + self._upper)
        else:
            raise NotAnIntervalError(lower, upper, component="Arc")

    @property
    def inf(self) -> float:
        """Lower angular bound, in [0, 2π)."""
        return self._lower

    @property
    def sup(self) -> float:
        """Upper angular bound, in (inf, inf + 2π]."""
        return self._upper

    @property
    def size(self) -> float:
        return self._upper - self._lower

    @property
    def barycenter(self) -> float:
        """Middle angle of the arc."""
        return self._middle

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def check_point(self, point: float) -> Location:
        """
        Classify an angle with respect to the arc.

        Args:
            point: Angle to check, any value (it is normalized around the middle)

        Returns:
            INSIDE, OUTSIDE or BOUNDARY. Bounds of an arc covering the whole
            circle up to tolerance are INSIDE.
        """
        normalized = normalize_angle(point, self._middle)
        if normalized < self._lower - self._tolerance or normalized > self._upper + self._tolerance:
            return Location.OUTSIDE
        if self._lower + self._tolerance < normalized < self._upper - self._tolerance:
            return Location.INSIDE
        return Location.INSIDE if self.size >= TWO_PI - self._tolerance else Location.BOUNDARY

    def __iter__(self):
        yield self._lower
        yield self._upper

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arc):
            return NotImplemented
        return self._lower == other._lower and self._upper == other._upper

    def __hash__(self) -> int:
        return hash((self._lower, self._upper))

    def __repr__(self) -> str:
        return f"Arc({self._lower!r}, {self._upper!r})"
