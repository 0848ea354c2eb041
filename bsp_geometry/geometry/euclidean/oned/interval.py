"""Intervals of the real line."""

from __future__ import annotations

import math

from bsp_geometry.geometry.partitioning.region import Location
from bsp_geometry.utils.exceptions import validate_interval


class Interval:
    """
    Closed interval [lower, upper], possibly unbounded.

    Raises:
        NotAnIntervalError: If ``upper < lower``
    """

    def __init__(self, lower: float, upper: float):
        validate_interval(lower, upper, component="Interval")
        self._lower = lower
        self._upper = upper

    @property
    def inf(self) -> float:
        return self._lower

    @property
    def sup(self) -> float:
        return self._upper

    @property
    def size(self) -> float:
        return self._upper - self._lower

    @property
    def barycenter(self) -> float:
        """Middle of the interval, NaN for the whole line."""
        if math.isinf(self._lower) and math.isinf(self._upper):
            return math.nan
        return 0.5 * (self._lower + self._upper)

    def check_point(self, point: float, tolerance: float) -> Location:
        if point < self._lower - tolerance or point > self._upper + tolerance:
            return Location.OUTSIDE
        if self._lower + tolerance < point < self._upper - tolerance:
            return Location.INSIDE
        return Location.BOUNDARY

    def __iter__(self):
        yield self._lower
        yield self._upper

    def __repr__(self) -> str:
        return f"Interval({self._lower!r}, {self._upper!r})"
