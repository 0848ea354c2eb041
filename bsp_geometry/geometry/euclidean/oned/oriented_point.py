"""Hyperplanes of the real line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bsp_geometry.config import resolve_tolerance
from bsp_geometry.geometry.euclidean.oned.vector_1d import Vector1D
from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane
from bsp_geometry.geometry.space import EUCLIDEAN_1D, Space
from bsp_geometry.utils.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from bsp_geometry.geometry.euclidean.oned.intervals_set import IntervalsSet
    from bsp_geometry.geometry.euclidean.oned.sub_oriented_point import SubOrientedPoint
    from bsp_geometry.geometry.space import Point


class OrientedPoint(Hyperplane):
    """
    Oriented point of the real line.

    Args:
        location: Location of the point
        direct: If True, the plus side holds the abscissas larger than the location
        tolerance: Tolerance below which abscissas are considered identical,
            None for the configured default
    """

    def __init__(self, location: Vector1D, direct: bool, tolerance: float | None = None):
        self._location = location
        self._direct = direct
        self._tolerance = resolve_tolerance(tolerance)

    @property
    def location(self) -> Vector1D:
        return self._location

    @property
    def is_direct(self) -> bool:
        return self._direct

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def space(self) -> Space:
        return EUCLIDEAN_1D

    def copy_self(self) -> OrientedPoint:
        return self

    def get_offset(self, point: Point) -> float:
        if not isinstance(point, Vector1D):
            raise DimensionMismatchError("get_offset", EUCLIDEAN_1D, point.space, component="OrientedPoint")
        delta = point.x - self._location.x
        return delta if self._direct else -delta

    def project(self, point: Point) -> Vector1D:
        return self._location

    def same_orientation_as(self, other: Hyperplane) -> bool:
        return not (self._direct ^ other.is_direct)

    def get_reverse(self) -> OrientedPoint:
        """Oriented point at the same location with the opposite orientation."""
        return OrientedPoint(self._location, not self._direct, self._tolerance)

    def whole_hyperplane(self) -> SubOrientedPoint:
        from bsp_geometry.geometry.euclidean.oned.sub_oriented_point import SubOrientedPoint

        return SubOrientedPoint(self)

    def whole_space(self) -> IntervalsSet:
        from bsp_geometry.geometry.euclidean.oned.intervals_set import IntervalsSet

        return IntervalsSet(tolerance=self._tolerance)

    def __repr__(self) -> str:
        return f"OrientedPoint({self._location!r}, direct={self._direct})"
