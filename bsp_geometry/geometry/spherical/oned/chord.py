"""
Hyperplanes of the 1-sphere.

A chord is a single point of the circle with an orientation. The offset of a
point is its angle minus the chord angle, both taken in [0, 2π), so the
direct chord has the larger angles on its plus side.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bsp_geometry.config import resolve_tolerance
from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane
from bsp_geometry.geometry.space import SPHERE_1D, Space
from bsp_geometry.geometry.spherical.oned.s1_point import S1Point
from bsp_geometry.utils.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from bsp_geometry.geometry.space import Point
    from bsp_geometry.geometry.spherical.oned.arcs_set import ArcsSet
    from bsp_geometry.geometry.spherical.oned.sub_chord import SubChord


class Chord(Hyperplane):
    """
    Oriented point of the circle.

    Args:
        location: Location of the chord
        direct: If True, the plus side holds the angles larger than the location
        tolerance: Tolerance below which angles are considered identical,
            None for the configured default
    """

    def __init__(self, location: S1Point, direct: bool, tolerance: float | None = None):
        self._location = location
        self._direct = direct
        self._tolerance = resolve_tolerance(tolerance)

    @property
    def location(self) -> S1Point:
        return self._location

    @property
    def is_direct(self) -> bool:
        return self._direct

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def space(self) -> Space:
        return SPHERE_1D

    def copy_self(self) -> Chord:
        # immutable
        return self

    def get_offset(self, point: Point) -> float:
        if not isinstance(point, S1Point):
            raise DimensionMismatchError("get_offset", SPHERE_1D, point.space, component="Chord")
        delta = point.alpha - self._location.alpha
        return delta if self._direct else -delta

    def project(self, point: Point) -> S1Point:
        return self._location

    def same_orientation_as(self, other: Hyperplane) -> bool:
        return not (self._direct ^ other.is_direct)

    def get_reverse(self) -> Chord:
        """Chord at the same location with the opposite orientation."""
        return Chord(self._location, not self._direct, self._tolerance)

    def whole_hyperplane(self) -> SubChord:
        from bsp_geometry.geometry.spherical.oned.sub_chord import SubChord

        return SubChord(self)

    def whole_space(self) -> ArcsSet:
        from bsp_geometry.geometry.spherical.oned.arcs_set import ArcsSet

        return ArcsSet(tolerance=self._tolerance)

    def __repr__(self) -> str:
        return f"Chord({self._location!r}, direct={self._direct})"
