"""Sub-hyperplanes of the real line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bsp_geometry.geometry.partitioning.abstract_sub_hyperplane import AbstractSubHyperplane
from bsp_geometry.geometry.partitioning.hyperplane import SplitSubHyperplane
from bsp_geometry.utils.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from bsp_geometry.geometry.euclidean.oned.oriented_point import OrientedPoint
    from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane, SubHyperplane
    from bsp_geometry.geometry.partitioning.region import Region


class SubOrientedPoint(AbstractSubHyperplane):
    """Whole oriented point seen as a sub-hyperplane, of zero size and never empty."""

    def __init__(self, hyperplane: OrientedPoint, remaining_region: Region | None = None):
        super().__init__(hyperplane, None)

    def _build_new(self, hyperplane: Hyperplane, remaining_region: Region | None) -> SubOrientedPoint:
        return SubOrientedPoint(hyperplane)

    @property
    def size(self) -> float:
        return 0.0

    def is_empty(self) -> bool:
        return False

    def split(self, hyperplane: Hyperplane) -> SplitSubHyperplane:
        if hyperplane.space != self.hyperplane.space:
            raise DimensionMismatchError(
                "split", self.hyperplane.space, hyperplane.space, component="SubOrientedPoint"
            )
        global_offset = hyperplane.get_offset(self.hyperplane.location)
        tolerance = self.hyperplane.tolerance
        if global_offset < -tolerance:
            return SplitSubHyperplane(None, self)
        if global_offset > tolerance:
            return SplitSubHyperplane(self, None)
        return SplitSubHyperplane(None, None)

    def reunite(self, other: SubHyperplane) -> SubOrientedPoint:
        if other.hyperplane.space != self.hyperplane.space:
            raise DimensionMismatchError(
                "reunite", self.hyperplane.space, other.hyperplane.space, component="SubOrientedPoint"
            )
        return SubOrientedPoint(self.hyperplane)

    def __repr__(self) -> str:
        return f"SubOrientedPoint({self.hyperplane!r})"
