"""
Hyperplanes, sub-hyperplanes and transforms.

A hyperplane splits its space in a plus half (positive offsets) and a minus
half (negative offsets). A sub-hyperplane is the part of a hyperplane that is
relevant at some node of a BSP tree.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bsp_geometry.geometry.partitioning.region import Region
    from bsp_geometry.geometry.space import Point, Space


class Side(Enum):
    """Position of a set with respect to a hyperplane."""

    PLUS = "plus"
    MINUS = "minus"
    BOTH = "both"
    HYPER = "hyper"


class Hyperplane(ABC):
    """Oriented hyperplane of a space."""

    @property
    @abstractmethod
    def space(self) -> Space:
        """Space the hyperplane splits."""

    @property
    @abstractmethod
    def tolerance(self) -> float:
        """Offsets below this magnitude are considered to lie on the hyperplane."""

    @abstractmethod
    def copy_self(self) -> Hyperplane:
        """Copy of the instance, may return self for immutable hyperplanes."""

    @abstractmethod
    def get_offset(self, point: Point) -> float:
        """Signed offset of a point, positive on the plus side."""

    @abstractmethod
    def project(self, point: Point) -> Point:
        """Projection of a point onto the hyperplane."""

    @abstractmethod
    def same_orientation_as(self, other: Hyperplane) -> bool:
        """
        Check if another hyperplane, known to be the same one up to tolerance,
        has the same orientation.
        """

    @abstractmethod
    def whole_hyperplane(self) -> SubHyperplane:
        """Sub-hyperplane covering the whole hyperplane."""

    @abstractmethod
    def whole_space(self) -> Region:
        """Region covering the whole space."""

    def side(self, sub: SubHyperplane) -> Side:
        """Side of a sub-hyperplane with respect to this hyperplane."""
        return sub.side(self)


class SubHyperplane(ABC):
    """Part of a hyperplane."""

    @property
    @abstractmethod
    def hyperplane(self) -> Hyperplane:
        """Underlying hyperplane."""

    @abstractmethod
    def copy_self(self) -> SubHyperplane:
        """Copy of the instance."""

    @abstractmethod
    def side(self, hyperplane: Hyperplane) -> Side:
        """Side of the instance with respect to a hyperplane."""

    @abstractmethod
    def split(self, hyperplane: Hyperplane) -> SplitSubHyperplane:
        """Split the instance in the parts lying on each side of a hyperplane."""

    @abstractmethod
    def reunite(self, other: SubHyperplane) -> SubHyperplane:
        """Union of the instance and another part of the same hyperplane."""

    @property
    @abstractmethod
    def size(self) -> float:
        """Measure of the instance within its hyperplane."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if the instance covers nothing."""


class SplitSubHyperplane:
    """
    Result of splitting a sub-hyperplane by a hyperplane.

    Attributes:
        plus: Part on the plus side, or None
        minus: Part on the minus side, or None
    """

    def __init__(self, plus: SubHyperplane | None, minus: SubHyperplane | None):
        self.plus = plus
        self.minus = minus

    @property
    def side(self) -> Side:
        """Side of the split sub-hyperplane with respect to the splitter."""
        has_plus = self.plus is not None and not self.plus.is_empty()
        has_minus = self.minus is not None and not self.minus.is_empty()
        if has_plus:
            return Side.BOTH if has_minus else Side.PLUS
        return Side.MINUS if has_minus else Side.HYPER

    def __repr__(self) -> str:
        return f"SplitSubHyperplane(plus={self.plus!r}, minus={self.minus!r})"


class Transform(ABC):
    """
    Bijective transform of a space mapping hyperplanes to hyperplanes.

    On the circle a transform must preserve the angular order of cut
    locations inside [0, 2π), otherwise the transformed tree no longer
    describes a consistent partition.
    """

    @abstractmethod
    def apply_point(self, point: Point) -> Point:
        """Transform a point."""

    @abstractmethod
    def apply_hyperplane(self, hyperplane: Hyperplane) -> Hyperplane:
        """Transform a hyperplane."""

    @abstractmethod
    def apply_sub_hyperplane(self, sub: Any, original: Hyperplane, transformed: Hyperplane) -> Any:
        """
        Transform a sub-hyperplane's remaining region.

        Args:
            sub: Remaining region tree node (or sub-hyperplane part) to transform
            original: Hyperplane the sub-hyperplane belonged to
            transformed: Image of ``original`` by the transform

        Returns:
            Transformed counterpart of ``sub``
        """
