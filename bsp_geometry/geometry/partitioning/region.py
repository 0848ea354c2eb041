"""
Region interface.

A region is a part of a space described by a BSP tree whose leaves are
labelled inside (True) or outside (False).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bsp_geometry.geometry.partitioning.bsp_tree import BSPTree
    from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane, Side, SubHyperplane
    from bsp_geometry.geometry.space import Point, Space


class Location(Enum):
    """Location of a point with respect to a region."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    BOUNDARY = "boundary"


class Region(ABC):
    """Part of a space, closed under boolean operations."""

    @property
    @abstractmethod
    def space(self) -> Space:
        """Space the region lives in."""

    @property
    @abstractmethod
    def tolerance(self) -> float:
        """Tolerance below which points are considered on a boundary."""

    @abstractmethod
    def build_new(self, tree: BSPTree) -> Region:
        """Build a region of the same type and tolerance from a tree."""

    @abstractmethod
    def copy_self(self) -> Region:
        """Deep copy of the region structure."""

    @abstractmethod
    def is_empty(self, node: BSPTree | None = None) -> bool:
        """True if the region (or the sub-tree ``node``) has no inside cell."""

    @abstractmethod
    def is_full(self, node: BSPTree | None = None) -> bool:
        """True if the region (or the sub-tree ``node``) has no outside cell."""

    @abstractmethod
    def contains(self, region: Region) -> bool:
        """True if the instance contains the other region entirely."""

    @abstractmethod
    def check_point(self, point: Point) -> Location:
        """Classify a point."""

    @abstractmethod
    def get_tree(self, include_boundary_attributes: bool) -> BSPTree:
        """Underlying tree, optionally with boundary attributes on internal nodes."""

    @property
    @abstractmethod
    def boundary_size(self) -> float:
        """Measure of the boundary."""

    @property
    @abstractmethod
    def size(self) -> float:
        """Measure of the region."""

    @property
    @abstractmethod
    def barycenter(self) -> Point:
        """Barycenter of the region."""

    @abstractmethod
    def side(self, hyperplane: Hyperplane) -> Side:
        """Side of the region with respect to a hyperplane."""

    @abstractmethod
    def intersection(self, sub: SubHyperplane | None) -> SubHyperplane | None:
        """Part of a sub-hyperplane lying inside the region, None if nothing remains."""
