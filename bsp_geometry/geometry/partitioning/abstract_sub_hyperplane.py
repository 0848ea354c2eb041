"""
Base implementation of sub-hyperplanes.

A sub-hyperplane is a hyperplane together with the region of the hyperplane
(seen as a space of lower dimension) it covers. On 1-D spaces hyperplanes are
points, their sub-space has dimension 0 and the remaining region is None.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from bsp_geometry.geometry.partitioning.bsp_tree import BSPTree
from bsp_geometry.geometry.partitioning.boundary import BoundaryAttribute
from bsp_geometry.geometry.partitioning.hyperplane import SubHyperplane
from bsp_geometry.geometry.partitioning.region_factory import RegionFactory
from bsp_geometry.utils.exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane, Side, SplitSubHyperplane, Transform
    from bsp_geometry.geometry.partitioning.region import Region


class AbstractSubHyperplane(SubHyperplane):
    """
    Sub-hyperplane made of a hyperplane and a region of that hyperplane.

    Args:
        hyperplane: Underlying hyperplane
        remaining_region: Region of the hyperplane covered by the instance,
            None for hyperplanes of 1-D spaces
    """

    def __init__(self, hyperplane: Hyperplane, remaining_region: Region | None = None):
        self._hyperplane = hyperplane
        self._remaining_region = remaining_region

    @abstractmethod
    def _build_new(self, hyperplane: Hyperplane, remaining_region: Region | None) -> AbstractSubHyperplane:
        """Build a sub-hyperplane of the same type."""

    @property
    def hyperplane(self) -> Hyperplane:
        return self._hyperplane

    @property
    def remaining_region(self) -> Region | None:
        return self._remaining_region

    def copy_self(self) -> AbstractSubHyperplane:
        region = None if self._remaining_region is None else self._remaining_region.copy_self()
        return self._build_new(self._hyperplane.copy_self(), region)

    @property
    def size(self) -> float:
        return self._remaining_region.size

    def is_empty(self) -> bool:
        return self._remaining_region.is_empty()

    def side(self, hyperplane: Hyperplane) -> Side:
        return self.split(hyperplane).side

    @abstractmethod
    def split(self, hyperplane: Hyperplane) -> SplitSubHyperplane:
        """Split the instance by a hyperplane."""

    def reunite(self, other: SubHyperplane) -> AbstractSubHyperplane:
        """Union of the remaining regions of two parts of the same hyperplane."""
        if other.hyperplane.space != self._hyperplane.space:
            raise DimensionMismatchError("reunite", self._hyperplane.space, other.hyperplane.space)
        return self._build_new(
            self._hyperplane,
            RegionFactory().union(self._remaining_region, other.remaining_region),
        )

    def apply_transform(self, transform: Transform) -> AbstractSubHyperplane:
        """
        Apply a transform to the instance.

        The remaining region tree is transformed node by node, boundary
        attributes included, so the result keeps the same structure.
        """
        transformed = transform.apply_hyperplane(self._hyperplane)
        if self._remaining_region is None:
            return self._build_new(transformed, None)

        tree = self._recurse_transform(self._remaining_region.get_tree(False), transformed, transform)
        return self._build_new(transformed, self._remaining_region.build_new(tree))

    def _recurse_transform(self, node: BSPTree, transformed: Hyperplane, transform: Transform) -> BSPTree:
        if node.cut is None:
            return BSPTree(attribute=node.attribute)

        attribute = node.attribute
        if attribute is not None:
            plus_outside = None
            if attribute.plus_outside is not None:
                plus_outside = transform.apply_sub_hyperplane(attribute.plus_outside, self._hyperplane, transformed)
            plus_inside = None
            if attribute.plus_inside is not None:
                plus_inside = transform.apply_sub_hyperplane(attribute.plus_inside, self._hyperplane, transformed)
            attribute = BoundaryAttribute(plus_outside, plus_inside)

        return BSPTree(
            transform.apply_sub_hyperplane(node.cut, self._hyperplane, transformed),
            self._recurse_transform(node.plus, transformed, transform),
            self._recurse_transform(node.minus, transformed, transform),
            attribute,
        )
