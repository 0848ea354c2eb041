"""
Boolean operations on regions.

Every operation merges copies of the argument trees with a dedicated leaf
merger, so the argument regions are never modified.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bsp_geometry.geometry.partitioning.boundary import BoundaryAttribute
from bsp_geometry.geometry.partitioning.bsp_tree import (
    BSPTree,
    BSPTreeVisitor,
    LeafMerger,
    Order,
    VanishingCutHandler,
)
from bsp_geometry.geometry.partitioning.hyperplane import Side
from bsp_geometry.geometry.partitioning.region import Location
from bsp_geometry.utils.exceptions import DimensionMismatchError, NotConvexHyperplanesError
from bsp_geometry.utils.geom_logging import LoggedOperation, get_logger

if TYPE_CHECKING:
    from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane
    from bsp_geometry.geometry.partitioning.region import Region

logger = get_logger(__name__)


class RegionFactory:
    """
    Factory building regions from other regions.

    Examples:
        >>> factory = RegionFactory()
        >>> both = factory.union(ArcsSet.from_bounds(0.0, 1.0), ArcsSet.from_bounds(2.0, 3.0))
        >>> len(both.as_list())
        2
    """

    def __init__(self):
        self._nodes_cleaner = NodesCleaner()

    def build_convex(self, *hyperplanes: Hyperplane) -> Region | None:
        """
        Build a convex region from hyperplanes bounding it.

        The region lies on the minus side of every hyperplane.

        Args:
            *hyperplanes: Bounding hyperplanes

        Returns:
            Convex region, or None if no hyperplane is given

        Raises:
            NotConvexHyperplanesError: If some hyperplane lies entirely
                outside the cell built from the previous ones
        """
        if not hyperplanes:
            return None

        region = hyperplanes[0].whole_space()
        node = region.get_tree(False)
        node.attribute = True

        for hyperplane in hyperplanes:
            if node.insert_cut(hyperplane):
                node.plus.attribute = False
                node = node.minus
                node.attribute = True
                continue

            # the hyperplane does not cut the current cell: either it is
            # parallel to a previous hyperplane or the input is inconsistent
            s = hyperplane.whole_hyperplane()
            tree = node
            while tree.parent is not None and s is not None:
                other = tree.parent.cut.hyperplane
                split = s.split(other)
                side = split.side
                if side is Side.HYPER:
                    if not hyperplane.same_orientation_as(other):
                        logger.debug("Opposite hyperplanes closer than tolerance, convex region is empty")
                        return self.get_complement(hyperplanes[0].whole_space())
                elif side is Side.PLUS:
                    logger.error(f"Hyperplane {hyperplane!r} lies outside the convex cell")
                    raise NotConvexHyperplanesError(hyperplane)
                else:
                    s = split.minus
                tree = tree.parent

        return region

    # =========================================================================
    # Boolean operations
    # =========================================================================

    def union(self, region1: Region, region2: Region) -> Region:
        """Union of two regions."""
        return self._combine("union", region1, region2, UnionMerger())

    def intersection(self, region1: Region, region2: Region) -> Region:
        """Intersection of two regions."""
        return self._combine("intersection", region1, region2, IntersectionMerger())

    def xor(self, region1: Region, region2: Region) -> Region:
        """Symmetric difference of two regions."""
        return self._combine("xor", region1, region2, XorMerger(self))

    def difference(self, region1: Region, region2: Region) -> Region:
        """Part of ``region1`` lying outside ``region2``."""
        return self._combine("difference", region1, region2, DifferenceMerger(self, region1, region2))

    def _combine(self, operation: str, region1: Region, region2: Region, merger: LeafMerger) -> Region:
        if region1.space != region2.space:
            raise DimensionMismatchError(operation, region1.space, region2.space, component="RegionFactory")

        with LoggedOperation(logger, f"{operation} of {type(region1).__name__} and {type(region2).__name__}"):
            tree1 = region1.get_tree(False).copy_self()
            tree2 = region2.get_tree(False).copy_self()
            tree = tree1.merge(tree2, merger)
            tree.visit(self._nodes_cleaner)
        return region1.build_new(tree)

    def get_complement(self, region: Region) -> Region:
        """Complement of a region, boundary attributes are kept with swapped sides."""
        return region.build_new(self.recurse_complement(region.get_tree(False)))

    def recurse_complement(self, node: BSPTree) -> BSPTree:
        """Copy of a tree with every leaf flipped."""
        if node.cut is None:
            return BSPTree(attribute=not node.attribute)

        attribute = node.attribute
        if attribute is not None:
            plus_outside = None if attribute.plus_inside is None else attribute.plus_inside.copy_self()
            plus_inside = None if attribute.plus_outside is None else attribute.plus_outside.copy_self()
            attribute = BoundaryAttribute(plus_outside, plus_inside)

        return BSPTree(
            node.cut.copy_self(),
            self.recurse_complement(node.plus),
            self.recurse_complement(node.minus),
            attribute,
        )


# =============================================================================
# Leaf mergers
# =============================================================================


class UnionMerger(LeafMerger):
    """Inside leaves absorb the other tree."""

    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        if leaf.attribute:
            leaf.insert_in_tree(parent_tree, is_plus_child, VanishingToLeaf(True))
            return leaf
        tree.insert_in_tree(parent_tree, is_plus_child, VanishingToLeaf(False))
        return tree


class IntersectionMerger(LeafMerger):
    """Outside leaves absorb the other tree."""

    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        if leaf.attribute:
            tree.insert_in_tree(parent_tree, is_plus_child, VanishingToLeaf(True))
            return tree
        leaf.insert_in_tree(parent_tree, is_plus_child, VanishingToLeaf(False))
        return leaf


class XorMerger(LeafMerger):
    """Inside leaves flip the other tree."""

    def __init__(self, factory: RegionFactory):
        self.factory = factory

    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        t = tree
        if leaf.attribute:
            t = self.factory.recurse_complement(t)
        t.insert_in_tree(parent_tree, is_plus_child, VanishingToLeaf(True))
        return t


class DifferenceMerger(LeafMerger, VanishingCutHandler):
    """
    Merger computing ``region1 - region2``.

    Cells whose cut vanishes during the merge are classified by probing a
    point strictly inside them against both original regions.
    """

    def __init__(self, factory: RegionFactory, region1: Region, region2: Region):
        self.factory = factory
        self.region1 = region1
        self.region2 = region2

    def merge(self, leaf, tree, parent_tree, is_plus_child, leaf_from_instance):
        if leaf.attribute:
            arg_tree = self.factory.recurse_complement(tree if leaf_from_instance else leaf)
            arg_tree.insert_in_tree(parent_tree, is_plus_child, self)
            return arg_tree

        instance_tree = leaf if leaf_from_instance else tree
        instance_tree.insert_in_tree(parent_tree, is_plus_child, self)
        return instance_tree

    def fix_node(self, node: BSPTree) -> BSPTree:
        cell = node.prune_around_convex_cell(True, False, None)
        p = self.region1.representative_point(cell)
        inside = (
            self.region1.check_point(p) is Location.INSIDE and self.region2.check_point(p) is Location.OUTSIDE
        )
        return BSPTree(attribute=inside)


class VanishingToLeaf(VanishingCutHandler):
    """Replace a node with vanished cut by a leaf."""

    def __init__(self, inside: bool):
        self.inside = inside

    def fix_node(self, node: BSPTree) -> BSPTree:
        plus = node.plus
        minus = node.minus
        if plus.cut is None and minus.cut is None and plus.attribute == minus.attribute:
            return BSPTree(attribute=plus.attribute)
        return BSPTree(attribute=self.inside)


class NodesCleaner(BSPTreeVisitor):
    """Visitor removing the attributes of internal nodes."""

    def visit_order(self, node: BSPTree) -> Order:
        return Order.PLUS_SUB_MINUS

    def visit_internal_node(self, node: BSPTree) -> None:
        node.attribute = None

    def visit_leaf_node(self, node: BSPTree) -> None:
        pass
