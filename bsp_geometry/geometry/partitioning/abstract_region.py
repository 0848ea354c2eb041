"""
Base implementation of regions backed by a BSP tree.

Subclasses provide the space, a way to build a region of the same type
from a tree, and the computation of the geometrical properties (size and
barycenter). Everything else (point classification, boundary extraction,
side computation, boolean operators) is generic.
"""

from __future__ import annotations

import threading
from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from bsp_geometry.config import resolve_tolerance
from bsp_geometry.geometry.partitioning.boundary import BoundaryAttribute, BoundaryBuilder, BoundarySizeVisitor
from bsp_geometry.geometry.partitioning.bsp_tree import BSPTree, FunctionVisitor, Order
from bsp_geometry.geometry.partitioning.hyperplane import Side
from bsp_geometry.geometry.partitioning.region import Location, Region
from bsp_geometry.geometry.partitioning.region_factory import RegionFactory
from bsp_geometry.utils.exceptions import DimensionMismatchError
from bsp_geometry.utils.geom_logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane, SubHyperplane, Transform
    from bsp_geometry.geometry.space import Point

logger = get_logger(__name__)


class _Sides:
    """Tracker for the sides found while exploring a tree."""

    def __init__(self):
        self.plus_found = False
        self.minus_found = False

    @property
    def both_found(self) -> bool:
        return self.plus_found and self.minus_found


class AbstractRegion(Region):
    """
    Region represented by a BSP tree with boolean leaves.

    Args:
        tree: Tree with True (inside) and False (outside) leaves, None for the
            whole space. The tree is used as is, without copying.
        tolerance: Tolerance below which points are considered on a
            boundary, None for the configured default
    """

    def __init__(self, tree: BSPTree | None = None, tolerance: float | None = None):
        self._tree = BSPTree(attribute=True) if tree is None else tree
        self._tolerance = resolve_tolerance(tolerance)
        self._size: float = 0.0
        self._barycenter: Point | None = None
        self._lock = threading.RLock()

    @classmethod
    def from_boundary(cls, boundary: Iterable[SubHyperplane], tolerance: float | None = None) -> AbstractRegion:
        """
        Build a region from its boundary.

        The boundary elements do not need to be connected nor consistently
        oriented: the inside is on the minus side of each element.

        Args:
            boundary: Sub-hyperplanes bounding the region
            tolerance: Region tolerance, None for the configured default

        Returns:
            Region of the calling class
        """
        return cls(cls._tree_from_boundary(boundary), tolerance)

    @staticmethod
    def _tree_from_boundary(boundary: Iterable[SubHyperplane]) -> BSPTree:
        elements = list(boundary)
        if not elements:
            return BSPTree(attribute=True)

        # larger elements first; the sort is stable so equal sizes keep their order
        ordered = sorted(elements, key=lambda sub: sub.size, reverse=True)

        tree = BSPTree()
        AbstractRegion._insert_cuts(tree, ordered)

        def label_leaf(node: BSPTree) -> None:
            parent = node.parent
            node.attribute = parent is None or node is not parent.plus

        tree.visit(FunctionVisitor(Order.PLUS_SUB_MINUS, on_leaf=label_leaf))
        return tree

    @staticmethod
    def _insert_cuts(node: BSPTree, boundary: list[SubHyperplane]) -> None:
        """Insert boundary elements top-down, distributing the rest in the children."""
        index = 0
        inserted = None
        while inserted is None and index < len(boundary):
            inserted = boundary[index].hyperplane
            index += 1
            if not node.insert_cut(inserted.copy_self()):
                inserted = None

        if index >= len(boundary):
            return

        plus_list: list[SubHyperplane] = []
        minus_list: list[SubHyperplane] = []
        for other in boundary[index:]:
            split = other.split(inserted)
            side = split.side
            if side is Side.PLUS:
                plus_list.append(other)
            elif side is Side.MINUS:
                minus_list.append(other)
            elif side is Side.BOTH:
                plus_list.append(split.plus)
                minus_list.append(split.minus)
            # elements lying on the inserted hyperplane are dropped

        AbstractRegion._insert_cuts(node.plus, plus_list)
        AbstractRegion._insert_cuts(node.minus, minus_list)

    # =========================================================================
    # Subclass hooks
    # =========================================================================

    @abstractmethod
    def build_new(self, tree: BSPTree) -> AbstractRegion:
        """Build a region of the same type and tolerance from a tree."""

    @abstractmethod
    def _compute_geometrical_properties(self) -> None:
        """Compute size and barycenter, storing them with _set_size and _set_barycenter."""

    def representative_point(self, cell: BSPTree) -> Point:
        """
        Point lying strictly inside a convex cell.

        Args:
            cell: Tree isolating a convex cell, as returned by
                ``BSPTree.prune_around_convex_cell(True, False, None)``

        Returns:
            Point of the cell
        """
        return self.build_new(cell).barycenter

    # =========================================================================
    # Basic accessors
    # =========================================================================

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def copy_self(self) -> AbstractRegion:
        return self.build_new(self._tree.copy_self())

    def get_tree(self, include_boundary_attributes: bool) -> BSPTree:
        """
        Get the underlying tree.

        Args:
            include_boundary_attributes: If True, make sure every internal
                node carries a BoundaryAttribute, computing them if needed

        Returns:
            Tree of the region (not a copy)
        """
        if include_boundary_attributes and self._tree.cut is not None and self._tree.attribute is None:
            with self._lock:
                if self._tree.attribute is None:
                    logger.debug(f"Building boundary attributes for {type(self).__name__}")
                    self._tree.visit(BoundaryBuilder())
        return self._tree

    def is_empty(self, node: BSPTree | None = None) -> bool:
        node = self._tree if node is None else node
        if node.cut is None:
            return not node.attribute
        return self.is_empty(node.minus) and self.is_empty(node.plus)

    def is_full(self, node: BSPTree | None = None) -> bool:
        node = self._tree if node is None else node
        if node.cut is None:
            return bool(node.attribute)
        return self.is_full(node.minus) and self.is_full(node.plus)

    def contains(self, region: Region) -> bool:
        return RegionFactory().difference(region, self).is_empty()

    # =========================================================================
    # Point classification
    # =========================================================================

    def check_point(self, point: Point) -> Location:
        """
        Classify a point with respect to the region.

        Points closer than the tolerance to a cut separating inside and
        outside cells are on the boundary.
        """
        if point.space != self.space:
            raise DimensionMismatchError("check_point", self.space, point.space, component=type(self).__name__)
        return self.check_point_in(self._tree, point)

    def check_point_in(self, node: BSPTree, point: Point) -> Location:
        """Classify a point with respect to the cells of a sub-tree."""
        while node.cut is not None:
            offset = node.cut.hyperplane.get_offset(point)
            if offset > self._tolerance:
                node = node.plus
            elif offset < -self._tolerance:
                node = node.minus
            else:
                minus_code = self.check_point_in(node.minus, point)
                plus_code = self.check_point_in(node.plus, point)
                return minus_code if minus_code is plus_code else Location.BOUNDARY
        return Location.INSIDE if node.attribute else Location.OUTSIDE

    def __contains__(self, point: Point) -> bool:
        return self.check_point(point) is not Location.OUTSIDE

    # =========================================================================
    # Geometrical properties
    # =========================================================================

    @property
    def boundary_size(self) -> float:
        visitor = BoundarySizeVisitor()
        self.get_tree(True).visit(visitor)
        return visitor.boundary_size

    @property
    def size(self) -> float:
        self._ensure_geometrical_properties()
        return self._size

    @property
    def barycenter(self) -> Point:
        self._ensure_geometrical_properties()
        return self._barycenter

    def _ensure_geometrical_properties(self) -> None:
        if self._barycenter is None:
            with self._lock:
                if self._barycenter is None:
                    self._compute_geometrical_properties()

    def _set_size(self, size: float) -> None:
        self._size = size

    def _set_barycenter(self, barycenter: Point) -> None:
        self._barycenter = barycenter

    # =========================================================================
    # Hyperplanes and sub-hyperplanes
    # =========================================================================

    def side(self, hyperplane: Hyperplane) -> Side:
        """
        Side of the region with respect to a hyperplane.

        Returns:
            PLUS or MINUS if the region lies entirely on one side, BOTH if it
            crosses the hyperplane, HYPER if it is contained in it
        """
        if hyperplane.space != self.space:
            raise DimensionMismatchError("side", self.space, hyperplane.space, component=type(self).__name__)
        sides = _Sides()
        self._recurse_sides(self._tree, hyperplane.whole_hyperplane(), sides)
        if sides.plus_found:
            return Side.BOTH if sides.minus_found else Side.PLUS
        return Side.MINUS if sides.minus_found else Side.HYPER

    def _recurse_sides(self, node: BSPTree, sub: SubHyperplane, sides: _Sides) -> None:
        if node.cut is None:
            if node.attribute:
                # inside cell expanding across the hyperplane
                sides.plus_found = True
                sides.minus_found = True
            return

        hyperplane = node.cut.hyperplane
        split = sub.split(hyperplane)
        side = split.side

        if side is Side.PLUS:
            # sub lies entirely in the plus sub-tree
            if not self.is_empty(node.minus):
                if node.cut.side(sub.hyperplane) is Side.PLUS:
                    sides.plus_found = True
                else:
                    sides.minus_found = True
            if not sides.both_found:
                self._recurse_sides(node.plus, sub, sides)

        elif side is Side.MINUS:
            if not self.is_empty(node.plus):
                if node.cut.side(sub.hyperplane) is Side.PLUS:
                    sides.plus_found = True
                else:
                    sides.minus_found = True
            if not sides.both_found:
                self._recurse_sides(node.minus, sub, sides)

        elif side is Side.BOTH:
            self._recurse_sides(node.plus, split.plus, sides)
            if not sides.both_found:
                self._recurse_sides(node.minus, split.minus, sides)

        else:
            # sub and the cut share the same hyperplane
            plus_used = node.plus.cut is not None or bool(node.plus.attribute)
            minus_used = node.minus.cut is not None or bool(node.minus.attribute)
            if hyperplane.same_orientation_as(sub.hyperplane):
                sides.plus_found = sides.plus_found or plus_used
                sides.minus_found = sides.minus_found or minus_used
            else:
                sides.minus_found = sides.minus_found or plus_used
                sides.plus_found = sides.plus_found or minus_used

    def intersection(self, sub: SubHyperplane | None) -> SubHyperplane | None:
        """Part of a sub-hyperplane lying inside the region, None if nothing remains."""
        return self._recurse_intersection(self._tree, sub)

    def _recurse_intersection(self, node: BSPTree, sub: SubHyperplane | None) -> SubHyperplane | None:
        if sub is None:
            return None
        if node.cut is None:
            return sub.copy_self() if node.attribute else None

        hyperplane = node.cut.hyperplane
        split = sub.split(hyperplane)
        side = split.side
        if side is Side.PLUS:
            return self._recurse_intersection(node.plus, sub)
        if side is Side.MINUS:
            return self._recurse_intersection(node.minus, sub)
        if side is Side.BOTH:
            plus = self._recurse_intersection(node.plus, split.plus)
            minus = self._recurse_intersection(node.minus, split.minus)
            if plus is None:
                return minus
            if minus is None:
                return plus
            return plus.reunite(minus)
        return self._recurse_intersection(node.plus, self._recurse_intersection(node.minus, sub))

    def apply_transform(self, transform: Transform) -> AbstractRegion:
        """New region whose cuts and boundary attributes are transformed."""
        return self.build_new(self._recurse_transform(self.get_tree(False), transform))

    def _recurse_transform(self, node: BSPTree, transform: Transform) -> BSPTree:
        if node.cut is None:
            return BSPTree(attribute=node.attribute)

        attribute: Any = node.attribute
        if attribute is not None:
            plus_outside = None if attribute.plus_outside is None else attribute.plus_outside.apply_transform(transform)
            plus_inside = None if attribute.plus_inside is None else attribute.plus_inside.apply_transform(transform)
            attribute = BoundaryAttribute(plus_outside, plus_inside)

        return BSPTree(
            node.cut.apply_transform(transform),
            self._recurse_transform(node.plus, transform),
            self._recurse_transform(node.minus, transform),
            attribute,
        )

    # =========================================================================
    # Operators
    # =========================================================================

    def _check_same_space(self, operation: str, other: Region) -> None:
        if not isinstance(other, Region):
            raise TypeError(f"Cannot compute {operation} of {type(self).__name__} and {type(other).__name__}")
        if other.space != self.space:
            raise DimensionMismatchError(operation, self.space, other.space, component=type(self).__name__)

    def __or__(self, other: Region) -> Region:
        self._check_same_space("union", other)
        return RegionFactory().union(self, other)

    def __and__(self, other: Region) -> Region:
        self._check_same_space("intersection", other)
        return RegionFactory().intersection(self, other)

    def __sub__(self, other: Region) -> Region:
        self._check_same_space("difference", other)
        return RegionFactory().difference(self, other)

    def __xor__(self, other: Region) -> Region:
        self._check_same_space("xor", other)
        return RegionFactory().xor(self, other)

    def __invert__(self) -> Region:
        return RegionFactory().get_complement(self)
