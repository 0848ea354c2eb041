"""
Boundary extraction from a region tree.

Each internal node cut is characterized against the cells on both of its
sides. The parts having outside cells on one side and inside cells on the
other belong to the region boundary and are stored as a BoundaryAttribute
on the node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bsp_geometry.geometry.partitioning.bsp_tree import BSPTree, BSPTreeVisitor, Order
from bsp_geometry.geometry.partitioning.hyperplane import Side
from bsp_geometry.utils.exceptions import InternalGeometryError

if TYPE_CHECKING:
    from bsp_geometry.geometry.partitioning.hyperplane import SubHyperplane


@dataclass(frozen=True)
class BoundaryAttribute:
    """
    Boundary parts of an internal node cut.

    Attributes:
        plus_outside: Part with outside cells on its plus side and inside
            cells on its minus side, or None
        plus_inside: Part with inside cells on its plus side and outside
            cells on its minus side, or None
    """

    plus_outside: SubHyperplane | None = None
    plus_inside: SubHyperplane | None = None


class Characterization:
    """
    Split a sub-hyperplane according to the cells of a sub-tree.

    Args:
        node: Root of the sub-tree, its leaves must be labelled True/False
        sub: Sub-hyperplane to characterize
    """

    def __init__(self, node: BSPTree, sub: SubHyperplane):
        self.outside_touching: SubHyperplane | None = None
        self.inside_touching: SubHyperplane | None = None
        self._characterize(node, sub)

    def _characterize(self, node: BSPTree, sub: SubHyperplane) -> None:
        if node.cut is None:
            if node.attribute:
                self._add_inside_touching(sub)
            else:
                self._add_outside_touching(sub)
            return

        hyperplane = node.cut.hyperplane
        split = sub.split(hyperplane)
        side = split.side
        if side is Side.PLUS:
            self._characterize(node.plus, sub)
        elif side is Side.MINUS:
            self._characterize(node.minus, sub)
        elif side is Side.BOTH:
            self._characterize(node.plus, split.plus)
            self._characterize(node.minus, split.minus)
        else:
            raise InternalGeometryError(
                "sub-hyperplane lies on a cut of the sub-tree it is characterized against",
                component="Characterization",
            )

    def _add_outside_touching(self, sub: SubHyperplane) -> None:
        if self.outside_touching is None:
            self.outside_touching = sub
        else:
            self.outside_touching = self.outside_touching.reunite(sub)

    def _add_inside_touching(self, sub: SubHyperplane) -> None:
        if self.inside_touching is None:
            self.inside_touching = sub
        else:
            self.inside_touching = self.inside_touching.reunite(sub)

    def touch_outside(self) -> bool:
        return self.outside_touching is not None and not self.outside_touching.is_empty()

    def touch_inside(self) -> bool:
        return self.inside_touching is not None and not self.inside_touching.is_empty()


class BoundaryBuilder(BSPTreeVisitor):
    """Visitor storing a BoundaryAttribute on every internal node."""

    def visit_order(self, node: BSPTree) -> Order:
        return Order.PLUS_MINUS_SUB

    def visit_internal_node(self, node: BSPTree) -> None:
        plus_outside = None
        plus_inside = None

        # characterize the cut against the plus sub-tree, then refine against minus
        plus_char = Characterization(node.plus, node.cut.copy_self())

        if plus_char.touch_outside():
            minus_char = Characterization(node.minus, plus_char.outside_touching)
            if minus_char.touch_inside():
                plus_outside = minus_char.inside_touching

        if plus_char.touch_inside():
            minus_char = Characterization(node.minus, plus_char.inside_touching)
            if minus_char.touch_outside():
                plus_inside = minus_char.outside_touching

        node.attribute = BoundaryAttribute(plus_outside, plus_inside)

    def visit_leaf_node(self, node: BSPTree) -> None:
        pass


class BoundarySizeVisitor(BSPTreeVisitor):
    """Visitor summing the sizes of the boundary parts of a tree."""

    def __init__(self):
        self.boundary_size = 0.0

    def visit_order(self, node: BSPTree) -> Order:
        return Order.MINUS_SUB_PLUS

    def visit_internal_node(self, node: BSPTree) -> None:
        attribute = node.attribute
        if attribute.plus_outside is not None:
            self.boundary_size += attribute.plus_outside.size
        if attribute.plus_inside is not None:
            self.boundary_size += attribute.plus_inside.size

    def visit_leaf_node(self, node: BSPTree) -> None:
        pass
