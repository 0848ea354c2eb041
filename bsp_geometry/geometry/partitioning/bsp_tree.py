"""
Binary space partitioning tree.

The tree is built by successively cutting a space by hyperplanes. Each cut
is stored as the part of its hyperplane that lies inside the cell being
split, so the cuts of a tree never extend outside their own cell. Leaves
carry an arbitrary attribute (for regions: True for inside, False for
outside), internal nodes may carry boundary information.

The merging algorithm follows Bruce Naylor, John Amanatides and William
Thibault, "Merging BSP Trees Yields Polyhedral Set Operations", SIGGRAPH
1990.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from bsp_geometry.geometry.partitioning.hyperplane import Side

if TYPE_CHECKING:
    from collections.abc import Callable

    from bsp_geometry.geometry.partitioning.hyperplane import Hyperplane, SubHyperplane
    from bsp_geometry.geometry.space import Point


class Order(Enum):
    """Order in which the plus sub-tree, the minus sub-tree and the cut are visited."""

    PLUS_MINUS_SUB = ("plus", "minus", "sub")
    PLUS_SUB_MINUS = ("plus", "sub", "minus")
    MINUS_PLUS_SUB = ("minus", "plus", "sub")
    MINUS_SUB_PLUS = ("minus", "sub", "plus")
    SUB_PLUS_MINUS = ("sub", "plus", "minus")
    SUB_MINUS_PLUS = ("sub", "minus", "plus")


class BSPTreeVisitor(ABC):
    """Visitor walking a BSP tree in a node dependent order."""

    @abstractmethod
    def visit_order(self, node: BSPTree) -> Order:
        """Order to use for the sub-trees of an internal node."""

    @abstractmethod
    def visit_internal_node(self, node: BSPTree) -> None:
        """Visit an internal node, its cut is not None."""

    @abstractmethod
    def visit_leaf_node(self, node: BSPTree) -> None:
        """Visit a leaf node."""


class FunctionVisitor(BSPTreeVisitor):
    """
    Visitor built from plain callables.

    Args:
        order: Fixed order used for every internal node
        on_internal: Called with each internal node, may be None
        on_leaf: Called with each leaf node, may be None
    """

    def __init__(
        self,
        order: Order,
        on_internal: Callable[[BSPTree], None] | None = None,
        on_leaf: Callable[[BSPTree], None] | None = None,
    ):
        self.order = order
        self.on_internal = on_internal
        self.on_leaf = on_leaf

    def visit_order(self, node: BSPTree) -> Order:
        return self.order

    def visit_internal_node(self, node: BSPTree) -> None:
        if self.on_internal is not None:
            self.on_internal(node)

    def visit_leaf_node(self, node: BSPTree) -> None:
        if self.on_leaf is not None:
            self.on_leaf(node)


class LeafMerger(ABC):
    """Strategy deciding what a leaf becomes when merged with another tree."""

    @abstractmethod
    def merge(
        self,
        leaf: BSPTree,
        tree: BSPTree,
        parent_tree: BSPTree | None,
        is_plus_child: bool,
        leaf_from_instance: bool,
    ) -> BSPTree:
        """
        Merge a leaf node and a tree node.

        Args:
            leaf: Leaf node, either from the instance or from the argument tree
            tree: Node from the other tree, may itself be a leaf
            parent_tree: Parent node the result must be attached to, None at the root
            is_plus_child: True if the result is the plus child of ``parent_tree``
            leaf_from_instance: True if ``leaf`` comes from the instance tree

        Returns:
            Merged node, already inserted under ``parent_tree``
        """


class VanishingCutHandler(ABC):
    """Strategy fixing nodes whose cut disappears while a tree is chopped."""

    @abstractmethod
    def fix_node(self, node: BSPTree) -> BSPTree:
        """Node to use in place of ``node``, whose cut has vanished."""


class BSPTree:
    """
    Node of a binary space partitioning tree.

    A node is a leaf when its cut is None, otherwise it has both a plus and a
    minus child. Every child keeps a reference to its parent.

    Args:
        cut: Cut sub-hyperplane, None for a leaf
        plus: Plus side child, required when ``cut`` is given
        minus: Minus side child, required when ``cut`` is given
        attribute: Attribute of the node

    Examples:
        >>> leaf = BSPTree(attribute=True)
        >>> leaf.is_leaf
        True
    """

    def __init__(
        self,
        cut: SubHyperplane | None = None,
        plus: BSPTree | None = None,
        minus: BSPTree | None = None,
        attribute: Any = None,
    ):
        if cut is None:
            if plus is not None or minus is not None:
                raise ValueError("Leaf nodes cannot have children")
        elif plus is None or minus is None:
            raise ValueError("Internal nodes require both a plus and a minus child")

        self._cut = cut
        self._plus = plus
        self._minus = minus
        self._parent: BSPTree | None = None
        self.attribute = attribute

        if plus is not None and minus is not None:
            plus._parent = self
            minus._parent = self

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def cut(self) -> SubHyperplane | None:
        return self._cut

    @property
    def plus(self) -> BSPTree | None:
        return self._plus

    @property
    def minus(self) -> BSPTree | None:
        return self._minus

    @property
    def parent(self) -> BSPTree | None:
        return self._parent

    @property
    def is_leaf(self) -> bool:
        return self._cut is None

    def __repr__(self) -> str:
        if self._cut is None:
            return f"BSPTree(attribute={self.attribute!r})"
        return f"BSPTree(cut={self._cut!r}, attribute={self.attribute!r})"

    # =========================================================================
    # Construction
    # =========================================================================

    def insert_cut(self, hyperplane: Hyperplane) -> bool:
        """
        Insert a cut hyperplane at this node.

        The hyperplane is first restricted to the convex cell of the node. If
        nothing remains the tree is left unchanged. Otherwise the node becomes
        an internal node with two fresh leaves (attribute None), dropping any
        previous sub-trees.

        Args:
            hyperplane: Hyperplane to insert, it should be owned by the tree

        Returns:
            True if the cut was inserted, False if it does not split the cell
        """
        chopped = self._fit_to_cell(hyperplane.whole_hyperplane())
        if chopped is None or chopped.is_empty():
            return False

        if self._cut is not None:
            self._plus._parent = None
            self._minus._parent = None

        self._cut = chopped
        self._plus = BSPTree()
        self._plus._parent = self
        self._minus = BSPTree()
        self._minus._parent = self
        self.attribute = None
        return True

    def copy_self(self) -> BSPTree:
        """
        Copy the tree structure.

        Cuts are copied through their own ``copy_self``, attributes are
        shared between the original and the copy.
        """
        if self._cut is None:
            return BSPTree(attribute=self.attribute)
        return BSPTree(self._cut.copy_self(), self._plus.copy_self(), self._minus.copy_self(), self.attribute)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_cell(self, point: Point, tolerance: float | None = None) -> BSPTree:
        """
        Get the leaf cell containing a point.

        A point goes to the plus child only when its offset exceeds the
        tolerance, so points lying on a cut (within tolerance) always end up
        in the minus child.

        Args:
            point: Point to locate
            tolerance: Offset threshold, None for 0

        Returns:
            Leaf node whose cell contains the point
        """
        threshold = 0.0 if tolerance is None else tolerance
        node = self
        while node._cut is not None:
            offset = node._cut.hyperplane.get_offset(point)
            node = node._plus if offset > threshold else node._minus
        return node

    def get_close_cuts(self, point: Point, max_offset: float) -> list[BSPTree]:
        """Get the internal nodes whose cut lies within ``max_offset`` of a point."""
        close: list[BSPTree] = []
        self._recurse_close_cuts(point, max_offset, close)
        return close

    def _recurse_close_cuts(self, point: Point, max_offset: float, close: list[BSPTree]) -> None:
        if self._cut is None:
            return
        offset = self._cut.hyperplane.get_offset(point)
        if offset < -max_offset:
            self._minus._recurse_close_cuts(point, max_offset, close)
        elif offset > max_offset:
            self._plus._recurse_close_cuts(point, max_offset, close)
        else:
            close.append(self)
            self._plus._recurse_close_cuts(point, max_offset, close)
            self._minus._recurse_close_cuts(point, max_offset, close)

    def visit(self, visitor: BSPTreeVisitor) -> None:
        """
        Visit the tree with an explicit stack.

        The visitor chooses the order for each internal node when the node is
        reached, so it may use a different order in different sub-trees.
        """
        # (node, ready) pairs: ready internal nodes are visited, others expanded
        stack: list[tuple[BSPTree, bool]] = [(self, False)]
        while stack:
            node, ready = stack.pop()
            if ready:
                visitor.visit_internal_node(node)
            elif node._cut is None:
                visitor.visit_leaf_node(node)
            else:
                for step in reversed(visitor.visit_order(node).value):
                    if step == "sub":
                        stack.append((node, True))
                    elif step == "plus":
                        stack.append((node._plus, False))
                    else:
                        stack.append((node._minus, False))

    # =========================================================================
    # Cell fitting and condensation
    # =========================================================================

    def _fit_to_cell(self, sub: SubHyperplane) -> SubHyperplane | None:
        """Restrict a sub-hyperplane to the convex cell of the instance."""
        s: SubHyperplane | None = sub
        tree = self
        while tree._parent is not None and s is not None:
            hyperplane = tree._parent._cut.hyperplane
            if tree is tree._parent._plus:
                s = s.split(hyperplane).plus
            else:
                s = s.split(hyperplane).minus
            tree = tree._parent
        return s

    def _condense(self) -> None:
        """Collapse an internal node whose two leaves carry the same attribute."""
        if (
            self._cut is not None
            and self._plus._cut is None
            and self._minus._cut is None
            and self._plus.attribute == self._minus.attribute
        ):
            self.attribute = self._plus.attribute
            self._cut = None
            self._plus = None
            self._minus = None

    # =========================================================================
    # Merging and splitting
    # =========================================================================

    def merge(self, tree: BSPTree, leaf_merger: LeafMerger) -> BSPTree:
        """
        Merge the instance with another tree.

        Both trees are consumed: the result reuses nodes from both of them,
        so callers owning the inputs should merge copies.

        Args:
            tree: Other tree to merge
            leaf_merger: Strategy applied whenever a leaf meets a tree

        Returns:
            Root of the merged tree
        """
        return self._merge(tree, leaf_merger, None, False)

    def _merge(
        self,
        tree: BSPTree,
        leaf_merger: LeafMerger,
        parent_tree: BSPTree | None,
        is_plus_child: bool,
    ) -> BSPTree:
        if self._cut is None:
            return leaf_merger.merge(self, tree, parent_tree, is_plus_child, True)
        if tree._cut is None:
            return leaf_merger.merge(tree, self, parent_tree, is_plus_child, False)

        merged = tree.split(self._cut)
        if parent_tree is not None:
            merged._parent = parent_tree
            if is_plus_child:
                parent_tree._plus = merged
            else:
                parent_tree._minus = merged

        self._plus._merge(merged._plus, leaf_merger, merged, True)
        self._minus._merge(merged._minus, leaf_merger, merged, False)
        merged._condense()
        if merged._cut is not None:
            refitted = merged._fit_to_cell(merged._cut.hyperplane.whole_hyperplane())
            if refitted is not None:
                merged._cut = refitted

        return merged

    def split(self, sub: SubHyperplane) -> BSPTree:
        """
        Split the tree by a sub-hyperplane.

        Args:
            sub: Partitioning sub-hyperplane, it must already be restricted
                to the cell of the instance

        Returns:
            New tree whose root cut is ``sub``, its plus (resp. minus) child
            holding the part of the instance lying on the plus (resp. minus)
            side. The instance is left unchanged.
        """
        if self._cut is None:
            return BSPTree(sub, self.copy_self(), BSPTree(attribute=self.attribute), None)

        c_hyperplane = self._cut.hyperplane
        s_hyperplane = sub.hyperplane
        sub_parts = sub.split(c_hyperplane)
        side = sub_parts.side

        if side is Side.PLUS:
            split = self._plus.split(sub)
            if self._cut.split(s_hyperplane).side is Side.PLUS:
                split._plus = BSPTree(self._cut.copy_self(), split._plus, self._minus.copy_self(), self.attribute)
                split._plus._condense()
                split._plus._parent = split
            else:
                split._minus = BSPTree(self._cut.copy_self(), split._minus, self._minus.copy_self(), self.attribute)
                split._minus._condense()
                split._minus._parent = split
            return split

        if side is Side.MINUS:
            split = self._minus.split(sub)
            if self._cut.split(s_hyperplane).side is Side.PLUS:
                split._plus = BSPTree(self._cut.copy_self(), self._plus.copy_self(), split._plus, self.attribute)
                split._plus._condense()
                split._plus._parent = split
            else:
                split._minus = BSPTree(self._cut.copy_self(), self._plus.copy_self(), split._minus, self.attribute)
                split._minus._condense()
                split._minus._parent = split
            return split

        if side is Side.BOTH:
            cut_parts = self._cut.split(s_hyperplane)
            split = BSPTree(sub, self._plus.split(sub_parts.plus), self._minus.split(sub_parts.minus), None)
            split._plus._cut = cut_parts.plus
            split._minus._cut = cut_parts.minus
            # the crossed halves of the two sub-trees swap places
            tmp = split._plus._minus
            split._plus._minus = split._minus._plus
            split._plus._minus._parent = split._plus
            split._minus._plus = tmp
            split._minus._plus._parent = split._minus
            split._plus._condense()
            split._minus._condense()
            return split

        if c_hyperplane.same_orientation_as(s_hyperplane):
            return BSPTree(sub, self._plus.copy_self(), self._minus.copy_self(), self.attribute)
        return BSPTree(sub, self._minus.copy_self(), self._plus.copy_self(), self.attribute)

    def insert_in_tree(
        self,
        parent_tree: BSPTree | None,
        is_plus_child: bool,
        vanishing_handler: VanishingCutHandler,
    ) -> None:
        """
        Insert the instance into another tree.

        The instance is attached as a child of ``parent_tree`` and every part
        of it extending on the wrong side of an ancestor cut is chopped off.

        Args:
            parent_tree: Future parent, None to make the instance a root
            is_plus_child: True to attach as the plus child
            vanishing_handler: Strategy used when a cut disappears entirely
        """
        self._parent = parent_tree
        if parent_tree is not None:
            if is_plus_child:
                parent_tree._plus = self
            else:
                parent_tree._minus = self

        if self._cut is None:
            return

        tree = self
        while tree._parent is not None:
            hyperplane = tree._parent._cut.hyperplane

            if tree is tree._parent._plus:
                self._cut = self._cut.split(hyperplane).plus
                self._plus._chop_off_minus(hyperplane, vanishing_handler)
                self._minus._chop_off_minus(hyperplane, vanishing_handler)
            else:
                self._cut = self._cut.split(hyperplane).minus
                self._plus._chop_off_plus(hyperplane, vanishing_handler)
                self._minus._chop_off_plus(hyperplane, vanishing_handler)

            if self._cut is None:
                self._replace_with(vanishing_handler.fix_node(self))
                if self._cut is None:
                    break

            tree = tree._parent

        self._condense()

    def _chop_off_minus(self, hyperplane: Hyperplane, vanishing_handler: VanishingCutHandler) -> None:
        """Remove the parts of the tree lying on the minus side of a hyperplane."""
        if self._cut is None:
            return
        self._cut = self._cut.split(hyperplane).plus
        self._plus._chop_off_minus(hyperplane, vanishing_handler)
        self._minus._chop_off_minus(hyperplane, vanishing_handler)
        if self._cut is None:
            self._replace_with(vanishing_handler.fix_node(self))

    def _chop_off_plus(self, hyperplane: Hyperplane, vanishing_handler: VanishingCutHandler) -> None:
        """Remove the parts of the tree lying on the plus side of a hyperplane."""
        if self._cut is None:
            return
        self._cut = self._cut.split(hyperplane).minus
        self._plus._chop_off_plus(hyperplane, vanishing_handler)
        self._minus._chop_off_plus(hyperplane, vanishing_handler)
        if self._cut is None:
            self._replace_with(vanishing_handler.fix_node(self))

    def _replace_with(self, fixed: BSPTree) -> None:
        """Take over the content of another node, keeping the instance's parent."""
        self._cut = fixed._cut
        self._plus = fixed._plus
        self._minus = fixed._minus
        self.attribute = fixed.attribute
        if self._cut is not None:
            self._plus._parent = self
            self._minus._parent = self

    def prune_around_convex_cell(
        self,
        cell_attribute: Any,
        other_leafs_attributes: Any,
        internal_attributes: Any,
    ) -> BSPTree:
        """
        Build a tree isolating the convex cell of this leaf.

        Only the cuts of the ancestors are kept, so the result has one leaf
        per level plus the cell itself.

        Args:
            cell_attribute: Attribute of the leaf representing the cell
            other_leafs_attributes: Attribute of every other leaf
            internal_attributes: Attribute of the internal nodes

        Returns:
            Pruned tree
        """
        tree = BSPTree(attribute=cell_attribute)
        current = self
        while current._parent is not None:
            # ancestors whose cut vanished during a chop do not bound the cell
            if current._parent._cut is not None:
                parent_cut = current._parent._cut.copy_self()
                sibling = BSPTree(attribute=other_leafs_attributes)
                if current is current._parent._plus:
                    tree = BSPTree(parent_cut, tree, sibling, internal_attributes)
                else:
                    tree = BSPTree(parent_cut, sibling, tree, internal_attributes)
            current = current._parent
        return tree
