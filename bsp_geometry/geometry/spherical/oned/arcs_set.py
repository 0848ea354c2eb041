"""
Finite unions of arcs on the 1-sphere.

The circle is cut by chords located at angles in [0, 2π). Offsets are plain
angle differences, so a tree never sees the wrap-around at angle 0: the
cells just after 0 and just before 2π are distinct cells which must share
the same inside/outside state for the set to be consistent.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from bsp_geometry.geometry.partitioning.abstract_region import AbstractRegion
from bsp_geometry.geometry.partitioning.bsp_tree import BSPTree, FunctionVisitor, Order
from bsp_geometry.geometry.partitioning.hyperplane import Side
from bsp_geometry.geometry.partitioning.region import Location
from bsp_geometry.geometry.space import SPHERE_1D, Space
from bsp_geometry.geometry.spherical.oned.arc import Arc
from bsp_geometry.geometry.spherical.oned.chord import Chord
from bsp_geometry.geometry.spherical.oned.s1_point import S1Point
from bsp_geometry.utils.exceptions import InconsistentStateAt2PiWrapping, InternalGeometryError, NotAnIntervalError
from bsp_geometry.utils.geom_logging import get_logger
from bsp_geometry.utils.numerics import SAFE_MIN, TWO_PI, normalize_angle

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)


class ArcsSplit:
    """
    Result of splitting an arcs set by an arc.

    Attributes:
        plus: Part of the set outside of the arc, or None
        minus: Part of the set inside the arc, or None
    """

    def __init__(self, plus: ArcsSet | None, minus: ArcsSet | None):
        self.plus = plus
        self.minus = minus

    @property
    def side(self) -> Side:
        has_plus = self.plus is not None and not self.plus.is_empty()
        has_minus = self.minus is not None and not self.minus.is_empty()
        if has_plus:
            return Side.BOTH if has_minus else Side.PLUS
        return Side.MINUS if has_minus else Side.HYPER


class ArcsSet(AbstractRegion):
    """
    Region of the circle made of disjoint arcs.

    Args:
        tree: Tree with Chord cuts and True/False leaves, None for the whole
            circle. The tree is used as is, without copying.
        tolerance: Tolerance below which angles are considered identical,
            None for the configured default

    Examples:
        >>> half = ArcsSet.from_bounds(0.0, np.pi)
        >>> half.check_point(S1Point(np.pi / 2))
        <Location.INSIDE: 'inside'>
        >>> wrap = ArcsSet.from_bounds(np.radians(350), np.radians(10))
        >>> len(wrap.as_list()), round(float(np.degrees(wrap.size)), 6)
        (1, 20.0)
    """

    @classmethod
    def from_bounds(cls, lower: float, upper: float, tolerance: float | None = None) -> ArcsSet:
        """
        Build a set containing a single arc.

        Args:
            lower: Start angle of the arc
            upper: End angle of the arc, it is normalized relative to
                ``lower`` so ``upper < lower`` describes an arc crossing 0
            tolerance: Set tolerance, None for the configured default

        Returns:
            Arcs set. Equal bounds, or bounds at least 2π apart, give the
            whole circle.

        Raises:
            NotAnIntervalError: If a bound is not finite
        """
        return cls(cls._build_tree(lower, upper, tolerance), tolerance)

    @staticmethod
    def _build_tree(lower: float, upper: float, tolerance: float | None) -> BSPTree:
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise NotAnIntervalError(lower, upper, component="ArcsSet")

        if lower == upper or upper - lower >= TWO_PI:
            return BSPTree(attribute=True)

        normalized_lower = normalize_angle(lower, math.pi)
        if lower <= upper:
            normalized_upper = normalized_lower + (upper - lower)
        else:
            normalized_upper = normalized_lower + (normalize_angle(upper, lower + math.pi) - lower)

        lower_cut = Chord(S1Point(normalized_lower), False, tolerance).whole_hyperplane()
        if normalized_upper < TWO_PI:
            # regular arc, not crossing angle 0
            upper_cut = Chord(S1Point(normalized_upper), True, tolerance).whole_hyperplane()
            return BSPTree(
                lower_cut,
                BSPTree(attribute=False),
                BSPTree(upper_cut, BSPTree(attribute=False), BSPTree(attribute=True)),
            )

        upper_cut = Chord(S1Point(normalized_upper - TWO_PI), True, tolerance).whole_hyperplane()
        return BSPTree(
            lower_cut,
            BSPTree(upper_cut, BSPTree(attribute=False), BSPTree(attribute=True)),
            BSPTree(attribute=True),
        )

    @property
    def space(self) -> Space:
        return SPHERE_1D

    def build_new(self, tree: BSPTree) -> ArcsSet:
        return ArcsSet(tree, self.tolerance)

    # =========================================================================
    # Arcs extraction
    # =========================================================================

    def as_list(self) -> list[Arc]:
        """
        Build the ordered list of arcs of the set.

        Returns:
            Disjoint arcs sorted by increasing lower bound. The last arc may
            end after 2π when it crosses the angle 0.

        Raises:
            InconsistentStateAt2PiWrapping: If the cells on both sides of the
                angle 0 do not share the same state
        """
        root = self.get_tree(False)
        if root.cut is None:
            return [Arc(0.0, TWO_PI, self.tolerance)] if root.attribute else []

        limits: list[float] = []

        def collect_limit(node: BSPTree) -> None:
            location = node.cut.hyperplane.location
            if self.check_point(location) is Location.BOUNDARY:
                limits.append(location.alpha)

        root.visit(FunctionVisitor(Order.MINUS_PLUS_SUB, on_internal=collect_limit))

        if not limits:
            # cuts without any real boundary, the tree stands for the whole circle
            return [Arc(0.0, TWO_PI, self.tolerance)]

        if len(limits) % 2 != 0:
            logger.warning(f"Found {len(limits)} arc limits, the set is inconsistent at 2π wrapping")
            raise InconsistentStateAt2PiWrapping(limits_count=len(limits))

        limits.sort()
        if self.check_point(S1Point(0.5 * (limits[0] + limits[1]))) is Location.OUTSIDE:
            # the first limit ends the arc crossing angle 0
            limits.append(limits.pop(0) + TWO_PI)

        return [Arc(limits[i], limits[i + 1], self.tolerance) for i in range(0, len(limits), 2)]

    def __iter__(self) -> Iterator[tuple[float, float]]:
        """Iterate over the (inf, sup) pairs of the arcs."""
        for arc in self.as_list():
            yield arc.inf, arc.sup

    def _compute_geometrical_properties(self) -> None:
        root = self.get_tree(False)
        if root.cut is None:
            self._set_barycenter(S1Point.NAN)
            self._set_size(TWO_PI if root.attribute else 0.0)
            return

        size = 0.0
        total = 0.0
        for arc in self.as_list():
            size += arc.size
            total += arc.size * arc.barycenter
        self._set_size(size)

        if size == TWO_PI:
            self._set_barycenter(S1Point.NAN)
        elif size >= SAFE_MIN:
            self._set_barycenter(S1Point(total / size))
        else:
            self._set_barycenter(root.cut.hyperplane.location)

    def representative_point(self, cell: BSPTree) -> S1Point:
        """Middle of the angular bounds of a pruned convex cell."""
        lower = 0.0
        upper = TWO_PI
        node = cell
        while node.cut is not None:
            chord = node.cut.hyperplane
            alpha = chord.location.alpha
            go_plus = node.plus.cut is not None or bool(node.plus.attribute)
            # larger angles are on the plus side of direct chords
            if go_plus == chord.is_direct:
                lower = max(lower, alpha)
            else:
                upper = min(upper, alpha)
            node = node.plus if go_plus else node.minus
        return S1Point(0.5 * (lower + upper))

    # =========================================================================
    # Limits navigation
    # =========================================================================

    def get_smallest_limit(self) -> Chord | None:
        """Chord with the smallest angle, None if the tree has no cut."""
        node = self.get_tree(False)
        if node.cut is None:
            return None
        previous = self._previous_node(node)
        while previous is not None:
            node = previous
            previous = self._previous_node(node)
        return node.cut.hyperplane

    def get_largest_limit(self) -> Chord | None:
        """Chord with the largest angle, None if the tree has no cut."""
        node = self.get_tree(False)
        if node.cut is None:
            return None
        following = self._next_node(node)
        while following is not None:
            node = following
            following = self._next_node(node)
        return node.cut.hyperplane

    def _next_node(self, node: BSPTree) -> BSPTree | None:
        next_deeper = node.plus if node.cut.hyperplane.is_direct else node.minus
        if next_deeper.cut is not None:
            return self._find_smallest(next_deeper)
        while self._is_after_parent(node):
            node = node.parent
        return node.parent

    def _previous_node(self, node: BSPTree) -> BSPTree | None:
        next_deeper = node.minus if node.cut.hyperplane.is_direct else node.plus
        if next_deeper.cut is not None:
            return self._find_largest(next_deeper)
        while self._is_before_parent(node):
            node = node.parent
        return node.parent

    @staticmethod
    def _is_before_parent(node: BSPTree) -> bool:
        parent = node.parent
        if parent is None:
            return False
        if parent.cut.hyperplane.is_direct:
            return node is parent.minus
        return node is parent.plus

    @staticmethod
    def _is_after_parent(node: BSPTree) -> bool:
        parent = node.parent
        if parent is None:
            return False
        if parent.cut.hyperplane.is_direct:
            return node is parent.plus
        return node is parent.minus

    @staticmethod
    def _find_smallest(node: BSPTree) -> BSPTree | None:
        internal = None
        while node.cut is not None:
            internal = node
            node = node.minus if node.cut.hyperplane.is_direct else node.plus
        return internal

    @staticmethod
    def _find_largest(node: BSPTree) -> BSPTree | None:
        internal = None
        while node.cut is not None:
            internal = node
            node = node.plus if node.cut.hyperplane.is_direct else node.minus
        return internal

    # =========================================================================
    # Splitting
    # =========================================================================

    def split(self, arc: Arc) -> ArcsSplit:
        """
        Split the set by an arc.

        Args:
            arc: Splitting arc

        Returns:
            Split whose minus part is the part of the set inside the arc and
            whose plus part is the part outside it
        """
        minus: list[float] = []
        plus: list[float] = []

        reference = math.pi + arc.inf
        arc_length = arc.sup - arc.inf

        for start, end in self:
            # start and end shifted so the splitting arc begins at 0
            synced_start = normalize_angle(start, reference) - arc.inf
            arc_offset = start - synced_start
            synced_end = end - arc_offset

            if synced_start < arc_length:
                minus.append(start)
                if synced_end > arc_length:
                    # leave the arc
                    minus_to_plus = arc_length + arc_offset
                    minus.append(minus_to_plus)
                    plus.append(minus_to_plus)
                    if synced_end > TWO_PI:
                        # and come back into it
                        plus_to_minus = TWO_PI + arc_offset
                        plus.append(plus_to_minus)
                        minus.append(plus_to_minus)
                        minus.append(end)
                    else:
                        plus.append(end)
                else:
                    minus.append(end)
            else:
                plus.append(start)
                if synced_end > TWO_PI:
                    # wrap around to the arc start
                    plus_to_minus = TWO_PI + arc_offset
                    plus.append(plus_to_minus)
                    minus.append(plus_to_minus)
                    if synced_end > TWO_PI + arc_length:
                        # and leave it again
                        minus_to_plus = TWO_PI + arc_length + arc_offset
                        minus.append(minus_to_plus)
                        plus.append(minus_to_plus)
                        plus.append(end)
                    else:
                        minus.append(end)
                else:
                    plus.append(end)

        return ArcsSplit(self._create_split_part(plus), self._create_split_part(minus))

    def _create_split_part(self, limits: list[float]) -> ArcsSet | None:
        if not limits:
            return None

        # collapse limits closer than the tolerance
        i = 0
        while i < len(limits):
            j = (i + 1) % len(limits)
            l_a = limits[i]
            l_b = normalize_angle(limits[j], l_a)
            if abs(l_b - l_a) <= self.tolerance:
                if j > 0:
                    if i % 2 == 0 and limits[j] - l_a > math.pi:
                        # start and end of an arc covering the whole circle
                        return ArcsSet(BSPTree(attribute=True), self.tolerance)
                    del limits[j]
                    del limits[i]
                    i -= 1
                else:
                    # the last limit is close to the first one, across angle 0
                    l_end = limits.pop()
                    l_start = limits.pop(0)
                    if not limits:
                        if l_end - l_start > math.pi:
                            return ArcsSet(BSPTree(attribute=True), self.tolerance)
                        return None
                    # the list now starts with an arc end, move it to the back
                    limits.append(limits.pop(0) + TWO_PI)
            i += 1

        tree = BSPTree(attribute=False)
        for k in range(0, len(limits) - 1, 2):
            self._add_arc_limit(tree, limits[k], True)
            self._add_arc_limit(tree, limits[k + 1], False)

        if tree.cut is None:
            return None
        return ArcsSet(tree, self.tolerance)

    def _add_arc_limit(self, tree: BSPTree, alpha: float, is_start: bool) -> None:
        limit = Chord(S1Point(alpha), not is_start, self.tolerance)
        node = tree.get_cell(limit.location, self.tolerance)
        if not node.insert_cut(limit):
            raise InternalGeometryError(f"arc limit at {alpha} does not split its cell", component="ArcsSet")
        node.plus.attribute = False
        node.minus.attribute = True
