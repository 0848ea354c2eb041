"""Finite unions of intervals on the real line."""

from __future__ import annotations

import math

from bsp_geometry.geometry.euclidean.oned.interval import Interval
from bsp_geometry.geometry.euclidean.oned.oriented_point import OrientedPoint
from bsp_geometry.geometry.euclidean.oned.vector_1d import Vector1D
from bsp_geometry.geometry.partitioning.abstract_region import AbstractRegion
from bsp_geometry.geometry.partitioning.bsp_tree import BSPTree
from bsp_geometry.geometry.partitioning.region import Location
from bsp_geometry.geometry.space import EUCLIDEAN_1D, Space
from bsp_geometry.utils.exceptions import validate_interval
from bsp_geometry.utils.numerics import SAFE_MIN


class IntervalsSet(AbstractRegion):
    """
    Region of the real line made of disjoint intervals.

    Args:
        tree: Tree with OrientedPoint cuts and True/False leaves, None for
            the whole line
        tolerance: Tolerance below which abscissas are considered identical,
            None for the configured default
    """

    @classmethod
    def from_bounds(cls, lower: float, upper: float, tolerance: float | None = None) -> IntervalsSet:
        """
        Build a set containing a single interval.

        Infinite bounds give half-lines, or the whole line when both are
        infinite.

        Raises:
            NotAnIntervalError: If ``lower > upper`` or a bound is NaN
        """
        validate_interval(lower, upper, component="IntervalsSet")
        return cls(cls._build_tree(lower, upper, tolerance), tolerance)

    @staticmethod
    def _build_tree(lower: float, upper: float, tolerance: float | None) -> BSPTree:
        if math.isinf(lower) and lower < 0:
            if math.isinf(upper) and upper > 0:
                return BSPTree(attribute=True)
            # open on the negative side
            upper_cut = OrientedPoint(Vector1D(upper), True, tolerance).whole_hyperplane()
            return BSPTree(upper_cut, BSPTree(attribute=False), BSPTree(attribute=True))

        lower_cut = OrientedPoint(Vector1D(lower), False, tolerance).whole_hyperplane()
        if math.isinf(upper) and upper > 0:
            # open on the positive side
            return BSPTree(lower_cut, BSPTree(attribute=False), BSPTree(attribute=True))

        upper_cut = OrientedPoint(Vector1D(upper), True, tolerance).whole_hyperplane()
        return BSPTree(
            lower_cut,
            BSPTree(attribute=False),
            BSPTree(upper_cut, BSPTree(attribute=False), BSPTree(attribute=True)),
        )

    @property
    def space(self) -> Space:
        return EUCLIDEAN_1D

    def build_new(self, tree: BSPTree) -> IntervalsSet:
        return IntervalsSet(tree, self.tolerance)

    @property
    def inf(self) -> float:
        """Lowest value belonging to the set, -inf if unbounded below."""
        node = self.get_tree(False)
        inf = math.inf
        while node.cut is not None:
            op = node.cut.hyperplane
            inf = op.location.x
            node = node.minus if op.is_direct else node.plus
        return -math.inf if node.attribute else inf

    @property
    def sup(self) -> float:
        """Highest value belonging to the set, +inf if unbounded above."""
        node = self.get_tree(False)
        sup = -math.inf
        while node.cut is not None:
            op = node.cut.hyperplane
            sup = op.location.x
            node = node.plus if op.is_direct else node.minus
        return math.inf if node.attribute else sup

    def as_list(self) -> list[Interval]:
        """Build the ordered list of disjoint intervals of the set."""
        intervals: list[Interval] = []
        self._recurse_list(self.get_tree(False), intervals, -math.inf, math.inf)
        return intervals

    def _recurse_list(self, node: BSPTree, intervals: list[Interval], lower: float, upper: float) -> None:
        if node.cut is None:
            if node.attribute:
                intervals.append(Interval(lower, upper))
            return

        op = node.cut.hyperplane
        location = op.location
        x = location.x

        # explore in increasing order
        low = node.minus if op.is_direct else node.plus
        high = node.plus if op.is_direct else node.minus

        self._recurse_list(low, intervals, lower, x)
        if (
            self.check_point_in(low, location) is Location.INSIDE
            and self.check_point_in(high, location) is Location.INSIDE
        ):
            # the cut separates two inside cells, merge them
            x = intervals.pop().inf
        self._recurse_list(high, intervals, x, upper)

    def __iter__(self):
        for interval in self.as_list():
            yield interval.inf, interval.sup

    def _compute_geometrical_properties(self) -> None:
        root = self.get_tree(False)
        if root.cut is None:
            self._set_barycenter(Vector1D.NAN)
            self._set_size(math.inf if root.attribute else 0.0)
            return

        size = 0.0
        total = 0.0
        for interval in self.as_list():
            size += interval.size
            total += interval.size * interval.barycenter
        self._set_size(size)

        if math.isinf(size):
            self._set_barycenter(Vector1D.NAN)
        elif size >= SAFE_MIN:
            self._set_barycenter(Vector1D(total / size))
        else:
            self._set_barycenter(root.cut.hyperplane.location)

    def representative_point(self, cell: BSPTree) -> Vector1D:
        """Point inside a pruned convex cell, away from its bounds."""
        lower = -math.inf
        upper = math.inf
        node = cell
        while node.cut is not None:
            op = node.cut.hyperplane
            x = op.location.x
            go_plus = node.plus.cut is not None or bool(node.plus.attribute)
            if go_plus == op.is_direct:
                lower = max(lower, x)
            else:
                upper = min(upper, x)
            node = node.plus if go_plus else node.minus

        if math.isinf(lower) and math.isinf(upper):
            return Vector1D(0.0)
        if math.isinf(lower):
            return Vector1D(upper - 1.0)
        if math.isinf(upper):
            return Vector1D(lower + 1.0)
        return Vector1D(0.5 * (lower + upper))
