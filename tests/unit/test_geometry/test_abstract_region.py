"""
Unit tests for the generic region machinery.

The generic behaviour (emptiness, point classification, boundary
attributes, sides, sub-hyperplane intersection, construction from a
boundary, transforms and lazy properties) is exercised on both 1-D
instantiations.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import numpy as np

from bsp_geometry import (
    ArcsSet,
    BSPTree,
    Chord,
    DimensionMismatchError,
    IntervalsSet,
    Location,
    OrientedPoint,
    S1Point,
    Side,
    Vector1D,
)
from bsp_geometry.geometry.partitioning import AbstractRegion, BoundaryAttribute, Transform

TOL = 1.0e-10


class Rotation(Transform):
    """Rotation of the circle, valid for cuts that stay inside [0, 2π)."""

    def __init__(self, angle):
        self.angle = angle

    def apply_point(self, point):
        return S1Point(point.alpha + self.angle)

    def apply_hyperplane(self, hyperplane):
        return Chord(self.apply_point(hyperplane.location), hyperplane.is_direct, hyperplane.tolerance)

    def apply_sub_hyperplane(self, sub, original, transformed):
        return sub


def internal_nodes(node):
    """Internal nodes of a tree, in preorder."""
    if node.cut is None:
        return []
    return [node, *internal_nodes(node.plus), *internal_nodes(node.minus)]


def shifted(hyperplane, offset):
    """Point at a signed offset from a 1-D hyperplane."""
    step = offset if hyperplane.is_direct else -offset
    location = hyperplane.location
    if isinstance(location, S1Point):
        return S1Point(location.alpha + step)
    return Vector1D(location.x + step)


# =============================================================================
# Emptiness and classification
# =============================================================================


class TestEmptiness:
    """Test is_empty and is_full."""

    def test_whole_space(self):
        for region in (ArcsSet(tolerance=TOL), IntervalsSet(tolerance=TOL)):
            assert region.is_full()
            assert not region.is_empty()

    def test_empty_space(self):
        for region in (ArcsSet(BSPTree(attribute=False), TOL), IntervalsSet(BSPTree(attribute=False), TOL)):
            assert region.is_empty()
            assert not region.is_full()

    def test_sub_tree(self, unit_interval):
        tree = unit_interval.get_tree(False)

        assert unit_interval.is_empty(tree.plus)
        assert not unit_interval.is_empty(tree.minus)
        assert unit_interval.is_full(tree.minus.minus)
        assert not unit_interval.is_full()
        assert not unit_interval.is_empty()


class TestCheckPoint:
    """Test point classification."""

    @pytest.mark.parametrize(
        ("x", "expected"),
        [(0.5, Location.INSIDE), (0.0, Location.BOUNDARY), (1.0, Location.BOUNDARY), (2.0, Location.OUTSIDE)],
    )
    def test_interval(self, unit_interval, x, expected):
        assert unit_interval.check_point(Vector1D(x)) is expected

    def test_tolerance_band(self, unit_interval):
        assert unit_interval.check_point(Vector1D(1.0 + 0.5e-10)) is Location.BOUNDARY
        assert unit_interval.check_point(Vector1D(1.0 + 1.0e-9)) is Location.OUTSIDE

    def test_dummy_cut_is_not_boundary(self, factory):
        union = factory.union(IntervalsSet.from_bounds(0.0, 1.0, TOL), IntervalsSet.from_bounds(1.0, 2.0, TOL))

        assert union.check_point(Vector1D(1.0)) is Location.INSIDE

    def test_contains_operator(self, unit_interval):
        assert Vector1D(0.5) in unit_interval
        assert Vector1D(1.0) in unit_interval
        assert Vector1D(3.0) not in unit_interval

    def test_wrong_space(self, unit_interval, half_circle):
        with pytest.raises(DimensionMismatchError):
            unit_interval.check_point(S1Point(0.5))

        with pytest.raises(DimensionMismatchError):
            half_circle.check_point(Vector1D(0.5))


# =============================================================================
# Boundary
# =============================================================================


class TestBoundary:
    """Test boundary attributes."""

    def test_attributes_built_on_demand(self):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)

        assert region.get_tree(False).attribute is None
        root = region.get_tree(True)
        assert isinstance(root.attribute, BoundaryAttribute)
        assert isinstance(root.minus.attribute, BoundaryAttribute)

    def test_attribute_orientation(self):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)
        root = region.get_tree(True)

        # the chord at 1 is not direct: its plus side holds the angles below 1
        assert root.attribute.plus_outside is not None
        assert root.attribute.plus_inside is None
        assert root.minus.attribute.plus_outside is not None
        assert root.minus.attribute.plus_inside is None

    @pytest.mark.parametrize("region_name", ["two_arcs", "wrapping_arcs", "unit_interval"])
    def test_attributes_separate_inside_from_outside(self, request, region_name):
        region = request.getfixturevalue(region_name)
        delta = 1.0e-6

        checked = 0
        for node in internal_nodes(region.get_tree(True)):
            attribute = node.attribute
            hyperplane = node.cut.hyperplane
            if attribute.plus_outside is not None:
                assert region.check_point(shifted(hyperplane, delta)) is Location.OUTSIDE
                assert region.check_point(shifted(hyperplane, -delta)) is Location.INSIDE
                checked += 1
            if attribute.plus_inside is not None:
                assert region.check_point(shifted(hyperplane, delta)) is Location.INSIDE
                assert region.check_point(shifted(hyperplane, -delta)) is Location.OUTSIDE
                checked += 1

        assert checked == 2 * len(region.as_list())

    def test_complement_swaps_attributes(self, factory):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)
        region.get_tree(True)

        complement = factory.get_complement(region)
        root = complement.get_tree(False)

        assert root.attribute.plus_outside is None
        assert root.attribute.plus_inside is not None

    def test_boundary_size_of_points(self, two_arcs, unit_interval):
        assert two_arcs.boundary_size == 0.0
        assert unit_interval.boundary_size == 0.0


# =============================================================================
# Sides and intersections
# =============================================================================


class TestSide:
    """Test region sides with respect to hyperplanes."""

    @pytest.mark.parametrize(
        ("location", "direct", "expected"),
        [
            (2.0, True, Side.MINUS),
            (-1.0, True, Side.PLUS),
            (0.5, True, Side.BOTH),
            (2.0, False, Side.PLUS),
        ],
    )
    def test_interval_side(self, unit_interval, location, direct, expected):
        assert unit_interval.side(OrientedPoint(Vector1D(location), direct, TOL)) is expected

    @pytest.mark.parametrize(
        ("location", "direct", "expected"),
        [
            (3.0, True, Side.MINUS),
            (3.0, False, Side.PLUS),
            (1.5, True, Side.BOTH),
            (1.0, True, Side.PLUS),
            (2.0, True, Side.MINUS),
        ],
    )
    def test_arc_side(self, location, direct, expected):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)

        assert region.side(Chord(S1Point(location), direct, TOL)) is expected

    def test_wrapping_arc_side(self, wrapping_arcs):
        # the arc holds angles below 2.3 and above 5.7
        assert wrapping_arcs.side(Chord(S1Point(4.0), True, TOL)) is Side.BOTH
        assert wrapping_arcs.side(Chord(S1Point(6.0), False, TOL)) is Side.BOTH

    def test_empty_arcs_set_is_hyper(self):
        empty = ArcsSet(BSPTree(attribute=False), TOL)

        assert empty.side(Chord(S1Point(1.0), True, TOL)) is Side.HYPER

    def test_empty_region_is_hyper(self):
        empty = IntervalsSet(BSPTree(attribute=False), TOL)

        assert empty.side(OrientedPoint(Vector1D(0.0), True, TOL)) is Side.HYPER

    def test_side_wrong_space(self, unit_interval):
        with pytest.raises(DimensionMismatchError):
            unit_interval.side(Chord(S1Point(1.0), True, TOL))


class TestIntersection:
    """Test sub-hyperplane intersection."""

    def test_inside(self, unit_interval):
        sub = OrientedPoint(Vector1D(0.5), True, TOL).whole_hyperplane()

        result = unit_interval.intersection(sub)

        assert result is not None
        assert result.hyperplane.location == Vector1D(0.5)

    def test_outside(self, unit_interval):
        sub = OrientedPoint(Vector1D(2.0), True, TOL).whole_hyperplane()

        assert unit_interval.intersection(sub) is None

    def test_none(self, unit_interval):
        assert unit_interval.intersection(None) is None

    def test_arc_inside(self, two_arcs):
        sub = Chord(S1Point(5.5), True, TOL).whole_hyperplane()

        result = two_arcs.intersection(sub)

        assert result is not None
        assert result.hyperplane.location == S1Point(5.5)

    @pytest.mark.parametrize("alpha", [0.5, 4.0, 6.2])
    def test_arc_outside(self, two_arcs, alpha):
        assert two_arcs.intersection(Chord(S1Point(alpha), False, TOL).whole_hyperplane()) is None


# =============================================================================
# Construction, copies and transforms
# =============================================================================


class TestFromBoundary:
    """Test building regions from boundary elements."""

    def test_interval_from_boundary(self):
        boundary = [
            OrientedPoint(Vector1D(0.0), False, TOL).whole_hyperplane(),
            OrientedPoint(Vector1D(1.0), True, TOL).whole_hyperplane(),
        ]

        region = IntervalsSet.from_boundary(boundary, TOL)

        assert isinstance(region, IntervalsSet)
        assert region.size == pytest.approx(1.0)
        assert region.check_point(Vector1D(0.5)) is Location.INSIDE

    def test_arc_from_boundary(self):
        boundary = [
            Chord(S1Point(1.0), False, TOL).whole_hyperplane(),
            Chord(S1Point(2.0), True, TOL).whole_hyperplane(),
        ]

        region = ArcsSet.from_boundary(boundary, TOL)

        assert isinstance(region, ArcsSet)
        assert list(region) == [(1.0, 2.0)]

    def test_empty_boundary_is_whole_space(self):
        assert ArcsSet.from_boundary([], TOL).is_full()

    def test_duplicate_elements_dropped(self):
        sub = OrientedPoint(Vector1D(0.0), False, TOL).whole_hyperplane()

        region = IntervalsSet.from_boundary([sub, sub], TOL)

        assert region.inf == 0.0
        assert region.sup == np.inf


class TestCopyAndTransform:
    """Test copies and transforms."""

    def test_copy_self(self, two_arcs):
        copy = two_arcs.copy_self()

        assert copy.get_tree(False) is not two_arcs.get_tree(False)
        assert copy.as_list() == two_arcs.as_list()
        assert copy.tolerance == two_arcs.tolerance

    def test_rotation(self):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)

        rotated = region.apply_transform(Rotation(0.5))

        assert isinstance(rotated, ArcsSet)
        assert [bound for pair in rotated for bound in pair] == pytest.approx([1.5, 2.5])

    def test_rotation_keeps_boundary_attributes(self):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)
        region.get_tree(True)

        rotated = region.apply_transform(Rotation(0.5))
        attribute = rotated.get_tree(False).attribute

        assert attribute.plus_outside.hyperplane.location.alpha == pytest.approx(1.5)

    def test_default_representative_point(self):
        region = ArcsSet.from_bounds(1.0, 2.0, TOL)
        cell = region.get_tree(False).minus.minus.prune_around_convex_cell(True, False, None)

        point = AbstractRegion.representative_point(region, cell)

        assert region.check_point(point) is Location.INSIDE


class TestLazyProperties:
    """Test lazily computed size and barycenter."""

    def test_computed_once(self, two_arcs):
        first = two_arcs.barycenter
        assert two_arcs.barycenter is first

    def test_concurrent_access(self):
        region = ArcsSet.from_bounds(1.0, 3.0, TOL)

        with ThreadPoolExecutor(max_workers=8) as executor:
            sizes = list(executor.map(lambda _: region.size, range(32)))

        assert all(size == pytest.approx(2.0) for size in sizes)
        assert region.barycenter.alpha == pytest.approx(2.0)
