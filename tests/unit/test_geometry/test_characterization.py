"""Unit tests for sub-hyperplane characterization against region trees."""

import pytest

from bsp_geometry import ArcsSet, Chord, InternalGeometryError, S1Point
from bsp_geometry.geometry.partitioning import Characterization

TOL = 1.0e-10


@pytest.fixture
def arc_tree():
    """Tree of [1, 2]."""
    return ArcsSet.from_bounds(1.0, 2.0, TOL).get_tree(False)


@pytest.mark.unit
def test_inside_touching(arc_tree):
    characterization = Characterization(arc_tree, Chord(S1Point(1.5), True, TOL).whole_hyperplane())

    assert characterization.touch_inside()
    assert not characterization.touch_outside()
    assert characterization.outside_touching is None


@pytest.mark.unit
def test_outside_touching(arc_tree):
    characterization = Characterization(arc_tree, Chord(S1Point(4.0), True, TOL).whole_hyperplane())

    assert characterization.touch_outside()
    assert not characterization.touch_inside()
    assert characterization.outside_touching.hyperplane.location == S1Point(4.0)


@pytest.mark.unit
def test_leaf_characterization():
    sub = Chord(S1Point(1.0), True, TOL).whole_hyperplane()
    leaf = ArcsSet(tolerance=TOL).get_tree(False)

    characterization = Characterization(leaf, sub)

    assert characterization.inside_touching is sub


@pytest.mark.unit
def test_sub_on_a_cut_is_internal_error(arc_tree):
    with pytest.raises(InternalGeometryError):
        Characterization(arc_tree, Chord(S1Point(1.0), True, TOL).whole_hyperplane())
