"""Unit tests for arcs of the circle."""

import math

import pytest

import numpy as np

from bsp_geometry import Arc, Location, NotAnIntervalError
from bsp_geometry.utils.numerics import TWO_PI

TOL = 1.0e-10


class TestArcConstruction:
    """Test arc bounds normalization."""

    def test_regular(self):
        arc = Arc(1.0, 2.5, TOL)

        assert arc.inf == 1.0
        assert arc.sup == 2.5
        assert arc.size == pytest.approx(1.5)
        assert arc.barycenter == pytest.approx(1.75)
        assert arc.tolerance == TOL

    def test_lower_normalized(self):
        arc = Arc(5.7 - TWO_PI, 2.3, TOL)

        assert arc.inf == pytest.approx(5.7)
        assert arc.sup == pytest.approx(2.3 + TWO_PI)
        assert arc.size == pytest.approx(2.3 - 5.7 + TWO_PI)
        assert 0.0 <= arc.inf < TWO_PI

    @pytest.mark.parametrize(("lower", "upper"), [(1.0, 1.0), (0.0, TWO_PI), (-1.0, 7.0)])
    def test_whole_circle(self, lower, upper):
        arc = Arc(lower, upper, TOL)

        assert arc.inf == 0.0
        assert arc.sup == TWO_PI
        assert arc.barycenter == math.pi

    @pytest.mark.parametrize(("lower", "upper"), [(1.2, 0.0), (math.nan, 1.0), (0.0, math.inf)])
    def test_wrong_interval(self, lower, upper):
        with pytest.raises(NotAnIntervalError):
            Arc(lower, upper, TOL)

    def test_default_tolerance(self):
        assert Arc(0.0, 1.0).tolerance == 1.0e-10


class TestArcCheckPoint:
    """Test angle classification."""

    @pytest.mark.parametrize(
        ("angle", "expected"),
        [
            (3.0, Location.INSIDE),
            (2.3, Location.BOUNDARY),
            (5.7, Location.BOUNDARY),
            (1.2, Location.OUTSIDE),
            (8.5, Location.OUTSIDE),
            (8.7, Location.INSIDE),
            (-3.0, Location.INSIDE),
        ],
    )
    def test_regular_arc(self, angle, expected):
        assert Arc(2.3, 5.7, TOL).check_point(angle) is expected

    @pytest.mark.parametrize(
        ("angle", "expected"),
        [
            (0.0, Location.INSIDE),
            (1.2, Location.INSIDE),
            (2.3, Location.BOUNDARY),
            (5.7, Location.BOUNDARY),
            (3.0, Location.OUTSIDE),
        ],
    )
    def test_wrapping_arc(self, angle, expected):
        assert Arc(5.7 - TWO_PI, 2.3, TOL).check_point(angle) is expected

    def test_tolerance_band(self):
        arc = Arc(1.0, 2.0, 1.0e-6)

        assert arc.check_point(2.0 + 0.5e-6) is Location.BOUNDARY
        assert arc.check_point(2.0 + 2.0e-6) is Location.OUTSIDE
        assert arc.check_point(2.0 - 2.0e-6) is Location.INSIDE

    def test_full_circle_has_no_boundary(self):
        arc = Arc(0.0, 0.0, TOL)

        for angle in np.linspace(-TWO_PI, 2 * TWO_PI, 25):
            assert arc.check_point(angle) is Location.INSIDE


class TestArcValue:
    """Test value semantics."""

    def test_iteration(self):
        inf, sup = Arc(1.0, 2.0, TOL)
        assert (inf, sup) == (1.0, 2.0)

    def test_equality(self):
        assert Arc(1.0, 2.0, TOL) == Arc(1.0, 2.0, 1.0e-6)
        assert Arc(1.0, 2.0, TOL) != Arc(1.0, 2.5, TOL)
        assert len({Arc(1.0, 2.0, TOL), Arc(1.0, 2.0, TOL)}) == 1

    def test_repr(self):
        assert repr(Arc(1.0, 2.0, TOL)) == "Arc(1.0, 2.0)"
