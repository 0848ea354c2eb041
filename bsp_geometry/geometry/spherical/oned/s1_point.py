"""Points of the 1-sphere."""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from bsp_geometry.geometry.space import SPHERE_1D, Point, Space
from bsp_geometry.utils.exceptions import DimensionMismatchError
from bsp_geometry.utils.numerics import normalize_angle


class S1Point(Point):
    """
    Point on the unit circle, identified by its angle.

    Args:
        alpha: Azimuthal angle, normalized into [0, 2π)

    Examples:
        >>> S1Point(-np.pi / 2).alpha
        4.71238898038469
    """

    NAN: ClassVar[S1Point]

    __slots__ = ("_alpha",)

    def __init__(self, alpha: float):
        self._alpha = normalize_angle(alpha, math.pi)

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def vector(self) -> np.ndarray:
        """Corresponding unit vector (cos α, sin α)."""
        return np.array([math.cos(self._alpha), math.sin(self._alpha)])

    @property
    def space(self) -> Space:
        return SPHERE_1D

    def is_nan(self) -> bool:
        return math.isnan(self._alpha)

    def distance(self, other: Point) -> float:
        """Angular distance, in [0, π]."""
        if not isinstance(other, S1Point):
            raise DimensionMismatchError("distance", SPHERE_1D, other.space, component="S1Point")
        return abs(normalize_angle(other._alpha - self._alpha, 0.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, S1Point):
            return NotImplemented
        if self.is_nan():
            return other.is_nan()
        return self._alpha == other._alpha

    def __hash__(self) -> int:
        return 1759 if self.is_nan() else hash(self._alpha)

    def __repr__(self) -> str:
        return f"S1Point({self._alpha!r})"


S1Point.NAN = S1Point(math.nan)
