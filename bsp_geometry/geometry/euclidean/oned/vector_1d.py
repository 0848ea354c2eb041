"""Points of the real line."""

from __future__ import annotations

import math
from typing import ClassVar

from bsp_geometry.geometry.space import EUCLIDEAN_1D, Point, Space
from bsp_geometry.utils.exceptions import DimensionMismatchError


class Vector1D(Point):
    """Point of the real line."""

    NAN: ClassVar[Vector1D]

    __slots__ = ("_x",)

    def __init__(self, x: float):
        self._x = float(x)

    @property
    def x(self) -> float:
        return self._x

    @property
    def space(self) -> Space:
        return EUCLIDEAN_1D

    def is_nan(self) -> bool:
        return math.isnan(self._x)

    def distance(self, other: Point) -> float:
        if not isinstance(other, Vector1D):
            raise DimensionMismatchError("distance", EUCLIDEAN_1D, other.space, component="Vector1D")
        return abs(self._x - other._x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector1D):
            return NotImplemented
        if self.is_nan():
            return other.is_nan()
        return self._x == other._x

    def __hash__(self) -> int:
        return 7785 if self.is_nan() else hash(self._x)

    def __repr__(self) -> str:
        return f"Vector1D({self._x!r})"


Vector1D.NAN = Vector1D(math.nan)
