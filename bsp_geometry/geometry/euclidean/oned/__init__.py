"""The real line: oriented points and intervals sets."""

from .interval import Interval
from .intervals_set import IntervalsSet
from .oriented_point import OrientedPoint
from .sub_oriented_point import SubOrientedPoint
from .vector_1d import Vector1D

__all__ = ["Interval", "IntervalsSet", "OrientedPoint", "SubOrientedPoint", "Vector1D"]
