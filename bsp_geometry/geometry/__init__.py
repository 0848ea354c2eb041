"""
Geometry for bsp_geometry.

The generic binary space partitioning framework lives in ``partitioning``,
with two 1-D instantiations:

- ``spherical.oned``: arcs sets on the circle
- ``euclidean.oned``: intervals sets on the real line
"""

from .euclidean.oned import Interval, IntervalsSet, OrientedPoint, SubOrientedPoint, Vector1D
from .partitioning import (
    AbstractRegion,
    AbstractSubHyperplane,
    BoundaryAttribute,
    BSPTree,
    BSPTreeVisitor,
    Characterization,
    FunctionVisitor,
    Hyperplane,
    Location,
    Order,
    Region,
    RegionFactory,
    Side,
    SplitSubHyperplane,
    SubHyperplane,
    Transform,
)
from .space import EUCLIDEAN_1D, SPHERE_1D, Point, Space
from .spherical.oned import Arc, ArcsSet, ArcsSplit, Chord, S1Point, SubChord

__all__ = [
    "EUCLIDEAN_1D",
    "SPHERE_1D",
    "AbstractRegion",
    "AbstractSubHyperplane",
    "Arc",
    "ArcsSet",
    "ArcsSplit",
    "BSPTree",
    "BSPTreeVisitor",
    "BoundaryAttribute",
    "Characterization",
    "Chord",
    "FunctionVisitor",
    "Hyperplane",
    "Interval",
    "IntervalsSet",
    "Location",
    "Order",
    "OrientedPoint",
    "Point",
    "Region",
    "RegionFactory",
    "S1Point",
    "Side",
    "Space",
    "SplitSubHyperplane",
    "SubChord",
    "SubHyperplane",
    "SubOrientedPoint",
    "Transform",
    "Vector1D",
]
