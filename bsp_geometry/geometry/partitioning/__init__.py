"""
Binary space partitioning framework.

Regions of any space are represented by BSP trees whose leaves are labelled
inside or outside. Boolean operations merge trees, boundaries are extracted
by characterizing each cut against the cells on both of its sides.
"""

from .abstract_region import AbstractRegion
from .abstract_sub_hyperplane import AbstractSubHyperplane
from .boundary import BoundaryAttribute, BoundaryBuilder, BoundarySizeVisitor, Characterization
from .bsp_tree import BSPTree, BSPTreeVisitor, FunctionVisitor, LeafMerger, Order, VanishingCutHandler
from .hyperplane import Hyperplane, Side, SplitSubHyperplane, SubHyperplane, Transform
from .region import Location, Region
from .region_factory import RegionFactory

__all__ = [
    "AbstractRegion",
    "AbstractSubHyperplane",
    "BSPTree",
    "BSPTreeVisitor",
    "BoundaryAttribute",
    "BoundaryBuilder",
    "BoundarySizeVisitor",
    "Characterization",
    "FunctionVisitor",
    "Hyperplane",
    "LeafMerger",
    "Location",
    "Order",
    "Region",
    "RegionFactory",
    "Side",
    "SplitSubHyperplane",
    "SubHyperplane",
    "Transform",
    "VanishingCutHandler",
]
