"""
Spaces and points.

A space is an identity token: two geometric objects can be combined only when
they live on equal spaces. Points are the minimal interface the generic
partitioning code needs (space membership, NaN detection, distance).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Space:
    """
    Identity of a space a region lives in.

    Attributes:
        name: Human readable name, used in error messages
        dimension: Dimension of the space
    """

    name: str
    dimension: int

    def __str__(self) -> str:
        return f"{self.name} (dim={self.dimension})"


SPHERE_1D = Space("Sphere1D", 1)
EUCLIDEAN_1D = Space("Euclidean1D", 1)


class Point(ABC):
    """Point of a space."""

    @property
    @abstractmethod
    def space(self) -> Space:
        """Space the point belongs to."""

    @abstractmethod
    def is_nan(self) -> bool:
        """True if any coordinate is NaN."""

    @abstractmethod
    def distance(self, other: Point) -> float:
        """Distance to another point of the same space."""
