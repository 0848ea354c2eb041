"""The 1-sphere: angles, chords and arcs sets."""

from .arc import Arc
from .arcs_set import ArcsSet, ArcsSplit
from .chord import Chord
from .s1_point import S1Point
from .sub_chord import SubChord

__all__ = ["Arc", "ArcsSet", "ArcsSplit", "Chord", "S1Point", "SubChord"]
