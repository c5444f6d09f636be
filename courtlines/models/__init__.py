"""
Core data models for the court line classifier.
Split across sub-modules; this __init__ re-exports everything.
"""
from .geometry import Cartesian, PolarLine, angle_difference, deg_to_rad
from .grid     import SampleGrid
from .segment  import LineClass, ClassifiedSegment, AnchorTable, CourtLines

__all__ = [
    "Cartesian", "PolarLine", "angle_difference", "deg_to_rad",
    "SampleGrid",
    "LineClass", "ClassifiedSegment", "AnchorTable", "CourtLines",
]
