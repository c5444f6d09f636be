"""
Tennis court line classifier – source package.

Public API:  all major components are importable directly from `courtlines`.

    from courtlines import Pipeline
    from courtlines import CourtLineDetector, HoughTransformer
    from courtlines import Visualizer, Exporter
    from courtlines.models import SampleGrid, PolarLine, ClassifiedSegment
"""

# ── Pipeline (top-level entry point) ─────────────────────────────────────────
from .pipeline import Pipeline

# ── Court line detection ──────────────────────────────────────────────────────
from .court import (
    HoughTransformer, CourtLineDetector, DetectionResult, IntersectionMap,
    pairwise_intersect, remove_false_horizontal_intersections,
    classify_lines, classify_horizontal, classify_vertical,
)

# ── Utilities ─────────────────────────────────────────────────────────────────
from .image      import load, load_raw, load_image, binarize
from .visualizer import Visualizer
from .exporter   import Exporter

# ── Models (data classes) ─────────────────────────────────────────────────────
from .models import (
    Cartesian, PolarLine, SampleGrid,
    LineClass, ClassifiedSegment, AnchorTable, CourtLines,
)

__all__ = [
    # Pipeline
    "Pipeline",
    # Court
    "HoughTransformer", "CourtLineDetector", "DetectionResult",
    "IntersectionMap", "pairwise_intersect",
    "remove_false_horizontal_intersections",
    "classify_lines", "classify_horizontal", "classify_vertical",
    # Utilities
    "load", "load_raw", "load_image", "binarize",
    "Visualizer", "Exporter",
    # Models
    "Cartesian", "PolarLine", "SampleGrid",
    "LineClass", "ClassifiedSegment", "AnchorTable", "CourtLines",
]
