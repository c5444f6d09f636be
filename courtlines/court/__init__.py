"""Court line detection: Hough lines, intersections, classification."""
from .hough           import HoughTransformer
from .intersection    import (IntersectionMap, partition, intersect,
                              pairwise_intersect,
                              remove_false_horizontal_intersections)
from .line_classifier import (classify_lines, classify_horizontal,
                              classify_vertical, upper_image_intercept)
from .detector        import CourtLineDetector, DetectionResult

__all__ = [
    "HoughTransformer",
    "IntersectionMap", "partition", "intersect", "pairwise_intersect",
    "remove_false_horizontal_intersections",
    "classify_lines", "classify_horizontal", "classify_vertical",
    "upper_image_intercept",
    "CourtLineDetector", "DetectionResult",
]
