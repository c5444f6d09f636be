"""
Court line detector: main pipeline over one binary image.

Pipeline:
  1. Hough accumulator over the active samples
  2. Threshold + prune → polar lines
  3. Pairwise horizontal/vertical intersections
  4. Remove false crossings of horizontal lines
  5. Classify horizontal lines (base / service)
  6. Classify vertical lines (sidelines / centre service) and
     extend them to the top of the image
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np

from ..models.geometry import PolarLine
from ..models.grid import SampleGrid
from ..models.segment import CourtLines
from .hough import HoughTransformer
from .intersection import (IntersectionMap, pairwise_intersect,
                           remove_false_horizontal_intersections)
from .line_classifier import classify_lines
import config


@dataclass
class DetectionResult:
    """Everything produced on the way to the classified lines."""
    accumulator:       np.ndarray
    lines:             List[PolarLine]
    intersections:     IntersectionMap          # after false-crossing removal
    raw_intersections: IntersectionMap          # before, for debug views
    court_lines:       CourtLines = field(default_factory=CourtLines)

    @property
    def found(self) -> bool:
        return bool(self.court_lines.final())


class CourtLineDetector:
    """Hough-based tennis court line detector and classifier."""

    def __init__(
        self,
        threshold: float = config.HOUGH_THRESHOLD,
        debug: bool = False,
        hough: Optional[HoughTransformer] = None,
    ):
        self.threshold = threshold
        self._debug    = debug
        self._hough    = hough or HoughTransformer(debug=debug)

    def detect(self, grid: SampleGrid) -> DetectionResult:
        # Step 1-2: lines
        acc = self._hough.create_accumulator(grid)
        lines = self._hough.get_lines(acc, self.threshold)
        if self._debug:
            n_v = sum(1 for l in lines if l.is_vertical)
            print(f"  [Detector] {len(lines)} lines → "
                  f"{len(lines) - n_v}H {n_v}V")

        # Step 3-4: intersections
        raw = pairwise_intersect(lines, debug=self._debug)
        imap = raw.copy()
        remove_false_horizontal_intersections(imap, grid, debug=self._debug)

        # Step 5-6: classify
        court = classify_lines(imap, debug=self._debug)
        if self._debug and not court.final():
            print("  [Detector] no court lines classified")

        return DetectionResult(accumulator=acc, lines=lines,
                               intersections=imap, raw_intersections=raw,
                               court_lines=court)
