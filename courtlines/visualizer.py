"""
Visualization utilities for Hough output and classified court lines.
"""
import cv2
import numpy as np
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Cartesian, ClassifiedSegment, LineClass, PolarLine, SampleGrid
import config

# BGR colours
LINE_COLOUR   = (0, 255, 0)
HOUGH_COLOUR  = (0, 0, 255)
MARKER_COLOUR = (0, 0, 255)
TEXT_COLOUR   = (255, 255, 255)

# The inner base line carries the "Base Line" label; the full one is unlabelled.
LABELS: Dict[LineClass, str] = {
    LineClass.INNER_BASE_LINE:     "Base Line",
    LineClass.SERVICE_LINE:        "Service Line",
    LineClass.CENTRE_SERVICE_LINE: "Centre Service Line",
    LineClass.DOUBLES_SIDELINE:    "Dbls",
    LineClass.SINGLES_SIDELINE:    "Sgls",
}

# Sideline labels sit left of the line, horizontal ones above it.
_VERTICAL_LABELS = {LineClass.DOUBLES_SIDELINE, LineClass.SINGLES_SIDELINE}


class Visualizer:
    """Draws Hough lines, intersections and classified segments."""

    def __init__(
        self,
        line_thickness: int = config.LINE_THICKNESS,
        font_scale: float = config.FONT_SCALE,
        font_thickness: int = config.FONT_THICKNESS,
    ):
        self.line_thickness = line_thickness
        self.font_scale = font_scale
        self.font_thickness = font_thickness
        self.font = cv2.FONT_HERSHEY_SIMPLEX

    @staticmethod
    def to_bgr(grid: SampleGrid) -> np.ndarray:
        return cv2.cvtColor(grid.to_mat(), cv2.COLOR_GRAY2BGR)

    def render_accumulator(
        self, accumulator: np.ndarray, gain: float = config.HOUGH_VIEW_GAIN,
    ) -> np.ndarray:
        """Accumulator as a red heat map, distance along x, angle along y."""
        n_dist = accumulator.shape[0]
        n_ang = accumulator.shape[1] if accumulator.ndim == 2 else 0
        canvas = np.zeros((n_ang, max(n_dist, 1), 3), dtype=np.uint8)
        if accumulator.size:
            canvas[:, :n_dist, 2] = np.clip(
                accumulator.T.astype(np.float64) * gain, 0, 255).astype(np.uint8)
        return canvas

    def draw_hough_lines(
        self, grid: SampleGrid, lines: Iterable[PolarLine],
    ) -> np.ndarray:
        """Infinite Hough lines over the image."""
        canvas = self.to_bgr(grid)
        for line in lines:
            p1, p2 = line.to_segment()
            cv2.line(canvas, p1.as_tuple(), p2.as_tuple(), HOUGH_COLOUR,
                     self.line_thickness)
        return canvas

    def draw_markers(
        self, canvas: np.ndarray, points: Iterable[Cartesian],
        colour: Tuple[int, int, int] = MARKER_COLOUR,
    ) -> np.ndarray:
        for pt in points:
            cv2.drawMarker(canvas, pt.as_tuple(), colour, cv2.MARKER_CROSS,
                           config.MARKER_SIZE, config.MARKER_THICKNESS)
        return canvas

    def draw_classified(
        self,
        grid: SampleGrid,
        segments: List[ClassifiedSegment],
        intersections: Optional[Iterable[Cartesian]] = None,
    ) -> np.ndarray:
        """Classified segments with role labels, optionally with crossings."""
        canvas = self.to_bgr(grid)
        for seg in segments:
            cv2.line(canvas, seg.origin.as_tuple(), seg.destination.as_tuple(),
                     LINE_COLOUR, self.line_thickness)
            self._draw_label(canvas, seg)
        if intersections is not None:
            self.draw_markers(canvas, intersections)
        return canvas

    def _draw_label(self, canvas: np.ndarray, seg: ClassifiedSegment) -> None:
        label = LABELS.get(seg.line_class)
        if label is None:
            return
        mid = seg.midpoint
        off = config.LABEL_OFFSET_PX
        pos = ((mid.x + off, mid.y) if seg.line_class in _VERTICAL_LABELS
               else (mid.x, mid.y + off))
        cv2.putText(canvas, label, pos, self.font, self.font_scale,
                    TEXT_COLOUR, self.font_thickness)
