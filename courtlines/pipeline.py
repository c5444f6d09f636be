"""
Main pipeline – load, binarise, detect, export.

Per image:
  - load the grayscale samples (.raw needs explicit dimensions)
  - optionally binarise at a fixed intensity threshold
  - run CourtLineDetector (Hough → intersections → classification)
  - write CSV / JSON results and, on request, debug images
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, List, Optional
from tqdm import tqdm

from .court        import CourtLineDetector, DetectionResult
from .image        import load, binarize
from .models       import SampleGrid
from .visualizer   import Visualizer
from .exporter     import Exporter
import config


class Pipeline:
    """Court line classification over one or more images."""

    def __init__(
        self,
        output_dir:     str   = str(config.RESULTS_DIR),
        width:          int   = config.IMAGE_WIDTH,
        height:         int   = config.IMAGE_HEIGHT,
        threshold:      float = config.HOUGH_THRESHOLD,
        binarize_level: Optional[int] = config.BINARIZE_THRESHOLD,
        save_csv:       bool  = True,
        save_json:      bool  = True,
        save_debug:     bool  = False,
        show_progress:  bool  = True,
        debug:          bool  = False,
    ):
        self.output_dir     = Path(output_dir)
        self.width          = width
        self.height         = height
        self.binarize_level = binarize_level
        self.save_csv       = save_csv
        self.save_json      = save_json
        self.save_debug     = save_debug
        self.show_progress  = show_progress

        self._detector   = CourtLineDetector(threshold=threshold, debug=debug)
        self._visualizer = Visualizer()
        self._exporter   = Exporter(output_dir)

    # ── Public entry points ───────────────────────────────────────────────────

    def load(self, path: str) -> SampleGrid:
        grid = load(path, self.width, self.height)
        if self.binarize_level is not None:
            grid = binarize(grid, self.binarize_level)
        return grid

    def process(
        self, path: str, output_name: Optional[str] = None,
    ) -> DetectionResult:
        base = output_name or Path(path).stem
        grid = self.load(path)
        if self.show_progress:
            print(f"[Pipeline] {path}: {grid.width}x{grid.height}, "
                  f"{grid.active_count} active samples")

        result = self._detector.detect(grid)
        self._export(grid, result, base, source=str(path))

        if self.show_progress:
            final = result.court_lines.final()
            print(f"[Pipeline] {len(result.lines)} lines → "
                  f"{len(final)} classified segments")
        return result

    def process_many(self, paths: List[str]) -> Dict[str, DetectionResult]:
        """Process images one after another; names must be unique by stem."""
        results: Dict[str, DetectionResult] = {}
        it = paths
        if self.show_progress and len(paths) > 1:
            it = tqdm(paths, desc="Classifying", unit="img")
        for p in it:
            results[p] = self.process(p)
        return results

    # ── Output ────────────────────────────────────────────────────────────────

    def _export(
        self, grid: SampleGrid, result: DetectionResult, base: str, source: str,
    ) -> None:
        final = result.court_lines.final()
        if self.save_csv:
            self._exporter.export_csv(final, filename=f"{base}_lines.csv")
        if self.save_json:
            self._exporter.export_json(result.court_lines,
                                       filename=f"{base}_lines.json",
                                       source=source)
        if self.save_debug:
            viz = self._visualizer
            self._exporter.save_image(
                viz.render_accumulator(result.accumulator),
                f"{base}_hough_transform.png")
            self._exporter.save_image(
                viz.draw_hough_lines(grid, result.lines),
                f"{base}_hough_lines.png")
            self._exporter.save_image(
                viz.draw_classified(grid, result.court_lines.segments,
                                    result.raw_intersections.all_points()),
                f"{base}_classified.png")

    def render(self, grid: SampleGrid, result: DetectionResult):
        """Classified overlay for on-screen display."""
        return self._visualizer.draw_classified(
            grid, result.court_lines.segments)
