"""
Export classified court lines to CSV, JSON and debug images.
"""
import csv
import json
import cv2
import numpy as np
from pathlib import Path
from typing import List

from .models import ClassifiedSegment, CourtLines
import config

CSV_HEADER = ["class", "origin_x", "origin_y", "destination_x", "destination_y"]


class Exporter:
    """Writes classification results into an output directory."""

    def __init__(self, output_dir: str = str(config.RESULTS_DIR)):
        """
        Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_csv(
        self,
        segments: List[ClassifiedSegment],
        filename: str = config.CSV_FILENAME,
    ) -> Path:
        """
        One row per segment: class name, origin x/y, destination x/y.

        Args:
            segments: Segments to write, in order
            filename: Output filename

        Returns:
            Path to saved file
        """
        output_path = self.output_dir / filename
        with open(output_path, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for seg in segments:
                writer.writerow(seg.to_row())
        return output_path

    def export_json(
        self,
        court_lines: CourtLines,
        filename: str = config.JSON_FILENAME,
        source: str = "",
    ) -> Path:
        """Final (user-facing) segments plus per-class counts."""
        output_path = self.output_dir / filename
        data = {"source": source, **court_lines.to_dict()}
        with open(output_path, "w") as f:
            json.dump(data, f, indent=2)
        return output_path

    def save_image(self, image: np.ndarray, filename: str) -> Path:
        """Save a debug image."""
        output_path = self.output_dir / filename
        try:
            ok = cv2.imwrite(str(output_path), image)
        except cv2.error as e:
            raise IOError(f"Could not write image: {output_path}") from e
        if not ok:
            raise IOError(f"Could not write image: {output_path}")
        return output_path
