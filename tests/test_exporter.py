"""
Tests for exporter.
"""
import csv
import json
import numpy as np
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from courtlines.exporter import Exporter, CSV_HEADER
from courtlines.models import Cartesian, ClassifiedSegment, CourtLines, LineClass


@pytest.fixture
def court_lines():
    return CourtLines(segments=[
        ClassifiedSegment(LineClass.BASE_LINE, Cartesian(100, 300), Cartesian(400, 300)),
        ClassifiedSegment(LineClass.INNER_BASE_LINE, Cartesian(150, 300), Cartesian(350, 300)),
        ClassifiedSegment(LineClass.DOUBLES_SIDELINE, Cartesian(100, 300), Cartesian(99, 0)),
    ])


class TestExporter:
    """Tests for Exporter class."""

    def test_creates_output_dir(self, temp_output_dir):
        out = temp_output_dir / "nested" / "results"
        Exporter(str(out))
        assert out.is_dir()

    def test_export_csv(self, temp_output_dir, court_lines):
        exporter = Exporter(str(temp_output_dir))
        path = exporter.export_csv(court_lines.final(), "lines.csv")

        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == CSV_HEADER
        assert rows[1:] == [
            ["BASE_LINE", "100", "300", "400", "300"],
            ["DOUBLES_SIDELINE", "100", "300", "99", "0"],
        ]

    def test_export_csv_empty(self, temp_output_dir):
        path = Exporter(str(temp_output_dir)).export_csv([])
        assert path.name == "classified_lines.csv"
        assert path.read_text().strip() == ",".join(CSV_HEADER)

    def test_export_json(self, temp_output_dir, court_lines):
        exporter = Exporter(str(temp_output_dir))
        path = exporter.export_json(court_lines, "lines.json", source="court.raw")

        data = json.loads(path.read_text())
        assert data["source"] == "court.raw"
        assert len(data["segments"]) == 2
        assert data["segments"][0] == {
            "class": "BASE_LINE", "origin": [100, 300], "destination": [400, 300]}
        assert data["counts"] == {"BASE_LINE": 1, "DOUBLES_SIDELINE": 1}

    def test_save_image(self, temp_output_dir):
        exporter = Exporter(str(temp_output_dir))
        path = exporter.save_image(np.zeros((10, 10, 3), dtype=np.uint8), "x.png")
        assert path.exists()

    def test_save_image_failure(self, temp_output_dir):
        exporter = Exporter(str(temp_output_dir))
        with pytest.raises(IOError):
            exporter.save_image(np.zeros((10, 10, 3), dtype=np.uint8),
                                "x.unknown_extension")
