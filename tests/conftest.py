"""
Pytest fixtures for court line classifier tests.
"""
import numpy as np
import pytest
import tempfile
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from courtlines.models import Cartesian, PolarLine, SampleGrid


# Synthetic half court, 1 pixel wide lines.
COURT_W, COURT_H = 500, 360
SERVICE_ROW = 150
BASE_ROW    = 300
DOUBLES_L, SINGLES_L, CENTRE, SINGLES_R, DOUBLES_R = 100, 150, 250, 350, 400

# Votes: sidelines 301, base line 301, service line 203, centre line 152.
# Neighbouring angle buckets stay below ~65.
COURT_THRESHOLD = 100


def draw_court() -> np.ndarray:
    img = np.zeros((COURT_H, COURT_W), dtype=np.uint8)
    img[SERVICE_ROW, SINGLES_L:SINGLES_R + 1] = 255
    img[BASE_ROW, DOUBLES_L:DOUBLES_R + 1] = 255
    for col in (DOUBLES_L, SINGLES_L, SINGLES_R, DOUBLES_R):
        img[0:BASE_ROW + 1, col] = 255
    img[0:SERVICE_ROW + 1, CENTRE] = 255
    return img


@pytest.fixture
def court_image():
    """(H, W) uint8 array holding the synthetic court."""
    return draw_court()


@pytest.fixture
def court_grid(court_image):
    return SampleGrid.from_array(court_image)


@pytest.fixture
def court_lines_polar():
    """Polar lines of the synthetic court, in accumulator extraction order."""
    return [
        PolarLine(float(DOUBLES_L), 180.0),
        PolarLine(float(SERVICE_ROW), 90.0),
        PolarLine(float(SINGLES_L), 180.0),
        PolarLine(float(CENTRE), 180.0),
        PolarLine(float(BASE_ROW), 90.0),
        PolarLine(float(SINGLES_R), 180.0),
        PolarLine(float(DOUBLES_R), 180.0),
    ]


@pytest.fixture
def base_points():
    """Base line crossings, left to right."""
    return [Cartesian(x, BASE_ROW) for x in
            (DOUBLES_L, SINGLES_L, CENTRE, SINGLES_R, DOUBLES_R)]


@pytest.fixture
def service_points():
    """Service line crossings after the false ones are removed."""
    return [Cartesian(x, SERVICE_ROW) for x in (SINGLES_L, CENTRE, SINGLES_R)]


@pytest.fixture
def small_grid():
    """10x10 grid with a single active sample in the bottom-right corner."""
    samples = np.zeros(100, dtype=np.uint8)
    samples[99] = 255
    return SampleGrid(width=10, height=10, samples=samples)


@pytest.fixture
def court_raw_file(court_image):
    """The synthetic court written as a headerless .raw file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "court.raw"
        court_image.tofile(path)
        yield path


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
