"""
Configuration for the tennis court line classifier.
"""
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).parent
SAMPLES_DIR  = PROJECT_ROOT / "res"
RESULTS_DIR  = PROJECT_ROOT / "results"

# ── Input image ───────────────────────────────────────────────────────────────
# The reference footage is a headerless 8-bit .raw dump.
IMAGE_WIDTH        = 1392
IMAGE_HEIGHT       = 550
BINARIZE_THRESHOLD = 150          # samples above this become 255, rest 0

# ── Hough transform ───────────────────────────────────────────────────────────
HOUGH_ANGLE_BUCKETS = 270         # 1 degree resolution
HOUGH_ANGLE_OFFSET  = 90          # bucket j holds angle (j - 90) degrees
HOUGH_THRESHOLD     = 200         # votes a cell needs to become a line

# Two lines closer than both tolerances collapse into their average
PRUNE_ANGLE_TOLERANCE    = 30     # degrees
PRUNE_DISTANCE_TOLERANCE = 15     # distance buckets (pixels)

# ── Orientation ───────────────────────────────────────────────────────────────
# Horizontal iff HORIZONTAL_ANGLE_MIN < angle < HORIZONTAL_ANGLE_MAX
HORIZONTAL_ANGLE_MIN = 45
HORIZONTAL_ANGLE_MAX = 150

# ── Intersections ─────────────────────────────────────────────────────────────
PARALLEL_EPSILON = 1e-9           # |det| below this → lines treated as parallel
TRUNCATION_SNAP  = 1e-9           # added before truncating crossing coordinates

# A horizontal line needs this many crossings before its outer ones are checked
FALSE_INTERSECTION_MIN_COUNT = 5
FALSE_INTERSECTION_BLOCK_W   = 20
FALSE_INTERSECTION_BLOCK_H   = 50

# ── Classification ────────────────────────────────────────────────────────────
# Base line crosses 2 doubles + 2 singles sidelines + the centre line;
# the service line only spans the singles court.
BASE_LINE_INTERSECTIONS    = 5
SERVICE_LINE_INTERSECTIONS = 3

# ── Output / drawing ──────────────────────────────────────────────────────────
LINE_THICKNESS     = 5
MARKER_SIZE        = 20
MARKER_THICKNESS   = 8
FONT_SCALE         = 1.0
FONT_THICKNESS     = 2
LABEL_OFFSET_PX    = -10
DEBUG_LINE_LENGTH  = 2000         # half-length used to draw infinite Hough lines
HOUGH_VIEW_GAIN    = 3            # accumulator votes → intensity multiplier
CSV_FILENAME       = "classified_lines.csv"
JSON_FILENAME      = "classified_lines.json"
