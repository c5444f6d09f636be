"""
Hough transform: accumulator voting, line extraction and de-duplication.

The accumulator is indexed [distance_bucket, angle_bucket] with 270 angle
buckets at 1° resolution; bucket j holds angle (j - 90)°. Samples vote in
(row, column) order, i.e. in the transposed image frame, so a horizontal
court line peaks at bucket 90 and a vertical one at bucket 180. Extracted
lines keep the raw bucket index as their angle, which is the convention
`PolarLine` and the intersection formula expect.
"""
from __future__ import annotations
from typing import Iterator, List, Tuple
import numpy as np

from ..models.geometry import PolarLine
from ..models.grid import SampleGrid
import config

# Samples projected per batch; bounds the (N, 270) float matrix.
_CHUNK = 16384


class HoughTransformer:
    """Builds the vote accumulator for a grid and turns peaks into lines."""

    def __init__(
        self,
        n_angles: int = config.HOUGH_ANGLE_BUCKETS,
        angle_offset: float = config.HOUGH_ANGLE_OFFSET,
        angle_tol: float = config.PRUNE_ANGLE_TOLERANCE,
        distance_tol: float = config.PRUNE_DISTANCE_TOLERANCE,
        debug: bool = False,
    ):
        self.n_angles     = n_angles
        self.angle_tol    = angle_tol
        self.distance_tol = distance_tol
        self.debug        = debug
        self._angles = np.deg2rad(
            np.arange(n_angles, dtype=np.float64) - angle_offset)
        self._cos = np.cos(self._angles)
        self._sin = np.sin(self._angles)

    # ── Accumulator ───────────────────────────────────────────────────────────

    def create_accumulator(self, grid: SampleGrid) -> np.ndarray:
        """
        Vote every (active sample, angle) pair with a non-negative
        distance into its cell.

        Returns an int64 array of shape (floor(max_d) + 1, n_angles), or
        (0, n_angles) when nothing survives.
        """
        rows, cols = np.nonzero(grid.as_array())
        empty = np.zeros((0, self.n_angles), dtype=np.int64)
        if rows.size == 0:
            if self.debug:
                print("  [Hough] no active samples")
            return empty

        # No projection exceeds the sample's distance from the origin;
        # +2 absorbs float rounding at the bound.
        radius = np.sqrt(rows.astype(np.float64) ** 2
                         + cols.astype(np.float64) ** 2).max()
        n_bound = int(np.floor(radius)) + 2
        flat = np.zeros(n_bound * self.n_angles, dtype=np.int64)
        buckets = np.arange(self.n_angles)
        for d in self._projections(rows, cols):
            keep = d >= 0.0
            dist_idx = np.floor(d[keep]).astype(np.int64)
            ang_idx = np.broadcast_to(buckets, d.shape)[keep]
            flat += np.bincount(dist_idx * self.n_angles + ang_idx,
                                minlength=flat.size)

        # Trim to floor(max_d) + 1 rows
        used = np.flatnonzero(flat.reshape(n_bound, self.n_angles).any(axis=1))
        if used.size == 0:
            return empty
        acc = flat.reshape(n_bound, self.n_angles)[:used[-1] + 1].copy()

        if self.debug:
            print(f"  [Hough] {rows.size} active samples → accumulator "
                  f"{acc.shape[0]}x{acc.shape[1]}, peak={int(acc.max())}")
        return acc

    def _projections(
        self, rows: np.ndarray, cols: np.ndarray,
    ) -> Iterator[np.ndarray]:
        """Yield (chunk, n_angles) distance matrices."""
        for start in range(0, rows.size, _CHUNK):
            x = rows[start:start + _CHUNK].astype(np.float64)[:, None]
            y = cols[start:start + _CHUNK].astype(np.float64)[:, None]
            yield x * self._cos + y * self._sin

    # ── Lines ─────────────────────────────────────────────────────────────────

    def extract_lines(
        self, accumulator: np.ndarray, threshold: float,
    ) -> List[PolarLine]:
        """One line per cell strictly above threshold, ordered by distance
        bucket then angle bucket."""
        dist_idx, ang_idx = np.nonzero(accumulator > threshold)
        return [PolarLine(float(i), float(j))
                for i, j in zip(dist_idx.tolist(), ang_idx.tolist())]

    def prune_lines(self, lines: List[PolarLine]) -> List[PolarLine]:
        """
        Collapse clusters of similar lines into one averaged line.

        Greedy single pass: each line absorbs every later line it is similar
        to, re-averaging after each merge. The result depends on input order
        and an outlier inside a cluster skews the running average; outlier
        rejection before averaging would fix that.
        """
        lines = list(lines)
        i = 0
        while i < len(lines):
            k = i + 1
            while k < len(lines):
                if lines[i].is_similar(lines[k], self.angle_tol,
                                       self.distance_tol):
                    lines[i] = lines[i].averaged_with(lines[k])
                    del lines[k]
                else:
                    k += 1
            i += 1
        return lines

    def get_lines(
        self, accumulator: np.ndarray,
        threshold: float = config.HOUGH_THRESHOLD,
    ) -> List[PolarLine]:
        """Threshold the accumulator and de-duplicate the result."""
        raw = self.extract_lines(accumulator, threshold)
        lines = self.prune_lines(raw)
        if self.debug:
            print(f"  [Hough] {len(raw)} cells > {threshold} → "
                  f"{len(lines)} lines after pruning")
        return lines

    def transform(
        self, grid: SampleGrid, threshold: float = config.HOUGH_THRESHOLD,
    ) -> Tuple[np.ndarray, List[PolarLine]]:
        """Accumulator and pruned lines for a grid in one call."""
        acc = self.create_accumulator(grid)
        return acc, self.get_lines(acc, threshold)
