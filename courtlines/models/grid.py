"""
Sample grid: a single-channel image addressed by linear index or (x, y).
"""
from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from .geometry import Cartesian


@dataclass(eq=False)
class SampleGrid:
    """
    Row-major grid of 8-bit samples (0 = background, non-zero = active).

    index = y * width + x. Samples of any other dtype are reduced to
    0 / 255 so every non-zero value stays active.
    """
    width: int
    height: int
    samples: np.ndarray

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}")
        samples = np.asarray(self.samples)
        if samples.dtype != np.uint8:
            samples = np.where(samples != 0, 255, 0).astype(np.uint8)
        self.samples = samples.ravel()
        if self.samples.size != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} samples for a "
                f"{self.width}x{self.height} grid, got {self.samples.size}")

    @classmethod
    def from_array(cls, image: np.ndarray) -> "SampleGrid":
        """Wrap an (H, W) array."""
        if image.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {image.shape}")
        h, w = image.shape
        return cls(width=w, height=h, samples=image.copy())

    def __len__(self) -> int:
        return self.samples.size

    def as_array(self) -> np.ndarray:
        """(H, W) view over the samples."""
        return self.samples.reshape(self.height, self.width)

    def to_mat(self) -> np.ndarray:
        """Contiguous (H, W) uint8 copy, safe to draw on with OpenCV."""
        return np.ascontiguousarray(self.as_array()).copy()

    @property
    def active_count(self) -> int:
        return int(np.count_nonzero(self.samples))

    def index_to_coordinate(self, index: int) -> Cartesian:
        return Cartesian(int(index % self.width), int(index // self.width))

    def coordinate_to_index(self, coord: Cartesian) -> int:
        return coord.y * self.width + coord.x

    def does_block_contain_samples(
        self, index: int, horz_size: int, vert_size: int,
    ) -> bool:
        """True if a horz_size × vert_size block centred on index has any
        active sample. The block is clipped to the grid."""
        return self.block_contains_samples_at(
            self.index_to_coordinate(index), horz_size, vert_size)

    def block_contains_samples_at(
        self, centre: Cartesian, horz_size: int, vert_size: int,
    ) -> bool:
        """Same query centred on a coordinate, which may lie off the grid."""
        x0 = centre.x - horz_size // 2
        y0 = centre.y - vert_size // 2
        x1, y1 = x0 + horz_size, y0 + vert_size

        x0, y0 = max(0, x0), max(0, y0)
        x1, y1 = min(self.width, x1), min(self.height, y1)
        if x0 >= x1 or y0 >= y1:
            return False
        return bool(np.any(self.as_array()[y0:y1, x0:x1]))
