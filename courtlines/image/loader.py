"""
Image loading and binarisation.
"""
from __future__ import annotations
from pathlib import Path
from typing import Union
import cv2
import numpy as np

from ..models.grid import SampleGrid
import config

PathLike = Union[str, Path]


def load_raw(
    path: PathLike,
    width: int = config.IMAGE_WIDTH,
    height: int = config.IMAGE_HEIGHT,
) -> SampleGrid:
    """Read a headerless 8-bit single-channel .raw image."""
    path = Path(path)
    if not path.is_file():
        raise IOError(f"Cannot open image: {path}")
    n = width * height
    data = np.fromfile(path, dtype=np.uint8, count=n)
    if data.size < n:
        raise IOError(
            f"{path} holds {data.size} bytes, expected {n} for {width}x{height}")
    return SampleGrid(width=width, height=height, samples=data)


def load_image(path: PathLike) -> SampleGrid:
    """Read any OpenCV-decodable image as grayscale."""
    img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise IOError(f"Cannot decode image: {path}")
    return SampleGrid.from_array(img)


def load(
    path: PathLike,
    width: int = config.IMAGE_WIDTH,
    height: int = config.IMAGE_HEIGHT,
) -> SampleGrid:
    """Dispatch on extension: .raw needs explicit dimensions."""
    if Path(path).suffix.lower() == ".raw":
        return load_raw(path, width, height)
    return load_image(path)


def binarize(
    grid: SampleGrid, threshold: int = config.BINARIZE_THRESHOLD,
) -> SampleGrid:
    """Samples above threshold become 255, the rest 0."""
    _, binary = cv2.threshold(grid.as_array(), threshold, 255,
                              cv2.THRESH_BINARY)
    return SampleGrid(width=grid.width, height=grid.height, samples=binary)
