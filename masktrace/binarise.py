# binarise.py
# thresholding & padding

from __future__ import annotations
import numpy as np
from skimage.filters import threshold_otsu

from .errors import InvalidInputError
from .grid import BinaryGrid


def binarise(gray: np.ndarray, threshold: float | None = None) -> tuple[BinaryGrid, float]:
    """Dark pixels (at or below threshold) become foreground. Otsu when no threshold is given."""
    gray = np.asarray(gray)
    if gray.ndim != 2 or gray.size == 0:
        raise InvalidInputError(f"Expected a non-empty 2-D grayscale image, got shape {gray.shape}.")
    if threshold is None:
        if gray.min() == gray.max():
            # a flat image has no Otsu split: everything is background
            return BinaryGrid(np.zeros(gray.shape, np.uint8)), float(gray.min())
        threshold = float(threshold_otsu(gray))
    return BinaryGrid(gray <= threshold), threshold


def pad_background(grid: BinaryGrid, pad: int = 1) -> BinaryGrid:
    return grid.padded(pad)
