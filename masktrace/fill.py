# fill.py
# Region fill from a traced boundary (Khudeev's flood fill for closed contours):
# paint the external and internal contours on a scratch image, then scan each
# row and fill between an external pixel and the next external pixel that
# follows an internal one.

from __future__ import annotations
import logging
import numpy as np

from .errors import InvalidInputError
from .external import external_contour
from .grid import BinaryGrid
from .selection import Selection

logger = logging.getLogger(__name__)

EXT_VALUE = 3
INT_VALUE = 2
ROI_VALUE = 1


def scan_fill(img: np.ndarray, row_min: int, row_max: int):
    """Row scan over a marker image; fills spans with ROI_VALUE in place."""
    for row in range(row_min, row_max + 1):
        vec = img[row]
        marked = np.flatnonzero(vec)
        if marked.size == 0:
            continue
        ext_left = None
        int_found = False
        for col in range(int(marked[0]), int(marked[-1]) + 1):
            v = vec[col]
            if v == EXT_VALUE and not int_found:
                ext_left = col
            elif v == INT_VALUE:
                int_found = True
            elif v == EXT_VALUE and int_found:
                # span confirmed: everything strictly between the two external pixels
                if ext_left is not None:
                    vec[ext_left + 1:col] = ROI_VALUE
                ext_left = col
                int_found = False


def fill_region(grid: BinaryGrid, boundary: Selection) -> Selection:
    """
    All pixels enclosed by a continuous boundary from trace_boundary(), the
    boundary itself included. boundary[0] must be the component's first pixel
    in scan order, with a background pixel to its left.
    Enclosed background (holes) is filled as well.
    """
    if len(boundary) == 0:
        raise InvalidInputError("Cannot fill an empty boundary.")
    if boundary.width != grid.width:
        raise InvalidInputError(
            f"Boundary width {boundary.width} does not match grid width {grid.width}.")
    size = grid.flat.size
    outside = [i for i in boundary if not 0 <= i < size]
    if outside:
        raise InvalidInputError(f"Boundary index {outside[0]} lies outside the {size}-pixel grid.")
    seed = boundary.indices[0]
    if not grid.flat[seed]:
        raise InvalidInputError(f"Boundary start {seed} is not a foreground pixel.")
    if seed % grid.width == 0 or grid.flat[seed - 1]:
        raise InvalidInputError(f"Boundary start {seed} has no background pixel on its left.")

    ext = external_contour(grid, seed)
    img = np.zeros(grid.flat.size, np.uint8)
    img[ext.indices] = EXT_VALUE
    img[boundary.indices] = INT_VALUE
    img = img.reshape(grid.shape)

    rows = ext.rows
    scan_fill(img, min(rows), max(rows))

    region = Selection(np.flatnonzero(img == ROI_VALUE).tolist(), grid.width)
    logger.debug("filled boundary=%d external=%d region=%d", len(boundary), len(ext), len(region))
    return region
