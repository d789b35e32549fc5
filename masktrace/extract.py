# extract.py
# Multi-contour extraction: trace -> fill -> erase, repeated until the grid is empty.
#
#   scanning    first foreground pixel in scan order (none left: done)
#   tracing     trace_boundary() from that seed
#   classifying boundary shorter than MIN_BOUNDARY_PIXELS is noise
#   filling     fill_region(); emit the corner polygon
#   discarding  noise: only the boundary pixels are removed, nothing emitted
#   erasing     clear the filled/discarded pixels; foreground must shrink

from __future__ import annotations
import logging
from typing import List, Tuple
import numpy as np

from .config import L, Limits
from .contours import trace_boundary
from .errors import AlgorithmInvariantError, InvalidInputError
from .fill import fill_region
from .grid import BinaryGrid
from .selection import Selection

logger = logging.getLogger(__name__)

Contour = List[Tuple[int, int]]   # (col, row) corners, implicitly closed


def _as_grid(grid) -> BinaryGrid:
    return grid if isinstance(grid, BinaryGrid) else BinaryGrid(grid)


def _consume(work: BinaryGrid, limits: Limits) -> List[Selection]:
    contours: List[Selection] = []
    remaining = work.count()
    while True:
        seed = work.first_foreground()
        if seed is None:
            break

        corners, continuous = trace_boundary(work, seed)
        if len(continuous) < limits.MIN_BOUNDARY_PIXELS:
            region = continuous
            logger.debug("discarded %d-pixel fragment at %s", len(continuous), continuous.points()[0])
        else:
            region = fill_region(work, continuous)
            if len(region) < limits.MIN_REGION_PIXELS:
                raise AlgorithmInvariantError(
                    f"Unexpected fill of {len(region)} pixels for a {len(continuous)}-pixel boundary "
                    f"starting at {continuous.points()[0]}; aborting to avoid an endless extraction.")
            contours.append(corners)

        work.clear(region.indices)
        left = work.count()
        if left >= remaining:
            raise AlgorithmInvariantError(
                f"Erasing the component at {continuous.points()[0]} left {left} of {remaining} pixels.")
        remaining = left
    return contours


def extract_selections(grid, limits: Limits = L, erase: bool = False) -> List[Selection]:
    """
    Corner polygons of every 8-connected foreground component, in discovery
    order, as Selections in the caller's (unpadded) coordinates.
    Holes are not reported; enclosed background is treated as filled.
    With erase=True a BinaryGrid argument is cleared of every consumed pixel.
    """
    pad = limits.PAD
    if pad < 1:
        # neighbour probes are never bounds-checked: the ring is mandatory
        raise InvalidInputError(f"Limits.PAD must be at least 1, got {pad}.")
    src = _as_grid(grid)
    work = src.padded(pad)
    contours = _consume(work, limits)
    for c in contours:
        c.shift_and_crop(-pad, -pad, src.width, src.height)
    if erase:
        src.array = work.array[pad:pad + src.height, pad:pad + src.width]
    logger.info("extracted %d contour(s) from %dx%d grid", len(contours), src.width, src.height)
    return contours


def extract(grid, limits: Limits = L, erase: bool = False) -> List[Contour]:
    """Ordered list of contours, each an implicitly closed list of (col, row) corners."""
    return [c.points() for c in extract_selections(grid, limits=limits, erase=erase)]


def contour_image(grid, limits: Limits = L) -> np.ndarray:
    """Image of the grid's shape with the corners of contour i marked i+1 (0 elsewhere)."""
    src = _as_grid(grid)
    contours = extract_selections(src.copy(), limits=limits)
    img = np.zeros(src.shape, np.uint16)
    flat = img.reshape(-1)
    for i, c in enumerate(contours):
        flat[c.indices] = i + 1
    return img
