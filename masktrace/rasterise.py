# rasterise.py
# polygon coordinates -> binary grid (delineate + fill, union of all polygons)

from __future__ import annotations
from typing import Iterable, Sequence, Tuple
import numpy as np
from skimage.draw import line, polygon

from .errors import InvalidInputError
from .grid import BinaryGrid


def _vertices(poly) -> np.ndarray:
    pts = np.asarray(poly, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2 or len(pts) == 0:
        raise InvalidInputError(f"Expected a non-empty sequence of (col, row) pairs, got shape {pts.shape}.")
    return pts


def polygon_mask(poly: Sequence[Tuple[float, float]], shape: Tuple[int, int]) -> np.ndarray:
    """uint8 mask of one closed polygon: its interior plus its outline."""
    h, w = shape
    pts = _vertices(poly)
    mask = np.zeros((h, w), np.uint8)
    if len(pts) >= 3:
        rr, cc = polygon(pts[:, 1], pts[:, 0], shape=(h, w))
        mask[rr, cc] = 1
    # outline, so that degenerate and thin polygons still show up
    ipts = np.round(pts).astype(int)
    for (c0, r0), (c1, r1) in zip(ipts, np.roll(ipts, -1, axis=0)):
        rr, cc = line(r0, c0, r1, c1)
        keep = (rr >= 0) & (rr < h) & (cc >= 0) & (cc < w)
        mask[rr[keep], cc[keep]] = 1
    return mask


def grid_from_polygons(polygons: Iterable[Sequence[Tuple[float, float]]], shape: Tuple[int, int]) -> BinaryGrid:
    """shape = (rows, columns). Overlapping polygons are merged."""
    h, w = shape
    grid = BinaryGrid.zeros(w, h)
    for poly in polygons:
        grid.add(polygon_mask(poly, (h, w)))
    return grid
