# geometry.py
# pixel (col, row) -> physical (x, y, z) coordinates of an image plane

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np

from .config import L, Limits
from .errors import InvalidInputError
from .selection import as_points


@dataclass(frozen=True)
class PixelGeometry:
    """
    Position of the first pixel, pixel spacing (mm) and the six direction
    cosines (row direction, then column direction) of an image plane.
    """
    pos_x: float = 0.0
    pos_y: float = 0.0
    col_spacing: float = 1.0
    row_spacing: float = 1.0
    cosines: Tuple[float, float, float, float, float, float] = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0)
    pos_slice: float = 0.0

    def __post_init__(self):
        if len(self.cosines) != 6:
            raise InvalidInputError(f"Expected 6 direction cosines, got {len(self.cosines)}.")
        if self.col_spacing <= 0 or self.row_spacing <= 0:
            raise InvalidInputError("Pixel spacing must be positive.")

    @property
    def pixel_area(self) -> float:
        return self.col_spacing * self.row_spacing

    def coordinates_from_indices(self, columns, rows) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        cols = np.asarray(columns, dtype=float)
        rws = np.asarray(rows, dtype=float)
        if cols.shape != rws.shape:
            raise InvalidInputError(f"Column/row length mismatch: {cols.shape} vs {rws.shape}.")
        c = self.cosines
        dc = cols * self.col_spacing
        dr = rws * self.row_spacing
        x = self.pos_x + dc * c[0] + dr * c[3]
        y = self.pos_y + dc * c[1] + dr * c[4]
        z = self.pos_slice + dc * c[2] + dr * c[5]
        return x, y, z


def to_physical(contour, geometry: PixelGeometry, limits: Limits = L) -> List[Tuple[float, float, float]]:
    """Rounded (x, y, z) vertices of one contour (ToPolygon or list of (col, row))."""
    pts = as_points(contour)
    if not pts:
        return []
    cols, rows = zip(*pts)
    x, y, z = geometry.coordinates_from_indices(cols, rows)
    return [(round(float(a), limits.XY_DECIMALS), round(float(b), limits.XY_DECIMALS), round(float(d), limits.Z_DECIMALS))
            for a, b, d in zip(x, y, z)]


def to_physical_all(contours: Sequence, geometry: PixelGeometry, limits: Limits = L):
    return [to_physical(c, geometry, limits) for c in contours]
