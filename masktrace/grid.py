# grid.py
# Binary grid: the 0/1 raster every tracer/filler works on.
# Linear index <-> (col, row) is always  index = row * width + col  (numpy C order).

from __future__ import annotations
from typing import Iterable, List, Tuple
import numpy as np

from .errors import InvalidInputError
from .selection import Selection


def _as_binary_array(data, name: str = "grid") -> np.ndarray:
    arr = np.asarray(data)
    if arr.ndim != 2:
        raise InvalidInputError(f"Invalid argument '{name}'. Expected a two-dimensional array, got {arr.ndim} dimensions.")
    if arr.size == 0:
        raise InvalidInputError(f"Invalid argument '{name}'. Expected a non-empty array, got shape {arr.shape}.")
    if arr.dtype == bool:
        return arr.astype(np.uint8)
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise InvalidInputError(f"Invalid argument '{name}'. Expected a numeric array, got dtype {arr.dtype}.")
    if not np.isin(arr, (0, 1)).all():
        bad = arr[~np.isin(arr, (0, 1))]
        raise InvalidInputError(f"Invalid argument '{name}'. Expected binary values (0/1), got {bad.flat[0]!r}.")
    return arr.astype(np.uint8)


class BinaryGrid:
    """Mutable 2-D array of 0/1 cells, shape (rows, columns)."""

    def __init__(self, data):
        self.array = data

    @classmethod
    def zeros(cls, width: int, height: int) -> "BinaryGrid":
        if width < 1 or height < 1:
            raise InvalidInputError(f"Invalid grid size {width}x{height}.")
        return cls(np.zeros((height, width), np.uint8))

    # --- the array itself -------------------------------------------------

    @property
    def array(self) -> np.ndarray:
        return self._array

    @array.setter
    def array(self, data):
        self._array = _as_binary_array(data)

    @property
    def width(self) -> int:
        return self._array.shape[1]

    @property
    def height(self) -> int:
        return self._array.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._array.shape

    @property
    def flat(self) -> np.ndarray:
        """Writable linear view of the cells."""
        return self._array.reshape(-1)

    def __eq__(self, other):
        if not isinstance(other, BinaryGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._array, other._array))

    def __hash__(self):
        return hash((self.shape, self._array.tobytes()))

    def __repr__(self):
        return f"BinaryGrid({self.width}x{self.height}, foreground={self.count()})"

    def copy(self) -> "BinaryGrid":
        return BinaryGrid(self._array.copy())

    # --- queries -------------------------------------------------------------

    def count(self) -> int:
        return int(np.count_nonzero(self._array))

    def is_segmented(self) -> bool:
        return bool(self._array.any())

    def indices(self, state: bool = True) -> List[int]:
        """Linear indices of the foreground (or background) cells, in scan order."""
        return np.flatnonzero(self.flat == (1 if state else 0)).tolist()

    def first_foreground(self) -> int | None:
        """First foreground cell in row-major, column-fastest order."""
        hits = np.flatnonzero(self.flat)
        return int(hits[0]) if hits.size else None

    def selection(self) -> Selection:
        return Selection(self.indices(True), self.width)

    def area(self, pixel_area: float = 1.0, state: bool = True) -> float:
        """Number of true (or false) cells times the area of one pixel."""
        n = self.count() if state else self._array.size - self.count()
        return n * pixel_area

    # --- mutation ------------------------------------------------------------

    def clear(self, indices: Iterable[int]):
        idx = np.asarray(list(indices), dtype=np.intp)
        if idx.size:
            self.flat[idx] = 0

    def add(self, other):
        """Union-merge another same-shape binary raster into this grid."""
        pixels = other.array if isinstance(other, BinaryGrid) else _as_binary_array(other, "pixels")
        if pixels.shape != self.shape:
            raise InvalidInputError(
                f"Invalid argument 'pixels'. Expected shape {self.shape}, got {pixels.shape}.")
        self._array[pixels > 0] = 1

    def padded(self, pad: int = 1) -> "BinaryGrid":
        """New grid with `pad` rings of background around this one."""
        return BinaryGrid(np.pad(self._array, pad, mode="constant", constant_values=0))
