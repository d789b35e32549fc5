# selection.py
# ordered pixel sets (linear indices + derived columns/rows)

from __future__ import annotations
from typing import Iterable, Iterator, List, Protocol, Tuple, runtime_checkable

IPoint = Tuple[int, int]  # (col, row)


@runtime_checkable
class ToPolygon(Protocol):
    """Anything that can be drawn/converted as an ordered (col, row) polygon."""

    def points(self) -> List[IPoint]: ...


class Selection:
    """
    Ordered sequence of linear pixel indices for a grid of a given width.
    Order is the walk order for boundaries/polygons; fill results are sorted.
    """

    def __init__(self, indices: Iterable[int], width: int):
        self.width = int(width)
        self._indices = [int(i) for i in indices]

    @classmethod
    def from_points(cls, points: Iterable[IPoint], width: int) -> "Selection":
        return cls((row * width + col for col, row in points), width)

    @property
    def indices(self) -> List[int]:
        return list(self._indices)

    @property
    def columns(self) -> List[int]:
        return [i % self.width for i in self._indices]

    @property
    def rows(self) -> List[int]:
        return [i // self.width for i in self._indices]

    def points(self) -> List[IPoint]:
        return [(i % self.width, i // self.width) for i in self._indices]

    def __len__(self):
        return len(self._indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self._indices)

    def __eq__(self, other):
        if not isinstance(other, Selection):
            return NotImplemented
        return self.width == other.width and self._indices == other._indices

    def __repr__(self):
        return f"Selection({len(self)} px, width={self.width})"

    def shift_and_crop(self, delta_col: int, delta_row: int, width: int, height: int):
        """
        Translate every pixel by (delta_col, delta_row) into a width x height grid,
        dropping pixels that land outside it. Used to undo border padding.
        """
        kept: List[int] = []
        for col, row in self.points():
            c, r = col + delta_col, row + delta_row
            if 0 <= c < width and 0 <= r < height:
                kept.append(r * width + c)
        self._indices = kept
        self.width = int(width)
        return self


def as_points(polygon) -> List[IPoint]:
    """(col, row) list from a ToPolygon or a plain sequence of pairs."""
    if isinstance(polygon, ToPolygon):
        return polygon.points()
    return [(int(c), int(r)) for c, r in polygon]
