# external.py
# External contour: a 4-connected loop of background pixels hugging a shape
# from the outside. Only used to delimit the row scan in fill.py.

from __future__ import annotations
from typing import Dict, List, Tuple

from .directions import Direction
from .errors import AlgorithmInvariantError
from .grid import BinaryGrid
from .selection import Selection

# heading -> probes (new heading, d_col, d_row): right turn, straight, left turn, back
_PROBES: Dict[Direction, Tuple[Tuple[Direction, int, int], ...]] = {
    Direction.N: ((Direction.E, 1, 0), (Direction.N, 0, -1), (Direction.W, -1, 0), (Direction.S, 0, 1)),
    Direction.E: ((Direction.S, 0, 1), (Direction.E, 1, 0), (Direction.N, 0, -1), (Direction.W, -1, 0)),
    Direction.S: ((Direction.W, -1, 0), (Direction.S, 0, 1), (Direction.E, 1, 0), (Direction.N, 0, -1)),
    Direction.W: ((Direction.N, 0, -1), (Direction.W, -1, 0), (Direction.S, 0, 1), (Direction.E, 1, 0)),
}


def external_contour(grid: BinaryGrid, seed: int) -> Selection:
    """
    Walk the background ring around the component whose first (scan order)
    pixel is `seed`. Starts on the pixel left of the seed, as if heading north,
    and keeps the shape on its right until it is back at the start.
    The start pixel appears both first and last.
    """
    a = grid.array
    h, w = a.shape
    s_row, s_col = divmod(seed - 1, w)
    row, col = s_row, s_col
    points: List[Tuple[int, int]] = [(col, row)]
    heading = Direction.N
    limit = 4 * a.size + 4
    while True:
        moved = False
        for new_heading, dc, dr in _PROBES[heading]:
            c, r = col + dc, row + dr
            # off-grid counts as occupied
            if 0 <= r < h and 0 <= c < w and a[r, c] == 0:
                heading, col, row = new_heading, c, r
                points.append((col, row))
                moved = True
                break
        if not moved:
            raise AlgorithmInvariantError(f"External contour is boxed in at ({col}, {row}).")
        if (col, row) == (s_col, s_row):
            break
        if len(points) > limit:
            raise AlgorithmInvariantError(
                f"External contour from pixel {seed - 1} did not close after {limit} steps.")
    return Selection.from_points(points, w)
