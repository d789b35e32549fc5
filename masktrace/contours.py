# contours.py  (Moore-neighbour / radial sweep tracing)
# boundary of one 8-connected foreground component + corner reduction
#
# The grid must carry a ring of background pixels: neighbour probes are plain
# linear offsets and are never bounds-checked.

from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from .directions import Direction, neighbour_table
from .errors import AlgorithmInvariantError, InvalidInputError
from .grid import BinaryGrid
from .selection import Selection

logger = logging.getLogger(__name__)


def reduce_corners(indices: Sequence[int], directions: Sequence[Direction]) -> List[int]:
    """
    Keep the first pixel, then every pixel where the walk changes direction.
    directions[k] is how indices[k+1] was reached (the last entry closes the loop).
    """
    if not indices:
        return []
    corners = [indices[0]]
    if not directions:
        return corners
    current = directions[0]
    for pixel, d in zip(indices[1:], directions[1:]):
        if d != current:
            corners.append(pixel)
            current = d
    return corners


def _walk(grid: BinaryGrid, seed: int) -> Tuple[List[int], List[Direction]]:
    flat = grid.flat
    table = neighbour_table(grid.width)
    limit = 8 * grid.count() + 8

    indices = [seed]
    directions: List[Direction] = []
    p = seed
    arrived_from = Direction.W   # the seed has no predecessor: pretend we came from the west
    while True:
        found = False
        for offset, came_from in table[arrived_from]:
            q = p + offset
            if flat[q]:
                found = True
                break
        if not found:
            break  # isolated pixel
        # current == second pixel and previous == first pixel: the loop is closed,
        # whatever the connectivity of the border
        if len(indices) > 1 and q == indices[1] and indices[-1] == indices[0]:
            indices.pop()
            break
        p = q
        arrived_from = came_from
        indices.append(q)
        directions.append(came_from)
        if len(indices) > limit:
            raise AlgorithmInvariantError(
                f"Boundary walk from pixel {seed} did not close after {limit} steps.")
    return indices, directions


def trace_boundary(grid: BinaryGrid, seed: int | None = None) -> Tuple[Selection, Selection]:
    """
    Trace the border of the component holding `seed` (default: first foreground
    pixel in scan order). Returns (corners, continuous) selections in walk order,
    clockwise on screen.
    """
    if seed is None:
        seed = grid.first_foreground()
        if seed is None:
            raise InvalidInputError("Cannot trace a boundary: the grid has no foreground pixel.")
    elif not (0 <= seed < grid.flat.size) or not grid.flat[seed]:
        raise InvalidInputError(f"Invalid seed {seed}: not a foreground pixel.")

    indices, directions = _walk(grid, seed)
    corners = reduce_corners(indices, directions)
    logger.debug("traced seed=%d boundary=%d corners=%d", seed, len(indices), len(corners))
    return Selection(corners, grid.width), Selection(indices, grid.width)
