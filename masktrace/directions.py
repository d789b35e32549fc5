# directions.py
# compass directions + neighbour probe tables for the radial sweep

from __future__ import annotations
from enum import IntEnum
from functools import lru_cache
from typing import Tuple


class Direction(IntEnum):
    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    def opposite(self) -> "Direction":
        return Direction((self + 4) % 8)

    @property
    def offset(self) -> Tuple[int, int]:
        """(d_col, d_row) towards this neighbour; rows grow downward."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.N: (0, -1), Direction.NE: (1, -1), Direction.E: (1, 0), Direction.SE: (1, 1),
    Direction.S: (0, 1), Direction.SW: (-1, 1), Direction.W: (-1, 0), Direction.NW: (-1, -1),
}

# the ring in clockwise order, starting top-left
CLOCKWISE = (Direction.NW, Direction.N, Direction.NE, Direction.E,
             Direction.SE, Direction.S, Direction.SW, Direction.W)

Probe = Tuple[int, Direction]          # (linear offset, arrived-from after stepping there)
ProbeOrder = Tuple[Probe, ...]         # 8 probes


def sweep(arrived_from: Direction) -> Tuple[Direction, ...]:
    """
    Neighbours to scan when we arrived from `arrived_from`: clockwise,
    starting just past that neighbour and ending on it.
    """
    start = CLOCKWISE.index(arrived_from) + 1
    return tuple(CLOCKWISE[(start + i) % 8] for i in range(8))


@lru_cache(maxsize=None)
def neighbour_table(width: int) -> Tuple[ProbeOrder, ...]:
    """
    One probe order per arrival direction (indexed by Direction). Depends only
    on the grid width, so it is cached and shared read-only.
    """
    table = []
    for arrived_from in Direction:
        order = []
        for d in sweep(arrived_from):
            dc, dr = d.offset
            # stepping towards d means the previous pixel lies on the opposite side
            order.append((dr * width + dc, d.opposite()))
        table.append(tuple(order))
    return tuple(table)
