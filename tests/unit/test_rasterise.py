import numpy as np
import pytest

from masktrace.errors import InvalidInputError
from masktrace.extract import extract
from masktrace.rasterise import grid_from_polygons, polygon_mask


def test_square_polygon_is_delineated_and_filled() -> None:
    grid = grid_from_polygons([[(1, 1), (4, 1), (4, 4), (1, 4)]], (6, 6))

    expected = np.zeros((6, 6), np.uint8)
    expected[1:5, 1:5] = 1
    assert np.array_equal(grid.array, expected)
    assert extract(grid) == [[(1, 1), (4, 1), (4, 4), (1, 4)]]


def test_overlapping_polygons_are_merged() -> None:
    grid = grid_from_polygons(
        [[(0, 0), (2, 0), (2, 2), (0, 2)], [(2, 2), (4, 2), (4, 4), (2, 4)]], (5, 5))

    assert grid.count() == 17
    assert len(extract(grid)) == 1


def test_degenerate_polygons_still_mark_pixels() -> None:
    assert polygon_mask([(2, 1)], (3, 4)).sum() == 1
    assert polygon_mask([(0, 0), (3, 0)], (3, 4))[0].tolist() == [1, 1, 1, 1]


def test_outline_is_clipped_to_the_grid() -> None:
    mask = polygon_mask([(-2, -2), (8, -2), (8, 8), (-2, 8)], (4, 4))

    assert mask.sum() == 16


def test_malformed_polygon_is_rejected() -> None:
    with pytest.raises(InvalidInputError):
        grid_from_polygons([[]], (3, 3))
    with pytest.raises(InvalidInputError):
        grid_from_polygons([[(1, 2, 3)]], (3, 3))
