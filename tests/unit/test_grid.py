import numpy as np
import pytest

from masktrace.errors import InvalidInputError
from masktrace.grid import BinaryGrid


def test_grid_rejects_non_binary_and_bad_shapes() -> None:
    with pytest.raises(InvalidInputError):
        BinaryGrid(np.array([[0, 2], [1, 0]]))
    with pytest.raises(InvalidInputError):
        BinaryGrid(np.zeros((2, 2, 2), np.uint8))
    with pytest.raises(InvalidInputError):
        BinaryGrid(np.zeros((0, 3), np.uint8))
    with pytest.raises(InvalidInputError):
        BinaryGrid([1, 0, 1])


def test_grid_accepts_bool_and_copies_input() -> None:
    src = np.array([[True, False], [False, True]])
    grid = BinaryGrid(src)

    assert grid.array.dtype == np.uint8
    assert grid.count() == 2
    grid.clear([0])
    assert src[0, 0]


def test_linear_index_is_row_major() -> None:
    grid = BinaryGrid(
        [
            [0, 0, 1],
            [1, 0, 0],
        ]
    )

    assert grid.width == 3 and grid.height == 2
    assert grid.first_foreground() == 2
    assert grid.indices() == [2, 3]
    assert grid.indices(False) == [0, 1, 4, 5]
    assert grid.selection().points() == [(2, 0), (0, 1)]


def test_first_foreground_on_empty_grid() -> None:
    assert BinaryGrid.zeros(4, 3).first_foreground() is None
    assert not BinaryGrid.zeros(4, 3).is_segmented()


def test_padded_adds_background_ring() -> None:
    grid = BinaryGrid([[1, 1], [1, 0]])
    padded = grid.padded(1)

    assert padded.shape == (4, 4)
    assert padded.count() == 3
    assert padded.array[0].sum() == 0 and padded.array[:, -1].sum() == 0
    assert padded.array[1, 1] == 1


def test_add_merges_pixels_and_checks_shape() -> None:
    grid = BinaryGrid([[1, 0], [0, 0]])
    grid.add(np.array([[0, 1], [0, 1]]))

    assert grid.indices() == [0, 1, 3]
    with pytest.raises(InvalidInputError):
        grid.add(np.zeros((3, 3), np.uint8))


def test_area_and_clear() -> None:
    grid = BinaryGrid(np.ones((3, 4), np.uint8))

    assert grid.area() == 12
    assert grid.area(pixel_area=0.25) == 3.0
    grid.clear([0, 5, 11])
    assert grid.count() == 9
    assert grid.area(state=False) == 3


def test_equality_and_hash() -> None:
    a = BinaryGrid([[1, 0], [0, 1]])
    b = BinaryGrid(np.array([[1, 0], [0, 1]], dtype=bool))

    assert a == b
    assert hash(a) == hash(b)
    b.clear([3])
    assert a != b
