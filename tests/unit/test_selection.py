from masktrace.selection import Selection, ToPolygon, as_points


def test_columns_rows_follow_index_order() -> None:
    sel = Selection([7, 1, 10], width=4)

    assert sel.columns == [3, 1, 2]
    assert sel.rows == [1, 0, 2]
    assert sel.points() == [(3, 1), (1, 0), (2, 2)]
    assert len(sel) == 3


def test_from_points_roundtrip() -> None:
    sel = Selection.from_points([(0, 0), (2, 1)], width=5)

    assert sel.indices == [0, 7]


def test_shift_and_crop_translates_and_drops_outside() -> None:
    # padded 5x4 grid -> original 3x2
    sel = Selection.from_points([(1, 1), (3, 2), (0, 0), (4, 3)], width=5)
    sel.shift_and_crop(-1, -1, 3, 2)

    assert sel.width == 3
    assert sel.points() == [(0, 0), (2, 1)]


def test_selection_is_a_polygon_source() -> None:
    sel = Selection([0, 1], width=2)

    assert isinstance(sel, ToPolygon)
    assert as_points(sel) == [(0, 0), (1, 0)]
    assert as_points([(1.0, 2.0)]) == [(1, 2)]
