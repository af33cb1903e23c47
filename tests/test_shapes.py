import pytest

from TetraGen.catalog import RAW_CATALOG, TETRAS_COUNT
from TetraGen.shapes import (IncompleteShape, TooManyPoints, parse_shapes, shape_size,
                             shape_str, tetra, tetro)


def test_square():
    assert parse_shapes("xx\nxx", track_col_shift=True) == [tetra([(0, 0), (0, 1), (1, 0), (1, 1)], 0)]


def test_line():
    assert parse_shapes("xxxx\n", track_col_shift=True) == [tetra([(0, 0), (0, 1), (0, 2), (0, 3)], 0)]


def test_col_shift_is_first_mark_not_min_column():
    shape, = parse_shapes(" x\nxxx\n", track_col_shift=True)
    assert shape.cells == ((0, 1), (1, 0), (1, 1), (1, 2))
    assert shape.col_shift == 1
    assert min(col for _, col in shape.cells) == 0


def test_leading_spaces_keep_their_columns():
    shape, = parse_shapes("  x\nxxx", track_col_shift=True)
    assert shape.cells == ((0, 2), (1, 0), (1, 1), (1, 2))
    assert shape.col_shift == 2


def test_tetro_variant_has_no_col_shift():
    shape, = parse_shapes(" x\nxxx")
    assert shape == tetro([(0, 1), (1, 0), (1, 1), (1, 2)])
    assert shape.col_shift is None


def test_any_non_space_character_is_a_mark():
    shape, = parse_shapes("#o\n@*")
    assert shape.cells == ((0, 0), (0, 1), (1, 0), (1, 1))


def test_incomplete_shape_carries_partial_cells():
    with pytest.raises(IncompleteShape) as e:
        parse_shapes("x\nx\nx\n\n")
    assert e.value.cells == ((0, 0), (1, 0), (2, 0))
    assert str(e.value) == "Bad shape: (0, 0), (1, 0), (2, 0)"


def test_too_many_points_on_one_line():
    with pytest.raises(TooManyPoints) as e:
        parse_shapes("xxxxx")
    assert e.value.shape_index == 0


def test_too_many_points_reports_shape_index():
    with pytest.raises(TooManyPoints) as e:
        parse_shapes("xx\nxx\n\nxxx\nxx\n")
    assert e.value.shape_index == 1


def test_too_many_points_before_block_ends():
    # the error comes from the fifth mark, not from the end of the block
    with pytest.raises(TooManyPoints):
        parse_shapes("xxx\nxx\nx")


def test_error_aborts_whole_catalog():
    with pytest.raises(IncompleteShape):
        parse_shapes("xx\nxx\n\nxx\n\nxxxx\n")


def test_blank_line_runs_and_space_lines_separate():
    shapes = parse_shapes("\n\n\nxx\nxx\n \n\n   \nxxxx\n\n\n")
    assert len(shapes) == 2


def test_rows_are_contiguous_from_zero():
    for shape in parse_shapes(RAW_CATALOG):
        rows = sorted(set(row for row, _ in shape.cells))
        assert rows == list(range(len(rows)))


def test_embedded_catalog():
    shapes = parse_shapes(RAW_CATALOG, track_col_shift=True)
    assert len(shapes) == TETRAS_COUNT
    for shape in shapes:
        assert len(shape.cells) == 4
        assert shape.col_shift == shape.cells[0][1]
        assert all(row >= 0 and col >= 0 for row, col in shape.cells)


def test_shape_count_matches_blocks():
    raw = "x\nxxx\n\n\nxxx\nx\n\nx\nx\nx\nx"
    assert len(parse_shapes(raw)) == 3


def test_open_shape_at_end_is_checked_by_default():
    with pytest.raises(IncompleteShape):
        parse_shapes("xx\nxx\n\nx\nx")


def test_lenient_eof_keeps_open_shape():
    shapes = parse_shapes("xx\nxx\n\nx\nx", strict_eof=False)
    assert shapes[1] == tetro([(0, 0), (1, 0)])


def test_empty_input():
    assert parse_shapes("") == []
    assert parse_shapes("\n \n") == []


def test_shape_size():
    assert shape_size(tetra([(0, 1), (1, 0), (1, 1), (2, 0)], 1)) == (3, 2)
    assert shape_size(tetro([(0, 0), (0, 1), (0, 2), (0, 3)])) == (1, 4)


def test_shape_str_parses_back():
    for shape in parse_shapes(RAW_CATALOG, track_col_shift=True):
        assert parse_shapes(shape_str(shape), track_col_shift=True) == [shape]


def test_idempotent():
    assert parse_shapes(RAW_CATALOG, True) == parse_shapes(RAW_CATALOG, True)
