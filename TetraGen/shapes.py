from collections import namedtuple

CELLS_PER_SHAPE = 4

Shape = namedtuple("Shape", "cells col_shift")


class ShapeError(Exception):
    """ Base class for malformed shapes in a catalog """


class TooManyPoints(ShapeError):
    def __init__(self, shape_index):
        super().__init__("Too many points in shape #{}".format(shape_index))
        self.shape_index = shape_index


class IncompleteShape(ShapeError):
    def __init__(self, cells):
        super().__init__("Bad shape: {}".format(cells_str(cells)))
        self.cells = tuple(cells)


class DisconnectedShape(ShapeError):
    def __init__(self, shape_index, cells):
        super().__init__("Shape #{} is not connected: {}".format(shape_index, cells_str(cells)))
        self.shape_index = shape_index
        self.cells = tuple(cells)


def cells_str(cells):
    return ', '.join('({}, {})'.format(row, col) for row, col in cells)


def tetro(cells):
    return Shape(cells=tuple(cells), col_shift=None)


def tetra(cells, col_shift):
    return Shape(cells=tuple(cells), col_shift=col_shift)


def shape_size(shape):
    """ (rows, cols) of the smallest box holding the shape, at least (1, 1) """
    rows, cols = 1, 1
    for row, col in shape.cells:
        rows = max(rows, row + 1)
        cols = max(cols, col + 1)
    return rows, cols


def parse_shapes(raw, track_col_shift=False, strict_eof=True):
    """
    Parse a block of ASCII art into a list of shapes.

    Shapes are maximal runs of non-blank lines. Every non-space character is
    a mark; its (row, col) is taken relative to the first line of the run and
    the start of the line. With track_col_shift the column of the first mark
    is kept as the shape's col_shift.

    Raises TooManyPoints as soon as a shape has more than four marks and
    IncompleteShape when a shape ends with fewer. With strict_eof=False a
    shape still open at the end of the text is kept without the check.
    """
    shapes = []
    cells = None
    row = -1
    col_shift = None

    def finish(check):
        if check and len(cells) < CELLS_PER_SHAPE:
            raise IncompleteShape(cells)
        if track_col_shift:
            shapes.append(tetra(cells, col_shift))
        else:
            shapes.append(tetro(cells))

    for line in raw.split('\n'):
        trimmed = line.rstrip()
        if trimmed:
            if cells is None:
                cells, row, col_shift = [], -1, None
            row += 1

            for i, ch in enumerate(trimmed):
                if ch != ' ':
                    if not cells:
                        col_shift = i
                    cells.append((row, i))

            if len(cells) > CELLS_PER_SHAPE:
                raise TooManyPoints(len(shapes))
        elif cells is not None:
            finish(check=True)
            cells = None

    if cells is not None:
        finish(check=strict_eof)

    return shapes


def shape_str(shape, mark='x'):
    """ Return a string of a shape in the catalog's ascii form """
    rows, cols = shape_size(shape)
    grid = [[' '] * cols for _ in range(rows)]
    for row, col in shape.cells:
        grid[row][col] = mark
    return '\n'.join(''.join(line).rstrip() for line in grid)


def test():
    o_block, i_block, t_block = parse_shapes("xx\nxx\n\nxxxx\n\n x\nxxx", track_col_shift=True)

    assert o_block == tetra([(0, 0), (0, 1), (1, 0), (1, 1)], 0)
    assert i_block == tetra([(0, 0), (0, 1), (0, 2), (0, 3)], 0)
    assert t_block == tetra([(0, 1), (1, 0), (1, 1), (1, 2)], 1)

    assert shape_size(t_block) == (2, 3)
    assert shape_str(t_block) == " x\nxxx"

    try:
        parse_shapes("x\nx\nx\n\n")
    except IncompleteShape as e:
        assert e.cells == ((0, 0), (1, 0), (2, 0))
    else:
        raise AssertionError("incomplete shape was accepted")

    try:
        parse_shapes("xxxxx")
    except TooManyPoints as e:
        assert e.shape_index == 0
    else:
        raise AssertionError("five point shape was accepted")

    print("All tests passed in {}, things seems to be working alright".format(__file__))


if __name__ == '__main__':
    test()
