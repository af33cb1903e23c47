"""
Render parsed shapes as macro calls for the placement tool's shape table,
or as json.
"""
import json

from TetraGen.shapes import shape_size

DEFAULT_IDENTS = {
    "tetro": "tetro!",
    "tetra": "tetra!",
}

SEPARATOR = ",\n"


def format_cell(cell):
    row, col = cell
    return "({}, {})".format(row, col)


def format_shape(shape, ident):
    """ ident((r, c), (r, c), (r, c), (r, c)) with the col shift appended when the shape has one """
    args = [format_cell(cell) for cell in shape.cells]
    if shape.col_shift is not None:
        args.append(str(shape.col_shift))
    return "{}({})".format(ident, ", ".join(args))


def emit(shapes, ident, separator=SEPARATOR):
    return separator.join(format_shape(shape, ident) for shape in shapes)


def shape_to_dict(shape):
    out = {
        "cells": [[int(row), int(col)] for row, col in shape.cells],
        "size": list(shape_size(shape)),
    }
    if shape.col_shift is not None:
        out["col_shift"] = int(shape.col_shift)
    return out


def emit_json(shapes):
    return json.dumps([shape_to_dict(shape) for shape in shapes], indent=2)
