"""
Generate the shape table of the placement tool from the ascii catalog.

    python tetro_gen.py > shapes.txt
    python tetro_gen.py --variant tetro --input my_shapes.txt
"""
import sys

from configs import Config
from TetraGen.catalog import RAW_CATALOG
from TetraGen.emitter import emit, emit_json
from TetraGen.shapes import DisconnectedShape, ShapeError, parse_shapes, shape_size
from utils.shape_utils import is_connected


def log(s, end="\n"):
    print(s, end=end, file=sys.stderr)


def read_catalog(path):
    if path is None:
        return RAW_CATALOG
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as file:
        return file.read()


def generate(raw, config):
    shapes = parse_shapes(raw, track_col_shift=config.track_col_shift, strict_eof=config.strict_eof)

    if config.check_connected:
        for idx, shape in enumerate(shapes):
            if not is_connected(shape.cells):
                raise DisconnectedShape(idx, shape.cells)

    if config.verbose:
        for idx, shape in enumerate(shapes):
            log("[{:2}] size: {}x{}  col shift: {}".format(idx, *shape_size(shape), shape.col_shift))
        log("{} shapes".format(len(shapes)))

    if config.output_format == "json":
        return emit_json(shapes)
    return emit(shapes, config.ident)


def main(argv=None):
    config = Config().parse(argv)
    raw = read_catalog(config.input)
    try:
        out = generate(raw, config)
    except ShapeError as e:
        log("error: {}".format(e))
        return 1
    print(out)
    return 0


if __name__ == '__main__':
    sys.exit(main())
