import argparse

from TetraGen.emitter import DEFAULT_IDENTS

class Config(object):
    def __init__(self):
        self.parser = argparse.ArgumentParser(
            description="Turn the ascii tetra catalog into tetro!/tetra! macro calls")
        self.parser.add_argument("--variant", choices=sorted(DEFAULT_IDENTS), default="tetra",
                                 help="tetra also emits the column of the first mark")
        self.parser.add_argument("--input", default=None,
                                 help="catalog file, '-' for stdin (default: the built-in catalog)")
        self.parser.add_argument("--ident", default=None,
                                 help="macro name (default: tetro! or tetra!)")
        self.parser.add_argument("--output_format", choices=["default", "json"], default="default")

        self.parser.add_argument("--lenient_eof", action="store_true",
                                 help="keep a shape left open at the end of input without checking it")
        self.parser.add_argument("--check_connected", action="store_true")
        self.parser.add_argument("--verbose", action="store_true")

    def parse(self, argv=None):
        config = self.parser.parse_args(argv)
        config.track_col_shift = config.variant == "tetra"
        config.strict_eof = not config.lenient_eof
        if config.ident is None:
            config.ident = DEFAULT_IDENTS[config.variant]
        return config
