"""Run the phone sorter as ``python -m phone_sorter INPUT OUTPUT_DIR``."""
from __future__ import annotations

import sys

from . import cli


def main(argv: list[str] | None = None) -> int:
    """Sort a phone number list into report files.

    With no arguments the usage text is printed and 2 is returned, since both
    the input file and the output directory are required.
    """

    args = sys.argv[1:] if argv is None else argv
    if not args:
        cli.build_parser(prog="python -m phone_sorter").print_help()
        return 2
    return cli.main(args)


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
