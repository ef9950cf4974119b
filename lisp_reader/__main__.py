"""CLI: python -m lisp_reader [-v] [--tabs] <source.lisp>"""

import argparse
import logging
import sys
from pathlib import Path

from .errors import ReaderError
from .parser import parse_all
from .types import ReaderConfig

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="lisp-reader",
        description="Read a list-expression source file and print its values",
    )
    ap.add_argument("source", help="path to the source file")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--tabs", action="store_true", help="treat tab as whitespace")
    return ap


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source_path = Path(args.source)
    try:
        source = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {source_path}: {e}", file=sys.stderr)
        return 1
    logger.debug("read %d characters from %s", len(source), source_path)

    config = ReaderConfig(whitespace=" \t\r\n") if args.tabs else ReaderConfig()
    try:
        values = parse_all(source, config)
    except ReaderError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for value in values:
        print(repr(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
