"""Command line driver: evaluate a paren program and print its value.

    python -m paren program.paren
    echo '(+ 1 2)' | python -m paren
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from paren import config
from paren.debug_utils.pprint import format_error, format_value, to_source
from paren.errors import ParenError
from paren.interpreter import Interpreter

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paren", description="Evaluate a paren program.")
    parser.add_argument("file", nargs="?", help="program to run (default: read stdin)")
    parser.add_argument("--parse", action="store_true", help="print the parsed program instead of evaluating it")
    parser.add_argument("--no-color", action="store_true", help="disable colored diagnostics")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def read_source(path: Optional[str]) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def use_color(no_color: bool, stream: TextIO) -> bool:
    if no_color:
        return False
    mode = config.get_color_mode()
    if mode == "auto":
        return stream.isatty()
    return mode == "always"


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    limit = config.get_recursion_limit()
    if limit is not None:
        logger.debug("recursion limit set to %d", limit)
        sys.setrecursionlimit(limit)

    try:
        source = read_source(args.file)
    except OSError as err:
        print(f"paren: {err}", file=sys.stderr)
        return 1
    logger.debug("read %d bytes from %s", len(source), args.file or "stdin")
    interp = Interpreter()
    try:
        if args.parse:
            print(to_source(interp.parse(source)))
        else:
            print(format_value(interp.eval(source)))
    except ParenError as err:
        logger.debug("evaluation failed: %r", err)
        print(format_error(source, err, color=use_color(args.no_color, sys.stderr)), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
