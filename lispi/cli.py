"""
lispi command-line interface

Usage:
    python -m lispi                  # interactive REPL
    python -m lispi script.lisp      # run a script, print the last value
    python -m lispi -e "(+ 1 2)"     # evaluate an expression
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, TextIO

from lispi.config import get_log_level, get_recursion_limit
from lispi.errors import LispiError, LispiIncompleteInput
from lispi.interpreter import Interpreter
from lispi.printer import to_lisp_string
from lispi.reader.parser import read

logger = logging.getLogger(__name__)

PROMPT = "(lispi)=> "
CONTINUATION_PROMPT = "...   "


def run_repl(
    interp: Interpreter,
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> int:
    """Read-eval-print until EOF. Errors are reported and the session continues."""
    out = out or sys.stdout
    buffer = ""
    while True:
        try:
            line = input_fn(CONTINUATION_PROMPT if buffer else PROMPT)
        except EOFError:
            print(file=out)
            if buffer.strip():
                print("error: unexpected end of input", file=out)
            return 0
        except KeyboardInterrupt:
            print(file=out)
            buffer = ""
            continue

        buffer += line + "\n"
        try:
            exprs = read(buffer)
        except LispiIncompleteInput:
            continue
        except LispiError as e:
            print(f"error: {e}", file=out)
            buffer = ""
            continue

        buffer = ""
        for expr in exprs:
            try:
                result = interp.evaluate(expr)
            except LispiError as e:
                logger.debug("form failed", exc_info=True)
                print(f"error: {e}", file=out)
                break
            print(to_lisp_string(result), file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lispi",
        description="A small Lisp interpreter with closures, persistent lists and recur.",
    )
    parser.add_argument("script", nargs="?", help="Script file to run")
    parser.add_argument("-e", "--eval", dest="expr", help="Evaluate an expression and print the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter()

    if args.script is not None or args.expr is not None:
        try:
            if args.script is not None:
                result = interp.eval_file(args.script)
            else:
                result = interp.eval(args.expr)
        except LispiError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        if isinstance(result, list):
            result = result[-1]
        print(to_lisp_string(result))
        return 0

    return run_repl(interp)


if __name__ == "__main__":
    sys.exit(main())
