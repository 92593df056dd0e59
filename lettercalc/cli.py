"""Command line entry point.

Takes the expression from the first argument, or, when that is missing or
blank, reads one line from standard input.
"""

import argparse as arg
import json
import logging
import sys
import typing as t

from lettercalc import tokens
from lettercalc.cases import CASES, run_cases
from lettercalc.errors import EvalError
from lettercalc.evaluator import evaluate

logger = logging.getLogger(__name__)


def _encoding_epilog() -> str:
    letters = ", ".join(
        f"{letter} = {symbol}" for letter, symbol in tokens.ENCODING.items()
    )
    return f"Operators are written as letters: {letters}."


def build_parser() -> arg.ArgumentParser:
    parser = arg.ArgumentParser(
        prog="lettercalc",
        description="Evaluates a letter encoded arithmetic expression, "
        "left to right with no operator precedence.",
        epilog=_encoding_epilog(),
    )

    parser.add_argument("expression", nargs="?", default=None)
    parser.add_argument(
        "-v", "--verbose", dest="verbose", action="store_true", default=False
    )
    parser.add_argument(
        "--check",
        dest="check",
        action="store_true",
        default=False,
        help="run the built-in example expressions and exit",
    )
    return parser


def read_expression(argument: str | None, stdin: t.TextIO) -> str:
    """Pick the expression to evaluate.

    A non-blank argument wins. Otherwise prompt and read a single line, which
    is passed on with its internal whitespace.

    Raises:
        EOFError: If standard input is closed before a line is read.

    """
    if argument is not None and (argument := argument.strip()):
        # Double quoted with escapes, e.g: "3\ta 2".
        print(f"Your equation: {json.dumps(argument, ensure_ascii=False)}")
        return argument

    print("Write your equation:")
    line = stdin.readline()
    if not line:
        raise EOFError("No equation given")

    return line.rstrip("\r\n")


def main(argv: t.Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.check:
        failure_count = run_cases(CASES)
        if failure_count:
            logger.error("%d example(s) failed", failure_count)
            return 1
        return 0

    try:
        expression = read_expression(args.expression, sys.stdin)
    except EOFError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print("=== Computing... ====")
    try:
        result = evaluate(expression)
    except EvalError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: expression nested too deeply", file=sys.stderr)
        return 1

    print(f"Result came out to be: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
