"""Described example expressions and a runner to check them.

The table doubles as documentation of the encoding: each case reads as
``expression -> expected`` where expected is either the result or the error
type the expression fails with.
"""

import dataclasses
import typing as t

from lettercalc.errors import (
    DivisionByZeroError,
    EvalError,
    InvalidCharacterError,
    MalformedExpressionError,
    UnclosedParenthesisError,
)
from lettercalc.evaluator import Number, evaluate

Expected = Number | type[EvalError]


@dataclasses.dataclass(frozen=True, slots=True)
class Case:
    """Defines a single example scenario.

    Args:
        description: A brief summary of what this case shows.
        expected: The expected result, or the error type expected.
        expression: An expression string to evaluate.

    """

    description: str
    expected: Expected
    expression: str

    def outcome(self) -> Expected:
        """Evaluate the expression, returning the error type on failure."""
        try:
            return evaluate(self.expression)
        except EvalError as error:
            return type(error)


def run_cases(
    cases: t.Iterable[Case],
    /,
    write: t.Callable[[str], None] = print,
) -> int:
    """Run all cases, reporting one line per case.

    Returns:
        int: The number of failed cases.

    """
    failure_count: int = 0
    for case in cases:
        outcome = case.outcome()
        if outcome != case.expected:
            write(
                f"FAILED ({case.expression!r}): {case.description}. "
                f"({_describe(outcome)} != {_describe(case.expected)}).",
            )
            failure_count += 1
            continue

        write(f"PASSED ({case.expression!r}): {case.description}.")

    return failure_count


def _describe(expected: Expected, /) -> str:
    if isinstance(expected, type):
        return expected.__name__
    return str(expected)


CASES: t.Final[tuple[Case, ...]] = (
    # ------------- Basic Operations --------------------------------
    # Keyword form once, the rest read as (description, expected, expression).
    Case(description="Empty expression", expected=0, expression=""),
    Case(description="Single number", expected=9, expression="9"),
    Case(description="Zero surrounded by spaces", expected=0, expression=" 0 "),
    Case("Simple addition", 18, "9 a 9"),
    Case("Simple subtraction", 0, "9 b 9"),
    Case("Simple multiplication", 20, "5 c 4"),
    Case("Simple division", 10, "100 d 10"),
    # ----------- Left to right -------------------------------------
    Case("No precedence", 20, "3 a 2 c 4"),
    Case("Division after addition", 17, "32 a 2 d 2"),
    Case("Chained mixed operators", 14208, "500 a 10 b 66 c 32"),
    Case("Subtract then multiply", 0, "9 b 9 c 10"),
    Case("Every operator", 10, "10 a 10 b 10 c 10 d 10"),
    Case("Leading operator applies to zero", 40, "b 10 a 50"),
    Case("Division truncates toward zero", -3, "b 7 d 2"),
    # ----------- Multi-digit and whitespace ------------------------
    Case("Multi-digit numbers", 9866, "9866"),
    Case("No whitespace", 20, "3a2c4"),
    Case("Mixed whitespace", 20, "3\ta\n2  c 4"),
    Case("Leading zeros", 7, "007"),
    # ------------- Nesting -----------------------------------------
    Case("Parenthesis override left to right", 235, "3 a e 4 c 66 f b 32"),
    Case("Nested parenthesis", 990, "3 c 4 d 2 a e e 2 a 4 c 41 f c 4 f"),
    Case("Redundant parenthesis", 1, "eeeee1fffff"),
    Case("Empty parenthesis", 0, "ef"),
    Case("Negative group as an operand", -8, "e 1 b 5 f c 2"),
    Case("Stray close parenthesis is ignored", 3, "1 a 2 f"),
    # ----------- Errors --------------------------------------------
    Case("Division by zero", DivisionByZeroError, "1 d 0"),
    Case("Division by evaluated zero", DivisionByZeroError, "1 d e 2 b 2 f"),
    Case("Unclosed parenthesis", UnclosedParenthesisError, "e 4"),
    Case("Unclosed nested parenthesis", UnclosedParenthesisError, "e e 4 f"),
    Case(
        "Unclosed group hides a division by zero",
        UnclosedParenthesisError,
        "e 1 d 0 a 2",
    ),
    Case("Unclosed group hides an operator", UnclosedParenthesisError, "e 1 a b"),
    Case(
        "Unclosed group hides a misplaced parenthesis",
        UnclosedParenthesisError,
        "3 a e 2 e 1 f",
    ),
    Case("Symbol instead of letter", InvalidCharacterError, "1 + 2"),
    Case("Letter outside the encoding", InvalidCharacterError, "1 g 2"),
    Case("Superscript digit", InvalidCharacterError, "2²"),
    Case("Parenthesis after a number", MalformedExpressionError, "2 e 1 f"),
    Case("Digit after a group", MalformedExpressionError, "e 1 f 2"),
    Case("Two groups in a row", MalformedExpressionError, "e 1 f e 2 f"),
    Case("Expression ends with an operator", MalformedExpressionError, "1 a"),
    Case("Consecutive operators", MalformedExpressionError, "1 a b 2"),
    Case("Group ends with an operator", MalformedExpressionError, "e 1 c f"),
)
