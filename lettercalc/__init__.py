"""Left to right evaluation of letter encoded arithmetic expressions."""

from lettercalc.errors import (
    DivisionByZeroError,
    EvalError,
    InvalidCharacterError,
    MalformedExpressionError,
    UnclosedParenthesisError,
)
from lettercalc.evaluator import Number, combine_digits, evaluate
from lettercalc.tokens import classify, tokenize

__all__ = [
    "DivisionByZeroError",
    "EvalError",
    "InvalidCharacterError",
    "MalformedExpressionError",
    "Number",
    "UnclosedParenthesisError",
    "classify",
    "combine_digits",
    "evaluate",
    "tokenize",
]
