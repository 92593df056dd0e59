"""Errors raised while evaluating an expression.

Every error carries the position (0-based character index into the top level
expression) where it was detected, when one is known. Nested groups share the
same cursor as their parent, so positions are always absolute.
"""

import typing as t


class EvalError(ValueError):
    """Base class for every evaluation failure.

    Args:
        message: Human-readable description of the failure.
        position: Index of the offending character, if known.

    """

    def __init__(self, message: str, /, position: int | None = None) -> None:
        self.position: t.Final = position
        if position is not None:
            message = f"{message} at index: {position}"
        super().__init__(message)


class InvalidCharacterError(EvalError):
    """A character outside of the token encoding was found."""

    def __init__(self, char: str, /, position: int | None = None) -> None:
        self.char: t.Final = char
        super().__init__(f"Unexpected character: {char!r}", position)


class UnclosedParenthesisError(EvalError):
    """An open parenthesis was never matched before the end of input."""

    def __init__(self, position: int | None = None) -> None:
        super().__init__("Unclosed parenthesis", position)


class MalformedExpressionError(EvalError):
    """Tokens are valid on their own but not in the order given."""

    def __init__(self, reason: str, /, position: int | None = None) -> None:
        self.reason: t.Final = reason
        super().__init__(f"Malformed expression: {reason}", position)


# Also a ZeroDivisionError so callers handling plain arithmetic errors catch it.
class DivisionByZeroError(EvalError, ZeroDivisionError):
    """The right hand operand of a division evaluated to zero."""

    def __init__(self, position: int | None = None) -> None:
        super().__init__("Division by zero", position)
