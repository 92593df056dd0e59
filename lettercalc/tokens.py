"""Token encoding and per character classification.

Arithmetic symbols are written as letters so that an expression can be typed
with nothing but lowercase letters, digits and whitespace:

    a -> +    b -> -    c -> *    d -> /    e -> (    f -> )

For example ``"3 a e 4 c 66 f b 32"`` reads as ``3 + (4 * 66) - 32``.
"""

import dataclasses
import typing as t

from lettercalc.errors import InvalidCharacterError

ADDITION: t.Final = "a"
SUBTRACTION: t.Final = "b"
MULTIPLICATION: t.Final = "c"
DIVISION: t.Final = "d"
OPEN_PAREN: t.Final = "e"
CLOSE_PAREN: t.Final = "f"

RADIX: t.Final = 10

# Define Operator as a Literal for strict type checking on the letters.
Operator = t.Literal["a", "b", "c", "d", "e", "f"]

# Only these four take part in the fold, the parentheses drive recursion.
ArithmeticOperator = t.Literal["a", "b", "c", "d"]

ENCODING: t.Final[t.Mapping[Operator, str]] = {
    ADDITION: "+",
    SUBTRACTION: "-",
    MULTIPLICATION: "*",
    DIVISION: "/",
    OPEN_PAREN: "(",
    CLOSE_PAREN: ")",
}


def is_operator(test_char: str, /) -> t.TypeGuard[Operator]:
    """Type-safe helper to check if a character is one of the operator letters.

    Args:
        test_char: The character that should be checked as an operator.

    Returns:
        bool: True, if the test_char is an operator letter.

    """
    return test_char in ENCODING


def is_arithmetic(operator: Operator, /) -> t.TypeGuard[ArithmeticOperator]:
    """Return True for the four operators that are folded into a result."""
    return operator not in (OPEN_PAREN, CLOSE_PAREN)


@dataclasses.dataclass(frozen=True, slots=True)
class Digit:
    """A single decimal digit, ``value`` is in ``[0, 9]``."""

    value: int


@dataclasses.dataclass(frozen=True, slots=True)
class Symbol:
    """One of the six operator letters."""

    operator: Operator

    def __str__(self) -> str:
        return ENCODING[self.operator]


@dataclasses.dataclass(frozen=True, slots=True)
class Whitespace:
    """Any whitespace character, carries no data."""


Token = Digit | Symbol | Whitespace


def classify(test_char: str, /, position: int | None = None) -> Token:
    """Classify one character of an expression.

    Args:
        test_char: The character to classify.
        position: Index of the character in the expression, only used to
            report where an invalid character was found.

    Returns:
        Token: The classification of the character.

    Raises:
        InvalidCharacterError: If the character is not a digit, an operator
            letter or whitespace.

    """
    if len(test_char) != 1:
        raise InvalidCharacterError(test_char, position)

    if "0" <= test_char <= "9":
        # Direct comparison, isdigit() would also accept superscripts and
        # other scripts' digits.
        return Digit(int(test_char, RADIX))

    if is_operator(test_char):
        return Symbol(test_char)

    if test_char.isspace():
        return Whitespace()

    raise InvalidCharacterError(test_char, position)


def tokenize(expression: str, /) -> t.Iterator[Token]:
    """Lazily classify every character of an expression.

    Public helper for callers that want the token stream, the evaluator
    classifies characters itself as it walks its shared cursor.
    """
    for position, test_char in enumerate(expression):
        yield classify(test_char, position)
