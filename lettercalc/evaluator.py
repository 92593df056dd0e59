"""Evaluator.

A left to right evaluator for letter encoded expressions, see
``lettercalc.tokens`` for the encoding.

1) Open a fresh state. A state represents a block of the expression that is
either inside parenthesis, or, the whole expression. It starts with a result
of 0 and a pending addition, so the first number is added to 0.

2) Walk the characters through a cursor that is shared with nested groups.
    - If the character is whitespace, skip it.
    - If the character is a digit, append it to the digit buffer.
    - If the character is an arithmetic operator, combine the digit buffer
    into a number and apply the *previous* pending operator to the result.
    The operator just read becomes the pending one.
    - If the character opens a parenthesis, evaluate the group with a fresh
    state on the same cursor and keep its value as the operand.
    - If the character closes a parenthesis, finish the current group. At the
    top level this is ignored.
    - Else the character is invalid.

3) At the end of the input apply the pending operator one final time and
return the result.

There is no operator precedence: ``3 a 2 c 4`` is ``(3 + 2) * 4``.
"""

import dataclasses
import logging
import typing as t

from lettercalc import tokens
from lettercalc.errors import (
    DivisionByZeroError,
    MalformedExpressionError,
    UnclosedParenthesisError,
)

logger = logging.getLogger(__name__)

Number = int


def combine_digits(digits: t.Sequence[int], /) -> Number:
    """Convert a sequence of digits to a number.

    Example:
        >>> combine_digits([9, 8, 6, 6])
        9866
        >>> combine_digits([])
        0

    Args:
        digits: Decimal digits, most significant first.

    Returns:
        Number: The value of the digits in base 10.

    """
    result: Number = 0
    for place, digit in enumerate(reversed(digits)):
        result += digit * tokens.RADIX**place
    return result


def _truncating_division(dividend: Number, divisor: Number, /) -> Number:
    # Round toward zero like a fixed width integer division, // floors.
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


# Define a map for operator execution.
operator_map: t.Final[
    dict[tokens.ArithmeticOperator, t.Callable[[Number, Number], Number]]
] = {
    tokens.ADDITION: lambda a, b: a + b,
    tokens.SUBTRACTION: lambda a, b: a - b,
    tokens.MULTIPLICATION: lambda a, b: a * b,
    tokens.DIVISION: _truncating_division,
}


def apply_operator(
    operator: tokens.ArithmeticOperator,
    result: Number,
    operand: Number,
    /,
    position: int | None = None,
) -> Number:
    """Apply one operator of the fold.

    Args:
        operator: The operator letter to apply.
        result: The accumulated value, left hand side.
        operand: The value the operator applies with, right hand side.
        position: Index of the operator, reported on failure.

    Returns:
        Number: The new accumulated value.

    Raises:
        DivisionByZeroError: If dividing by an operand of 0.

    """
    if operator == tokens.DIVISION and operand == 0:
        raise DivisionByZeroError(position)

    return operator_map[operator](result, operand)


class Cursor:
    """Position in an expression, shared by a group and its nested groups.

    Iterating yields ``(position, character)`` pairs and advances the shared
    position, so when a nested group returns, its parent resumes right after
    the matching close parenthesis.
    """

    __slots__ = ("_expression", "_index")

    def __init__(self, expression: str, /) -> None:
        """Start at the first character of the expression."""
        self._expression: t.Final = expression
        self._index = 0

    @property
    def position(self) -> int:
        """Index of the next character to be read."""
        return self._index

    def find_close(self) -> int | None:
        """Find the close parenthesis matching an open one just read.

        Scans forward from the current position without advancing it,
        counting nested parenthesis.

        Returns:
            int | None: Index of the matching close parenthesis, or None if the
            expression ends first.

        """
        depth = 1
        for index in range(self._index, len(self._expression)):
            test_char = self._expression[index]
            if test_char == tokens.OPEN_PAREN:
                depth += 1
            elif test_char == tokens.CLOSE_PAREN:
                depth -= 1
                if depth == 0:
                    return index
        return None

    def __iter__(self) -> "Cursor":
        return self

    def __next__(self) -> tuple[int, str]:
        if self._index >= len(self._expression):
            raise StopIteration

        position = self._index
        self._index += 1
        return position, self._expression[position]


@dataclasses.dataclass(slots=True)
class EvaluatorState:
    """Track the fold of one group.

    Args:
        result: The accumulated value of this group.
        pending_operator: The operator applied when the next operator, or the
            end of the group, is reached.
        operator_position: Index of the pending operator, None while the
            pending operator is the implicit leading addition.

    Attributes:
        digit_buffer: Digits read since the last operator.
        group_value: Value of a parenthesized group read since the last
            operator. Kept as a number so negative groups survive.

    """

    result: Number = 0
    pending_operator: tokens.ArithmeticOperator = tokens.ADDITION
    operator_position: int | None = None

    digit_buffer: list[int] = dataclasses.field(default_factory=list)
    group_value: Number | None = None

    @property
    def has_operand(self) -> bool:
        """True if a number or a group was read since the last operator."""
        return bool(self.digit_buffer) or self.group_value is not None

    def push_digit(self, digit: int, /, position: int) -> None:
        """Append a digit to the number being read."""
        if self.group_value is not None:
            # e.g: e1f2
            raise MalformedExpressionError(
                "digit directly after a parenthesized group",
                position,
            )

        self.digit_buffer.append(digit)

    def push_group(self, value: Number, /) -> None:
        """Use the value of a parenthesized group as the operand."""
        self.group_value = value

    def take_operand(self) -> Number:
        """Return the buffered operand and clear the buffers.

        An empty buffer combines to 0.
        """
        if self.group_value is not None:
            operand = self.group_value
        else:
            operand = combine_digits(self.digit_buffer)

        self.digit_buffer.clear()
        self.group_value = None
        return operand

    def apply(self) -> None:
        """Fold the buffered operand into the result."""
        if self.operator_position is not None and not self.has_operand:
            # A written operator needs something to apply to. e.g: 1 a, 1 a b 2
            # The implicit leading addition does not, so "b 1" is 0 - 1.
            raise MalformedExpressionError(
                f"operator {tokens.ENCODING[self.pending_operator]!r} has no "
                "operand",
                self.operator_position,
            )

        operand = self.take_operand()
        result = apply_operator(
            self.pending_operator,
            self.result,
            operand,
            self.operator_position,
        )
        logger.debug(
            "%d %s %d = %d",
            self.result,
            tokens.ENCODING[self.pending_operator],
            operand,
            result,
        )
        self.result = result

    def set_operator(
        self,
        operator: tokens.ArithmeticOperator,
        /,
        position: int,
    ) -> None:
        """Make an operator the pending one."""
        self.pending_operator = operator
        self.operator_position = position


def evaluate(expression: str, /) -> Number:
    """Evaluate a letter encoded expression.

    Args:
        expression: The expression, may be empty. Whitespace is ignored.

    Returns:
        Number: The result, 0 for an empty expression.

    Raises:
        InvalidCharacterError: On a character outside the encoding.
        UnclosedParenthesisError: If a group is never closed.
        MalformedExpressionError: If operands and operators are out of order.
        DivisionByZeroError: If dividing by 0.

    """
    result: t.Final = _evaluate_group(Cursor(expression), opened_at=None)
    logger.debug("Evaluated %r to %d", expression, result)
    return result


def _evaluate_group(cursor: Cursor, /, opened_at: int | None) -> Number:
    """Evaluate characters from the cursor until the group ends.

    Args:
        cursor: Shared position in the expression.
        opened_at: Index of the open parenthesis of this group, or None for
            the whole expression. A group is only entered once its matching
            close parenthesis is known to exist.

    Returns:
        Number: The value of the group.

    """
    state: t.Final = EvaluatorState()

    for position, test_char in cursor:
        token = tokens.classify(test_char, position)

        if isinstance(token, tokens.Whitespace):
            continue

        if isinstance(token, tokens.Digit):
            state.push_digit(token.value, position)
            continue

        operator = token.operator

        if operator == tokens.OPEN_PAREN:
            if state.has_operand:
                # Same rule that forbids two numbers in a row. e.g: 2e1f
                raise MalformedExpressionError(
                    "parenthesis directly after an operand",
                    position,
                )

            # The group must be closed before anything inside it is evaluated.
            # e.g: e 1 d 0 is unclosed, not a division by 0.
            if cursor.find_close() is None:
                raise UnclosedParenthesisError(position)

            logger.debug("Entering group at index %d", position)
            state.push_group(_evaluate_group(cursor, opened_at=position))
        elif operator == tokens.CLOSE_PAREN:
            if opened_at is not None:
                logger.debug("Leaving group at index %d", position)
                break

            # Nothing to close, a stray close parenthesis is harmless.
            logger.debug("Ignoring %s at index %d", token, position)
        elif tokens.is_arithmetic(operator):
            logger.debug("Read %s at index %d", token, position)
            state.apply()
            state.set_operator(operator, position)

    state.apply()
    return state.result
