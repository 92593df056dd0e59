"""Test the left to right evaluator."""

import logging

import pytest

from lettercalc.errors import (
    DivisionByZeroError,
    EvalError,
    InvalidCharacterError,
    MalformedExpressionError,
    UnclosedParenthesisError,
)
from lettercalc.evaluator import (
    Cursor,
    EvaluatorState,
    apply_operator,
    combine_digits,
    evaluate,
)


@pytest.mark.parametrize("digits,expected", [
    ([], 0),
    ([9], 9),
    ([1, 2], 12),
    ([9, 8, 6, 6], 9866),
    ([0, 0, 7], 7),
])
def test_combine_digits(digits, expected):
    assert combine_digits(digits) == expected


def test_empty_expression():
    assert evaluate("") == 0
    assert evaluate("   ") == 0


@pytest.mark.parametrize("number", [0, 7, 42, 9866, 10**30])
def test_single_literal(number):
    assert evaluate(str(number)) == number


@pytest.mark.parametrize("expression,expected", [
    ("3 a 2 c 4", 20),
    ("32 a 2 d 2", 17),
    ("500 a 10 b 66 c 32", 14208),
    ("3 a e 4 c 66 f b 32", 235),
    ("3 c 4 d 2 a e e 2 a 4 c 41 f c 4 f", 990),
    ("b 10 a 50", 40),
    ("c 5", 0),
    ("d 5", 0),
    ("10 a 10 b 10 c 10 d 10", 10),
])
def test_evaluate_valid(expression, expected):
    assert evaluate(expression) == expected


@pytest.mark.parametrize("expression", [
    "3 a e 4 c 66 f b 32",
    "3 c 4 d 2 a e e 2 a 4 c 41 f c 4 f",
    "500 a 10 b 66 c 32",
])
def test_whitespace_is_insignificant(expression):
    expected = evaluate(expression)
    assert evaluate(expression.replace(" ", "")) == expected
    assert evaluate(expression.replace(" ", "\t\n ")) == expected
    assert evaluate(f"  {expression}  ") == expected


@pytest.mark.parametrize("expression,expected", [
    ("7 d 2", 3),
    ("b 7 d 2", -3),
    ("7 d e b 2 f", -3),
    ("b 7 d e b 2 f", 3),
])
def test_division_truncates_toward_zero(expression, expected):
    assert evaluate(expression) == expected


def test_negative_group_is_kept_as_a_number():
    """A negative group is used by value, not re-read as digits."""
    assert evaluate("e 1 b 5 f c 2") == -8
    assert evaluate("10 a e b 3 f") == 7


def test_stray_close_parenthesis_is_ignored():
    assert evaluate("1 a 2 f") == 3
    assert evaluate("f 5") == 5


def test_nested_groups_resume_after_close():
    assert evaluate("e 1 a e 2 c 3 f f c 2 a 1") == 15


@pytest.mark.parametrize("expression,position", [
    ("1 d 0", 2),
    ("8 a 2 d e 3 b 3 f", 6),
    ("e 1 d 0 f a 2", 4),
])
def test_division_by_zero(expression, position):
    with pytest.raises(DivisionByZeroError) as info:
        evaluate(expression)
    assert info.value.position == position
    assert isinstance(info.value, ZeroDivisionError)


@pytest.mark.parametrize("expression,position", [
    ("e", 0),
    ("e 4", 0),
    ("1 a e e 4 f", 4),
    ("e 1 f a e 2", 8),
    # Unclosed wins over errors inside the group.
    ("e 1 d 0 a 2", 0),
    ("e 1 a b", 0),
    ("3 a e 2 e 1 f", 4),
    ("e 1 x", 0),
])
def test_unclosed_parenthesis(expression, position):
    with pytest.raises(UnclosedParenthesisError) as info:
        evaluate(expression)
    assert info.value.position == position


@pytest.mark.parametrize("expression,position", [
    ("1 + 2", 2),
    ("1 a g", 4),
    ("e 1 a z f", 6),
])
def test_invalid_character(expression, position):
    with pytest.raises(InvalidCharacterError) as info:
        evaluate(expression)
    assert info.value.position == position


@pytest.mark.parametrize("expression,position", [
    ("2 e 1 f", 2),
    ("e 1 f 2", 6),
    ("e 1 f e 2 f", 6),
    ("1 a", 2),
    ("1 a b 2", 2),
    ("e 1 c f", 4),
])
def test_malformed_expression(expression, position):
    with pytest.raises(MalformedExpressionError) as info:
        evaluate(expression)
    assert info.value.position == position


def test_errors_share_a_base():
    with pytest.raises(EvalError):
        evaluate("e 1 d 0 f")
    with pytest.raises(ValueError):
        evaluate("x")


def test_apply_operator():
    assert apply_operator("a", 3, 2) == 5
    assert apply_operator("b", 3, 2) == 1
    assert apply_operator("c", 3, 2) == 6
    assert apply_operator("d", 3, 2) == 1
    with pytest.raises(DivisionByZeroError):
        apply_operator("d", 3, 0, 9)


def test_state_applies_previous_operator():
    state = EvaluatorState()
    state.push_digit(3, 0)
    state.apply()
    state.set_operator("c", 1)
    assert state.result == 3
    assert state.pending_operator == "c"
    assert not state.has_operand


def test_cursor_find_close_does_not_advance():
    cursor = Cursor("e 1 e 2 f f a 3")
    next(cursor)
    assert cursor.find_close() == 10
    assert cursor.position == 1

    cursor = Cursor("e e 2 f")
    next(cursor)
    assert cursor.find_close() is None


def test_cursor_is_shared():
    cursor = Cursor("abc")
    assert next(cursor) == (0, "a")
    assert list(cursor) == [(1, "b"), (2, "c")]
    assert cursor.position == 3


def test_debug_log_shows_operator_symbols(caplog):
    with caplog.at_level(logging.DEBUG, logger="lettercalc.evaluator"):
        assert evaluate("1 a 2 f") == 3
    assert "Read + at index 2" in caplog.text
    assert "Ignoring ) at index 6" in caplog.text
