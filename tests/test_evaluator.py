from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ezc.ezc_constants import SyntaxKind
from ezc.ezc_evaluator import (
    EvaluationError,
    Evaluator,
    InternalCompilerError,
    truncating_divide,
    wrap_int32,
)
from ezc.ezc_lexer import Token
from ezc.ezc_parser import Parser
from ezc.ezc_syntax import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    NumberExpressionSyntax,
    ParenthesizedExpressionSyntax,
)


def evaluate(source: str) -> int:
    tree = Parser(source).parse()
    assert tree.diagnostics == ()
    return Evaluator(tree.root).evaluate()


def number(value: int) -> NumberExpressionSyntax:
    return NumberExpressionSyntax(Token(SyntaxKind.NUMBER, 0, str(value), value))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("7", 7),
        ("1 + 2 * 3", 7),
        ("(1 + 2) * 3", 9),
        ("10 - 2 - 3", 5),
        ("100 / 10 / 5", 2),
        ("1 + 2 * (3 - 4)", -1),
        ("7 / 2", 3),
        ("(0 - 7) / 2", -3),
        ("7 / (0 - 2)", -3),
        ("((((42))))", 42),
    ],
)
def test_evaluate(source: str, expected: int) -> None:
    assert evaluate(source) == expected


def test_int32_wraparound() -> None:
    assert evaluate("2147483647 + 1") == -2147483648
    assert evaluate("0 - 2147483647 - 2") == 2147483647
    assert evaluate("65536 * 65536") == 0


def test_division_by_zero() -> None:
    tree = Parser("1 / (2 - 2)").parse()
    with pytest.raises(EvaluationError, match="Division by zero") as exc:
        Evaluator(tree.root).evaluate()
    assert exc.value.position == 2


def test_missing_number_value_is_an_evaluation_error() -> None:
    tree = Parser("99999999999 + 1").parse()
    assert tree.diagnostics
    with pytest.raises(EvaluationError):
        Evaluator(tree.root).evaluate()


def test_unknown_operator_is_internal_error() -> None:
    node = BinaryExpressionSyntax(number(1), Token(SyntaxKind.OPEN_PAREN, 1, "("), number(2))
    with pytest.raises(InternalCompilerError, match="Unexpected binary operator OpenParen"):
        Evaluator(node).evaluate()


def test_unknown_node_is_internal_error() -> None:
    @dataclass(frozen=True)
    class Bogus:
        kind: SyntaxKind = SyntaxKind.NUMBER

    with pytest.raises(InternalCompilerError):
        Evaluator(Bogus()).evaluate()  # type: ignore[arg-type]


def test_internal_error_is_not_an_evaluation_error() -> None:
    assert not issubclass(InternalCompilerError, EvaluationError)
    assert issubclass(InternalCompilerError, AssertionError)


def test_wrap_int32() -> None:
    assert wrap_int32(0) == 0
    assert wrap_int32(2**31) == -(2**31)
    assert wrap_int32(-(2**31) - 1) == 2**31 - 1


@given(
    st.integers(min_value=-(2**31), max_value=2**31 - 1),
    st.integers(min_value=-(2**31), max_value=2**31 - 1).filter(lambda n: n != 0),
)  # type: ignore[misc]
def test_truncating_divide_rounds_toward_zero(left: int, right: int) -> None:
    quotient = truncating_divide(left, right)
    assert abs(quotient * right) <= abs(left)
    remainder = left - quotient * right
    assert remainder == 0 or (remainder > 0) == (left > 0)


@given(
    st.integers(min_value=0, max_value=1000),
    st.integers(min_value=0, max_value=1000),
    st.integers(min_value=1, max_value=1000),
)  # type: ignore[misc]
def test_evaluate_matches_python_for_small_operands(a: int, b: int, c: int) -> None:
    assert evaluate(f"{a} + {b} * {c}") == a + b * c
    assert evaluate(f"({a} - {b}) * {c}") == (a - b) * c
    assert evaluate(f"{a} - {b} - {c}") == a - b - c
    assert evaluate(f"{a} * {b} / {c}") == (a * b) // c


def test_long_flat_sum() -> None:
    assert evaluate("1" + " + 1" * 1500) == 1501
    assert evaluate("3000" + " - 2" * 1500) == 0


def test_deeply_parenthesized_tree() -> None:
    node: ExpressionSyntax = number(9)
    for _ in range(5000):
        node = ParenthesizedExpressionSyntax(
            Token(SyntaxKind.OPEN_PAREN, 0, "("), node, Token(SyntaxKind.CLOSE_PAREN, 0, ")")
        )
    assert Evaluator(node).evaluate() == 9


def test_operands_are_evaluated_left_to_right() -> None:
    assert evaluate("100 / 5 / 2 - 3 * 2") == 4
