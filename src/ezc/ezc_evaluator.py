"""
Tree-walking evaluator for EZC syntax trees.

The evaluator reduces an expression tree to a single Int32 value. It produces no
diagnostics: callers must only evaluate trees whose ``diagnostics`` are empty.

Arithmetic wraps around on Int32 overflow and ``/`` truncates toward zero.

Raises:
    EvaluationError: Division by zero, or a NUMBER token with no value (an
        out-of-range literal that was already reported as a diagnostic).
    InternalCompilerError: A node or operator the grammar cannot produce.
"""

from __future__ import annotations

import logging

from ezc.ezc_constants import INT32_MAX, INT32_MIN, SyntaxKind
from ezc.ezc_syntax import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    NumberExpressionSyntax,
    ParenthesizedExpressionSyntax,
)

logger = logging.getLogger(__name__)


class EvaluationError(ArithmeticError):
    """Raised when a well-formed tree cannot be reduced to an integer."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class InternalCompilerError(AssertionError):
    """Raised when the parser produced a tree shape the evaluator does not know."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Internal compiler error: {message}")


def wrap_int32(value: int) -> int:
    return (value - INT32_MIN) % 2**32 + INT32_MIN


def truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


class Evaluator:
    def __init__(self, root: ExpressionSyntax) -> None:
        self.root = root

    def evaluate(self) -> int:
        result = self.evaluate_expression(self.root)
        logger.debug("evaluated %s to %d", self.root.kind, result)
        return result

    def evaluate_expression(self, node: ExpressionSyntax) -> int:
        """Reduces ``node`` post-order using an explicit stack."""
        values: list[int] = []
        # (node, operands already evaluated)
        stack: list[tuple[ExpressionSyntax, bool]] = [(node, False)]

        while stack:
            current, ready = stack.pop()

            if isinstance(current, NumberExpressionSyntax):
                token = current.number_token
                if token.value is None:
                    raise EvaluationError(
                        f"Number at position {token.position} has no value",
                        token.position,
                    )
                values.append(token.value)
            elif isinstance(current, BinaryExpressionSyntax):
                if ready:
                    right = values.pop()
                    left = values.pop()
                    values.append(self.apply_operator(current, left, right))
                else:
                    stack.append((current, True))
                    stack.append((current.right, False))
                    stack.append((current.left, False))
            elif isinstance(current, ParenthesizedExpressionSyntax):
                stack.append((current.expression, False))
            else:
                raise InternalCompilerError(
                    f"Unexpected node {getattr(current, 'kind', current)!r}."
                )

        return values.pop()

    def apply_operator(self, node: BinaryExpressionSyntax, left: int, right: int) -> int:
        op = node.operator_token.kind

        if op is SyntaxKind.PLUS:
            return wrap_int32(left + right)
        if op is SyntaxKind.MINUS:
            return wrap_int32(left - right)
        if op is SyntaxKind.STAR:
            return wrap_int32(left * right)
        if op is SyntaxKind.SLASH:
            if right == 0:
                raise EvaluationError("Division by zero", node.operator_token.position)
            return wrap_int32(truncating_divide(left, right))
        raise InternalCompilerError(f"Unexpected binary operator {op}.")


__all__ = ["EvaluationError", "Evaluator", "InternalCompilerError"]
