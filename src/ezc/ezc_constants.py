"""
Shared constants for the EZC expression compiler.

Exports:
    - SyntaxKind: Kind tag carried by every token and expression node.
    - token_hashmap: Single-character operator lookup used by the lexer.
    - BINARY_OPERATORS: Token kinds allowed as a binary operator.
    - TERM_OPERATORS / FACTOR_OPERATORS: Operators grouped by precedence level.
    - INT32_MIN / INT32_MAX: Bounds of the integer domain.
"""

from enum import Enum


class SyntaxKind(str, Enum):
    """Kind tag for tokens and expression nodes.

    The value of each member is the name used in diagnostics and tree dumps.
    """

    # Tokens
    NUMBER = "Number"
    WHITESPACE = "Whitespace"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    INVALID = "Invalid"
    END_OF_FILE = "EndOfFile"

    # Expressions
    NUMBER_EXPRESSION = "NumberExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"

    def __str__(self) -> str:
        return self.value


token_hashmap: dict[str, SyntaxKind] = {
    "+": SyntaxKind.PLUS,
    "-": SyntaxKind.MINUS,
    "*": SyntaxKind.STAR,
    "/": SyntaxKind.SLASH,
    "(": SyntaxKind.OPEN_PAREN,
    ")": SyntaxKind.CLOSE_PAREN,
}

TERM_OPERATORS: frozenset[SyntaxKind] = frozenset({SyntaxKind.PLUS, SyntaxKind.MINUS})
FACTOR_OPERATORS: frozenset[SyntaxKind] = frozenset({SyntaxKind.STAR, SyntaxKind.SLASH})
BINARY_OPERATORS: frozenset[SyntaxKind] = TERM_OPERATORS | FACTOR_OPERATORS

# Parser drops these before building the tree
TRIVIA_KINDS: frozenset[SyntaxKind] = frozenset(
    {SyntaxKind.WHITESPACE, SyntaxKind.INVALID}
)

EOF_TEXT = "\0"

INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

__all__ = [
    "BINARY_OPERATORS",
    "EOF_TEXT",
    "FACTOR_OPERATORS",
    "INFORMATION_SEPARATORS",
    "INT32_MAX",
    "INT32_MIN",
    "SyntaxKind",
    "TERM_OPERATORS",
    "TRIVIA_KINDS",
    "token_hashmap",
]
