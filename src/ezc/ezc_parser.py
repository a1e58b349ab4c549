"""
EZC Expression Parser

Parses a line of EZC source into a ``SyntaxTree``.

The parser owns its lexer: the constructor tokenizes the whole input up front,
dropping WHITESPACE and INVALID tokens, and keeps the lexer's diagnostics as the
prefix of its own.

Grammar
-------
    expression → term
    term       → factor ( ("+" | "-") factor )*
    factor     → primary ( ("*" | "/") primary )*
    primary    → NUMBER
               | "(" expression ")"

Both binary levels are left-associative: ``a - b - c`` parses as ``(a - b) - c``.
Parenthesized groups always produce a ``ParenthesizedExpressionSyntax`` node.

Parser Behavior
---------------
- Never raises on bad input. A mismatched token is reported as a diagnostic and
  replaced by a synthesized token of the expected kind, at the current position,
  with empty text and no value. The cursor is not advanced, so parsing continues
  and later mismatches are still reported.
- Lookahead past the end of the token buffer always yields the END_OF_FILE token.
- ``parse()`` may be called repeatedly; every call starts from the same token
  buffer and returns an equal tree.
"""

from __future__ import annotations

import logging

from ezc.ezc_constants import (
    FACTOR_OPERATORS,
    TERM_OPERATORS,
    TRIVIA_KINDS,
    SyntaxKind,
)
from ezc.ezc_lexer import Lexer, Token
from ezc.ezc_syntax import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    NumberExpressionSyntax,
    ParenthesizedExpressionSyntax,
    SyntaxTree,
)

logger = logging.getLogger(__name__)


class Parser:
    """
    EZC Parser Class

    Attributes
    ----------
    tokens : tuple[Token, ...]
        The retained token stream; always ends with exactly one END_OF_FILE token.
    position : int
        Current index into the token stream.

    Methods
    -------
    parse() -> SyntaxTree
        Parse one term followed by END_OF_FILE.
    parse_expression() -> ExpressionSyntax
    parse_term() -> ExpressionSyntax
    parse_factor() -> ExpressionSyntax
    parse_primary() -> ExpressionSyntax
    """

    def __init__(self, text: str) -> None:
        lexer = Lexer(text)
        self.tokens: tuple[Token, ...] = tuple(
            tok for tok in lexer.tokens() if tok.kind not in TRIVIA_KINDS
        )
        self._lexer_diagnostics: tuple[str, ...] = lexer.diagnostics
        self._diagnostics: list[str] = list(self._lexer_diagnostics)
        self.position: int = 0

    @property
    def diagnostics(self) -> tuple[str, ...]:
        return tuple(self._diagnostics)

    def peek(self, offset: int = 0) -> Token:
        index = self.position + offset
        if index >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[index]

    def current(self) -> Token:
        return self.peek(0)

    def next_token(self) -> Token:
        tok = self.current()
        self.position += 1
        return tok

    def match(self, kind: SyntaxKind) -> Token:
        tok = self.current()
        if tok.kind is kind:
            return self.next_token()
        self._diagnostics.append(f"ERROR: Unexpected token<{tok.kind}>, expected <{kind}>")
        return Token(kind, tok.position)

    def parse(self) -> SyntaxTree:
        """Parse the whole input and return a new SyntaxTree."""
        self.position = 0
        self._diagnostics = list(self._lexer_diagnostics)

        expression = self.parse_term()
        end_of_file_token = self.match(SyntaxKind.END_OF_FILE)
        logger.debug(
            "parsed %d token(s) with %d diagnostic(s)",
            len(self.tokens),
            len(self._diagnostics),
        )
        return SyntaxTree(self.diagnostics, expression, end_of_file_token)

    def parse_expression(self) -> ExpressionSyntax:
        return self.parse_term()

    def parse_term(self) -> ExpressionSyntax:
        left = self.parse_factor()
        while self.current().kind in TERM_OPERATORS:
            operator_token = self.next_token()
            right = self.parse_factor()
            left = BinaryExpressionSyntax(left, operator_token, right)
        return left

    def parse_factor(self) -> ExpressionSyntax:
        left = self.parse_primary()
        while self.current().kind in FACTOR_OPERATORS:
            operator_token = self.next_token()
            right = self.parse_primary()
            left = BinaryExpressionSyntax(left, operator_token, right)
        return left

    def parse_primary(self) -> ExpressionSyntax:
        if self.current().kind is SyntaxKind.OPEN_PAREN:
            open_paren = self.next_token()
            expression = self.parse_expression()
            close_paren = self.match(SyntaxKind.CLOSE_PAREN)
            return ParenthesizedExpressionSyntax(open_paren, expression, close_paren)

        number_token = self.match(SyntaxKind.NUMBER)
        return NumberExpressionSyntax(number_token)


__all__ = ["Parser"]
